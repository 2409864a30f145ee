# backeye/core/config.py
"""Application configuration using Pydantic."""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    database_url: str
    jwt_secret_key: str
    jwt_algorithm: str = 'HS256'
    access_token_expire_minutes: int = 720

    app_version: str = '1.0.0'
    environment: str = 'development'
    log_level: str = 'info'
    allowed_origins: List[str] = ['*']

    generated_password_length: int = 8
    create_tables_on_startup: bool = False

    model_config = {
        'env_file': '.env',
        'extra': 'ignore'
    }

settings = Settings()
