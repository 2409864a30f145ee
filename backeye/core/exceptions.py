# backeye/core/exceptions.py
"""Custom exceptions for the BackEye API."""
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class BackEyeException(HTTPException):
    """Base exception for BackEye."""
    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class BadRequestError(BackEyeException):
    """Request input failed validation."""
    def __init__(self, message: str):
        super().__init__(status_code=400, detail=message)


class NotFoundError(BackEyeException):
    """Requested entity does not exist."""
    def __init__(self, message: str):
        super().__init__(status_code=404, detail=message)


class DatabaseError(BackEyeException):
    """Persistence operation failed."""
    def __init__(self, message: str):
        super().__init__(status_code=500, detail=message)


class HubError(BackEyeException):
    """Pushing to the dashboards failed."""
    def __init__(self, message: str):
        super().__init__(status_code=500, detail=message)


class AuthenticationError(BackEyeException):
    """Missing, malformed or expired bearer token."""
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(
            status_code=401,
            detail=message,
            headers={"WWW-Authenticate": "Bearer"}
        )


def bad_request(message: str) -> BadRequestError:
    logger.error(message)
    return BadRequestError(message)


def not_found(message: str) -> NotFoundError:
    logger.error(message)
    return NotFoundError(message)


def database_error(message: str) -> DatabaseError:
    logger.error(message)
    return DatabaseError(message)


def hub_error(message: str) -> HubError:
    return HubError(message)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions"""
    logger.error(f"Unexpected error: {str(exc)} - Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )
