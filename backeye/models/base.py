from sqlalchemy.orm import as_declarative
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer


@as_declarative()
class Base:
    __abstract__ = True  # Prevents creating a table for the base class

    # Identity column shared by every table
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)
