"""
SQLAlchemy declarative base and metadata.
Challenge: Single place for table definitions and migrations.
Design: Fixed constraint naming so Alembic autogenerate produces stable, droppable names.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all ORM models (regions, difficulties, walks, users)."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
