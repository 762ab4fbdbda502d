"""
Database Module

Declarative base and async session management (SQLAlchemy + asyncpg).
"""

from appointment_scheduler.database.async_db import (
    create_async_database_engine,
    dispose_engine,
    get_async_database_url,
    get_async_db,
    get_async_db_context,
    get_session_factory,
)
from appointment_scheduler.database.base import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
    "create_async_database_engine",
    "dispose_engine",
    "get_async_database_url",
    "get_async_db",
    "get_async_db_context",
    "get_session_factory",
]
