"""Database models for Yomimono.

SQLAlchemy models for:
- Users
- Stories and their extracted vocabulary

All models use async SQLAlchemy; asyncpg for PostgreSQL in production.
"""

from .database import Base, close_db, create_all, get_engine, get_session, init_db
from .story import Story
from .user import User

__all__ = [
    # Database
    "Base",
    "init_db",
    "get_session",
    "get_engine",
    "close_db",
    "create_all",
    # Models
    "User",
    "Story",
]
