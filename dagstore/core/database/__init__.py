"""
Database layer for dagstore.

Structure:
- entities/: One SQLModel table class per table (dags, nodes, edges)
- repositories/: Async data access per table
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and DDL helpers
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "engine",
    "get_session",
    "init_db",
]
