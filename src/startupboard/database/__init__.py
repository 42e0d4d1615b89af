"""
Database module for Startupboard backend
"""

from .client import DatabaseClient
from .connection import get_async_session, init_database

__all__ = ["DatabaseClient", "get_async_session", "init_database"]
