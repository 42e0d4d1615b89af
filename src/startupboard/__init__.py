"""
Startupboard Backend
GraphQL API for the startup and company directory
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
