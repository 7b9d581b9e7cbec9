"""Core module for configuration and utilities."""

from streamora.core.config import settings
from streamora.core.store import RecordStore, get_store

__all__ = [
    "settings",
    "RecordStore",
    "get_store",
]
