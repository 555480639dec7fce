"""
Persistence module holding the in-memory record store.
"""

from .repositories import DataStore

__all__ = [
    "DataStore",
]
