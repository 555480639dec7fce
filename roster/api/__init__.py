"""
API module for the REST interface.
"""

from .rest_api import RosterRestAPI

__all__ = [
    "RosterRestAPI",
]
