"""
Services module exposing roster operations to the presentation layers.
"""

from .roster_service import RosterService, RecordResult, SAMPLE_RECORDS

__all__ = [
    "RosterService",
    "RecordResult",
    "SAMPLE_RECORDS",
]
