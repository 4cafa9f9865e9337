"""Adapters feeding the scoring stage from table rows and queue messages."""

from .message_adapter import InvalidMessageError, MessageScoringAdapter
from .table_adapter import frame_to_records, read_table, score_dataframe, write_table

__all__ = [
    "InvalidMessageError",
    "MessageScoringAdapter",
    "frame_to_records",
    "read_table",
    "score_dataframe",
    "write_table",
]
