"""Celery task implementations for infrastructure services."""

from .base import CallbackTask, logger
from .scoring import resolve_stage, score_message, score_messages, submit_record

__all__ = [
    "CallbackTask",
    "logger",
    "resolve_stage",
    "score_message",
    "score_messages",
    "submit_record",
]
