"""Celery tasks exposing the scoring stage to message producers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from celery import Celery, shared_task
from celery.result import AsyncResult

from scoring_stage.application.scoring_stage import ScoringStage
from scoring_stage.infrastructure.adapters.message_adapter import (
    MessageScoringAdapter,
)
from scoring_stage.infrastructure.services.celery_config import celery_app
from scoring_stage.infrastructure.services.tasks.base import CallbackTask, logger


def resolve_stage() -> ScoringStage:
    """Return the worker's stage from the composition root.

    The container's singleton provider loads the specification once per
    worker process; every task in that process shares it.
    """
    from scoring_stage.main.config import get_settings
    from scoring_stage.main.container import get_container, init_container

    try:
        container = get_container()
    except RuntimeError:
        logger.info("worker.container.init")
        container = init_container(get_settings())
    return container.scoring_stage()


@shared_task(bind=True, base=CallbackTask, name="score_message", max_retries=0)
def score_message(self, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Score one message payload and return the result payload."""
    return MessageScoringAdapter(resolve_stage()).handle(payload)


@shared_task(bind=True, base=CallbackTask, name="score_messages", max_retries=0)
def score_messages(self, payloads: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Score a micro-batch of payloads; each result is independent."""
    adapter = MessageScoringAdapter(resolve_stage())
    return [adapter.handle(payload) for payload in payloads]


def submit_record(
    record: Dict[str, Any],
    message_id: Optional[str] = None,
    app: Optional[Celery] = None,
) -> AsyncResult:
    """Publish a record to the scoring queue and return the pending result."""
    celery = app or celery_app
    return celery.send_task(
        "score_message",
        kwargs={"payload": {"id": message_id, "record": record}},
    )
