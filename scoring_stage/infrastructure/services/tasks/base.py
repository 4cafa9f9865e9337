"""Shared Celery infrastructure components."""

import structlog
from celery import Task

logger = structlog.get_logger(__name__)


class CallbackTask(Task):
    """Base task class that centralizes logging behaviour."""

    def on_success(self, retval, task_id, args, kwargs):
        status = retval.get("status") if isinstance(retval, dict) else None
        logger.info("task.succeeded", task_id=task_id, task=self.name, status=status)

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        logger.error(
            "task.failed",
            task_id=task_id,
            task=self.name,
            error=str(exc),
            traceback=einfo.traceback,
            exc_info=exc,
        )
