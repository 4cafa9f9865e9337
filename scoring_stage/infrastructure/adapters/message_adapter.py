"""
Infrastructure Adapter - Messages

Message adapter: turns a queue payload into a record, scores it, and
builds the result payload published back to the broker. Record errors
become error payloads so the consumer can dead-letter or retry them.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

import structlog

from scoring_stage.application.scoring_stage import ScoringStage
from scoring_stage.domain.entities.errors import InvalidRecordError

logger = structlog.get_logger(__name__)


class InvalidMessageError(ValueError):
    """Raised when a payload does not carry a record object."""


class MessageScoringAdapter:
    """Score message payloads of the form {"id": ..., "record": {...}}."""

    def __init__(self, stage: ScoringStage) -> None:
        self._stage = stage

    @staticmethod
    def extract_record(payload: Mapping[str, Any]) -> Mapping[str, Any]:
        if not isinstance(payload, Mapping):
            raise InvalidMessageError("Message payload must be an object")
        record = payload.get("record")
        if not isinstance(record, Mapping):
            raise InvalidMessageError("Message payload must contain a 'record' object")
        return record

    def handle(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        message_id = payload.get("id") if isinstance(payload, Mapping) else None
        spec = self._stage.specification
        result: Dict[str, Any] = {
            "id": message_id,
            "model": {"name": spec.name, "version": spec.version},
        }

        try:
            prediction = self._stage.score(self.extract_record(payload))
        except InvalidRecordError as exc:
            logger.warning(
                "message.record_failed",
                message_id=message_id,
                code=exc.code,
                field=exc.field,
            )
            result.update(status="error", error=exc.to_dict())
            return result
        except InvalidMessageError as exc:
            logger.warning("message.invalid", message_id=message_id, error=str(exc))
            result.update(
                status="error",
                error={"code": "invalid_message", "message": str(exc), "field": None},
            )
            return result

        result.update(status="ok", prediction=prediction.to_dict())
        return result
