"""
Infrastructure - Specification Loader

Reads a JSON model specification from bytes, text, a filesystem path or
an open file handle, and hands the decoded document to the domain parser.
No storage backend is assumed: callers holding the document in a bucket,
a database or a message fetch the bytes themselves.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import IO, Any, Union

import structlog

from scoring_stage.domain.entities.errors import (
    MalformedSpecificationError,
    SpecificationError,
)
from scoring_stage.domain.entities.specification import ModelSpecification
from scoring_stage.domain.services.specification_parser import parse_specification

logger = structlog.get_logger(__name__)

SpecificationSource = Union[bytes, bytearray, str, "os.PathLike[str]", IO[Any]]


def _read_source(source: SpecificationSource) -> Union[str, bytes]:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, os.PathLike):
        return Path(source).read_bytes()
    if isinstance(source, str):
        if source.lstrip().startswith("{"):
            return source
        return Path(source).read_bytes()
    if hasattr(source, "read"):
        return source.read()
    raise TypeError(
        f"Unsupported specification source type: {type(source).__name__}"
    )


def _decode(payload: Union[str, bytes]) -> Any:
    try:
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8-sig")
        return json.loads(payload)
    except UnicodeDecodeError as exc:
        raise MalformedSpecificationError(
            [f"Specification is not valid UTF-8: {exc}"]
        ) from exc
    except json.JSONDecodeError as exc:
        raise MalformedSpecificationError(
            [f"Specification is not valid JSON: {exc.msg} at line {exc.lineno}"]
        ) from exc


def load_specification(source: SpecificationSource) -> ModelSpecification:
    """Load and validate a model specification.

    Args:
        source: Raw bytes, JSON text, a path (str or PathLike) or a readable
            binary/text file handle.

    Raises:
        MalformedSpecificationError: The document is not a valid specification.
        UnsupportedModelKindError: The declared model kind has no evaluator.
        OSError: The path could not be read.
    """
    try:
        specification = parse_specification(_decode(_read_source(source)))
    except SpecificationError as exc:
        logger.error(
            "specification.load_failed",
            error_type=type(exc).__name__,
            error=exc.message,
            details=exc.details,
        )
        raise

    logger.info(
        "specification.loaded",
        name=specification.name,
        version=specification.version,
        kind=specification.kind.value,
        fields=len(specification.fields),
        predictors=len(specification.predictors),
    )
    return specification
