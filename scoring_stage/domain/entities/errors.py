"""
Domain Errors

Load-time errors (SpecificationError) abort stage initialization.
Record errors (InvalidRecordError) concern a single input record and are
left to the caller to drop, dead-letter or retry.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class SpecificationError(DomainError):
    """Raised when a model specification cannot be loaded."""


class MalformedSpecificationError(SpecificationError):
    """Raised when required structural elements are absent or inconsistent."""

    def __init__(self, errors: List[str], details: Optional[Dict[str, Any]] = None):
        self.errors = list(errors)
        message = "Model specification is malformed: " + "; ".join(self.errors)
        merged = {"errors": self.errors}
        merged.update(details or {})
        super().__init__(message, merged)


class UnsupportedModelKindError(SpecificationError):
    """Raised when the declared calculation type has no evaluator."""

    def __init__(self, kind: str, details: Optional[Dict[str, Any]] = None):
        self.kind = kind
        message = f"Model kind '{kind}' is not supported"
        super().__init__(message, details)


class InvalidRecordError(DomainError):
    """Raised when a single input record cannot be scored."""

    code = "invalid_record"

    def __init__(
        self, field: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        self.field = field
        super().__init__(message, details)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "field": self.field}


class MissingFieldError(InvalidRecordError):
    """Raised when a declared predictor field is absent from the record."""

    code = "missing_field"

    def __init__(self, field: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(field, f"Required field '{field}' is missing", details)


class NonNumericValueError(InvalidRecordError):
    """Raised when a predictor value cannot be coerced to a number."""

    code = "non_numeric_value"

    def __init__(
        self, field: str, value: Any, details: Optional[Dict[str, Any]] = None
    ):
        self.value = value
        super().__init__(
            field,
            f"Field '{field}' has non-numeric value {value!r}",
            details,
        )
