from __future__ import annotations

from scoring_stage.domain.entities.errors import (
    DomainError,
    InvalidRecordError,
    MalformedSpecificationError,
    MissingFieldError,
    NonNumericValueError,
    SpecificationError,
    UnsupportedModelKindError,
)


def test_load_errors_share_a_base() -> None:
    malformed = MalformedSpecificationError(["Intercept must be provided."])
    unsupported = UnsupportedModelKindError("tree")

    assert isinstance(malformed, SpecificationError)
    assert isinstance(unsupported, SpecificationError)
    assert isinstance(malformed, DomainError)
    assert malformed.details == {"errors": ["Intercept must be provided."]}
    assert "Intercept must be provided." in str(malformed)
    assert "tree" in unsupported.message


def test_record_errors_carry_field_and_code() -> None:
    missing = MissingFieldError("plurality")
    non_numeric = NonNumericValueError("year", "soon")

    assert isinstance(missing, InvalidRecordError)
    assert isinstance(non_numeric, InvalidRecordError)
    assert not isinstance(missing, SpecificationError)
    assert missing.to_dict() == {
        "code": "missing_field",
        "message": "Required field 'plurality' is missing",
        "field": "plurality",
    }
    assert non_numeric.value == "soon"
    assert non_numeric.to_dict()["code"] == "non_numeric_value"
