"""Validation entry point for hospital records.

``validate`` accepts an untrusted candidate (usually the JSON body of a form
submission) and returns either ``Ok`` with the typed record or ``Err`` with
every field-level violation. Violations are returned as data; nothing is
raised to the caller.

Paths are dotted and use the camelCase field names, with zero-based indices
for sequence elements, e.g. ``address.postalCode`` or ``services.1.name``.
"""
import logging
from typing import Any, Dict, List, Sequence, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from hospital_editor.schemas import FacilityRecord

logger = logging.getLogger(__name__)


class FieldValidationError(BaseModel):
    """One failed constraint.

    Attributes:
        path: Dotted field path, ``""`` when the candidate itself is malformed.
        message: Human-readable message suitable for display next to the input.
    """
    model_config = ConfigDict(frozen=True)

    path: str
    message: str


class Ok(BaseModel):
    """Successful validation.

    Attributes:
        record: The candidate as a fully typed, immutable ``FacilityRecord``.
    """
    model_config = ConfigDict(frozen=True)

    record: FacilityRecord

    @property
    def is_ok(self) -> bool:
        return True


class Err(BaseModel):
    """Failed validation.

    Attributes:
        errors: Every violated constraint, in the order pydantic reported them.
    """
    model_config = ConfigDict(frozen=True)

    errors: List[FieldValidationError]

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def violations(self) -> Dict[str, str]:
        """Map each field path to its message, keeping the first per path."""
        out: Dict[str, str] = {}
        for err in self.errors:
            out.setdefault(err.path, err.message)
        return out


Result = Union[Ok, Err]


def field_path(loc: Sequence[Union[str, int]]) -> str:
    return ".".join(str(part) for part in loc)


def validate(candidate: Any) -> Result:
    """Validate a candidate record against the facility schema.

    All fields are checked; the returned ``Err`` lists every violation
    rather than the first one found.

    Args:
        candidate: Mapping keyed by camelCase (or snake_case) field names, or
            an already validated ``FacilityRecord``.

    Returns:
        ``Ok(record)`` on success, otherwise ``Err(errors)``.
    """
    try:
        record = FacilityRecord.model_validate(candidate)
    except ValidationError as exc:
        errors = [
            FieldValidationError(path=field_path(e["loc"]), message=e["msg"])
            for e in exc.errors(include_url=False)
        ]
        logger.debug("hospital record rejected with %d violation(s)", len(errors))
        return Err(errors=errors)
    return Ok(record=record)
