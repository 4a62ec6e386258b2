"""
Identifier checks for model ids.

A valid id is a UUID in its canonical 8-4-4-4-12 hyphenated form (any case).
The raw string is always kept as given.
"""
import uuid
from typing import Any
from pydantic import BaseModel, ConfigDict
from .exceptions import InvalidIdentifier

ID_FORMAT_MESSAGE = "Model IDs must be unique in the format of UUID."
JUST_ID_MESSAGE = (
    "Model IDs must be unique in the format of UUID. This method is for creating "
    "instances of an existing object with only its ID field for sending as a "
    "mutation parameter. When creating a new object, use the standard builder "
    "method and leave the ID field blank."
)


class IdCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Any
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse(value: object) -> uuid.UUID:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    parsed = uuid.UUID(value)
    # uuid.UUID also takes braces, urn: prefixes and bare hex
    if str(parsed) != value.lower():
        raise ValueError(f"{value!r} is not a hyphenated UUID")
    return parsed


def parse_id(value: object) -> IdCheck:
    """
    Check value without raising, returning an IdCheck with the failure (if any).
    """
    try:
        _parse(value)
    except (TypeError, ValueError) as e:
        return IdCheck(value=value, error=str(e))
    return IdCheck(value=value)


def validate_id(value: object, message: str = ID_FORMAT_MESSAGE) -> str:
    """
    Return value unchanged if it is a UUID string, otherwise raise InvalidIdentifier.
    """
    try:
        _parse(value)
    except (TypeError, ValueError) as e:
        raise InvalidIdentifier(value, message) from e
    return value  # type: ignore[return-value]


def new_id() -> str:
    return str(uuid.uuid4())
