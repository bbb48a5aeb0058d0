"""Domain helpers for people and name validation."""
from __future__ import annotations

from dataclasses import dataclass

from thelist.core.exceptions import InvalidNameError

MAX_NAME_LENGTH = 255


@dataclass(frozen=True)
class Person:
    """One persisted entry of the list."""

    id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


def normalize_name(value: str | None) -> str:
    return (value or "").strip()


def _encodable(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def is_valid_name(value: str | None) -> bool:
    """Return True when the trimmed value is non-empty, fits the column and is UTF-8 encodable."""
    candidate = normalize_name(value)
    return bool(candidate) and len(candidate) <= MAX_NAME_LENGTH and _encodable(candidate)


def validate_name(value: str | None) -> str:
    """Return the trimmed name or raise InvalidNameError."""
    candidate = normalize_name(value)
    if is_valid_name(candidate):
        return candidate
    if not candidate:
        raise InvalidNameError("Name must not be empty")
    if len(candidate) > MAX_NAME_LENGTH:
        raise InvalidNameError(f"Name must be at most {MAX_NAME_LENGTH} characters")
    raise InvalidNameError("Name must be valid Unicode text")
