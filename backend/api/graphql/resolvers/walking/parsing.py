"""Argument parsing shared by walking resolvers."""

from datetime import date as DateType
from typing import Optional
from uuid import UUID

from domain.walking.core.exceptions import InvalidInputError


def parse_date(value: str, field: str = "date") -> DateType:
    """Parse a YYYY-MM-DD argument."""
    try:
        return DateType.fromisoformat(value)
    except ValueError as e:
        raise InvalidInputError(f"{field} must be YYYY-MM-DD, got '{value}'") from e


def parse_optional_date(value: Optional[str], field: str = "date") -> Optional[DateType]:
    return parse_date(value, field) if value else None


def parse_walk_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise InvalidInputError(f"Invalid walk id: '{value}'") from e
