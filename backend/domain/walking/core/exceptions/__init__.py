"""Domain exceptions for walk tracking."""

from .domain_errors import (
    InvalidInputError,
    ProfileNotFoundError,
    StoreFailureError,
    WalkingDomainError,
    WalkNotFoundError,
)

__all__ = [
    "WalkingDomainError",
    "WalkNotFoundError",
    "ProfileNotFoundError",
    "StoreFailureError",
    "InvalidInputError",
]
