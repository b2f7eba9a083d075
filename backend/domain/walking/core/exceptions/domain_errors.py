"""Domain exceptions for walk tracking."""


class WalkingDomainError(Exception):
    """Base exception for walking domain errors."""

    pass


class WalkNotFoundError(WalkingDomainError):
    """Raised when walks are missing or owned by another user."""

    def __init__(self, user_id: str, walk_ids: object):
        super().__init__(f"Walk not found for user {user_id}: {walk_ids}")
        self.user_id = user_id
        self.walk_ids = walk_ids


class ProfileNotFoundError(WalkingDomainError):
    """Raised when the user's profile (step goal) cannot be found."""

    def __init__(self, user_id: str):
        super().__init__(f"Profile not found: {user_id}")
        self.user_id = user_id


class StoreFailureError(WalkingDomainError):
    """Raised when an underlying store read or write fails."""

    def __init__(self, operation: str, detail: str = ""):
        message = f"Store operation failed: {operation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.operation = operation


class InvalidInputError(WalkingDomainError):
    """Raised when a command carries invalid data."""

    pass
