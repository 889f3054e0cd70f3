"""
Domain exceptions for the account and workout services.

Services raise these; ``main.create_app`` maps them to HTTP responses
(403, 404 and 400 respectively).
"""

from typing import Any


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PermissionDeniedError(ServiceError):
    """Raised when the gate refuses an operation to the caller."""

    def __init__(self, authority: str, scope: str):
        self.authority = authority
        self.scope = scope
        super().__init__(f"Requires authority {authority} with scope '{scope}'")


class NotFoundError(ServiceError):
    """Raised when a record does not exist."""

    entity = "Record"

    def __init__(self, record_id: Any):
        self.record_id = record_id
        super().__init__(f"{self.entity} not found: {record_id}")


class UserNotFoundError(NotFoundError):
    entity = "User"


class WorkoutNotFoundError(NotFoundError):
    entity = "Workout"


class InvalidReferenceError(ServiceError):
    """Raised when a workout points at a missing or inactive account."""
