from __future__ import annotations

from typing import Optional

from .enums import EligibilityFailure


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidCoordinatesError(ValidationError):
    """Raised when longitude/latitude fall outside their valid ranges."""


class InvalidRangeError(ValidationError):
    """Raised when a time range does not end after it starts."""


class EligibilityError(ValidationError):
    """Raised when a check-in attempt fails the attendance eligibility rules."""

    MESSAGES = {
        EligibilityFailure.TIME_WINDOW: "Attendance is outside the event time window",
        EligibilityFailure.PROXIMITY: "Attendance location is outside the allowed geo-fence range",
    }

    def __init__(self, failure: EligibilityFailure, message: Optional[str] = None):
        super().__init__(message or self.MESSAGES[failure])
        self.failure = failure


class LocationRequiredError(ValidationError):
    """Raised when a check-in carries no coordinates to test against the geo-fence."""


class UnknownRoleError(DomainError):
    """Raised when role data holds a name outside the known vocabulary."""


class NotLoadedError(DomainError):
    """Raised when a relationship is queried before it was loaded."""


class AuthorizationError(DomainError):
    """Raised when a requestor lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""
