from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``field`` names the offending input and ``strategy`` the calculation
    strategy it was checked against, so a form can render a field-level message.
    """

    def __init__(self, message: str, *, field: Optional[str] = None, strategy=None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.strategy = strategy

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "field": self.field,
            "strategy": getattr(self.strategy, "value", self.strategy),
        }


class MissingOrInvalidAmount(ValidationError):
    """Amount is absent, blank, not a number or negative."""


class MissingOrInvalidPercentage(ValidationError):
    """Percentage is absent, blank, not a number or outside [0, 100]."""


class TypeNotFound(ValidationError):
    """Candidate references a type id absent from the loaded catalog."""

    def __init__(self, type_id, *, field: str = "deductionTypeId", kind: str = "Deduction type"):
        super().__init__(f"{kind} {type_id!r} not found", field=field)
        self.type_id = type_id


class UnknownCalculationStrategy(DomainError):
    """A strategy tag outside the known set: frontend and backend schemas drifted."""

    def __init__(self, tag):
        super().__init__(f"Unknown calculation strategy: {tag!r}")
        self.tag = tag


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AuthorizationError(DomainError):
    """Raised when the backend refuses an action for the configured account."""


class GatewayError(DomainError):
    """The backend could not be reached or answered with an error."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
