"""Custom exceptions for the Ploi API client."""

from __future__ import annotations

from typing import Any


class PloiAPIError(Exception):
    """Base exception for Ploi API errors."""


class PloiConfigError(PloiAPIError):
    """No API token configured."""


class PloiAuthenticationError(PloiAPIError):
    """401 - Invalid or missing API token."""


class PloiNotFoundError(PloiAPIError):
    """404 - Resource not found."""


class PloiValidationError(PloiAPIError):
    """422 - Validation error with details."""

    def __init__(self, details: dict) -> None:
        self.details = details
        super().__init__(str(details))

    @property
    def errors(self) -> dict[str, Any]:
        errors = self.details.get("errors") if isinstance(self.details, dict) else None
        return errors if isinstance(errors, dict) else {}


class PloiRateLimitError(PloiAPIError):
    """429 - Too many attempts."""


class PloiServerError(PloiAPIError):
    """5xx - Internal server error."""


class PloiMaintenanceError(PloiServerError):
    """503 - Ploi is performing maintenance."""


class DomainAlreadyExistsError(PloiValidationError):
    """The root domain of a new site is already taken on the server."""

    def __init__(self, domain: str, details: dict | None = None) -> None:
        self.domain = domain
        super().__init__(details or {})

    def __str__(self) -> str:
        return f"{self.domain} already exists!"
