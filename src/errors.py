"""Error taxonomy shared by the proxy endpoints, the store and the controller."""

from __future__ import annotations

from typing import Any


class DashboardError(RuntimeError):
    """Base class for the dashboard's own errors."""


class ValidationError(DashboardError):
    """A required input is missing or unusable. User-correctable."""


class ConfigurationError(DashboardError):
    """Deployment misconfiguration, e.g. the upstream API key is missing."""


class UpstreamError(DashboardError):
    """The third-party API failed or could not be reached.

    ``status`` and ``body`` carry the upstream response verbatim when there
    was one; a network failure leaves them at 500 / None.
    """

    def __init__(self, message: str, status: int = 500, body: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class PersistenceError(DashboardError):
    """The location history store failed. Logged and absorbed, never shown."""
