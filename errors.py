"""
Error hierarchy for the API.
Every error carries a client-safe message and the HTTP status it maps to.
"""


class ApiError(Exception):
    """Base class for every error the API turns into a JSON response."""

    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"message": self.message}


# ── Client errors (400-level) ──────────────────────────────────────

class ValidationError(ApiError):
    """Missing/empty required field, malformed identifier or body."""

    http_status = 400


class NotFoundError(ApiError):
    """No document matched the given identifier."""

    http_status = 404


# ── Server errors (500-level) ──────────────────────────────────────

class ConfigurationError(ApiError):
    """Required configuration (the connection string) is absent."""

    def to_response(self) -> dict:
        return {"message": "Server is not configured"}


class StoreConnectionError(ApiError):
    """The document store could not be reached."""


class StoreOperationError(ApiError):
    """A document-store operation failed."""
