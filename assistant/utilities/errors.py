"""Error taxonomy shared by the stores, the model client and the HTTP layer.

Every error carries the HTTP status it maps to, so routes can answer with
``{"error": <message>}`` without a per-route lookup table.
"""
from typing import Optional


class AssistantError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"error": self.message}


class ValidationError(AssistantError):
    """A required input field is missing or empty."""
    status_code = 400


class NotFound(AssistantError):
    status_code = 404


class ConfigurationError(AssistantError):
    """The model credential is not configured; raised before any network call."""
    status_code = 500


class UpstreamUnreachable(AssistantError):
    status_code = 503


class UpstreamError(AssistantError):
    """The model service answered with a structured error (code + message)."""

    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(f"AI model error: {code} - {message}", status_code)
        self.code = code
        self.upstream_message = message


class UnexpectedUpstreamShape(AssistantError):
    status_code = 500


__all__ = [
    'AssistantError', 'ValidationError', 'NotFound', 'ConfigurationError',
    'UpstreamUnreachable', 'UpstreamError', 'UnexpectedUpstreamShape',
]
