"""
Exception types raised by the DocuSign integration.

Auth and API errors subclass ConnectionError so callers that only care
about "DocuSign is unreachable or unhappy" can catch a single type.
"""

from typing import Any


class DocuSignError(Exception):
    """Base exception for DocuSign integration errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class DocuSignAuthError(DocuSignError, ConnectionError):
    """An access token could not be obtained or refreshed."""

    pass


class DocuSignAPIError(DocuSignError, ConnectionError):
    """The eSignature REST API rejected a request."""

    def __init__(self, message: str, status_code: int, body: Any = None, context: dict[str, Any] | None = None):
        super().__init__(message, context)
        self.status_code = status_code
        self.body = body

    @property
    def error_code(self) -> str | None:
        if isinstance(self.body, dict):
            return self.body.get("errorCode")
        return None

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code}): {self.body}"


class EnvelopeValidationError(DocuSignError, ValueError):
    """Envelope arguments were rejected before anything was sent."""

    pass
