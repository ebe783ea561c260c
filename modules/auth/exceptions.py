"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, DevlinkError


class InvalidTokenError(AuthenticationError):
    """
    Raised when a token is invalid, malformed, expired or badly signed.

    These cases are deliberately not distinguished.
    """

    def __init__(self, message: str = "Token is not valid"):
        super().__init__(message, code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthConfigurationError(DevlinkError):
    """Raised when a token must be signed but no signing secret is configured."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, code="AUTH_NOT_CONFIGURED")
