"""Errors raised by the Upbit client.

Public (quotation) endpoints let ``requests`` exceptions through untouched, so
``TransportError`` is simply an alias of :class:`requests.RequestException`.
Private endpoints collapse every failure into :class:`AuthenticationError`.
"""

import requests

TransportError = requests.exceptions.RequestException

AUTHENTICATION_FAILED_MESSAGE = (
    "Failed to load account information. Please check your API keys."
)


class UpbitError(Exception):
    pass


class ConfigurationError(UpbitError):
    """Required settings (e.g. API credentials) are missing."""


class AuthenticationError(UpbitError):
    def __init__(self, message: str = AUTHENTICATION_FAILED_MESSAGE) -> None:
        super().__init__(message)
