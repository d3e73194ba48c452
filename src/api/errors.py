# src/api/errors.py

"""Errors raised by store API clients.

Everything a store client raises on purpose derives from
SmartCartError so callers fanning out across stores can catch one
type per store and keep going.
"""


class SmartCartError(Exception):
    """Base class for smart_cart errors."""


class APIError(SmartCartError):
    """A store API answered with a non-success HTTP status."""

    def __init__(
        self, status_code: int, status_text: str = "", url: str = ""
    ) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
        super().__init__(
            f"API request failed: {status_code} {status_text}".rstrip()
        )


class TransportError(SmartCartError):
    """The request never produced a usable response (network or parse failure)."""
