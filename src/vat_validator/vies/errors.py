"""Errors raised by registry clients."""
from __future__ import annotations


class RegistryError(Exception):
    """Raised when a registry client cannot complete an existence check.

    Covers transport failures, malformed responses and rejections by the
    remote service (rate limiting, member state unavailable, ...).  It is
    never raised for a number that the registry reports as not issued.

    Attributes
    ----------
    code:
        Short machine-readable reason, e.g. ``"MS_UNAVAILABLE"`` or
        ``"TRANSPORT_ERROR"``.
    country_code:
        Country code of the number being checked.
    """

    def __init__(self, code: str, message: str, country_code: str = "") -> None:
        self.code = code
        self.message = message
        self.country_code = country_code
        super().__init__(f"[{code}] {message}")
