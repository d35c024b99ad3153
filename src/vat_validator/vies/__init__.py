"""Registry clients for VAT number existence checks."""
from __future__ import annotations

from vat_validator.vies.client import (
    DEFAULT_VIES_URL,
    VIES_COUNTRY_CODES,
    RegistryClient,
    ViesClient,
)
from vat_validator.vies.errors import RegistryError

__all__ = [
    "DEFAULT_VIES_URL",
    "VIES_COUNTRY_CODES",
    "RegistryClient",
    "RegistryError",
    "ViesClient",
]
