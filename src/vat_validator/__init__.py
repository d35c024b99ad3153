"""vat-validator — VAT identification number validation.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import vat_validator
>>> vat_validator.__version__
'0.1.0'
>>> validator = vat_validator.VatValidator()
>>> validator.validate_format("DE123456789")
True
>>> validator.can_check_country_format("XX")
False
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
from vat_validator.patterns import EU_PATTERNS, NON_EU_PATTERNS
from vat_validator.registry import DEFAULT_REGISTRY, FormatRule, PatternRegistry, Region

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
from vat_validator.validation.existence_validator import ExistenceValidator
from vat_validator.validation.format_validator import FormatStatus, FormatValidator
from vat_validator.validation.parts import CountrySource, VatNumberParts, split_vat_number
from vat_validator.validation.validator import VatValidator

# ---------------------------------------------------------------------------
# Registry clients
# ---------------------------------------------------------------------------
from vat_validator.vies.client import RegistryClient, ViesClient
from vat_validator.vies.errors import RegistryError

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
from vat_validator.config_loader import ConfigLoader, ValidatorConfig, ViesConfig

__all__ = [
    "__version__",
    # Registry
    "DEFAULT_REGISTRY",
    "EU_PATTERNS",
    "FormatRule",
    "NON_EU_PATTERNS",
    "PatternRegistry",
    "Region",
    # Validation
    "CountrySource",
    "ExistenceValidator",
    "FormatStatus",
    "FormatValidator",
    "VatNumberParts",
    "VatValidator",
    "split_vat_number",
    # Registry clients
    "RegistryClient",
    "RegistryError",
    "ViesClient",
    # Configuration
    "ConfigLoader",
    "ValidatorConfig",
    "ViesConfig",
]
