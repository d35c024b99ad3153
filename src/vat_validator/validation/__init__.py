"""Format, existence and combined VAT number validation."""
from __future__ import annotations

from vat_validator.validation.existence_validator import ExistenceValidator
from vat_validator.validation.format_validator import FormatStatus, FormatValidator
from vat_validator.validation.parts import CountrySource, VatNumberParts, split_vat_number
from vat_validator.validation.validator import VatValidator

__all__ = [
    "CountrySource",
    "ExistenceValidator",
    "FormatStatus",
    "FormatValidator",
    "VatNumberParts",
    "VatValidator",
    "split_vat_number",
]
