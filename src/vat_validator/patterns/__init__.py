"""VAT number format tables by region."""
from __future__ import annotations

from vat_validator.patterns.eu import EU_PATTERNS
from vat_validator.patterns.non_eu import NON_EU_PATTERNS

__all__ = [
    "EU_PATTERNS",
    "NON_EU_PATTERNS",
]
