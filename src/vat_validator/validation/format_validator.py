"""Local VAT number format validation.

Example
-------
>>> validator = FormatValidator()
>>> validator.validate_format("de123456789")
True
>>> validator.format_status("XX123")
<FormatStatus.UNSUPPORTED: 'unsupported'>
"""
from __future__ import annotations

from enum import Enum

from vat_validator.registry import DEFAULT_REGISTRY, PatternRegistry
from vat_validator.validation.parts import split_vat_number


class FormatStatus(str, Enum):
    """Outcome of a format check."""

    UNSUPPORTED = "unsupported"
    MISMATCH = "mismatch"
    MATCH = "match"


class FormatValidator:
    """Checks the shape of VAT numbers against the pattern registry.

    Never raises for any string input and keeps no state between calls.

    Parameters
    ----------
    registry:
        Pattern registry to consult.  Defaults to the built-in tables.
    """

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY

    @property
    def registry(self) -> PatternRegistry:
        return self._registry

    def can_check_country_format(self, country: str) -> bool:
        """Return ``True`` when a format rule is known for *country*."""
        return self._registry.supports(country)

    def format_status(self, vat_number: str, country: str | None = None) -> FormatStatus:
        """Classify *vat_number* as unsupported, mismatching or matching.

        Parameters
        ----------
        vat_number:
            Full VAT number including its two-letter prefix.  Matching is
            case-insensitive.
        country:
            Country code to use instead of the prefix.  The first two
            characters of *vat_number* are still dropped.

        Returns
        -------
        FormatStatus
        """
        parts = split_vat_number(vat_number, country)
        rule = self._registry.rule_for(parts.country)
        if rule is None:
            return FormatStatus.UNSUPPORTED
        return FormatStatus.MATCH if rule.matches(parts.number) else FormatStatus.MISMATCH

    def validate_format(self, vat_number: str, country: str | None = None) -> bool:
        """Return ``True`` when *vat_number* has the expected shape.

        Unknown countries yield ``False``; use
        :meth:`can_check_country_format` to tell them apart from a
        mismatch.
        """
        return self.format_status(vat_number, country) is FormatStatus.MATCH
