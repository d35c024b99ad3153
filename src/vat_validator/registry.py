"""Per-country VAT number format registry.

Holds the EU and non-EU format tables as compiled, read-only rules and
answers capability and lookup queries.  The registry is built once at
import time and never mutated, so it can be shared freely between
threads.

Example
-------
>>> registry = PatternRegistry()
>>> registry.supports("DE")
True
>>> registry.rule_for("DE").matches("123456789")
True
>>> registry.rule_for("XX") is None
True
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from vat_validator.patterns.eu import EU_PATTERNS
from vat_validator.patterns.non_eu import NON_EU_PATTERNS


class Region(str, Enum):
    """Which rule table a country code belongs to."""

    EU = "eu"
    NON_EU = "non-eu"


@dataclass(frozen=True)
class FormatRule:
    """Expected shape of the number portion of a VAT id for one country.

    Attributes
    ----------
    country_code:
        Two-letter code the rule is registered under (``"EL"`` for Greece).
    pattern:
        Source of the regular expression, without anchors.
    region:
        :class:`Region` the rule was taken from.
    """

    country_code: str
    pattern: str
    region: Region
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # ``\d`` must only accept ASCII digits.
        object.__setattr__(self, "_compiled", re.compile(self.pattern, re.ASCII))

    def matches(self, number: str) -> bool:
        """Return ``True`` when *number* matches the rule from start to end."""
        return self._compiled.fullmatch(number) is not None


def _build_rules(patterns: Mapping[str, str], region: Region) -> Mapping[str, FormatRule]:
    return MappingProxyType(
        {code: FormatRule(code, pattern, region) for code, pattern in patterns.items()}
    )


_EU_RULES: Mapping[str, FormatRule] = _build_rules(EU_PATTERNS, Region.EU)
_NON_EU_RULES: Mapping[str, FormatRule] = _build_rules(NON_EU_PATTERNS, Region.NON_EU)


class PatternRegistry:
    """Read-only lookup over the EU and non-EU format rules.

    Parameters
    ----------
    eu_rules:
        Mapping of country code to :class:`FormatRule` for EU member
        states.  Defaults to the built-in table.
    non_eu_rules:
        Mapping for non-EU jurisdictions.  Defaults to the built-in table.

    Raises
    ------
    ValueError:
        When a country code appears in both mappings.
    """

    def __init__(
        self,
        eu_rules: Mapping[str, FormatRule] | None = None,
        non_eu_rules: Mapping[str, FormatRule] | None = None,
    ) -> None:
        self._eu = _EU_RULES if eu_rules is None else MappingProxyType(dict(eu_rules))
        self._non_eu = _NON_EU_RULES if non_eu_rules is None else MappingProxyType(dict(non_eu_rules))

        overlap = self._eu.keys() & self._non_eu.keys()
        if overlap:
            raise ValueError(f"Country codes listed as both EU and non-EU: {sorted(overlap)}")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def supports(self, country_code: str) -> bool:
        """Return ``True`` when a format rule exists for *country_code*."""
        return country_code in self._eu or country_code in self._non_eu

    def rule_for(self, country_code: str) -> FormatRule | None:
        """Return the rule for *country_code*, or ``None`` when unknown.

        EU rules are consulted first.  The two tables are disjoint so the
        order never changes the answer.
        """
        rule = self._eu.get(country_code)
        if rule is not None:
            return rule
        return self._non_eu.get(country_code)

    def is_eu(self, country_code: str) -> bool:
        """Return ``True`` when *country_code* is an EU member state code."""
        return country_code in self._eu

    def eu_codes(self) -> tuple[str, ...]:
        """Sorted EU country codes."""
        return tuple(sorted(self._eu))

    def non_eu_codes(self) -> tuple[str, ...]:
        """Sorted non-EU country codes."""
        return tuple(sorted(self._non_eu))

    def codes(self) -> tuple[str, ...]:
        """All supported country codes, sorted."""
        return tuple(sorted((*self._eu, *self._non_eu)))

    def rules(self) -> list[FormatRule]:
        """Every rule, EU first, each group sorted by country code."""
        return [self._eu[code] for code in self.eu_codes()] + [
            self._non_eu[code] for code in self.non_eu_codes()
        ]

    def __len__(self) -> int:
        return len(self._eu) + len(self._non_eu)

    def __repr__(self) -> str:
        return f"PatternRegistry(eu={len(self._eu)}, non_eu={len(self._non_eu)})"


DEFAULT_REGISTRY = PatternRegistry()
