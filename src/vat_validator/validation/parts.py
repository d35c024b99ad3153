"""Splitting a raw VAT number into country code and number portion."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CountrySource(str, Enum):
    """Where the country code of a :class:`VatNumberParts` came from."""

    EXPLICIT = "explicit"
    DERIVED = "derived"


@dataclass(frozen=True)
class VatNumberParts:
    """A VAT number split into its country code and number portion.

    Attributes
    ----------
    country:
        Country code used for rule lookup.
    number:
        Upper-cased input from index 2 onwards.
    source:
        Whether ``country`` was passed by the caller or taken from the
        first two characters of the input.
    """

    country: str
    number: str
    source: CountrySource


def split_vat_number(vat_number: str, country: str | None = None) -> VatNumberParts:
    """Upper-case *vat_number* and split it into country and number.

    The first two characters are always dropped from the number, even
    when *country* is given: callers passing a number without its prefix
    together with an explicit country lose its first two characters.
    Existing callers rely on this, so it is kept.

    An explicit *country* is used as given and is not upper-cased.
    Inputs shorter than two characters yield empty strings.
    """
    folded = vat_number.upper()
    number = folded[2:]
    if country is None:
        return VatNumberParts(folded[:2], number, CountrySource.DERIVED)
    return VatNumberParts(country, number, CountrySource.EXPLICIT)
