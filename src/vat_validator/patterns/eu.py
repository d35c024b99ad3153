"""VAT number formats for the EU member states.

Patterns describe the number portion only, i.e. everything after the
two-letter country prefix, and are written against upper-case input.
Greece uses ``EL`` as in VIES rather than its ISO code.

Reference: https://ec.europa.eu/taxation_customs/vies/faq.html#item_11
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

EU_PATTERNS: Mapping[str, str] = MappingProxyType({
    "AT": r"U[A-Z\d]{8}",
    "BE": r"(0\d{9}|\d{10})",
    "BG": r"\d{9,10}",
    "CY": r"\d{8}[A-Z]",
    "CZ": r"\d{8,10}",
    "DE": r"\d{9}",
    "DK": r"(\d{2} ?){3}\d{2}",
    "EE": r"\d{9}",
    "EL": r"\d{9}",
    "ES": r"[A-Z]\d{7}[A-Z]|\d{8}[A-Z]|[A-Z]\d{8}",
    "FI": r"\d{8}",
    "FR": r"([A-Z]{2}|\d{2})\d{9}",
    "HR": r"\d{11}",
    "HU": r"\d{8}",
    "IE": r"[A-Z\d]{8}|[A-Z\d]{9}",
    "IT": r"\d{11}",
    "LT": r"(\d{9}|\d{12})",
    "LU": r"\d{8}",
    "LV": r"\d{11}",
    "MT": r"\d{8}",
    "NL": r"\d{9}B\d{2}",
    "PL": r"\d{10}",
    "PT": r"\d{9}",
    "RO": r"\d{2,10}",
    "SE": r"\d{12}",
    "SI": r"\d{8}",
    "SK": r"\d{10}",
})
