"""VAT number formats for selected non-EU jurisdictions.

Most of these numbers are written with a descriptive prefix that does not
match the country code (``CHE`` for Switzerland, ``RUC`` for Peru, ...),
so the prefix is allowed inside the number portion itself.

Only countries with a public format reference that agrees with numbers
seen in practice are listed.  AE, IN, JO, LB, LI, MX, SG, TH and ZA are
deliberately absent.

Reference: https://en.wikipedia.org/wiki/VAT_identification_number
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

NON_EU_PATTERNS: Mapping[str, str] = MappingProxyType({
    "AR": r"(CUIT)?\d{11}",
    # ABNs carry a modulo 89 check digit: https://abr.business.gov.au/Help/AbnFormat
    "AU": r"(ABN)?\d{11}",
    "BR": r"(CNPJ|CPF)?(\d{14}|\d{11})",
    "CA": r"(BN|NE)?\d{9}",
    # CHE numbers end in a MOD11 check digit (weights 5,4,3,2,7,6,5,4).
    "CH": r"((CH)?\d{6}|(CHE)?\d{9})(TVA|MWST|IVA)?",
    # No longer served by VIES since 2021.
    "GB": r"\d{9}|\d{12}|(GD|HA)\d{3}",
    "GR": r"(EL|GR)?\d{9}",
    "IL": r"(IL)?\d{9}",
    "NO": r"(ORGNR)?\d{9}(MVA)?",
    "PE": r"(RUC)?\d{11}",
    "RU": r"(ИНН)?(\d{10}|\d{12})",
    "TR": r"(TR)?\d{10}",
})
