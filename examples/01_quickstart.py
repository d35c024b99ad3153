#!/usr/bin/env python3
"""Example: Quickstart — vat-validator

Check VAT number formats locally, then confirm registration with a
registry client.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install vat-validator
"""
from __future__ import annotations

import vat_validator as vat


class DemoRegistry(vat.RegistryClient):
    """Stands in for VIES so the example runs offline."""

    def __init__(self, registered: set[str]) -> None:
        self._registered = registered

    def check_vat(self, country_code: str, number: str) -> bool:
        print(f"    registry lookup: {country_code} {number}")
        return country_code + number in self._registered


def main() -> None:
    print(f"vat-validator version: {vat.__version__}")

    # Step 1: Format checks, no network
    validator = vat.VatValidator(client=DemoRegistry({"DE123456789"}))
    numbers = ["DE123456789", "de12345678", "IE1234567A", "CHCHE123456789MWST", "XX123"]

    print("\nFormat checks:")
    for number in numbers:
        status = validator.format_status(number)
        print(f"  [{status.value:>11}] {number}")

    # Step 2: Capability check before validating
    for country in ["DE", "CH", "XX"]:
        print(f"\nCan check {country}? {validator.can_check_country_format(country)}")

    # Step 3: Full validation, malformed numbers never reach the registry
    print("\nFull validation:")
    for number in ["DE123456789", "DE987654321", "DE00000000"]:
        print(f"  {number}:")
        print(f"    registered: {validator.validate(number)}")


if __name__ == "__main__":
    main()
