"""Combined VAT number validation: format first, then existence.

Example
-------
>>> validator = VatValidator(client=my_client)
>>> validator.can_check_country_format("XX")
False
>>> validator.validate("DE00000000")  # 8 digits, client is not called
False
"""
from __future__ import annotations

import logging

from vat_validator.registry import PatternRegistry
from vat_validator.validation.existence_validator import ExistenceValidator
from vat_validator.validation.format_validator import FormatStatus, FormatValidator
from vat_validator.vies.client import RegistryClient

logger = logging.getLogger(__name__)


class VatValidator:
    """Entry point for VAT number validation.

    The format check runs locally.  Only numbers with a valid format are
    sent to the registry client, so garbage never reaches the remote
    service.

    Parameters
    ----------
    client:
        Registry client used for existence checks.  When omitted a
        :class:`~vat_validator.vies.client.ViesClient` with default
        settings is created on the first existence check.
    registry:
        Pattern registry for format checks.  Defaults to the built-in
        tables.
    """

    def __init__(
        self,
        client: RegistryClient | None = None,
        registry: PatternRegistry | None = None,
    ) -> None:
        self._format = FormatValidator(registry)
        self._existence: ExistenceValidator | None = (
            ExistenceValidator(client) if client is not None else None
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def client(self) -> RegistryClient:
        """The registry client, created on first access when not injected."""
        return self._existence_validator().client

    def can_check_country_format(self, country: str) -> bool:
        """Return ``True`` when a format rule is known for *country*."""
        return self._format.can_check_country_format(country)

    def format_status(self, vat_number: str, country: str | None = None) -> FormatStatus:
        """Three-way format result, see :meth:`FormatValidator.format_status`."""
        return self._format.format_status(vat_number, country)

    def validate_format(self, vat_number: str, country: str | None = None) -> bool:
        """Validate the format of *vat_number* without any network access."""
        return self._format.validate_format(vat_number, country)

    def validate_existence(self, vat_number: str) -> bool:
        """Check with the registry that *vat_number* was issued.

        Raises
        ------
        RegistryError:
            When the registry client cannot complete the check.
        """
        return self._existence_validator().validate_existence(vat_number)

    def validate(self, vat_number: str, country: str | None = None) -> bool:
        """Validate format and, when the format is valid, existence.

        Parameters
        ----------
        vat_number:
            Full VAT number including its two-letter prefix.
        country:
            Country code for the format check.  The existence check always
            uses the prefix of *vat_number*.

        Returns
        -------
        bool
            ``False`` for a malformed number without contacting the
            registry, otherwise the registry's answer.

        Raises
        ------
        RegistryError:
            When the registry client cannot complete the check.
        """
        if not self.validate_format(vat_number, country):
            logger.debug("Skipping existence check for malformed VAT number %r", vat_number)
            return False
        return self.validate_existence(vat_number)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _existence_validator(self) -> ExistenceValidator:
        if self._existence is None:
            from vat_validator.vies.client import ViesClient

            self._existence = ExistenceValidator(ViesClient())
        return self._existence

    def __repr__(self) -> str:
        client = type(self._existence.client).__name__ if self._existence else "default"
        return f"VatValidator(client={client}, registry={self._format.registry!r})"
