"""Remote VAT number existence validation."""
from __future__ import annotations

import logging

from vat_validator.validation.parts import split_vat_number
from vat_validator.vies.client import RegistryClient

logger = logging.getLogger(__name__)


class ExistenceValidator:
    """Asks a registry client whether a VAT number was actually issued.

    The client's answer and any exception it raises are passed through
    unchanged.

    Parameters
    ----------
    client:
        Registry client performing the lookup.
    """

    def __init__(self, client: RegistryClient) -> None:
        self._client = client

    @property
    def client(self) -> RegistryClient:
        return self._client

    def validate_existence(self, vat_number: str) -> bool:
        """Check *vat_number* (prefix included) against the registry.

        Raises
        ------
        RegistryError:
            Or whatever the client raises when the lookup fails.
        """
        parts = split_vat_number(vat_number)
        logger.debug("Checking existence of %s%s", parts.country, parts.number)
        return self._client.check_vat(parts.country, parts.number)
