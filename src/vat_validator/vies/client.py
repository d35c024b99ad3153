"""Registry clients for VAT number existence checks.

:class:`RegistryClient` is the contract the validators depend on.
:class:`ViesClient` is the default implementation, backed by the EU VAT
Information Exchange System (VIES) REST API.

Example
-------
>>> client = ViesClient(timeout_seconds=5.0)
>>> client.check_vat("DE", "123456789")
False
"""
from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from vat_validator.patterns.eu import EU_PATTERNS
from vat_validator.vies.errors import RegistryError

if TYPE_CHECKING:
    from vat_validator.config_loader import ViesConfig

logger = logging.getLogger(__name__)

DEFAULT_VIES_URL = "https://ec.europa.eu/taxation_customs/vies/rest-api"

# Northern Ireland is served by VIES under XI although it has no EU rule.
VIES_COUNTRY_CODES: frozenset[str] = frozenset(EU_PATTERNS) | {"XI"}

# ``userError`` values that carry a definite answer.
_ANSWER_CODES: frozenset[str] = frozenset({"VALID", "INVALID"})


class RegistryClient(ABC):
    """Performs an authoritative lookup of a VAT number."""

    @abstractmethod
    def check_vat(self, country_code: str, number: str) -> bool:
        """Return ``True`` when *number* is currently registered in *country_code*.

        Raises
        ------
        RegistryError:
            When the lookup could not be completed.
        """


class ViesClient(RegistryClient):
    """Checks VAT numbers against the VIES REST API.

    One request per call, no retries and no caching.

    Parameters
    ----------
    base_url:
        Root of the VIES REST API.
    timeout_seconds:
        Socket timeout for each request (default: 10).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_VIES_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds

    @classmethod
    def from_config(cls, config: "ViesConfig") -> "ViesClient":
        """Build a client from the ``vies`` section of the configuration."""
        return cls(base_url=config.base_url, timeout_seconds=config.timeout_seconds)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check_vat(self, country_code: str, number: str) -> bool:
        """Ask VIES whether *number* is registered in *country_code*.

        Parameters
        ----------
        country_code:
            VIES member state code (``"EL"`` for Greece, ``"XI"`` for
            Northern Ireland).
        number:
            Number portion without the country prefix.

        Returns
        -------
        bool
            The ``isValid`` flag reported by VIES.

        Raises
        ------
        RegistryError:
            For countries VIES does not serve, transport failures,
            non-200 responses, unparsable bodies and any VIES
            ``userError`` other than ``VALID``/``INVALID``.
        """
        if country_code not in VIES_COUNTRY_CODES:
            raise RegistryError(
                "UNSUPPORTED_COUNTRY",
                f"VIES does not serve country code '{country_code}'",
                country_code,
            )

        payload = self._get(self._url_for(country_code, number), country_code)

        user_error = payload.get("userError")
        if user_error is not None and user_error not in _ANSWER_CODES:
            logger.warning("VIES rejected check for %s%s: %s", country_code, number, user_error)
            raise RegistryError(
                str(user_error),
                f"VIES could not check {country_code}{number}",
                country_code,
            )

        is_valid = payload.get("isValid")
        if not isinstance(is_valid, bool):
            raise RegistryError(
                "MALFORMED_RESPONSE",
                f"VIES response has no boolean 'isValid': {payload!r}",
                country_code,
            )
        return is_valid

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _url_for(self, country_code: str, number: str) -> str:
        return (
            f"{self._base_url}/ms/{urllib.parse.quote(country_code, safe='')}"
            f"/vat/{urllib.parse.quote(number, safe='')}"
        )

    def _get(self, url: str, country_code: str) -> dict[str, object]:
        """GET *url* and decode the JSON object it returns."""
        logger.debug("VIES request: %s", url)
        req = urllib.request.Request(url, headers={"Accept": "application/json"}, method="GET")
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:  # noqa: S310
                status = resp.status
                body = resp.read()
        except urllib.error.HTTPError as exc:
            logger.warning("VIES returned HTTP %s for %s", exc.code, url)
            raise RegistryError("HTTP_ERROR", f"VIES returned HTTP {exc.code}", country_code) from exc
        except (urllib.error.URLError, OSError) as exc:
            logger.warning("VIES request failed for %s: %s", url, exc)
            raise RegistryError("TRANSPORT_ERROR", f"VIES request failed: {exc}", country_code) from exc

        if status != 200:
            raise RegistryError("HTTP_ERROR", f"VIES returned HTTP {status}", country_code)

        try:
            payload = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise RegistryError("MALFORMED_RESPONSE", "VIES response is not valid JSON", country_code) from exc

        if not isinstance(payload, dict):
            raise RegistryError("MALFORMED_RESPONSE", "VIES response is not a JSON object", country_code)
        return payload
