"""Unit tests for vies/client.py — ViesClient."""
from __future__ import annotations

import json
import socket
import urllib.error
from collections.abc import Iterator
from contextlib import contextmanager
from unittest.mock import MagicMock, patch

import pytest

from vat_validator.config_loader import ViesConfig
from vat_validator.vies.client import DEFAULT_VIES_URL, VIES_COUNTRY_CODES, RegistryClient, ViesClient
from vat_validator.vies.errors import RegistryError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _response(body: object, status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status = status
    resp.read.return_value = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return resp


@contextmanager
def _vies_returning(resp: MagicMock) -> Iterator[MagicMock]:
    with patch("urllib.request.urlopen") as urlopen:
        urlopen.return_value.__enter__.return_value = resp
        yield urlopen


@pytest.fixture()
def client() -> ViesClient:
    return ViesClient(base_url="https://vies.example.test/rest-api/", timeout_seconds=3.0)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestViesClientConstruction:
    def test_is_registry_client(self) -> None:
        assert isinstance(ViesClient(), RegistryClient)

    def test_defaults(self) -> None:
        client = ViesClient()
        assert client.base_url == DEFAULT_VIES_URL
        assert client.timeout_seconds == 10.0

    def test_trailing_slash_stripped(self, client: ViesClient) -> None:
        assert client.base_url == "https://vies.example.test/rest-api"

    def test_from_config(self) -> None:
        config = ViesConfig(base_url="https://vies.example.test", timeout_seconds=2.5)
        client = ViesClient.from_config(config)
        assert client.base_url == "https://vies.example.test"
        assert client.timeout_seconds == 2.5

    def test_registry_client_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            RegistryClient()  # type: ignore[abstract]

    def test_vies_country_codes(self) -> None:
        assert "XI" in VIES_COUNTRY_CODES
        assert "EL" in VIES_COUNTRY_CODES
        assert "GB" not in VIES_COUNTRY_CODES
        assert len(VIES_COUNTRY_CODES) == 28


# ---------------------------------------------------------------------------
# check_vat
# ---------------------------------------------------------------------------


class TestViesClientCheckVat:
    def test_valid_number(self, client: ViesClient) -> None:
        with _vies_returning(_response({"isValid": True, "userError": "VALID"})) as urlopen:
            assert client.check_vat("DE", "123456789") is True
        request = urlopen.call_args.args[0]
        assert request.full_url == "https://vies.example.test/rest-api/ms/DE/vat/123456789"
        assert request.get_method() == "GET"
        assert urlopen.call_args.kwargs["timeout"] == 3.0

    def test_invalid_number(self, client: ViesClient) -> None:
        with _vies_returning(_response({"isValid": False, "userError": "INVALID"})):
            assert client.check_vat("DE", "123456789") is False

    def test_missing_user_error_uses_is_valid(self, client: ViesClient) -> None:
        with _vies_returning(_response({"isValid": True})):
            assert client.check_vat("FR", "12123456789") is True

    def test_number_is_url_quoted(self, client: ViesClient) -> None:
        with _vies_returning(_response({"isValid": False, "userError": "INVALID"})) as urlopen:
            client.check_vat("DK", "12 34 56 78")
        assert urlopen.call_args.args[0].full_url.endswith("/ms/DK/vat/12%2034%2056%2078")

    @pytest.mark.parametrize(
        "user_error",
        ["MS_UNAVAILABLE", "INVALID_INPUT", "MS_MAX_CONCURRENT_REQ", "GLOBAL_MAX_CONCURRENT_REQ", "TIMEOUT"],
    )
    def test_service_errors_raise(self, client: ViesClient, user_error: str) -> None:
        with _vies_returning(_response({"isValid": False, "userError": user_error})):
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("DE", "123456789")
        assert exc_info.value.code == user_error
        assert exc_info.value.country_code == "DE"

    def test_unsupported_country_makes_no_request(self, client: ViesClient) -> None:
        with patch("urllib.request.urlopen") as urlopen:
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("CH", "CHE123456789")
        assert exc_info.value.code == "UNSUPPORTED_COUNTRY"
        urlopen.assert_not_called()

    def test_northern_ireland_is_served(self, client: ViesClient) -> None:
        with _vies_returning(_response({"isValid": True, "userError": "VALID"})):
            assert client.check_vat("XI", "123456789") is True

    def test_http_error(self, client: ViesClient) -> None:
        error = urllib.error.HTTPError("https://vies.example.test", 503, "Service Unavailable", None, None)  # type: ignore[arg-type]
        with patch("urllib.request.urlopen", side_effect=error):
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("DE", "123456789")
        assert exc_info.value.code == "HTTP_ERROR"
        assert exc_info.value.__cause__ is error

    def test_url_error(self, client: ViesClient) -> None:
        with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("dns failure")):
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("DE", "123456789")
        assert exc_info.value.code == "TRANSPORT_ERROR"

    def test_timeout(self, client: ViesClient) -> None:
        with patch("urllib.request.urlopen", side_effect=socket.timeout("timed out")):
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("DE", "123456789")
        assert exc_info.value.code == "TRANSPORT_ERROR"

    def test_non_200_status(self, client: ViesClient) -> None:
        with _vies_returning(_response({"isValid": True}, status=204)):
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("DE", "123456789")
        assert exc_info.value.code == "HTTP_ERROR"

    def test_invalid_json(self, client: ViesClient) -> None:
        with _vies_returning(_response(b"<html>maintenance</html>")):
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("DE", "123456789")
        assert exc_info.value.code == "MALFORMED_RESPONSE"

    def test_json_array_rejected(self, client: ViesClient) -> None:
        with _vies_returning(_response([1, 2, 3])):
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("DE", "123456789")
        assert exc_info.value.code == "MALFORMED_RESPONSE"

    def test_missing_is_valid(self, client: ViesClient) -> None:
        with _vies_returning(_response({"userError": "VALID"})):
            with pytest.raises(RegistryError) as exc_info:
                client.check_vat("DE", "123456789")
        assert exc_info.value.code == "MALFORMED_RESPONSE"


# ---------------------------------------------------------------------------
# RegistryError
# ---------------------------------------------------------------------------


class TestRegistryError:
    def test_attributes(self) -> None:
        error = RegistryError("MS_UNAVAILABLE", "member state down", "IT")
        assert error.code == "MS_UNAVAILABLE"
        assert error.message == "member state down"
        assert error.country_code == "IT"

    def test_str_includes_code(self) -> None:
        assert "[TIMEOUT]" in str(RegistryError("TIMEOUT", "too slow"))
