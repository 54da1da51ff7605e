"""Tests for configuration resolution."""

import pytest

from greener.reporter_cli.config import resolve_config
from greener.reporter_cli.errors import ConfigurationError


def test_resolve_config_success() -> None:
    """resolve_config builds an IngressConfig from both settings."""
    config = resolve_config("http://localhost:8000/", "secret")
    assert config.endpoint == "http://localhost:8000"
    assert config.api_key == "secret"


def test_resolve_config_keeps_api_key_verbatim() -> None:
    """resolve_config sends the API key exactly as given."""
    config = resolve_config(" http://localhost:8000 ", " secret ")
    assert config.endpoint == "http://localhost:8000"
    assert config.api_key == " secret "


@pytest.mark.parametrize("endpoint", [None, "", "   "])
def test_resolve_config_missing_endpoint(endpoint: str | None) -> None:
    """resolve_config names the endpoint flag and environment variable."""
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_config(endpoint, "secret")
    assert str(exc_info.value) == (
        "--endpoint is required (or set GREENER_INGRESS_ENDPOINT environment variable)"
    )


def test_resolve_config_missing_api_key() -> None:
    """resolve_config names the api-key flag and environment variable."""
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_config("http://localhost:8000", "")
    assert str(exc_info.value) == (
        "--api-key is required (or set GREENER_INGRESS_API_KEY environment variable)"
    )
