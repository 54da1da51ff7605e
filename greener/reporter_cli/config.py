"""Resolve ingress connection settings from flags and environment."""

from greener.reporter_cli.errors import ConfigurationError
from greener.reporter_cli.models.ingress_config import IngressConfig

ENV_ENDPOINT = "GREENER_INGRESS_ENDPOINT"
ENV_API_KEY = "GREENER_INGRESS_API_KEY"


def resolve_config(endpoint: str | None, api_key: str | None) -> IngressConfig:
    """Build an IngressConfig from already-merged flag/environment values.

    Raises:
        ConfigurationError: If the endpoint or API key is missing or blank

    """
    return IngressConfig(
        endpoint=_require_setting(endpoint, "endpoint", ENV_ENDPOINT),
        api_key=_require_setting(api_key, "api-key", ENV_API_KEY),
    )


def _require_setting(value: str | None, flag: str, env_var: str) -> str:
    if value is None or not value.strip():
        raise ConfigurationError(
            f"--{flag} is required (or set {env_var} environment variable)"
        )
    return value
