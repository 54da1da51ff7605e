"""Connection settings for the ingress API."""

from pydantic import BaseModel, Field, field_validator


class IngressConfig(BaseModel):
    """Endpoint and credentials used for every ingress request."""

    endpoint: str = Field(..., min_length=1, description="Ingress base URL")
    api_key: str = Field(..., min_length=1, description="Key sent as X-API-Key")

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")
