"""Model for error bodies returned by the ingress API."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned on a non-created status."""

    detail: str = Field(..., description="Human-readable error detail")
