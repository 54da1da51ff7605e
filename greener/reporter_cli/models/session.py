"""Models for session creation."""

from typing import Any

from pydantic import BaseModel, Field

from greener.reporter_cli.models.base import IngressModel


class Label(IngressModel):
    """A ``key`` or ``key=value`` tag attached to a session."""

    key: str = Field(..., min_length=1, description="Label key")
    value: str | None = Field(
        default=None, description="Label value, absent for key-only labels"
    )


class SessionRequest(IngressModel):
    """Request body for ``POST /api/v1/ingress/sessions``."""

    id: str | None = Field(
        default=None, description="Client-supplied ID, server-assigned if absent"
    )
    baggage: Any = Field(default=None, description="Free-form JSON metadata")
    labels: list[Label] | None = Field(default=None, description="Session labels")


class SessionResponse(BaseModel):
    """Response body of a successful session creation."""

    id: str = Field(..., description="Assigned or echoed session ID")
