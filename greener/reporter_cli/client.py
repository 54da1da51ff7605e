"""HTTP client for the Greener ingress API."""

import asyncio
import logging
from collections.abc import Mapping, Sequence

import aiohttp
from pydantic import ValidationError

from greener.reporter_cli.errors import (
    IngressRejectedError,
    IngressTransportError,
    InvalidInputError,
)
from greener.reporter_cli.models.error import ErrorResponse
from greener.reporter_cli.models.ingress_config import IngressConfig
from greener.reporter_cli.models.session import SessionRequest, SessionResponse
from greener.reporter_cli.models.testcase import TestcaseRequest, TestcasesRequest

logger = logging.getLogger(__name__)

SESSIONS_PATH = "/api/v1/ingress/sessions"
TESTCASES_PATH = "/api/v1/ingress/testcases"


class IngressClient:
    """Client for the session and testcase ingress endpoints."""

    def __init__(self, config: IngressConfig) -> None:
        """Initialize client with endpoint and API key."""
        self.config = config
        self.base_url = config.endpoint

    async def create_session(self, request: SessionRequest) -> str:
        """Create a session and return its ID.

        Args:
            request: Session to create; ``id`` may be omitted to let the
                server assign one

        Returns:
            The assigned or echoed session ID

        Raises:
            IngressTransportError: If the request could not be sent
            IngressRejectedError: If the server did not answer 201 with an ID

        """
        body = await self._post(SESSIONS_PATH, request.to_payload(), "session")

        try:
            response = SessionResponse.model_validate_json(body)
        except ValidationError as e:
            raise IngressRejectedError(
                201, None, f"failed to parse session response: {e}"
            ) from e

        logger.debug(f"Session created: {response.id}")
        return response.id

    async def create_testcases(self, testcases: Sequence[TestcaseRequest]) -> None:
        """Record one or more testcases in a single request.

        Raises:
            InvalidInputError: If no testcases were given
            IngressTransportError: If the request could not be sent
            IngressRejectedError: If the server did not answer 201

        """
        if not testcases:
            raise InvalidInputError("at least one testcase is required")

        payload = TestcasesRequest(testcases=list(testcases)).to_payload()
        await self._post(TESTCASES_PATH, payload, "testcases")
        logger.debug(f"Recorded {len(testcases)} testcase(s)")

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-Key": self.config.api_key,
        }

    async def _post(self, path: str, payload: Mapping[str, object], kind: str) -> str:
        """POST a JSON payload and return the body of a 201 response."""
        url = f"{self.base_url}{path}"
        logger.info(f"POST {url}")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    url, headers=self._headers(), json=payload
                ) as response:
                    status = response.status
                    text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise IngressTransportError(f"failed to send {kind} request: {e}") from e

        if status != 201:
            raise _rejection(kind, status, text)

        return text


def _rejection(kind: str, status: int, body: str) -> IngressRejectedError:
    """Build the error for a non-201 response, preferring the server detail."""
    try:
        detail: str | None = ErrorResponse.model_validate_json(body).detail
    except ValidationError:
        detail = None

    shown = detail if detail is not None else body
    return IngressRejectedError(
        status, detail, f"failed {kind} request ({status}): {shown}"
    )
