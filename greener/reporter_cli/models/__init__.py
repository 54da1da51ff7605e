"""Data models for ingress requests, responses, and configuration."""

from greener.reporter_cli.models.error import ErrorResponse
from greener.reporter_cli.models.ingress_config import IngressConfig
from greener.reporter_cli.models.session import (
    Label,
    SessionRequest,
    SessionResponse,
)
from greener.reporter_cli.models.testcase import (
    TESTCASE_STATUSES,
    TestcaseRequest,
    TestcasesRequest,
    TestcaseStatus,
)

__all__ = [
    "TESTCASE_STATUSES",
    "ErrorResponse",
    "IngressConfig",
    "Label",
    "SessionRequest",
    "SessionResponse",
    "TestcaseRequest",
    "TestcaseStatus",
    "TestcasesRequest",
]
