"""Models for testcase reporting."""

from typing import Any, Literal, get_args

from pydantic import Field

from greener.reporter_cli.models.base import IngressModel

TestcaseStatus = Literal["pass", "fail", "error", "skip"]

TESTCASE_STATUSES: tuple[str, ...] = get_args(TestcaseStatus)


class TestcaseRequest(IngressModel):
    """A single testcase result."""

    session_id: str = Field(..., alias="sessionId", description="Owning session ID")
    testcase_name: str = Field(..., alias="testcaseName", description="Test name")
    testcase_classname: str | None = Field(
        default=None, alias="testcaseClassname", description="Test class name"
    )
    testcase_file: str | None = Field(
        default=None, alias="testcaseFile", description="Test file path"
    )
    testsuite: str | None = Field(default=None, description="Test suite name")
    status: TestcaseStatus = Field(default="pass", description="Test outcome")
    output: str | None = Field(default=None, description="Captured test output")
    baggage: Any = Field(default=None, description="Free-form JSON metadata")


class TestcasesRequest(IngressModel):
    """Request body for ``POST /api/v1/ingress/testcases``."""

    testcases: list[TestcaseRequest] = Field(
        ..., min_length=1, description="Testcases to record"
    )
