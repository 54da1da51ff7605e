"""Tests for testcase models."""

import pytest
from pydantic import ValidationError

from greener.reporter_cli.models import (
    TESTCASE_STATUSES,
    TestcaseRequest,
    TestcasesRequest,
)

SESSION_ID = "11111111-1111-1111-1111-111111111111"


def test_testcase_minimal_payload() -> None:
    """TestcaseRequest omits unset optional fields and uses camelCase."""
    testcase = TestcaseRequest(session_id=SESSION_ID, testcase_name="t1")
    assert testcase.to_payload() == {
        "sessionId": SESSION_ID,
        "testcaseName": "t1",
        "status": "pass",
    }


def test_testcase_full_payload() -> None:
    """TestcaseRequest serializes every field under its wire name."""
    testcase = TestcaseRequest(
        session_id=SESSION_ID,
        testcase_name="test_login",
        testcase_classname="AuthTests",
        testcase_file="tests/test_auth.py",
        testsuite="AuthenticationTests",
        status="fail",
        output="boom",
        baggage={"retries": 0},
    )
    assert testcase.to_payload() == {
        "sessionId": SESSION_ID,
        "testcaseName": "test_login",
        "testcaseClassname": "AuthTests",
        "testcaseFile": "tests/test_auth.py",
        "testsuite": "AuthenticationTests",
        "status": "fail",
        "output": "boom",
        "baggage": {"retries": 0},
    }


def test_testcase_accepts_wire_names() -> None:
    """TestcaseRequest can be built from its camelCase wire form."""
    testcase = TestcaseRequest.model_validate(
        {"sessionId": SESSION_ID, "testcaseName": "t1", "status": "skip"}
    )
    assert testcase.session_id == SESSION_ID
    assert testcase.status == "skip"


def test_testcase_rejects_invalid_status() -> None:
    """TestcaseRequest rejects statuses outside the allowed set."""
    with pytest.raises(ValidationError) as exc_info:
        TestcaseRequest(
            session_id=SESSION_ID,
            testcase_name="t1",
            status="Pass",  # type: ignore[arg-type]
        )
    assert "status" in str(exc_info.value)


def test_testcase_statuses() -> None:
    """The allowed statuses are exactly pass, fail, error and skip."""
    assert TESTCASE_STATUSES == ("pass", "fail", "error", "skip")


def test_testcases_request_wraps_sequence() -> None:
    """TestcasesRequest wraps testcases in a list under 'testcases'."""
    request = TestcasesRequest(
        testcases=[
            TestcaseRequest(session_id=SESSION_ID, testcase_name="a"),
            TestcaseRequest(session_id=SESSION_ID, testcase_name="b", status="error"),
        ]
    )
    payload = request.to_payload()
    assert [tc["testcaseName"] for tc in payload["testcases"]] == ["a", "b"]
    assert payload["testcases"][1]["status"] == "error"
    assert "output" not in payload["testcases"][0]


def test_testcases_request_requires_one() -> None:
    """TestcasesRequest rejects an empty list."""
    with pytest.raises(ValidationError):
        TestcasesRequest(testcases=[])
