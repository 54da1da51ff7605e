"""Parse and validate raw command-line values into request fields."""

import json
import re
from collections.abc import Sequence
from typing import Any, cast

from greener.reporter_cli.errors import InvalidInputError
from greener.reporter_cli.models.session import Label
from greener.reporter_cli.models.testcase import TESTCASE_STATUSES, TestcaseStatus

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def parse_labels(raw_labels: Sequence[str] | None) -> list[Label] | None:
    """Parse ``key`` / ``key=value`` strings into labels.

    Args:
        raw_labels: Label strings in command-line order

    Returns:
        Labels in input order, or None when no labels were given

    Raises:
        InvalidInputError: If a key is empty or appears more than once

    """
    if not raw_labels:
        return None

    labels: list[Label] = []
    seen: set[str] = set()

    for raw in raw_labels:
        key, sep, value = raw.partition("=")

        if not key:
            raise InvalidInputError("label key cannot be empty")

        if key in seen:
            raise InvalidInputError(f"duplicate label key: {key}")
        seen.add(key)

        labels.append(Label(key=key, value=value if sep else None))

    return labels


def parse_baggage(raw_baggage: str | None) -> Any:
    """Parse a baggage JSON string.

    Any JSON value is accepted. An empty string means no baggage and
    returns None.

    Raises:
        InvalidInputError: If the string is not valid JSON

    """
    if not raw_baggage:
        return None

    try:
        return json.loads(raw_baggage, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidInputError(f"invalid baggage JSON: {e}") from e


def _reject_constant(name: str) -> Any:
    """Refuse the NaN/Infinity extensions Python's json accepts."""
    raise ValueError(f"{name} is not a valid JSON value")


def validate_status(raw_status: str) -> TestcaseStatus:
    """Check a status against the allowed values (case-sensitive)."""
    if raw_status not in TESTCASE_STATUSES:
        raise InvalidInputError(
            f"invalid status: {raw_status}. "
            f"Valid values: {', '.join(TESTCASE_STATUSES)}"
        )
    return cast(TestcaseStatus, raw_status)


def validate_session_id(raw_session_id: str) -> str:
    """Check that a session ID is a UUID in canonical dashed form."""
    if not _UUID_PATTERN.fullmatch(raw_session_id):
        raise InvalidInputError(
            f"invalid session ID format: {raw_session_id!r} is not a UUID"
        )
    return raw_session_id


def require(value: str | None, flag: str) -> str:
    """Return ``value`` or fail naming the missing ``--flag``."""
    if not value:
        raise InvalidInputError(f"--{flag} is required")
    return value
