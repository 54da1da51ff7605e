"""CLI entry point for the Greener reporter."""

import asyncio
import logging
import sys

import typer

from greener.reporter_cli.client import IngressClient
from greener.reporter_cli.config import ENV_API_KEY, ENV_ENDPOINT, resolve_config
from greener.reporter_cli.errors import (
    ConfigurationError,
    IngressRejectedError,
    IngressTransportError,
    InvalidInputError,
)
from greener.reporter_cli.models.session import SessionRequest
from greener.reporter_cli.models.testcase import TestcaseRequest
from greener.reporter_cli.parsers import (
    parse_baggage,
    parse_labels,
    require,
    validate_session_id,
    validate_status,
)

# Logs go to stderr so stdout only carries the result line
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="CLI tool for Greener reporting", no_args_is_help=True)
create_app = typer.Typer(help="Create results", no_args_is_help=True)
app.add_typer(create_app, name="create")


@app.callback()
def main(
    ctx: typer.Context,
    endpoint: str = typer.Option(
        "", "--endpoint", envvar=ENV_ENDPOINT, help="Greener ingress endpoint URL"
    ),
    api_key: str = typer.Option(
        "", "--api-key", envvar=ENV_API_KEY, help="API key for authentication"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
) -> None:
    """Report test sessions and testcases to Greener."""
    if verbose:
        logging.getLogger("greener").setLevel(logging.DEBUG)
    ctx.obj = {"endpoint": endpoint, "api_key": api_key}


@create_app.command("session")
def create_session(
    ctx: typer.Context,
    session_id: str = typer.Option("", "--id", help="ID for the session"),
    labels: list[str] | None = typer.Option(  # noqa: B008
        None, "--label", help="Labels in `key` or `key=value` format"
    ),
    baggage: str = typer.Option("", "--baggage", help="Additional metadata as JSON"),
) -> None:
    """Create session."""
    try:
        config = resolve_config(ctx.obj["endpoint"], ctx.obj["api_key"])
        request = SessionRequest(
            id=session_id or None,
            baggage=parse_baggage(baggage),
            labels=parse_labels(labels),
        )
    except (ConfigurationError, InvalidInputError) as e:
        logger.debug(f"Rejected session input: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    client = IngressClient(config)

    try:
        created_id = asyncio.run(client.create_session(request))
    except (IngressTransportError, IngressRejectedError) as e:
        logger.debug(f"Session creation failed: {e}")
        typer.echo(f"Failed to create session: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created session ID: {created_id}")


@create_app.command("testcase")
def create_testcase(
    ctx: typer.Context,
    session_id: str = typer.Option(
        "", "--session-id", help="Session ID for the test case"
    ),
    name: str = typer.Option("", "--name", help="Name of the test case"),
    status: str = typer.Option(
        "pass", "--status", help="Test case status (pass, fail, error, skip)"
    ),
    classname: str = typer.Option(
        "", "--classname", help="Class name of the test case"
    ),
    file: str = typer.Option("", "--file", help="File path of the test case"),
    testsuite: str = typer.Option("", "--testsuite", help="Test suite name"),
    output: str = typer.Option("", "--output", help="Output from the test case"),
    baggage: str = typer.Option("", "--baggage", help="Additional metadata as JSON"),
) -> None:
    """Create test case."""
    try:
        config = resolve_config(ctx.obj["endpoint"], ctx.obj["api_key"])
        testcase = TestcaseRequest(
            session_id=validate_session_id(require(session_id, "session-id")),
            testcase_name=require(name, "name"),
            status=validate_status(status),
            testcase_classname=classname or None,
            testcase_file=file or None,
            testsuite=testsuite or None,
            output=output or None,
            baggage=parse_baggage(baggage),
        )
    except (ConfigurationError, InvalidInputError) as e:
        logger.debug(f"Rejected testcase input: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    client = IngressClient(config)

    try:
        asyncio.run(client.create_testcases([testcase]))
    except (IngressTransportError, IngressRejectedError) as e:
        logger.debug(f"Testcase reporting failed: {e}")
        typer.echo(f"Failed to create testcase: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Successfully reported testcase")


if __name__ == "__main__":  # pragma: no cover
    app()
