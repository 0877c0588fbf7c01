"""Typer application and entry point of the ``workos`` command-line tool.

A thin shell over the library, useful for poking at an environment from a
terminal::

    workos events list --event dsync.user.created --limit 10
    workos events list --after event_01H2GQNMQNH8VRXVR7AEYG9XCJ
    workos organizations list --domain example.com
    workos jwks

Each ``list`` command fetches exactly one page and reports the cursor for the
next one on stderr; re-run with ``--after`` to continue.

Connection settings come from ``--api-key`` / ``--client-id`` /
``--base-url`` or the ``WORKOS_*`` environment variables (see
:mod:`workos.config`).  :class:`~workos.exceptions.WorkOsError` failures
exit with the error's ``exit_code``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from workos import __version__
from workos.client import WorkOs
from workos.config import load_config
from workos.events import ListEventsParams
from workos.exceptions import WorkOsError
from workos.exit_codes import EXIT_GENERIC_FAILURE
from workos.models import ClientConfig, Order, PaginationParams
from workos.organizations import ListOrganizationsParams
from workos.output import OutputFormat, OutputManager, get_output, set_output

app = typer.Typer(
    name="workos",
    help="Command-line access to the WorkOS API.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)
events_app = typer.Typer(help="Events stream.", no_args_is_help=True)
organizations_app = typer.Typer(help="Organizations.", no_args_is_help=True)
app.add_typer(events_app, name="events")
app.add_typer(organizations_app, name="organizations")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"workos {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", help="API key, or env:VAR / file:PATH. Defaults to $WORKOS_API_KEY.",
    ),
    client_id: Optional[str] = typer.Option(
        None, "--client-id", help="Client ID. Defaults to $WORKOS_CLIENT_ID.",
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="API base URL. Defaults to $WORKOS_BASE_URL or https://api.workos.com.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Install the output manager and stash connection options for sub-commands."""
    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))
    if verbose:
        _configure_logging()

    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["client_id"] = client_id
    ctx.obj["base_url"] = base_url


def _configure_logging() -> None:
    """Route the library's ``logging`` records to stderr through Rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger = logging.getLogger("workos")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(handler)


def _create_client(config: ClientConfig) -> WorkOs:
    """Build the client used by commands.  Tests replace this to inject a transport."""
    return WorkOs(config)


@contextmanager
def _client(ctx: typer.Context) -> Iterator[WorkOs]:
    """Resolve config, open a client, and turn library errors into exit codes."""
    obj = ctx.find_root().obj or {}
    try:
        config = load_config(
            api_key=obj.get("api_key"),
            client_id=obj.get("client_id"),
            base_url=obj.get("base_url"),
        )
        get_output().debug(f"Using {config.base_url}")
        with _create_client(config) as workos:
            yield workos
    except WorkOsError as exc:
        get_output().error(str(exc))
        raise typer.Exit(exc.exit_code) from exc


def _pagination(
    order: Order, limit: Optional[int], after: Optional[str], before: Optional[str]
) -> PaginationParams:
    return PaginationParams(order=order, limit=limit, after=after, before=before)


# ------------------------------------------------------------------ #
# Commands
# ------------------------------------------------------------------ #


@events_app.command("list")
def list_events_command(
    ctx: typer.Context,
    event: Optional[list[str]] = typer.Option(
        None, "--event", "-e", help="Event type to include. Repeat for several.",
    ),
    organization_id: Optional[str] = typer.Option(None, "--organization-id"),
    range_start: Optional[str] = typer.Option(
        None, "--range-start", help="ISO-8601 start. Cannot be combined with --after.",
    ),
    range_end: Optional[str] = typer.Option(None, "--range-end", help="ISO-8601 end."),
    order: Order = typer.Option(Order.DESC, "--order"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, max=100),
    after: Optional[str] = typer.Option(None, "--after", help="Cursor from a previous page."),
    before: Optional[str] = typer.Option(None, "--before", help="Cursor from a previous page."),
) -> None:
    """List one page of events."""
    params = ListEventsParams(
        pagination=_pagination(order, limit, after, before),
        events=event or [],
        organization_id=organization_id,
        range_start=range_start,
        range_end=range_end,
    )
    with _client(ctx) as workos:
        page = workos.events().list_events(params)
    get_output().print_page(page, ["id", "event", "created_at"])


@organizations_app.command("list")
def list_organizations_command(
    ctx: typer.Context,
    domain: Optional[list[str]] = typer.Option(
        None, "--domain", "-d", help="Domain to filter by. Repeat for several.",
    ),
    order: Order = typer.Option(Order.DESC, "--order"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, max=100),
    after: Optional[str] = typer.Option(None, "--after"),
    before: Optional[str] = typer.Option(None, "--before"),
) -> None:
    """List one page of organizations."""
    params = ListOrganizationsParams(
        pagination=_pagination(order, limit, after, before),
        domains=domain or [],
    )
    with _client(ctx) as workos:
        page = workos.organizations().list_organizations(params)
    get_output().print_page(page, ["id", "name", "created_at"])


@app.command("jwks")
def jwks_command(ctx: typer.Context) -> None:
    """Print the JSON Web Key Set for the configured client ID."""
    with _client(ctx) as workos:
        key_set = workos.user_management().jwks()
    get_output().print_model(key_set)


def main() -> None:
    """Console-script entry point."""
    try:
        app()
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except WorkOsError as exc:
        get_output().error(str(exc))
        sys.exit(exc.exit_code)
    except Exception as exc:
        get_output().error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
