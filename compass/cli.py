from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, TypeVar

import httpx
import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from compass.auth import Authenticator
from compass.config import CompassConfig, Credentials
from compass.errors import AuthenticationError, CompassError
from compass.responses import parse_body, to_jsonable
from compass.sessions import SessionClient
from compass.utils import logger, retry, setup_logging

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    rich_markup_mode="rich",
    no_args_is_help=True,
    help="Fetch data from the Compass school portal, printed to stdout as JSON.",
)

LOGIN_RETRY_DELAY = 1.0


@dataclass
class CliState:
    """Settings collected by the top-level callback for sub-commands."""

    credentials: Optional[Credentials] = None
    config: CompassConfig = field(default_factory=CompassConfig)
    login_attempts: int = 1
    transport: Optional[httpx.BaseTransport] = None


def _fail(message: str) -> None:
    err_console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    host: str = typer.Option(
        ..., "-h", "--compass-host", envvar="COMPASS_HOST",
        help="The compass hostname for your school (eg. coburg-north-ps-vic.compass.education)",
    ),
    user: str = typer.Option(..., "-u", "--compass-user", envvar="COMPASS_USER", help="Your compass username"),
    password: str = typer.Option(
        ..., "-p", "--compass-pass", envvar="COMPASS_PASS", help="Your compass password",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with timeout/user_agent settings"),
    login_attempts: int = typer.Option(
        1, "--login-attempts", min=1, help="Login attempts before giving up (Cloudflare may reject the first)",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging"),
):
    setup_logging(verbose=verbose)

    state = ctx.ensure_object(CliState)
    state.login_attempts = login_attempts

    if config:
        try:
            state.config = CompassConfig.from_yaml(config)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            _fail(f"Invalid config file {escape(str(config))}: {escape(str(e))}")

    try:
        state.credentials = Credentials(hostname=host, username=user, password=password)
    except ValidationError as e:
        _fail(f"Invalid credentials: {escape(str(e))}")


def _login(state: CliState) -> SessionClient:
    authenticator = Authenticator(state.config, transport=state.transport)
    handle = retry(
        lambda: authenticator.authenticate(state.credentials),
        max_attempts=state.login_attempts,
        delay=LOGIN_RETRY_DELAY,
        retry_on=(AuthenticationError,),
    )
    return SessionClient(handle, state.config, transport=state.transport)


def _run(ctx: typer.Context, action: Callable[[SessionClient], T]) -> T:
    """Log in, run one read, and report any Compass error with its phase."""
    state = ctx.ensure_object(CliState)
    try:
        client = _login(state)
        return action(client)
    except CompassError as e:
        logger.debug(f"{e.phase.value} failed", exc_info=True)
        _fail(f"{e.phase.value} failed: {escape(str(e))}")


def _emit(body: str, pretty: bool) -> None:
    if not pretty:
        typer.echo(body)
        return
    try:
        data = parse_body(body)
    except ValueError:
        err_console.print("[yellow]Response is not JSON, printing raw body[/yellow]")
        typer.echo(body)
        return
    console.print_json(data=to_jsonable(data))


PrettyOption = typer.Option(False, "--pretty", help="Unwrap and pretty-print the JSON payload")


def get_personal_details(ctx: typer.Context, pretty: bool = PrettyOption):
    """Return JSON data on the current user."""
    _emit(_run(ctx, lambda client: client.fetch_personal_details()), pretty)


app.command("get-personal-details")(get_personal_details)
app.command("email-news")(get_personal_details)


@app.command("news-feed")
def news_feed(ctx: typer.Context, pretty: bool = PrettyOption):
    """Return JSON news feed."""
    _emit(_run(ctx, lambda client: client.get_news_feed()), pretty)


@app.command("get-messages")
def get_messages(ctx: typer.Context, pretty: bool = PrettyOption):
    """Return JSON messages."""
    _emit(_run(ctx, lambda client: client.get_messages()), pretty)


@app.command("pst-cycles")
def pst_cycles(ctx: typer.Context, pretty: bool = PrettyOption):
    """Return parent/teacher interview cycles."""
    _emit(_run(ctx, lambda client: client.get_pst_cycles()), pretty)


@app.command("check-parent-details")
def check_parent_details(ctx: typer.Context, pretty: bool = PrettyOption):
    """Return the parent details check result."""
    _emit(_run(ctx, lambda client: client.check_parent_details()), pretty)


@app.command("get-events-for-parent")
def get_events_for_parent(
    ctx: typer.Context,
    user_id: str = typer.Option(..., "--user-id", help="The id of a user"),
    limit: int = typer.Option(20, "--limit", min=1, help="Events per page"),
    page: int = typer.Option(1, "--page", min=1, help="Page to fetch"),
    pretty: bool = PrettyOption,
):
    """Return JSON data with events that a parent can see."""
    _emit(_run(ctx, lambda client: client.get_events_for_parent(user_id, limit=limit, page=page)), pretty)


@app.command("download-file")
def download_file(
    ctx: typer.Context,
    file_id: str = typer.Option(..., "--file-id", help="The id of a file"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write the file here instead of stdout"),
):
    """Download a single file."""
    data = _run(ctx, lambda client: client.download_file(file_id))

    if output:
        output.write_bytes(data)
        err_console.print(f"[green]Saved {len(data)} bytes to: {escape(str(output))}[/green]")
    else:
        typer.echo(data, nl=False)


if __name__ == "__main__":
    app()
