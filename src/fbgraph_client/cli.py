"""Command-line interface for calling the Facebook Graph API."""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import os
import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install fbgraph-python[cli]' to enable this command."
    ) from exc

from . import GraphClient
from .auth.credentials import Credentials
from .auth.tokens import AccessToken, AppAccessToken, UserAccessToken
from .exceptions import FacebookException, GraphError
from .simple_types import Argument

app = typer.Typer(help="Facebook Graph API CLI.", no_args_is_help=True)


def _build_client(
    client_id: str | None,
    client_secret: str | None,
    app_namespace: str | None,
    verify_ssl: bool,
    timeout: float,
) -> GraphClient:
    credentials = None
    if client_id or client_secret:
        if not (client_id and client_secret):
            raise typer.BadParameter("--client-id and --client-secret must be given together.")
        credentials = Credentials(client_id=client_id, client_secret=client_secret)
    return GraphClient(
        credentials,
        app_namespace=app_namespace,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )


def _build_token(token: str | None, token_kind: str) -> AccessToken | None:
    kind = token_kind.lower()
    if kind not in {"user", "app"}:
        raise typer.BadParameter("--token-kind must be either 'user' or 'app'.")
    if not token:
        return None
    if kind == "app":
        return AppAccessToken(token=token)
    return UserAccessToken(token=token)


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(title: str, rows: Sequence[Mapping[str, Any]]) -> None:
    columns: list[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    table = Table(
        title=title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(_render_cell(row.get(column)) for column in columns))
    console.print(table)


def _render_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (Mapping, list)):
        return json.dumps(value)
    return str(value)


def _present_output(payload: Any, *, title: str, json_output: bool) -> None:
    if json_output or not isinstance(payload, Mapping):
        _echo_json(payload)
        return
    data = payload.get("data")
    if not isinstance(data, list):
        _echo_json(payload)
        return
    rows = [item for item in data if isinstance(item, Mapping)]
    if not rows:
        _echo_json(payload)
        return
    _render_rich_table(title, rows)


def _handle_graph_error(exc: GraphError) -> None:
    if isinstance(exc, FacebookException):
        message = f"Facebook error {exc.type}: {exc.message}"
    elif exc.status_code is not None:
        message = f"Request failed (status {exc.status_code}): {exc}"
        if exc.details:
            message += f"\nDetails: {exc.details}"
    else:
        message = str(exc)
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _parse_arguments(values: Sequence[str]) -> list[Argument]:
    arguments: list[Argument] = []
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"--arg expects key=value, got {item!r}.")
        arguments.append(Argument(key.strip(), value))
    return arguments


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    # Respect FBGRAPH_VERIFY_SSL environment variable when present.
    env_verify = os.getenv("FBGRAPH_VERIFY_SSL")
    if env_verify is None:
        default_verify = True
    else:
        default_verify = env_verify.strip().lower() not in {"0", "false", "no", "off"}

    return {
        "token": typer.Option(
            None,
            "--token",
            "-t",
            envvar="FBGRAPH_ACCESS_TOKEN",
            help="Access token to send with the request.",
        ),
        "token_kind": typer.Option(
            "user",
            "--token-kind",
            case_sensitive=False,
            help="Kind of the access token (user or app).",
        ),
        "client_id": typer.Option(
            None,
            "--client-id",
            envvar="FBGRAPH_CLIENT_ID",
            help="Application id.",
        ),
        "client_secret": typer.Option(
            None,
            "--client-secret",
            envvar="FBGRAPH_CLIENT_SECRET",
            help="Application secret.",
            hide_input=True,
        ),
        "app_namespace": typer.Option(
            None,
            "--app-namespace",
            envvar="FBGRAPH_APP_NAMESPACE",
            help="Application namespace used for Open Graph actions.",
        ),
        "verify_ssl": typer.Option(
            default_verify,
            "--verify/--no-verify",
            envvar="FBGRAPH_VERIFY_SSL",
            help="Enable or disable TLS certificate verification.",
            show_default=True,
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_SHARED_OPTIONS = _shared_options()


@app.command("get")
def get_object(
    path: str = typer.Argument(..., help="Object id or connection path, e.g. me/friends."),
    field: list[str] = typer.Option([], "--field", "-f", help="Field to request (repeatable)."),
    token: str | None = _SHARED_OPTIONS["token"],
    token_kind: str = _SHARED_OPTIONS["token_kind"],
    client_id: str | None = _SHARED_OPTIONS["client_id"],
    client_secret: str | None = _SHARED_OPTIONS["client_secret"],
    app_namespace: str | None = _SHARED_OPTIONS["app_namespace"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Fetch an object or connection from the graph."""

    access_token = _build_token(token, token_kind)
    with _build_client(client_id, client_secret, app_namespace, verify_ssl, timeout) as client:
        try:
            payload = client.objects.get(path.strip("/"), token=access_token, fields=field or None)
        except GraphError as exc:
            _handle_graph_error(exc)
            return
    _present_output(payload, title=path, json_output=output_json)


@app.command("check")
def check_path(
    path: str = typer.Argument(..., help="Object id or path to check."),
    token: str | None = _SHARED_OPTIONS["token"],
    token_kind: str = _SHARED_OPTIONS["token_kind"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Exit with 0 when a HEAD request to PATH succeeds, 1 otherwise."""

    access_token = _build_token(token, token_kind)
    with _build_client(None, None, None, verify_ssl, timeout) as client:
        available = client.check(path, token=access_token)
    typer.echo("available" if available else "unavailable")
    if not available:
        raise typer.Exit(code=1)


@app.command("app-token")
def app_token(
    client_id: str | None = _SHARED_OPTIONS["client_id"],
    client_secret: str | None = _SHARED_OPTIONS["client_secret"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Print an app access token obtained with the app credentials."""

    if not client_id or not client_secret:
        raise typer.BadParameter("--client-id and --client-secret are required.")
    with _build_client(client_id, client_secret, None, verify_ssl, timeout) as client:
        try:
            token = client.get_app_access_token()
        except GraphError as exc:
            _handle_graph_error(exc)
            return
    _echo_json(
        {
            "access_token": token.token,
            "expires": token.expires.isoformat() if token.expires else None,
        }
    )


@app.command("create-action")
def create_action(
    action: str = typer.Argument(..., help="Open Graph action name, e.g. cook."),
    arg: list[str] = typer.Option([], "--arg", help="Action argument in key=value form."),
    token: str | None = _SHARED_OPTIONS["token"],
    app_namespace: str | None = _SHARED_OPTIONS["app_namespace"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Publish an Open Graph action with a user access token."""

    if not token:
        raise typer.BadParameter("--token is required to create actions.")
    arguments = _parse_arguments(arg)
    with _build_client(None, None, app_namespace, verify_ssl, timeout) as client:
        try:
            action_id = client.opengraph.create_action(action, arguments, UserAccessToken(token=token))
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        except GraphError as exc:
            _handle_graph_error(exc)
            return
    _echo_json({"id": action_id})
