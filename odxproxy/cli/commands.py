"""CLI commands for odxproxy.

Ad-hoc calls against the gateway using the same request builder as the
library: `odxproxy execute search_read res.partner --params '[[["is_company", "=", true]]]'`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from odxproxy import __version__
from odxproxy.actions import ACTIONS, get_action
from odxproxy.cli.shared.input_utils import parse_json_option
from odxproxy.cli.shared.logging_utils import configure_console_logging, ensure_rotating_log_file
from odxproxy.client import OdxProxyClient
from odxproxy.config.loader import get_config_path, load_config
from odxproxy.errors import ConfigError, OdxTransportError, redact
from odxproxy.operations import build_request
from odxproxy.schema import ServerResponse

app = typer.Typer(
    name="odxproxy",
    help="odxproxy - call Odoo models through the ODX proxy gateway",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"odxproxy v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """odxproxy command line."""


def _load_client(config: Path | None) -> OdxProxyClient:
    try:
        settings = load_config(config)
        return OdxProxyClient(settings.to_client_info())
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc.message}")
        raise typer.Exit(2)


async def _submit(client: OdxProxyClient, action: str, model: str, params: list[Any], keyword: dict[str, Any],
                  fn_name: str | None, request_id: str | None) -> ServerResponse:
    request = build_request(
        action, model, params, keyword, fn_name=fn_name, request_id=request_id, client=client
    )
    return await client.submit(request)


@app.command("execute")
def execute(
    action: str = typer.Argument(..., help="Action name, e.g. search_read, create, call_method"),
    model: str = typer.Argument(..., help="Model in dot notation, e.g. res.partner"),
    params: str = typer.Option(None, "--params", "-p", help="Positional params as JSON list"),
    keyword: str = typer.Option(None, "--keyword", "-k", help="Keyword options as JSON object"),
    tz: str = typer.Option("UTC", "--tz", help="Context timezone when --keyword has no context"),
    fn_name: str = typer.Option(None, "--fn-name", help="Method name for call_method"),
    request_id: str = typer.Option(None, "--id", help="Request id (default: generated ULID)"),
    config: Path = typer.Option(None, "--config", "-c", help="Config file (default ~/.odxproxy/config.json)"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging to stderr"),
    log_file: bool = typer.Option(False, "--log-file", help="Also log to ~/.odxproxy/logs/execute.log"),
) -> None:
    """Send one request to the gateway and print the response."""
    configure_console_logging(verbose)
    if log_file:
        ensure_rotating_log_file("execute", level="DEBUG" if verbose else "INFO")
    try:
        spec = get_action(action)
        params_value = parse_json_option(params, default=[], option="--params")
        keyword_value = parse_json_option(keyword, default={}, option="--keyword")
    except (KeyError, ValueError) as exc:
        err_console.print(f"[red]Error:[/red] {exc.args[0] if exc.args else exc}")
        raise typer.Exit(2)
    if not isinstance(params_value, list):
        err_console.print("[red]Error:[/red] --params must be a JSON list")
        raise typer.Exit(2)
    if not isinstance(keyword_value, dict):
        err_console.print("[red]Error:[/red] --keyword must be a JSON object")
        raise typer.Exit(2)
    keyword_value.setdefault("context", {"tz": tz})
    if spec.requires_fn_name and not fn_name:
        err_console.print(f"[yellow]Warning:[/yellow] {spec.name} sent without --fn-name")

    client = _load_client(config)
    try:
        response = asyncio.run(
            _submit(client, spec.name, model, params_value, keyword_value, fn_name, request_id)
        )
    except OdxTransportError as exc:
        err_console.print(f"[red]Transport error ({exc.kind.value}):[/red]")
        err_console.print_json(data=exc.to_dict())
        raise typer.Exit(1)
    console.print_json(data=response.model_dump(mode="json", exclude_none=False))


@app.command("config")
def show_config(
    config: Path = typer.Option(None, "--config", "-c", help="Config file (default ~/.odxproxy/config.json)"),
) -> None:
    """Show the resolved configuration with secrets redacted."""
    path = config or get_config_path()
    try:
        settings = load_config(config)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc.message}")
        raise typer.Exit(2)
    console.print(f"Config: {path} {'[green]✓[/green]' if path.exists() else '[dim]not found[/dim]'}")
    console.print(f"Gateway: {settings.gateway_url}")
    console.print(f"Timeout: {settings.timeout}s")
    console.print(f"Proxy API key: {redact(settings.odx_api_key) or '[dim]not set[/dim]'}")
    console.print(f"Instance URL: {settings.instance.url or '[dim]not set[/dim]'}")
    console.print(f"Instance DB: {settings.instance.db or '[dim]not set[/dim]'}")
    console.print(f"Instance user: {settings.instance.user_id or '[dim]not set[/dim]'}")
    console.print(f"Instance API key: {redact(settings.instance.api_key) or '[dim]not set[/dim]'}")
    missing = settings.missing_fields()
    if missing:
        console.print(f"[yellow]Missing:[/yellow] {', '.join(missing)}")


@app.command("actions")
def list_actions() -> None:
    """List supported actions and the keyword options each one keeps."""
    table = Table(title="Actions")
    table.add_column("Action", style="cyan")
    table.add_column("Wire action")
    table.add_column("Selection options")
    table.add_column("Description", style="dim")
    for spec in ACTIONS.values():
        kept = ", ".join(sorted(spec.allowed_selection_keys)) or "-"
        if spec.requires_fn_name:
            kept += " (+fn_name)"
        table.add_row(spec.name, spec.wire_action, kept, spec.description)
    console.print(table)


if __name__ == "__main__":
    app()
