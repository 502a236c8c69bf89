"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import build_client
from core.config import ENV_PREFIX, AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(settings.api_base_url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="persondir Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base URL", "OK", escape(settings.api_base_url))
    if settings.api_token:
        table.add_row("API token", "OK", "Authenticated requests")
    else:
        table.add_row("API token", "OPTIONAL", "No token set -> anonymous requests")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", escape(detail_http))

    _console.print(table)

    if not ok_http:
        _console.print(
            f"\n[yellow]Note:[/yellow] Check {ENV_PREFIX}API_BASE_URL or run `persondir doctor setup`."
        )
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive API setup (stores config in the user config .env)."""

    current = AppSettings()
    base_url = typer.prompt("API base URL", default=current.api_base_url, show_default=True).strip()
    token = typer.prompt("API token (empty for none)", default="", hide_input=True, show_default=False).strip()

    if not base_url:
        raise typer.BadParameter("base URL is required")

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}API_BASE_URL": base_url,
            f"{ENV_PREFIX}API_TOKEN": token or None,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {escape(str(env_path))}")
