"""CLI de persondir (Typer + Rich).

Comandos:
- `get`: consulta una persona por email, login o `$uid`
- `parse`: decodifica un path component sin tocar la red
- `stats`: lista los tags de estadística
- `doctor`: diagnóstico y configuración
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import export_person_json, person_to_json
from adapters.people_service import HTTPPeopleService
from cli import doctor
from cli.ui_components import build_person_panel, build_response_line, build_spec_table, build_stats_table
from core.config import AppSettings
from core.domain.people import PersonSpec, parse_person_spec
from core.errors import EmptyPersonSpecError, InvalidPersonSpecError, PersonDirError
from core.interfaces.people import PeopleService

app = typer.Typer(no_args_is_help=True, help="Look up people (users and commit authors) in the API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=False)],
    )


def build_service(settings: AppSettings) -> PeopleService:
    return HTTPPeopleService(settings=settings)


def _parse_spec_argument(text: str) -> PersonSpec:
    try:
        spec = parse_person_spec(text)
        spec.path_component()
    except (InvalidPersonSpecError, EmptyPersonSpecError) as exc:
        raise typer.BadParameter(str(exc), param_hint="SPEC") from exc
    return spec


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Person directory client."""

    level = "DEBUG" if verbose else AppSettings().log_level
    setup_logging(level)


@app.command()
def get(
    spec: str = typer.Argument(..., help="Email, login or $UID of the person."),
    as_json: bool = typer.Option(False, "--json", help="Print the person as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the person as JSON to this file."),
    avatar_size: int | None = typer.Option(None, "--avatar-size", min=1, help="Show the avatar URL for this width."),
) -> None:
    """Fetch a person profile."""

    person_spec = _parse_spec_argument(spec)
    service = build_service(AppSettings())
    try:
        person, response = service.get(person_spec)
    except PersonDirError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    finally:
        close = getattr(service, "close", None)
        if callable(close):
            close()

    if output is not None:
        path = export_person_json(person=person, output_path=output)
        _console.print(f"[green]Saved:[/green] {escape(str(path))}")

    if as_json:
        typer.echo(person_to_json(person), nl=False)
        return

    _console.print(build_person_panel(person, avatar_size=avatar_size))
    _console.print(build_response_line(response))


@app.command()
def parse(text: str = typer.Argument(..., help="Path component to decode.")) -> None:
    """Decode a person path component (no network)."""

    try:
        spec = parse_person_spec(text)
    except InvalidPersonSpecError as exc:
        raise typer.BadParameter(str(exc), param_hint="TEXT") from exc
    _console.print(build_spec_table(spec))


@app.command()
def stats() -> None:
    """List the person stat types."""

    _console.print(build_stats_table())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
