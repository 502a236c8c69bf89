"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.api_client import APIResponse
from core.domain.people import Person, PersonSpec
from core.domain.stats import PersonStatType
from core.errors import EmptyPersonSpecError


def build_person_panel(person: Person, *, avatar_size: int | None = None) -> Panel:
    """Panel con los datos de una persona."""

    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column(style="white")
    table.add_row("Short name", Text(person.short_name))
    table.add_row("Full name", Text(person.full_name or "-"))
    table.add_row("Login", Text(person.login or "-"))
    table.add_row("Email", Text(person.email or "-"))
    table.add_row("UID", str(person.uid) if person.uid else "-")
    table.add_row("Profile", "yes" if person.has_profile else "no (transient)")
    avatar = person.avatar_url_of_size(avatar_size) if avatar_size else person.avatar_url
    table.add_row("Avatar", Text(avatar or "-"))

    title = Text(person.short_name, style="bold cyan")
    border = "cyan" if person.has_profile else "yellow"
    return Panel(table, title=title, border_style=border)


def build_response_line(response: APIResponse) -> Text:
    return Text(f"{response.method} {response.url} -> {response.status_code} {response.reason}", style="dim")


def build_spec_table(spec: PersonSpec) -> Table:
    """Tabla con el spec decodificado y su forma canónica."""

    table = Table(title="PersonSpec")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("email", Text(spec.email or "-"))
    table.add_row("login", Text(spec.login or "-"))
    table.add_row("uid", str(spec.uid) if spec.uid else "-")
    try:
        canonical = spec.path_component()
    except EmptyPersonSpecError:
        canonical = "(empty)"
    table.add_row("canonical", Text(canonical))
    return table


def build_stats_table() -> Table:
    table = Table(title="Person stat types")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")
    for stat in PersonStatType:
        table.add_row(stat.name, stat.value)
    return table
