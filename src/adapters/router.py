"""Tabla de rutas de la API.

Cada ruta es una plantilla relativa a `AppSettings.api_base_url` con
variables `{Nombre}` que se sustituyen por segmentos ya codificados.
"""

from __future__ import annotations

import string
from urllib.parse import quote

from core.errors import RouteError

PERSON = "person"

ROUTES: dict[str, str] = {
    PERSON: "people/{PersonSpec}",
}

# `@` y `$` forman parte del formato de PersonSpec; `+` aparece en emails.
_SEGMENT_SAFE = "@$+"

# urljoin los resolvería como segmentos relativos.
_DOT_SEGMENTS = frozenset({".", ".."})


def route_path(route: str, route_vars: dict[str, str]) -> str:
    """Resuelve la ruta a un path relativo con los segmentos escapados."""

    template = ROUTES.get(route)
    if template is None:
        raise RouteError(f"unknown route {route!r}")

    needed = {name for _, name, _, _ in string.Formatter().parse(template) if name}
    missing = needed - route_vars.keys()
    if missing:
        raise RouteError(f"route {route!r} missing vars: {', '.join(sorted(missing))}")

    for name in needed:
        if not route_vars[name]:
            raise RouteError(f"route {route!r}: empty value for {name}")
        if route_vars[name] in _DOT_SEGMENTS:
            raise RouteError(f"route {route!r}: {route_vars[name]!r} is not a valid path segment")

    encoded = {name: quote(route_vars[name], safe=_SEGMENT_SAFE) for name in needed}
    return template.format(**encoded)
