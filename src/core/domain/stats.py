"""Estadísticas por persona.

Por qué un Enum cerrado:
- Los tags válidos son un conjunto fijo; validar en el borde (almacenamiento,
  JSON) evita arrastrar strings arbitrarios por el resto del código.
"""

from __future__ import annotations

from enum import Enum

from pydantic import RootModel

from core.errors import InvalidStatTypeError, StatScanError


class PersonStatType(str, Enum):
    """Categoría de una métrica contable asociada a una persona."""

    AUTHORS = "authors"
    CLIENTS = "clients"
    OWNED_REPOS = "owned-repos"
    CONTRIBUTED_TO_REPOS = "contributed-to-repos"
    DEPENDENCIES = "dependencies"
    DEPENDENTS = "dependents"
    DEFS = "defs"
    EXPORTED_DEFS = "exported-defs"

    def to_db_value(self) -> str:
        """Valor escalar para la capa de almacenamiento."""

        return self.value

    @classmethod
    def from_db_value(cls, value: object) -> "PersonStatType":
        """Decodifica el valor escalar leído del almacenamiento.

        Acepta bytes (UTF-8) o str; cualquier otro tipo es `StatScanError`.
        """

        if isinstance(value, (bytes, bytearray)):
            try:
                text = bytes(value).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidStatTypeError(repr(bytes(value))) from exc
        elif isinstance(value, str):
            text = value
        else:
            raise StatScanError(value)
        try:
            return cls(text)
        except ValueError as exc:
            raise InvalidStatTypeError(text) from exc


class PersonStats(RootModel[dict[PersonStatType, int]]):
    """Conteos por tag de estadística."""

    def count(self, stat: PersonStatType) -> int:
        return self.root.get(stat, 0)

    def __len__(self) -> int:
        return len(self.root)
