"""Contrato del servicio de personas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP por un doble en tests o por otra
  fuente (caché, fixture local) sin acoplar la CLI a httpx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.domain.people import Person, PersonSpec

if TYPE_CHECKING:
    from adapters.api_client import APIResponse


@runtime_checkable
class PeopleService(Protocol):
    """Contrato mínimo para consultar personas.

    Reglas de diseño:
    - `get` es síncrono: una sola request por llamada, sin reintentos.
    - Devuelve la persona junto con la metadata de la respuesta HTTP.
    """

    def get(self, spec: PersonSpec) -> tuple[Person, APIResponse]:
        """Obtiene una persona.

        Si se pasa un email que corresponde a un usuario registrado, se
        devuelve ese usuario; si no, la API devuelve una persona transitoria.
        """

        ...
