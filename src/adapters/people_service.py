"""Servicio de personas sobre la API HTTP.

Implementa `core.interfaces.people.PeopleService` con una única request
GET por llamada; no hay caché ni reintentos.
"""

from __future__ import annotations

import logging

from adapters import router
from adapters.api_client import APIClient, APIResponse
from core.config import AppSettings
from core.domain.people import Person, PersonSpec

logger = logging.getLogger(__name__)


class HTTPPeopleService:
    """Consulta personas contra la ruta `person` de la API."""

    def __init__(self, client: APIClient | None = None, settings: AppSettings | None = None) -> None:
        self._owns_client = client is None
        self._client = client or APIClient(settings)

    def get(self, spec: PersonSpec) -> tuple[Person, APIResponse]:
        """Obtiene una persona.

        Si el email corresponde a un usuario registrado se devuelve ese
        usuario; si no, la API crea y devuelve una persona transitoria.
        """

        url = self._client.url(router.PERSON, spec.route_vars())
        request = self._client.new_request("GET", url)
        person, response = self._client.do(request, Person)
        logger.info("resolved %s -> %s (transient=%s)", spec, person.short_name, person.transient)
        return person, response

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPPeopleService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
