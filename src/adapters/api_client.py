"""Cliente base de la API.

Separa las tres fases de una llamada para que cada fallo tenga su error:
- `url`: resolver la ruta (RouteError)
- `new_request`: construir la request (RequestBuildError)
- `do`: enviar, comprobar el status y decodificar (TransportError, APIError, DecodeError)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeVar
from urllib.parse import urljoin

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_client
from adapters.router import route_path
from core.config import AppSettings
from core.errors import APIError, DecodeError, RequestBuildError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class APIResponse:
    """Metadata de la respuesta HTTP (para diagnóstico del llamador)."""

    method: str
    url: str
    status_code: int
    reason: str
    headers: httpx.Headers

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "APIResponse":
        return cls(
            method=response.request.method,
            url=str(response.request.url),
            status_code=response.status_code,
            reason=response.reason_phrase,
            headers=httpx.Headers(response.headers),
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text.strip()[:200]
    if isinstance(data, dict):
        for key in ("Error", "error", "message", "Message"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return ""


class APIClient:
    """Cliente síncrono sobre `httpx.Client`.

    Si no se inyecta `http_client`, se crea uno con `build_client` y el
    cliente lo cierra en `close()`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_http = http_client is None
        self._http = http_client or build_client(self._settings)

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url

    def url(self, route: str, route_vars: dict[str, str]) -> httpx.URL:
        """URL absoluta de una ruta."""

        return httpx.URL(urljoin(self.base_url, route_path(route, route_vars)))

    def new_request(self, method: str, url: httpx.URL | str) -> httpx.Request:
        try:
            return self._http.build_request(method, url)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise RequestBuildError(f"cannot build {method} {url}: {exc}") from exc

    def do(self, request: httpx.Request, model: type[ModelT]) -> tuple[ModelT, APIResponse]:
        """Envía la request y valida el cuerpo JSON contra `model`."""

        logger.debug("%s %s", request.method, request.url)
        try:
            raw = self._http.send(request)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(f"{request.method} {request.url}: {exc}") from exc

        response = APIResponse.from_httpx(raw)
        if not response.ok:
            logger.warning("%s %s -> HTTP %s", request.method, request.url, response.status_code)
            raise APIError(response, _error_message(raw))

        try:
            data = raw.json()
        except ValueError as exc:
            raise DecodeError(response, exc) from exc
        if data is None:
            raise DecodeError(response, "null body")

        try:
            return model.model_validate(data), response
        except ValidationError as exc:
            raise DecodeError(response, exc) from exc

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
