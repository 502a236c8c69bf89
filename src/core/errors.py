"""Errores del cliente.

Por qué una jerarquía propia:
- La CLI (y cualquier otro entrypoint) puede capturar `PersonDirError` sin
  conocer httpx ni pydantic.
- Cada fallo conserva su causa original (`raise ... from exc`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from adapters.api_client import APIResponse
    from core.domain.people import PersonSpec


class EmptyPersonSpecError(ValueError):
    """Se intentó codificar un `PersonSpec` sin email, login ni UID.

    Es un error de programación del llamador, no un fallo recuperable del
    servicio; por eso no hereda de `PersonDirError`.
    """

    def __init__(self) -> None:
        super().__init__("empty PersonSpec: set at least one of email, login or uid")


class PersonDirError(Exception):
    """Base de los errores recuperables del cliente."""


class InvalidPersonSpecError(PersonDirError, ValueError):
    """El path component no se pudo decodificar (p.ej. `$abc`)."""

    def __init__(self, text: str, spec: PersonSpec, reason: str) -> None:
        super().__init__(f"invalid PersonSpec {text!r}: {reason}")
        self.text = text
        self.spec = spec
        self.reason = reason


class RouteError(PersonDirError):
    """No se pudo construir la URL de una ruta."""


class RequestBuildError(PersonDirError):
    """No se pudo construir la request HTTP."""


class TransportError(PersonDirError):
    """Fallo de red/transporte (timeouts, DNS, conexión)."""


class APIError(PersonDirError):
    """La API respondió con un status fuera de 2xx."""

    def __init__(self, response: APIResponse, message: str = "") -> None:
        detail = f": {message}" if message else ""
        super().__init__(f"{response.method} {response.url}: HTTP {response.status_code}{detail}")
        self.response = response
        self.message = message


class DecodeError(PersonDirError):
    """El cuerpo de la respuesta no tiene la forma esperada."""

    def __init__(self, response: APIResponse, detail: Any) -> None:
        super().__init__(f"{response.method} {response.url}: cannot decode body: {detail}")
        self.response = response


class StatScanError(PersonDirError, TypeError):
    """Valor escalar de almacenamiento con tipo inesperado."""

    def __init__(self, value: object) -> None:
        super().__init__(f"PersonStatType scan failed: unexpected {type(value).__name__} value {value!r}")
        self.value = value


class InvalidStatTypeError(PersonDirError, ValueError):
    """Tag de estadística desconocido."""

    def __init__(self, value: str) -> None:
        super().__init__(f"unknown person stat type {value!r}")
        self.value = value
