"""Personas y su identificador (Pydantic v2).

Por qué aquí:
- `PersonSpec` es el contrato de identificación de una persona en la API:
  se serializa a un único segmento de URL y se vuelve a parsear.
- `Person` es el valor devuelto por la API; es inmutable y se construye
  de nuevo en cada consulta.

Formato del segmento (`path_component`):
- `$<uid>`  -> UID numérico
- `a@b.com` -> email (contiene `@`)
- `alice`   -> login
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import AliasChoices, BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.errors import EmptyPersonSpecError, InvalidPersonSpecError

UID_PREFIX = "$"
ANONYMOUS_SHORT_NAME = "(anonymous)"
ROUTE_VAR = "PersonSpec"

_UID_PATTERN = re.compile(r"[+-]?[0-9]+")


class PersonSpec(BaseModel):
    """Especifica una persona. Al menos uno de email, login o uid debe estar presente.

    Si hay más de uno, la prioridad al codificar es email > login > uid.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    email: str = Field(
        default="",
        validation_alias=AliasChoices("Email", "email"),
        description="Email de la persona; puede venir ofuscado (privacidad).",
    )
    login: str = Field(
        default="",
        validation_alias=AliasChoices("Login", "login"),
        description="Login del usuario.",
    )
    uid: int = Field(
        default=0,
        validation_alias=AliasChoices("UID", "uid"),
        description="UID numérico del usuario (0 = sin resolver).",
    )

    def path_component(self) -> str:
        """Devuelve el segmento de URL que identifica a la persona."""

        if self.email:
            return self.email
        if self.login:
            return self.login
        if self.uid > 0:
            return f"{UID_PREFIX}{self.uid}"
        raise EmptyPersonSpecError()

    def route_vars(self) -> dict[str, str]:
        return {ROUTE_VAR: self.path_component()}

    def __str__(self) -> str:
        try:
            return self.path_component()
        except EmptyPersonSpecError:
            return "<empty PersonSpec>"


def parse_person_spec(path_component: str) -> PersonSpec:
    """Inverso de `PersonSpec.path_component`.

    Un `$` inicial exige un entero decimal a continuación; si no lo es se
    lanza `InvalidPersonSpecError` con el spec vacío en `.spec`.
    """

    if path_component.startswith(UID_PREFIX):
        digits = path_component[len(UID_PREFIX):]
        if not _UID_PATTERN.fullmatch(digits):
            raise InvalidPersonSpecError(path_component, PersonSpec(), f"{digits!r} is not a decimal integer")
        try:
            uid = int(digits)
        except ValueError as exc:
            raise InvalidPersonSpecError(path_component, PersonSpec(), str(exc)) from exc
        return PersonSpec(uid=uid)
    if "@" in path_component:
        return PersonSpec(email=path_component)
    return PersonSpec(login=path_component)


_SPEC_WIRE_KEYS = frozenset({"Email", "email", "Login", "login", "UID", "uid"})


class Person(BaseModel):
    """Un usuario registrado o un autor de commits sin resolver.

    Si la persona se resolvió a un usuario, `login` y `uid` están presentes;
    si no, solo `email` (posiblemente ofuscado).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    spec: PersonSpec = Field(
        default_factory=PersonSpec,
        description="Identificador de la persona.",
    )
    full_name: str = Field(
        default="",
        validation_alias=AliasChoices("FullName", "fullName", "full_name"),
        description="Nombre completo (puede estar vacío).",
    )
    avatar_url: str = Field(
        default="",
        validation_alias=AliasChoices("AvatarURL", "avatarURL", "avatar_url"),
        description="URL base del avatar (puede estar vacía).",
    )

    @model_validator(mode="before")
    @classmethod
    def _lift_spec_fields(cls, data: Any) -> Any:
        # La API envía un objeto plano; el spec se agrupa en su propio campo.
        if not isinstance(data, dict) or "spec" in data:
            return data
        spec = {key: value for key, value in data.items() if key in _SPEC_WIRE_KEYS}
        if not spec:
            return data
        rest = {key: value for key, value in data.items() if key not in _SPEC_WIRE_KEYS}
        rest["spec"] = spec
        return rest

    @property
    def email(self) -> str:
        return self.spec.email

    @property
    def login(self) -> str:
        return self.spec.login

    @property
    def uid(self) -> int:
        return self.spec.uid

    @property
    def transient(self) -> bool:
        """True si la persona se construyó al vuelo y no corresponde a un usuario."""

        return self.spec.uid == 0

    @property
    def has_profile(self) -> bool:
        """Las personas transitorias no tienen página de perfil."""

        return not self.transient

    @property
    def short_name(self) -> str:
        if self.spec.login:
            return self.spec.login
        local, at, _ = self.spec.email.partition("@")
        if not at:
            return ANONYMOUS_SHORT_NAME
        return local

    def avatar_url_of_size(self, width: int) -> str:
        """URL del avatar con el ancho pedido (parámetro `s`, en píxeles)."""

        if not self.avatar_url:
            return ""
        parts = urlsplit(self.avatar_url)
        query = [(key, value) for key, value in parse_qsl(parts.query, keep_blank_values=True) if key != "s"]
        query.append(("s", str(int(width))))
        query.sort(key=lambda item: item[0])
        return urlunsplit(parts._replace(query=urlencode(query)))

    def to_payload(self) -> dict[str, Any]:
        """Forma plana (claves de la API) para exportar."""

        return {
            "Email": self.spec.email,
            "Login": self.spec.login,
            "UID": self.spec.uid,
            "FullName": self.full_name,
            "AvatarURL": self.avatar_url,
        }
