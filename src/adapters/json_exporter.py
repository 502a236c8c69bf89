"""Exportación JSON de una persona.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Se exporta la forma plana de la API, así el fichero se puede volver a
  validar con `Person.model_validate`.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.people import Person


def person_to_json(person: Person) -> str:
    """Serializa `Person` a JSON UTF-8 con formato estable."""

    return json.dumps(person.to_payload(), ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_person_json(*, person: Person, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(person_to_json(person), encoding="utf-8")
    return output_path
