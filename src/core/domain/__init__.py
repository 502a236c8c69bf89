"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""

from core.domain.people import Person, PersonSpec, parse_person_spec
from core.domain.stats import PersonStats, PersonStatType

__all__ = [
	"Person",
	"PersonSpec",
	"PersonStatType",
	"PersonStats",
	"parse_person_spec",
]
