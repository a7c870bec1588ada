"""Contrato de la fuente enciclopédica.

Por qué Protocol:
- El pipeline depende de este contrato estructural, no de httpx.
- Los tests pueden pasar un objeto cualquiera con estos dos métodos.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EncyclopediaSource(Protocol):
    """Contrato mínimo: resolver un título y traer su resumen crudo.

    Reglas de diseño:
    - Ambos métodos son síncronos; el pipeline es estrictamente secuencial.
    - Las fallas se expresan con `core.domain.errors`, nunca con excepciones
      de la librería HTTP.
    """

    def search_title(self, query: str) -> str:
        """Devuelve el título del mejor resultado para `query`."""

        ...

    def fetch_summary(self, title: str) -> str:
        """Devuelve el cuerpo crudo del resumen de `title`."""

        ...
