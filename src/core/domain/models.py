"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida los payloads de Wikipedia en el borde y deja el resto del código
  trabajar con tipos ya verificados.
- Los `Field(description=...)` documentan el esquema esperado de la API.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DISAMBIGUATION_TYPE = "disambiguation"
NO_EXTRACT_FALLBACK = "No extract available."
DISAMBIGUATION_MESSAGE = 'Ambiguous, please add further information. E.g. "<term> engineering".'


class SearchHit(BaseModel):
    """Un resultado de `list=search`; solo `title` es obligatorio."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(
        ...,
        description="Título canónico del artículo.",
    )
    pageid: int | None = Field(
        default=None,
        description="ID numérico de la página (si viene).",
    )
    snippet: str | None = Field(
        default=None,
        description="Fragmento HTML con las coincidencias resaltadas.",
    )


class SearchBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")

    search: list[SearchHit] = Field(
        ...,
        description="Resultados ordenados por relevancia (el primero es el mejor).",
    )


class SearchResponse(BaseModel):
    """Respuesta de `action=query&list=search&format=json`."""

    model_config = ConfigDict(extra="ignore")

    query: SearchBlock = Field(
        ...,
        description="Bloque `query` de la Action API.",
    )

    @property
    def first_title(self) -> str | None:
        hits = self.query.search
        return hits[0].title if hits else None


class SummaryPayload(BaseModel):
    """Respuesta de `/api/rest_v1/page/summary/<title>`.

    `type` es obligatorio; `extract` puede faltar o venir como `null`.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    response_type: str = Field(
        ...,
        alias="type",
        description="Tipo de página: 'standard', 'disambiguation', 'no-extract', ...",
    )
    extract: str | None = Field(
        default=None,
        description="Resumen en texto plano del artículo.",
    )
    title: str | None = Field(
        default=None,
        description="Título tal como lo devuelve el endpoint REST.",
    )

    @property
    def is_disambiguation(self) -> bool:
        return self.response_type == DISAMBIGUATION_TYPE


class LookupResult(BaseModel):
    """Salida del pipeline: lo que la CLI necesita para renderizar."""

    query: str = Field(
        ...,
        min_length=1,
        description="Frase buscada (argumentos unidos por espacios).",
    )
    title: str = Field(
        ...,
        description="Título resuelto por la búsqueda.",
    )
    text: str = Field(
        ...,
        description="Extract, fallback o aviso de desambiguación.",
    )
    disambiguation: bool = Field(
        default=False,
        description="True si la página resuelta es de desambiguación.",
    )
