"""Fuente: Wikipedia (Action API + REST summary).

- `search_title` usa `list=search` y se queda con el primer resultado.
- `fetch_summary` devuelve el JSON crudo de `/page/summary/<title>`; el
  decode vive en `core.services.lookup_pipeline`.

Estos adaptadores viven en adapters porque son I/O puro (HTTP).
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import get_text
from core.config import AppSettings
from core.domain.errors import DecodeError, NoResultsError
from core.domain.models import SearchResponse
from core.interfaces.encyclopedia import EncyclopediaSource

logger = logging.getLogger(__name__)

SEARCH_PATH = "/w/api.php"
SUMMARY_PATH = "/api/rest_v1/page/summary/"


def build_search_params(query: str) -> dict[str, str]:
    # El orden importa solo para la legibilidad de la URL en los logs.
    return {
        "action": "query",
        "list": "search",
        "srsearch": query,
        "format": "json",
    }


def build_summary_url(base_url: str, title: str) -> str:
    """URL del resumen con el título como un único segmento codificado."""

    segment = quote(title.replace(" ", "_"), safe="")
    return f"{base_url.rstrip('/')}{SUMMARY_PATH}{segment}"


def decode_search_response(body: str) -> SearchResponse:
    try:
        return SearchResponse.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError.from_validation(exc) from exc


class WikipediaClient(EncyclopediaSource):
    """Resuelve frases a títulos y trae resúmenes usando un `httpx.Client` abierto."""

    def __init__(self, client: httpx.Client, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    def search_title(self, query: str) -> str:
        url = f"{self._settings.api_base_url}{SEARCH_PATH}"
        body = get_text(self._client, url, params=build_search_params(query))

        title = decode_search_response(body).first_title
        if title is None:
            raise NoResultsError(query)
        return title

    def fetch_summary(self, title: str) -> str:
        url = build_summary_url(self._settings.api_base_url, title)
        logger.debug("fetching summary for %r", title)
        return get_text(self._client, url)
