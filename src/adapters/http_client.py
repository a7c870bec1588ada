"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers (User-Agent) y redirects en un solo lugar.
- Traduce las fallas de httpx a los errores del dominio.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import RequestError, TransportError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con los defaults de la aplicación."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def get_text(client: httpx.Client, url: str, *, params: dict[str, Any] | None = None) -> str:
    """GET `url` y devuelve el cuerpo como texto.

    - status no-2xx -> `RequestError`
    - falla de red/timeout -> `TransportError`
    """

    try:
        resp = client.get(url, params=params)
    except httpx.HTTPError as exc:
        raise TransportError(url, str(exc) or type(exc).__name__) from exc

    logger.debug("GET %s -> %s", resp.url, resp.status_code)
    if not resp.is_success:
        raise RequestError(resp.status_code, str(resp.url))
    return resp.text
