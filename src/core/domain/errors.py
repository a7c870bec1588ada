"""Errores del dominio.

Jerarquía cerrada: toda falla del pipeline es una de estas cuatro variantes,
así la CLI puede distinguirlas con `except`/`isinstance` sin inspeccionar
mensajes.
"""

from __future__ import annotations

from pydantic import ValidationError


class WikiLookupError(Exception):
    """Base de todas las fallas de una búsqueda."""


class RequestError(WikiLookupError):
    """El servidor respondió con un status no-2xx."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Request error: HTTP {status_code} for {url}")


class NoResultsError(WikiLookupError):
    """La búsqueda no devolvió ningún artículo."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"No results found for {query!r}.")


class DecodeError(WikiLookupError):
    """El cuerpo no es JSON válido o no respeta el esquema esperado."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not decode response: {reason}")

    @classmethod
    def from_validation(cls, exc: ValidationError) -> "DecodeError":
        """Resume el primer error de Pydantic como `campo: mensaje`."""

        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        return cls(f"{location}: {first.get('msg', 'invalid')}")


class TransportError(WikiLookupError):
    """Falla por debajo de HTTP (DNS, conexión, timeout)."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Transport error for {url}: {reason}")
