"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la capa de presentación lean config de
  forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.color import Color, ColorParseError


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "wiki-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "wiki-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "wiki-cli"
    return Path.home() / ".config" / "wiki-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Los defaults reproducen el comportamiento original de `wiki`; cada campo
    se puede sobreescribir con `WIKI_CLI_<CAMPO>`.
    """

    model_config = SettingsConfigDict(
        env_prefix="WIKI_CLI_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://en.wikipedia.org",
        min_length=8,
        description="Base URL del wiki (search API y REST summary cuelgan de aquí).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="wiki-cli/1.0",
        min_length=1,
        description="User-Agent enviado en ambas peticiones.",
    )
    highlight_color: str = Field(
        default="rgb(255,165,0)",
        min_length=1,
        description="Color Rich con el que se imprime el resultado final.",
    )
    spinner_interval_ms: int = Field(
        default=100,
        ge=10,
        le=1000,
        description="Intervalo de animación del spinner (milisegundos).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging en stderr (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("highlight_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        try:
            Color.parse(value)
        except ColorParseError as exc:
            raise ValueError(f"not a valid color: {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
