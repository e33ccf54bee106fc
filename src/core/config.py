"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el transporte HTTP y los servicios lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "craftdash"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "craftdash"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "craftdash"
    return Path.home() / ".config" / "craftdash"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# craftdash user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRAFTDASH_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://cook-craft.dhcb.io/api",
        min_length=8,
        description="Base URL del backend REST del dashboard.",
    )
    auth_token: str | None = Field(
        default=None,
        description="Bearer token enviado en `Authorization` (opcional).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="craftdash/0.1",
        min_length=1,
        description="User-Agent para las peticiones al backend.",
    )

    default_per_page: int = Field(
        default=15,
        ge=1,
        le=500,
        description="Tamaño de página inicial de las vistas de lista.",
    )
    page_size_options: list[int] = Field(
        default_factory=lambda: [15, 25, 50, 100],
        description="Tamaños de página ofrecidos por el selector de la UI.",
    )

    ingredient_index_base: int = Field(
        default=0,
        ge=0,
        le=1,
        description="Convención (0 ó 1) con la que se envían los índices de ingredientes al guardar.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING...).",
    )

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("page_size_options")
    @classmethod
    def _sorted_positive(cls, value: list[int]) -> list[int]:
        cleaned = sorted({v for v in value if v >= 1})
        if not cleaned:
            raise ValueError("page_size_options must contain at least one positive size")
        return cleaned
