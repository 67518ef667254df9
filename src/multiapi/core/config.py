"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los adaptadores (URL builder, transporte, decoder) leen config de aquí.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.itayki.com"


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Todos los campos pueden venir de variables `MULTIAPI_*` o de un `.env`
    en el directorio de trabajo; los argumentos explícitos ganan.
    """

    model_config = SettingsConfigDict(
        env_prefix="MULTIAPI_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Host base de la API remota (sin barra final).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirecciones HTTP.",
    )
    raise_for_status: bool = Field(
        default=False,
        description="Convertir respuestas no-2xx en HttpStatusError.",
    )
    strict_json: bool = Field(
        default=False,
        description="Propagar DecodeError en vez de devolver un mapping vacío.",
    )
