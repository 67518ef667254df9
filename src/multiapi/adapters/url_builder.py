"""Construcción de URLs con query string."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import quote_plus

logger = logging.getLogger(__name__)


def build_url(base_url: str, path: str, params: Mapping[str, str] | None = None) -> str:
    """Devuelve `base_url + path + "?"` seguido de un `key=value&` por parámetro.

    - Cada valor se escapa como componente de query (espacio -> `+`).
    - El `&` final se conserva; sin parámetros queda un `?` suelto.
    - El orden de los pares sigue el del mapping y no forma parte del contrato.
    """

    url = base_url.rstrip("/") + path + "?"
    if params:
        for key, value in params.items():
            url += f"{key}={quote_plus(value)}&"

    logger.debug("built url %s", url)
    return url
