"""Endpoint `/print`: captura de pantalla de una URL.

La respuesta son bytes de imagen; no se decodifica como JSON.
"""

from __future__ import annotations

from multiapi.adapters.session import ApiSession
from multiapi.core.domain.endpoints import Endpoint

DEFAULT_WIDTH = "1280"
DEFAULT_HEIGHT = "720"


def resolve_size(width: int | str, height: int | str) -> tuple[str, str]:
    """Si falta cualquiera de las dos dimensiones se usan ambas por defecto."""

    width, height = str(width), str(height)
    if not width or not height:
        return DEFAULT_WIDTH, DEFAULT_HEIGHT
    return width, height


def webshot(
    session: ApiSession,
    *,
    url: str,
    width: int | str = DEFAULT_WIDTH,
    height: int | str = DEFAULT_HEIGHT,
) -> bytes:
    width, height = resolve_size(width, height)
    return session.get_bytes(
        Endpoint.WEBSHOT,
        {"url": url, "width": width, "height": height},
    )
