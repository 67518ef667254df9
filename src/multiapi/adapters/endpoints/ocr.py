"""Endpoint `/ocr`: texto extraído de una imagen remota."""

from __future__ import annotations

from multiapi.adapters.fields import require_str
from multiapi.adapters.session import ApiSession
from multiapi.core.domain.endpoints import Endpoint


def ocr(session: ApiSession, *, url: str) -> str:
    """Devuelve el texto reconocido o `"Error: <mensaje>"` si la API falla."""

    payload = session.get_json(Endpoint.OCR, {"url": url})
    if "ocr" in payload:
        return require_str(payload, "ocr", endpoint=Endpoint.OCR)

    return "Error: " + require_str(payload, "error", endpoint=Endpoint.OCR)
