"""Decodificación de cuerpos JSON."""

from __future__ import annotations

import json
import logging

from multiapi.core.domain.errors import DecodeError
from multiapi.core.domain.models import DecodedResponse

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-standard JSON constant {name}")


def decode_json(body: bytes, *, strict: bool = False) -> DecodedResponse:
    """Parsea `body` como un objeto JSON.

    En modo laxo (default) cualquier fallo, incluido un documento cuyo nivel
    superior no es un objeto, devuelve `{}`. Con `strict=True` se lanza
    `DecodeError`.
    """

    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        if strict:
            raise DecodeError(f"response body is not valid JSON: {exc}") from exc
        logger.debug("discarding undecodable body (%d bytes): %s", len(body), exc)
        return {}

    if not isinstance(data, dict):
        if strict:
            raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
        logger.debug("discarding non-object JSON document (%s)", type(data).__name__)
        return {}

    return data
