"""Endpoint `/random`."""

from __future__ import annotations

from multiapi.adapters.fields import require_int
from multiapi.adapters.session import ApiSession
from multiapi.core.domain.endpoints import Endpoint


def random_number(session: ApiSession, *, minimum: int | str, maximum: int | str) -> int:
    """Entero aleatorio entre `minimum` y `maximum` (límites según la API)."""

    payload = session.get_json(Endpoint.RANDOM, {"min": str(minimum), "max": str(maximum)})
    return require_int(payload, "number", endpoint=Endpoint.RANDOM)
