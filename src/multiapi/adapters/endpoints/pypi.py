"""Endpoint `/pypi`: metadata de un paquete publicado en PyPI."""

from __future__ import annotations

from multiapi.adapters.session import ApiSession
from multiapi.core.domain.endpoints import Endpoint
from multiapi.core.domain.models import DecodedResponse


def pypi_search(session: ApiSession, *, package: str) -> DecodedResponse:
    return session.get_json(Endpoint.PYPI, {"package": package})
