"""Endpoint `/ud`: Urban Dictionary."""

from __future__ import annotations

from typing import Any

from multiapi.adapters.fields import require_list
from multiapi.adapters.session import ApiSession
from multiapi.core.domain.endpoints import Endpoint


def urban_dictionary(session: ApiSession, *, query: str) -> list[Any]:
    payload = session.get_json(Endpoint.URBAN_DICTIONARY, {"query": query})
    return require_list(payload, "results", endpoint=Endpoint.URBAN_DICTIONARY)
