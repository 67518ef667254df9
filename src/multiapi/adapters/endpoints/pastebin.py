"""Endpoints de pastebin: `/paste` (crear) y `/get_paste` (leer).

Ambos devuelven el mapping decodificado sin reinterpretarlo.
"""

from __future__ import annotations

from multiapi.adapters.session import ApiSession
from multiapi.core.domain.endpoints import Endpoint
from multiapi.core.domain.models import DecodedResponse


def paste(session: ApiSession, *, content: str, title: str, author: str) -> DecodedResponse:
    return session.get_json(
        Endpoint.PASTE,
        {"content": content, "title": title, "author": author},
    )


def get_paste(session: ApiSession, *, paste_id: str) -> DecodedResponse:
    return session.get_json(Endpoint.GET_PASTE, {"paste": paste_id})
