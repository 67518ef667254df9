"""Endpoint `/tr`: traducción de texto."""

from __future__ import annotations

from multiapi.adapters.fields import parse_model, require_str
from multiapi.adapters.session import ApiSession
from multiapi.core.domain.endpoints import Endpoint
from multiapi.core.domain.models import TranslationResult


def fetch_translation(
    session: ApiSession,
    *,
    text: str,
    from_lang: str,
    to_lang: str,
) -> TranslationResult | str:
    """Traducción estructurada, o el mensaje de `error` tal cual."""

    payload = session.get_json(
        Endpoint.TRANSLATE,
        {"text": text, "fromlang": from_lang, "lang": to_lang},
    )
    if "error" in payload:
        return require_str(payload, "error", endpoint=Endpoint.TRANSLATE)

    return parse_model(TranslationResult, payload, endpoint=Endpoint.TRANSLATE)


def translate(session: ApiSession, *, text: str, from_lang: str, to_lang: str) -> str:
    result = fetch_translation(session, text=text, from_lang=from_lang, to_lang=to_lang)
    if isinstance(result, TranslationResult):
        return result.report()
    return result
