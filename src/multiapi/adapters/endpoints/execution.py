"""Endpoints de ejecución de código: `/execlangs` y `/exec`."""

from __future__ import annotations

from multiapi.adapters.fields import parse_model, require_str
from multiapi.adapters.session import ApiSession
from multiapi.core.domain.endpoints import Endpoint
from multiapi.core.domain.models import ExecResult

_OUTCOME_LABELS = ("Errors", "Stats")


def get_exec_langs(session: ApiSession) -> str:
    """Lista (texto plano) de lenguajes soportados por `/exec`."""

    payload = session.get_json(Endpoint.EXEC_LANGS)
    return require_str(payload, "langs", endpoint=Endpoint.EXEC_LANGS)


def fetch_exec_result(session: ApiSession, *, lang: str, code: str) -> ExecResult | str:
    """Ejecuta `code` y devuelve el resultado estructurado.

    Si la respuesta no trae ni `Errors` ni `Stats` (lenguaje desconocido), la
    API devuelve la lista de lenguajes en `langs` y se devuelve ese texto.
    """

    payload = session.get_json(Endpoint.EXEC, {"lang": lang, "code": code})

    for label in _OUTCOME_LABELS:
        if label in payload:
            data = dict(payload)
            data["outcome_label"] = label
            data["outcome"] = require_str(payload, label, endpoint=Endpoint.EXEC)
            return parse_model(ExecResult, data, endpoint=Endpoint.EXEC)

    return require_str(payload, "langs", endpoint=Endpoint.EXEC)


def exec_code(session: ApiSession, *, lang: str, code: str) -> str:
    result = fetch_exec_result(session, lang=lang, code=code)
    if isinstance(result, ExecResult):
        return result.report()
    return result
