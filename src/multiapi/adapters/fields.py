"""Extracción tipada de campos de un `DecodedResponse`.

Cada helper falla con `UnexpectedResponseShape` cuando el campo falta o tiene
otro tipo JSON.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from multiapi.core.domain.endpoints import Endpoint
from multiapi.core.domain.errors import UnexpectedResponseShape
from multiapi.core.domain.models import DecodedResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


def _json_type(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _missing(endpoint: Endpoint, key: str) -> UnexpectedResponseShape:
    return UnexpectedResponseShape(
        f"{endpoint.value}: missing field '{key}'",
        endpoint=endpoint.value,
        field=key,
    )


def _mistyped(endpoint: Endpoint, key: str, expected: str, value: object) -> UnexpectedResponseShape:
    return UnexpectedResponseShape(
        f"{endpoint.value}: field '{key}' should be {expected}, got {_json_type(value)}",
        endpoint=endpoint.value,
        field=key,
    )


def require_str(payload: DecodedResponse, key: str, *, endpoint: Endpoint) -> str:
    if key not in payload:
        raise _missing(endpoint, key)
    value = payload[key]
    if not isinstance(value, str):
        raise _mistyped(endpoint, key, "string", value)
    return value


def require_list(payload: DecodedResponse, key: str, *, endpoint: Endpoint) -> list[Any]:
    if key not in payload:
        raise _missing(endpoint, key)
    value = payload[key]
    if not isinstance(value, list):
        raise _mistyped(endpoint, key, "array", value)
    return value


def require_int(payload: DecodedResponse, key: str, *, endpoint: Endpoint) -> int:
    """Acepta enteros JSON y también floats integrales (`7.0`)."""

    if key not in payload:
        raise _missing(endpoint, key)
    value = payload[key]
    if isinstance(value, bool):
        raise _mistyped(endpoint, key, "integer", value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise _mistyped(endpoint, key, "integer", value)


def parse_model(model: type[ModelT], data: dict[str, Any], *, endpoint: Endpoint) -> ModelT:
    """Valida `data` con `model`; el primer error se reporta como forma inesperada."""

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise UnexpectedResponseShape(
            f"{endpoint.value}: {first.get('msg', 'invalid response')} ({field})",
            endpoint=endpoint.value,
            field=field,
        ) from exc
