"""Errores tipados del cliente.

Dos familias:
- Fallos de transporte (red, y opcionalmente status HTTP).
- Respuestas con forma inesperada (JSON inválido en modo estricto, campos
  ausentes o de tipo incorrecto).
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Clasificación estable de errores, útil para logging y para la CLI."""

    NETWORK = "network"
    HTTP_STATUS = "http_status"
    DECODE = "decode"
    UNEXPECTED_RESPONSE_SHAPE = "unexpected_response_shape"

    def label(self) -> str:
        return self.value.replace("_", " ")


class MultiApiError(Exception):
    """Base de todos los errores del paquete."""

    kind: ErrorKind = ErrorKind.NETWORK

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class NetworkError(MultiApiError):
    """La conexión no se pudo establecer, se cortó o expiró."""

    kind = ErrorKind.NETWORK


class HttpStatusError(MultiApiError):
    """Respuesta no-2xx (solo con `raise_for_status` activo)."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, message: str, *, url: str | None = None, status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class DecodeError(MultiApiError):
    """El cuerpo no es un objeto JSON (solo con `strict_json` activo)."""

    kind = ErrorKind.DECODE


class UnexpectedResponseShape(MultiApiError):
    """Un campo esperado falta o tiene un tipo distinto al acordado."""

    kind = ErrorKind.UNEXPECTED_RESPONSE_SHAPE

    def __init__(self, message: str, *, endpoint: str, field: str | None = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.field = field
