"""Contrato del transporte HTTP.

Un `Protocol` permite sustituir el cliente httpx por un stub en tests o por
otra implementación sin acoplar las operaciones a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo: un GET bloqueante que devuelve el cuerpo completo.

    Reglas:
    - Fallos de red se propagan como `NetworkError`.
    - El status HTTP no se inspecciona salvo configuración explícita.
    """

    def fetch(self, url: str) -> bytes:
        """Descarga `url` y devuelve el cuerpo de la respuesta."""

        ...

    def close(self) -> None:
        ...
