"""Wrapper de httpx.

- Estandariza timeouts, redirecciones y el mapeo de errores de transporte.
- Facilita testeo: el `httpx.BaseTransport` se puede sustituir por un
  `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from multiapi.core.config import AppSettings
from multiapi.core.domain.errors import HttpStatusError, NetworkError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` bloqueante con los defaults de `AppSettings`.

    Sin headers extra: la API remota no requiere autenticación.
    """

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        transport=transport,
    )


class HttpxTransport:
    """Implementación de `Transport` sobre `httpx.Client`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_client(self._settings)

    def fetch(self, url: str) -> bytes:
        try:
            response = self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.debug("GET %s failed: %r", url, exc)
            raise NetworkError(f"request to {url} failed: {exc}", url=url) from exc

        logger.debug("GET %s -> HTTP %s (%d bytes)", url, response.status_code, len(response.content))

        if self._settings.raise_for_status and not response.is_success:
            raise HttpStatusError(
                f"HTTP {response.status_code} from {url}",
                url=url,
                status_code=response.status_code,
            )
        return response.content

    def close(self) -> None:
        self._client.close()
