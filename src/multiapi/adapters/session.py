"""Composición URL builder + transporte + decoder.

Todas las operaciones pasan por `ApiSession`: construyen un
`EndpointRequest`, lo envían y, salvo `/print`, decodifican el JSON.
"""

from __future__ import annotations

from collections.abc import Mapping

from multiapi.adapters.decoder import decode_json
from multiapi.adapters.http_client import HttpxTransport
from multiapi.adapters.url_builder import build_url
from multiapi.core.config import AppSettings
from multiapi.core.domain.endpoints import Endpoint
from multiapi.core.domain.models import DecodedResponse, EndpointRequest
from multiapi.core.interfaces.transport import Transport


class ApiSession:
    """Settings + transporte compartidos por las operaciones de un cliente."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self._transport: Transport = transport or HttpxTransport(self.settings)

    def url_for(self, request: EndpointRequest) -> str:
        return build_url(self.settings.base_url, request.path, request.params)

    def get_bytes(self, endpoint: Endpoint, params: Mapping[str, str] | None = None) -> bytes:
        request = EndpointRequest(path=endpoint.value, params=dict(params or {}))
        return self._transport.fetch(self.url_for(request))

    def get_json(self, endpoint: Endpoint, params: Mapping[str, str] | None = None) -> DecodedResponse:
        body = self.get_bytes(endpoint, params)
        return decode_json(body, strict=self.settings.strict_json)

    def close(self) -> None:
        self._transport.close()
