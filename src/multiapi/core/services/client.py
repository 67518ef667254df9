"""Fachada del cliente.

`MultiApiClient` agrupa todas las operaciones sobre un único `ApiSession`
(un `httpx.Client`). Las funciones de módulo abren un cliente efímero por
llamada, de modo que no existe estado global compartido entre hilos.
"""

from __future__ import annotations

from typing import Any

from multiapi.adapters import endpoints
from multiapi.adapters.session import ApiSession
from multiapi.core.config import AppSettings
from multiapi.core.domain.models import DecodedResponse, ExecResult, TranslationResult
from multiapi.core.interfaces.transport import Transport


class MultiApiClient:
    """Cliente síncrono para la API remota.

    Uso típico::

        with MultiApiClient() as api:
            print(api.exec_code("python", "print(1)"))

    `base_url` sobreescribe `AppSettings.base_url` (útil para apuntar a un
    servidor mock). `transport` permite inyectar cualquier `Transport`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        base_url: str | None = None,
        transport: Transport | None = None,
    ) -> None:
        settings = settings or AppSettings()
        if base_url is not None:
            settings = settings.model_copy(update={"base_url": base_url})
        self._session = ApiSession(settings, transport=transport)

    @property
    def settings(self) -> AppSettings:
        return self._session.settings

    def get_exec_langs(self) -> str:
        return endpoints.get_exec_langs(self._session)

    def exec_code(self, lang: str, code: str) -> str:
        return endpoints.exec_code(self._session, lang=lang, code=code)

    def exec_result(self, lang: str, code: str) -> ExecResult | str:
        return endpoints.fetch_exec_result(self._session, lang=lang, code=code)

    def ocr(self, url: str) -> str:
        return endpoints.ocr(self._session, url=url)

    def translate(self, text: str, from_lang: str, to_lang: str) -> str:
        return endpoints.translate(self._session, text=text, from_lang=from_lang, to_lang=to_lang)

    def translation(self, text: str, from_lang: str, to_lang: str) -> TranslationResult | str:
        return endpoints.fetch_translation(
            self._session, text=text, from_lang=from_lang, to_lang=to_lang
        )

    def urban_dictionary(self, query: str) -> list[Any]:
        return endpoints.urban_dictionary(self._session, query=query)

    def webshot(self, url: str, width: int | str = "1280", height: int | str = "720") -> bytes:
        return endpoints.webshot(self._session, url=url, width=width, height=height)

    def random_number(self, minimum: int | str, maximum: int | str) -> int:
        return endpoints.random_number(self._session, minimum=minimum, maximum=maximum)

    def pypi_search(self, package: str) -> DecodedResponse:
        return endpoints.pypi_search(self._session, package=package)

    def paste(self, content: str, title: str, author: str) -> DecodedResponse:
        return endpoints.paste(self._session, content=content, title=title, author=author)

    def get_paste(self, paste_id: str) -> DecodedResponse:
        return endpoints.get_paste(self._session, paste_id=paste_id)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> MultiApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
