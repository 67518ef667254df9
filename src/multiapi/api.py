"""Funciones de conveniencia a nivel de módulo.

Cada llamada abre y cierra su propio `MultiApiClient`; `settings` o
`base_url` permiten redirigirlas a otro host.
"""

from __future__ import annotations

from typing import Any

from multiapi.core.config import AppSettings
from multiapi.core.domain.models import DecodedResponse
from multiapi.core.services.client import MultiApiClient


def _client(settings: AppSettings | None, base_url: str | None) -> MultiApiClient:
    return MultiApiClient(settings, base_url=base_url)


def get_exec_langs(*, settings: AppSettings | None = None, base_url: str | None = None) -> str:
    with _client(settings, base_url) as api:
        return api.get_exec_langs()


def exec_code(
    lang: str,
    code: str,
    *,
    settings: AppSettings | None = None,
    base_url: str | None = None,
) -> str:
    with _client(settings, base_url) as api:
        return api.exec_code(lang, code)


def ocr(url: str, *, settings: AppSettings | None = None, base_url: str | None = None) -> str:
    with _client(settings, base_url) as api:
        return api.ocr(url)


def translate(
    text: str,
    from_lang: str,
    to_lang: str,
    *,
    settings: AppSettings | None = None,
    base_url: str | None = None,
) -> str:
    with _client(settings, base_url) as api:
        return api.translate(text, from_lang, to_lang)


def urban_dictionary(
    query: str,
    *,
    settings: AppSettings | None = None,
    base_url: str | None = None,
) -> list[Any]:
    with _client(settings, base_url) as api:
        return api.urban_dictionary(query)


def webshot(
    url: str,
    width: int | str = "1280",
    height: int | str = "720",
    *,
    settings: AppSettings | None = None,
    base_url: str | None = None,
) -> bytes:
    with _client(settings, base_url) as api:
        return api.webshot(url, width, height)


def random_number(
    minimum: int | str,
    maximum: int | str,
    *,
    settings: AppSettings | None = None,
    base_url: str | None = None,
) -> int:
    with _client(settings, base_url) as api:
        return api.random_number(minimum, maximum)


def pypi_search(
    package: str,
    *,
    settings: AppSettings | None = None,
    base_url: str | None = None,
) -> DecodedResponse:
    with _client(settings, base_url) as api:
        return api.pypi_search(package)


def paste(
    content: str,
    title: str,
    author: str,
    *,
    settings: AppSettings | None = None,
    base_url: str | None = None,
) -> DecodedResponse:
    with _client(settings, base_url) as api:
        return api.paste(content, title, author)


def get_paste(
    paste_id: str,
    *,
    settings: AppSettings | None = None,
    base_url: str | None = None,
) -> DecodedResponse:
    with _client(settings, base_url) as api:
        return api.get_paste(paste_id)
