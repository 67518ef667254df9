"""Rutas de la API remota.

Centraliza los paths consumidos por el cliente para que adaptadores, CLI y
tests compartan una única fuente de verdad.
"""

from __future__ import annotations

from enum import Enum


class Endpoint(str, Enum):
    """Rutas GET expuestas por la API remota."""

    EXEC_LANGS = "/execlangs"
    EXEC = "/exec"
    OCR = "/ocr"
    TRANSLATE = "/tr"
    URBAN_DICTIONARY = "/ud"
    WEBSHOT = "/print"
    RANDOM = "/random"
    PYPI = "/pypi"
    PASTE = "/paste"
    GET_PASTE = "/get_paste"
