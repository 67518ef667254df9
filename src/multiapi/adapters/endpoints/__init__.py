"""Operaciones por endpoint.

Cada módulo agrupa las funciones de una ruta (o familia de rutas) y recibe
un `ApiSession` ya configurado.
"""

from multiapi.adapters.endpoints.execution import exec_code, fetch_exec_result, get_exec_langs
from multiapi.adapters.endpoints.ocr import ocr
from multiapi.adapters.endpoints.pastebin import get_paste, paste
from multiapi.adapters.endpoints.pypi import pypi_search
from multiapi.adapters.endpoints.random_number import random_number
from multiapi.adapters.endpoints.translate import fetch_translation, translate
from multiapi.adapters.endpoints.urban import urban_dictionary
from multiapi.adapters.endpoints.webshot import webshot

__all__ = [
	"exec_code",
	"fetch_exec_result",
	"fetch_translation",
	"get_exec_langs",
	"get_paste",
	"ocr",
	"paste",
	"pypi_search",
	"random_number",
	"translate",
	"urban_dictionary",
	"webshot",
]
