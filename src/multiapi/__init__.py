"""Cliente Python para la API multi-servicio de api.itayki.com.

Ejemplo::

    import multiapi

    print(multiapi.exec_code("python", "print(1)"))
"""

from multiapi.api import (
    exec_code,
    get_exec_langs,
    get_paste,
    ocr,
    paste,
    pypi_search,
    random_number,
    translate,
    urban_dictionary,
    webshot,
)
from multiapi.core.config import AppSettings
from multiapi.core.domain.endpoints import Endpoint
from multiapi.core.domain.errors import (
    DecodeError,
    ErrorKind,
    HttpStatusError,
    MultiApiError,
    NetworkError,
    UnexpectedResponseShape,
)
from multiapi.core.domain.models import ExecResult, TranslationResult
from multiapi.core.services.client import MultiApiClient

__version__ = "0.1.0"

__all__ = [
	"AppSettings",
	"DecodeError",
	"Endpoint",
	"ErrorKind",
	"ExecResult",
	"HttpStatusError",
	"MultiApiClient",
	"MultiApiError",
	"NetworkError",
	"TranslationResult",
	"UnexpectedResponseShape",
	"exec_code",
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
