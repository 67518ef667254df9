"""Exportación JSON de respuestas.

Permite guardar el mapping devuelto por un endpoint (pypi, paste, ud) para
procesarlo con otras herramientas.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def export_json(*, payload: Any, output_path: Path) -> Path:
    """Escribe `payload` como JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path


def export_bytes(*, data: bytes, output_path: Path) -> Path:
    """Escribe bytes crudos (p.ej. la imagen de `/print`)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path
