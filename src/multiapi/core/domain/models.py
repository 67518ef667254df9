"""Modelos del dominio (Pydantic v2).

- Describen *qué* devuelve la API remota, no *cómo* se obtiene.
- Validación estricta: un campo ausente o con otro tipo JSON es un error,
  no una coerción silenciosa.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

JSONValue = Union[str, int, float, bool, None, list[Any], dict[str, Any]]
"""Valor JSON decodificado cuyo tipo concreto se conoce solo en runtime."""

DecodedResponse = dict[str, JSONValue]


class EndpointRequest(BaseModel):
    """Petición a un endpoint: path + parámetros de query (todos strings)."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(
        ...,
        min_length=1,
        description="Ruta relativa al host base (p.ej. '/exec').",
    )
    params: dict[str, str] = Field(
        default_factory=dict,
        description="Parámetros de query; los valores se percent-encodean al construir la URL.",
    )


class ExecResult(BaseModel):
    """Resultado de `/exec`.

    La API responde con `Errors` o con `Stats` como último campo;
    `outcome_label` recuerda cuál de los dos llegó.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True, frozen=True)

    language: str = Field(
        ...,
        alias="Language",
        description="Lenguaje con el que se ejecutó el código.",
    )
    code: str = Field(
        ...,
        alias="Code",
        description="Código ejecutado, tal como lo devuelve la API.",
    )
    results: str = Field(
        ...,
        alias="Results",
        description="Salida estándar de la ejecución.",
    )
    outcome_label: Literal["Errors", "Stats"] = Field(
        ...,
        description="Nombre del campo final presente en la respuesta.",
    )
    outcome: str = Field(
        ...,
        description="Valor del campo final (`Errors` o `Stats`).",
    )

    @property
    def errors(self) -> str | None:
        return self.outcome if self.outcome_label == "Errors" else None

    @property
    def stats(self) -> str | None:
        return self.outcome if self.outcome_label == "Stats" else None

    def report(self) -> str:
        return (
            f"Language: {self.language}\n\n"
            f"Code: {self.code}\n\n"
            f"Results: {self.results}\n\n"
            f"{self.outcome_label}: {self.outcome}"
        )


class TranslationResult(BaseModel):
    """Resultado exitoso de `/tr`."""

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    text: str = Field(..., description="Texto traducido.")
    from_language: str = Field(..., description="Idioma de origen detectado o indicado.")
    to_language: str = Field(..., description="Idioma de destino.")

    def report(self) -> str:
        return (
            f"Text: {self.text}\n\n"
            f"From language: {self.from_language}\n\n"
            f"To language: {self.to_language}"
        )
