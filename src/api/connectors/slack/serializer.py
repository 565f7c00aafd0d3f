"""Serializer JSON baseado em Pydantic v2.

A mesma regra de nomes (aliases dos modelos) vale nas duas direções:
``by_alias=True`` na saída e ``populate_by_name`` na entrada.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .slack_errors import SerializationError

T = TypeVar("T")


class PydanticSerializer:
    """Converte modelos Pydantic de/para JSON."""

    def __init__(self, *, exclude_none: bool = True) -> None:
        self._exclude_none = exclude_none

    def serialize(self, obj: Any) -> str:
        """Serializa um modelo para texto JSON.

        Raises:
            SerializationError: Se obj não for um modelo Pydantic.
        """
        if not isinstance(obj, BaseModel):
            raise SerializationError(
                f"Não é possível serializar {type(obj).__name__}: esperado modelo Pydantic"
            )
        return obj.model_dump_json(by_alias=True, exclude_none=self._exclude_none)

    def deserialize(self, text: str | bytes, target_type: type[T]) -> T:
        """Desserializa texto JSON no tipo alvo.

        Raises:
            SerializationError: Se o tipo alvo não for um modelo Pydantic
                ou se a validação falhar.
        """
        if not (isinstance(target_type, type) and issubclass(target_type, BaseModel)):
            raise SerializationError(
                f"Tipo alvo inválido para desserialização: {target_type!r}"
            )
        try:
            return target_type.model_validate_json(text)
        except ValidationError as exc:
            raise SerializationError(
                f"Falha ao desserializar resposta em {target_type.__name__}"
            ) from exc
