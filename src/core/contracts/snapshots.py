"""
Snapshot Contracts — JSON Schema снимков записей

Снимок записи — результат model_dump(mode="json"). Схема снимка строится
из самой pydantic-модели (model_json_schema, режим serialization) и
проверяется jsonschema по Draft 2020-12: поля, типы, enum derived и запрет
лишних полей берутся из модели, отдельных файлов схем нет.

NaN/Inf в JSON не представимы: to_contract() записей отклоняет их до
проверки схемы.
"""

from functools import lru_cache
from typing import Any

from jsonschema import Draft202012Validator
from pydantic import BaseModel


@lru_cache(maxsize=None)
def snapshot_validator(model: type[BaseModel]) -> Draft202012Validator:
    """
    Валидатор снимков модели, один на класс.

    Raises:
        jsonschema.SchemaError: схема модели невалидна для Draft 2020-12
    """
    schema = model.model_json_schema(mode="serialization")
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_snapshot(model: type[BaseModel], data: dict[str, Any]) -> None:
    """
    Проверка снимка по схеме модели.

    Raises:
        jsonschema.ValidationError: первое найденное нарушение
    """
    snapshot_validator(model).validate(data)


def snapshot_errors(model: type[BaseModel], data: dict[str, Any]) -> list[str]:
    """Сообщения обо всех нарушениях (пустой список для валидного снимка)"""
    return [error.message for error in snapshot_validator(model).iter_errors(data)]
