"""
Integer Value Contract Validator

Валидация значения ячейки VM (stack dump) по JSON Schema integer_value.json.
Схема поставляется вместе с пакетом (src/core/contracts/schema/) и читается
через importlib.resources при первом обращении.

ИНВАРИАНТЫ:
1. Схема загружается один раз и проходит meta-валидацию Draft 2020-12
2. Схема проверяет форму данных; граница 257 бит — в IntegerSnapshot
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

from .snapshot import IntegerSnapshot

logger = logging.getLogger(__name__)

SCHEMA_NAME = "integer_value"


# =============================================================================
# SCHEMA
# =============================================================================


@lru_cache(maxsize=None)
def load_schema() -> Dict[str, Any]:
    """
    Загрузка integer_value.json из данных пакета.

    Returns:
        Схема как dict (кэшируется)

    Raises:
        ValueError: Если схема не проходит meta-валидацию
    """
    resource = resources.files(__package__) / "schema" / f"{SCHEMA_NAME}.json"
    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {SCHEMA_NAME}.json: {e}") from e

    logger.debug("loaded schema %s", SCHEMA_NAME)
    return schema


# =============================================================================
# VALIDATOR
# =============================================================================


class IntegerValueValidator:
    """Валидатор данных значения ячейки против integer_value.json."""

    def __init__(self) -> None:
        self.schema = load_schema()
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_integer_value(data: Dict[str, Any]) -> None:
    """
    Валидация сырых данных значения ячейки (например, из JSON stack dump).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IntegerValueValidator().validate(data)


def validate_snapshot(snapshot: IntegerSnapshot) -> Dict[str, Any]:
    """
    Проверка, что дамп снапшота соответствует схеме.

    Returns:
        model_dump() снапшота, готовый к сериализации

    Raises:
        ValidationError: Если дамп не соответствует схеме
    """
    data = snapshot.model_dump()
    validate_integer_value(data)
    return data
