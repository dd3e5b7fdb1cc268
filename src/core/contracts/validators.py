"""
Entity Contracts — JSON Schema контракты сущностей

Каждая сущность сериализуется через model_dump() в JSON-объект, форма которого
зафиксирована схемой из каталога schema/. Сводка Rectangle.summary() имеет
собственный контракт. Showcase проверяет данные по контрактам перед выводом.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from src.core.domain import Book, Person, Rectangle, Spaceship

SCHEMA_DIR = Path(__file__).parent / "schema"

# Контракт сущности определяется её классом
ENTITY_SCHEMAS: Dict[type, str] = {
    Spaceship: "spaceship",
    Rectangle: "rectangle",
    Book: "book",
    Person: "person",
}

RECTANGLE_SUMMARY_SCHEMA = "rectangle_summary"


def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Чтение и meta-валидация схемы.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если документ не является корректной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")
    return schema


class ContractValidator:
    """
    Валидатор одного контракта.

    Экземпляры кэшируются по имени схемы: for_schema() читает файл один раз.
    """

    _cache: Dict[str, "ContractValidator"] = {}

    def __init__(self, schema_name: str, schema: Dict[str, Any]):
        self.schema_name = schema_name
        self._validator = Draft202012Validator(schema)

    @classmethod
    def for_schema(cls, schema_name: str) -> "ContractValidator":
        if schema_name not in cls._cache:
            cls._cache[schema_name] = cls(schema_name, load_schema(schema_name))
        return cls._cache[schema_name]

    def violations(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения контракта в виде строк '<путь>: <сообщение>'.

        Returns:
            Список, отсортированный по пути; пустой, если данные валидны
        """
        errors = sorted(self._validator.iter_errors(data), key=lambda e: list(e.path))
        return [f"{'/'.join(map(str, e.path)) or '<root>'}: {e.message}" for e in errors]

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: первое найденное нарушение
        """
        self._validator.validate(data)


def validate_entity(entity: BaseModel) -> Dict[str, Any]:
    """
    Проверка сериализованной сущности по её контракту.

    Args:
        entity: Spaceship, Rectangle, Book или Person

    Returns:
        Проверенный payload (model_dump())

    Raises:
        KeyError: Если для класса сущности нет контракта
        jsonschema.ValidationError: Если payload не соответствует схеме
    """
    schema_name = ENTITY_SCHEMAS[type(entity)]
    payload = entity.model_dump()
    ContractValidator.for_schema(schema_name).validate(payload)
    return payload


def validate_rectangle_summary(summary: Dict[str, Any]) -> Dict[str, Any]:
    """Проверка сводки Rectangle.summary(); возвращает её без изменений."""
    ContractValidator.for_schema(RECTANGLE_SUMMARY_SCHEMA).validate(summary)
    return summary
