"""
app_state Contract Validation

Схема app_state.json лежит в contracts/schema/ и проверяется jsonschema
(Draft 2020-12). Флаги UI в контракте в camelCase, см. AppState.to_contract.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema из SCHEMA_DIR (с кэшем).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return schema


@lru_cache(maxsize=None)
def app_state_validator() -> Draft202012Validator:
    """Validator для app_state контракта."""
    return Draft202012Validator(load_schema("app_state"))


def validate_app_state(data: Dict[str, Any]) -> None:
    """
    Валидация app_state данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    app_state_validator().validate(data)
