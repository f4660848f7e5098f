"""
JSON Schema Contract Validators

Модуль для валидации JSON-представлений векторов и матриц согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Формат payload:
    {"type": "vec3", "components": [1.0, 2.0, 3.0]}
    {"type": "mat33", "components": [1, 0, 0, 0, 1, 0, 0, 0, 1]}

Схемы (graphmath/core/contracts/schema/):
- vec2.json, vec3.json, vec4.json
- mat22.json, mat33.json, mat44.json

В отличие от create(), контракт строгий: число компонент должно
совпадать точно, лишние компоненты — ошибка валидации.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from graphmath.core.matrix import mat22, mat33, mat44
from graphmath.core.matrix.mat22 import Mat22
from graphmath.core.matrix.mat33 import Mat33
from graphmath.core.matrix.mat44 import Mat44
from graphmath.core.vector import vec2, vec3, vec4
from graphmath.core.vector.vec2 import Vec2
from graphmath.core.vector.vec3 import Vec3
from graphmath.core.vector.vec4 import Vec4

logger = logging.getLogger(__name__)

# Тип payload → (модель, конструктор)
PAYLOAD_TYPES: Dict[str, tuple[type, Callable[..., Any]]] = {
    "vec2": (Vec2, vec2.create),
    "vec3": (Vec3, vec3.create),
    "vec4": (Vec4, vec4.create),
    "mat22": (Mat22, mat22.create),
    "mat33": (Mat33, mat33.create),
    "mat44": (Mat44, mat44.create),
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'vec3')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class Vec2Validator(ContractValidator):
    def __init__(self):
        super().__init__("vec2")


class Vec3Validator(ContractValidator):
    def __init__(self):
        super().__init__("vec3")


class Vec4Validator(ContractValidator):
    def __init__(self):
        super().__init__("vec4")


class Mat22Validator(ContractValidator):
    def __init__(self):
        super().__init__("mat22")


class Mat33Validator(ContractValidator):
    def __init__(self):
        super().__init__("mat33")


class Mat44Validator(ContractValidator):
    def __init__(self):
        super().__init__("mat44")


# Тип payload → класс валидатора
VALIDATOR_TYPES: Dict[str, type[ContractValidator]] = {
    "vec2": Vec2Validator,
    "vec3": Vec3Validator,
    "vec4": Vec4Validator,
    "mat22": Mat22Validator,
    "mat33": Mat33Validator,
    "mat44": Mat44Validator,
}

# Кэш экземпляров: Draft202012Validator строится один раз на тип
_VALIDATORS: Dict[str, ContractValidator] = {}


def get_validator(payload_type: str) -> ContractValidator:
    """
    Валидатор для типа payload (создаётся при первом обращении).

    Raises:
        KeyError: Если тип неизвестен
    """
    validator = _VALIDATORS.get(payload_type)
    if validator is None:
        validator = VALIDATOR_TYPES[payload_type]()
        _VALIDATORS[payload_type] = validator
    return validator


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_payload(data: Dict[str, Any]) -> None:
    """
    Валидация payload по схеме, выбранной по полю "type".

    Raises:
        ValidationError: Если тип неизвестен или данные не соответствуют схеме
    """
    payload_type = data.get("type") if isinstance(data, dict) else None
    if payload_type not in PAYLOAD_TYPES:
        raise ValidationError(
            f"Unknown payload type {payload_type!r}, expected one of {sorted(PAYLOAD_TYPES)}"
        )
    get_validator(payload_type).validate(data)


def dump_payload(value: Any) -> Dict[str, Any]:
    """
    Сериализация вектора или матрицы в payload (dict, готовый для json.dumps).

    Raises:
        TypeError: Если значение не является моделью graphmath
    """
    for payload_type, (model, _) in PAYLOAD_TYPES.items():
        if isinstance(value, model):
            return {"type": payload_type, "components": list(value.as_tuple())}

    raise TypeError(f"Cannot dump {type(value).__name__} as graphmath payload")


def load_payload(data: Dict[str, Any]) -> Any:
    """
    Десериализация payload: валидация по схеме, затем create().

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_payload(data)
    _, factory = PAYLOAD_TYPES[data["type"]]
    return factory(data["components"])
