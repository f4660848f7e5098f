"""
Contract Validation Module

Модуль для валидации JSON-представлений векторов и матриц.
"""

from .validators import (
    PAYLOAD_TYPES,
    VALIDATOR_TYPES,
    ContractValidator,
    Mat22Validator,
    Mat33Validator,
    Mat44Validator,
    SchemaLoader,
    Vec2Validator,
    Vec3Validator,
    Vec4Validator,
    dump_payload,
    get_validator,
    load_payload,
    validate_payload,
)

__all__ = [
    # Constants
    "PAYLOAD_TYPES",
    "VALIDATOR_TYPES",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Vec2Validator",
    "Vec3Validator",
    "Vec4Validator",
    "Mat22Validator",
    "Mat33Validator",
    "Mat44Validator",
    # Functions
    "get_validator",
    "validate_payload",
    "dump_payload",
    "load_payload",
]
