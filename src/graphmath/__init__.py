"""
graphmath — vector and matrix library for 2D and 3D mathematical operations.

Public API:
- Vectors: vec2, vec3, vec4 (modules) and Vec2, Vec3, Vec4 (models)
- Matrices: mat22, mat33, mat44 (modules) and Mat22, Mat33, Mat44 (models)
- Errors: ArityError, ElementIndexError, DegenerateVectorError, SingularMatrixError

Example:
    >>> from graphmath import mat33, vec3
    >>> vec3.dot([3, 4, 5], [5, 6, 7])
    74.0
    >>> mat33.apply(mat33.identity(), (1, 2, 3)).as_tuple()
    (1.0, 2.0, 3.0)
"""

import logging

from graphmath.core.errors import (
    ArityError,
    DegenerateVectorError,
    ElementIndexError,
    GraphmathError,
    SingularMatrixError,
)
from graphmath.core.matrix import Mat22, Mat33, Mat44, mat22, mat33, mat44
from graphmath.core.vector import Vec2, Vec3, Vec4, vec2, vec3, vec4

# Обработчики логов настраивает приложение
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.3"

__all__ = [
    # Vector modules and models
    "vec2",
    "vec3",
    "vec4",
    "Vec2",
    "Vec3",
    "Vec4",
    # Matrix modules and models
    "mat22",
    "mat33",
    "mat44",
    "Mat22",
    "Mat33",
    "Mat44",
    # Errors
    "GraphmathError",
    "ArityError",
    "ElementIndexError",
    "DegenerateVectorError",
    "SingularMatrixError",
]
