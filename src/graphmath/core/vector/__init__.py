"""
Vector value types.

Каждый модуль (vec2, vec3, vec4) — самостоятельная алгебра над одним
типом; операции вызываются как функции модуля: vec3.dot(a, b).
"""

from graphmath.core.vector import vec2, vec3, vec4
from graphmath.core.vector.vec2 import Vec2
from graphmath.core.vector.vec3 import Vec3
from graphmath.core.vector.vec4 import Vec4

__all__ = [
    # Modules
    "vec2",
    "vec3",
    "vec4",
    # Models
    "Vec2",
    "Vec3",
    "Vec4",
]
