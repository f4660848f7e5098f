"""
Vec4 — четырёхмерный вектор

Immutable Pydantic модель (x, y, z, w). Используется как однородные
координаты для Mat44: точка — w = 1, направление — w = 0.
Векторного произведения нет.
"""

import logging
import numbers
from typing import Any, Final

from pydantic import BaseModel, Field

from graphmath.core.errors import ArityError, DegenerateVectorError
from graphmath.core.math import kernels
from graphmath.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
)

logger = logging.getLogger(__name__)

SIZE: Final[int] = 4


class Vec4(BaseModel):
    """Четырёхмерный вектор (immutable)."""

    x: float = Field(0.0, description="Компонента X")
    y: float = Field(0.0, description="Компонента Y")
    z: float = Field(0.0, description="Компонента Z")
    w: float = Field(0.0, description="Компонента W (однородная)")

    model_config = {"frozen": True}  # Immutable

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def __add__(self, other: Any) -> "Vec4":
        return add(self, other)

    def __sub__(self, other: Any) -> "Vec4":
        return subtract(self, other)

    def __neg__(self) -> "Vec4":
        return negate(self)

    def __mul__(self, other: Any) -> "Vec4":
        # Матрица и вектор перемножаются только через @
        if kernels.is_matrix_model(other):
            return NotImplemented
        return scale(self, other)

    def __rmul__(self, other: Any) -> "Vec4":
        return self.__mul__(other)


def _components(vec: Any) -> tuple[float, ...]:
    return kernels.take_vector(vec, SIZE, "Vec4")


def _make(values: tuple[float, ...]) -> Vec4:
    x, y, z, w = values
    return Vec4(x=x, y=y, z=z, w=w)


def create(*args: Any) -> Vec4:
    """
    Создание Vec4: create(), create(x, y, z, w) или create(seq).

    Raises:
        ArityError: Если seq короче 4 элементов или число аргументов не 0, 1, 4
    """
    if not args:
        return Vec4()

    if len(args) == 1:
        if isinstance(args[0], Vec4):
            return args[0]
        return _make(_components(args[0]))

    if len(args) == SIZE:
        return _make(_components(args))

    raise ArityError("Vec4", SIZE, len(args))


def add(a: Any, b: Any) -> Vec4:
    return _make(kernels.add(_components(a), _components(b)))


def subtract(a: Any, b: Any) -> Vec4:
    return _make(kernels.subtract(_components(a), _components(b)))


def scale(vec: Any, factor: Any) -> Vec4:
    if isinstance(factor, numbers.Real):
        return _make(kernels.scale(_components(vec), factor))
    return multiply(vec, factor)


def multiply(a: Any, b: Any) -> Vec4:
    return _make(kernels.multiply(_components(a), _components(b)))


def negate(vec: Any) -> Vec4:
    return _make(kernels.negate(_components(vec)))


def dot(a: Any, b: Any) -> float:
    return kernels.dot(_components(a), _components(b))


def length(vec: Any) -> float:
    return kernels.length(_components(vec))


def length_squared(vec: Any) -> float:
    return kernels.length_squared(_components(vec))


def length_manhattan(vec: Any) -> float:
    """x + y + z + w со знаком, без abs()."""
    return kernels.length_manhattan(_components(vec))


def normalize(vec: Any) -> Vec4:
    """
    Raises:
        DegenerateVectorError: Если все компоненты нулевые или есть NaN/Inf
    """
    components = kernels.normalized_or_none(_components(vec))
    if components is None:
        raise DegenerateVectorError(
            f"Cannot normalize degenerate Vec4 (zero-length or non-finite): {vec!r}"
        )
    return _make(components)


def normalize_safe(vec: Any, fallback: Any = None) -> Vec4:
    components = kernels.normalized_or_none(_components(vec))
    if components is None:
        logger.debug("Degenerate Vec4 %r normalized to fallback %r", vec, fallback)
        return create() if fallback is None else create(fallback)
    return _make(components)


def distance(a: Any, b: Any) -> float:
    return kernels.distance(_components(a), _components(b))


def lerp(a: Any, b: Any, t: float) -> Vec4:
    return _make(kernels.lerp(_components(a), _components(b), t))


def compare(a: Any, b: Any, epsilon: float) -> bool:
    return distance(a, b) < epsilon


def equal(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    return kernels.approx_equal(_components(a), _components(b), rel_tol, abs_tol)
