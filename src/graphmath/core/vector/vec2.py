"""
Vec2 — двумерный вектор

Immutable Pydantic модель (x, y) и алгебра над ней. Набор операций
совпадает с Vec3, кроме cross(): вместо него perp_dot() (скалярное
"векторное" произведение в 2D) и perp().
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

SIZE: Final[int] = 2


class Vec2(BaseModel):
    """Двумерный вектор (immutable)."""

    x: float = Field(0.0, description="Компонента X")
    y: float = Field(0.0, description="Компонента Y")

    model_config = {"frozen": True}  # Immutable

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: Any) -> "Vec2":
        return add(self, other)

    def __sub__(self, other: Any) -> "Vec2":
        return subtract(self, other)

    def __neg__(self) -> "Vec2":
        return negate(self)

    def __mul__(self, other: Any) -> "Vec2":
        # Матрица и вектор перемножаются только через @
        if kernels.is_matrix_model(other):
            return NotImplemented
        return scale(self, other)

    def __rmul__(self, other: Any) -> "Vec2":
        return self.__mul__(other)


def _components(vec: Any) -> tuple[float, ...]:
    return kernels.take_vector(vec, SIZE, "Vec2")


def _make(values: tuple[float, ...]) -> Vec2:
    x, y = values
    return Vec2(x=x, y=y)


def create(*args: Any) -> Vec2:
    """
    Создание Vec2: create(), create(x, y) или create(seq).

    Raises:
        ArityError: Если seq короче 2 элементов или передано ≥ 3 аргументов
    """
    if not args:
        return Vec2()

    if len(args) == 1:
        if isinstance(args[0], Vec2):
            return args[0]
        return _make(_components(args[0]))

    if len(args) == SIZE:
        return _make(_components(args))

    raise ArityError("Vec2", SIZE, len(args))


def add(a: Any, b: Any) -> Vec2:
    return _make(kernels.add(_components(a), _components(b)))


def subtract(a: Any, b: Any) -> Vec2:
    return _make(kernels.subtract(_components(a), _components(b)))


def scale(vec: Any, factor: Any) -> Vec2:
    """Число — равномерный масштаб; вектор — покомпонентный."""
    if isinstance(factor, numbers.Real):
        return _make(kernels.scale(_components(vec), factor))
    return multiply(vec, factor)


def multiply(a: Any, b: Any) -> Vec2:
    return _make(kernels.multiply(_components(a), _components(b)))


def negate(vec: Any) -> Vec2:
    return _make(kernels.negate(_components(vec)))


def dot(a: Any, b: Any) -> float:
    return kernels.dot(_components(a), _components(b))


def perp_dot(a: Any, b: Any) -> float:
    """
    Скалярное 2D "векторное" произведение: x1·y2 − y1·x2.

    Равно Z-компоненте cross((x1, y1, 0), (x2, y2, 0)); положительно,
    если b повёрнут от a против часовой стрелки.
    """
    x1, y1 = _components(a)
    x2, y2 = _components(b)
    return (x1 * y2) - (y1 * x2)


def perp(vec: Any) -> Vec2:
    """Вектор, повёрнутый на +90°: (−y, x)."""
    x, y = _components(vec)
    return Vec2(x=-y, y=x)


def length(vec: Any) -> float:
    return kernels.length(_components(vec))


def length_squared(vec: Any) -> float:
    return kernels.length_squared(_components(vec))


def length_manhattan(vec: Any) -> float:
    """x + y со знаком (см. kernels.length_manhattan)."""
    return kernels.length_manhattan(_components(vec))


def normalize(vec: Any) -> Vec2:
    """
    Raises:
        DegenerateVectorError: Если все компоненты нулевые или есть NaN/Inf
    """
    components = kernels.normalized_or_none(_components(vec))
    if components is None:
        raise DegenerateVectorError(
            f"Cannot normalize degenerate Vec2 (zero-length or non-finite): {vec!r}"
        )
    return _make(components)


def normalize_safe(vec: Any, fallback: Any = None) -> Vec2:
    components = kernels.normalized_or_none(_components(vec))
    if components is None:
        logger.debug("Degenerate Vec2 %r normalized to fallback %r", vec, fallback)
        return create() if fallback is None else create(fallback)
    return _make(components)


def distance(a: Any, b: Any) -> float:
    return kernels.distance(_components(a), _components(b))


def lerp(a: Any, b: Any, t: float) -> Vec2:
    return _make(kernels.lerp(_components(a), _components(b), t))


def compare(a: Any, b: Any, epsilon: float) -> bool:
    """True если расстояние между a и b строго меньше epsilon."""
    return distance(a, b) < epsilon


def equal(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    return kernels.approx_equal(_components(a), _components(b), rel_tol, abs_tol)
