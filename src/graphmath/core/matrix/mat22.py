"""
Mat22 — матрица 2×2

Линейные преобразования 2D (без переноса). Соглашения те же, что у Mat33:
row-major хранение, apply() — столбец справа, apply_left() — строка слева,
make_rotate() построен для apply_left().
"""

import math
import numbers
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from graphmath.core.errors import ArityError
from graphmath.core.math import kernels
from graphmath.core.vector import vec2
from graphmath.core.vector.vec2 import Vec2

SIZE: Final[int] = 2


class Mat22(BaseModel):
    """Матрица 2×2 (immutable)."""

    m: tuple[float, ...] = Field(..., description="4 элемента в row-major порядке")

    model_config = {"frozen": True}  # Immutable

    @field_validator("m")
    @classmethod
    def validate_size(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if len(v) != SIZE * SIZE:
            raise ValueError(f"Mat22 requires {SIZE * SIZE} elements, got {len(v)}")
        return v

    def as_tuple(self) -> tuple[float, ...]:
        return self.m

    def as_rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(kernels.row(self.m, SIZE, i) for i in range(SIZE))

    def __add__(self, other: Any) -> "Mat22":
        return add(self, other)

    def __sub__(self, other: Any) -> "Mat22":
        return subtract(self, other)

    def __mul__(self, k: Any) -> "Mat22":
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return scale(self, k)

    def __rmul__(self, k: Any) -> "Mat22":
        return self.__mul__(k)

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Vec2):
            return apply(self, other)
        return multiply(self, other)

    def __rmatmul__(self, other: Any) -> Vec2:
        return apply_left(other, self)


def _elements(a: Any) -> tuple[float, ...]:
    return kernels.take_matrix(a, SIZE * SIZE, "Mat22")


def _make(values: tuple[float, ...]) -> Mat22:
    return Mat22(m=tuple(values))


def _vec(v: Any) -> tuple[float, ...]:
    return kernels.take_vector(v, SIZE, "Vec2")


def create(*args: Any) -> Mat22:
    """
    Создание Mat22 из 4 элементов (row-major): create(seq) или create(a11, a12, a21, a22).

    Raises:
        ArityError: Если элементов меньше 4
    """
    if len(args) == 1:
        if isinstance(args[0], Mat22):
            return args[0]
        return _make(_elements(args[0]))
    return _make(_elements(args))


def identity() -> Mat22:
    return _make(kernels.identity(SIZE))


def zero() -> Mat22:
    return _make(kernels.zero(SIZE))


def make_scale(*factors: float) -> Mat22:
    """
    make_scale(k) → diag(k, k); make_scale(sx, sy) → diag(sx, sy).

    Raises:
        ArityError: Если передано не 1 и не 2 аргумента
    """
    if len(factors) == 1:
        return _make(kernels.diagonal(factors * SIZE))
    if len(factors) == SIZE:
        return _make(kernels.diagonal(factors))
    raise ArityError("Mat22.make_scale", SIZE, len(factors))


def make_rotate(theta: float) -> Mat22:
    """Поворот на theta радиан (для apply_left(): (1, 0) → (cos, sin))."""
    st = math.sin(theta)
    ct = math.cos(theta)
    return create(
        ct, st,
        -st, ct,
    )


def add(a: Any, b: Any) -> Mat22:
    return _make(kernels.add(_elements(a), _elements(b)))


def subtract(a: Any, b: Any) -> Mat22:
    return _make(kernels.subtract(_elements(a), _elements(b)))


def scale(a: Any, k: float) -> Mat22:
    return _make(kernels.scale(_elements(a), k))


def round(a: Any, digits: int) -> Mat22:
    """Округление элементов, половина — от нуля (см. numerical_safeguards.round_half_away)."""
    return _make(kernels.round_all(_elements(a), digits))


def multiply(a: Any, b: Any) -> Mat22:
    return _make(kernels.matmul(_elements(a), _elements(b), SIZE))


def multiply_transpose(a: Any, b: Any) -> Mat22:
    return _make(kernels.matmul_transpose(_elements(a), _elements(b), SIZE))


def transpose(a: Any) -> Mat22:
    return _make(kernels.transpose(_elements(a), SIZE))


def determinant(a: Any) -> float:
    return kernels.determinant(_elements(a), SIZE)


def inverse(a: Any) -> Mat22:
    """
    Raises:
        SingularMatrixError: Если определитель нулевой
    """
    return _make(kernels.inverse(_elements(a), SIZE))


def column0(a: Any) -> Vec2:
    return vec2.create(kernels.column(_elements(a), SIZE, 0))


def column1(a: Any) -> Vec2:
    return vec2.create(kernels.column(_elements(a), SIZE, 1))


def row0(a: Any) -> Vec2:
    return vec2.create(kernels.row(_elements(a), SIZE, 0))


def row1(a: Any) -> Vec2:
    return vec2.create(kernels.row(_elements(a), SIZE, 1))


def diag(a: Any) -> Vec2:
    return vec2.create(kernels.diag(_elements(a), SIZE))


def at(a: Any, i: int, j: int) -> float:
    return kernels.element(_elements(a), SIZE, i, j)


def apply(a: Any, v: Any) -> Vec2:
    return vec2.create(kernels.apply(_elements(a), _vec(v), SIZE))


def apply_transpose(a: Any, v: Any) -> Vec2:
    return vec2.create(kernels.apply_transpose(_elements(a), _vec(v), SIZE))


def apply_left(v: Any, a: Any) -> Vec2:
    return vec2.create(kernels.apply_left(_vec(v), _elements(a), SIZE))


def apply_left_transpose(v: Any, a: Any) -> Vec2:
    return vec2.create(kernels.apply_left_transpose(_vec(v), _elements(a), SIZE))
