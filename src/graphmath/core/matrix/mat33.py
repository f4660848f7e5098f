"""
Mat33 — матрица 3×3

Immutable Pydantic модель из 9 float в row-major порядке и алгебра над ней.
Используется для аффинных преобразований 2D (однородные координаты)
и для линейных преобразований 3D.

СОГЛАШЕНИЯ:
1. Хранение row-major: at(a, i, j) == a.m[3*i + j]
2. apply(a, v) — вектор-столбец справа: a · v
3. apply_left(v, a) — вектор-строка слева: v · a
4. make_translate() / make_rotate() построены для apply_left():
   перенос лежит в последней строке. Применение через apply() к таким
   матрицам НЕ даёт перенос — для этого нужна транспонированная матрица.

Пример:
    >>> point = vec3.create(1, 0, 1)
    >>> apply_left(point, make_translate(2, 3)).as_tuple()
    (3.0, 3.0, 1.0)
"""

import math
import numbers
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from graphmath.core.errors import ArityError
from graphmath.core.math import kernels
from graphmath.core.vector import vec3
from graphmath.core.vector.vec3 import Vec3

SIZE: Final[int] = 3


# =============================================================================
# MAT33 MODEL
# =============================================================================


class Mat33(BaseModel):
    """
    Матрица 3×3.

    Immutable модель (frozen=True). Все операции создают новый экземпляр.
    """

    m: tuple[float, ...] = Field(..., description="9 элементов в row-major порядке")

    model_config = {"frozen": True}  # Immutable

    @field_validator("m")
    @classmethod
    def validate_size(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if len(v) != SIZE * SIZE:
            raise ValueError(f"Mat33 requires {SIZE * SIZE} elements, got {len(v)}")
        return v

    def as_tuple(self) -> tuple[float, ...]:
        return self.m

    def as_rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(kernels.row(self.m, SIZE, i) for i in range(SIZE))

    def __add__(self, other: Any) -> "Mat33":
        return add(self, other)

    def __sub__(self, other: Any) -> "Mat33":
        return subtract(self, other)

    def __mul__(self, k: Any) -> "Mat33":
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return scale(self, k)

    def __rmul__(self, k: Any) -> "Mat33":
        return self.__mul__(k)

    def __matmul__(self, other: Any) -> Any:
        """a @ b → multiply(a, b); a @ v → apply(a, v)."""
        if isinstance(other, Vec3):
            return apply(self, other)
        return multiply(self, other)

    def __rmatmul__(self, other: Any) -> Vec3:
        """v @ a → apply_left(v, a)."""
        return apply_left(other, self)


def _elements(a: Any) -> tuple[float, ...]:
    return kernels.take_matrix(a, SIZE * SIZE, "Mat33")


def _make(values: tuple[float, ...]) -> Mat33:
    return Mat33(m=tuple(values))


def _vec(v: Any) -> tuple[float, ...]:
    return kernels.take_vector(v, SIZE, "Vec3")


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def create(*args: Any) -> Mat33:
    """
    Создание Mat33 из 9 элементов (row-major).

    Формы вызова:
        create(seq)          → первые 9 элементов seq
        create(a11, ..., a33)

    Raises:
        ArityError: Если элементов меньше 9
    """
    if len(args) == 1:
        if isinstance(args[0], Mat33):
            return args[0]
        return _make(_elements(args[0]))
    return _make(_elements(args))


def identity() -> Mat33:
    """Единичная матрица."""
    return _make(kernels.identity(SIZE))


def zero() -> Mat33:
    """Нулевая матрица."""
    return _make(kernels.zero(SIZE))


def make_scale(*factors: float) -> Mat33:
    """
    Диагональная матрица масштаба.

    make_scale(k)          → diag(k, k, k)
    make_scale(sx, sy, sz) → diag(sx, sy, sz)

    Raises:
        ArityError: Если передано не 1 и не 3 аргумента
    """
    if len(factors) == 1:
        return _make(kernels.diagonal(factors * SIZE))
    if len(factors) == SIZE:
        return _make(kernels.diagonal(factors))
    raise ArityError("Mat33.make_scale", SIZE, len(factors))


def make_translate(tx: float, ty: float) -> Mat33:
    """
    Перенос вектора 2D (x, y, 1) на (tx, ty).

    Перенос хранится в последней строке: применять через apply_left().
    """
    return create(
        1, 0, 0,
        0, 1, 0,
        tx, ty, 1,
    )


def make_rotate(theta: float) -> Mat33:
    """
    Поворот вектора 2D на theta радиан вокруг оси Z.

    Для apply_left(): (1, 0, 0) при theta = π/2 переходит в (0, 1, 0).
    """
    st = math.sin(theta)
    ct = math.cos(theta)
    return create(
        ct, st, 0,
        -st, ct, 0,
        0, 0, 1,
    )


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Any, b: Any) -> Mat33:
    return _make(kernels.add(_elements(a), _elements(b)))


def subtract(a: Any, b: Any) -> Mat33:
    return _make(kernels.subtract(_elements(a), _elements(b)))


def scale(a: Any, k: float) -> Mat33:
    """Каждый элемент, умноженный на k."""
    return _make(kernels.scale(_elements(a), k))


def round(a: Any, digits: int) -> Mat33:
    """
    Округление каждого элемента до digits дробных знаков.

    Режим: половина — от нуля, по кратчайшему десятичному представлению
    (0.125 → 0.13, -2.5 → -3.0). Не совпадает со встроенным round().

    Raises:
        ValueError: Если digits не int в диапазоне [0, 15]
    """
    return _make(kernels.round_all(_elements(a), digits))


def multiply(a: Any, b: Any) -> Mat33:
    """Произведение: result[i][j] = Σk a[i][k]·b[k][j]."""
    return _make(kernels.matmul(_elements(a), _elements(b), SIZE))


def multiply_transpose(a: Any, b: Any) -> Mat33:
    """multiply(a, transpose(b)) без построения транспонированной b."""
    return _make(kernels.matmul_transpose(_elements(a), _elements(b), SIZE))


def transpose(a: Any) -> Mat33:
    return _make(kernels.transpose(_elements(a), SIZE))


def determinant(a: Any) -> float:
    return kernels.determinant(_elements(a), SIZE)


def inverse(a: Any) -> Mat33:
    """
    Обратная матрица.

    Raises:
        SingularMatrixError: Если определитель нулевой
    """
    return _make(kernels.inverse(_elements(a), SIZE))


# =============================================================================
# ИЗВЛЕЧЕНИЕ
# =============================================================================


def column0(a: Any) -> Vec3:
    return vec3.create(kernels.column(_elements(a), SIZE, 0))


def column1(a: Any) -> Vec3:
    return vec3.create(kernels.column(_elements(a), SIZE, 1))


def column2(a: Any) -> Vec3:
    return vec3.create(kernels.column(_elements(a), SIZE, 2))


def row0(a: Any) -> Vec3:
    return vec3.create(kernels.row(_elements(a), SIZE, 0))


def row1(a: Any) -> Vec3:
    return vec3.create(kernels.row(_elements(a), SIZE, 1))


def row2(a: Any) -> Vec3:
    return vec3.create(kernels.row(_elements(a), SIZE, 2))


def diag(a: Any) -> Vec3:
    return vec3.create(kernels.diag(_elements(a), SIZE))


def at(a: Any, i: int, j: int) -> float:
    """
    Элемент в строке i, столбце j (с нуля).

    Raises:
        ElementIndexError: Если i или j вне [0, 3) (подкласс IndexError)
    """
    return kernels.element(_elements(a), SIZE, i, j)


# =============================================================================
# ПРИМЕНЕНИЕ К ВЕКТОРАМ
# =============================================================================


def apply(a: Any, v: Any) -> Vec3:
    """a · v (v — столбец)."""
    return vec3.create(kernels.apply(_elements(a), _vec(v), SIZE))


def apply_transpose(a: Any, v: Any) -> Vec3:
    """aᵗ · v без построения aᵗ."""
    return vec3.create(kernels.apply_transpose(_elements(a), _vec(v), SIZE))


def apply_left(v: Any, a: Any) -> Vec3:
    """v · a (v — строка). Соглашение make_translate() и make_rotate()."""
    return vec3.create(kernels.apply_left(_vec(v), _elements(a), SIZE))


def apply_left_transpose(v: Any, a: Any) -> Vec3:
    """v · aᵗ без построения aᵗ."""
    return vec3.create(kernels.apply_left_transpose(_vec(v), _elements(a), SIZE))
