"""
Mat44 — матрица 4×4

Аффинные преобразования 3D в однородных координатах. Операции те же,
что у Mat33, масштабированные до 4×4, плюс поворот вокруг произвольной
оси и помощники transform_point() / transform_vector() для Vec3.

СОГЛАШЕНИЯ:
1. Хранение row-major: at(a, i, j) == a.m[4*i + j]
2. Все make_*() построены для вектора-строки (apply_left):
   перенос — в последней строке, повороты — транспонированы
   относительно учебной формы для вектора-столбца
3. Композиция для apply_left: сначала A, затем B → multiply(A, B)
"""

import math
import numbers
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from graphmath.core.errors import ArityError, DegenerateVectorError
from graphmath.core.math import kernels
from graphmath.core.vector import vec3, vec4
from graphmath.core.vector.vec3 import Vec3
from graphmath.core.vector.vec4 import Vec4

SIZE: Final[int] = 4

# Ось поворота по умолчанию для make_rotate()
DEFAULT_ROTATION_AXIS: Final[tuple[float, float, float]] = (0.0, 0.0, 1.0)


# =============================================================================
# MAT44 MODEL
# =============================================================================


class Mat44(BaseModel):
    """
    Матрица 4×4.

    Immutable модель (frozen=True). Все операции создают новый экземпляр.
    """

    m: tuple[float, ...] = Field(..., description="16 элементов в row-major порядке")

    model_config = {"frozen": True}  # Immutable

    @field_validator("m")
    @classmethod
    def validate_size(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if len(v) != SIZE * SIZE:
            raise ValueError(f"Mat44 requires {SIZE * SIZE} elements, got {len(v)}")
        return v

    def as_tuple(self) -> tuple[float, ...]:
        return self.m

    def as_rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(kernels.row(self.m, SIZE, i) for i in range(SIZE))

    def __add__(self, other: Any) -> "Mat44":
        return add(self, other)

    def __sub__(self, other: Any) -> "Mat44":
        return subtract(self, other)

    def __mul__(self, k: Any) -> "Mat44":
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return scale(self, k)

    def __rmul__(self, k: Any) -> "Mat44":
        return self.__mul__(k)

    def __matmul__(self, other: Any) -> Any:
        """a @ b → multiply(a, b); a @ v → apply(a, v)."""
        if isinstance(other, Vec4):
            return apply(self, other)
        return multiply(self, other)

    def __rmatmul__(self, other: Any) -> Vec4:
        """v @ a → apply_left(v, a)."""
        return apply_left(other, self)


def _elements(a: Any) -> tuple[float, ...]:
    return kernels.take_matrix(a, SIZE * SIZE, "Mat44")


def _make(values: tuple[float, ...]) -> Mat44:
    return Mat44(m=tuple(values))


def _vec(v: Any) -> tuple[float, ...]:
    return kernels.take_vector(v, SIZE, "Vec4")


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def create(*args: Any) -> Mat44:
    """
    Создание Mat44 из 16 элементов (row-major): create(seq) или create(a11, ..., a44).

    Raises:
        ArityError: Если элементов меньше 16
    """
    if len(args) == 1:
        if isinstance(args[0], Mat44):
            return args[0]
        return _make(_elements(args[0]))
    return _make(_elements(args))


def identity() -> Mat44:
    return _make(kernels.identity(SIZE))


def zero() -> Mat44:
    return _make(kernels.zero(SIZE))


def make_scale(*factors: float) -> Mat44:
    """
    Масштаб по осям 3D; однородная компонента остаётся 1.

    make_scale(k)          → diag(k, k, k, 1)
    make_scale(sx, sy, sz) → diag(sx, sy, sz, 1)

    Raises:
        ArityError: Если передано не 1 и не 3 аргумента
    """
    if len(factors) == 1:
        return _make(kernels.diagonal(factors * 3 + (1.0,)))
    if len(factors) == 3:
        return _make(kernels.diagonal(factors + (1.0,)))
    raise ArityError("Mat44.make_scale", 3, len(factors))


def make_translate(tx: float, ty: float, tz: float) -> Mat44:
    """Перенос точки (x, y, z, 1) на (tx, ty, tz); перенос в последней строке."""
    return create(
        1, 0, 0, 0,
        0, 1, 0, 0,
        0, 0, 1, 0,
        tx, ty, tz, 1,
    )


def make_rotate_x(theta: float) -> Mat44:
    """Поворот вокруг X: (0, 1, 0) при π/2 переходит в (0, 0, 1)."""
    st = math.sin(theta)
    ct = math.cos(theta)
    return create(
        1, 0, 0, 0,
        0, ct, st, 0,
        0, -st, ct, 0,
        0, 0, 0, 1,
    )


def make_rotate_y(theta: float) -> Mat44:
    """Поворот вокруг Y: (0, 0, 1) при π/2 переходит в (1, 0, 0)."""
    st = math.sin(theta)
    ct = math.cos(theta)
    return create(
        ct, 0, -st, 0,
        0, 1, 0, 0,
        st, 0, ct, 0,
        0, 0, 0, 1,
    )


def make_rotate_z(theta: float) -> Mat44:
    """Поворот вокруг Z: (1, 0, 0) при π/2 переходит в (0, 1, 0)."""
    st = math.sin(theta)
    ct = math.cos(theta)
    return create(
        ct, st, 0, 0,
        -st, ct, 0, 0,
        0, 0, 1, 0,
        0, 0, 0, 1,
    )


def make_rotate(theta: float, axis: Any = DEFAULT_ROTATION_AXIS) -> Mat44:
    """
    Поворот на theta радиан вокруг оси axis (формула Родрига).

    Ось нормализуется; направление поворота — по правилу правой руки.
    При axis = (0, 0, 1) совпадает с make_rotate_z(theta).

    Args:
        theta: Угол в радианах
        axis: Ось поворота (Vec3 или последовательность из 3 чисел)

    Raises:
        DegenerateVectorError: Если ось нулевой длины
    """
    try:
        x, y, z = vec3.normalize(axis).as_tuple()
    except DegenerateVectorError as e:
        raise DegenerateVectorError(f"Rotation axis must be non-zero: {axis!r}") from e

    st = math.sin(theta)
    ct = math.cos(theta)
    t = 1.0 - ct

    return create(
        ct + x * x * t, x * y * t + z * st, x * z * t - y * st, 0,
        x * y * t - z * st, ct + y * y * t, y * z * t + x * st, 0,
        x * z * t + y * st, y * z * t - x * st, ct + z * z * t, 0,
        0, 0, 0, 1,
    )


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Any, b: Any) -> Mat44:
    return _make(kernels.add(_elements(a), _elements(b)))


def subtract(a: Any, b: Any) -> Mat44:
    return _make(kernels.subtract(_elements(a), _elements(b)))


def scale(a: Any, k: float) -> Mat44:
    return _make(kernels.scale(_elements(a), k))


def round(a: Any, digits: int) -> Mat44:
    """
    Округление каждого элемента до digits дробных знаков (половина — от нуля).

    Raises:
        ValueError: Если digits не int в диапазоне [0, 15]
    """
    return _make(kernels.round_all(_elements(a), digits))


def multiply(a: Any, b: Any) -> Mat44:
    return _make(kernels.matmul(_elements(a), _elements(b), SIZE))


def multiply_transpose(a: Any, b: Any) -> Mat44:
    """multiply(a, transpose(b)) без построения транспонированной b."""
    return _make(kernels.matmul_transpose(_elements(a), _elements(b), SIZE))


def transpose(a: Any) -> Mat44:
    return _make(kernels.transpose(_elements(a), SIZE))


def determinant(a: Any) -> float:
    return kernels.determinant(_elements(a), SIZE)


def inverse(a: Any) -> Mat44:
    """
    Raises:
        SingularMatrixError: Если определитель нулевой
    """
    return _make(kernels.inverse(_elements(a), SIZE))


# =============================================================================
# ИЗВЛЕЧЕНИЕ
# =============================================================================


def column0(a: Any) -> Vec4:
    return vec4.create(kernels.column(_elements(a), SIZE, 0))


def column1(a: Any) -> Vec4:
    return vec4.create(kernels.column(_elements(a), SIZE, 1))


def column2(a: Any) -> Vec4:
    return vec4.create(kernels.column(_elements(a), SIZE, 2))


def column3(a: Any) -> Vec4:
    return vec4.create(kernels.column(_elements(a), SIZE, 3))


def row0(a: Any) -> Vec4:
    return vec4.create(kernels.row(_elements(a), SIZE, 0))


def row1(a: Any) -> Vec4:
    return vec4.create(kernels.row(_elements(a), SIZE, 1))


def row2(a: Any) -> Vec4:
    return vec4.create(kernels.row(_elements(a), SIZE, 2))


def row3(a: Any) -> Vec4:
    return vec4.create(kernels.row(_elements(a), SIZE, 3))


def diag(a: Any) -> Vec4:
    return vec4.create(kernels.diag(_elements(a), SIZE))


def at(a: Any, i: int, j: int) -> float:
    """
    Raises:
        ElementIndexError: Если i или j вне [0, 4) (подкласс IndexError)
    """
    return kernels.element(_elements(a), SIZE, i, j)


# =============================================================================
# ПРИМЕНЕНИЕ К ВЕКТОРАМ
# =============================================================================


def apply(a: Any, v: Any) -> Vec4:
    """a · v (v — столбец)."""
    return vec4.create(kernels.apply(_elements(a), _vec(v), SIZE))


def apply_transpose(a: Any, v: Any) -> Vec4:
    return vec4.create(kernels.apply_transpose(_elements(a), _vec(v), SIZE))


def apply_left(v: Any, a: Any) -> Vec4:
    """v · a (v — строка). Соглашение всех make_*()."""
    return vec4.create(kernels.apply_left(_vec(v), _elements(a), SIZE))


def apply_left_transpose(v: Any, a: Any) -> Vec4:
    return vec4.create(kernels.apply_left_transpose(_vec(v), _elements(a), SIZE))


def transform_point(v: Any, a: Any) -> Vec3:
    """
    Преобразование точки Vec3: apply_left((x, y, z, 1), a).

    Если итоговая w не 0 и не 1 (проекция), результат делится на w.
    """
    x, y, z = vec3.create(v).as_tuple()
    rx, ry, rz, rw = kernels.apply_left((x, y, z, 1.0), _elements(a), SIZE)
    if rw != 0.0 and rw != 1.0:
        return vec3.create(rx / rw, ry / rw, rz / rw)
    return vec3.create(rx, ry, rz)


def transform_vector(v: Any, a: Any) -> Vec3:
    """Преобразование направления Vec3: apply_left((x, y, z, 0), a), перенос не влияет."""
    x, y, z = vec3.create(v).as_tuple()
    rx, ry, rz, _ = kernels.apply_left((x, y, z, 0.0), _elements(a), SIZE)
    return vec3.create(rx, ry, rz)
