"""
Vec3 — трёхмерный вектор

Immutable Pydantic модель (x, y, z) и алгебра над ней: арифметика,
скалярное и векторное произведения, нормы, интерполяция, сравнение.

Все функции принимают Vec3 или любую последовательность из ≥ 3 чисел
(лишние компоненты отбрасываются, недостающие → ArityError) и всегда
возвращают новое значение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда ровно 3 компоненты
2. Ни одна операция не изменяет аргументы
3. normalize() нулевого вектора → DegenerateVectorError, не Inf/NaN
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

SIZE: Final[int] = 3


# =============================================================================
# VEC3 MODEL
# =============================================================================


class Vec3(BaseModel):
    """
    Трёхмерный вектор.

    Immutable модель (frozen=True): равенство и hash — по компонентам.
    Итерация по модели (pydantic) отдаёт пары (имя, значение);
    для кортежа компонент используйте as_tuple().
    """

    x: float = Field(0.0, description="Компонента X")
    y: float = Field(0.0, description="Компонента Y")
    z: float = Field(0.0, description="Компонента Z")

    model_config = {"frozen": True}  # Immutable

    def as_tuple(self) -> tuple[float, float, float]:
        """Компоненты как (x, y, z)."""
        return (self.x, self.y, self.z)

    def __add__(self, other: Any) -> "Vec3":
        return add(self, other)

    def __sub__(self, other: Any) -> "Vec3":
        return subtract(self, other)

    def __neg__(self) -> "Vec3":
        return negate(self)

    def __mul__(self, other: Any) -> "Vec3":
        # Матрица и вектор перемножаются только через @
        if kernels.is_matrix_model(other):
            return NotImplemented
        return scale(self, other)

    def __rmul__(self, other: Any) -> "Vec3":
        return self.__mul__(other)


def _components(vec: Any) -> tuple[float, ...]:
    return kernels.take_vector(vec, SIZE, "Vec3")


def _make(values: tuple[float, ...]) -> Vec3:
    x, y, z = values
    return Vec3(x=x, y=y, z=z)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def create(*args: Any) -> Vec3:
    """
    Создание Vec3.

    Формы вызова:
        create()         → (0, 0, 0)
        create(x, y, z)  → (x, y, z)
        create(seq)      → первые три элемента seq

    Raises:
        ArityError: Если seq короче 3 элементов или передано 2 / ≥ 4 аргумента

    Examples:
        >>> create(1, 2, 3).as_tuple()
        (1.0, 2.0, 3.0)
        >>> create([1, 2, 3, 4]).as_tuple()
        (1.0, 2.0, 3.0)
    """
    if not args:
        return Vec3()

    if len(args) == 1:
        if isinstance(args[0], Vec3):
            return args[0]
        return _make(_components(args[0]))

    if len(args) == SIZE:
        return _make(_components(args))

    raise ArityError("Vec3", SIZE, len(args))


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Any, b: Any) -> Vec3:
    """Покомпонентная сумма a + b."""
    return _make(kernels.add(_components(a), _components(b)))


def subtract(a: Any, b: Any) -> Vec3:
    """Покомпонентная разность a − b."""
    return _make(kernels.subtract(_components(a), _components(b)))


def scale(vec: Any, factor: Any) -> Vec3:
    """
    Масштабирование вектора.

    Число умножает все компоненты; вектор масштабов умножает
    покомпонентно (неравномерный масштаб).

    Args:
        vec: Исходный вектор
        factor: Скаляр или вектор масштабов (x, y, z)

    Returns:
        Новый Vec3
    """
    if isinstance(factor, numbers.Real):
        return _make(kernels.scale(_components(vec), factor))
    return multiply(vec, factor)


def multiply(a: Any, b: Any) -> Vec3:
    """Покомпонентное произведение."""
    return _make(kernels.multiply(_components(a), _components(b)))


def negate(vec: Any) -> Vec3:
    return _make(kernels.negate(_components(vec)))


# =============================================================================
# ПРОИЗВЕДЕНИЯ
# =============================================================================


def dot(a: Any, b: Any) -> float:
    """
    Скалярное произведение: (x1·x2) + (y1·y2) + (z1·z2).

    Examples:
        >>> dot([3, 4, 5], [5, 6, 7])
        74.0
    """
    return kernels.dot(_components(a), _components(b))


def cross(a: Any, b: Any) -> Vec3:
    """
    Векторное произведение a × b (правая тройка).

    Examples:
        >>> cross([1, 0, 0], [0, 1, 0]).as_tuple()
        (0.0, 0.0, 1.0)
    """
    x1, y1, z1 = _components(a)
    x2, y2, z2 = _components(b)
    return Vec3(
        x=(y1 * z2) - (z1 * y2),
        y=(z1 * x2) - (x1 * z2),
        z=(x1 * y2) - (y1 * x2),
    )


# =============================================================================
# НОРМЫ
# =============================================================================


def length(vec: Any) -> float:
    """Евклидова длина (L2 норма)."""
    return kernels.length(_components(vec))


def length_squared(vec: Any) -> float:
    """Квадрат длины — без sqrt, достаточно для сравнений."""
    return kernels.length_squared(_components(vec))


def length_manhattan(vec: Any) -> float:
    """
    "Манхэттенская" длина: x + y + z.

    ВНИМАНИЕ: компоненты суммируются со знаком, abs() не применяется.
    Настоящая L1-норма получается только для неотрицательных компонент:
    length_manhattan((1, -1, 0)) == 0.0.
    """
    return kernels.length_manhattan(_components(vec))


def normalize(vec: Any) -> Vec3:
    """
    Единичный вектор того же направления: vec / length(vec).

    Длина считается после деления на наибольшую по модулю компоненту,
    поэтому конечные ненулевые векторы нормализуются при любом масштабе.

    Raises:
        DegenerateVectorError: Если все компоненты нулевые или есть NaN/Inf
    """
    components = kernels.normalized_or_none(_components(vec))
    if components is None:
        raise DegenerateVectorError(
            f"Cannot normalize degenerate Vec3 (zero-length or non-finite): {vec!r}"
        )
    return _make(components)


def normalize_safe(vec: Any, fallback: Any = None) -> Vec3:
    """
    normalize() без исключения: для вырожденного вектора возвращает fallback.

    Args:
        vec: Исходный вектор
        fallback: Результат для вырожденного вектора (default: нулевой вектор)
    """
    components = kernels.normalized_or_none(_components(vec))
    if components is None:
        logger.debug("Degenerate Vec3 %r normalized to fallback %r", vec, fallback)
        return create() if fallback is None else create(fallback)
    return _make(components)


def distance(a: Any, b: Any) -> float:
    """Евклидово расстояние между a и b."""
    return kernels.distance(_components(a), _components(b))


# =============================================================================
# ИНТЕРПОЛЯЦИЯ И СРАВНЕНИЕ
# =============================================================================


def lerp(a: Any, b: Any, t: float) -> Vec3:
    """
    Линейная интерполяция: t·b + (1−t)·a.

    t = 0 → a, t = 1 → b. Значения t вне [0, 1] дают экстраполяцию
    вдоль той же прямой, это не ошибка.
    """
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
    """Покомпонентное сравнение с толерантностью (math.isclose)."""
    return kernels.approx_equal(_components(a), _components(b), rel_tol, abs_tol)
