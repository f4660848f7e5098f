"""
Kernels — формулы алгебры над плоскими кортежами

Размерно-независимые реализации всех формул, которые используют модули
vec2/vec3/vec4 и mat22/mat33/mat44. Матрица размера N×N — кортеж из N*N
float в row-major порядке: элемент (i, j) лежит по индексу N*i + j.

СОГЛАШЕНИЯ:
1. Суммы накапливаются слева направо, начиная с первого слагаемого —
   результат побитово совпадает с явной формулой (a11*b11)+(a12*b21)+...
2. apply() трактует вектор как столбец (a · v), apply_left() — как строку (v · a)
3. Функции не валидируют размер: это делает create() вызывающего модуля
"""

import math
from typing import Any, Iterable

from graphmath.core.errors import ArityError, ElementIndexError, SingularMatrixError
from graphmath.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    reciprocal_or_none,
    round_half_away,
    validate_digits,
)

Components = tuple[float, ...]


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def take(values: Any, n: int, type_name: str) -> Components:
    """
    Первые n компонент последовательности.

    Принимает любую последовательность чисел, а также значения graphmath
    (через их as_tuple()). Лишние компоненты отбрасываются.

    Raises:
        ArityError: Если компонент меньше n
    """
    as_tuple = getattr(values, "as_tuple", None)
    if callable(as_tuple):
        values = as_tuple()

    values = tuple(values)
    if len(values) < n:
        raise ArityError(type_name, n, len(values))

    return tuple(float(value) for value in values[:n])


def is_matrix_model(value: Any) -> bool:
    """Значение graphmath-матрицы (модель с as_rows())."""
    return callable(getattr(value, "as_rows", None))


def is_vector_model(value: Any) -> bool:
    """Значение graphmath-вектора (модель с as_tuple(), но без as_rows())."""
    return callable(getattr(value, "as_tuple", None)) and not is_matrix_model(value)


def take_vector(values: Any, n: int, type_name: str) -> Components:
    """
    take() для аргумента-вектора: матричная модель не принимается.

    Raises:
        TypeError: Если передана матрица (для неё есть apply / @)
        ArityError: Если компонент меньше n
    """
    if is_matrix_model(values):
        raise TypeError(f"{type_name} expects a vector, got {type(values).__name__}")
    return take(values, n, type_name)


def take_matrix(values: Any, n: int, type_name: str) -> Components:
    """
    take() для аргумента-матрицы: векторная модель не принимается.

    Raises:
        TypeError: Если передан вектор
        ArityError: Если элементов меньше n
    """
    if is_vector_model(values):
        raise TypeError(f"{type_name} expects a matrix, got {type(values).__name__}")
    return take(values, n, type_name)


def _accumulate(terms: Iterable[float]) -> float:
    iterator = iter(terms)
    total = next(iterator)
    for term in iterator:
        total += term
    return total


# =============================================================================
# ВЕКТОРНЫЕ ФОРМУЛЫ
# =============================================================================


def add(a: Components, b: Components) -> Components:
    return tuple(x + y for x, y in zip(a, b))


def subtract(a: Components, b: Components) -> Components:
    return tuple(x - y for x, y in zip(a, b))


def scale(a: Components, k: float) -> Components:
    return tuple(x * k for x in a)


def multiply(a: Components, b: Components) -> Components:
    """Покомпонентное произведение (неравномерный масштаб)."""
    return tuple(x * y for x, y in zip(a, b))


def negate(a: Components) -> Components:
    return tuple(-x for x in a)


def dot(a: Components, b: Components) -> float:
    return _accumulate(x * y for x, y in zip(a, b))


def length_squared(a: Components) -> float:
    return dot(a, a)


def length(a: Components) -> float:
    return math.sqrt(length_squared(a))


def length_manhattan(a: Components) -> float:
    """
    Сумма компонент со знаком.

    Это НЕ модуль L1-нормы: abs() не применяется, поэтому для векторов
    с компонентами разного знака результат меньше настоящей L1-длины
    и может быть отрицательным.
    """
    return _accumulate(a)


def normalized_or_none(a: Components) -> Components | None:
    """
    Единичный вектор того же направления, либо None для вырожденного.

    Вырожденный: все компоненты нулевые, либо среди них есть NaN/Inf.

    Перед вычислением длины вектор делится на наибольший модуль
    компоненты, поэтому сумма квадратов не переполняется (1e200)
    и не обнуляется (1e-200) для конечных ненулевых векторов.
    """
    if not all(is_valid_float(x) for x in a):
        return None

    magnitude = max(abs(x) for x in a)
    if magnitude == 0.0:
        return None

    # Длина после деления лежит в [1, sqrt(n)]
    scaled = tuple(x / magnitude for x in a)
    inverse_length = reciprocal_or_none(length(scaled))
    if inverse_length is None:
        return None
    return scale(scaled, inverse_length)


def lerp(a: Components, b: Components, t: float) -> Components:
    """t·b + (1−t)·a; вне [0, 1] — экстраполяция."""
    return tuple((t * y) + ((1 - t) * x) for x, y in zip(a, b))


def distance(a: Components, b: Components) -> float:
    return math.sqrt(_accumulate((y - x) * (y - x) for x, y in zip(a, b)))


def approx_equal(
    a: Components,
    b: Components,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    return all(is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol) for x, y in zip(a, b))


# =============================================================================
# МАТРИЧНЫЕ ФОРМУЛЫ
# =============================================================================


def identity(n: int) -> Components:
    return tuple(1.0 if i == j else 0.0 for i in range(n) for j in range(n))


def zero(n: int) -> Components:
    return (0.0,) * (n * n)


def diagonal(values: Components) -> Components:
    n = len(values)
    return tuple(values[i] if i == j else 0.0 for i in range(n) for j in range(n))


def transpose(a: Components, n: int) -> Components:
    return tuple(a[n * j + i] for i in range(n) for j in range(n))


def row(a: Components, n: int, i: int) -> Components:
    return a[n * i : n * i + n]


def column(a: Components, n: int, j: int) -> Components:
    return tuple(a[n * i + j] for i in range(n))


def diag(a: Components, n: int) -> Components:
    return tuple(a[n * i + i] for i in range(n))


def element(a: Components, n: int, i: int, j: int) -> float:
    """
    Элемент (i, j) с проверкой индексов.

    Raises:
        ElementIndexError: Если i или j не int в диапазоне [0, n)
    """
    for name, index in (("row", i), ("column", j)):
        if isinstance(index, bool) or not isinstance(index, int):
            raise ElementIndexError(f"{name} index must be an int, got {index!r}")
        if not 0 <= index < n:
            raise ElementIndexError(
                f"{name} index {index} out of range for {n}x{n} matrix"
            )
    return a[n * i + j]


def matmul(a: Components, b: Components, n: int) -> Components:
    """result[i][j] = Σk a[i][k]·b[k][j]"""
    return tuple(
        _accumulate(a[n * i + k] * b[n * k + j] for k in range(n))
        for i in range(n)
        for j in range(n)
    )


def matmul_transpose(a: Components, b: Components, n: int) -> Components:
    """a · bᵗ без построения транспонированной b: Σk a[i][k]·b[j][k]"""
    return tuple(
        _accumulate(a[n * i + k] * b[n * j + k] for k in range(n))
        for i in range(n)
        for j in range(n)
    )


def apply(a: Components, v: Components, n: int) -> Components:
    """a · v, v — столбец."""
    return tuple(_accumulate(a[n * i + k] * v[k] for k in range(n)) for i in range(n))


def apply_transpose(a: Components, v: Components, n: int) -> Components:
    """aᵗ · v без построения aᵗ."""
    return tuple(_accumulate(a[n * k + i] * v[k] for k in range(n)) for i in range(n))


def apply_left(v: Components, a: Components, n: int) -> Components:
    """v · a, v — строка."""
    return tuple(_accumulate(a[n * k + j] * v[k] for k in range(n)) for j in range(n))


def apply_left_transpose(v: Components, a: Components, n: int) -> Components:
    """v · aᵗ без построения aᵗ."""
    return tuple(_accumulate(a[n * j + k] * v[k] for k in range(n)) for j in range(n))


def round_all(a: Components, digits: int) -> Components:
    validate_digits(digits)
    return tuple(round_half_away(x, digits) for x in a)


def minor(a: Components, n: int, i: int, j: int) -> Components:
    """Матрица (n-1)×(n-1) без строки i и столбца j."""
    return tuple(
        a[n * r + c] for r in range(n) if r != i for c in range(n) if c != j
    )


def determinant(a: Components, n: int) -> float:
    """Определитель разложением Лапласа по первой строке."""
    if n == 1:
        return a[0]
    if n == 2:
        return (a[0] * a[3]) - (a[1] * a[2])

    return _accumulate(
        (-a[j] if j % 2 else a[j]) * determinant(minor(a, n, 0, j), n - 1)
        for j in range(n)
    )


def inverse(a: Components, n: int) -> Components:
    """
    Обратная матрица через присоединённую: adj(a) / det(a).

    Raises:
        SingularMatrixError: Если определитель нулевой или 1/det не конечен
    """
    det = determinant(a, n)
    inverse_det = reciprocal_or_none(det)
    if inverse_det is None:
        raise SingularMatrixError(f"{n}x{n} matrix is singular (determinant={det!r})")

    def cofactor(i: int, j: int) -> float:
        value = determinant(minor(a, n, i, j), n - 1)
        return -value if (i + j) % 2 else value

    # adj(a)[i][j] = cofactor(j, i)
    return tuple(cofactor(j, i) * inverse_det for i in range(n) for j in range(n))
