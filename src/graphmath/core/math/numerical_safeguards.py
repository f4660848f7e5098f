"""
Numerical Safeguards — скалярные соглашения для векторов и матриц

Модуль задаёт общие для всех компонентов скалярные правила:
- Epsilon-параметры для сравнений float
- NaN/Inf проверки
- Детерминированное округление (round half away from zero)
- Валидацию параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Режим округления фиксирован и не зависит от поведения round() рантайма
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close и в equal() векторов
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Защищает сравнения около нуля, где относительная толерантность бесполезна
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Допустимый диапазон количества дробных знаков для round()
# 15 знаков: предел значащих десятичных цифр double
ROUND_DIGITS_MIN: Final[int] = 0
ROUND_DIGITS_MAX: Final[int] = 15

# Точность Decimal-контекста для округления: хватает для любого конечного double
_ROUND_DECIMAL_PREC: Final[int] = 400


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


# =============================================================================
# БЕЗОПАСНОЕ ОБРАЩЕНИЕ
# =============================================================================


def reciprocal_or_none(value: float) -> float | None:
    """
    Обратное значение 1/value, либо None если результат невалиден.

    Используется там, где деление на (почти) ноль должно стать явной
    ошибкой вызывающего кода, а не тихим Inf/NaN.

    Examples:
        >>> reciprocal_or_none(4.0)
        0.25
        >>> reciprocal_or_none(0.0) is None
        True
        >>> reciprocal_or_none(5e-324) is None
        True
    """
    if value == 0.0 or not is_valid_float(value):
        return None

    try:
        result = 1.0 / value
    except (ZeroDivisionError, OverflowError):
        return None

    if not is_valid_float(result):
        return None
    return result


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(value: float, digits: int) -> float:
    """
    Округление до digits дробных знаков, половина — от нуля.

    Округляется кратчайшее десятичное представление значения (repr),
    а не его точное двоичное значение: 0.125 → 0.13, 2.675 → 2.68.
    Это отличается от встроенного round(), который округляет половину
    к чётному по двоичному значению (round(2.675, 2) == 2.67).

    Args:
        value: Значение для округления
        digits: Количество дробных знаков [ROUND_DIGITS_MIN, ROUND_DIGITS_MAX]

    Returns:
        Округлённое значение (float). NaN/Inf возвращаются без изменений.

    Raises:
        ValueError: Если digits вне допустимого диапазона

    Examples:
        >>> round_half_away(0.125, 2)
        0.13
        >>> round_half_away(-2.5, 0)
        -3.0
        >>> round_half_away(1.0049, 2)
        1.0
    """
    validate_digits(digits)

    value = float(value)
    if not is_valid_float(value):
        return value

    with localcontext() as ctx:
        ctx.prec = _ROUND_DECIMAL_PREC
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)

    return float(rounded)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


def validate_digits(digits: int) -> None:
    """
    Валидация количества дробных знаков для round().

    Raises:
        ValueError: Если digits не int или вне [ROUND_DIGITS_MIN, ROUND_DIGITS_MAX]
    """
    # bool является подклассом int, но не принимается
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise ValueError(f"digits must be an int, got {digits!r}")

    validate_in_range(digits, "digits", ROUND_DIGITS_MIN, ROUND_DIGITS_MAX)
