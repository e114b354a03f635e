"""
Numerical Safeguards — Float Comparison Primitives

Модуль содержит примитивы для проверки и сравнения float:
- Проверка типов и конечности (NaN/Inf)
- Epsilon-сравнения float с учётом машинной точности

Формулы роста/распада НЕ санитизируют NaN/Inf: эти функции используются
только там, где вызывающей стороне нужно явно проверить значение
(контракты, проверка согласованности записей, тесты).
"""

import math
from typing import Any, Final, Optional

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close и compare_with_tolerance
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ ТИПОВ И NaN/Inf
# =============================================================================


def as_float(value: Any) -> Optional[float]:
    """
    Приведение к float тем же путём, что и float(value).

    Строки и Decimal, которые pydantic принимает для float-полей,
    приводятся так же. Значения без числового представления → None.

    Examples:
        >>> as_float(3), as_float("2.5"), as_float(None), as_float("a lot")
        (3.0, 2.5, None, None)
    """
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def non_finite_fields(values: dict[str, float]) -> list[str]:
    """
    Имена полей с NaN/Inf значениями.

    Args:
        values: Отображение имя поля → значение

    Returns:
        Список имён в исходном порядке (пустой, если все значения конечны)

    Examples:
        >>> non_finite_fields({"a": 1.0, "b": float("nan"), "c": float("inf")})
        ['b', 'c']
        >>> non_finite_fields({"a": 1.0})
        []
    """
    return [name for name, value in values.items() if not is_valid_float(value)]


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

    Реализация Python's math.isclose с настраиваемыми толерантностями.

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
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1
