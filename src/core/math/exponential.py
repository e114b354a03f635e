"""
Exponential Change — Closed-form Growth/Decay Formulas

Модуль содержит чистые функции для замкнутых формул экспоненциального
роста/распада:
- Дискретное компаундирование: FV = P × (1 + r)^t
- Непрерывная форма: FV = P × e^(r × t)
- Вывод rate по (P, FV, t) с раздельными ветками роста и распада
- Вывод времени по (P, FV, r)
- Распад отношений (радиоуглерод): R = R0 × e^(-t / decay_years)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. compound_final_value и continuous_final_value — разные code paths,
   не объединяются (ветка выбирается вызывающей стороной)
2. time_to_reach всегда неотрицателен (|ln(FV/P) / r|)
3. NaN на входе проходит насквозь без санитизации
4. Вне домена результат по IEEE 754, без исключений:
   ln(0) = -inf, ln(x < 0) = nan, x / 0 = ±inf, 0 / 0 = nan,
   отрицательное основание в дробной степени = nan, overflow = inf

Вычисления идут в numpy.float64 под np.errstate(all="ignore"),
результат возвращается как float.

ФОРМУЛЫ:
    rate (FV < P)  = -(-ln(FV / P) / t)
    rate (FV ≥ P)  = (FV / P)^(1/t) - 1
    time           = |ln(FV / P) / r|
    t (ratios)     = -ln(Rt / R0) × decay_years
    Rt             = R0 × e^(-t / decay_years)
    decay_constant = ln(2) / decay_years
"""

import functools
import math
from typing import Callable, Final

import numpy as np

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# ln(2) для decay_constant = ln(2) / decay_years
LN_2: Final[float] = math.log(2.0)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidInput(Exception):
    """
    Не задан ни один из двух взаимозаменяемых параметров.

    ExponentialChange: нужен final_value или rate.
    GrowthOrDecayRatios: нужен rt или time.

    Наследуется от Exception (не ValueError), поэтому pydantic не
    оборачивает её в ValidationError.
    """
    pass


def _ieee_float(formula: Callable[..., np.float64]) -> Callable[..., float]:
    """Аргументы → np.float64, ошибки FP подавлены, результат → float"""

    @functools.wraps(formula)
    def wrapper(*args: float) -> float:
        with np.errstate(all="ignore"):
            return float(formula(*(np.float64(arg) for arg in args)))

    return wrapper


# =============================================================================
# FINAL VALUE
# =============================================================================


@_ieee_float
def compound_final_value(principal: float, rate: float, time: float) -> float:
    """
    Дискретное компаундирование: FV = P × (1 + r)^t.

    Используется конструктором ExponentialChange для любого знака rate
    и modify_final_time при rate ≥ 0.

    (1 + r) < 0 в дробной степени → nan, overflow → inf.

    Examples:
        >>> compound_final_value(100.0, 1.0, 2.0)
        400.0
        >>> compound_final_value(100.0, 0.0, 5.0)
        100.0
        >>> compound_final_value(100.0, -2.0, 0.5)
        nan
    """
    return principal * np.power(1.0 + rate, time)


@_ieee_float
def continuous_final_value(principal: float, rate: float, time: float) -> float:
    """
    Непрерывная форма: FV = P × e^(r × t).

    Используется только modify_final_time при rate < 0.

    Examples:
        >>> continuous_final_value(100.0, 0.0, 3.0)
        100.0
    """
    return principal * np.exp(rate * time)


# =============================================================================
# RATE / TIME
# =============================================================================


@_ieee_float
def implied_rate(principal: float, final_value: float, time: float) -> float:
    """
    Вывод rate по начальному и конечному значению.

    Ветки:
        FV < P (распад): rate = -(-ln(FV / P) / t), то есть ln(FV / P) / t
        FV ≥ P (рост):   rate = (FV / P)^(1/t) - 1

    Ветка распада — логарифмическая (непрерывная) ставка, ветка роста —
    дискретная. NaN в final_value даёт False в сравнении → ветка роста.

    Args:
        principal: Начальное значение
        final_value: Значение через time единиц
        time: Длительность

    Returns:
        rate (доля за единицу времени, < 0 для распада).
        FV == 0 → -inf, FV/P < 0 → nan, time == 0 → ±inf или nan

    Examples:
        >>> round(implied_rate(5000.0, 2000.0, 3.0), 6)
        -0.30543
        >>> round(implied_rate(100.0, 121.0, 2.0), 12)
        0.1
        >>> implied_rate(100.0, 200.0, 0.0)
        inf
    """
    if final_value < principal:
        return -(-np.log(final_value / principal) / time)
    return np.power(final_value / principal, 1.0 / time) - 1.0


@_ieee_float
def time_to_reach(principal: float, final_value: float, rate: float) -> float:
    """
    Время достижения final_value при заданном rate: |ln(FV / P) / r|.

    Время не может быть отрицательным: знак отбрасывается, а не
    сигнализируется. Отрицательное "время до точки отсчёта" этим путём
    получить нельзя.

    rate == 0 → inf, FV/P < 0 → nan.

    Examples:
        >>> round(time_to_reach(1000.0, 1.0, -0.04605170185988091), 9)
        150.0
    """
    return np.abs(np.log(final_value / principal) / rate)


# =============================================================================
# RATIO DECAY
# =============================================================================


@_ieee_float
def decay_elapsed_time(rt: float, r0: float, decay_years: float) -> float:
    """Прошедшее время по отношению концентраций: t = -ln(Rt / R0) × decay_years."""
    return -np.log(rt / r0) * decay_years


@_ieee_float
def decay_ratio(r0: float, time: float, decay_years: float) -> float:
    """Концентрация через time: Rt = R0 × e^(-t / decay_years)."""
    return r0 * np.exp(-time / decay_years)


@_ieee_float
def decay_constant(decay_years: float) -> float:
    """
    Константа распада: λ = ln(2) / decay_years.

    Examples:
        >>> decay_constant(1.0) == LN_2
        True
        >>> decay_constant(0.0)
        inf
    """
    return np.float64(LN_2) / decay_years
