"""Display formatting for growth/decay records.

Core records expose raw floats; rounding happens only here.
"""

import math
from dataclasses import dataclass

from src.core.domain.exponential_change import ExponentialChange


@dataclass(frozen=True)
class ReportFormat:
    """Параметры отображения отчёта."""

    ceil_places: int = 3  # ceiling-округление итоговых значений
    sci_digits: int = 4  # знаков после запятой в научной нотации
    fixed_places: int = 2
    separator: str = "-" * 40


def ceil_to_places(value: float, places: int = 3) -> float:
    """
    Округление вверх до places знаков: ceil(value × 10^places) / 10^places.

    Examples:
        >>> ceil_to_places(1085.76712, 3)
        1085.768
    """
    scale = 10.0 ** places
    return math.ceil(value * scale) / scale


def format_scientific(value: float, digits: int = 4) -> str:
    """
    Examples:
        >>> format_scientific(3.556931e-13)
        '3.5569e-13'
    """
    return f"{value:.{digits}e}"


def render_equation(change: ExponentialChange, result: float) -> list[str]:
    """Пошаговая запись Final value = Principal * (1 + Rate) ^ Time."""
    return [
        "Final value = Principal * (1 + Rate) ^ Time",
        f"Final value = {change.principal} * (1 + {change.rate}) ^ {change.time}",
        f"Final value = {result}",
    ]
