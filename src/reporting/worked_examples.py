"""Worked examples — задачи роста/распада с пошаговым выводом.

Задачи:
1. Население 1.2 млн растёт на 2.5% в год: когда оно достигнет 2 млн?
2. 5000 бактерий превратились в 2000 за 3 часа: сколько останется через 5 часов?
3. Население 1000 сократилось до 100 за 50 лет: когда останется 1 человек?
4. Радиоуглеродное датирование: R0 = 1e-12, decay_years = 8223, t = 8500.

Запуск: python -m src.reporting
"""

import logging
from typing import Optional

from rich.console import Console

from src.core.domain.exponential_change import ExponentialChange
from src.core.domain.growth_or_decay_ratios import GrowthOrDecayRatios
from src.reporting.formatting import (
    ReportFormat,
    ceil_to_places,
    format_scientific,
    render_equation,
)

logger = logging.getLogger(__name__)


def example_changes() -> list[ExponentialChange]:
    """Исходные записи для задач 1-3."""
    return [
        ExponentialChange.new(1_200_000.0, None, 0.025, 18.0),
        ExponentialChange.new(5000.0, 2000.0, None, 3.0),
        ExponentialChange.new(1000.0, 100.0, None, 50.0),
    ]


def carbon_dating_example() -> GrowthOrDecayRatios:
    return GrowthOrDecayRatios.new(None, 1.0 / 10.0 ** 12, 8223.0, 8500.0)


def build_report(fmt: Optional[ReportFormat] = None) -> list[str]:
    """
    Текст отчёта построчно.

    Args:
        fmt: Параметры отображения (default: ReportFormat())

    Returns:
        Строки отчёта без завершающих переводов строки
    """
    fmt = fmt or ReportFormat()
    lines: list[str] = [fmt.separator]

    population, bacteria, village = example_changes()

    for index, change in enumerate((population, bacteria, village), start=1):
        lines.append(f"Item #{index}:")
        lines.extend(render_equation(change, change.final_value))
        lines.append(
            f"End value after {change.time} time units: "
            f"{change.final_value:.{fmt.fixed_places}f}"
        )
        lines.append(fmt.separator)

    lines.append('Problem one, "When will the population reach 2 million?"')
    reached = population.modify_final_value(2_000_000.0)
    lines.append(
        f"It will reach 2 million when the time is {reached.time:.{fmt.fixed_places}f} years."
    )
    lines.append(fmt.separator)

    lines.append(
        'Problem two, "If the rate remains the same, '
        'how many bacteria will remain after 5 hours?"'
    )
    later = bacteria.modify_final_time(5.0)
    lines.extend(render_equation(later, ceil_to_places(later.final_value, fmt.ceil_places)))
    lines.append(fmt.separator)

    lines.append('Problem three, "In what year will there only be 1 person left?"')
    last = village.modify_final_value(1.0)
    lines.extend(render_equation(last, last.time))

    carbon = carbon_dating_example()
    sci = fmt.sci_digits
    lines.extend(
        [
            "II. Carbon Dating:",
            f"R = {format_scientific(carbon.rt, sci)}e^({format_scientific(carbon.decay_constant, sci)}t)",
            f"R0 = {format_scientific(carbon.r0, sci)}",
            f"t = {format_scientific(carbon.time, sci)}",
            f"Decay constant = {format_scientific(carbon.decay_constant, sci)}",
            f"Decay years = {format_scientific(carbon.decay_years, sci)}",
            f"Final value: {format_scientific(carbon.rt, sci)}",
        ]
    )

    logger.debug("Built report with %d lines", len(lines))
    return lines


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    console = Console(highlight=False)
    for line in build_report():
        console.print(line, markup=False, soft_wrap=True)


if __name__ == "__main__":
    main()
