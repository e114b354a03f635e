"""Reporting — консольный отчёт по примерам роста/распада.

Внешний потребитель core: читает поля записей и форматирует их для вывода.
"""

from .formatting import ReportFormat, ceil_to_places, format_scientific, render_equation
from .worked_examples import build_report, main

__all__ = [
    "ReportFormat",
    "ceil_to_places",
    "format_scientific",
    "render_equation",
    "build_report",
    "main",
]
