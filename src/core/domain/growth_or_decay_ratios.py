"""
GrowthOrDecayRatios — Распад по отношению концентраций

Immutable Pydantic модель для распада отношений (например, радиоуглеродное
датирование): R = R0 × e^(-t / decay_years).

КОНСТРУКТОР:
    time отсутствует → time = -ln(rt / r0) × decay_years
    rt отсутствует   → rt = r0 × e^(-time / decay_years)
    оба заданы       → сохраняются как есть (без перекрёстной проверки)
    оба отсутствуют  → InvalidInput

    decay_constant = ln(2) / decay_years вычисляется всегда.

Пересчитывается только отсутствующее поле, заданное значение rt никогда
не выводится заново из вычисленного time.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.contracts.snapshots import validate_snapshot
from src.core.math.exponential import (
    InvalidInput,
    decay_constant,
    decay_elapsed_time,
    decay_ratio,
)
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_REL,
    as_float,
    is_close,
    non_finite_fields,
)

logger = logging.getLogger(__name__)


class RatioField(str, Enum):
    """Какое поле было выведено при создании"""

    RT = "rt"
    TIME = "time"
    NONE = "none"


class GrowthOrDecayRatios(BaseModel):
    """
    Распад отношения/концентрации с характерным временем decay_years.

    Immutable модель (frozen=True), изменяющих методов нет.
    """

    rt: float = Field(..., description="Отношение/концентрация через time")
    r0: float = Field(..., description="Начальное отношение/концентрация")
    decay_constant: float = Field(..., description="ln(2) / decay_years")
    time: float = Field(..., description="Прошедшее время")
    decay_years: float = Field(..., description="Характерное время распада")
    derived: RatioField = Field(RatioField.NONE, description="Поле, выведенное при создании")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def derive_missing(cls, data: Any) -> Any:
        """
        Вывод time и/или rt, пересчёт decay_constant.

        Переданный decay_constant игнорируется.

        Raises:
            InvalidInput: не заданы ни rt, ни time
        """
        if not isinstance(data, dict):
            return data

        values = dict(data)
        rt = values.get("rt")
        time = values.get("time")

        if rt is None and time is None:
            raise InvalidInput("Either rt or time must be provided.")

        r0 = as_float(values.get("r0"))
        decay_years = as_float(values.get("decay_years"))
        known = as_float(rt if time is None else time)
        if r0 is None or decay_years is None or known is None:
            # Пропуски и нечисловые значения оставляем pydantic
            return values

        if time is None:
            rt = known
        else:
            time = known

        derived = RatioField.NONE

        if time is None:
            time = decay_elapsed_time(rt, r0, decay_years)
            derived = RatioField.TIME
            logger.debug("Derived time=%r from rt=%r r0=%r", time, rt, r0)

        if rt is None:
            rt = decay_ratio(r0, time, decay_years)
            derived = RatioField.RT
            logger.debug("Derived rt=%r from r0=%r time=%r", rt, r0, time)

        values.update(
            rt=rt,
            time=time,
            decay_constant=decay_constant(decay_years),
            derived=derived,
        )
        return values

    @classmethod
    def new(
        cls,
        rt: Optional[float],
        r0: float,
        decay_years: float,
        time: Optional[float],
    ) -> "GrowthOrDecayRatios":
        """
        Позиционный конструктор: (rt, r0, decay_years, time).

        None означает "вывести".
        """
        return cls(rt=rt, r0=r0, decay_years=decay_years, time=time)

    @property
    def remaining_fraction(self) -> float:
        """rt / r0"""
        return self.rt / self.r0

    @property
    def lifetimes_elapsed(self) -> float:
        """Сколько характерных времён decay_years прошло: time / decay_years"""
        return self.time / self.decay_years

    def is_consistent(
        self,
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = 0.0,
    ) -> bool:
        """
        Проверка rt ≈ r0 × e^(-time / decay_years).

        По умолчанию только относительная толерантность: rt бывает порядка 1e-13.

        Выполняется для выведенных записей. Если rt и time заданы вместе,
        согласованность не гарантируется.
        """
        expected = decay_ratio(self.r0, self.time, self.decay_years)
        return is_close(self.rt, expected, rel_tol=rel_tol, abs_tol=abs_tol)

    def to_contract(self) -> dict[str, Any]:
        """
        JSON-представление, проверенное по схеме модели.

        Raises:
            ValueError: если поля содержат NaN/Inf
            jsonschema.ValidationError: если данные не соответствуют схеме
        """
        bad = non_finite_fields(
            {
                "rt": self.rt,
                "r0": self.r0,
                "decay_constant": self.decay_constant,
                "time": self.time,
                "decay_years": self.decay_years,
            }
        )
        if bad:
            raise ValueError(f"GrowthOrDecayRatios fields contain NaN/Inf: {bad}")

        data = self.model_dump(mode="json")
        validate_snapshot(type(self), data)
        return data
