"""
ExponentialChange — Модель экспоненциального роста/распада

Immutable Pydantic модель: по любым трём из {principal, final_value, rate, time}
(time обязателен) выводит недостающее значение.

КОНСТРУКТОР:
    rate отсутствует        → rate = implied_rate(principal, final_value, time)
    final_value отсутствует → final_value = principal × (1 + rate)^time
    оба заданы              → сохраняются как есть
    оба отсутствуют         → InvalidInput

ИЗМЕНЕНИЯ (возвращают новый экземпляр):
    modify_final_value → time = |ln(final_value / principal) / rate|
    modify_final_time  → final_value = principal × e^(rate × time), если rate < 0
                         final_value = principal × (1 + rate)^time, иначе

Конструктор всегда компаундирует дискретно, modify_final_time при rate < 0
переходит на непрерывную форму. Это две разные формулы, и они не
объединяются.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.contracts.snapshots import validate_snapshot
from src.core.math.exponential import (
    InvalidInput,
    compound_final_value,
    continuous_final_value,
    implied_rate,
    time_to_reach,
)
from src.core.math.numerical_safeguards import (
    as_float,
    compare_with_tolerance,
    non_finite_fields,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class ChangeField(str, Enum):
    """Какое поле было выведено при создании"""

    FINAL_VALUE = "final_value"
    RATE = "rate"
    NONE = "none"


class Trend(str, Enum):
    """Направление изменения final_value относительно principal"""

    GROWTH = "growth"
    DECAY = "decay"
    FLAT = "flat"


# =============================================================================
# EXPONENTIAL CHANGE MODEL
# =============================================================================


class ExponentialChange(BaseModel):
    """
    Экспоненциальный рост/распад по ставке за единицу времени.

    Immutable модель (frozen=True): modify_final_value и modify_final_time
    возвращают новый экземпляр, principal и rate переносятся без изменений.

    NaN/Inf не проверяются и проходят насквозь: вне домена формул
    (log(x ≤ 0), деление на ноль) поля получают nan или ±inf.
    """

    principal: float = Field(..., description="Начальное значение")
    final_value: float = Field(..., description="Значение через time единиц")
    rate: float = Field(..., description="Ставка за единицу времени (< 0 для распада)")
    time: float = Field(..., description="Длительность")
    derived: ChangeField = Field(
        ChangeField.NONE, description="Поле, выведенное при создании"
    )

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def derive_missing(cls, data: Any) -> Any:
        """
        Вывод rate и/или final_value до валидации полей.

        Raises:
            InvalidInput: не заданы ни final_value, ни rate
        """
        if not isinstance(data, dict):
            return data

        values = dict(data)
        final_value = values.get("final_value")
        rate = values.get("rate")

        if final_value is None and rate is None:
            raise InvalidInput("Either final_value or rate must be provided.")

        principal = as_float(values.get("principal"))
        time = as_float(values.get("time"))
        known = as_float(final_value if rate is None else rate)
        if principal is None or time is None or known is None:
            # Пропуски и нечисловые значения оставляем pydantic
            return values

        if rate is None:
            final_value = known
        else:
            rate = known

        derived = ChangeField.NONE

        if rate is None:
            rate = implied_rate(principal, final_value, time)
            derived = ChangeField.RATE
            logger.debug(
                "Derived rate=%r (%s branch) from principal=%r final_value=%r time=%r",
                rate, "decay" if final_value < principal else "growth",
                principal, final_value, time,
            )

        if final_value is None:
            final_value = compound_final_value(principal, rate, time)
            derived = ChangeField.FINAL_VALUE
            logger.debug(
                "Derived final_value=%r from principal=%r rate=%r time=%r",
                final_value, principal, rate, time,
            )

        values.update(final_value=final_value, rate=rate, derived=derived)
        return values

    @classmethod
    def new(
        cls,
        principal: float,
        final_value: Optional[float],
        rate: Optional[float],
        time: float,
    ) -> "ExponentialChange":
        """
        Позиционный конструктор: (principal, final_value, rate, time).

        None означает "вывести". Эквивалентно keyword-конструктору.

        Examples:
            >>> ExponentialChange.new(5000, 2000, None, 3).derived
            <ChangeField.RATE: 'rate'>
        """
        return cls(principal=principal, final_value=final_value, rate=rate, time=time)

    # -------------------------------------------------------------------------
    # Изменения
    # -------------------------------------------------------------------------

    def modify_final_value(self, new_final_value: float) -> "ExponentialChange":
        """
        Новый final_value с пересчётом времени.

        time = |ln(final_value / principal) / rate|

        Время не может быть отрицательным: знак отбрасывается через abs,
        поэтому "время до точки отсчёта" этим методом не получить.
        rate == 0 → time = inf, final_value / principal < 0 → time = nan.

        Args:
            new_final_value: Новое конечное значение

        Returns:
            Новый экземпляр с обновлёнными final_value и time
        """
        new_final_value = float(new_final_value)
        time = time_to_reach(self.principal, new_final_value, self.rate)
        logger.debug(
            "Recomputed time=%r for final_value=%r (rate=%r)",
            time, new_final_value, self.rate,
        )
        return self.model_copy(update={"final_value": new_final_value, "time": time})

    def modify_final_time(self, new_time: float) -> "ExponentialChange":
        """
        Новое время с пересчётом final_value.

        rate < 0 → principal × e^(rate × time) (непрерывная форма)
        rate ≥ 0 → principal × (1 + rate)^time (дискретная форма)

        Args:
            new_time: Новая длительность

        Returns:
            Новый экземпляр с обновлёнными time и final_value
        """
        new_time = float(new_time)
        if self.rate < 0:
            final_value = continuous_final_value(self.principal, self.rate, new_time)
        else:
            final_value = compound_final_value(self.principal, self.rate, new_time)
        logger.debug(
            "Recomputed final_value=%r for time=%r (rate=%r)",
            final_value, new_time, self.rate,
        )
        return self.model_copy(update={"time": new_time, "final_value": final_value})

    # -------------------------------------------------------------------------
    # Производные свойства
    # -------------------------------------------------------------------------

    @property
    def trend(self) -> Trend:
        """Рост, распад или без изменений (final_value vs principal)"""
        cmp = compare_with_tolerance(self.final_value, self.principal)
        if cmp > 0:
            return Trend.GROWTH
        if cmp < 0:
            return Trend.DECAY
        return Trend.FLAT

    def to_contract(self) -> dict[str, Any]:
        """
        JSON-представление, проверенное по схеме модели.

        Raises:
            ValueError: если поля содержат NaN/Inf (не представимы в JSON)
            jsonschema.ValidationError: если данные не соответствуют схеме
        """
        bad = non_finite_fields(
            {
                "principal": self.principal,
                "final_value": self.final_value,
                "rate": self.rate,
                "time": self.time,
            }
        )
        if bad:
            raise ValueError(f"ExponentialChange fields contain NaN/Inf: {bad}")

        data = self.model_dump(mode="json")
        validate_snapshot(type(self), data)
        return data

