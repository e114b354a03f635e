"""
Тесты для GrowthOrDecayRatios

Проверяет:
1. Вывод rt по time и time по rt
2. Перекрёстную согласованность rt = r0 × e^(-time / decay_years)
3. decay_constant = ln(2) / decay_years независимо от входов
4. InvalidInput при отсутствии rt и time
5. Immutability и JSON контракт
"""

import math
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.domain import GrowthOrDecayRatios, RatioField
from src.core.math.exponential import LN_2, InvalidInput


@pytest.fixture
def carbon() -> GrowthOrDecayRatios:
    """R0 = 1e-12, decay_years = 8223, t = 8500"""
    return GrowthOrDecayRatios.new(None, 1.0 / 10.0 ** 12, 8223.0, 8500.0)


class TestConstruction:
    """Тесты вывода недостающих полей"""

    def test_carbon_dating_rt(self, carbon):
        assert carbon.derived == RatioField.RT
        assert carbon.rt == pytest.approx(3.55693e-13, rel=1e-5)
        assert carbon.time == 8500.0

    def test_time_derived_from_rt(self):
        ratios = GrowthOrDecayRatios.new(3.55693e-13, 1e-12, 8223.0, None)
        assert ratios.derived == RatioField.TIME
        assert ratios.time == pytest.approx(8500.0, rel=1e-4)
        assert ratios.rt == 3.55693e-13

    def test_decay_constant_always_computed(self, carbon):
        from_rt = GrowthOrDecayRatios(rt=carbon.rt, r0=carbon.r0, decay_years=8223.0)
        assert carbon.decay_constant == LN_2 / 8223.0
        assert from_rt.decay_constant == LN_2 / 8223.0

    def test_supplied_decay_constant_ignored(self):
        ratios = GrowthOrDecayRatios(
            r0=1.0, decay_years=100.0, time=10.0, decay_constant=123.0
        )
        assert ratios.decay_constant == LN_2 / 100.0

    def test_both_given_are_stored_as_is(self):
        """Без перекрёстной проверки: rt не выводится заново из time"""
        ratios = GrowthOrDecayRatios.new(0.9, 1.0, 100.0, 50.0)
        assert ratios.derived == RatioField.NONE
        assert ratios.rt == 0.9
        assert ratios.time == 50.0
        assert not ratios.is_consistent()

    def test_neither_given_raises_invalid_input(self):
        with pytest.raises(InvalidInput, match="rt or time"):
            GrowthOrDecayRatios.new(None, 1.0, 100.0, None)

        with pytest.raises(InvalidInput):
            GrowthOrDecayRatios(r0=1.0, decay_years=100.0)

    def test_missing_r0_left_to_pydantic(self):
        with pytest.raises(ValidationError):
            GrowthOrDecayRatios(decay_years=100.0, time=10.0)

    def test_numeric_strings_and_decimals_are_derived(self):
        """Строки и Decimal, которые pydantic приводит к float, участвуют в выводе"""
        from_strings = GrowthOrDecayRatios(r0="1.0", decay_years="100", time="50")
        from_decimals = GrowthOrDecayRatios.new(None, Decimal("1.0"), Decimal("100"), Decimal("50"))

        for ratios in (from_strings, from_decimals):
            assert ratios.derived == RatioField.RT
            assert ratios.rt == pytest.approx(math.exp(-0.5), rel=1e-12)
            assert ratios.decay_constant == pytest.approx(LN_2 / 100.0, rel=1e-15)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            GrowthOrDecayRatios(r0=1.0, decay_years=100.0, time=10.0, rate=0.1)

    def test_rt_above_r0_gives_negative_time(self):
        ratios = GrowthOrDecayRatios.new(2.0, 1.0, 100.0, None)
        assert ratios.time == pytest.approx(-100.0 * LN_2)


class TestCrossConsistency:
    """rt = r0 × e^(-time / decay_years) в обе стороны"""

    @pytest.mark.parametrize(
        "r0, decay_years, time",
        [
            (1e-12, 8223.0, 8500.0),
            (1.0, 5730.0, 1000.0),
            (250.0, 3.5, 0.25),
            (0.03, 1.0, 12.0),
        ],
    )
    def test_time_then_rt_then_time(self, r0, decay_years, time):
        forward = GrowthOrDecayRatios(r0=r0, decay_years=decay_years, time=time)
        backward = GrowthOrDecayRatios(rt=forward.rt, r0=r0, decay_years=decay_years)

        assert forward.rt == pytest.approx(r0 * math.exp(-time / decay_years), rel=1e-15)
        assert backward.time == pytest.approx(time, rel=1e-9)
        assert forward.is_consistent()
        assert backward.is_consistent()
        assert forward.decay_constant == backward.decay_constant


class TestDerivedProperties:
    def test_remaining_fraction(self, carbon):
        assert carbon.remaining_fraction == pytest.approx(math.exp(-8500.0 / 8223.0))

    def test_lifetimes_elapsed(self, carbon):
        assert carbon.lifetimes_elapsed == pytest.approx(8500.0 / 8223.0)


class TestEdgeCases:
    """NaN/Inf вне домена формул"""

    def test_zero_rt_takes_infinite_time(self):
        ratios = GrowthOrDecayRatios.new(0.0, 1, 100, None)
        assert ratios.time == math.inf
        assert ratios.derived == RatioField.TIME

    def test_negative_rt_gives_nan_time(self):
        assert math.isnan(GrowthOrDecayRatios.new(-0.5, 1.0, 100.0, None).time)

    def test_zero_decay_years(self):
        ratios = GrowthOrDecayRatios.new(None, 1, 0, 10)
        assert ratios.decay_constant == math.inf
        assert ratios.rt == 0.0

    def test_nan_propagates(self):
        ratios = GrowthOrDecayRatios.new(float("nan"), 1.0, 100.0, None)
        assert math.isnan(ratios.time)


class TestImmutability:
    def test_frozen(self, carbon):
        with pytest.raises(ValidationError):
            carbon.rt = 1.0


class TestContract:
    def test_to_contract(self, carbon):
        data = carbon.to_contract()
        assert data["derived"] == "rt"
        assert set(data) == {"rt", "r0", "decay_constant", "time", "decay_years", "derived"}
        assert data["rt"] == carbon.rt

    def test_non_finite_fields_rejected(self):
        ratios = GrowthOrDecayRatios.new(float("nan"), 1.0, 100.0, None)
        with pytest.raises(ValueError, match="NaN/Inf"):
            ratios.to_contract()
