import pytest
import numpy as np
from market_models.settings import Measure, MeasureSettings, numeraires_for, is_in_measure
from market_models.errors import OffsetOutOfRange
from test_evolution import make_base_grid


class TestMeasureSettings:

    def test_default_is_terminal(self):
        settings = MeasureSettings()
        assert settings.measure is Measure.TERMINAL
        assert settings.offset == 0

    def test_measure_from_string(self):
        settings = MeasureSettings('money_market_plus', offset=2)
        assert settings.measure is Measure.MONEY_MARKET_PLUS

    def test_unknown_measure(self):
        with pytest.raises(ValueError):
            MeasureSettings('spot')

    def test_offset_needs_money_market_plus(self):
        with pytest.raises(ValueError, match="money market plus"):
            MeasureSettings(Measure.MONEY_MARKET, offset=1)


class TestDispatch:

    @pytest.mark.parametrize("settings, expected", [
        (MeasureSettings(), [3, 3, 3]),
        (MeasureSettings(Measure.MONEY_MARKET), [0, 1, 2]),
        (MeasureSettings(Measure.MONEY_MARKET_PLUS, offset=1), [1, 2, 3]),
    ])
    def test_numeraires_for(self, settings, expected):
        grid = make_base_grid()
        numeraires = numeraires_for(grid, settings)

        np.testing.assert_array_equal(numeraires, expected)
        assert is_in_measure(grid, numeraires, settings)

    def test_is_in_other_measure(self):
        grid = make_base_grid()
        numeraires = numeraires_for(grid, MeasureSettings(Measure.MONEY_MARKET))

        assert not is_in_measure(grid, numeraires, MeasureSettings())
        assert not is_in_measure(grid, numeraires, MeasureSettings(Measure.MONEY_MARKET_PLUS, offset=1))

    def test_offset_checked_against_grid(self):
        settings = MeasureSettings(Measure.MONEY_MARKET_PLUS, offset=4)
        with pytest.raises(OffsetOutOfRange):
            numeraires_for(make_base_grid(), settings)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
