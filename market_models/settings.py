from dataclasses import dataclass
from enum import Enum

from custom_types.types import ArrayLike, IntArray
from market_models.evolution import GridDescriptor
from market_models.measures import (
    terminal_measure,
    money_market_measure,
    money_market_plus_measure,
    is_in_terminal_measure,
    is_in_money_market_measure,
    is_in_money_market_plus_measure,
)


class Measure(Enum):
    TERMINAL = 'terminal'
    MONEY_MARKET = 'money_market'
    MONEY_MARKET_PLUS = 'money_market_plus'


@dataclass(frozen=True)
class MeasureSettings:
    """Measure used to discount a simulation"""
    measure: Measure = Measure.TERMINAL
    offset: int = 0     # bonds beyond the money market one, money market plus only

    def __post_init__(self):
        if isinstance(self.measure, str):
            object.__setattr__(self, 'measure', Measure(self.measure))
        if self.offset != 0 and self.measure is not Measure.MONEY_MARKET_PLUS:
            raise ValueError(
                f"offset ({self.offset}) only applies to the money market plus measure, "
                f"not {self.measure.value}"
            )


def numeraires_for(grid: GridDescriptor, settings: MeasureSettings = MeasureSettings()) -> IntArray:
    """Numeraire assignment of the configured measure"""
    if settings.measure is Measure.TERMINAL:
        return terminal_measure(grid)
    if settings.measure is Measure.MONEY_MARKET:
        return money_market_measure(grid)
    return money_market_plus_measure(grid, settings.offset)


def is_in_measure(grid: GridDescriptor, numeraires: ArrayLike, settings: MeasureSettings) -> bool:
    """True if `numeraires` belongs to the configured measure"""
    if settings.measure is Measure.TERMINAL:
        return is_in_terminal_measure(grid, numeraires)
    if settings.measure is Measure.MONEY_MARKET:
        return is_in_money_market_measure(grid, numeraires)
    return is_in_money_market_plus_measure(grid, numeraires, settings.offset)
