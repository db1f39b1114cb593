"""Numeraire choices for the simulation measures.

A numeraire assignment names, for every evolution step, the discount bond
(by its maturity index in the rate times) used as unit of account over that
step. Index n is the terminal bond, maturing at the last rate time.
"""

from numbers import Integral

import numpy as np
from custom_types.types import ArrayLike, IntArray, as_index_array
from market_models.errors import OffsetOutOfRange
from market_models.evolution import GridDescriptor
from market_models.scan import rate_cursor


def terminal_measure(grid: GridDescriptor) -> IntArray:
    """Discount every step with the terminal bond"""
    return np.full(grid.number_of_steps, grid.number_of_rates, dtype=np.int64)


def money_market_plus_measure(grid: GridDescriptor, offset: int) -> IntArray:
    """
    Roll the numeraire forward as rates expire, `offset` bonds ahead.

    At step i the numeraire is the first bond maturing at or after
    evolution_times[i], shifted by `offset` and capped at the terminal bond.

    Args:
        grid: Evolution grid
        offset: Number of bonds beyond the money market one, in [0, n]

    Returns:
        Numeraire index per step, shape (m,)
    """
    max_numeraire = grid.number_of_rates
    _check_offset(offset, max_numeraire)

    cursor = rate_cursor(grid.rate_times, grid.evolution_times, strict=True)
    return np.minimum(cursor + offset, max_numeraire)


def money_market_measure(grid: GridDescriptor) -> IntArray:
    """Discretely compounded money market account: offset 0"""
    return money_market_plus_measure(grid, 0)


def is_in_terminal_measure(grid: GridDescriptor, numeraires: ArrayLike) -> bool:
    """True if no step uses a bond other than the terminal one"""
    numeraires = as_index_array(numeraires)
    if numeraires.size == 0:
        return False
    return bool(numeraires.min() == grid.number_of_rates)


def is_in_money_market_plus_measure(
        grid: GridDescriptor,
        numeraires: ArrayLike,
        offset: int
) -> bool:
    """True if `numeraires` is exactly the money market plus `offset` assignment"""
    expected = money_market_plus_measure(grid, offset)
    numeraires = as_index_array(numeraires)
    return bool(np.array_equal(numeraires, expected))


def is_in_money_market_measure(grid: GridDescriptor, numeraires: ArrayLike) -> bool:
    return is_in_money_market_plus_measure(grid, numeraires, 0)


def _check_offset(offset: int, max_numeraire: int) -> None:
    if not isinstance(offset, Integral):
        raise TypeError(f"offset must be an integer, got {offset!r}")
    if offset < 0 or offset > max_numeraire:
        raise OffsetOutOfRange(int(offset), max_numeraire)
