import logging
import warnings
from dataclasses import dataclass, field
from numbers import Integral
from typing import Sequence

import numpy as np
from custom_types.types import ArrayLike, FloatArray, IntArray, RelevanceRange, as_1d, frozen
from market_models.errors import (
    InsufficientRateTimes,
    NegativeFirstRateTime,
    NonIncreasingRateTimes,
    InsufficientEvolutionTimes,
    NonIncreasingEvolutionTimes,
    EvolutionPastRateHorizon,
    RelevanceRateSizeMismatch,
)
from market_models.scan import rate_cursor

log = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class GridDescriptor:
    """
    Rate times and evolution times of a LIBOR market model simulation.

    Rate i accrues over [rate_times[i], rate_times[i+1]); the simulation
    advances all rates jointly from one evolution time to the next.
    Inputs are validated once, here; the descriptor and every array it
    exposes are read-only afterwards.

    Args:
        rate_times: n+1 strictly increasing, non-negative times
        evolution_times: m strictly increasing times, the last one not past
            the last rate time. Defaults to all rate times but the last.
        relevance_rates: m (first, last) rate index pairs. Defaults to (0, n)
            at every step.
    """
    rate_times: FloatArray
    evolution_times: ArrayLike = ()
    relevance_rates: tuple[RelevanceRange, ...] = ()

    # Derived structures
    rate_taus: FloatArray = field(init=False, repr=False)
    effective_stop_time: FloatArray = field(init=False, repr=False)
    first_alive_rate: IntArray = field(init=False, repr=False)

    def __post_init__(self):
        rate_times = _times(self.rate_times, 'rate_times')

        # Rate times: n >= 1, non-negative, strictly increasing
        if len(rate_times) <= 1:
            raise InsufficientRateTimes(len(rate_times))
        if not rate_times[0] >= 0.0:
            raise NegativeFirstRateTime(float(rate_times[0]))
        i = _first_non_increasing(rate_times)
        if i is not None:
            raise NonIncreasingRateTimes(i, float(rate_times[i - 1]), float(rate_times[i]))

        # Evolution times: m >= 1, strictly increasing, within the rate horizon
        evolution_times = _times(self.evolution_times, 'evolution_times')
        if evolution_times.size == 0:
            evolution_times = rate_times[:-1].copy()
        if len(evolution_times) < 1:
            raise InsufficientEvolutionTimes(len(evolution_times))
        i = _first_non_increasing(evolution_times)
        if i is not None:
            raise NonIncreasingEvolutionTimes(
                i, float(evolution_times[i - 1]), float(evolution_times[i])
            )
        if not rate_times[-1] >= evolution_times[-1]:
            raise EvolutionPastRateHorizon(float(evolution_times[-1]), float(rate_times[-1]))

        n_rates = len(rate_times) - 1
        n_steps = len(evolution_times)
        relevance_rates = _relevance_rates(self.relevance_rates, n_rates, n_steps)

        rate_taus = np.diff(rate_times)

        # stop[j, i] = min(evolution_times[j], rate_times[i]) for i < n
        effective_stop_time = np.minimum(evolution_times[:, None], rate_times[None, :-1])

        # First rate still alive when step j starts, i.e. after the previous evolution time
        previous_times = np.concatenate(([0.0], evolution_times[:-1]))
        first_alive_rate = rate_cursor(rate_times, previous_times, strict=False)

        object.__setattr__(self, 'rate_times', frozen(rate_times))
        object.__setattr__(self, 'evolution_times', frozen(evolution_times))
        object.__setattr__(self, 'relevance_rates', relevance_rates)
        object.__setattr__(self, 'rate_taus', frozen(rate_taus))
        object.__setattr__(self, 'effective_stop_time', frozen(effective_stop_time))
        object.__setattr__(self, 'first_alive_rate', frozen(first_alive_rate))

        log.debug("Evolution grid built: %d rates, %d steps", n_rates, n_steps)

    @property
    def number_of_rates(self) -> int:
        """Number of forward rates n"""
        return len(self.rate_times) - 1

    @property
    def number_of_steps(self) -> int:
        """Number of evolution steps m"""
        return len(self.evolution_times)


def _times(x: ArrayLike, name: str) -> FloatArray:
    # Own copy: the caller's array must stay writeable
    a = as_1d(x).copy()
    if a.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {a.shape}")
    return a


def _first_non_increasing(times: FloatArray) -> int | None:
    """Index of the first time not strictly above its predecessor, if any"""
    bad = np.flatnonzero(~(np.diff(times) > 0.0))
    return int(bad[0]) + 1 if bad.size else None


def _relevance_rates(
        relevance_rates: Sequence[RelevanceRange],
        n_rates: int,
        n_steps: int
) -> tuple[RelevanceRange, ...]:
    """Default, size-check and normalize relevance ranges"""
    if len(relevance_rates) == 0:
        return ((0, n_rates),) * n_steps
    if len(relevance_rates) != n_steps:
        raise RelevanceRateSizeMismatch(len(relevance_rates), n_steps)

    pairs = []
    for j, pair in enumerate(relevance_rates):
        if len(pair) != 2 or not all(isinstance(k, Integral) for k in pair):
            raise TypeError(f"Relevance rates at step {j} must be a pair of integers, got {pair!r}")
        lo, hi = int(pair[0]), int(pair[1])

        # Relevance is a hint for downstream engines, not a grid invariant
        if lo < 0 or lo > hi or hi > n_rates:
            warnings.warn(
                f"Relevance range ({lo}, {hi}) at step {j} is not within [0, {n_rates}]. "
                f"Downstream engines may ignore or clip it.",
                UserWarning,
                stacklevel=4
            )
        pairs.append((lo, hi))
    return tuple(pairs)
