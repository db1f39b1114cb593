from dataclasses import dataclass
from typing import Sequence

import numpy as np
from custom_types.types import ArrayLike, FloatArray, RelevanceRange
from market_models.evolution import GridDescriptor


@dataclass(frozen=True)
class RateTimeGrid:
    """
    Equally spaced rate times from `start` to `T`.
    Default: quarterly rates over one year.
    """
    T: float
    n_rates: int = 4
    start: float = 0.0

    def __post_init__(self):
        if self.n_rates < 1:
            raise ValueError(f"RateTimeGrid needs 1 rate at least, got {self.n_rates}")
        if not self.T > self.start:
            raise ValueError(f"RateTimeGrid end ({self.T}) must be after its start ({self.start})")

    @property
    def tau(self) -> float:
        """Accrual length of each rate"""
        return (self.T - self.start) / self.n_rates

    def grid(self) -> FloatArray:
        """Return array of rate times from start to T"""
        return np.linspace(self.start, self.T, self.n_rates + 1)

    def descriptor(
            self,
            evolution_times: ArrayLike = (),
            relevance_rates: Sequence[RelevanceRange] = ()
    ) -> GridDescriptor:
        """Evolution grid over these rate times"""
        return GridDescriptor(self.grid(), evolution_times, relevance_rates)
