"""Errors raised while building or using an evolution grid.

Every error is a ValueError: these are input mistakes to be fixed by the
caller, never transient faults.
"""

from market_models.formatters import ordinal


class GridError(ValueError):
    """Base class for all evolution grid errors"""


# ========== Construction ==========

class ValidationError(GridError):
    """Raised when a GridDescriptor cannot be built from its inputs"""


class InsufficientRateTimes(ValidationError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Rate times must have 2 elements at least, got {size}")


class NegativeFirstRateTime(ValidationError):
    def __init__(self, first: float):
        self.first = first
        super().__init__(f"First rate time must be non negative, got {first}")


class NonIncreasingRateTimes(ValidationError):
    def __init__(self, index: int, previous: float, current: float):
        self.index = index
        self.previous = previous
        self.current = current
        super().__init__(
            f"Rate times must be strictly increasing: "
            f"rate_times[{index}]={current} after rate_times[{index - 1}]={previous}"
        )


class InsufficientEvolutionTimes(ValidationError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Evolution times must have 1 element at least, got {size}")


class NonIncreasingEvolutionTimes(ValidationError):
    def __init__(self, index: int, previous: float, current: float):
        self.index = index
        self.previous = previous
        self.current = current
        super().__init__(
            f"Evolution times must be strictly increasing: "
            f"evolution_times[{index}]={current} after evolution_times[{index - 1}]={previous}"
        )


class EvolutionPastRateHorizon(ValidationError):
    def __init__(self, last_evolution_time: float, last_rate_time: float):
        self.last_evolution_time = last_evolution_time
        self.last_rate_time = last_rate_time
        super().__init__(
            f"The last evolution time ({last_evolution_time}) is past "
            f"the last rate time ({last_rate_time})"
        )


class RelevanceRateSizeMismatch(ValidationError):
    def __init__(self, size: int, n_steps: int):
        self.size = size
        self.n_steps = n_steps
        super().__init__(
            f"Size mismatch between relevance rates ({size}) "
            f"and evolution times ({n_steps})"
        )


# ========== Measures ==========

class MeasureError(GridError):
    """Raised when a measure cannot be built on a grid"""


class OffsetOutOfRange(MeasureError):
    def __init__(self, offset: int, max_numeraire: int):
        self.offset = offset
        self.max_numeraire = max_numeraire
        super().__init__(
            f"offset ({offset}) is outside the allowed range for "
            f"numeraire [0, {max_numeraire}]"
        )


# ========== Compatibility ==========

class CompatibilityError(GridError):
    """Raised when a numeraire sequence does not fit a grid"""


class NumeraireSizeMismatch(CompatibilityError):
    def __init__(self, size: int, n_steps: int):
        self.size = size
        self.n_steps = n_steps
        super().__init__(
            f"Size mismatch between numeraires ({size}) "
            f"and evolution times ({n_steps})"
        )


class NumeraireIndexOutOfRange(CompatibilityError):
    def __init__(self, step: int, numeraire: int, max_numeraire: int):
        self.step = step
        self.numeraire = numeraire
        self.max_numeraire = max_numeraire
        super().__init__(
            f"{ordinal(step + 1)} step: the numeraire ({numeraire}) "
            f"is not a rate time index in [0, {max_numeraire}]"
        )


class ExpiredNumeraire(CompatibilityError):
    def __init__(self, step: int, evolution_time: float, numeraire: int, rate_time: float):
        self.step = step
        self.evolution_time = evolution_time
        self.numeraire = numeraire
        self.rate_time = rate_time
        super().__init__(
            f"{ordinal(step + 1)} step, evolution time {evolution_time}: "
            f"the numeraire ({numeraire}), corresponding to rate time "
            f"{rate_time}, is expired"
        )
