import numpy as np
from custom_types.types import ArrayLike, as_index_array
from market_models.errors import (
    NumeraireSizeMismatch,
    NumeraireIndexOutOfRange,
    ExpiredNumeraire,
)
from market_models.evolution import GridDescriptor


def check_compatibility(grid: GridDescriptor, numeraires: ArrayLike) -> None:
    """
    Check that a numeraire assignment can be used on a grid.

    One numeraire per step is required, each a valid bond index, and no
    numeraire may mature before the evolution time of its step. The last
    step is not checked, neither its index nor its expiry: there is no later
    step for the bond to survive into.

    Args:
        grid: Evolution grid
        numeraires: Bond index per step, shape (m,)

    Raises:
        NumeraireSizeMismatch: numeraires and evolution times differ in size
        NumeraireIndexOutOfRange: a numeraire before the last step is not in [0, n]
        ExpiredNumeraire: a numeraire matures before its step
    """
    numeraires = as_index_array(numeraires)
    n_steps = grid.number_of_steps
    if len(numeraires) != n_steps:
        raise NumeraireSizeMismatch(len(numeraires), n_steps)

    max_numeraire = grid.number_of_rates
    checked = numeraires[:-1]
    out_of_range = np.flatnonzero((checked < 0) | (checked > max_numeraire))
    if out_of_range.size:
        i = int(out_of_range[0])
        raise NumeraireIndexOutOfRange(i, int(numeraires[i]), max_numeraire)

    rate_times = grid.rate_times
    evolution_times = grid.evolution_times
    for i in range(n_steps - 1):
        if rate_times[numeraires[i]] < evolution_times[i]:
            raise ExpiredNumeraire(
                i,
                float(evolution_times[i]),
                int(numeraires[i]),
                float(rate_times[numeraires[i]])
            )
