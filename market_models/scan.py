import numpy as np
from custom_types.types import ArrayLike, FloatArray, IntArray


def rate_cursor(rate_times: FloatArray, boundaries: ArrayLike, strict: bool) -> IntArray:
    """
    Positions of a rate cursor swept across boundaries in order.

    For each boundary b the cursor advances while
    rate_times[cursor] < b (strict) or rate_times[cursor] <= b (non-strict),
    never moving back and never past the last rate time index.

    Args:
        rate_times: Strictly increasing rate times, shape (n+1,)
        boundaries: Times to sweep, in order, shape (m,)
        strict: Compare with '<' when True, '<=' otherwise

    Returns:
        Cursor index reached at each boundary, shape (m,)
    """
    # side='left' counts rate times < b, side='right' counts rate times <= b
    side = 'left' if strict else 'right'
    cursor = np.searchsorted(rate_times, boundaries, side=side)

    # A boundary below an earlier one must not move the cursor back
    cursor = np.maximum.accumulate(cursor)

    # The last rate time index is the furthest a cursor can go
    return np.minimum(cursor, len(rate_times) - 1).astype(np.int64)
