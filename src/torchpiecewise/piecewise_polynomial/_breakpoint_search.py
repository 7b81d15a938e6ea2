import bisect
import enum
from typing import Optional, Sequence, Tuple, Union


class Outside(enum.Enum):
    """Position of a value that lies outside a breakpoint window."""

    BEFORE_START = "before_start"
    AFTER_END = "after_end"


def breakpoint_search(
    breakpoints: Sequence[float],
    x: float,
    start: int = 0,
    stop: Optional[int] = None,
) -> Union[int, Outside]:
    """Find the last breakpoint at or below ``x`` within a window.

    Only ``breakpoints[start:stop]`` is searched; indices are tracked as
    offsets into the full sequence so no copy is made.

    Parameters
    ----------
    breakpoints : sequence of float
        Strictly increasing values.
    x : float
        Query value.
    start, stop : int
        Window of indices to search, ``[start, stop)``. ``stop`` defaults to
        ``len(breakpoints)``.

    Returns
    -------
    int or Outside
        Index ``k`` in ``[start, stop)`` with
        ``breakpoints[k] <= x < breakpoints[k + 1]``; ``k == stop - 1`` when
        ``x`` equals the last breakpoint of the window.
        ``Outside.BEFORE_START`` when the window is empty, ``x`` is below
        ``breakpoints[start]`` or ``x`` is NaN. ``Outside.AFTER_END`` when
        ``x`` is above ``breakpoints[stop - 1]``.

    Examples
    --------
    >>> breakpoint_search([0.0, 1.0, 2.0], 1.0)
    1
    >>> breakpoint_search([0.0, 1.0, 2.0], 1.5, start=1)
    1
    >>> breakpoint_search([0.0, 1.0, 2.0], 0.0, start=1, stop=2)
    <Outside.BEFORE_START: 'before_start'>
    """
    if stop is None:
        stop = len(breakpoints)

    if start >= stop or not x >= breakpoints[start]:
        return Outside.BEFORE_START

    if x > breakpoints[stop - 1]:
        return Outside.AFTER_END

    return bisect.bisect_right(breakpoints, x, start, stop) - 1


def locate_interval(
    breakpoints: Sequence[float],
    x: float,
    start: int = 0,
) -> Optional[Tuple[int, int]]:
    """Return the ``(left, right)`` breakpoint indices of the interval holding ``x``.

    Intervals are half-open, ``[b[k], b[k + 1])``, except the last which
    also holds its right end. Searching begins at ``start``; callers pass a
    later start only when ``x`` is known to be at or above
    ``breakpoints[start]``.
    """
    n = len(breakpoints)

    # Fewer than two breakpoints bound no interval
    if n < 2:
        return None

    if x == breakpoints[n - 1]:
        return n - 2, n - 1

    k = breakpoint_search(breakpoints, x, start, n)

    if isinstance(k, Outside):
        return None

    return k, k + 1
