"""Comparison operations over anything shaped like a range.

Every function here is pure and accepts any :class:`~rangemath.protocols.RangeLike`,
so callers can use their own range types as long as they expose ``minimum``,
``maximum`` and ``inclusivity``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rangemath.protocols import C, RangeLike

if TYPE_CHECKING:
    from rangemath.range import Range


def contains(range_: RangeLike[C], value: C) -> bool:
    """Check whether a value lies inside a range.

    Parameters
    ----------
    range_ : RangeLike[C]
        The range to test against.
    value : C
        The value to test.

    Returns
    -------
    bool
        True if ``value`` satisfies both bounds under the range's
        inclusivity. Always False for a range whose minimum exceeds its
        maximum.

    Examples
    --------
    >>> from rangemath import Inclusivity, Range
    >>> contains(Range(1, 5), 5)
    True
    >>> contains(Range(1, 5, Inclusivity.MIN_INCLUSIVE_MAX_EXCLUSIVE), 5)
    False
    """
    min_inclusive, max_inclusive = range_.inclusivity.bounds

    test_min = range_.minimum <= value if min_inclusive else range_.minimum < value
    test_max = range_.maximum >= value if max_inclusive else range_.maximum > value

    return test_min and test_max


def contains_range(range_: RangeLike[C], other: RangeLike[C]) -> bool:
    """Check whether any boundary point of either range lies in the other.

    This is the boundary-point OR test, not a subset test: ``[0, 10]``
    contains ``[5, 15]`` because 5 lies in ``[0, 10]``.

    Parameters
    ----------
    range_ : RangeLike[C]
        First range.
    other : RangeLike[C]
        Second range.

    Returns
    -------
    bool
        True if ``range_`` contains either bound of ``other`` or ``other``
        contains either bound of ``range_``.

    Examples
    --------
    >>> from rangemath import Range
    >>> contains_range(Range(0, 10), Range(5, 15))
    True
    >>> contains_range(Range(0, 5), Range(10, 15))
    False
    """
    return (
        contains(range_, other.minimum)  # range_ holds other
        or contains(range_, other.maximum)
        or contains(other, range_.minimum)  # other holds range_
        or contains(other, range_.maximum)
    )


def intersects(range_: RangeLike[C], other: RangeLike[C]) -> bool:
    """Check whether two ranges intersect.

    Uses the same boundary-point OR test as :func:`contains_range`; either
    range may completely contain the other.

    Parameters
    ----------
    range_ : RangeLike[C]
        First range.
    other : RangeLike[C]
        Second range.

    Returns
    -------
    bool
        True if the ranges share a boundary point under their inclusivities.

    Examples
    --------
    >>> from rangemath import Range
    >>> intersects(Range(0, 5), Range(5, 10))
    True
    """
    return (
        contains(range_, other.minimum)
        or contains(range_, other.maximum)
        or contains(other, range_.minimum)
        or contains(other, range_.maximum)
    )


def union(range_: RangeLike[C], other: RangeLike[C]) -> Range[C]:
    """Build the smallest single range spanning both inputs.

    The result is always closed (both bounds inclusive); the inputs'
    inclusivity is not carried over. Disjoint inputs still produce one
    enclosing span.

    Parameters
    ----------
    range_ : RangeLike[C]
        First range.
    other : RangeLike[C]
        Second range.

    Returns
    -------
    Range[C]
        New range from the lesser minimum to the greater maximum.

    Examples
    --------
    >>> from rangemath import Range
    >>> merged = union(Range(0, 5), Range(10, 15))
    >>> (merged.minimum, merged.maximum)
    (0, 15)
    """
    from rangemath.range import Range  # noqa: PLC0415 - range imports this module

    return Range(
        range_.minimum if range_.minimum < other.minimum else other.minimum,
        range_.maximum if range_.maximum > other.maximum else other.maximum,
    )
