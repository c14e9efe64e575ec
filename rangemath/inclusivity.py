"""Bound inclusivity for ranges.

The integer values keep the two-bit layout ranges have always been stored
with: bit 0 marks an inclusive maximum, bit 1 an inclusive minimum. Code in
this package never inspects the bits directly; it goes through the
``_BOUNDS`` lookup table below.
"""

from __future__ import annotations

from enum import Enum


class Inclusivity(int, Enum):
    """Which bounds of a range are part of the range.

    Attributes
    ----------
    MIN_EXCLUSIVE_MAX_EXCLUSIVE : int
        Open interval ``(minimum, maximum)``.
    MIN_EXCLUSIVE_MAX_INCLUSIVE : int
        Half-open interval ``(minimum, maximum]``.
    MIN_INCLUSIVE_MAX_EXCLUSIVE : int
        Half-open interval ``[minimum, maximum)``.
    MIN_INCLUSIVE_MAX_INCLUSIVE : int
        Closed interval ``[minimum, maximum]``.

    Examples
    --------
    >>> Inclusivity.MIN_INCLUSIVE_MAX_EXCLUSIVE.min_inclusive
    True
    >>> Inclusivity.MIN_INCLUSIVE_MAX_EXCLUSIVE.max_inclusive
    False
    >>> Inclusivity.from_bounds(min_inclusive=False, max_inclusive=True)
    <Inclusivity.MIN_EXCLUSIVE_MAX_INCLUSIVE: 1>
    """

    MIN_EXCLUSIVE_MAX_EXCLUSIVE = 0
    MIN_EXCLUSIVE_MAX_INCLUSIVE = 1
    MIN_INCLUSIVE_MAX_EXCLUSIVE = 2
    MIN_INCLUSIVE_MAX_INCLUSIVE = 3

    @property
    def bounds(self) -> tuple[bool, bool]:
        """Return ``(min_inclusive, max_inclusive)`` for this variant."""
        return _BOUNDS[self]

    @property
    def min_inclusive(self) -> bool:
        """Whether the minimum belongs to the range."""
        return _BOUNDS[self][0]

    @property
    def max_inclusive(self) -> bool:
        """Whether the maximum belongs to the range."""
        return _BOUNDS[self][1]

    @classmethod
    def from_bounds(cls, min_inclusive: bool, max_inclusive: bool) -> Inclusivity:
        """Look up the variant for a pair of bound flags.

        Parameters
        ----------
        min_inclusive : bool
            Whether the minimum is inclusive.
        max_inclusive : bool
            Whether the maximum is inclusive.

        Returns
        -------
        Inclusivity
            The matching variant.
        """
        return _VARIANTS[(bool(min_inclusive), bool(max_inclusive))]


_BOUNDS: dict[Inclusivity, tuple[bool, bool]] = {
    Inclusivity.MIN_EXCLUSIVE_MAX_EXCLUSIVE: (False, False),
    Inclusivity.MIN_EXCLUSIVE_MAX_INCLUSIVE: (False, True),
    Inclusivity.MIN_INCLUSIVE_MAX_EXCLUSIVE: (True, False),
    Inclusivity.MIN_INCLUSIVE_MAX_INCLUSIVE: (True, True),
}

_VARIANTS: dict[tuple[bool, bool], Inclusivity] = {
    bounds: variant for variant, bounds in _BOUNDS.items()
}

DEFAULT_INCLUSIVITY = Inclusivity.MIN_INCLUSIVE_MAX_INCLUSIVE
