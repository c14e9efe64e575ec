"""Generic range model with per-bound inclusivity.

Provides an immutable Range[T] model over any ordered type, with point
membership, boundary-point containment and intersection tests, and union.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from rangemath import operations
from rangemath.inclusivity import DEFAULT_INCLUSIVITY, Inclusivity
from rangemath.protocols import RangeLike

logger = logging.getLogger(__name__)

# Unbound so pydantic passes arbitrary ordered values through unchanged.
T = TypeVar("T")


class Range(BaseModel, Generic[T]):  # noqa: UP046 - Pydantic requires Generic[T]
    """An immutable interval with configurable bound inclusivity.

    Ordering between the bounds is not enforced. A range whose minimum is
    greater than its maximum is allowed and behaves as an empty range in
    :meth:`contains`.

    Attributes
    ----------
    minimum
        Lower bound.
    maximum
        Upper bound.
    inclusivity
        Which bounds belong to the range (default: both).

    Examples
    --------
    >>> scale = Range(1, 7)
    >>> scale.contains(7)
    True
    >>> 0 in scale
    False

    >>> unit = Range[float](0.0, 1.0, Inclusivity.MIN_INCLUSIVE_MAX_EXCLUSIVE)
    >>> unit.contains(1.0)
    False
    >>> unit.union(Range[float](0.5, 2.0)).maximum
    2.0
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    minimum: T
    maximum: T
    inclusivity: Inclusivity = DEFAULT_INCLUSIVITY

    def __init__(
        self,
        minimum: T,
        maximum: T,
        inclusivity: Inclusivity = DEFAULT_INCLUSIVITY,
        **data: Any,
    ) -> None:
        super().__init__(
            minimum=minimum, maximum=maximum, inclusivity=inclusivity, **data
        )

    @model_validator(mode="after")
    def validate_comparable(self) -> Range[T]:
        """Validate that the bounds can be compared with each other.

        Returns
        -------
        Range[T]
            The validated range instance.

        Raises
        ------
        ValueError
            If comparing minimum and maximum raises TypeError.
        """
        try:
            degenerate = self.minimum > self.maximum
        except TypeError as e:
            raise ValueError(
                f"minimum ({self.minimum!r}) and maximum ({self.maximum!r}) "
                "are not comparable"
            ) from e
        if degenerate:
            logger.debug(
                "Range minimum %r exceeds maximum %r; no value is contained",
                self.minimum,
                self.maximum,
            )
        return self

    def is_degenerate(self) -> bool:
        """Return True if the minimum is greater than the maximum."""
        return self.minimum > self.maximum

    def contains(self, value: T) -> bool:
        """Check if a value is within the range.

        Parameters
        ----------
        value
            The value to check.

        Returns
        -------
        bool
            True if the value satisfies both bounds under ``inclusivity``.

        Examples
        --------
        >>> r = Range(1, 5, Inclusivity.MIN_EXCLUSIVE_MAX_INCLUSIVE)
        >>> r.contains(1)
        False
        >>> r.contains(5)
        True
        """
        return operations.contains(self, value)

    def contains_range(self, other: RangeLike[Any]) -> bool:
        """Check if any boundary point of either range lies in the other.

        Parameters
        ----------
        other
            The other range.

        Returns
        -------
        bool
            Result of the boundary-point OR test.

        Examples
        --------
        >>> Range(0, 10).contains_range(Range(5, 15))
        True
        """
        return operations.contains_range(self, other)

    def intersects(self, other: RangeLike[Any]) -> bool:
        """Check if this range intersects another range.

        Parameters
        ----------
        other
            The other range.

        Returns
        -------
        bool
            Result of the boundary-point OR test.
        """
        return operations.intersects(self, other)

    def union(self, other: RangeLike[Any]) -> Range[Any]:
        """Return a closed range spanning this range and another.

        Parameters
        ----------
        other
            The other range.

        Returns
        -------
        Range
            New range from the lesser minimum to the greater maximum.
        """
        return operations.union(self, other)

    def __contains__(self, value: object) -> bool:
        return operations.contains(self, value)  # type: ignore[arg-type]
