"""Structural types shared by the range model and its operations.

``RangeLike`` is the range capability: anything exposing a ``minimum``, a
``maximum`` and an ``inclusivity`` can be passed to the functions in
:mod:`rangemath.operations`, not only :class:`rangemath.range.Range`.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from rangemath.inclusivity import Inclusivity


class SupportsRichComparison(Protocol):
    """A value with a total order over ``<``, ``<=``, ``>`` and ``>=``."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


C = TypeVar("C", bound=SupportsRichComparison)
C_co = TypeVar("C_co", bound=SupportsRichComparison, covariant=True)


class RangeLike(Protocol[C_co]):
    """Read-only view of an interval with per-bound inclusivity.

    Attributes
    ----------
    minimum : C_co
        Lower bound.
    maximum : C_co
        Upper bound.
    inclusivity : Inclusivity
        Which of the two bounds belong to the range.
    """

    @property
    def minimum(self) -> C_co: ...

    @property
    def maximum(self) -> C_co: ...

    @property
    def inclusivity(self) -> Inclusivity: ...
