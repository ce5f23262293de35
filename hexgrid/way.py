"""A direction way: either a single direction or a tie between two."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

__all__ = ["DirectionWay"]

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, eq=False)
class DirectionWay(Generic[T]):
    """A single direction, or a tie between two directions.

    Comparing a way with a plain direction tells whether the way contains it.
    """

    directions: tuple[Any, ...]

    def __post_init__(self) -> None:
        if len(self.directions) not in (1, 2):
            raise ValueError("a direction way holds one or two directions")

    @classmethod
    def single(cls, value: T) -> DirectionWay[T]:
        """Build a way with a single direction."""
        return cls((value,))

    @classmethod
    def tie(cls, first: T, second: T) -> DirectionWay[T]:
        """Build a way that ties two directions."""
        return cls((first, second))

    @classmethod
    def way_from(
        cls, is_neg: bool, eq_left: bool, eq_right: bool, direction: T
    ) -> DirectionWay[T]:
        """Resolve a way from a direction and the tie flags on either side."""
        d: Any = -direction if is_neg else direction
        if eq_left:
            return cls.tie(d, d.counter_clockwise())
        if eq_right:
            return cls.tie(d, d.clockwise())
        return cls.single(d)

    @property
    def is_tie(self) -> bool:
        """Whether the way is a tie between two directions."""
        return len(self.directions) == 2

    def unwrap(self) -> T:
        """Return the single direction, or the first one of a tie."""
        return self.directions[0]

    def contains(self, direction: object) -> bool:
        """Whether the way includes ``direction``."""
        return any(d == direction for d in self.directions)

    def map(self, func: Callable[[T], U]) -> DirectionWay[U]:
        """Return a way of the same kind with ``func`` applied to each direction."""
        return DirectionWay(tuple(func(d) for d in self.directions))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectionWay):
            return self.directions == other.directions
        return self.contains(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_tie:
            first, second = self.directions
            return f"DirectionWay.tie({first!r}, {second!r})"
        return f"DirectionWay.single({self.directions[0]!r})"