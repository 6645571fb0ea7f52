"""
Snake (serpentine) distribution of ranked items over a fixed list of courts.

Walking forward 0, 1, ..., k-1 and then backward k-1, ..., 0 (repeat) spreads the strongest players
over all courts instead of stacking them on the first one.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from functools import reduce
from typing import Self, Sequence, TypeVar

T = TypeVar("T")


class Direction(Enum):
    FORWARD = auto()
    BACKWARD = auto()


@dataclass(frozen=True)
class SnakeWalker:
    """
    State of the walk: which court receives the next item and which way we are going.

    NOTE: the end courts are visited twice in a row when turning around (..., k-2, k-1, k-1, k-2, ...).
    """

    court_count: int
    court_index: int = 0
    direction: Direction = Direction.FORWARD

    def __post_init__(self) -> None:
        if self.court_count < 1:
            raise ValueError(f"Snake walk needs at least one court, got {self.court_count}")

    def step(self) -> Self:
        """The walker after handing an item to the current court."""
        if self.direction == Direction.FORWARD:
            if self.court_index + 1 >= self.court_count:
                return replace(self, direction=Direction.BACKWARD)
            return replace(self, court_index=self.court_index + 1)

        if self.court_index - 1 < 0:
            return replace(self, direction=Direction.FORWARD)
        return replace(self, court_index=self.court_index - 1)


def snake_order(item_count: int, court_count: int) -> list[int]:
    """Court index for each of `item_count` items. e.g. snake_order(6, 3) == [0, 1, 2, 2, 1, 0]"""
    if item_count == 0:
        return []

    def _visit(
        acc: tuple[list[int], SnakeWalker], _: int
    ) -> tuple[list[int], SnakeWalker]:
        order, walker = acc
        return order + [walker.court_index], walker.step()

    order, _ = reduce(_visit, range(item_count), ([], SnakeWalker(court_count)))
    return order


def snake_distribute(items: Sequence[T], court_count: int) -> list[list[T]]:
    """Deal the items (already ranked) over `court_count` buckets in snake order."""
    buckets: list[list[T]] = [[] for _ in range(court_count)]
    for item, court_idx in zip(items, snake_order(len(items), court_count)):
        buckets[court_idx].append(item)
    return buckets
