"""Unit tests for /src/allocation/snake.py"""

import pytest

from src.allocation.snake import Direction, SnakeWalker, snake_distribute, snake_order


def test_walker_turns_around_at_the_last_court() -> None:
    walker = SnakeWalker(court_count=2)
    assert (walker.court_index, walker.direction) == (0, Direction.FORWARD)

    walker = walker.step()
    assert (walker.court_index, walker.direction) == (1, Direction.FORWARD)

    # last court is visited twice: once going forward, once going back
    walker = walker.step()
    assert (walker.court_index, walker.direction) == (1, Direction.BACKWARD)

    walker = walker.step()
    assert (walker.court_index, walker.direction) == (0, Direction.BACKWARD)

    walker = walker.step()
    assert (walker.court_index, walker.direction) == (0, Direction.FORWARD)


def test_walker_needs_a_court() -> None:
    with pytest.raises(ValueError):
        SnakeWalker(court_count=0)


@pytest.mark.parametrize(
    "item_count, court_count, expected",
    [
        (0, 3, []),
        (4, 1, [0, 0, 0, 0]),
        (8, 2, [0, 1, 1, 0, 0, 1, 1, 0]),
        (6, 3, [0, 1, 2, 2, 1, 0]),
        (12, 3, [0, 1, 2, 2, 1, 0, 0, 1, 2, 2, 1, 0]),
    ],
)
def test_snake_order(item_count: int, court_count: int, expected: list[int]) -> None:
    assert snake_order(item_count, court_count) == expected


def test_snake_distribute_spreads_top_items() -> None:
    """The two best items never end up together when there are two buckets."""
    buckets = snake_distribute([8, 7, 6, 5, 4, 3, 2, 1], 2)
    assert buckets == [[8, 5, 4, 1], [7, 6, 3, 2]]
    assert sum(buckets[0]) == sum(buckets[1])
