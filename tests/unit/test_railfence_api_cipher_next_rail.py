"""Unit tests for railfence.api.cipher.next_rail module."""

import pytest

from railfence.api.cipher.next_rail import next_rail

pytestmark = pytest.mark.cipher


@pytest.mark.parametrize(
    ("current", "direction", "depth", "expected"),
    [
        (0, 1, 3, (1, 1)),
        (1, 1, 3, (2, 1)),
        (2, 1, 3, (1, -1)),
        (1, -1, 3, (0, -1)),
        (0, -1, 3, (1, 1)),
        (0, 1, 2, (1, 1)),
        (1, 1, 2, (0, -1)),
    ],
)
def test_next_rail_bounces_between_boundaries(current, direction, depth, expected):
    assert next_rail(current, direction, depth) == expected


def test_next_rail_single_rail_stays_on_top():
    """With one rail the oscillator never moves."""
    rail, direction = 0, 1
    for _ in range(5):
        rail, direction = next_rail(rail, direction, 1)
        assert rail == 0
