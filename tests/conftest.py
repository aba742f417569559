import random

import pytest

from gridsnake.game import Direction, GameState


@pytest.fixture()
def make_state():
    """Build a GameState with an explicit layout and a seeded RNG."""

    def _make(snake, direction=Direction.RIGHT, food=(0, 0), width=5, height=5, seed=0):
        return GameState(
            width,
            height,
            snake=snake,
            direction=direction,
            food=food,
            rng=random.Random(seed),
        )

    return _make
