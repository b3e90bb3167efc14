from __future__ import annotations

import random

import pytest

from termsnake.state import Board


@pytest.fixture
def board():
    # 5x5 interior, center (3, 3)
    return Board(7, 7)


@pytest.fixture
def rng():
    return random.Random(1234)
