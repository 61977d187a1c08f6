# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudokugen" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudokugen.game_matrix import GameMatrix  # noqa: E402

SOLVED_ROWS = (
    "123456789",
    "456789123",
    "789123456",
    "214365897",
    "365897214",
    "897214365",
    "531642978",
    "642978531",
    "978531642",
)

# well known riddle with a single solution
RIDDLE_ROWS = (
    "530070000",
    "600195000",
    "098000060",
    "800060003",
    "400803001",
    "700020006",
    "060000280",
    "000419005",
    "000080079",
)

RIDDLE_SOLUTION_ROWS = (
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
)


@pytest.fixture
def solved() -> GameMatrix:
    return GameMatrix.from_rows(*SOLVED_ROWS)


@pytest.fixture
def riddle() -> GameMatrix:
    return GameMatrix.from_rows(*RIDDLE_ROWS)


@pytest.fixture
def riddle_solution() -> GameMatrix:
    return GameMatrix.from_rows(*RIDDLE_SOLUTION_ROWS)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(4711)
