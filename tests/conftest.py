"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import FrozenSet, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, FieldState, FieldType


# ============================================================================
# Reference Board
# ============================================================================

#     0 1 2 3 4 5
#     - - - - - -
# 0 | . . 1 M 1 .
# 1 | . 1 2 2 1 .
# 2 | 1 2 M 2 1 .
# 3 | M 3 3 M 1 .
# 4 | 2 M 2 1 1 .
REFERENCE_HEIGHT = 5
REFERENCE_WIDTH = 6
REFERENCE_MINES: FrozenSet[Tuple[int, int]] = frozenset(
    {(0, 3), (3, 0), (3, 3), (2, 2), (4, 1)}
)

_E = FieldType.empty()
_M = FieldType.mine()


def _n(value: int) -> FieldType:
    return FieldType.numbered(value)


REFERENCE_FIELDS: List[List[FieldType]] = [
    [_E, _E, _n(1), _M, _n(1), _E],
    [_E, _n(1), _n(2), _n(2), _n(1), _E],
    [_n(1), _n(2), _M, _n(2), _n(1), _E],
    [_M, _n(3), _n(3), _M, _n(1), _E],
    [_n(2), _M, _n(2), _n(1), _n(1), _E],
]


@pytest.fixture
def reference_board() -> Board:
    """Create the 5x6 board with fixed mines."""
    return Board.with_custom_mines(REFERENCE_HEIGHT, REFERENCE_WIDTH, REFERENCE_MINES)


@pytest.fixture
def reference_fields() -> List[List[FieldType]]:
    """Expected field types of the reference board."""
    return REFERENCE_FIELDS


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible boards."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a default 10x10 board with 10 mines."""
    return Board(rng=rng)


@pytest.fixture
def single_safe_board() -> Board:
    """Create a 3x3 board where only the corner (0, 0) is free."""
    mines = {(r, c) for r in range(3) for c in range(3)} - {(0, 0)}
    return Board.with_custom_mines(3, 3, mines)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(FieldType.mine())


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a closed cell with three adjacent mines."""
    return Cell(FieldType.numbered(3))


@pytest.fixture
def opened_cell() -> Cell:
    """Create an opened numbered cell."""
    return Cell(FieldType.numbered(2), FieldState.OPENED)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
