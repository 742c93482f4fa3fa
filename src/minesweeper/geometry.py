"""
Neighbor geometry helpers.

Pure functions over board dimensions and mine locations.
"""
from typing import AbstractSet, Set, Tuple

from .errors import MineHasNoValueError

Coordinate = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def is_valid_position(height: int, width: int, row: int, col: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < height and 0 <= col < width


def neighbor_fields(height: int, width: int, row: int, col: int) -> Set[Coordinate]:
    """
    Get valid neighboring positions.

    Args:
        height: Number of rows.
        width: Number of columns.
        row: Row index of center cell.
        col: Column index of center cell.

    Returns:
        Set of up to 8 (row, col) tuples, without wraparound.
    """
    neighbors = set()
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        new_row = row + delta_row
        new_col = col + delta_col
        if is_valid_position(height, width, new_row, new_col):
            neighbors.add((new_row, new_col))
    return neighbors


def field_value(
    height: int,
    width: int,
    row: int,
    col: int,
    mine_locations: AbstractSet[Coordinate],
) -> int:
    """
    Count mines adjacent to a non-mine position.

    Raises:
        MineHasNoValueError: If (row, col) is itself a mine.
    """
    if (row, col) in mine_locations:
        raise MineHasNoValueError(f"Mine at ({row}, {col}) does not have a value")
    return sum(
        1 for neighbor in neighbor_fields(height, width, row, col)
        if neighbor in mine_locations
    )
