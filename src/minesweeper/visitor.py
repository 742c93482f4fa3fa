"""
Frontier visitor for flood fill and nearest-field searches.

Keeps an explicit work-list instead of recursing, so large empty
regions can not exhaust the call stack.
"""
from typing import Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

from .errors import InvalidIndexError
from .geometry import is_valid_position, neighbor_fields

Coordinate = Tuple[int, int]


class FrontierVisitor:
    """
    Work-list of coordinates to visit plus the set of visited ones.

    Coordinates to visit are kept in insertion order (dict keys) and
    handed out most-recently-added first. A visited coordinate is never
    added again, so every coordinate is processed at most once.
    """

    def __init__(self, height: int, width: int, row: int, col: int) -> None:
        """
        Seed the visitor with a starting coordinate.

        Raises:
            InvalidIndexError: If (row, col) is outside the board.
        """
        if not is_valid_position(height, width, row, col):
            raise InvalidIndexError(row, col)
        self._height = height
        self._width = width
        self._to_visit: Dict[Coordinate, None] = {(row, col): None}
        self._visited: Set[Coordinate] = set()

    def next(self) -> Optional[Coordinate]:
        """Take the next coordinate and mark it visited, None when done."""
        if not self._to_visit:
            return None
        coordinate, _ = self._to_visit.popitem()
        self._visited.add(coordinate)
        return coordinate

    def __iter__(self) -> Iterator[Coordinate]:
        coordinate = self.next()
        while coordinate is not None:
            yield coordinate
            coordinate = self.next()

    def _unvisited_neighbors(self, row: int, col: int) -> List[Coordinate]:
        neighbors = neighbor_fields(self._height, self._width, row, col)
        return sorted(neighbors - self._visited)

    def extend_with_unvisited_neighbors(self, row: int, col: int) -> None:
        """Queue every neighbor of (row, col) that was not visited yet."""
        for coordinate in self._unvisited_neighbors(row, col):
            self._to_visit.setdefault(coordinate, None)

    def replace_with_unvisited_neighbors(self, row: int, col: int) -> None:
        """Drop everything queued and queue the unvisited neighbors instead."""
        self._to_visit = dict.fromkeys(self._unvisited_neighbors(row, col))

    @property
    def pending(self) -> List[Coordinate]:
        """Queued coordinates in insertion order."""
        return list(self._to_visit)

    @property
    def visited(self) -> FrozenSet[Coordinate]:
        return frozenset(self._visited)
