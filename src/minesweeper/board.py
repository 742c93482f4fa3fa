"""
Board module for the Minesweeper engine.

Implements mine placement, first-click mine relocation, flood-fill
opening, chording, flagging and win/lose detection.
"""
import logging
import random
from collections import deque
from dataclasses import InitVar, dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellOpenResult
from .errors import (
    InvalidIndexError,
    InvalidMineLocationsError,
    InvalidSizeError,
    NoRelocationTargetError,
    TooFewMinesError,
    TooManyFieldsError,
    TooManyMinesError,
)
from .field import FieldInfo, FieldType
from .geometry import field_value, is_valid_position, neighbor_fields
from .results import FlagResult, OpenInfo, OpenResult
from .visitor import FrontierVisitor

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Signed 64-bit limit, also keeps the remaining mine count representable
MAX_NUMBER_OF_FIELDS = 2 ** 63 - 1
MIN_NUMBER_OF_MINES = 1


def check_number_of_fields(height: int, width: int) -> None:
    """
    Ensure the board dimensions are usable.

    Raises:
        InvalidSizeError: If a dimension is smaller than one.
        TooManyFieldsError: If height * width exceeds MAX_NUMBER_OF_FIELDS.
    """
    if height < 1 or width < 1:
        raise InvalidSizeError(height, width)
    if height * width > MAX_NUMBER_OF_FIELDS:
        raise TooManyFieldsError(height, width)


def check_sizes(height: int, width: int, number_of_mines: int) -> None:
    """
    Ensure dimensions and mine count describe a playable board.

    At least one field stays free of mines and at least one mine is placed.
    """
    check_number_of_fields(height, width)
    max_mines = height * width - 1
    if number_of_mines > max_mines:
        raise TooManyMinesError(number_of_mines, max_mines)
    if number_of_mines < MIN_NUMBER_OF_MINES:
        raise TooFewMinesError(number_of_mines)


def generate_mine_locations(
    height: int,
    width: int,
    number_of_mines: int,
    rng: Optional[random.Random] = None,
) -> Set[Coordinate]:
    """
    Pick distinct mine positions uniformly at random.

    Args:
        height: Number of rows.
        width: Number of columns.
        number_of_mines: Mines to place.
        rng: Random source, the module level generator if omitted.

    Returns:
        Set of (row, col) tuples.
    """
    check_sizes(height, width, number_of_mines)
    rng = rng or random
    # Sample flat indices so huge boards do not need a position list
    indices = rng.sample(range(height * width), number_of_mines)
    return {divmod(index, width) for index in indices}


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        num_mines: Total mines to place.
    """

    height: int = 10
    width: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        check_sizes(self.height, self.width, self.num_mines)

    @property
    def number_of_fields(self) -> int:
        return self.height * self.width


# Preset difficulty levels
BEGINNER = BoardConfig(10, 10, 10)
INTERMEDIATE = BoardConfig(16, 16, 25)
EXPERT = BoardConfig(16, 30, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the mine locations. Mines are placed when
    the board is created; if the very first opened cell is a mine, that
    mine is moved to the nearest free cell.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    custom_mines: InitVar[Optional[Iterable[Coordinate]]] = None
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)
    _mine_locations: Set[Coordinate] = field(default_factory=set, init=False, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _opened_count: int = field(default=0, init=False)

    def __post_init__(self, custom_mines: Optional[Iterable[Coordinate]]) -> None:
        """Place the mines and build the grid."""
        if custom_mines is None:
            self._mine_locations = generate_mine_locations(
                self.config.height, self.config.width, self.config.num_mines, self.rng
            )
        else:
            self._mine_locations = self._validated_mines(custom_mines)
        self._init_grid()
        logger.debug(
            "Created %dx%d board with %d mines",
            self.height, self.width, len(self._mine_locations),
        )

    @classmethod
    def new(
        cls,
        height: int,
        width: int,
        number_of_mines: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create a board with randomly placed mines."""
        return cls(BoardConfig(height, width, number_of_mines), rng=rng)

    @classmethod
    def with_custom_mines(
        cls, height: int, width: int, mine_locations: Iterable[Coordinate]
    ) -> "Board":
        """Create a board with the given mine locations."""
        mines = set(mine_locations)
        return cls(BoardConfig(height, width, len(mines)), custom_mines=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _validated_mines(self, mine_locations: Iterable[Coordinate]) -> Set[Coordinate]:
        mines = set(mine_locations)
        invalid = [
            (row, col) for row, col in mines
            if not is_valid_position(self.height, self.width, row, col)
        ]
        if invalid:
            raise InvalidMineLocationsError(
                f"Mine locations outside the board: {sorted(invalid)}"
            )
        if len(mines) != self.config.num_mines:
            raise InvalidMineLocationsError(
                f"Expected {self.config.num_mines} mines, got {len(mines)}"
            )
        return mines

    def _init_grid(self) -> None:
        """Create the cells from the mine locations."""
        self._grid = [
            [Cell(self._initial_type(row, col)) for col in range(self.width)]
            for row in range(self.height)
        ]

    def _initial_type(self, row: int, col: int) -> FieldType:
        if (row, col) in self._mine_locations:
            return FieldType.mine()
        return FieldType.from_value(self._field_value(row, col))

    def _field_value(self, row: int, col: int) -> int:
        return field_value(self.height, self.width, row, col, self._mine_locations)

    def _neighbors(self, row: int, col: int) -> Set[Coordinate]:
        return neighbor_fields(self.height, self.width, row, col)

    def _cell(self, row: int, col: int) -> Cell:
        return self._grid[row][col]

    def _validate_indices(self, row: int, col: int) -> None:
        if not is_valid_position(self.height, self.width, row, col):
            raise InvalidIndexError(row, col)

    # ========================================================================
    # First Click Safety
    # ========================================================================

    def _move_mine(self, row: int, col: int) -> None:
        """
        Move the mine at (row, col) to the nearest free cell.

        The cells around both positions and the vacated position itself get
        their values recalculated afterwards.

        Raises:
            NoRelocationTargetError: If every other cell is a mine.
        """
        if not self._cell(row, col).is_mine:
            return

        new_place = self._find_nearest_free_cell(row, col)
        self._cell(*new_place).update_type_to_mine()
        self._cell(row, col).update_type_to_empty()
        self._mine_locations.remove((row, col))
        self._mine_locations.add(new_place)

        to_recalculate = self._neighbors(row, col) | self._neighbors(*new_place)
        to_recalculate.add((row, col))
        for r, c in to_recalculate:
            cell = self._cell(r, c)
            if cell.is_mine:
                continue
            value = self._field_value(r, c)
            if value == 0:
                cell.update_type_to_empty()
            else:
                cell.update_type_with_value(value)

        logger.debug("Moved mine from %s to %s", (row, col), new_place)

    def _find_nearest_free_cell(self, row: int, col: int) -> Coordinate:
        visitor = FrontierVisitor(self.height, self.width, row, col)
        # Breadth first: take the oldest queued coordinate each time
        queue = deque(visitor)
        while queue:
            r, c = queue.popleft()
            if not self._cell(r, c).is_mine:
                return r, c
            visitor.extend_with_unvisited_neighbors(r, c)
            queue.extend(visitor)
        raise NoRelocationTargetError(
            f"No free cell to move the mine at ({row}, {col}) to"
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open_field(self, row: int, col: int) -> OpenInfo:
        """
        Open a cell at the given position.

        If the cell is empty, the surrounding empty region and its numbered
        border are opened as well. On the very first open a mine under the
        cursor is moved away first.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            OpenInfo with IS_FLAGGED, OK, BOOM or WINNER.

        Raises:
            InvalidIndexError: If the position is outside the board.
        """
        self._validate_indices(row, col)

        if self._cell(row, col).is_flagged:
            return OpenInfo(OpenResult.IS_FLAGGED)

        if self._opened_count == 0 and self._cell(row, col).is_mine:
            self._move_mine(row, col)

        visitor = FrontierVisitor(self.height, self.width, row, col)
        return self._execute_open(visitor)

    def open_neighbors(self, row: int, col: int) -> OpenInfo:
        """
        Chord: open every unflagged neighbor of an opened numbered cell.

        Only acts when the number of flagged neighbors equals the cell's
        value; anything else is a no-op returning OK with no fields.

        Raises:
            InvalidIndexError: If the position is outside the board.
        """
        self._validate_indices(row, col)

        cell = self._cell(row, col)
        if not cell.is_opened or not cell.field_type.is_numbered:
            return OpenInfo()
        if self._count_flagged_neighbors(row, col) != cell.field_type.value:
            return OpenInfo()

        visitor = FrontierVisitor(self.height, self.width, row, col)
        visitor.replace_with_unvisited_neighbors(row, col)
        return self._execute_open(visitor)

    def _count_flagged_neighbors(self, row: int, col: int) -> int:
        return sum(1 for r, c in self._neighbors(row, col) if self._cell(r, c).is_flagged)

    def _execute_open(self, visitor: FrontierVisitor) -> OpenInfo:
        newly_opened: Dict[Coordinate, FieldType] = {}
        has_boomed = False

        for r, c in visitor:
            cell = self._cell(r, c)
            open_result = cell.open()
            if open_result is CellOpenResult.MULTI_OPEN:
                self._opened_count += 1
                visitor.extend_with_unvisited_neighbors(r, c)
            elif open_result is CellOpenResult.SIMPLE_OPEN:
                self._opened_count += 1
            elif open_result is CellOpenResult.BOOM:
                has_boomed = True
            else:
                continue
            newly_opened[(r, c)] = cell.field_type

        logger.debug("Opened %d fields", len(newly_opened))

        if has_boomed:
            return self._construct_boom_result()

        if self.is_won:
            for mine in self._mine_locations:
                newly_opened[mine] = FieldType.mine()
            return OpenInfo(OpenResult.WINNER, newly_opened)

        return OpenInfo(OpenResult.OK, newly_opened)

    def _construct_boom_result(self) -> OpenInfo:
        """Reveal the type of every cell on the board."""
        return OpenInfo(
            OpenResult.BOOM,
            {
                (row, col): self._grid[row][col].field_type
                for row in range(self.height)
                for col in range(self.width)
            },
        )

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """
        Toggle flag on a cell.

        Raises:
            InvalidIndexError: If the position is outside the board.
        """
        self._validate_indices(row, col)
        return self._cell(row, col).toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def number_of_mines(self) -> int:
        return len(self._mine_locations)

    @property
    def mine_locations(self) -> FrozenSet[Coordinate]:
        return frozenset(self._mine_locations)

    @property
    def opened_count(self) -> int:
        """Number of opened non-mine cells."""
        return self._opened_count

    @property
    def is_won(self) -> bool:
        """Check if all non-mine cells are opened."""
        return len(self._mine_locations) + self._opened_count == self.config.number_of_fields

    def get_field_info(self, row: int, col: int) -> FieldInfo:
        """
        Get the caller-facing view of a cell.

        Raises:
            InvalidIndexError: If the position is outside the board.
        """
        self._validate_indices(row, col)
        return self._cell(row, col).public_info()

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array where:
                -1 = closed
                -2 = flagged
                0-8 = opened with adjacent count
                9 = opened mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for row in range(self.height):
            for col in range(self.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def __str__(self) -> str:
        return "\n".join(
            "".join(cell.char_repr for cell in row) for row in self._grid
        )

