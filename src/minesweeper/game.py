"""
Game session around a Board.

Starts a stopwatch on the first move, stops it on a win or a loss and
refuses further moves once the game is over.
"""
import logging
import time
from datetime import timedelta
from enum import Enum, auto
from typing import Callable, Optional

import numpy as np

from .board import BEGINNER, EXPERT, INTERMEDIATE, Board, BoardConfig
from .errors import GameAlreadyStoppedError
from .field import FieldInfo
from .results import FlagResult, OpenInfo, OpenResult

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameLevel(Enum):
    """Preset difficulty levels."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    EXPERT = auto()

    @property
    def config(self) -> BoardConfig:
        return _LEVEL_CONFIGS[self]


_LEVEL_CONFIGS = {
    GameLevel.BEGINNER: BEGINNER,
    GameLevel.INTERMEDIATE: INTERMEDIATE,
    GameLevel.EXPERT: EXPERT,
}


class GameState(Enum):
    """Lifecycle of a game session."""

    NOT_STARTED = auto()
    STARTED = auto()
    STOPPED = auto()


# ============================================================================
# Stopwatch
# ============================================================================

class Stopwatch:
    """Measures elapsed time between a single start and stop."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is not None and self._stopped_at is None:
            self._stopped_at = self._clock()

    @property
    def is_running(self) -> bool:
        return self._started_at is not None and self._stopped_at is None

    @property
    def elapsed(self) -> timedelta:
        """Zero before start, frozen after stop."""
        if self._started_at is None:
            return timedelta(0)
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return timedelta(seconds=end - self._started_at)


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single game session.

    Holds one Board and relays its results. Moves are rejected with
    GameAlreadyStoppedError once the game has been won or lost.
    """

    def __init__(
        self,
        level: GameLevel = GameLevel.BEGINNER,
        board: Optional[Board] = None,
        stopwatch: Optional[Stopwatch] = None,
    ) -> None:
        """
        Initialize a game session.

        Args:
            level: Difficulty level, ignored when board is given.
            board: Prepared board to play on.
            stopwatch: Stopwatch measuring the play time.
        """
        self._board = board if board is not None else Board(level.config)
        self._stopwatch = stopwatch or Stopwatch()
        self._state = GameState.NOT_STARTED
        self._won: Optional[bool] = None

    @classmethod
    def new_custom(cls, height: int, width: int, number_of_mines: int) -> "Game":
        """Create a game with custom board parameters."""
        return cls(board=Board.new(height, width, number_of_mines))

    @classmethod
    def from_board(cls, board: Board) -> "Game":
        return cls(board=board)

    # ========================================================================
    # State Handling
    # ========================================================================

    def _start_game_if_needed(self) -> None:
        if self._state is GameState.STOPPED:
            raise GameAlreadyStoppedError()
        if self._state is GameState.NOT_STARTED:
            self._stopwatch.start()
            self._state = GameState.STARTED

    def _stop_game(self, won: bool) -> None:
        self._stopwatch.stop()
        self._state = GameState.STOPPED
        self._won = won
        logger.info(
            "Game %s after %.1f seconds",
            "won" if won else "lost",
            self.elapsed.total_seconds(),
        )

    def _execute_open(self, open_func: Callable[[Board], OpenInfo]) -> OpenInfo:
        self._start_game_if_needed()

        open_info = open_func(self._board)
        if open_info.result is OpenResult.WINNER:
            self._stop_game(won=True)
        elif open_info.result is OpenResult.BOOM:
            self._stop_game(won=False)
        return open_info

    # ========================================================================
    # Moves
    # ========================================================================

    def open(self, row: int, col: int) -> OpenInfo:
        """Open a cell, see Board.open_field."""
        return self._execute_open(lambda board: board.open_field(row, col))

    def open_neighbors(self, row: int, col: int) -> OpenInfo:
        """Chord around an opened cell, see Board.open_neighbors."""
        return self._execute_open(lambda board: board.open_neighbors(row, col))

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        self._start_game_if_needed()
        return self._board.toggle_flag(row, col)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def won(self) -> Optional[bool]:
        """True/False once stopped, None while the game is running."""
        return self._won

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def elapsed(self) -> timedelta:
        return self._stopwatch.elapsed

    def get_field_info(self, row: int, col: int) -> FieldInfo:
        return self._board.get_field_info(row, col)

    def get_observation(self) -> np.ndarray:
        return self._board.get_observation()
