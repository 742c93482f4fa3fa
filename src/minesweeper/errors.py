"""
Error types for the Minesweeper engine.

Construction problems derive from BoardConfigError (and ValueError),
out-of-bounds coordinates raise InvalidIndexError (and IndexError).
Routine player outcomes such as opening a flagged cell are results,
not errors.
"""


class MinesweeperError(Exception):
    """Base class for every error raised by the engine."""


# ============================================================================
# Construction Errors
# ============================================================================

class BoardConfigError(MinesweeperError, ValueError):
    """Board could not be created with the requested parameters."""


class InvalidSizeError(BoardConfigError):
    """A board dimension is smaller than one."""

    def __init__(self, height: int, width: int) -> None:
        super().__init__(f"Board dimensions must be positive, got {height}x{width}")
        self.height = height
        self.width = width


class TooManyFieldsError(BoardConfigError):
    """The number of fields does not fit into the supported range."""

    def __init__(self, height: int, width: int) -> None:
        super().__init__(f"Too many fields: {height}x{width}")
        self.height = height
        self.width = width


class TooManyMinesError(BoardConfigError):
    """At least one field has to stay free of mines."""

    def __init__(self, number_of_mines: int, max_mines: int) -> None:
        super().__init__(
            f"Too many mines: {number_of_mines} (max {max_mines})"
        )
        self.number_of_mines = number_of_mines
        self.max_mines = max_mines


class TooFewMinesError(BoardConfigError):
    """A board needs at least one mine."""

    def __init__(self, number_of_mines: int) -> None:
        super().__init__(f"Too few mines: {number_of_mines} (min 1)")
        self.number_of_mines = number_of_mines


class InvalidMineLocationsError(BoardConfigError):
    """A custom mine location lies outside the board."""


# ============================================================================
# Per-call Errors
# ============================================================================

class InvalidIndexError(MinesweeperError, IndexError):
    """Coordinate is outside the board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Invalid index: ({row}, {col})")
        self.row = row
        self.col = col


# ============================================================================
# Internal Invariant Errors
# ============================================================================

class InvalidValueError(MinesweeperError, ValueError):
    """Numbered fields can only hold values between 1 and 8."""


class OpenedFieldUpdateError(MinesweeperError):
    """The type of an opened field can not be changed."""


class MineHasNoValueError(MinesweeperError):
    """A mine has no neighbor count."""


class NoRelocationTargetError(MinesweeperError):
    """Every field except the clicked one is a mine."""


# ============================================================================
# Session Errors
# ============================================================================

class GameAlreadyStoppedError(MinesweeperError):
    """No more moves are accepted after a win or a loss."""

    def __init__(self) -> None:
        super().__init__("Game is already stopped")
