"""
Cell module for the Minesweeper engine.

Represents a single board position: its content (FieldType) and what
the player has done to it (FieldState).
"""
from dataclasses import dataclass, field
from enum import Enum, auto

from .errors import OpenedFieldUpdateError
from .field import FieldInfo, FieldKind, FieldState, FieldType
from .results import FlagResult


# ============================================================================
# Constants
# ============================================================================

class CellOpenResult(Enum):
    """Outcome of opening a single cell."""

    ALREADY_OPENED = auto()
    IS_FLAGGED = auto()
    SIMPLE_OPEN = auto()
    MULTI_OPEN = auto()
    BOOM = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        field_type: Content of the cell (empty, numbered or mine).
        state: Current state (closed, opened or flagged).
    """

    field_type: FieldType = field(default_factory=FieldType.empty)
    state: FieldState = FieldState.CLOSED

    def open(self) -> CellOpenResult:
        """
        Open this cell.

        Returns:
            IS_FLAGGED or ALREADY_OPENED without any change, otherwise
            MULTI_OPEN for an empty cell, SIMPLE_OPEN for a numbered one
            and BOOM for a mine.
        """
        if self.state is FieldState.FLAGGED:
            return CellOpenResult.IS_FLAGGED
        if self.state is FieldState.OPENED:
            return CellOpenResult.ALREADY_OPENED

        self.state = FieldState.OPENED
        return self._open_result()

    def _open_result(self) -> CellOpenResult:
        kind = self.field_type.kind
        if kind is FieldKind.EMPTY:
            return CellOpenResult.MULTI_OPEN
        if kind is FieldKind.NUMBERED:
            return CellOpenResult.SIMPLE_OPEN
        return CellOpenResult.BOOM

    def toggle_flag(self) -> FlagResult:
        """
        Toggle flag on this cell.

        Returns:
            FLAGGED or FLAG_REMOVED, ALREADY_OPENED if the cell is opened.
        """
        if self.state is FieldState.FLAGGED:
            self.state = FieldState.CLOSED
            return FlagResult.FLAG_REMOVED
        if self.state is FieldState.OPENED:
            return FlagResult.ALREADY_OPENED
        self.state = FieldState.FLAGGED
        return FlagResult.FLAGGED

    # ========================================================================
    # Type Updates
    # ========================================================================

    def update_type_to_mine(self) -> None:
        self._update_type(FieldType.mine())

    def update_type_to_empty(self) -> None:
        self._update_type(FieldType.empty())

    def update_type_with_value(self, value: int) -> None:
        """
        Turn this cell into a numbered cell.

        Raises:
            InvalidValueError: If value is outside 1-8.
            OpenedFieldUpdateError: If the cell is already opened.
        """
        self._update_type(FieldType.numbered(value))

    def _update_type(self, field_type: FieldType) -> None:
        # Revealed information never changes afterwards
        if self.state is FieldState.OPENED:
            raise OpenedFieldUpdateError("An opened field can not be updated")
        self.field_type = field_type

    # ========================================================================
    # Views
    # ========================================================================

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed."""
        return self.state is FieldState.CLOSED

    @property
    def is_opened(self) -> bool:
        """Check if cell is opened."""
        return self.state is FieldState.OPENED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state is FieldState.FLAGGED

    @property
    def is_mine(self) -> bool:
        return self.field_type.is_mine

    def public_info(self) -> FieldInfo:
        """Field info with the type hidden unless the cell is opened."""
        if self.state is FieldState.OPENED:
            return FieldInfo(self.state, self.field_type)
        return FieldInfo(self.state, FieldType.empty())

    @property
    def char_repr(self) -> str:
        if self.state is FieldState.FLAGGED:
            return "H"
        if self.state is FieldState.CLOSED:
            return "O"
        return self.field_type.char_repr

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
            9: Opened mine
        """
        if self.state is FieldState.CLOSED:
            return -1
        if self.state is FieldState.FLAGGED:
            return -2
        return self.field_type.to_observation()
