"""
Minesweeper engine.

Provides the board rules (mine placement, flood-fill opening, chording,
flagging, win/lose detection) and a thin game session around them.
"""
from .errors import (
    MinesweeperError,
    BoardConfigError,
    InvalidSizeError,
    TooManyFieldsError,
    TooManyMinesError,
    TooFewMinesError,
    InvalidMineLocationsError,
    InvalidIndexError,
    InvalidValueError,
    OpenedFieldUpdateError,
    MineHasNoValueError,
    NoRelocationTargetError,
    GameAlreadyStoppedError,
)
from .field import FieldInfo, FieldKind, FieldState, FieldType
from .results import FlagResult, OpenInfo, OpenResult
from .cell import Cell, CellOpenResult
from .geometry import field_value, neighbor_fields
from .visitor import FrontierVisitor
from .board import (
    Board,
    BoardConfig,
    generate_mine_locations,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .game import Game, GameLevel, GameState, Stopwatch

__all__ = [
    "MinesweeperError",
    "BoardConfigError",
    "InvalidSizeError",
    "TooManyFieldsError",
    "TooManyMinesError",
    "TooFewMinesError",
    "InvalidMineLocationsError",
    "InvalidIndexError",
    "InvalidValueError",
    "OpenedFieldUpdateError",
    "MineHasNoValueError",
    "NoRelocationTargetError",
    "GameAlreadyStoppedError",
    "FieldInfo",
    "FieldKind",
    "FieldState",
    "FieldType",
    "FlagResult",
    "OpenInfo",
    "OpenResult",
    "Cell",
    "CellOpenResult",
    "field_value",
    "neighbor_fields",
    "FrontierVisitor",
    "Board",
    "BoardConfig",
    "generate_mine_locations",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Game",
    "GameLevel",
    "GameState",
    "Stopwatch",
]
