"""
Result values returned by board operations.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Tuple

from .field import FieldType

Coordinate = Tuple[int, int]


class OpenResult(Enum):
    """Outcome of an open or chord call."""

    OK = auto()
    IS_FLAGGED = auto()
    BOOM = auto()
    WINNER = auto()


class FlagResult(Enum):
    """Outcome of a flag toggle."""

    FLAGGED = auto()
    FLAG_REMOVED = auto()
    ALREADY_OPENED = auto()


@dataclass
class OpenInfo:
    """
    Result of an open or chord call.

    Attributes:
        result: What happened.
        newly_opened_fields: Type of every field that became visible.
            Holds the whole board on BOOM and also the mines on WINNER.
    """

    result: OpenResult = OpenResult.OK
    newly_opened_fields: Dict[Coordinate, FieldType] = field(default_factory=dict)

    @property
    def is_game_over(self) -> bool:
        """Check if the call ended the game."""
        return self.result in (OpenResult.BOOM, OpenResult.WINNER)
