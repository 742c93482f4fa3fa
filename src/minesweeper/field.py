"""
Field value types.

FieldType describes what a cell is (empty, numbered or mine),
FieldState what the player has done to it (closed, opened or flagged).
"""
from dataclasses import dataclass
from enum import Enum, auto

from .errors import InvalidValueError


# ============================================================================
# Constants
# ============================================================================

MIN_FIELD_VALUE = 1
MAX_FIELD_VALUE = 8

# Observation value of an opened mine
MINE_OBSERVATION = 9


class FieldKind(Enum):
    """Closed set of field types."""

    EMPTY = auto()
    NUMBERED = auto()
    MINE = auto()


class FieldState(Enum):
    """What the player has done to a field."""

    CLOSED = auto()
    OPENED = auto()
    FLAGGED = auto()

    @property
    def is_opened(self) -> bool:
        """Check if the field is opened."""
        return self is FieldState.OPENED

    @property
    def is_flagged(self) -> bool:
        """Check if the field is flagged."""
        return self is FieldState.FLAGGED


# ============================================================================
# Field Type
# ============================================================================

@dataclass(frozen=True)
class FieldType:
    """
    Content of a field.

    Attributes:
        kind: Empty, numbered or mine.
        value: Number of neighboring mines for numbered fields, 0 otherwise.
    """

    kind: FieldKind
    value: int = 0

    @classmethod
    def empty(cls) -> "FieldType":
        return cls(FieldKind.EMPTY)

    @classmethod
    def mine(cls) -> "FieldType":
        return cls(FieldKind.MINE)

    @classmethod
    def numbered(cls, value: int) -> "FieldType":
        """
        Create a numbered field type.

        Args:
            value: Neighboring mine count, 1-8.

        Raises:
            InvalidValueError: If value is outside 1-8.
        """
        if not is_valid_value(value):
            raise InvalidValueError(f"Invalid value: {value}")
        return cls(FieldKind.NUMBERED, value)

    @classmethod
    def from_value(cls, value: int) -> "FieldType":
        """Empty for 0, numbered otherwise."""
        if value == 0:
            return cls.empty()
        return cls.numbered(value)

    @property
    def is_empty(self) -> bool:
        return self.kind is FieldKind.EMPTY

    @property
    def is_numbered(self) -> bool:
        return self.kind is FieldKind.NUMBERED

    @property
    def is_mine(self) -> bool:
        return self.kind is FieldKind.MINE

    @property
    def char_repr(self) -> str:
        if self.kind is FieldKind.EMPTY:
            return " "
        if self.kind is FieldKind.NUMBERED:
            return str(self.value)
        return "X"

    def to_observation(self) -> int:
        """0-8 for empty/numbered fields, 9 for a mine."""
        if self.kind is FieldKind.MINE:
            return MINE_OBSERVATION
        return self.value

    def __repr__(self) -> str:
        if self.kind is FieldKind.NUMBERED:
            return f"Numbered({self.value})"
        return self.kind.name.capitalize()


def is_valid_value(value: int) -> bool:
    """Check if value can be held by a numbered field."""
    return MIN_FIELD_VALUE <= value <= MAX_FIELD_VALUE


# ============================================================================
# Field Info
# ============================================================================

@dataclass(frozen=True)
class FieldInfo:
    """
    Caller-facing view of a field.

    The type is only reported for opened fields, closed and flagged
    fields always report an empty type.
    """

    state: FieldState
    field_type: FieldType
