"""
Unit tests for the Game session wrapper and Stopwatch.
"""
import logging
from datetime import timedelta

import pytest

from minesweeper import (
    Board,
    FieldInfo,
    FieldState,
    FieldType,
    FlagResult,
    Game,
    GameAlreadyStoppedError,
    GameLevel,
    GameState,
    InvalidIndexError,
    OpenResult,
    Stopwatch,
)


class FakeClock:
    """Manually advanced clock for stopwatch tests."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(100.0)


@pytest.fixture
def reference_game(reference_board: Board) -> Game:
    """Game on the 5x6 reference board."""
    return Game.from_board(reference_board)


# ============================================================================
# Stopwatch Tests
# ============================================================================

class TestStopwatch:
    """Test elapsed time measurement."""

    def test_zero_before_start(self, clock: FakeClock) -> None:
        stopwatch = Stopwatch(clock)
        clock.now = 150.0
        assert stopwatch.elapsed == timedelta(0)
        assert stopwatch.is_running is False

    def test_running_elapsed(self, clock: FakeClock) -> None:
        stopwatch = Stopwatch(clock)
        stopwatch.start()
        clock.now = 102.5
        assert stopwatch.elapsed == timedelta(seconds=2.5)
        assert stopwatch.is_running is True

    def test_frozen_after_stop(self, clock: FakeClock) -> None:
        stopwatch = Stopwatch(clock)
        stopwatch.start()
        clock.now = 104.0
        stopwatch.stop()
        clock.now = 200.0
        assert stopwatch.elapsed == timedelta(seconds=4)

    def test_second_start_and_stop_are_ignored(self, clock: FakeClock) -> None:
        stopwatch = Stopwatch(clock)
        stopwatch.start()
        clock.now = 101.0
        stopwatch.start()
        clock.now = 103.0
        stopwatch.stop()
        clock.now = 110.0
        stopwatch.stop()
        assert stopwatch.elapsed == timedelta(seconds=3)


# ============================================================================
# Game Creation Tests
# ============================================================================

class TestGameCreation:
    """Test game construction."""

    @pytest.mark.parametrize(
        "level,height,width",
        [
            (GameLevel.BEGINNER, 10, 10),
            (GameLevel.INTERMEDIATE, 16, 16),
            (GameLevel.EXPERT, 16, 30),
        ],
    )
    def test_level_sizes(self, level: GameLevel, height: int, width: int) -> None:
        game = Game(level)
        assert game.height == height
        assert game.width == width

    def test_custom_size(self) -> None:
        game = Game.new_custom(5, 10, 15)
        assert game.height == 5
        assert game.width == 10

    def test_new_game_is_not_started(self, reference_game: Game) -> None:
        assert reference_game.state is GameState.NOT_STARTED
        assert reference_game.won is None
        assert reference_game.elapsed == timedelta(0)


# ============================================================================
# Game Flow Tests
# ============================================================================

class TestGameFlow:
    """Test the start/stop gate around board calls."""

    def test_first_move_starts_game(self, reference_game: Game) -> None:
        reference_game.open(1, 0)
        assert reference_game.state is GameState.STARTED

    def test_flag_starts_game(self, reference_game: Game) -> None:
        assert reference_game.toggle_flag(0, 0) is FlagResult.FLAGGED
        assert reference_game.state is GameState.STARTED

    def test_winning_stops_game(self) -> None:
        game = Game.new_custom(10, 10, 99)
        open_info = game.open(0, 0)
        assert open_info.result is OpenResult.WINNER
        assert game.state is GameState.STOPPED
        assert game.won is True
        with pytest.raises(GameAlreadyStoppedError):
            game.open(9, 9)
        with pytest.raises(GameAlreadyStoppedError):
            game.toggle_flag(9, 9)

    def test_boom_stops_game(self, reference_game: Game) -> None:
        assert reference_game.open(0, 0).result is OpenResult.OK
        open_info = reference_game.open(0, 3)
        assert open_info.result is OpenResult.BOOM
        assert len(open_info.newly_opened_fields) == 30
        assert reference_game.won is False
        with pytest.raises(GameAlreadyStoppedError):
            reference_game.open(1, 0)
        with pytest.raises(GameAlreadyStoppedError):
            reference_game.open_neighbors(1, 1)
        with pytest.raises(GameAlreadyStoppedError):
            reference_game.toggle_flag(1, 0)

    def test_toggle(self) -> None:
        game = Game.new_custom(10, 10, 98)
        assert game.toggle_flag(0, 0) is FlagResult.FLAGGED
        assert game.toggle_flag(0, 0) is FlagResult.FLAG_REMOVED
        assert game.open(0, 0).result is OpenResult.OK
        assert game.toggle_flag(0, 0) is FlagResult.ALREADY_OPENED
        assert game.toggle_flag(9, 9) is FlagResult.FLAGGED
        assert game.toggle_flag(9, 9) is FlagResult.FLAG_REMOVED

    def test_open_neighbors_is_relayed(self, reference_game: Game) -> None:
        reference_game.toggle_flag(0, 3)
        reference_game.open(1, 4)
        open_info = reference_game.open_neighbors(1, 4)
        assert open_info.result is OpenResult.OK
        assert len(open_info.newly_opened_fields) == 11

    def test_get_field_info_is_relayed(self, reference_game: Game) -> None:
        reference_game.open(3, 1)
        assert reference_game.get_field_info(3, 1) == FieldInfo(
            FieldState.OPENED, FieldType.numbered(3)
        )
        assert reference_game.get_observation()[3, 1] == 3

    def test_invalid_index_is_relayed(self, reference_game: Game) -> None:
        with pytest.raises(InvalidIndexError):
            reference_game.open(5, 6)


# ============================================================================
# Elapsed Time Tests
# ============================================================================

class TestElapsed:
    """Test play time measurement through the game."""

    def test_elapsed(self, clock: FakeClock) -> None:
        board = Board.with_custom_mines(1, 3, {(0, 0)})
        game = Game(board=board, stopwatch=Stopwatch(clock))
        assert game.elapsed == timedelta(0)

        clock.now = 110.0
        assert game.open(0, 1).result is OpenResult.OK
        clock.now = 113.0
        assert game.elapsed == timedelta(seconds=3)

        clock.now = 115.0
        assert game.open(0, 2).result is OpenResult.WINNER
        clock.now = 130.0
        assert game.elapsed == timedelta(seconds=5)

    def test_result_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="minesweeper.game")
        game = Game.from_board(Board.with_custom_mines(1, 2, {(0, 0)}))
        game.open(0, 1)
        assert "Game won" in caplog.text
