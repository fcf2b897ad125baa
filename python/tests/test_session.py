"""Session controller tests — input gating and the shuffle lifecycle."""

from __future__ import annotations

import random

from backend.engine.gamestate.state import GameSession, SessionState
from backend.models.board import Board


def _playing(size: int = 3, seed: int = 0) -> GameSession:
    session = GameSession(size, rng=random.Random(seed))
    session.start_game().run()
    return session


# -- lifecycle ----------------------------------------------------------------


def test_new_session_waits_in_setup() -> None:
    session = GameSession(3)

    assert session.state is SessionState.SETUP
    assert not session.is_accepting()
    assert session.board.snapshot() == Board.solved(3).snapshot()


def test_start_game_enters_playing_after_last_tick() -> None:
    session = GameSession(3, rng=random.Random(5))
    task = session.start_game()

    for _ in range(task.total_steps - 1):
        assert session.tick()
        assert session.state is SessionState.SETUP

    assert session.tick()
    assert session.state is SessionState.PLAYING
    assert not session.tick()


def test_tick_without_game_is_idle() -> None:
    assert not GameSession(3).tick()


def test_input_ignored_while_shuffling() -> None:
    session = GameSession(3, rng=random.Random(1))
    session.start_game()
    session.tick()
    before = session.board.snapshot()
    target = session.board.cross_tiles()[0]

    assert session.on_pointer_enter(target.value) == []
    assert not session.on_pointer_click(target.value)
    session.on_pointer_leave()

    assert session.board.snapshot() == before
    assert session.game.highlighted == frozenset()


def test_restart_mid_shuffle_cancels_previous() -> None:
    session = GameSession(4, rng=random.Random(2))
    first = session.start_game()
    for _ in range(10):
        session.tick()

    second = session.start_game()

    assert first.cancelled
    assert second is session.shuffle
    assert second.steps_taken == 0
    assert second.game.board.snapshot() == Board.solved(4).snapshot()
    assert session.state is SessionState.SETUP

    second.run()
    assert session.state is SessionState.PLAYING


def test_restart_from_playing_rebuilds_from_solved() -> None:
    session = _playing()
    old_board = session.board
    session.on_pointer_click(session.board.cross_tiles()[0].value)

    session.start_game()

    assert session.board is not old_board
    assert session.board.is_solved()
    assert session.moves == 0
    assert session.state is SessionState.SETUP


def test_stale_task_completion_is_ignored() -> None:
    session = GameSession(3, rng=random.Random(3))
    first = session.start_game()
    session.start_game()

    session._on_shuffled(first)

    assert session.state is SessionState.SETUP


# -- pointer input ------------------------------------------------------------


def test_click_slides_and_counts() -> None:
    session = _playing(seed=11)
    target = session.board.cross_tiles()[0]
    origin = target.position

    assert session.on_pointer_click(target.value)

    assert session.board.blank.position == origin
    assert session.moves == 1


def test_illegal_click_is_not_counted() -> None:
    session = _playing(seed=4)
    board = session.board
    off_cross = next(
        t for t in board
        if t is not board.blank and not board.is_aligned(t)
    )
    before = board.snapshot()

    assert not session.on_pointer_click(off_cross.value)
    assert not session.on_pointer_click(board.blank.value)
    assert not session.on_pointer_click(12345)

    assert board.snapshot() == before
    assert session.moves == 0


def test_hover_previews_and_leave_clears() -> None:
    session = _playing(seed=8)
    target = session.board.cross_tiles()[0]

    run = session.on_pointer_enter(target.value)

    assert run and run[-1] is target
    assert session.game.highlighted == {t.value for t in run}

    session.on_pointer_leave()
    assert session.game.highlighted == frozenset()


def test_hover_replaces_previous_preview() -> None:
    session = _playing(seed=9)
    first, second = session.board.cross_tiles()[:2]

    session.on_pointer_enter(first.value)
    run = session.on_pointer_enter(second.value)

    assert session.game.highlighted == {t.value for t in run}


def test_cell_handlers_map_coordinates() -> None:
    session = _playing(seed=6)
    target = session.board.cross_tiles()[-1]
    row, col = target.position

    assert session.on_cell_enter(row, col)
    assert session.on_cell_click(row, col)
    assert session.board.blank.position == (row, col)


def test_cell_handlers_ignore_out_of_grid() -> None:
    session = _playing()

    assert session.on_cell_enter(-1, 0) == []
    assert not session.on_cell_click(3, 3)
