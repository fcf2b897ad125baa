"""Board model tests — construction, lookups, and run computation."""

from __future__ import annotations

import pytest

from backend.models.board import BLANK, Board, Tile


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 8])
def test_solved_is_row_major_with_blank_last(size: int) -> None:
    board = Board.solved(size)

    expected = list(range(1, size * size)) + [BLANK]
    assert [v for row in board.rows() for v in row] == expected
    assert board.blank.position == (size - 1, size - 1)
    assert board.is_solved()
    board.check_invariants()


def test_from_flat_places_blank() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])

    assert board.blank.position == (2, 1)
    assert board.tile(8).position == (2, 2)
    assert not board.is_solved()


@pytest.mark.parametrize(
    "size, flat",
    [
        (3, [1, 2, 3, 4, 5, 6, 7, 8]),           # too short
        (3, [1, 2, 3, 4, 5, 6, 7, 8, 8]),        # duplicate, no blank
        (3, [1, 2, 3, 4, 5, 6, 7, 8, 9]),        # out of range
        (1, [0]),                                # degenerate grid
    ],
)
def test_from_flat_rejects_bad_layouts(size: int, flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(size, flat)


def test_tiles_sharing_a_cell_are_rejected() -> None:
    tiles = [Tile(0, 0, 0), Tile(1, 0, 0), Tile(2, 1, 0), Tile(3, 1, 1)]
    with pytest.raises(ValueError):
        Board(2, tiles)


def test_copy_is_independent() -> None:
    board = Board.solved(3)
    clone = board.copy()

    clone.place(clone.tile(8), 0, 0)

    assert board.snapshot() == Board.solved(3).snapshot()
    assert clone.tile(8) is not board.tile(8)


# -- lookups ------------------------------------------------------------------


def test_lookups_agree() -> None:
    board = Board.solved(4)
    for tile in board:
        assert board.tile(tile.value) is tile
        assert board.tile_at(*board.position_of(tile)) is tile
        assert tile in board


def test_unknown_lookups_return_none() -> None:
    board = Board.solved(3)

    assert board.tile(99) is None
    assert board.tile_at(3, 0) is None
    assert board.tile_at(-1, 0) is None
    assert Tile(5, 1, 1) not in board


# -- runs ---------------------------------------------------------------------


def test_run_is_ordered_from_blank_outward() -> None:
    board = Board.solved(4)  # blank at (3, 3)

    run = board.tiles_in_line(board.tile(13))  # (3, 0)

    assert [t.value for t in run] == [15, 14, 13]


def test_run_along_column() -> None:
    board = Board.solved(4)

    run = board.tiles_in_line(board.tile(8))  # (1, 3)

    assert [t.value for t in run] == [12, 8]


@pytest.mark.parametrize("value", [1, 6, 11, BLANK])
def test_run_is_empty_off_the_cross(value: int) -> None:
    board = Board.solved(4)

    assert board.tiles_in_line(board.tile(value)) == []


def test_run_ignores_tiles_from_another_board() -> None:
    board = Board.solved(3)
    other = Board.solved(3)

    # Tile 8 of the other board lines up with this board's blank.
    assert board.tiles_in_line(other.tile(8)) == []
    assert board.tiles_in_line(board.tile(8), other.blank) == []


def test_run_against_explicit_blank() -> None:
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, 8])

    run = board.tiles_in_line(board.tile(7), board.blank)

    assert [t.value for t in run] == [4, 7]


def test_is_aligned_excludes_blank() -> None:
    board = Board.solved(3)

    assert board.is_aligned(board.tile(7))
    assert board.is_aligned(board.tile(3))
    assert not board.is_aligned(board.tile(5))
    assert not board.is_aligned(board.blank)


def test_cross_tiles() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])

    assert sorted(t.value for t in board.cross_tiles()) == [2, 4, 5, 7]


# -- invariants ---------------------------------------------------------------


def test_check_invariants_detects_overlap() -> None:
    board = Board.solved(3)
    # Bypass the engine and stack two tiles on one cell.
    board.place(board.tile(1), 0, 1)

    with pytest.raises(ValueError, match="share a cell"):
        board.check_invariants()


def test_check_invariants_detects_stale_blank_reference() -> None:
    board = Board.solved(3)
    board.blank = board.tile(8)

    with pytest.raises(ValueError, match="Blank reference"):
        board.check_invariants()


def test_render_text() -> None:
    board = Board.solved(3)

    assert board.render_text() == "1 2 3\n4 5 6\n7 8 ·"
