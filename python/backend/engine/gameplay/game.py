"""Core gameplay logic — validates and applies slides, previews highlights."""

from __future__ import annotations

import logging
from typing import Protocol

from backend.models.board import Board, Tile

logger = logging.getLogger(__name__)


class BoardListener(Protocol):
    """Sink for visual updates.  Frontends implement what they need."""

    def notify_moved(self, tile: Tile, new_row: int, new_col: int) -> None: ...

    def notify_highlighted(self, tile: Tile) -> None: ...

    def notify_unhighlighted(self, tile: Tile) -> None: ...


class NullListener:
    def notify_moved(self, tile: Tile, new_row: int, new_col: int) -> None:
        pass

    def notify_highlighted(self, tile: Tile) -> None:
        pass

    def notify_unhighlighted(self, tile: Tile) -> None:
        pass


class GamePlay:
    """Move engine for a single board.

    The only writer of tile positions.  Invalid targets are ignored rather
    than reported: :meth:`attempt_move` simply returns ``False``.
    """

    def __init__(self, board: Board, listener: BoardListener | None = None) -> None:
        self.board = board
        self.listener: BoardListener = listener or NullListener()
        self._highlighted: set[int] = set()

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def highlighted(self) -> frozenset[int]:
        """Values of the tiles currently previewed as a run."""
        return frozenset(self._highlighted)

    # -- movement -------------------------------------------------------------

    def movable_run(self, target: Tile | None) -> list[Tile]:
        """Tiles that would slide if *target* were clicked (may be empty)."""
        if target is None or target not in self.board:
            return []
        if target is self.board.blank or not self.board.is_aligned(target):
            return []
        return self.board.tiles_in_line(target)

    def attempt_move(self, target: Tile | None) -> bool:
        """Slide *target* and every tile between it and the blank one step.

        Returns True if the board changed.
        """
        run = self.movable_run(target)
        if not run:
            return False

        board = self.board
        blank = board.blank
        anchor = run[-1]
        origin = anchor.position
        dx = _sign(blank.col - anchor.col)
        dy = _sign(blank.row - anchor.row)

        # Nearest-to-blank first so each tile lands on a cell just vacated.
        for tile in run:
            new_row, new_col = tile.row + dy, tile.col + dx
            board.place(tile, new_row, new_col)
            self.listener.notify_moved(tile, new_row, new_col)
            self._unhighlight(tile)

        board.place(blank, *origin)
        self.listener.notify_moved(blank, *origin)
        logger.debug("Slid %d tile(s) ending with %d; blank now at %s",
                     len(run), anchor.value, origin)
        return True

    # -- highlighting ---------------------------------------------------------

    def compute_highlight(self, target: Tile | None) -> list[Tile]:
        """Mark the run *target* would move, without moving anything."""
        run = self.movable_run(target)
        for tile in run:
            if tile.value not in self._highlighted:
                self._highlighted.add(tile.value)
                self.listener.notify_highlighted(tile)
        return run

    def clear_highlights(self) -> None:
        for value in sorted(self._highlighted):
            tile = self.board.tile(value)
            if tile is not None:
                self.listener.notify_unhighlighted(tile)
        self._highlighted.clear()

    def _unhighlight(self, tile: Tile) -> None:
        if tile.value in self._highlighted:
            self._highlighted.discard(tile.value)
            self.listener.notify_unhighlighted(tile)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)
