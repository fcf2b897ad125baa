"""Tracks the lifecycle of a game in progress and gates player input."""

from __future__ import annotations

import enum
import logging
import random

from backend.engine.gamegenerator import ShuffleGenerator, ShuffleTask
from backend.engine.gameplay import BoardListener, GamePlay
from backend.models.board import Board, Tile

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    SETUP = "setup"
    PLAYING = "playing"


class GameSession:
    """Owns the board, the move engine and the SETUP/PLAYING state.

    Input handlers call the ``on_*`` methods; every one of them is a no-op
    unless the session is PLAYING.  A timer owned by the frontend calls
    :meth:`tick` to advance an in-flight shuffle.
    """

    def __init__(
        self,
        size: int,
        listener: BoardListener | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.size = size
        self.listener = listener
        self._rng = rng or random.Random()
        self.state = SessionState.SETUP
        self.game = GamePlay(Board.solved(size), listener)
        self.shuffle: ShuffleTask | None = None
        self.moves = 0

    @property
    def board(self) -> Board:
        return self.game.board

    def is_accepting(self) -> bool:
        return self.state is SessionState.PLAYING

    # -- lifecycle ------------------------------------------------------------

    def start_game(self) -> ShuffleTask:
        """Reset to the solved board and begin shuffling it.

        An unfinished shuffle from an earlier call is cancelled first.
        """
        if self.shuffle is not None and self.shuffle.cancel():
            logger.info("Restart requested mid-shuffle; previous shuffle dropped")

        self.state = SessionState.SETUP
        self.game.clear_highlights()
        self.game = GamePlay(Board.solved(self.size), self.listener)
        self.moves = 0

        task = ShuffleGenerator.shuffle(self.game, self._rng)
        task.add_done_callback(self._on_shuffled)
        self.shuffle = task
        logger.debug("Session entered %s", self.state.name)
        return task

    def tick(self) -> bool:
        """Advance the active shuffle by one step, if there is one."""
        if self.shuffle is None:
            return False
        return self.shuffle.tick()

    def _on_shuffled(self, task: ShuffleTask) -> None:
        if task is not self.shuffle:
            return
        self.state = SessionState.PLAYING
        logger.debug("Session entered %s", self.state.name)

    # -- pointer input --------------------------------------------------------

    def on_pointer_enter(self, cell_id: int) -> list[Tile]:
        """Preview the run for the tile with value *cell_id*."""
        if not self.is_accepting():
            return []
        self.game.clear_highlights()
        return self.game.compute_highlight(self.board.tile(cell_id))

    def on_pointer_leave(self) -> None:
        if not self.is_accepting():
            return
        self.game.clear_highlights()

    def on_pointer_click(self, cell_id: int) -> bool:
        if not self.is_accepting():
            return False
        moved = self.game.attempt_move(self.board.tile(cell_id))
        if moved:
            self.moves += 1
        return moved

    def on_cell_enter(self, row: int, col: int) -> list[Tile]:
        tile = self.board.tile_at(row, col)
        if tile is None:
            return []
        return self.on_pointer_enter(tile.value)

    def on_cell_click(self, row: int, col: int) -> bool:
        tile = self.board.tile_at(row, col)
        if tile is None:
            return False
        return self.on_pointer_click(tile.value)
