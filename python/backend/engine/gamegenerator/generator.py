"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from typing import Callable

from backend.engine.gameplay.game import GamePlay
from backend.models.board import Board

logger = logging.getLogger(__name__)

SHUFFLE_TICK_MS = 25
MIN_SHUFFLE_STEPS = 50
SHUFFLE_STEP_SPREAD = 100


class ShuffleTask:
    """A bounded run of random slides, advanced one step per :meth:`tick`.

    Whoever owns the timer calls ``tick()`` every ``SHUFFLE_TICK_MS``.  After
    the last step the done-callbacks fire once.  A cancelled task stops
    stepping and never fires them.
    """

    def __init__(self, game: GamePlay, total_steps: int, rng: random.Random) -> None:
        self.game = game
        self.total_steps = total_steps
        self.steps_taken = 0
        self._rng = rng
        self._callbacks: list[Callable[[ShuffleTask], None]] = []
        self._done = False
        self._cancelled = False

    @property
    def done(self) -> bool:
        return self._done

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not (self._done or self._cancelled)

    def add_done_callback(self, fn: Callable[[ShuffleTask], None]) -> None:
        """Call *fn* on completion, or right away if already complete."""
        if self._done:
            fn(self)
        elif not self._cancelled:
            self._callbacks.append(fn)

    def tick(self) -> bool:
        """Perform one shuffle step.  Returns False once the task is idle."""
        if not self.active:
            return False

        candidates = self.game.board.cross_tiles()
        self.game.attempt_move(self._rng.choice(candidates))
        self.steps_taken += 1

        if self.steps_taken >= self.total_steps:
            self._finish()
        return True

    def run(self) -> None:
        """Drain the remaining steps synchronously."""
        while self.tick():
            pass

    def cancel(self) -> bool:
        """Stop the task.  Returns False if it had already finished."""
        if not self.active:
            return False
        self._cancelled = True
        self._callbacks.clear()
        logger.debug("Shuffle cancelled after %d/%d steps",
                     self.steps_taken, self.total_steps)
        return True

    def _finish(self) -> None:
        self._done = True
        logger.debug("Shuffle finished after %d steps", self.steps_taken)
        callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            fn(self)


class ShuffleGenerator:
    """Creates solvable puzzles by sliding from the solved state."""

    @staticmethod
    def step_count(rng: random.Random) -> int:
        """Number of shuffle steps, uniform over [50, 149]."""
        return MIN_SHUFFLE_STEPS + int(SHUFFLE_STEP_SPREAD * rng.random())

    @staticmethod
    def shuffle(game: GamePlay, rng: random.Random | None = None) -> ShuffleTask:
        """Return a fresh task that will scramble *game*'s board when ticked."""
        rng = rng or random.Random()
        steps = ShuffleGenerator.step_count(rng)
        logger.debug("Shuffling %d×%d board in %d steps",
                     game.size, game.size, steps)
        return ShuffleTask(game, steps, rng)

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a scrambled, solvable board of the given size."""
        board = Board.solved(size)
        ShuffleGenerator.shuffle(GamePlay(board), rng).run()
        return board
