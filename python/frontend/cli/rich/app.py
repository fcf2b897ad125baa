"""Rich terminal frontend — styled grid with a keyboard cursor as pointer.

The cursor stands in for the mouse: moving it onto a tile previews the run
that would slide, and Enter/Space clicks it.  While the board is shuffling
the key-poll timeout doubles as the shuffle tick.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import SHUFFLE_TICK_MS
from backend.engine.gamestate import GameSession
from backend.models.board import Board
from frontend.cli.input_handler import get_key_timeout

console = Console()

_CURSOR_STEPS = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


# -- board rendering ----------------------------------------------------------


def _render_board(
    board: Board,
    highlighted: frozenset[int],
    cursor: tuple[int, int] | None,
) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            style = "bold white"
            if val == 0:
                text, style = "·", "dim"
            else:
                text = f"{val:>{width}}"
                if val in highlighted:
                    style = "bold black on yellow"
            if (r, c) == cursor:
                style += " underline reverse"
            cells.append(f"[{style}]{text}[/]")
        table.add_row(*cells)

    return table


def _draw(session: GameSession, cursor: tuple[int, int], status: str = "") -> None:
    console.clear()

    size = session.size
    shuffling = not session.is_accepting()
    board_table = _render_board(
        session.board,
        session.game.highlighted,
        None if shuffling else cursor,
    )

    info = Text()
    if shuffling and session.shuffle is not None:
        info.append("  Shuffling… ", style="bold magenta")
        info.append(
            f"{session.shuffle.steps_taken}/{session.shuffle.total_steps}",
            style="dim",
        )
    else:
        info.append("  Moves: ", style="dim")
        info.append(str(session.moves), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    border = "magenta" if shuffling else "bright_blue"
    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    parts = [Align.center(panel), Align.center(info)]
    if status:
        parts.append(Align.center(Text.from_markup(f"  {status}")))
    parts.append(Align.center(controls))

    console.print()
    console.print(Group(*parts))


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession) -> None:
    size = session.size
    cursor = (size - 1, size - 1)
    session.start_game()
    status = ""
    dirty = True

    while True:
        if dirty:
            _draw(session, cursor, status)
            dirty = False

        if not session.is_accepting():
            # Shuffle animation: one step per poll timeout.
            key = get_key_timeout(SHUFFLE_TICK_MS / 1000)
            if key is None:
                session.tick()
                dirty = True
                if session.is_accepting():
                    session.on_cell_enter(*cursor)
                continue
        else:
            key = get_key_timeout(0.5)
            if key is None:
                continue

        status = ""
        dirty = True
        if key in _CURSOR_STEPS:
            dr, dc = _CURSOR_STEPS[key]
            cursor = (
                min(size - 1, max(0, cursor[0] + dr)),
                min(size - 1, max(0, cursor[1] + dc)),
            )
            session.on_pointer_leave()
            session.on_cell_enter(*cursor)
        elif key == "enter":
            if not session.on_cell_click(*cursor) and session.is_accepting():
                status = "[dim]That tile can't slide.[/dim]"
            session.on_cell_enter(*cursor)
        elif key == "restart":
            session.start_game()
            status = "[magenta]Reshuffling…[/magenta]"
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(size: int = 4, seed: int | None = None) -> None:
    """Launch the Rich CLI."""
    _play(GameSession(size, rng=random.Random(seed)))
