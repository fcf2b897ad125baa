#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                     # Pygame GUI, 4×4
    python main.py -f rich -s 3        # Rich terminal, 3×3
    python main.py --seed 7 -v debug   # reproducible shuffle, debug logs
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEFAULT_SIZE = 4


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.pygame, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible starting board.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "-v", "--log-level",
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    logging.basicConfig(
        level=log_level.value.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, seed=seed)


if __name__ == "__main__":
    app()
