"""Pygame GUI frontend — mouse-driven play with animated slides.

Hovering a tile previews the run that would slide, clicking slides it.
The shuffle is paced by a pygame timer event and input is ignored until
it completes.
"""

from __future__ import annotations

import random

import pygame

from backend.engine.gamegenerator import SHUFFLE_TICK_MS
from backend.engine.gamestate import GameSession
from backend.models.board import Board, Tile

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 600
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 64
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px
SLIDE_SPEED = 0.35  # fraction of remaining distance covered per frame

_SHUFFLE_TICK = pygame.USEREVENT + 1


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


# ---------------------------------------------------------------------------
# Tile sprites (board listener)
# ---------------------------------------------------------------------------
class _TileSprites:
    """Pixel positions per tile, eased toward the tile's grid cell.

    Receives the move engine's notifications, so the board itself is only
    read for the initial placement.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.tile_px = (BOARD_MAX - (size + 1) * TILE_GAP) // size
        self.total_px = size * self.tile_px + (size + 1) * TILE_GAP
        self.origin = (_cx(self.total_px) + TILE_GAP, BOARD_TOP + TILE_GAP)
        self._pos: dict[int, list[float]] = {}
        self._target: dict[int, tuple[int, int]] = {}
        self.highlighted: set[int] = set()

    def cell_xy(self, row: int, col: int) -> tuple[int, int]:
        ox, oy = self.origin
        step = self.tile_px + TILE_GAP
        return ox + col * step, oy + row * step

    def cell_at(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        ox, oy = self.origin
        step = self.tile_px + TILE_GAP
        col, dx = divmod(pos[0] - ox, step)
        row, dy = divmod(pos[1] - oy, step)
        if not (0 <= row < self.size and 0 <= col < self.size):
            return None
        if dx >= self.tile_px or dy >= self.tile_px:
            return None  # in the gap between tiles
        return row, col

    def snap(self, board: Board) -> None:
        self.highlighted.clear()
        for tile in board:
            x, y = self.cell_xy(tile.row, tile.col)
            self._pos[tile.value] = [float(x), float(y)]
            self._target[tile.value] = (x, y)

    def update(self) -> None:
        for value, (tx, ty) in self._target.items():
            p = self._pos[value]
            p[0] += (tx - p[0]) * SLIDE_SPEED
            p[1] += (ty - p[1]) * SLIDE_SPEED
            if abs(tx - p[0]) < 0.5 and abs(ty - p[1]) < 0.5:
                p[0], p[1] = tx, ty

    def rect(self, value: int) -> pygame.Rect:
        x, y = self._pos[value]
        return pygame.Rect(round(x), round(y), self.tile_px, self.tile_px)

    # -- BoardListener --------------------------------------------------------

    def notify_moved(self, tile: Tile, new_row: int, new_col: int) -> None:
        self._target[tile.value] = self.cell_xy(new_row, new_col)

    def notify_highlighted(self, tile: Tile) -> None:
        self.highlighted.add(tile.value)

    def notify_unhighlighted(self, tile: Tile) -> None:
        self.highlighted.discard(tile.value)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, size: int, seed: int | None = None) -> None:
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Sliding Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 16, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._sprites = _TileSprites(size)
        self._f_tile = pygame.font.SysFont(
            "Helvetica", max(14, self._sprites.tile_px // 3), bold=True
        )
        self._session = GameSession(size, self._sprites, random.Random(seed))
        self._hover_cell: tuple[int, int] | None = None

        btn_y = BOARD_TOP + self._sprites.total_px + 16
        self._shuffle_btn = _Btn(
            (_cx(180), btn_y, 180, 44),
            "S H U F F L E",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        self._session.start_game()
        self._sprites.snap(self._session.board)
        self._hover_cell = None
        pygame.time.set_timer(_SHUFFLE_TICK, SHUFFLE_TICK_MS)

    def _on_shuffle_tick(self) -> None:
        self._session.tick()
        if self._session.is_accepting():
            pygame.time.set_timer(_SHUFFLE_TICK, 0)
            # Hovers during the shuffle were ignored; preview the resting cell.
            self._hover_cell = None
            self._hover(pygame.mouse.get_pos())

    # ── pointer ─────────────────────────────────────────────────────────────

    def _hover(self, pos: tuple[int, int]) -> None:
        cell = self._sprites.cell_at(pos)
        if cell == self._hover_cell:
            return
        self._hover_cell = cell
        if cell is None:
            self._session.on_pointer_leave()
        else:
            self._session.on_cell_enter(*cell)

    def _click(self, pos: tuple[int, int]) -> None:
        if self._shuffle_btn.hit(pos):
            self._start_game()
            return
        cell = self._sprites.cell_at(pos)
        if cell is not None and self._session.on_cell_click(*cell):
            # The run under the pointer changed; re-preview from scratch.
            self._hover_cell = None
            self._hover(pos)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        session = self._session
        sprites = self._sprites
        sz = session.size

        if session.is_accepting():
            header = f"Sliding Puzzle  {sz}×{sz}    Moves: {session.moves}"
            header_col = COL_TEXT
        else:
            header = "Shuffling…"
            header_col = COL_PINK
        lbl = self._f_title.render(header, True, header_col)
        self._surf.blit(lbl, (_cx(lbl.get_width()), 20))

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(sprites.total_px), BOARD_TOP, sprites.total_px, sprites.total_px),
            border_radius=10,
        )

        for tile in session.board:
            if tile.is_blank:
                continue
            rect = sprites.rect(tile.value)
            if tile.value in sprites.highlighted:
                col = COL_YELLOW
            elif session.board.is_tile_correct(tile.row, tile.col):
                col = COL_GREEN
            else:
                col = COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            num = self._f_tile.render(str(tile.value), True, COL_BASE)
            self._surf.blit(
                num,
                (
                    rect.centerx - num.get_width() // 2,
                    rect.centery - num.get_height() // 2,
                ),
            )

        self._shuffle_btn.draw(self._surf)

        hint = self._f_small.render(
            "Click a tile in the blank's row or column     Esc  quit",
            True,
            COL_OVERLAY0,
        )
        self._surf.blit(hint, (_cx(hint.get_width()), self._shuffle_btn.rect.bottom + 16))

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        self._start_game()
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                elif ev.type == _SHUFFLE_TICK:
                    self._on_shuffle_tick()
                elif ev.type == pygame.MOUSEMOTION:
                    self._shuffle_btn.motion(ev.pos)
                    self._hover(ev.pos)
                elif ev.type == pygame.WINDOWLEAVE:
                    self._hover_cell = None
                    self._session.on_pointer_leave()
                elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                    self._click(ev.pos)
                elif ev.type == pygame.KEYDOWN:
                    if ev.key == pygame.K_r:
                        self._start_game()
                    elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                        running = False

            self._sprites.update()
            self._draw()
            pygame.display.flip()
            self._clock.tick(60)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 4, seed: int | None = None) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(size, seed)
    app.run_loop()
