"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

BLANK = 0


@dataclass(eq=False)
class Tile:
    """A numbered tile.  ``value == BLANK`` marks the empty cell.

    Tiles compare by identity; a board owns exactly one tile per value.
    """

    value: int
    row: int
    col: int

    @property
    def is_blank(self) -> bool:
        return self.value == BLANK

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def __repr__(self) -> str:
        label = "blank" if self.is_blank else str(self.value)
        return f"Tile({label} @ {self.row},{self.col})"


class Board:
    """Represents the sliding puzzle board.

    Tiles are indexed twice: by value (stable identity) and by grid cell.
    Only :meth:`place` moves a tile, and it keeps both indexes in step.
    """

    def __init__(self, size: int, tiles: list[Tile]) -> None:
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(tiles) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(tiles)}."
            )
        self.size = size
        self._by_value: dict[int, Tile] = {}
        self._by_cell: dict[tuple[int, int], Tile] = {}
        for tile in tiles:
            if tile.value in self._by_value:
                raise ValueError(f"Duplicate tile value {tile.value}.")
            if not (0 <= tile.row < size and 0 <= tile.col < size):
                raise ValueError(f"{tile!r} lies outside the grid.")
            if tile.position in self._by_cell:
                raise ValueError(f"Two tiles share cell {tile.position}.")
            self._by_value[tile.value] = tile
            self._by_cell[tile.position] = tile
        if sorted(self._by_value) != list(range(size * size)):
            raise ValueError(f"Tile values must be exactly 0..{size * size - 1}.")
        self.blank: Tile = self._by_value[BLANK]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, size * size)) + [BLANK]
        return cls.from_flat(size, flat)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        tiles = [Tile(v, i // size, i % size) for i, v in enumerate(flat)]
        return cls(size, tiles)

    def copy(self) -> Board:
        return Board(self.size, [Tile(t.value, t.row, t.col) for t in self])

    # -- queries --------------------------------------------------------------

    def __iter__(self) -> Iterator[Tile]:
        """Iterate tiles in value order (blank first)."""
        return (self._by_value[v] for v in range(self.size * self.size))

    def __len__(self) -> int:
        return self.size * self.size

    def __contains__(self, tile: object) -> bool:
        return (
            isinstance(tile, Tile)
            and self._by_value.get(tile.value) is tile
        )

    def tile(self, value: int) -> Tile | None:
        """Look a tile up by its value; ``None`` for unknown values."""
        return self._by_value.get(value)

    def tile_at(self, row: int, col: int) -> Tile | None:
        return self._by_cell.get((row, col))

    def position_of(self, tile: Tile) -> tuple[int, int]:
        return tile.row, tile.col

    def is_aligned(self, tile: Tile) -> bool:
        """True if *tile* shares exactly one of row/column with the blank."""
        blank = self.blank
        return (tile.row == blank.row) != (tile.col == blank.col)

    def tiles_in_line(self, anchor: Tile, blank: Tile | None = None) -> list[Tile]:
        """Return the run from *anchor* (inclusive) to *blank* (exclusive).

        Ordered from the tile nearest the blank out to *anchor*.  Empty when
        *anchor* is not on the blank's row or column, is the blank itself,
        or belongs to another board.
        """
        blank = blank or self.blank
        if anchor not in self or blank not in self:
            return []
        if (anchor.row == blank.row) == (anchor.col == blank.col):
            return []
        dr = _sign(anchor.row - blank.row)
        dc = _sign(anchor.col - blank.col)
        run: list[Tile] = []
        r, c = blank.row + dr, blank.col + dc
        while True:
            tile = self._by_cell[(r, c)]
            run.append(tile)
            if tile is anchor:
                return run
            r, c = r + dr, c + dc

    def cross_tiles(self) -> list[Tile]:
        """All tiles on the blank's row or column, excluding the blank."""
        br, bc = self.blank.position
        row = [self._by_cell[(br, c)] for c in range(self.size) if c != bc]
        col = [self._by_cell[(r, bc)] for r in range(self.size) if r != br]
        return row + col

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(self.is_tile_correct(t.row, t.col) for t in self)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self._by_cell[(row, col)].value
        if val == BLANK:
            return row == self.size - 1 and col == self.size - 1
        return (row, col) == divmod(val - 1, self.size)

    def snapshot(self) -> tuple[tuple[int, int, int], ...]:
        """Every tile as ``(value, row, col)``, in value order."""
        return tuple((t.value, t.row, t.col) for t in self)

    def rows(self) -> list[list[int]]:
        """Tile values as a 2D row-major list."""
        return [
            [self._by_cell[(r, c)].value for c in range(self.size)]
            for r in range(self.size)
        ]

    def render_text(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" if v != BLANK else "·" * width for v in row)
            for row in self.rows()
        )

    def check_invariants(self) -> None:
        """Raise ValueError unless the tiles cover every cell exactly once."""
        tiles = list(self._by_value.values())
        cells = {t.position for t in tiles}
        if len(cells) != len(self):
            raise ValueError("Two tiles share a cell.")
        for r, c in cells:
            if not (0 <= r < self.size and 0 <= c < self.size):
                raise ValueError(f"Tile at ({r}, {c}) lies outside the grid.")
        for t in tiles:
            if self._by_cell.get(t.position) is not t:
                raise ValueError(f"Cell index out of sync at {t.position}.")
        if self.blank.value != BLANK:
            raise ValueError(f"Blank reference points at {self.blank!r}.")

    # -- mutation -------------------------------------------------------------

    def place(self, tile: Tile, row: int, col: int) -> None:
        """Reposition *tile*; the caller keeps the bijection intact."""
        if self._by_cell.get(tile.position) is tile:
            del self._by_cell[tile.position]
        tile.row, tile.col = row, col
        self._by_cell[(row, col)] = tile


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)
