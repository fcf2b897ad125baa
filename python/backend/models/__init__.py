from backend.models.board import BLANK, Board, Tile

__all__ = ["BLANK", "Board", "Tile"]
