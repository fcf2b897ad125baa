from backend.engine.gameplay.game import BoardListener, GamePlay, NullListener

__all__ = ["BoardListener", "GamePlay", "NullListener"]
