from backend.engine.gamegenerator.generator import (
    SHUFFLE_TICK_MS,
    ShuffleGenerator,
    ShuffleTask,
)

__all__ = ["SHUFFLE_TICK_MS", "ShuffleGenerator", "ShuffleTask"]
