from backend.engine.gamestate.state import GameSession, SessionState

__all__ = ["GameSession", "SessionState"]
