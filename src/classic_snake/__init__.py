"""Classic grid Snake: a tick engine plus a small pygame front end."""

from .engine import Collision, GameState, Phase, TickEngine, TickResult

__version__ = "0.1.0"

__all__ = ["Collision", "GameState", "Phase", "TickEngine", "TickResult"]
