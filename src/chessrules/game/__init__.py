"""Game layer: sequential game driver on top of the rules engine."""

from chessrules.game.state import GamePhase, GameState, MoveRecord

__all__ = ["GamePhase", "GameState", "MoveRecord"]
