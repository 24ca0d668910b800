"""Game management layer — the controller that owns and commits to a position.

Quick start::

    from chessrules.core import MoveRequest, PieceType, parse_point
    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.submit(MoveRequest(PieceType.PAWN, parse_point("e4")))
    print(ctrl.outcome)
"""

from chessrules.game.controller import GameController, GameEvents

__all__ = [
    "GameController",
    "GameEvents",
]
