"""
Base player interface for the game loop.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player is responsible for returning a move for the snake given the
    current game state.
    """

    def __init__(self, name: str):
        self.name = name

    def get_move(self, game_state: GameState) -> dict:
        """
        Return a move given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            Dict with at least a "direction" key holding one of
            "up", "down", "left", "right", or None when the player
            has no legal move.
        """
        raise NotImplementedError
