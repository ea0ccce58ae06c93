"""Whose turn it is. Lives on a single game (never process-wide), so several games can run side by side."""

from dataclasses import dataclass

from src.core.shared_types import Color


@dataclass
class TurnState:
    current_turn: Color = Color.BLACK
    num_moves: int = 0

    def flip(self) -> None:
        """Called exactly once per successful move. Never on a rejected one."""
        self.current_turn = self.current_turn.opponent
        self.num_moves += 1

    def is_turn_of(self, color: Color) -> bool:
        return self.current_turn == color
