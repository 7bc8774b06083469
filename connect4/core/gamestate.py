from dataclasses import dataclass, field
from typing import List, Optional
from connect4.core.board import Stone
from connect4.core.move import Move

@dataclass
class GameState:
    """Represents complete game state."""
    current_player: Stone
    winner: Optional[Stone] = None
    draw: bool = False
    move_history: List[Move] = field(default_factory=list)
    last_move: Optional[int] = None

    def is_game_over(self) -> bool:
        return self.winner is not None or self.draw

    def record_move(self, move: Move) -> None:
        self.move_history.append(move)
        self.last_move = move.index

    def switch_turn(self) -> None:
        self.current_player = self.current_player.opponent()
