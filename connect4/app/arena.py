from __future__ import annotations

import logging
from typing import Dict, Optional

from connect4.ai.player import Connect4Player
from connect4.cli.view import CliView
from connect4.core.board import Stone, SIZE, NO_MOVE
from connect4.core.game import Game
from connect4.core.windetector import winning_line

logger = logging.getLogger(__name__)


class RefereeError(RuntimeError):
    """A player broke the protocol; the game cannot continue."""


class Arena:
    """
    Referee loop.

    The arena owns the authoritative Game. Each player receives its own copy
    of the starting board and reports moves by index; every move is validated
    against the arena's board before it counts.

      - RED always moves first
      - a win ends the game immediately
      - SIZE plies without a winner is a draw
    """

    def __init__(self, view: Optional[CliView] = None) -> None:
        self.view = view
        self.game: Optional[Game] = None

    def play(self, red: Connect4Player, blue: Connect4Player) -> Optional[Connect4Player]:
        """
        Run one game.

        Returns:
            The winning player, or None for a draw.

        Raises:
            RefereeError if both sides are the same instance or a move is invalid.
        """
        if red is blue:
            raise RefereeError("must be different players (simply create two instances)")

        game = Game(starting_player=Stone.RED)
        self.game = game
        red.initialize(game.board.copy(), Stone.RED)
        blue.initialize(game.board.copy(), Stone.BLUE)
        players: Dict[Stone, Connect4Player] = {Stone.RED: red, Stone.BLUE: blue}

        last_move: Optional[int] = NO_MOVE
        for ply in range(SIZE):
            stone = game.current_player
            current = players[stone]
            self._render(game)

            last_move = current.play(last_move)
            if not isinstance(last_move, int) or isinstance(last_move, bool):
                raise RefereeError(
                    f"cannot play to position {last_move!r} @ {game.board.to_debug_string()}"
                )

            result = game.make_move(last_move)
            if not result.success:
                raise RefereeError(
                    f"cannot play to position {last_move} @ {game.board.to_debug_string()}"
                    f" ({result.error_message})"
                )
            logger.debug("ply %d: %s plays %d", ply + 1, stone, last_move)
            if self.view is not None:
                self.view.set_move(stone, last_move)

            if result.is_winning_move:
                self._render(game)
                logger.info(
                    "%s wins with %s @ %s",
                    stone, winning_line(game.board, stone), game.board.to_debug_string(),
                )
                return current
            if result.is_draw:
                break

        self._render(game)
        logger.info("draw @ %s", game.board.to_debug_string())
        return None

    def _render(self, game: Game) -> None:
        if self.view is not None:
            self.view.render(game)
