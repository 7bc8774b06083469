from __future__ import annotations

from typing import Callable, Optional

from connect4.ai.player import Strategy
from connect4.cli.commands import CommandProcessor, CommandType
from connect4.cli.view import CliView, Message, MessageType
from connect4.core.board import Board, Stone
from connect4.core.movevalidator import MoveValidator


class QuitRequested(Exception):
    """The human asked to leave the game."""


class HumanStrategy(Strategy):
    """
    Reads moves from a text console.

    Keeps asking until a playable cell is entered; the referee re-validates
    whatever comes back, so nothing typed here is trusted further.
    """

    def __init__(
        self,
        *,
        read_line: Optional[Callable[[str], str]] = None,
        view: Optional[CliView] = None,
        command_processor: Optional[CommandProcessor] = None,
        prompt: str = "> ",
    ) -> None:
        self.read_line = read_line or input
        self.view = view or CliView()
        self.cmd = command_processor or CommandProcessor()
        self.prompt = prompt

    def choose_move(self, board: Board, stone: Stone) -> Optional[int]:
        self.view.show(Message(MessageType.INFO, f"where to put the next {stone}?"))
        while True:
            try:
                line = self.read_line(self.prompt)
            except EOFError:
                raise QuitRequested("input closed") from None

            parsed = self.cmd.parse(line)
            if not parsed.ok:
                if parsed.error:
                    self.view.show(Message(MessageType.ERR, parsed.error))
                continue

            if parsed.command is not None:
                if parsed.command.type == CommandType.QUIT:
                    raise QuitRequested(parsed.command.raw)
                self.view.show(Message(MessageType.INFO, self.cmd.help_text()))
                continue

            if parsed.column is not None:
                index = board.lowest_empty(parsed.column)
                if index is None:
                    self.view.show(Message(MessageType.ERR, f"Column {parsed.column} is full."))
                    continue
            else:
                index = parsed.index

            if not MoveValidator.is_playable(board, index, stone):
                self.view.show(Message(MessageType.ERR, f"Cannot play to position {index}."))
                continue
            return index
