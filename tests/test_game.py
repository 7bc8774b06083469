"""Tests for the referee-side Game and MoveValidator."""

from connect4.core.board import Stone
from connect4.core.game import Game
from connect4.core.gamestate import GameState
from connect4.core.move import Move
from connect4.core.movevalidator import MoveValidator

from conftest import DRAW_BLUE_MOVES, DRAW_BOARD, DRAW_RED_MOVES


def _draw_sequence():
    moves = []
    for red, blue in zip(DRAW_RED_MOVES, DRAW_BLUE_MOVES):
        moves += [red, blue]
    return moves


class TestMoveValidator:
    def test_rejects_out_of_bounds(self):
        game = Game()
        result = MoveValidator().validate(game.board, game.state, Move(28, Stone.RED))
        assert not result.success
        assert "out of bounds" in result.error_message

    def test_rejects_wrong_turn(self):
        game = Game()
        result = MoveValidator().validate(game.board, game.state, Move(0, Stone.BLUE))
        assert not result.success
        assert result.error_message == "Not your turn."

    def test_rejects_floating_stone(self):
        game = Game()
        result = MoveValidator().validate(game.board, game.state, Move(7, Stone.RED))
        assert not result.success
        assert "supported" in result.error_message

    def test_reports_winning_move_without_mutating(self, board_from):
        board = board_from("xxx.... ooo.... ....... .......")
        before = board.copy()
        result = MoveValidator().validate(board, GameState(Stone.RED), Move(3, Stone.RED))
        assert result.success and result.is_winning_move
        assert board == before

    def test_rejects_when_game_over(self):
        state = GameState(Stone.RED, winner=Stone.BLUE)
        game = Game()
        assert not MoveValidator().validate(game.board, state, Move(0, Stone.RED)).success


class TestGame:
    def test_turns_alternate(self):
        game = Game()
        assert game.current_player == Stone.RED
        assert game.make_move(3).success
        assert game.current_player == Stone.BLUE
        assert game.last_move == 3
        assert game.move_history == [Move(3, Stone.RED)]
        assert game.can_move(10)
        assert not game.can_move(17)

    def test_failed_move_keeps_turn(self):
        game = Game()
        result = game.make_move(10)
        assert not result.success
        assert game.current_player == Stone.RED
        assert game.board.is_empty_board()

    def test_win(self):
        game = Game()
        for index in (0, 7, 1, 8, 2, 9):
            assert game.make_move(index).success
        result = game.make_move(3)
        assert result.is_winning_move
        assert game.winner == Stone.RED
        assert game.is_game_over()
        assert not game.make_move(10).success

    def test_draw(self, board_from):
        game = Game()
        results = [game.make_move(index) for index in _draw_sequence()]
        assert all(r.success for r in results)
        assert results[-1].is_draw
        assert game.is_draw
        assert game.winner is None
        assert game.board == board_from(DRAW_BOARD)

    def test_undo(self):
        game = Game()
        game.make_move(3)
        game.make_move(10)
        assert game.undo_last_move()
        assert game.current_player == Stone.BLUE
        assert game.last_move == 3
        assert game.board.is_legal_move(10)
        assert game.undo_last_move()
        assert not game.undo_last_move()

    def test_undo_clears_winner(self):
        game = Game()
        for index in (0, 7, 1, 8, 2, 9, 3):
            game.make_move(index)
        assert game.undo_last_move()
        assert game.winner is None
        assert game.current_player == Stone.RED

    def test_valid_moves(self):
        game = Game()
        game.make_move(0)
        assert game.get_valid_moves() == [7, 1, 2, 3, 4, 5, 6]

    def test_reset(self):
        game = Game()
        game.make_move(0)
        game.reset()
        assert game.board.is_empty_board()
        assert game.move_history == []
        assert game.current_player == Stone.RED
