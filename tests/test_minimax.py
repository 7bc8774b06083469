"""Unit tests for the negamax alpha-beta engine."""

import pytest

from connect4.ai.config import DRAW_SCORE, LOSE_SCORE, WIN_SCORE
from connect4.ai.heuristics import Heuristic
from connect4.ai.minimax import NegamaxAI
from connect4.ai.movegen import MoveGenerator
from connect4.core.board import Board, Stone
from connect4.core.windetector import is_winning


def plain_negamax(board, depth, stone, gen, heuristic):
    """Reference negamax without pruning, same scoring as the engine."""
    if is_winning(board, stone.opponent()):
        return LOSE_SCORE - depth
    if is_winning(board, stone):
        return WIN_SCORE + depth
    if depth == 0:
        return heuristic.evaluate(board, stone)
    moves = gen.legal_moves(board)
    if not moves:
        return DRAW_SCORE
    best = None
    for move in moves:
        board.apply(move, stone)
        value = -plain_negamax(board, depth - 1, stone.opponent(), gen, heuristic)
        board.undo(move)
        if best is None or value > best:
            best = value
    return best


def plain_root(board, depth, stone):
    gen, heuristic = MoveGenerator(), Heuristic()
    best_move, best = None, None
    for move in gen.legal_moves(board):
        board.apply(move, stone)
        value = -plain_negamax(board, depth - 1, stone.opponent(), gen, heuristic)
        board.undo(move)
        if best is None or value > best:
            best_move, best = move, value
    return best_move, best


class TestForcedMoves:
    @pytest.mark.parametrize("depth", [1, 2, 3, 4, 6])
    def test_takes_immediate_win(self, board_from, depth):
        # RED wins at 21; BLUE threatens 22, RED must not block instead
        board = board_from("xo..... xo..... xo..... .......")
        engine = NegamaxAI(max_depth=depth)
        assert engine.choose_move(board, Stone.RED) == 21
        assert engine.last_score >= WIN_SCORE

    @pytest.mark.parametrize("depth", [1, 3, 5])
    def test_takes_immediate_win_as_blue(self, board_from, depth):
        board = board_from("xo..... xo..... xo..... .......")
        assert NegamaxAI(max_depth=depth).choose_move(board, Stone.BLUE) == 22

    @pytest.mark.parametrize("depth", [2, 3, 4, 6])
    def test_blocks_opponent_win(self, board_from, depth):
        # BLUE threatens 3 on the bottom row
        board = board_from("ooo.... xx..... x...... .......")
        assert NegamaxAI(max_depth=depth).choose_move(board, Stone.RED) == 3

    def test_depth_one_does_not_see_threats(self, board_from):
        board = board_from("ooo.... xx..... x...... .......")
        engine = NegamaxAI(max_depth=1)
        engine.choose_move(board, Stone.RED)
        assert all(abs(score) < WIN_SCORE for _, score in engine.last_scores)

    @pytest.mark.parametrize("depth", [1, 2, 4, 6])
    def test_deeper_search_keeps_a_won_position_won(self, board_from, depth):
        board = board_from("xo..... xo..... xo..... .......")
        engine = NegamaxAI(max_depth=depth)
        engine.choose_move(board, Stone.RED)
        assert engine.last_score > 0


class TestSearch:
    def test_empty_board_prefers_center(self):
        for depth in (1, 2):
            assert NegamaxAI(max_depth=depth).choose_move(Board(), Stone.RED) == 3

    def test_deterministic(self, board_from):
        board = board_from("xoxo... ox..... ....... .......")
        first = NegamaxAI(max_depth=5).choose_move(board, Stone.RED)
        second = NegamaxAI(max_depth=5).choose_move(board, Stone.RED)
        assert first == second

    def test_board_is_restored(self, board_from):
        board = board_from("xoxo... ox..... ....... .......")
        before = board.copy()
        NegamaxAI(max_depth=4).choose_move(board, Stone.RED)
        assert board == before
        assert board.stones == before.stones

    def test_full_board_has_no_move(self, board_from):
        board = board_from("xxooxxo ooxxoox xxooxxo ooxxoox")
        engine = NegamaxAI(max_depth=3)
        assert engine.choose_move(board, Stone.RED) is None
        assert engine.last_score is None

    def test_last_cell(self, board_from):
        board = board_from("xxooxxo ooxxoox xxooxxo ooxxoo.")
        assert NegamaxAI(max_depth=3).choose_move(board, Stone.RED) == 27

    def test_stats(self):
        engine = NegamaxAI(max_depth=3)
        engine.choose_move(Board(), Stone.RED)
        assert engine.nodes_explored > 0
        assert 1 <= len(engine.last_scores) <= 7
        assert engine.last_scores[0][0] == 3

    def test_depth_must_be_positive(self):
        with pytest.raises(ValueError):
            NegamaxAI(max_depth=0)


class TestPruning:
    @pytest.mark.parametrize(
        "text, stone, depth",
        [
            ("....... ....... ....... .......", Stone.RED, 4),
            ("xo.x... ....... ....... .......", Stone.BLUE, 4),
            ("xoxo... ox..... ....... .......", Stone.RED, 3),
            ("ooo.... xx..... x...... .......", Stone.RED, 4),
            (".oxxo.. ..ox... ....... .......", Stone.BLUE, 4),
        ],
    )
    def test_matches_unpruned_search(self, board_from, text, stone, depth):
        engine = NegamaxAI(max_depth=depth)
        move = engine.choose_move(board_from(text), stone)
        expected_move, expected_score = plain_root(board_from(text), depth, stone)
        assert engine.last_score == expected_score
        assert move == expected_move
