"""
Tests for treblecross.utils.factory
"""

import pytest

from treblecross.games.game_state import GameState
from treblecross.solver import solve_pruned
from treblecross.utils.factory import create_game, create_solver


class TestCreateGame:
    """create_game tests."""

    def test_returns_empty_board(self):
        game = create_game(6)
        assert isinstance(game, GameState)
        assert game.size() == 6
        assert game.amount_played() == 0

    def test_independent_instances(self):
        """Each call returns a new board."""
        a = create_game(3)
        b = create_game(3)
        a.play(0)
        assert b.can_play(0)


class TestCreateSolver:
    """create_solver tests."""

    def test_known_solver(self):
        assert create_solver("alphabeta") is solve_pruned

    def test_unknown_solver_raises(self):
        """Unknown names raise ValueError listing the choices."""
        with pytest.raises(ValueError, match="negamax"):
            create_solver("mcts")
