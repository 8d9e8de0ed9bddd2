"""
Tests for treblecross.utils.config

Tests configuration and the solver registry.
"""

import logging

import pytest

from treblecross.solver import solve, solve_pruned
from treblecross.utils.config import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_SOLVER,
    PRACTICAL_SIZE_LIMIT,
    SOLVERS,
    Config,
)


class TestSolverRegistry:
    """SOLVERS registry tests."""

    def test_contains_both_variants(self):
        assert SOLVERS["negamax"] is solve
        assert SOLVERS["alphabeta"] is solve_pruned

    def test_default_registered(self):
        assert DEFAULT_SOLVER in SOLVERS


class TestConfig:
    """Config class tests."""

    def test_default_config(self):
        """Config can be created with defaults."""
        config = Config()
        assert config.board_size == DEFAULT_BOARD_SIZE
        assert config.solver is SOLVERS[DEFAULT_SOLVER]
        assert config.human_players == [1]
        assert config.show_scores is True
        assert config.self_play is False

    def test_custom_solver(self):
        config = Config(solver="negamax")
        assert config.solver_name == "negamax"
        assert config.solver is solve

    def test_unknown_solver_raises(self):
        """Unknown solver name raises KeyError."""
        with pytest.raises(KeyError):
            Config(solver="minimax")

    def test_negative_size_raises(self):
        with pytest.raises(ValueError):
            Config(board_size=-3)

    def test_zero_size_allowed(self):
        assert Config(board_size=0).board_size == 0

    def test_self_play(self):
        """No human players means self-play."""
        config = Config(human_players=[])
        assert config.self_play is True

    def test_human_players_deduplicated(self):
        assert Config(human_players=[2, 1, 2]).human_players == [1, 2]

    def test_large_board_is_silent(self, caplog):
        """Config only records the size; new_game is the one that warns."""
        with caplog.at_level(logging.WARNING):
            Config(board_size=PRACTICAL_SIZE_LIMIT + 1)
        assert caplog.records == []
