"""
Tests for treblecross.games.game_state

Tests the board: queries, moves, copying and boundary sizes.
"""

import numpy as np
import pytest

from treblecross.games.game_state import GameState


class TestInitialization:
    """Construction tests."""

    def test_initial_state(self, empty5: GameState):
        """Board starts with all cells empty."""
        assert empty5.size() == 5
        assert len(empty5) == 5
        assert empty5.amount_played() == 0
        assert not np.any(empty5.cells)
        assert empty5.is_game_over() is False

    def test_zero_size(self):
        """Size 0 is a board with no moves that is never over."""
        state = GameState(0)
        assert state.size() == 0
        assert state.amount_played() == 0
        assert state.is_game_over() is False
        assert state.empty_cells().size == 0

    def test_negative_size_raises(self):
        """Negative sizes raise ValueError."""
        with pytest.raises(ValueError):
            GameState(-1)

    @pytest.mark.parametrize("size", [2.5, "5", None, True])
    def test_non_integer_size_raises(self, size):
        """Non-integer sizes raise TypeError."""
        with pytest.raises(TypeError):
            GameState(size)

    def test_numpy_integer_size(self):
        """numpy integers are accepted as sizes."""
        assert GameState(np.int64(4)).size() == 4

    def test_from_cells_copies(self):
        """from_cells copies its input."""
        source = [True, False, False]
        state = GameState.from_cells(source)
        source[1] = True
        assert state.amount_played() == 1


class TestCanPlay:
    """can_play tests."""

    def test_empty_and_filled(self, empty5: GameState):
        """Empty cells are playable, filled cells are not."""
        empty5.play(2)
        assert empty5.can_play(1) is True
        assert empty5.can_play(2) is False

    def test_idempotent(self, two_adjacent: GameState):
        """Repeated calls agree and leave the board untouched."""
        before = two_adjacent.cells.copy()
        first = [two_adjacent.can_play(i) for i in range(5)]
        second = [two_adjacent.can_play(i) for i in range(5)]
        assert first == second
        assert np.array_equal(two_adjacent.cells, before)

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_out_of_range_raises(self, empty5: GameState, index):
        """Indices off the board raise IndexError (negatives do not wrap)."""
        with pytest.raises(IndexError):
            empty5.can_play(index)

    @pytest.mark.parametrize("index", [True, False, 1.0, "1"])
    def test_non_integer_index_raises(self, empty5: GameState, index):
        """Bools are not cell numbers, even though numpy would accept them as a mask."""
        with pytest.raises(TypeError):
            empty5.can_play(index)


class TestPlay:
    """Move application tests."""

    def test_fills_cell(self, empty5: GameState):
        """play sets the cell."""
        empty5.play(0)
        assert empty5.cells[0]
        assert empty5.amount_played() == 1

    def test_filled_cell_raises(self, empty5: GameState):
        """Playing a filled cell raises ValueError and changes nothing."""
        empty5.play(3)
        with pytest.raises(ValueError):
            empty5.play(3)
        assert empty5.amount_played() == 1

    def test_validated_skips_occupied_check(self, empty5: GameState):
        """validated=True rewrites a filled cell without complaint."""
        empty5.play(3)
        empty5.play(3, validated=True)
        assert empty5.amount_played() == 1

    @pytest.mark.parametrize("index", [-1, 5])
    def test_out_of_range_raises(self, empty5: GameState, index):
        """Out-of-range moves raise IndexError even when validated."""
        with pytest.raises(IndexError):
            empty5.play(index, validated=True)

    def test_bool_index_fills_nothing(self, empty5: GameState):
        with pytest.raises(TypeError):
            empty5.play(True, validated=True)
        assert empty5.amount_played() == 0

    def test_amount_played_tracks_moves(self, empty5: GameState):
        """amount_played counts filled cells."""
        for i, cell in enumerate([4, 0, 2]):
            empty5.play(cell)
            assert empty5.amount_played() == i + 1


class TestWinningMove:
    """is_winning_move tests."""

    def test_completes_run(self, two_adjacent: GameState):
        """Third cell after two filled ones wins; cells further away do not."""
        assert two_adjacent.is_winning_move(2)
        assert not two_adjacent.is_winning_move(3)
        assert not two_adjacent.is_winning_move(4)

    def test_both_ends(self, board):
        """A pair in the middle can be extended on either side."""
        state = board("01100")
        assert state.is_winning_move(3)
        assert state.is_winning_move(0)
        assert not state.is_winning_move(4)

    def test_gap_fill(self, board):
        """Filling the gap in X.X wins."""
        assert board("10100").is_winning_move(1)

    def test_hypothetical_only(self, two_adjacent: GameState):
        """The check does not fill the cell."""
        two_adjacent.is_winning_move(2)
        assert two_adjacent.can_play(2)
        assert two_adjacent.amount_played() == 2

    def test_out_of_range_raises(self, empty5: GameState):
        """Out-of-range checks raise IndexError."""
        with pytest.raises(IndexError):
            empty5.is_winning_move(5)


class TestGameOver:
    """is_game_over tests."""

    def test_three_in_a_row(self, empty5: GameState):
        """Three consecutive plays end the game."""
        for cell in (0, 1, 2):
            empty5.play(cell)
        assert empty5.is_game_over()

    @pytest.mark.parametrize("bits", ["11011", "10101", "01101", "00000", "11"])
    def test_no_run(self, board, bits):
        """Scattered cells do not end the game."""
        assert board(bits).is_game_over() is False

    @pytest.mark.parametrize("bits", ["00111", "1111", "0111010"])
    def test_run_anywhere(self, board, bits):
        """Runs of three or more end the game wherever they are."""
        assert board(bits).is_game_over() is True


class TestCloning:
    """Copy and mirror tests."""

    def test_copy_independent(self, two_adjacent: GameState):
        """Copies share no storage with the original."""
        clone = two_adjacent.copy()
        clone.play(4)
        assert two_adjacent.can_play(4)
        assert not clone.can_play(4)

    def test_copy_equal(self, two_adjacent: GameState):
        """A fresh copy equals its original."""
        assert two_adjacent.copy() == two_adjacent

    def test_reversed(self, board):
        """reversed mirrors the strip and is independent."""
        state = board("11000")
        mirror = state.reversed()
        assert mirror == board("00011")
        mirror.play(0)
        assert state.can_play(4)


class TestDisplay:
    """String helpers."""

    def test_state_string(self, board):
        assert board("101").state_string() == "X . X"

    def test_repr(self, board):
        assert repr(board("0110")) == "GameState('0110')"

    def test_empty_cells(self, board):
        assert board("1010").empty_cells().tolist() == [1, 3]

    def test_unhashable(self):
        """Mutable states cannot be dict keys."""
        with pytest.raises(TypeError):
            hash(GameState(3))
