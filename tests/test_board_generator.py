import random
from collections import Counter

import pytest

from pairs.components.board import Board
from pairs.constants import SYMBOLS
from pairs.errors import AlphabetExhausted, BoardGenerationError, InvalidDimension
from pairs.factories.board import generate_board, pick_symbols, shuffle


class _ZeroRandom:
    """Always picks index 0 so the permutation is predictable."""

    def randint(self, a, b):
        return a


class _TopRandom:
    """Always picks the current index, leaving every element in place."""

    def randint(self, a, b):
        return b


@pytest.mark.parametrize("dimension", [2, 4, 6, 8, 10])
def test_generated_board_is_fully_paired(dimension):
    board = generate_board(dimension, rng=random.Random(dimension))
    assert board.dimension == dimension
    assert len(board) == dimension * dimension
    assert [tile.id for tile in board.tiles] == list(range(dimension * dimension))
    counts = board.symbol_counts()
    assert set(counts.values()) == {2}
    assert len(counts) == dimension * dimension // 2
    assert not any(tile.face_up or tile.matched for tile in board.tiles)


@pytest.mark.parametrize("dimension", [1, 3, 5, 0, -2])
def test_odd_or_non_positive_dimension_rejected(dimension):
    with pytest.raises(InvalidDimension):
        generate_board(dimension, rng=random.Random(0))


@pytest.mark.parametrize("dimension", ["4", 4.0, None, True])
def test_non_integer_dimension_rejected(dimension):
    with pytest.raises(InvalidDimension):
        generate_board(dimension)


def test_invalid_dimension_is_a_value_error():
    with pytest.raises(ValueError):
        generate_board(7)


def test_default_alphabet_runs_out_past_ten_by_ten():
    # 12x12 needs 72 distinct symbols, the default alphabet has 70.
    assert len(set(SYMBOLS)) == 70
    with pytest.raises(AlphabetExhausted):
        generate_board(12, rng=random.Random(0))


def test_custom_alphabet_too_small():
    with pytest.raises(AlphabetExhausted):
        generate_board(4, rng=random.Random(0), alphabet="abcdefg")


def test_custom_alphabet_exactly_large_enough():
    board = generate_board(4, rng=random.Random(3), alphabet="abcdefgh")
    assert set(board.symbol_counts()) == set("abcdefgh")


def test_pick_symbols_ignores_repeated_alphabet_entries():
    picks = pick_symbols(["x", "x", "y"], 2, random.Random(0))
    assert sorted(picks) == ["x", "y"]
    with pytest.raises(AlphabetExhausted):
        pick_symbols(["x", "x", "y"], 3, random.Random(0))


def test_shuffle_walks_from_last_index_down():
    assert shuffle(["a", "b", "c", "d"], _ZeroRandom()) == ["b", "c", "d", "a"]
    assert shuffle(["a", "b", "c", "d"], _TopRandom()) == ["a", "b", "c", "d"]


def test_shuffle_returns_a_copy():
    items = [1, 2, 3, 4, 5]
    result = shuffle(items, random.Random(9))
    assert items == [1, 2, 3, 4, 5]
    assert sorted(result) == items


def test_same_seed_same_layout():
    first = generate_board(6, rng=random.Random(42))
    second = generate_board(6, rng=random.Random(42))
    assert [t.symbol for t in first.tiles] == [t.symbol for t in second.tiles]


def test_adjacent_tiles_carry_no_pairing_information():
    # On a 4x4 board tile 1 is the partner of tile 0 with probability 1/15.
    rng = random.Random(1234)
    trials = 3000
    partners = Counter()
    for _ in range(trials):
        board = generate_board(4, rng=rng)
        first = board.tiles[0].symbol
        partner = next(t.id for t in board.tiles[1:] if t.symbol == first)
        partners[partner] += 1
    expected = trials / 15
    for position in range(1, 16):
        assert abs(partners[position] - expected) < expected * 0.4


def test_board_from_symbols():
    board = Board.from_symbols("abba")
    assert board.dimension == 2
    assert [t.symbol for t in board.tiles] == ["a", "b", "b", "a"]
    assert board.row_col(3) == (1, 1)


def test_board_from_symbols_validates_shape_and_pairing():
    with pytest.raises(InvalidDimension):
        Board.from_symbols("abcab")
    with pytest.raises(InvalidDimension):
        Board.from_symbols("aabbccdde")
    with pytest.raises(BoardGenerationError):
        Board.from_symbols("aaab")


def test_board_tile_out_of_range():
    board = Board.from_symbols("aabb")
    with pytest.raises(IndexError):
        board.tile(4)
    with pytest.raises(IndexError):
        board.tile(-1)
