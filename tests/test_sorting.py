import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sorting import (
    finish_rotation,
    init_map,
    revrotate_both,
    rotate_both,
    set_cheapest,
    set_prices,
    set_targets,
    small_sort,
    solve,
    sort_board,
    subsmall_sort,
    turk,
)
from pushswap.stacks import Board, Stack

VALID_MOVES = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def replay(values, moves):
    board = Board(values)
    for name in moves:
        getattr(board, name)()
    return board


def test_two_values():
    assert solve([2, 1]) == ["sa"]


def test_three_values_highest_on_top():
    assert solve([3, 2, 1]) == ["ra", "sa"]


def test_three_values_highest_in_middle():
    assert solve([2, 3, 1]) == ["rra"]


def test_sorted_input_needs_no_moves():
    assert solve([1, 2, 3, 4, 5, 6]) == []


def test_single_value_needs_no_moves():
    assert solve([42]) == []


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_every_three_permutation_sorted_in_two_moves(perm):
    moves = solve(perm)
    assert len(moves) <= 2
    assert replay(perm, moves).a.values() == [1, 2, 3]


@pytest.mark.parametrize("perm", list(itertools.permutations([10, 20, 30, 40, 50])))
def test_every_five_permutation_sorted_within_twelve(perm):
    moves = solve(perm)
    assert len(moves) <= 12
    board = replay(perm, moves)
    assert board.a.values() == [10, 20, 30, 40, 50]
    assert not board.b


@pytest.mark.parametrize("perm", list(itertools.permutations([4, 1, 3, 2])))
def test_every_four_permutation_sorted(perm):
    board = replay(perm, solve(perm))
    assert board.a.values() == [1, 2, 3, 4]
    assert len(board.b) == 0


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), min_size=1, max_size=60, unique=True))
def test_solve_sorts_any_distinct_values(values):
    moves = solve(values)
    assert set(moves) <= VALID_MOVES
    board = replay(values, moves)
    assert board.a.values() == sorted(values)
    assert not board.b


def test_sort_board_records_moves_on_board():
    board = Board([5, 3, 8, 1, 9, 2, 7])
    sort_board(board)
    assert board.a.values() == [1, 2, 3, 5, 7, 8, 9]
    assert board.moves == solve([5, 3, 8, 1, 9, 2, 7])


def test_set_targets_picks_next_larger_or_lowest():
    a = Stack([1, 5, 9])
    b = Stack([4, 10])
    set_targets(a, b)
    a_nodes = list(a)
    b_nodes = list(b)
    assert b_nodes[0].target is a_nodes[1]
    assert b_nodes[1].target is a_nodes[0]


def test_set_prices_zero_when_both_on_top():
    a = Stack([5, 9])
    b = Stack([4])
    a.reindex()
    b.reindex()
    set_targets(a, b)
    set_prices(a, b)
    assert b.top().push_cost == 0


def test_set_prices_requires_targets():
    a = Stack([5, 9])
    b = Stack([4])
    a.reindex()
    b.reindex()
    with pytest.raises(ValueError):
        set_prices(a, b)


def test_set_cheapest_flags_first_minimum():
    b = Stack([1, 2, 3])
    nodes = list(b)
    nodes[0].push_cost = 4
    nodes[1].push_cost = 2
    nodes[2].push_cost = 2
    set_cheapest(b)
    assert [n.cheapest for n in nodes] == [False, True, False]


def test_set_cheapest_on_empty_stack_does_nothing():
    b = Stack()
    set_cheapest(b)
    assert b.cheapest() is None


def test_init_map_flags_exactly_one_cheapest():
    a = Stack([2, 8, 6, 11])
    b = Stack([7, 1, 9, 3])
    init_map(a, b)
    flagged = [n for n in b if n.cheapest]
    assert len(flagged) == 1
    assert flagged[0].push_cost == min(n.push_cost for n in b)
    assert all(n.target is not None and n.target in list(a) for n in b)


def test_finish_rotation_brings_node_to_top_of_a():
    board = Board([1, 2, 3, 4, 5, 6])
    board.a.reindex()
    target = list(board.a)[4]
    finish_rotation(board, target, False)
    assert board.a.top() is target
    assert set(board.moves) == {"rra"}


def test_finish_rotation_on_b():
    board = Board([1, 2, 3, 4, 5])
    for _ in range(5):
        board.pb()
    board.b.reindex()
    target = list(board.b)[1]
    finish_rotation(board, target, True)
    assert board.b.top() is target
    assert board.moves[-1] == "rb"


def test_rotate_both_stops_when_one_reaches_top():
    board = Board([10, 20, 30, 40, 50, 60])
    board.pb()
    board.pb()
    board.pb()
    init_map(board.a, board.b)
    cheapest = list(board.b)[1]
    cheapest.target = list(board.a)[1]
    rotate_both(board, cheapest)
    assert board.a.top() is cheapest.target or board.b.top() is cheapest
    assert all(m == "rr" for m in board.moves[3:])


def test_revrotate_both_stops_when_one_reaches_top():
    board = Board([10, 20, 30, 40, 50, 60])
    board.pb()
    board.pb()
    board.pb()
    init_map(board.a, board.b)
    cheapest = list(board.b)[2]
    cheapest.target = list(board.a)[2]
    revrotate_both(board, cheapest)
    assert board.a.top() is cheapest.target or board.b.top() is cheapest
    assert all(m == "rrr" for m in board.moves[3:])


def test_small_sort_sorts_three():
    board = Board([1, 3, 2])
    small_sort(board)
    assert board.a.values() == [1, 2, 3]


def test_subsmall_sort_moves_lowest_values_to_b():
    board = Board([4, 2, 5, 1, 3])
    subsmall_sort(board)
    assert len(board.a) == 3
    assert sorted(board.b.values()) == [1, 2]


def test_turk_leaves_b_empty_and_a_sorted():
    board = Board([9, -3, 14, 0, 7, 2, 11, -8])
    turk(board)
    assert board.a.values() == sorted([9, -3, 14, 0, 7, 2, 11, -8])
    assert not board.b