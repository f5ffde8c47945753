"""The sorting strategy: small cases by hand, larger ones by cheapest insertion."""

from __future__ import annotations

from typing import Iterable

from .stacks import Board, Node, Stack


def set_targets(a: Stack, b: Stack) -> None:
    """Give each node of b the node of a it should land on top of.

    The target is the smallest value in a above the node's value, or the
    lowest node of a when no value there is larger.
    """
    for node in b:
        larger = [candidate for candidate in a if candidate.val > node.val]
        if larger:
            node.target = min(larger, key=lambda candidate: candidate.val)
        else:
            node.target = a.lowest()


def set_prices(a: Stack, b: Stack) -> None:
    """Work out how many rotations bring each node of b and its target on top."""
    len_a = len(a)
    len_b = len(b)
    for node in b:
        cost = node.index if node.above_median else len_b - node.index
        target = node.target
        if target is None:
            raise ValueError("node has no target; call set_targets first")
        cost += target.index if target.above_median else len_a - target.index
        node.push_cost = cost


def set_cheapest(b: Stack) -> None:
    """Flag the first node of b with the lowest push cost."""
    if not b:
        return
    best = min(b, key=lambda node: node.push_cost)
    best.cheapest = True


def init_map(a: Stack, b: Stack) -> None:
    """Refresh indices, targets, prices and the cheapest flag."""
    a.reindex()
    b.reindex()
    set_targets(a, b)
    set_prices(a, b)
    set_cheapest(b)


def rotate_both(board: Board, cheapest: Node) -> None:
    """Rotate both stacks together until one of the pair reaches its top."""
    while board.a.top() is not cheapest.target and board.b.top() is not cheapest:
        board.rr()
    board.a.reindex()
    board.b.reindex()


def revrotate_both(board: Board, cheapest: Node) -> None:
    """Reverse-rotate both stacks together until one of the pair reaches its top."""
    while board.a.top() is not cheapest.target and board.b.top() is not cheapest:
        board.rrr()
    board.a.reindex()
    board.b.reindex()


def finish_rotation(board: Board, top: Node, on_b: bool) -> None:
    """Rotate one stack, the short way round, until the given node is on top."""
    stack = board.b if on_b else board.a
    if on_b:
        forward, backward = board.rb, board.rrb
    else:
        forward, backward = board.ra, board.rra
    while stack.top() is not top:
        if top.above_median:
            forward()
        else:
            backward()


def small_sort(board: Board) -> None:
    """Sort three values on stack a."""
    highest = board.a.highest()
    nodes = list(board.a)
    if nodes[0] is highest:
        board.ra()
    elif nodes[1] is highest:
        board.rra()
    first, second = list(board.a)[:2]
    if first.val > second.val:
        board.sa()


def subsmall_sort(board: Board) -> None:
    """Move the lowest values to b until three remain on a."""
    while len(board.a) > 3:
        init_map(board.a, board.b)
        lowest = board.a.lowest()
        finish_rotation(board, lowest, False)
        board.pb()


def _move_cheapest(board: Board) -> None:
    cheapest = board.b.cheapest()
    if cheapest is None or cheapest.target is None:
        raise ValueError("no cheapest node on stack b")
    target = cheapest.target
    if cheapest.above_median and target.above_median:
        rotate_both(board, cheapest)
    elif not cheapest.above_median and not target.above_median:
        revrotate_both(board, cheapest)
    finish_rotation(board, cheapest, True)
    finish_rotation(board, target, False)
    board.pa()


def turk(board: Board) -> None:
    """Sort four or more values using b as a holding area."""
    count = len(board.a)
    if count == 5:
        subsmall_sort(board)
    else:
        for _ in range(count - 3):
            board.pb()
    small_sort(board)
    while board.b:
        init_map(board.a, board.b)
        _move_cheapest(board)
    board.a.reindex()
    lowest = board.a.lowest()
    if lowest is None:
        return
    step = board.ra if lowest.above_median else board.rra
    while board.a.top() is not lowest:
        step()


def sort_board(board: Board) -> None:
    """Sort stack a in ascending order unless it already is."""
    if board.a.is_sorted():
        return
    count = len(board.a)
    if count == 2:
        board.sa()
    elif count == 3:
        small_sort(board)
    else:
        turk(board)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort the given values."""
    board = Board(values)
    sort_board(board)
    return board.moves