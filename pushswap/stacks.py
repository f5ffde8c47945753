"""Stack nodes, the two-stack board and the moves that act on it."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO


@dataclass(eq=False)
class Node:
    """One value on a stack, with the bookkeeping the sorter uses."""

    val: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Optional["Node"] = None


class Stack:
    """A stack of nodes whose top is its first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(v) for v in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def top(self) -> Optional[Node]:
        """The node on top, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def last(self) -> Optional[Node]:
        """The node at the bottom, or None when the stack is empty."""
        return self._nodes[-1] if self._nodes else None

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [node.val for node in self._nodes]

    def append(self, node: Node) -> None:
        """Put a node at the bottom."""
        self._nodes.append(node)

    def pop(self) -> Node:
        """Take the node off the top; IndexError when empty."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def push(self, node: Node) -> None:
        """Put a node on top."""
        self._nodes.appendleft(node)

    def swap(self) -> None:
        """Exchange the two top nodes; IndexError with fewer than two."""
        if len(self._nodes) < 2:
            raise IndexError("swap needs at least two nodes")
        first = self._nodes.popleft()
        self._nodes.insert(1, first)

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        if len(self._nodes) > 1:
            self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        if len(self._nodes) > 1:
            self._nodes.rotate(1)

    def is_sorted(self) -> bool:
        """True when values ascend from top to bottom."""
        vals = self.values()
        return all(x <= y for x, y in zip(vals, vals[1:]))

    def highest(self) -> Optional[Node]:
        """The first node holding the largest value, or None."""
        best: Optional[Node] = None
        for node in self._nodes:
            if best is None or node.val > best.val:
                best = node
        return best

    def lowest(self) -> Optional[Node]:
        """The first node holding the smallest value, or None."""
        best: Optional[Node] = None
        for node in self._nodes:
            if best is None or node.val < best.val:
                best = node
        return best

    def highest_value(self) -> int:
        """The largest value; ValueError when empty."""
        if not self._nodes:
            raise ValueError("empty stack has no highest value")
        return max(node.val for node in self._nodes)

    def cheapest(self) -> Optional[Node]:
        """The first node flagged cheapest, or None."""
        return next((node for node in self._nodes if node.cheapest), None)

    def reindex(self) -> None:
        """Number the nodes from the top, mark the upper half, clear flags."""
        center = len(self._nodes) // 2
        for i, node in enumerate(self._nodes):
            node.index = i
            node.cheapest = False
            node.above_median = i <= center


class Board:
    """Stacks a and b with the named moves; each move is recorded and written."""

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.out = out
        self.moves: list[str] = []

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        if self.out is not None:
            self.out.write(name + "\n")

    @staticmethod
    def _transfer(origin: Stack, target: Stack) -> None:
        if origin:
            target.push(origin.pop())

    def sa(self) -> None:
        self.a.swap()
        self._emit("sa")

    def sb(self) -> None:
        self.b.swap()
        self._emit("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._emit("ss")

    def pa(self) -> None:
        self._transfer(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        self._transfer(self.a, self.b)
        self._emit("pb")

    def ra(self) -> None:
        self.a.rotate()
        self._emit("ra")

    def rb(self) -> None:
        self.b.rotate()
        self._emit("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._emit("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._emit("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")


def _default_out() -> TextIO:
    return sys.stdout