# gridpath/core/frontier.py
#!/usr/bin/env python3
"""
Open set for A*.

Binary heap keyed by (f, -seq): lowest f first; among equal f the most
recently pushed node comes out first. This is the order a stable descending
sort followed by taking the last element would give.
"""

from collections import Counter
from typing import List, Tuple
import heapq

from gridpath.core.types import Node, Cell


class Frontier:
    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, Node]] = []  # (f, -seq, node)
        self._seq = 0
        self.insertions: Counter = Counter()
        self.pushes = 0
        self.pops = 0

    def push(self, node: Node) -> None:
        self._seq += 1
        heapq.heappush(self._heap, (node.f, -self._seq, node))
        self.insertions[node.cell] += 1
        self.pushes += 1

    def pop(self) -> Node:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        _, _, node = heapq.heappop(self._heap)
        self.pops += 1
        return node

    def peek(self) -> Node:
        if not self._heap:
            raise IndexError("peek at empty frontier")
        return self._heap[0][2]

    def cells(self) -> List[Cell]:
        return [n.cell for _, _, n in self._heap]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
