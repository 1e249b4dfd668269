# uninformed_search/core/frontiers.py
# Frontier containers. Each one tracks the states it holds so membership is decided by state content.
from __future__ import annotations
import heapq
import itertools
from collections import deque
from typing import Dict, List, Optional

from .node import Node
from .problem import State


class FIFOQueue:
    def __init__(self):
        self.q = deque()
        self._states: Dict[State, int] = {}
    def push(self, node: Node):
        self.q.append(node)
        self._states[node.state] = self._states.get(node.state, 0) + 1
    def pop(self) -> Node:
        node = self.q.popleft()
        self._forget(node.state)
        return node
    def __len__(self): return len(self.q)
    def peek(self) -> Node: return self.q[0]
    def contains_state(self, state: State) -> bool: return state in self._states

    def _forget(self, state: State):
        n = self._states[state] - 1
        if n:
            self._states[state] = n
        else:
            del self._states[state]


class LIFOStack(FIFOQueue):
    def __init__(self):
        super().__init__()
        self.q = []
    def pop(self) -> Node:
        node = self.q.pop()
        self._forget(node.state)
        return node
    def peek(self) -> Node: return self.q[-1]


class PriorityQueue:
    """
    Min-heap of nodes keyed by an explicit priority, at most one pending node per state.

    Equal priorities pop in insertion order (the counter is the tie-breaker).
    decrease_priority() swaps in a cheaper node for a state already queued; the
    old heap entry is left in place and skipped when it surfaces.
    """
    _REMOVED = object()

    def __init__(self):
        self.h: List[list] = []
        self.entries: Dict[State, list] = {}
        self.counter = itertools.count()

    def push(self, node: Node, priority) -> None:
        if node.state in self.entries:
            raise KeyError(f"state already queued: {node.state!r}")
        entry = [priority, next(self.counter), node]
        self.entries[node.state] = entry
        heapq.heappush(self.h, entry)

    def decrease_priority(self, node: Node, priority) -> bool:
        """Relax the entry for node.state; returns False (and changes nothing) unless priority is lower."""
        old = self.entries[node.state]
        if not priority < old[0]:
            return False
        old[2] = self._REMOVED
        entry = [priority, next(self.counter), node]
        self.entries[node.state] = entry
        heapq.heappush(self.h, entry)
        return True

    def pop(self) -> Node:
        while self.h:
            _, _, node = heapq.heappop(self.h)
            if node is not self._REMOVED:
                del self.entries[node.state]
                return node
        raise IndexError("pop from an empty priority queue")

    def peek(self) -> Node:
        while self.h and self.h[0][2] is self._REMOVED:
            heapq.heappop(self.h)
        if not self.h:
            raise IndexError("peek at an empty priority queue")
        return self.h[0][2]

    def priority_of(self, state: State) -> Optional[float]:
        entry = self.entries.get(state)
        return None if entry is None else entry[0]

    def contains_state(self, state: State) -> bool:
        return state in self.entries

    def __len__(self): return len(self.entries)
