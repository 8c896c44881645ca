"""Longest common subsequence by the threshold ("patience") method.

Common prefix and suffix are matched directly. The middle section is solved
by scanning ``a`` left to right and keeping, for every chain length, the
smallest ``b`` index that can end an increasing chain of that length. Each
accepted insertion leaves a chain node pointing at its predecessor so the
pairs can be read back once ``a`` is exhausted.
"""
import logging
from bisect import bisect_left
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from .utils import Equality, default_equals

logger = logging.getLogger(__name__)

Matches = List[Optional[int]]


class ChainNode(NamedTuple):
    a_index: int
    b_index: int
    predecessor: Optional[int]


class PatienceLCS:
    def __init__(self, a: Sequence[Any], b: Sequence[Any],
                 eq: Optional[Equality] = None,
                 key: Optional[Callable[[Any], Any]] = None):
        if eq is not None and key is not None:
            raise ValueError("eq and key are mutually exclusive")
        self.a = a
        self.b = b
        self.n = len(a)
        self.m = len(b)
        self.key = key
        if key is not None:
            self.eq: Equality = lambda x, y: key(x) == key(y)
        else:
            self.eq = eq or default_equals
        self._custom_eq = eq is not None

    def compute(self) -> Matches:
        a, b, eq = self.a, self.b, self.eq
        matches: Matches = [None] * self.n
        a_start, a_end = 0, self.n - 1
        b_start, b_end = 0, self.m - 1
        while a_start <= a_end and b_start <= b_end and eq(a[a_start], b[b_start]):
            matches[a_start] = b_start
            a_start += 1
            b_start += 1
        while a_start <= a_end and b_start <= b_end and eq(a[a_end], b[b_end]):
            matches[a_end] = b_end
            a_end -= 1
            b_end -= 1
        logger.debug("trimmed prefix=%d suffix=%d, middle a[%d:%d] b[%d:%d]",
                     a_start, self.n - 1 - a_end, a_start, a_end + 1, b_start, b_end + 1)
        if a_start > a_end or b_start > b_end:
            return matches
        for i, j in self._middle_pairs(a_start, a_end, b_start, b_end):
            matches[i] = j
        return matches

    def pairs(self) -> List[Tuple[int, int]]:
        return [(i, j) for i, j in enumerate(self.compute()) if j is not None]

    def _middle_pairs(self, a_start: int, a_end: int,
                      b_start: int, b_end: int) -> List[Tuple[int, int]]:
        positions_of = self._position_finder(b_start, b_end)
        thresholds: List[int] = []
        arena: List[ChainNode] = []
        slot_nodes: List[int] = []
        for i in range(a_start, a_end + 1):
            positions = positions_of(self.a[i])
            if not positions:
                continue
            k: Optional[int] = 0
            for j in reversed(positions):
                k = self._insert(thresholds, j, k)
                if k is None:
                    continue
                predecessor = slot_nodes[k - 1] if k > 0 else None
                arena.append(ChainNode(i, j, predecessor))
                if k == len(slot_nodes):
                    slot_nodes.append(len(arena) - 1)
                else:
                    slot_nodes[k] = len(arena) - 1
        pairs: List[Tuple[int, int]] = []
        node_index = slot_nodes[-1] if slot_nodes else None
        while node_index is not None:
            node = arena[node_index]
            pairs.append((node.a_index, node.b_index))
            node_index = node.predecessor
        pairs.reverse()
        logger.debug("middle section: %d chain nodes, %d pairs", len(arena), len(pairs))
        return pairs

    def _position_finder(self, b_start: int, b_end: int) -> Callable[[Any], List[int]]:
        b = self.b
        if not self._custom_eq:
            key = self.key
            index: Dict[Any, List[int]] = {}
            try:
                for j in range(b_start, b_end + 1):
                    index.setdefault(b[j] if key is None else key(b[j]), []).append(j)
            except TypeError:
                if key is not None:
                    raise
                logger.debug("unhashable elements, scanning b for positions")
            else:
                if key is None:
                    return lambda element: index.get(element, [])
                return lambda element: index.get(key(element), [])
        eq = self.eq

        def scan(element: Any) -> List[int]:
            return [j for j in range(b_start, b_end + 1) if eq(element, b[j])]
        return scan

    @staticmethod
    def _insert(thresholds: List[int], j: int, k: Optional[int]) -> Optional[int]:
        if k and thresholds[k] > j and thresholds[k - 1] < j:
            thresholds[k] = j
            return k
        if k:
            high = k
        elif thresholds:
            high = len(thresholds) - 1
        else:
            high = -1
        if high == -1 or j > thresholds[-1]:
            thresholds.append(j)
            return len(thresholds) - 1
        low = bisect_left(thresholds, j, 0, high + 1)
        if low <= high and thresholds[low] == j:
            return None
        thresholds[low] = j
        return low


def lcs_matches(a: Sequence[Any], b: Sequence[Any], eq: Optional[Equality] = None,
                key: Optional[Callable[[Any], Any]] = None) -> Matches:
    return PatienceLCS(a, b, eq, key).compute()


def lcs(a: Sequence[Any], b: Sequence[Any], eq: Optional[Equality] = None,
        key: Optional[Callable[[Any], Any]] = None) -> List[Any]:
    return [a[i] for i, j in PatienceLCS(a, b, eq, key).pairs()]


def lcs_length(a: Sequence[Any], b: Sequence[Any], eq: Optional[Equality] = None,
               key: Optional[Callable[[Any], Any]] = None) -> int:
    return len(PatienceLCS(a, b, eq, key).pairs())
