import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Sequence

from .utils import NONE, Difference, ResultType

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    A_ONLY = 'a_only'
    B_ONLY = 'b_only'
    MATCH = 'match'


class TraversalEvent(NamedTuple):
    kind: EventKind
    a_index: int
    b_index: int


def iter_events(matches: Sequence[Optional[int]], m: int) -> Iterator[TraversalEvent]:
    bi = 0
    for ai, b_match in enumerate(matches):
        if b_match is None:
            yield TraversalEvent(EventKind.A_ONLY, ai, bi)
            continue
        while bi < b_match:
            yield TraversalEvent(EventKind.B_ONLY, ai, bi)
            bi += 1
        yield TraversalEvent(EventKind.MATCH, ai, bi)
        bi += 1
    ai = len(matches)
    while bi < m:
        yield TraversalEvent(EventKind.B_ONLY, ai, bi)
        bi += 1


@dataclass
class PendingDifference:
    deleted_start: int
    deleted_end: int
    added_start: int
    added_end: int

    @classmethod
    def deleted(cls, ai: int, bi: int) -> 'PendingDifference':
        return cls(ai, ai, bi, NONE)

    @classmethod
    def added(cls, ai: int, bi: int) -> 'PendingDifference':
        return cls(ai, NONE, bi, bi)

    def set_deleted(self, ai: int) -> None:
        self.deleted_start = min(ai, self.deleted_start)
        self.deleted_end = max(ai, self.deleted_end)

    def set_added(self, bi: int) -> None:
        self.added_start = min(bi, self.added_start)
        self.added_end = max(bi, self.added_end)

    def freeze(self) -> Difference:
        return Difference(self.deleted_start, self.deleted_end, self.added_start, self.added_end)


class DiffBuilder:
    """Folds traversal events into raw difference records.

    Every maximal run of unmatched events between two matches becomes one
    record. Counts on the two sides of a CHANGED record may differ; see
    ``normalize``.
    """

    def __init__(self) -> None:
        self.differences: List[Difference] = []
        self.pending: Optional[PendingDifference] = None

    def on_a_not_b(self, ai: int, bi: int) -> None:
        if self.pending is None:
            self.pending = PendingDifference.deleted(ai, bi)
        else:
            self.pending.set_deleted(ai)

    def on_b_not_a(self, ai: int, bi: int) -> None:
        if self.pending is None:
            self.pending = PendingDifference.added(ai, bi)
        else:
            self.pending.set_added(bi)

    def on_match(self, ai: int, bi: int) -> None:
        self.close()

    def close(self) -> None:
        if self.pending is not None:
            self.differences.append(self.pending.freeze())
            self.pending = None

    def feed(self, event: TraversalEvent) -> None:
        if event.kind == EventKind.A_ONLY:
            self.on_a_not_b(event.a_index, event.b_index)
        elif event.kind == EventKind.B_ONLY:
            self.on_b_not_a(event.a_index, event.b_index)
        else:
            self.on_match(event.a_index, event.b_index)

    def build(self, matches: Sequence[Optional[int]], m: int) -> List[Difference]:
        for event in iter_events(matches, m):
            self.feed(event)
        self.close()
        return self.differences


def build_differences(matches: Sequence[Optional[int]], m: int) -> List[Difference]:
    return DiffBuilder().build(matches, m)


def split_changed(d: Difference) -> List[Difference]:
    if d.type != ResultType.CHANGED or d.deleted_count == d.added_count:
        return [d]
    if d.deleted_count > d.added_count:
        head_end = d.deleted_start + d.added_count - 1
        return [
            Difference(d.deleted_start, head_end, d.added_start, d.added_end),
            Difference(head_end + 1, d.deleted_end, d.added_end + 1, NONE),
        ]
    head_end = d.added_start + d.deleted_count - 1
    return [
        Difference(d.deleted_start, d.deleted_end, d.added_start, head_end),
        Difference(d.deleted_end + 1, NONE, head_end + 1, d.added_end),
    ]


def normalize(differences: List[Difference]) -> List[Difference]:
    result: List[Difference] = []
    for d in differences:
        result.extend(split_changed(d))
    return result
