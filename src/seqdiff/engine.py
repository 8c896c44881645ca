from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from .api import diff, diff_arrays, edit_distance
from .lcs import lcs
from .utils import Difference, Equality


class DiffEngine:
    def __init__(self, eq: Optional[Equality] = None, key: Optional[Callable[[Any], Any]] = None):
        if eq is not None and key is not None:
            raise ValueError("eq and key are mutually exclusive")
        self.eq = eq
        self.key = key

    def diff(self, original: Sequence[Any], modified: Sequence[Any]) -> List[Difference]:
        return diff(original, modified, self.eq, key=self.key)

    def diff_arrays(self, original: Iterable[Any], modified: Iterable[Any]) -> List[Difference]:
        return diff_arrays(original, modified, self.eq, key=self.key)

    def diff_strings(self, original: str, modified: str, by_line: bool = True) -> List[Difference]:
        if by_line:
            orig_items = original.split('\n')
            mod_items = modified.split('\n')
        else:
            orig_items = list(original)
            mod_items = list(modified)
        return self.diff(orig_items, mod_items)

    def compute_lcs(self, a: Sequence[Any], b: Sequence[Any]) -> List[Any]:
        return lcs(a, b, self.eq, self.key)

    def compute_edit_distance(self, a: Sequence[Any], b: Sequence[Any]) -> int:
        return edit_distance(a, b, self.eq, key=self.key)


class BatchDiffer:
    def __init__(self, engine: Optional[DiffEngine] = None):
        self.engine = engine or DiffEngine()

    def diff_multiple(self, pairs: List[Tuple[Sequence[Any], Sequence[Any]]]) -> List[List[Difference]]:
        results = []
        for orig, mod in pairs:
            results.append(self.engine.diff(orig, mod))
        return results

    def diff_all_against_base(self, base: Sequence[Any],
                              targets: List[Sequence[Any]]) -> List[List[Difference]]:
        results = []
        for target in targets:
            results.append(self.engine.diff(base, target))
        return results
