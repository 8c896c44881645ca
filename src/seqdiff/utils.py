from typing import TypeVar, List, Tuple, NamedTuple, Optional, Callable, Any
from enum import Enum
from dataclasses import dataclass

T = TypeVar('T')

Equality = Callable[[Any, Any], bool]

NONE = -1


def default_equals(x: Any, y: Any) -> bool:
    return x == y


class ResultType(str, Enum):
    CHANGED = 'changed'
    ADDED = 'added'
    DELETED = 'deleted'


@dataclass(frozen=True)
class Difference:
    """A block of unmatched elements between the "from" and "to" sequences.

    Each side is an inclusive ``[start, end]`` index range. An end equal to
    ``NONE`` marks that side as absent; its start is then the anchor, the
    position in that sequence where the block sits.
    """
    deleted_start: int
    deleted_end: int
    added_start: int
    added_end: int

    @property
    def type(self) -> ResultType:
        if self.deleted_end != NONE and self.added_end != NONE:
            return ResultType.CHANGED
        if self.deleted_end == NONE:
            return ResultType.ADDED
        return ResultType.DELETED

    @property
    def deleted_range(self) -> Optional[Tuple[int, int]]:
        if self.deleted_end == NONE:
            return None
        return (self.deleted_start, self.deleted_end)

    @property
    def added_range(self) -> Optional[Tuple[int, int]]:
        if self.added_end == NONE:
            return None
        return (self.added_start, self.added_end)

    @property
    def deleted_count(self) -> int:
        if self.deleted_end == NONE:
            return 0
        return self.deleted_end - self.deleted_start + 1

    @property
    def added_count(self) -> int:
        if self.added_end == NONE:
            return 0
        return self.added_end - self.added_start + 1

    def deleted_slice(self) -> slice:
        return slice(self.deleted_start, self.deleted_start + self.deleted_count)

    def added_slice(self) -> slice:
        return slice(self.added_start, self.added_start + self.added_count)

    def __repr__(self) -> str:
        return f"Difference(del: {_format_range(self.deleted_range)} add: {_format_range(self.added_range)})"


def _format_range(rng: Optional[Tuple[int, int]]) -> str:
    if rng is None:
        return 'none'
    return f"[{rng[0]}, {rng[1]}]"


class OpType(str, Enum):
    INSERT = 'insert'
    DELETE = 'delete'
    EQUAL = 'equal'
    REPLACE = 'replace'


class EditAction(NamedTuple):
    op: OpType
    value: object
    old_value: Optional[object] = None

    def __repr__(self) -> str:
        if self.op == OpType.REPLACE:
            return f"EditAction({self.op.value!r}, {self.value!r}, {self.old_value!r})"
        return f"EditAction({self.op.value!r}, {self.value!r})"


EditScript = List[EditAction]


@dataclass
class DiffResult:
    differences: List[Difference]
    script: EditScript
    original_length: int
    modified_length: int
    edit_distance: int
    lcs_length: int
    similarity_ratio: float

    @classmethod
    def from_script(cls, differences: List[Difference], script: EditScript,
                    orig_len: int, mod_len: int) -> 'DiffResult':
        lcs_len = sum(1 for a in script if a.op == OpType.EQUAL)
        edit_dist = (orig_len - lcs_len) + (mod_len - lcs_len)
        total = orig_len + mod_len
        sim_ratio = (2.0 * lcs_len / total) if total > 0 else 1.0
        return cls(
            differences=differences,
            script=script,
            original_length=orig_len,
            modified_length=mod_len,
            edit_distance=edit_dist,
            lcs_length=lcs_len,
            similarity_ratio=sim_ratio
        )


def make_insert(value: T) -> EditAction:
    return EditAction(OpType.INSERT, value)


def make_delete(value: T) -> EditAction:
    return EditAction(OpType.DELETE, value)


def make_equal(value: T) -> EditAction:
    return EditAction(OpType.EQUAL, value)


def make_replace(new_value: T, old_value: T) -> EditAction:
    return EditAction(OpType.REPLACE, new_value, old_value)


def script_to_tuples(script: EditScript) -> List[Tuple[str, object]]:
    return [(action.op.value, action.value) for action in script]


def tuples_to_script(tuples: List[Tuple[str, object]]) -> EditScript:
    result = []
    for op_str, value in tuples:
        op = OpType(op_str)
        result.append(EditAction(op, value))
    return result


def count_operations(script: EditScript) -> dict:
    counts = {
        'inserts': 0,
        'deletes': 0,
        'equals': 0,
        'replaces': 0,
        'total': len(script)
    }
    for action in script:
        if action.op == OpType.INSERT:
            counts['inserts'] += 1
        elif action.op == OpType.DELETE:
            counts['deletes'] += 1
        elif action.op == OpType.EQUAL:
            counts['equals'] += 1
        elif action.op == OpType.REPLACE:
            counts['replaces'] += 1
    return counts


def count_differences(differences: List[Difference]) -> dict:
    counts = {
        'added': 0,
        'deleted': 0,
        'changed': 0,
        'total': len(differences)
    }
    for d in differences:
        counts[d.type.value] += 1
    return counts


def group_consecutive_ops(script: EditScript) -> List[Tuple[OpType, List[object]]]:
    if not script:
        return []
    groups = []
    current_op = script[0].op
    current_values = [script[0].value]
    for action in script[1:]:
        if action.op == current_op:
            current_values.append(action.value)
        else:
            groups.append((current_op, current_values))
            current_op = action.op
            current_values = [action.value]
    groups.append((current_op, current_values))
    return groups
