import logging
from collections.abc import Sequence as SequenceABC
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .builder import build_differences, normalize
from .lcs import PatienceLCS
from .utils import (
    Difference, DiffResult, EditScript, Equality, ResultType,
    make_delete, make_equal, make_insert, make_replace,
)

logger = logging.getLogger(__name__)

KeyFunc = Callable[[Any], Any]


def _check_inputs(a: Any, b: Any) -> None:
    if a is None or b is None:
        raise ValueError(f"Both sequences are required: a={a!r} b={b!r}")


def _as_sequence(seq: Any, name: str) -> Sequence[Any]:
    if not isinstance(seq, SequenceABC):
        raise TypeError(f"{name} must be a sequence, got {type(seq).__name__}; use diff_arrays for other inputs")
    return seq


def _as_array(seq: Any) -> List[Any]:
    if hasattr(seq, 'tolist'):
        return seq.tolist()
    return list(seq)


def _diff_indexable(a: Sequence[Any], b: Sequence[Any], eq: Optional[Equality],
                    key: Optional[KeyFunc]) -> List[Difference]:
    logger.debug("diff: a=%r b=%r", a, b)
    matches = PatienceLCS(a, b, eq, key).compute()
    raw = build_differences(matches, len(b))
    result = normalize(raw)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("raw differences: %r", raw)
        for d in result:
            if d.type == ResultType.DELETED:
                logger.debug(" DEL %r", list(a[d.deleted_slice()]))
            elif d.type == ResultType.ADDED:
                logger.debug(" ADD %r", list(b[d.added_slice()]))
            else:
                logger.debug(" CHG %r -> %r", list(a[d.deleted_slice()]), list(b[d.added_slice()]))
    return result


def diff(a: Sequence[Any], b: Sequence[Any], eq: Optional[Equality] = None, *,
         key: Optional[KeyFunc] = None) -> List[Difference]:
    """Compute the differences that turn ``a`` into ``b``.

    ``eq(x, y)`` is always called with ``x`` from ``a`` and ``y`` from ``b``
    and must behave as a symmetric equality. ``key`` instead compares and
    hashes elements through ``key(element)``. Without either, ``==`` is
    used, hashing elements when they are hashable.

    Every CHANGED record in the result has as many deleted as added
    elements.
    """
    _check_inputs(a, b)
    return _diff_indexable(_as_sequence(a, 'a'), _as_sequence(b, 'b'), eq, key)


def diff_arrays(a: Iterable[Any], b: Iterable[Any], eq: Optional[Equality] = None, *,
                key: Optional[KeyFunc] = None) -> List[Difference]:
    _check_inputs(a, b)
    return _diff_indexable(_as_array(a), _as_array(b), eq, key)


def _check_difference(d: Difference, a_pos: int, b_pos: int, n: int, m: int) -> None:
    if d.deleted_start < a_pos or d.added_start < b_pos:
        raise ValueError(f"{d!r} overlaps or precedes the previous difference")
    if d.deleted_start - a_pos != d.added_start - b_pos:
        raise ValueError(f"{d!r} is not aligned: unchanged run differs in length")
    if d.deleted_start + d.deleted_count > n:
        raise ValueError(f"{d!r} deleted range exceeds original length {n}")
    if d.added_start + d.added_count > m:
        raise ValueError(f"{d!r} added range exceeds modified length {m}")


def patch(a: Sequence[Any], b: Sequence[Any], differences: List[Difference]) -> List[Any]:
    _check_inputs(a, b)
    result: List[Any] = []
    a_pos = b_pos = 0
    for d in differences:
        _check_difference(d, a_pos, b_pos, len(a), len(b))
        result.extend(a[a_pos:d.deleted_start])
        result.extend(b[d.added_slice()])
        a_pos = d.deleted_start + d.deleted_count
        b_pos = d.added_start + d.added_count
    if len(a) - a_pos != len(b) - b_pos:
        raise ValueError(f"Differences incomplete: {len(a) - a_pos} trailing elements left in a, "
                         f"{len(b) - b_pos} in b")
    result.extend(a[a_pos:])
    return result


def to_edit_script(a: Sequence[Any], b: Sequence[Any], differences: List[Difference]) -> EditScript:
    _check_inputs(a, b)
    script: EditScript = []
    a_pos = b_pos = 0
    for d in differences:
        _check_difference(d, a_pos, b_pos, len(a), len(b))
        script.extend(make_equal(value) for value in a[a_pos:d.deleted_start])
        old = a[d.deleted_slice()]
        new = b[d.added_slice()]
        paired = min(len(old), len(new))
        for k in range(paired):
            script.append(make_replace(new[k], old[k]))
        script.extend(make_delete(value) for value in old[paired:])
        script.extend(make_insert(value) for value in new[paired:])
        a_pos = d.deleted_start + d.deleted_count
        b_pos = d.added_start + d.added_count
    script.extend(make_equal(value) for value in a[a_pos:])
    return script


def diff_result(a: Sequence[Any], b: Sequence[Any], eq: Optional[Equality] = None, *,
                key: Optional[KeyFunc] = None) -> DiffResult:
    differences = diff(a, b, eq, key=key)
    script = to_edit_script(a, b, differences)
    return DiffResult.from_script(differences, script, len(a), len(b))


def edit_distance(a: Sequence[Any], b: Sequence[Any], eq: Optional[Equality] = None, *,
                  key: Optional[KeyFunc] = None) -> int:
    return sum(d.deleted_count + d.added_count for d in diff(a, b, eq, key=key))


def similarity_ratio(a: Sequence[Any], b: Sequence[Any], eq: Optional[Equality] = None, *,
                     key: Optional[KeyFunc] = None) -> float:
    _check_inputs(a, b)
    if not a and not b:
        return 1.0
    return diff_result(a, b, eq, key=key).similarity_ratio
