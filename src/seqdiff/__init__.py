import logging

from seqdiff.utils import (
    NONE, Difference, ResultType, OpType, EditAction, EditScript, DiffResult, Equality,
    default_equals, make_insert, make_delete, make_equal, make_replace,
    script_to_tuples, tuples_to_script, count_operations, count_differences,
    group_consecutive_ops
)
from seqdiff.lcs import PatienceLCS, ChainNode, lcs_matches, lcs, lcs_length
from seqdiff.builder import (
    EventKind, TraversalEvent, PendingDifference, DiffBuilder,
    iter_events, build_differences, split_changed, normalize
)
from seqdiff.api import (
    diff, diff_arrays, patch, to_edit_script, diff_result, edit_distance, similarity_ratio
)
from seqdiff.engine import DiffEngine, BatchDiffer

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "NONE", "Difference", "ResultType", "OpType", "EditAction", "EditScript", "DiffResult",
    "Equality", "default_equals", "make_insert", "make_delete", "make_equal", "make_replace",
    "script_to_tuples", "tuples_to_script", "count_operations", "count_differences",
    "group_consecutive_ops",
    "PatienceLCS", "ChainNode", "lcs_matches", "lcs", "lcs_length",
    "EventKind", "TraversalEvent", "PendingDifference", "DiffBuilder",
    "iter_events", "build_differences", "split_changed", "normalize",
    "diff", "diff_arrays", "patch", "to_edit_script", "diff_result", "edit_distance",
    "similarity_ratio",
    "DiffEngine", "BatchDiffer"
]
