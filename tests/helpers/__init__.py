import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from helpers.naive_diff import (
    NaiveLCS,
    DifferenceVerifier,
    lcs,
    lcs_length,
    unchanged_count,
    verify_all,
)


__all__ = [
    "NaiveLCS",
    "DifferenceVerifier",
    "lcs",
    "lcs_length",
    "unchanged_count",
    "verify_all",
]
