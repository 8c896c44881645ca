import random
import string
from typing import List, Tuple, Optional, Any
from dataclasses import dataclass
from enum import Enum


class GeneratorMode(Enum):
    RANDOM = "random"
    SIMILAR = "similar"
    REPETITIVE = "repetitive"
    EDGE_CASE = "edge_case"


@dataclass
class GeneratorConfig:
    min_length: int = 0
    max_length: int = 40
    alphabet: str = string.ascii_lowercase[:6]
    seed: Optional[int] = None
    similarity_ratio: float = 0.7

    def rng(self) -> random.Random:
        return random.Random(self.seed)


class SequenceGenerator:
    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.rng = self.config.rng()

    def length(self) -> int:
        return self.rng.randint(self.config.min_length, self.config.max_length)

    def generate_char_list(self, length: Optional[int] = None) -> List[str]:
        if length is None:
            length = self.length()
        return [self.rng.choice(self.config.alphabet) for _ in range(length)]

    def generate_int_list(self, length: Optional[int] = None, distinct: int = 4) -> List[int]:
        if length is None:
            length = self.length()
        return [self.rng.randrange(distinct) for _ in range(length)]


class SimilarSequenceGenerator:
    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.rng = self.config.rng()

    def generate_pair(self, base_length: Optional[int] = None) -> Tuple[List[str], List[str]]:
        if base_length is None:
            base_length = self.rng.randint(max(1, self.config.min_length), self.config.max_length)
        base = [f"item_{i}" for i in range(base_length)]
        modified = base.copy()
        num_changes = max(1, int(base_length * (1 - self.config.similarity_ratio)))
        for _ in range(num_changes):
            op = self.rng.choice(['delete', 'insert', 'modify'])
            if op == 'delete' and modified:
                modified.pop(self.rng.randrange(len(modified)))
            elif op == 'insert':
                modified.insert(self.rng.randint(0, len(modified)), f"new_{self.rng.randint(1000, 9999)}")
            elif op == 'modify' and modified:
                modified[self.rng.randrange(len(modified))] = f"mod_{self.rng.randint(1000, 9999)}"
        return base, modified


class EdgeCaseGenerator:
    def empty_sequences(self) -> Tuple[List[str], List[str]]:
        return [], []

    def first_empty(self, length: int = 5) -> Tuple[List[str], List[str]]:
        return [], [f"item_{i}" for i in range(length)]

    def second_empty(self, length: int = 5) -> Tuple[List[str], List[str]]:
        return [f"item_{i}" for i in range(length)], []

    def identical_sequences(self, length: int = 10) -> Tuple[List[str], List[str]]:
        seq = [f"item_{i}" for i in range(length)]
        return seq.copy(), seq.copy()

    def completely_different(self, old_len: int = 5, new_len: int = 3) -> Tuple[List[str], List[str]]:
        return [f"old_{i}" for i in range(old_len)], [f"new_{i}" for i in range(new_len)]

    def reversed_sequence(self, length: int = 6) -> Tuple[List[str], List[str]]:
        seq = [f"item_{i}" for i in range(length)]
        return seq.copy(), list(reversed(seq))

    def all_same(self, old_len: int = 7, new_len: int = 4) -> Tuple[List[str], List[str]]:
        return ["same"] * old_len, ["same"] * new_len

    def duplicated_items(self, length: int = 6) -> Tuple[List[str], List[str]]:
        seq = ["same"] * length
        modified = seq.copy()
        modified[length // 2] = "different"
        return seq, modified

    def long_common_prefix(self, prefix_len: int = 10, diff_len: int = 2) -> Tuple[List[str], List[str]]:
        prefix = [f"common_{i}" for i in range(prefix_len)]
        return prefix + [f"old_{i}" for i in range(diff_len)], prefix + [f"new_{i}" for i in range(diff_len + 1)]

    def long_common_suffix(self, suffix_len: int = 10, diff_len: int = 2) -> Tuple[List[str], List[str]]:
        suffix = [f"common_{i}" for i in range(suffix_len)]
        return [f"old_{i}" for i in range(diff_len + 1)] + suffix, [f"new_{i}" for i in range(diff_len)] + suffix

    def interleaved_sequences(self, length: int = 5) -> Tuple[List[str], List[str]]:
        seq1 = [f"a_{i}" for i in range(length)]
        interleaved = []
        for i, a in enumerate(seq1):
            interleaved.extend([a, f"b_{i}"])
        return seq1, interleaved


class DiffTestCase:
    def __init__(self, old: List[Any], new: List[Any], name: str = ""):
        self.old, self.new, self.name = old, new, name

    def __repr__(self) -> str:
        return f"DiffTestCase({self.name!r}, old={self.old!r}, new={self.new!r})"


class TestCaseGenerator:
    __test__ = False

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.seq_gen = SequenceGenerator(self.config)
        self.similar_gen = SimilarSequenceGenerator(self.config)
        self.edge_gen = EdgeCaseGenerator()

    def generate_random_case(self) -> DiffTestCase:
        return DiffTestCase(self.seq_gen.generate_char_list(), self.seq_gen.generate_char_list(), "random")

    def generate_repetitive_case(self) -> DiffTestCase:
        return DiffTestCase(self.seq_gen.generate_int_list(distinct=2),
                            self.seq_gen.generate_int_list(distinct=2), "repetitive")

    def generate_similar_case(self) -> DiffTestCase:
        old, new = self.similar_gen.generate_pair()
        return DiffTestCase(old, new, "similar")

    def generate_edge_cases(self) -> List[DiffTestCase]:
        g = self.edge_gen
        return [
            DiffTestCase(*g.empty_sequences(), "empty_both"),
            DiffTestCase(*g.first_empty(), "first_empty"),
            DiffTestCase(*g.second_empty(), "second_empty"),
            DiffTestCase(*g.identical_sequences(), "identical"),
            DiffTestCase(*g.completely_different(), "completely_different"),
            DiffTestCase(*g.completely_different(2, 6), "completely_different_longer_new"),
            DiffTestCase(*g.reversed_sequence(), "reversed"),
            DiffTestCase(*g.all_same(), "all_same"),
            DiffTestCase(*g.duplicated_items(), "duplicated"),
            DiffTestCase(*g.long_common_prefix(), "common_prefix"),
            DiffTestCase(*g.long_common_suffix(), "common_suffix"),
            DiffTestCase(*g.interleaved_sequences(), "interleaved"),
        ]

    def generate_batch(self, count: int, mode: GeneratorMode = GeneratorMode.RANDOM) -> List[DiffTestCase]:
        if mode == GeneratorMode.EDGE_CASE:
            return self.generate_edge_cases()
        gen = {
            GeneratorMode.RANDOM: self.generate_random_case,
            GeneratorMode.SIMILAR: self.generate_similar_case,
            GeneratorMode.REPETITIVE: self.generate_repetitive_case,
        }[mode]
        return [gen() for _ in range(count)]


def generate_test_cases(count: int = 30, seed: int = 7) -> List[DiffTestCase]:
    gen = TestCaseGenerator(GeneratorConfig(seed=seed))
    cases = gen.generate_edge_cases()
    for mode in (GeneratorMode.RANDOM, GeneratorMode.SIMILAR, GeneratorMode.REPETITIVE):
        cases.extend(gen.generate_batch(count // 3, mode))
    return cases
