"""Tests for equivalence class partitioning."""
import pytest

import equivtools.partition.classes as classes_mod
from equivtools.equivalence.comparator import (
    EqualsComparator,
    EquivalenceComparator,
    TypeMismatchError,
)
from equivtools.equivalence.attributes import AttributeComparator
from equivtools.equivalence.parity import PARITY
from equivtools.partition.classes import (
    EquivalenceClass,
    class_sizes,
    equivalence_classes,
    match_classes,
)


class _ModFourKeyedByParity(EquivalenceComparator):
    """a ~ b iff a = b (mod 4), but keys only see parity."""

    def _equivalent(self, a, b, ctx_a, ctx_b):
        return a % 4 == b % 4

    def _class_key(self, a, ctx):
        return a % 2


def _as_sets(classes):
    return {(c.key, frozenset(c.members)) for c in classes}


def test_parity_partition():
    classes = equivalence_classes([1, 2, 3, 4, 5, 6], PARITY)
    assert _as_sets(classes) == {(1, frozenset({1, 3, 5})), (0, frozenset({2, 4, 6}))}
    # Ordered by first appearance, members in input order
    assert classes[0] == EquivalenceClass(key=1, members=(1, 3, 5))
    assert classes[1] == EquivalenceClass(key=0, members=(2, 4, 6))


def test_class_helpers():
    cls = EquivalenceClass(key=0, members=(4, 2))
    assert cls.representative == 4
    assert len(cls) == 2
    assert 2 in cls
    assert 3 not in cls


def test_empty():
    assert equivalence_classes([], PARITY) == []


def test_verify_splits_buckets():
    classes = equivalence_classes(range(6), _ModFourKeyedByParity(), verify=True)
    assert [(c.key, c.members) for c in classes] == [
        (0, (0, 4)),
        (1, (1, 5)),
        (0, (2,)),
        (1, (3,)),
    ]
    assert class_sizes(classes) == {0: [1, 2], 1: [1, 2]}


def test_no_verify_trusts_keys():
    classes = equivalence_classes(range(6), _ModFourKeyedByParity(), verify=False)
    assert [(c.key, c.members) for c in classes] == [(0, (0, 2, 4)), (1, (1, 3, 5))]


def test_verify_default_from_config(monkeypatch):
    monkeypatch.setattr(classes_mod, "EQUIVTOOLS_VERIFY", False)
    assert len(equivalence_classes(range(6), _ModFourKeyedByParity())) == 2
    monkeypatch.setattr(classes_mod, "EQUIVTOOLS_VERIFY", True)
    assert len(equivalence_classes(range(6), _ModFourKeyedByParity())) == 4


@pytest.mark.parametrize("value, expected", [("1", True), ("0", False), ("off", False), ("FALSE", False), ("yes", True)])
def test_env_flag(value, expected):
    assert classes_mod._env_flag(value) is expected


def test_contexts_sequence_and_mapping():
    by_color = AttributeComparator("color")
    ctx = [{"color": "r"}, {"color": "b"}, {"color": "r"}]
    seq = equivalence_classes(["x", "y", "z"], by_color, ctx)
    assert [c.members for c in seq] == [("x", "z"), ("y",)]

    mapping = dict(zip(["x", "y", "z"], ctx))
    assert equivalence_classes(["x", "y", "z"], by_color, mapping) == seq


def test_contexts_length_mismatch():
    with pytest.raises(ValueError):
        equivalence_classes([1, 2, 3], PARITY, [None, None])


def test_type_mismatch_propagates():
    with pytest.raises(TypeMismatchError):
        equivalence_classes([1, "2", 3], PARITY)


def test_match_classes_pairs_equivalent_classes():
    a = equivalence_classes([1, 2, 3, 4], PARITY)
    b = equivalence_classes([6, 7, 8, 9], PARITY)
    pairs = match_classes(a, b, PARITY)
    assert pairs is not None
    assert [(x.members, y.members) for x, y in pairs] == [((1, 3), (7, 9)), ((2, 4), (6, 8))]


def test_match_classes_size_mismatch():
    a = equivalence_classes([1, 2, 3, 4], PARITY)
    b = equivalence_classes([1, 3, 5, 2], PARITY)
    assert match_classes(a, b, PARITY) is None


def test_match_classes_missing_class():
    a = equivalence_classes([1, 3], PARITY)
    b = equivalence_classes([2, 4], PARITY)
    assert match_classes(a, b, PARITY) is None


def test_match_classes_within_shared_key():
    cmp = _ModFourKeyedByParity()
    a = equivalence_classes([0, 2, 2], cmp)
    b = equivalence_classes([6, 4, 6], cmp)
    pairs = match_classes(a, b, cmp)
    assert [(x.members, y.members) for x, y in pairs] == [((0,), (4,)), ((2, 2), (6, 6))]


def test_mapping_contexts_unhashable_element():
    with pytest.raises(TypeMismatchError):
        equivalence_classes([[1]], EqualsComparator(), {})


def test_match_classes_rejects_sequence_contexts():
    by_color = AttributeComparator("color")
    ctx = [{"color": "r"}, {"color": "b"}]
    a = equivalence_classes(["x", "y"], by_color, ctx)
    with pytest.raises(ValueError, match="contexts_a must be a mapping"):
        match_classes(a, a, by_color, ctx, dict(zip(["x", "y"], ctx)))
    pairs = match_classes(a, a, by_color, dict(zip(["x", "y"], ctx)), dict(zip(["x", "y"], ctx)))
    assert [(x.members, y.members) for x, y in pairs] == [(("x",), ("x",)), (("y",), ("y",))]
