"""Equivalence comparators: the contract used to partition graph elements."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Tuple


_NAN_KEY = 0


def same_value(x: Any, y: Any) -> bool:
    """Equality that stays reflexive for NaN: identical or == or both NaN."""
    return x is y or x == y or (x != x and y != y)


def value_key(x: Any) -> int:
    """hash() consistent with same_value: every NaN shares one key."""
    if x != x:
        return _NAN_KEY
    return hash(x)


class TypeMismatchError(TypeError):
    """An element or context is outside the domain a comparator accepts."""

    def __init__(self, comparator: "EquivalenceComparator", value: Any, expected: str):
        self.comparator = comparator
        self.value = value
        self.expected = expected
        super().__init__(
            f"{type(comparator).__name__} expects {expected}, "
            f"got {value!r} of type {type(value).__name__}"
        )


class EquivalenceComparator(ABC):
    """
    Decides whether two elements are interchangeable, and buckets them.

    Contract:
      equivalent(a, b, ca, cb) is reflexive, symmetric and transitive.
      equivalent(a, b, ca, cb) implies class_key(a, ca) == class_key(b, cb).

    Subclasses implement _equivalent / _class_key and validate their
    domain in check_element / check_context. Both public operations
    validate every argument before any comparison runs.
    """

    def check_element(self, a: Any) -> None:
        """Raise TypeMismatchError if a is outside this policy's domain."""

    def check_context(self, ctx: Any) -> None:
        """Raise TypeMismatchError if ctx is unusable by this policy."""

    def equivalent(self, a: Any, b: Any, ctx_a: Any = None, ctx_b: Any = None) -> bool:
        self.check_element(a)
        self.check_element(b)
        self.check_context(ctx_a)
        self.check_context(ctx_b)
        return self._equivalent(a, b, ctx_a, ctx_b)

    def class_key(self, a: Any, ctx: Any = None) -> int:
        self.check_element(a)
        self.check_context(ctx)
        return self._class_key(a, ctx)

    @abstractmethod
    def _equivalent(self, a: Any, b: Any, ctx_a: Any, ctx_b: Any) -> bool:
        ...

    @abstractmethod
    def _class_key(self, a: Any, ctx: Any) -> int:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UniformComparator(EquivalenceComparator):
    """Every element is equivalent to every other; one class, key 0."""

    def _equivalent(self, a, b, ctx_a, ctx_b) -> bool:
        return True

    def _class_key(self, a, ctx) -> int:
        return 0


class EqualsComparator(EquivalenceComparator):
    """Equivalence is == (NaN equal to NaN), keyed by hash(). Elements must be hashable."""

    def check_element(self, a: Any) -> None:
        try:
            hash(a)
        except TypeError:
            raise TypeMismatchError(self, a, "a hashable element") from None

    def _equivalent(self, a, b, ctx_a, ctx_b) -> bool:
        return same_value(a, b)

    def _class_key(self, a, ctx) -> int:
        return value_key(a)


class ComparatorChain(EquivalenceComparator):
    """
    Conjunction of several comparators.

    Two elements are equivalent iff every member says so. The key hashes
    the tuple of member keys, so equal keys do not guarantee equivalence.
    """

    def __init__(self, *comparators: EquivalenceComparator):
        if not comparators:
            raise ValueError("ComparatorChain needs at least one comparator.")
        self.comparators: Tuple[EquivalenceComparator, ...] = tuple(comparators)

    def _equivalent(self, a, b, ctx_a, ctx_b) -> bool:
        return all(c.equivalent(a, b, ctx_a, ctx_b) for c in self.comparators)

    def _class_key(self, a, ctx) -> int:
        return hash(tuple(c.class_key(a, ctx) for c in self.comparators))

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.comparators)
        return f"ComparatorChain({inner})"

