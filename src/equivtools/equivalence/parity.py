"""Odd/even grouping of integer elements."""
from __future__ import annotations

from typing import Any

from equivtools.equivalence.comparator import EquivalenceComparator, TypeMismatchError


class ParityComparator(EquivalenceComparator):
    """
    Two classes of integers: evens (key 0) and odds (key 1).

    Uses mathematical modulo, so negative integers land in the same two
    classes as positive ones: -1 ~ 1 and -2 ~ 4. Contexts are ignored.
    bool is rejected even though it subclasses int.
    """

    def check_element(self, a: Any) -> None:
        if not isinstance(a, int) or isinstance(a, bool):
            raise TypeMismatchError(self, a, "an int element")

    def _equivalent(self, a: int, b: int, ctx_a: Any, ctx_b: Any) -> bool:
        return a % 2 == b % 2

    def _class_key(self, a: int, ctx: Any) -> int:
        # Python's % with a positive divisor is never negative.
        return a % 2


PARITY = ParityComparator()
