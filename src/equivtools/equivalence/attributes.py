"""Comparator over element context, e.g. networkx node/edge attribute dicts."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Hashable

from equivtools.equivalence.comparator import (
    EquivalenceComparator,
    TypeMismatchError,
    same_value,
    value_key,
)


class AttributeComparator(EquivalenceComparator):
    """
    Elements are equivalent iff their contexts agree on one attribute.

    The context must be a Mapping (or None, treated as empty); a missing
    attribute reads as `default`. Attribute values must be hashable;
    NaN values compare equal to each other.
    Elements themselves are never inspected.
    """

    def __init__(self, attr: Hashable, default: Any = None):
        self.attr = attr
        self.default = default

    def check_context(self, ctx: Any) -> None:
        if ctx is not None and not isinstance(ctx, Mapping):
            raise TypeMismatchError(self, ctx, "a Mapping context")
        value = self._value(ctx)
        try:
            hash(value)
        except TypeError:
            raise TypeMismatchError(self, value, f"a hashable value for {self.attr!r}") from None

    def _value(self, ctx: Any) -> Any:
        if ctx is None:
            return self.default
        return ctx.get(self.attr, self.default)

    def _equivalent(self, a, b, ctx_a, ctx_b) -> bool:
        return same_value(self._value(ctx_a), self._value(ctx_b))

    def _class_key(self, a, ctx) -> int:
        return value_key(self._value(ctx))

    def __repr__(self) -> str:
        return f"AttributeComparator({self.attr!r}, default={self.default!r})"
