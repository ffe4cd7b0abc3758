"""Partition elements into equivalence classes with a comparator."""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from equivtools.equivalence.comparator import EquivalenceComparator

logger = logging.getLogger(__name__)


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off")


EQUIVTOOLS_VERIFY = _env_flag(os.environ.get("EQUIVTOOLS_VERIFY", "1"))


@dataclass(frozen=True)
class EquivalenceClass:
    """
    One class of a partition.

    key:     class_key shared by every member.
    members: elements in input order; members[0] is the representative.
    """

    key: int
    members: Tuple[Hashable, ...]

    @property
    def representative(self) -> Hashable:
        return self.members[0]

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, item: object) -> bool:
        return item in self.members


def _context_lookup(
    elements: List[Hashable],
    contexts: Any,
    comparator: EquivalenceComparator,
) -> List[Any]:
    """Resolve contexts (None, parallel sequence, or mapping) per element."""
    if contexts is None:
        return [None] * len(elements)
    if isinstance(contexts, Mapping):
        # Elements are mapping keys here; validate them before hashing.
        for e in elements:
            comparator.check_element(e)
        return [contexts.get(e) for e in elements]
    ctx = list(contexts)
    if len(ctx) != len(elements):
        raise ValueError(
            f"contexts has {len(ctx)} entries for {len(elements)} elements."
        )
    return ctx


def equivalence_classes(
    elements: Iterable[Hashable],
    comparator: EquivalenceComparator,
    contexts: Optional[Sequence[Any] | Mapping[Hashable, Any]] = None,
    *,
    verify: Optional[bool] = None,
) -> List[EquivalenceClass]:
    """
    Partition elements by a comparator in a single pass.

    Parameters
    ----------
    elements : iterable
        Elements to classify. Duplicates are kept as separate members.
    comparator : EquivalenceComparator
        Policy supplying class_key (bucketing) and equivalent (checking).
    contexts : sequence or mapping, optional
        Per-element context: a sequence parallel to elements, or a mapping
        element -> context (missing elements get None).
    verify : bool, optional
        Split each key bucket with comparator.equivalent, for policies
        whose keys are hashes. Defaults to EQUIVTOOLS_VERIFY.

    Returns
    -------
    list[EquivalenceClass]
        Classes ordered by first appearance of their representative.
    """
    if verify is None:
        verify = EQUIVTOOLS_VERIFY

    elems = list(elements)
    ctxs = _context_lookup(elems, contexts, comparator)

    # key -> list of (representative context, members) sub-classes
    buckets: Dict[int, List[Tuple[Any, List[Hashable]]]] = {}
    order: List[Tuple[int, int]] = []

    for e, c in zip(elems, ctxs):
        key = comparator.class_key(e, c)
        subs = buckets.setdefault(key, [])
        for rep_ctx, members in subs:
            # Transitivity: comparing with the representative suffices.
            if not verify or comparator.equivalent(members[0], e, rep_ctx, c):
                members.append(e)
                break
        else:
            if subs:
                logger.debug("key %d split: %r not equivalent to %d sub-classes", key, e, len(subs))
            subs.append((c, [e]))
            order.append((key, len(subs) - 1))

    classes = [EquivalenceClass(key=k, members=tuple(buckets[k][i][1])) for k, i in order]
    logger.debug("%d elements -> %d classes under %r", len(elems), len(classes), comparator)
    return classes


def class_sizes(classes: Iterable[EquivalenceClass]) -> Dict[int, List[int]]:
    """Histogram invariant: key -> sorted sizes of the classes with that key."""
    sizes: Dict[int, List[int]] = {}
    for cls in classes:
        sizes.setdefault(cls.key, []).append(len(cls))
    for k in sizes:
        sizes[k].sort()
    return sizes


def match_classes(
    classes_a: Sequence[EquivalenceClass],
    classes_b: Sequence[EquivalenceClass],
    comparator: EquivalenceComparator,
    contexts_a: Optional[Mapping[Hashable, Any]] = None,
    contexts_b: Optional[Mapping[Hashable, Any]] = None,
) -> Optional[List[Tuple[EquivalenceClass, EquivalenceClass]]]:
    """
    Align two partitions made with the same comparator.

    Each class of A is paired with the class of B holding equivalent
    elements. Returns None when no such pairing exists with equal class
    sizes: then no comparator-preserving bijection between the element
    sets exists.

    Contexts are looked up by representative, so they must be mappings
    element -> context (or None). Classes carry no input positions, so
    parallel context sequences cannot be used here.
    """
    for name, ctx in (("contexts_a", contexts_a), ("contexts_b", contexts_b)):
        if ctx is not None and not isinstance(ctx, Mapping):
            raise ValueError(
                f"{name} must be a mapping element -> context, got {type(ctx).__name__}."
            )
    if len(classes_a) != len(classes_b):
        return None

    ctx_a = contexts_a or {}
    ctx_b = contexts_b or {}

    by_key: Dict[int, List[EquivalenceClass]] = {}
    for cls in classes_b:
        by_key.setdefault(cls.key, []).append(cls)

    pairs: List[Tuple[EquivalenceClass, EquivalenceClass]] = []
    for cls in classes_a:
        ra = cls.representative
        candidates = by_key.get(cls.key, [])
        for i, other in enumerate(candidates):
            rb = other.representative
            if comparator.equivalent(ra, rb, ctx_a.get(ra), ctx_b.get(rb)):
                break
        else:
            logger.debug("no partner for class with key %d (size %d)", cls.key, len(cls))
            return None

        if len(other) != len(cls):
            logger.debug("class size mismatch for key %d: %d vs %d", cls.key, len(cls), len(other))
            return None
        pairs.append((cls, candidates.pop(i)))

    return pairs
