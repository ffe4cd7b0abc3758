"""Comparator partitions of networkx graphs."""
from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from equivtools.equivalence.comparator import EquivalenceComparator
from equivtools.partition.classes import EquivalenceClass, equivalence_classes, match_classes


def _vertex_contexts(G: nx.Graph) -> Dict[Hashable, Dict[str, Any]]:
    return {v: G.nodes[v] for v in G.nodes()}


def _edge_contexts(G: nx.Graph) -> Dict[Tuple[Hashable, Hashable], Dict[str, Any]]:
    return {(u, v): d for u, v, d in G.edges(data=True)}


def vertex_classes(
    G: nx.Graph,
    comparator: EquivalenceComparator,
    *,
    verify: Optional[bool] = None,
) -> List[EquivalenceClass]:
    """
    Partition the vertices of G.

    Elements are node labels in G.nodes order; each node's attribute dict
    is its context.
    """
    ctx = _vertex_contexts(G)
    return equivalence_classes(list(ctx), comparator, ctx, verify=verify)


def edge_classes(
    G: nx.Graph,
    comparator: EquivalenceComparator,
    *,
    verify: Optional[bool] = None,
) -> List[EquivalenceClass]:
    """
    Partition the edges of G.

    Elements are (u, v) pairs as reported by G.edges; each edge's
    attribute dict is its context.
    """
    ctx = _edge_contexts(G)
    return equivalence_classes(list(ctx), comparator, ctx, verify=verify)


def classes_compatible(
    GA: nx.Graph,
    GB: nx.Graph,
    comparator: EquivalenceComparator,
    *,
    edges: bool = False,
) -> bool:
    """
    Pruning check before an isomorphism search.

    False means no isomorphism GA -> GB can map every vertex (or edge,
    with edges=True) to an equivalent one. True is necessary, not
    sufficient, for such an isomorphism.
    """
    if GA.number_of_nodes() != GB.number_of_nodes():
        return False
    if GA.number_of_edges() != GB.number_of_edges():
        return False

    if edges:
        ctx_a, ctx_b = _edge_contexts(GA), _edge_contexts(GB)
    else:
        ctx_a, ctx_b = _vertex_contexts(GA), _vertex_contexts(GB)

    classes_a = equivalence_classes(list(ctx_a), comparator, ctx_a)
    classes_b = equivalence_classes(list(ctx_b), comparator, ctx_b)
    return match_classes(classes_a, classes_b, comparator, ctx_a, ctx_b) is not None
