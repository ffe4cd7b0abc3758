"""
equivtools: equivalence comparators for graph isomorphism pruning, and
partitioning of elements (or networkx graph vertices and edges) into
comparator equivalence classes.
"""

import logging

from .equivalence.comparator import (
    TypeMismatchError,
    EquivalenceComparator,
    UniformComparator,
    EqualsComparator,
    ComparatorChain,
)
from .equivalence.parity import PARITY, ParityComparator
from .equivalence.attributes import AttributeComparator
from .partition.classes import (
    EquivalenceClass,
    equivalence_classes,
    class_sizes,
    match_classes,
)
from .partition.graph import vertex_classes, edge_classes, classes_compatible

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Contract
    "TypeMismatchError",
    "EquivalenceComparator",
    # Policies
    "UniformComparator",
    "EqualsComparator",
    "ComparatorChain",
    "PARITY",
    "ParityComparator",
    "AttributeComparator",
    # Partitioning
    "EquivalenceClass",
    "equivalence_classes",
    "class_sizes",
    "match_classes",
    # Graphs
    "vertex_classes",
    "edge_classes",
    "classes_compatible",
]
