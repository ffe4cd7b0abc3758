from .classes import (
    EQUIVTOOLS_VERIFY,
    EquivalenceClass,
    equivalence_classes,
    class_sizes,
    match_classes,
)
from .graph import vertex_classes, edge_classes, classes_compatible

__all__ = [
    "EQUIVTOOLS_VERIFY",
    "EquivalenceClass",
    "equivalence_classes",
    "class_sizes",
    "match_classes",
    "vertex_classes",
    "edge_classes",
    "classes_compatible",
]
