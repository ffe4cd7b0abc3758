from .comparator import (
    TypeMismatchError,
    EquivalenceComparator,
    UniformComparator,
    EqualsComparator,
    ComparatorChain,
)
from .parity import PARITY, ParityComparator
from .attributes import AttributeComparator

__all__ = [
    "TypeMismatchError",
    "EquivalenceComparator",
    "UniformComparator",
    "EqualsComparator",
    "ComparatorChain",
    "PARITY",
    "ParityComparator",
    "AttributeComparator",
]
