import networkx as nx

from equivtools import PARITY, AttributeComparator, ComparatorChain
from equivtools import equivalence_classes, vertex_classes, classes_compatible

for cls in equivalence_classes([1, 2, 3, 4, 5, 6, -1, -4], PARITY):
    print("key", cls.key, "members", cls.members)

# Cycle C6 with alternating colors vs. a path P6 with the same colors
GA = nx.cycle_graph(6)
GB = nx.path_graph(6)
for G in (GA, GB):
    nx.set_node_attributes(G, {v: ("red" if v % 2 else "blue") for v in G}, "color")

by_color = AttributeComparator("color")
both = ComparatorChain(PARITY, by_color)

print("C6 classes:", [c.members for c in vertex_classes(GA, both)])
print("Compatible by color?", classes_compatible(GA, GA.copy(), by_color))
print("C6 vs P6 compatible?", classes_compatible(GA, GB, by_color))
