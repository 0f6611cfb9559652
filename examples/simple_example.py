#!/usr/bin/env python3
"""
Simple seedgen example - enumerate seeds with every strategy on a toy graph.

A stand-in "growth" step marks each seed's closed neighbourhood as a cluster so
the unused_nodes strategy has something to skip.
"""

import sys
import tempfile
from pathlib import Path

import networkx as nx

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from seedgen import Graph, ConstructionError, create_seed_generator, configure_logging


def grow(graph, seed):
    """Toy cluster growth: the seed plus its direct neighbours."""
    nx_graph = graph.to_networkx()
    names = set(seed.names())
    for name in seed.names():
        names.update(nx_graph.neighbors(name))
    return {graph.get_node_index(name) for name in names}


def main():
    configure_logging()

    graph = Graph.from_networkx(nx.karate_club_graph())
    print(f"Graph: {graph.node_count} nodes, {graph.edge_count} edges")

    for specification in ("nodes", "edges"):
        generator = create_seed_generator(specification, graph)
        print(f"{specification}: size()={generator.size()}, first seed={next(generator.iterator()).names()}")

    # unused_nodes: report every grown cluster back to the iterator
    iterator = create_seed_generator("unused_nodes", graph).iterator()
    clusters = []
    for seed in iterator:
        cluster = grow(graph, seed)
        clusters.append(cluster)
        iterator.process_found_cluster(cluster)
    print(f"unused_nodes: {len(clusters)} seeds were needed to cover the graph")

    with tempfile.TemporaryDirectory() as tmp:
        seed_file = Path(tmp) / "seeds.txt"
        seed_file.write_text("0 1 2\n\n33 32 not_a_node\n", encoding="utf-8")
        generator = create_seed_generator(f"file({seed_file})", graph)
        for seed in generator:
            print(f"file seed: {seed.names()}")

    try:
        create_seed_generator("bogus", graph)
    except ConstructionError as e:
        print(f"Rejected specification: {e}")


if __name__ == "__main__":
    main()
