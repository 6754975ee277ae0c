"""Classic graph algorithms: traversals, cycles, topological order, shortest paths,
spanning trees, union-find and grid problems."""

__version__ = "0.1.0"