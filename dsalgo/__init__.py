"""Classic data structures and algorithms: lists, stacks, queues, trees, graphs, searching and sorting."""

__version__ = "0.1.0"