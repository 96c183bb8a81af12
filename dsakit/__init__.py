"""Classic data structures and algorithms: sorting, searching, lists, stacks,
queues, trees, graphs and backtracking."""

__version__ = "0.1.0"