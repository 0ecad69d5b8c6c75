"""Classic data structures and algorithms: linked lists, trees, graphs, hash maps, queues, stacks, tries and backtracking."""

__version__ = "0.1.0"