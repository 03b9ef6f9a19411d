"""Classic data structures: search tree, graph, hash table, linked lists, stacks and queues."""

__version__ = "0.1.0"