"""Classic data structures: stacks, queues, linked lists, trees, tries and Fenwick trees."""

__version__ = "0.1.0"