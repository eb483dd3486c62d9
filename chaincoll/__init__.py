"""Container types: arrays, rings, stacks, queues, linked lists, maps, string builders and binary trees."""

__version__ = "0.1.0"