"""Containers and algorithms: array, deque, linked lists, queues, ordered maps, bitmap, bloom filter, HAMT, consistent hashing and iterator-based sorting."""

__version__ = "0.1.0"