"""Generic containers: a growable array, a deque, a hash table and a hash set, with their iterators."""

__version__ = "0.1.0"