"""Complex and rational numbers, bit sets, dynamic arrays, stacks, queues and a priority queue."""

__version__ = "0.1.0"