"""Classic array, string, graph, greedy, heap and backtracking algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "backtracking", "graph", "greedy", "heaps", "maxheap", "strings"]