"""Greedy algorithms: minimum spanning tree, merging and interval selection."""

import heapq
import math
from itertools import count


def spanning_tree_weight(graph):
    """Return the weight of a minimum spanning tree of an adjacency matrix.

    A zero entry means there is no edge. Vertices not reachable from vertex 0
    add nothing to the total. Raises ValueError for a non-square matrix.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return 0
    dist = [math.inf] * size
    dist[0] = 0
    in_tree = [False] * size
    for _ in range(size - 1):
        nearest = min((v for v in range(size) if not in_tree[v]), key=dist.__getitem__)
        if dist[nearest] == math.inf:
            break
        in_tree[nearest] = True
        for v, weight in enumerate(graph[nearest]):
            if not in_tree[v] and weight and weight < dist[v]:
                dist[v] = weight
    return sum(d for d in dist if d != math.inf)


def merge(left, right):
    """Merge two sorted sequences into one sorted list; ties keep ``left`` first."""
    return list(heapq.merge(left, right))


def merge_sort(values):
    """Return a new sorted list built by recursive merging."""
    values = list(values)
    if len(values) <= 1:
        return values
    middle = len(values) // 2
    return merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _by_end(starts, ends):
    starts, ends = list(starts), list(ends)
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    return sorted(zip(starts, ends, count(1)), key=lambda interval: interval[1])


def _select(starts, ends):
    last_end = None
    for start, end, position in _by_end(starts, ends):
        if last_end is None or start >= last_end:
            last_end = end
            yield position


def meeting_order(starts, ends):
    """Return the 1-based positions of meetings picked by earliest finish.

    A meeting is kept when it starts no earlier than the last kept one ends.
    """
    return list(_select(starts, ends))


def max_activities(starts, ends):
    """Return the largest number of activities that can be done one at a time."""
    return sum(1 for _ in _select(starts, ends))