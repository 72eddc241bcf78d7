"""Heap-based problems: running medians, k-way merging and order statistics."""

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional["ListNode"] = None

    def __iter__(self):
        node = self
        while node is not None:
            yield node.value
            node = node.next


def _halve(total):
    """Halve an integer, truncating toward zero."""
    return -((-total) // 2) if total < 0 else total // 2


def running_medians(values):
    """Yield the median of the values seen so far after each new value.

    With an even number of values the median is the mean of the two middle
    values, truncated toward zero.
    """
    lower = []  # max-heap, stored negated
    upper = []  # min-heap
    median = None
    for value in values:
        if median is None:
            heapq.heappush(lower, -value)
            median = value
        elif len(lower) > len(upper):
            if value < median:
                moved = -heapq.heapreplace(lower, -value)
                heapq.heappush(upper, moved)
            else:
                heapq.heappush(upper, value)
            median = _halve(upper[0] - lower[0])
        elif len(lower) == len(upper):
            if value < median:
                heapq.heappush(lower, -value)
                median = -lower[0]
            else:
                heapq.heappush(upper, value)
                median = upper[0]
        else:
            if value > median:
                moved = heapq.heapreplace(upper, value)
                heapq.heappush(lower, -moved)
            else:
                heapq.heappush(lower, -value)
            median = _halve(upper[0] - lower[0])
        yield median


def merge_k_sorted(heads):
    """Merge sorted linked lists by relinking their nodes; return the new head.

    Returns None when every list is empty.
    """
    tiebreak = count()
    pending = [(node.value, next(tiebreak), node) for node in heads if node is not None]
    heapq.heapify(pending)
    head = tail = None
    while pending:
        _, _, node = heapq.heappop(pending)
        if node.next is not None:
            heapq.heappush(pending, (node.next.value, next(tiebreak), node.next))
        if head is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def sort_nearly_sorted(values, k):
    """Sort values in which every element is at most ``k`` places from home.

    Uses a heap of ``k + 1`` elements. Raises ValueError for negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    values = list(values)
    window = values[: k + 1]
    heapq.heapify(window)
    ordered = [heapq.heapreplace(window, value) for value in values[k + 1:]]
    while window:
        ordered.append(heapq.heappop(window))
    return ordered


def kth_largest_stream(values, k):
    """Yield, after each value, the k-th largest value so far, or -1 if fewer than k.

    Raises ValueError when ``k`` is less than 1.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    window = []
    for value in values:
        if len(window) < k:
            heapq.heappush(window, value)
            yield window[0] if len(window) == k else -1
        else:
            if value > window[0]:
                heapq.heapreplace(window, value)
            yield window[0]


def kth_smallest(values, k):
    """Return the k-th smallest value (1-based).

    Raises ValueError when ``k`` is outside ``1..len(values)``.
    """
    heap = list(values)
    if not 1 <= k <= len(heap):
        raise ValueError("k must be between 1 and the number of values")
    heapq.heapify(heap)
    for _ in range(k - 1):
        heapq.heappop(heap)
    return heap[0]