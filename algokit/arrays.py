"""Array problems: index gaps, matching, pair sums, waves, majorities."""

from collections import Counter
from itertools import accumulate, count


def max_index_diff(values):
    """Return the largest ``j - i`` such that ``values[i] <= values[j]``.

    Raises ValueError for an empty sequence.
    """
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    left_min = list(accumulate(values, min))
    right_max = list(accumulate(reversed(values), max))[::-1]
    size = len(values)
    i = j = 0
    best = -1
    while i < size and j < size:
        if left_min[i] <= right_max[j]:
            best = max(best, j - i)
            j += 1
        else:
            i += 1
    return best


def match_nuts_and_bolts(nuts, bolts):
    """Return the nuts that have a matching bolt, in sorted order.

    Each bolt matches at most one nut.
    """
    available = Counter(bolts)
    matched = []
    for nut in sorted(nuts):
        if available[nut] > 0:
            matched.append(nut)
            available[nut] -= 1
    return matched


def closest_to_zero_sum(values):
    """Return the sum of two elements that is closest to zero.

    Elements are ordered by absolute value and neighbouring pairs compared;
    on a tie the later pair wins. Raises ValueError for fewer than two values.
    """
    ordered = sorted(values, key=abs)
    if len(ordered) < 2:
        raise ValueError("at least two values are required")
    best = None
    for first, second in zip(ordered, ordered[1:]):
        total = first + second
        if best is None or abs(total) <= abs(best):
            best = total
    return best


def wave_array(values):
    """Return the sorted values with each adjacent pair swapped: a >= b <= c >= d ..."""
    ordered = sorted(values)
    paired = len(ordered) // 2 * 2
    ordered[0:paired:2], ordered[1:paired:2] = ordered[1:paired:2], ordered[0:paired:2]
    return ordered


def majority_element(values):
    """Return the value occurring more than ``len(values) // 2`` times, or None."""
    values = list(values)
    threshold = len(values) // 2
    return next(
        (value for value, seen in Counter(values).items() if seen > threshold),
        None,
    )


def smallest_missing_positive(values):
    """Return the smallest positive integer not present in ``values``."""
    present = set(values)
    return next(candidate for candidate in count(1) if candidate not in present)