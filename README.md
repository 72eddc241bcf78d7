# algokit

A small collection of classic algorithms written as plain Python functions.
It covers arrays, strings, graphs, greedy scheduling, heaps and backtracking.
There are no third-party dependencies.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.arrays`
  - `max_index_diff(values)`: largest `j - i` with `values[i] <= values[j]`
  - `match_nuts_and_bolts(nuts, bolts)`: the nuts with a matching bolt, sorted
  - `closest_to_zero_sum(values)`: the pair sum closest to zero
  - `wave_array(values)`: sorted values with adjacent pairs swapped
  - `majority_element(values)`: the value seen more than half the time, or `None`
  - `smallest_missing_positive(values)`
- `algokit.backtracking`
  - `n_queens(n)`: every placement, as lists of 1-based rows per column
  - `boggle_words(dictionary, board)`: sorted dictionary words traceable on the board
  - `rat_in_maze(maze)`: sorted move strings (`L`, `D`, `U`, `R`) through a square maze
- `algokit.graph`
  - `path_exists(grid)`: whether the cell holding 2 is reachable from the cell holding 1
  - `snake_and_ladder(jumps)`: fewest throws from cell 1 to cell 30, or -1
- `algokit.greedy`
  - `spanning_tree_weight(graph)`: minimum spanning tree weight of an adjacency matrix
  - `merge(left, right)`, `merge_sort(values)`
  - `meeting_order(starts, ends)`: 1-based positions of meetings chosen by earliest finish
  - `max_activities(starts, ends)`: how many activities fit one after another
- `algokit.heaps`
  - `ListNode`: a singly linked list node; iterating it yields the list's values
  - `running_medians(values)`: generator of the median after each value
  - `merge_k_sorted(heads)`: merges sorted linked lists by relinking their nodes
  - `sort_nearly_sorted(values, k)`
  - `kth_largest_stream(values, k)`: generator of the k-th largest so far, or -1
  - `kth_smallest(values, k)`
- `algokit.maxheap`
  - `MaxHeap`: `push`, `pop_max`, `peek`, `len()` and iteration in heap-array order
  - `heap_sort(values)`: ascending sort built on a max-heap
- `algokit.strings`
  - `excel_column(n)`, `to_roman(n)`
  - `find_substring(text, pattern)`: Knuth-Morris-Pratt search, -1 when absent
  - `longest_unique_substring(text)`
  - `is_alnum_palindrome(text)`, `drop_repeated_letters(text)`, `is_rotation(first, second)`

Invalid input such as an empty sequence or an out-of-range `k` raises `ValueError`;
popping or peeking at an empty `MaxHeap` raises `IndexError`.

## Examples

```python
from algokit.strings import excel_column, to_roman, find_substring
from algokit.maxheap import MaxHeap, heap_sort
from algokit.heaps import running_medians
from algokit.backtracking import n_queens

excel_column(28)                 # "AB"
to_roman(1994)                   # "MCMXCIV"
find_substring("hello", "ll")    # 2

heap = MaxHeap()
for value in (10, 30, 20, 50):
    heap.push(value)
heap.pop_max()                   # 50
heap_sort([10, 50, 30, 20, 5, 80])  # [5, 10, 20, 30, 50, 80]

list(running_medians([5, 15, 1, 3]))  # [5, 10, 5, 4]

n_queens(4)                      # [[2, 4, 1, 3], [3, 1, 4, 2]]
```

## What it does not do

The package is a library only. It has no command-line program and does not read
problems from standard input; call the functions from your own code.