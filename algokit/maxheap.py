"""An array-backed max-heap and heap sort."""


class MaxHeap:
    """A max-heap of comparable values stored in a list."""

    def __init__(self, values=()):
        self._items = []
        for value in values:
            self.push(value)

    def _sift_up(self, index):
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] < items[index]:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                break

    def _sift_down(self, index):
        _sift_down(self._items, len(self._items), index)

    def push(self, value):
        """Add a value to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop_max(self):
        """Remove and return the largest value; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self):
        """Return the largest value without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Iterate over the values in their heap-array order."""
        return iter(list(self._items))

    def __repr__(self):
        return f"MaxHeap({self._items!r})"


def _sift_down(items, size, index):
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values):
    """Return a new list of the values in ascending order, sorted with a max-heap."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items