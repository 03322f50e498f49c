"""
stackcat Stack - Fixed-capacity integer stack
"""

from .errors import StackOverflow, StackUnderflow


DEFAULT_CAPACITY = 256


class BoundedStack:
    """Integer stack with a hard capacity fixed at construction.

    Storage is allocated once; ``clear`` only resets the size so the same
    list is reused for the whole session. Index 0 is the bottom.
    """

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an int, got {capacity!r}")
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self._capacity = capacity
        self._data = [0] * capacity
        self._size = 0

    @property
    def capacity(self):
        return self._capacity

    @property
    def size(self):
        return self._size

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"BoundedStack({self.snapshot()!r}, capacity={self._capacity})"

    def is_empty(self):
        return self._size == 0

    def is_full(self):
        return self._size == self._capacity

    def push(self, value):
        if self.is_full():
            raise StackOverflow('push')
        self._data[self._size] = value
        self._size += 1

    def pop(self):
        if self.is_empty():
            raise StackUnderflow('pop', 1, 0)
        self._size -= 1
        return self._data[self._size]

    def peek(self):
        if self.is_empty():
            raise StackUnderflow('peek', 1, 0)
        return self._data[self._size - 1]

    def clear(self):
        self._size = 0

    def snapshot(self):
        """Current values, bottom to top"""
        return self._data[:self._size]


def render_stack(stack):
    """Bottom-to-top listing, e.g. ``Stack: [ 1 2 3 ]``"""
    items = ''.join(f"{value} " for value in stack.snapshot())
    return f"Stack: [ {items}]"
