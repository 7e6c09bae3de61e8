###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""
Module containing an array-backed binary heap priority queue.

The queue is for algorithmic use. It is not thread-safe, and not intended to be
used in multi-threaded or multi-process applications without external locking.
Use the Python standard library `queue` module instead for such purposes.

Unlike the standard library `heapq` module, the heap manages its own backing
buffer explicitly. The buffer is allocated with a small fixed capacity and
doubles in size whenever it is full, it never shrinks, and slots vacated by
dequeued items are cleared so the queue never holds on to removed items.
"""

import collections.abc
import logging
from typing import Iterable, Iterator, TypeVar

from heapselect.auxiliary.errors import EmptyQueueError
from heapselect.auxiliary.typingutils import SupportsWeight

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "DEFAULT_INITIAL_CAPACITY",
    "HeapPQueue"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return tuple(sorted(__all__))


DEFAULT_INITIAL_CAPACITY: int = 4


WT = TypeVar("WT", bound=SupportsWeight)


class HeapPQueue(collections.abc.Collection[WT]):
    """
    A binary min-heap priority queue over weighted items.

    The item with the smallest weight is always at the front of the queue.
    Items are stored in a flat buffer treated as a complete binary tree in
    level order, where the parent of slot `i` is slot `(i + 1) // 2 - 1`.
    Items of equal weight are not necessarily dequeued in insertion order.

    Iterating over the queue yields items in buffer order, not priority
    order, use `iter_ordered()` for the latter.

    Instances are not thread-safe.
    """

    __HEAP_LOGGER = logging.getLogger("HeapPQueue")

    __slots__ = {
        "__buffer": "The backing buffer, live items occupy a prefix of it.",
        "__size": "The number of live items in the buffer.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(
        self,
        *items: WT,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        debug: bool = False
    ) -> None:
        """
        Create a heap priority queue from a series of weighted items.

        Parameters
        ----------
        `*items: WT` - Items to enqueue initially, in the given order.

        `initial_capacity: int = 4` - The number of slots allocated for the
        backing buffer before it first needs to grow. Must be positive.

        `debug: bool = False` - Whether to log debug messages.

        Raises
        ------
        `TypeError` - If the initial capacity is not an integer.

        `ValueError` - If the initial capacity is not positive.
        """
        if not isinstance(initial_capacity, int):
            raise TypeError("initial_capacity must be an integer.")
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be a positive integer.")

        self.__debug: bool = debug
        self.__buffer: list[WT | None] = [None] * initial_capacity
        self.__size: int = 0

        if self.__debug:
            self.__HEAP_LOGGER.debug(
                "Creating new heap priority queue with: "
                "initial_capacity=%s, items=%s",
                initial_capacity, len(items)
            )

        for item in items:
            self.enqueue(item)

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[WT], /, *,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        debug: bool = False
    ) -> "HeapPQueue[WT]":
        """Create a heap priority queue from an iterable of weighted items."""
        queue: "HeapPQueue[WT]" = cls(
            initial_capacity=initial_capacity,
            debug=debug
        )
        queue.enqueue_from(iterable)
        return queue

    # pylint: disable=W0212,W0238
    def copy(self) -> "HeapPQueue[WT]":
        """Return a shallow copy of the queue, with the same capacity."""
        queue: "HeapPQueue[WT]" = self.__class__(
            initial_capacity=len(self.__buffer),
            debug=self.__debug
        )
        queue.__buffer = self.__buffer.copy()
        queue.__size = self.__size
        return queue

    def __str__(self) -> str:
        """Return a string representation of the queue."""
        return f"Heap Priority Queue with {len(self)} items"

    def __repr__(self) -> str:
        """Return an instantiable string representation of the queue."""
        heap = ", ".join(
            repr(item)
            for item in self
        )
        return f"{self.__class__.__name__}({heap})"

    def __contains__(self, item: object) -> bool:
        """Return whether an item is in the queue."""
        return any(item == other for other in self)

    def __iter__(self) -> Iterator[WT]:
        """
        Return an iterator over the items in the queue.

        The items are yielded in buffer order (not in priority order).
        """
        for index in range(self.__size):
            yield self.__buffer[index]  # type: ignore[misc]

    def __len__(self) -> int:
        """Return the number of items in the queue."""
        return self.__size

    def __bool__(self) -> bool:
        """Return True if the queue is not empty."""
        return self.__size != 0

    def size(self) -> int:
        """Return the number of items in the queue."""
        return self.__size

    def is_empty(self) -> bool:
        """Return whether the queue is empty."""
        return self.size() == 0

    @property
    def capacity(self) -> int:
        """Get the number of slots allocated for the backing buffer."""
        return len(self.__buffer)

    def iter_ordered(self) -> Iterator[WT]:
        """
        Iterate over the items in the queue in priority order.

        The queue is not modified. Each step searches the frontier of
        unvisited nodes, whose parents have all been yielded already.

        Returns
        -------
        `Iterator[WT]` - An iterator over the items in the queue in priority
        order.
        """
        if not self:
            return
        buffer = self.__buffer
        size = self.__size
        indices: list[int] = [0]
        while indices:
            min_index = min(indices, key=lambda i: buffer[i].weight)
            yield buffer[min_index]  # type: ignore[misc]
            indices.remove(min_index)
            index: int = (min_index * 2) + 1
            if index < size:
                indices.append(index)
            if index + 1 < size:
                indices.append(index + 1)

    def debug_info(self) -> list[WT]:
        """
        Log and return the items in the queue in buffer order.

        Each item is logged on its own line at debug level.
        """
        items = list(self)
        for index, item in enumerate(items):
            self.__HEAP_LOGGER.debug("[%s] %s", index, item)
        return items

    def enqueue(self, item: WT, /) -> None:
        """
        Enqueue an item in-place.

        If the backing buffer is full it is grown first. The item is placed
        in the first free slot and bubbled up until its parent's weight is
        not greater than its own.

        Parameters
        ----------
        `item: WT@HeapPQueue` - The item to enqueue.
        """
        if self.__size == len(self.__buffer):
            self.__grow()
        buffer = self.__buffer
        position = self.__size
        buffer[position] = item
        self.__size += 1

        weight = item.weight
        parent = (position + 1) // 2 - 1
        while position > 0 and weight < buffer[parent].weight:
            buffer[position], buffer[parent] = buffer[parent], buffer[position]
            position = parent
            parent = (position + 1) // 2 - 1

    def enqueue_all(self, *items: WT) -> None:
        """
        Enqueue a series of items in-place.

        Parameters
        ----------
        `*items: WT@HeapPQueue` - The items to enqueue.
        """
        for item in items:
            self.enqueue(item)

    def enqueue_from(self, iterable: Iterable[WT], /) -> None:
        """
        Enqueue an iterable of items in-place.

        Parameters
        ----------
        `iterable: Iterable[WT@HeapPQueue]` - The items to enqueue.
        """
        for item in iterable:
            self.enqueue(item)

    def peek(self) -> WT:
        """
        Peek at the lowest weight item in the queue.

        Returns
        -------
        `WT@HeapPQueue` - The lowest weight item.

        Raises
        ------
        `EmptyQueueError` - If the queue is empty.
        """
        if self.is_empty():
            raise EmptyQueueError("Peek at empty heap priority queue.")
        return self.__buffer[0]  # type: ignore[return-value]

    def dequeue(self) -> WT:
        """
        Dequeue the lowest weight item from the queue.

        The last item in the buffer replaces the front item and is bubbled
        down, swapping with the lighter of its children (the right child if
        they weigh the same) until it weighs no more than them.

        Returns
        -------
        `WT@HeapPQueue` - The lowest weight item.

        Raises
        ------
        `EmptyQueueError` - If the queue is empty.
        """
        if self.is_empty():
            raise EmptyQueueError("Dequeue from empty heap priority queue.")
        buffer = self.__buffer
        result = buffer[0]
        self.__size -= 1
        size = self.__size
        buffer[0] = buffer[size]
        buffer[size] = None

        position = 0
        left = 1
        right = 2
        # Both children exist.
        while right < size:
            item = buffer[position]
            left_weight = buffer[left].weight
            right_weight = buffer[right].weight
            if item.weight <= left_weight and item.weight <= right_weight:
                return result  # type: ignore[return-value]
            child = left if left_weight < right_weight else right
            buffer[position], buffer[child] = buffer[child], item
            position = child
            left = (position * 2) + 1
            right = left + 1
        # Only a left child exists, it must be a leaf.
        if left < size and buffer[position].weight > buffer[left].weight:
            buffer[position], buffer[left] = buffer[left], buffer[position]
        return result  # type: ignore[return-value]

    def __grow(self) -> None:
        """Double the capacity of the backing buffer."""
        old_capacity = len(self.__buffer)
        new_buffer: list[WT | None] = [None] * (old_capacity * 2)
        new_buffer[:self.__size] = self.__buffer[:self.__size]
        self.__buffer = new_buffer
        if self.__debug:
            self.__HEAP_LOGGER.debug(
                "Grew heap priority queue buffer: capacity %s -> %s",
                old_capacity, len(new_buffer)
            )
