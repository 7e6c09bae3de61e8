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
Module containing streaming top-k selection over weighted items.

A stream of any length is reduced to the k items of greatest weight, in
descending order of weight, whilst only ever retaining k + 1 items at once.
"""

import logging
from numbers import Integral
from typing import Generic, Iterable, TextIO, TypeVar, final

from heapselect.auxiliary.errors import InvalidArgumentError
from heapselect.auxiliary.typingutils import SupportsWeight
from heapselect.datahandling.streams import read_datapoints
from heapselect.datastructures.queues import HeapPQueue
from heapselect.datastructures.records import DataPoint

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "TopKSelector",
    "top_k",
    "top_k_from_stream"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return tuple(sorted(__all__))


WT = TypeVar("WT", bound=SupportsWeight)


def _check_k(k: int) -> int:
    """Return k as an int, numpy integers included. Bools are rejected."""
    if isinstance(k, bool) or not isinstance(k, Integral):
        raise TypeError(f"k must be an integer. Got; {type(k).__name__}.")
    k = int(k)
    if k < 0:
        raise InvalidArgumentError(
            f"k must be a non-negative integer. Got; {k}.")
    return k


@final
class TopKSelector(Generic[WT]):
    """
    Accumulates the k items of greatest weight pushed to it.

    Internally a min-heap holds the current top k, every push that takes the
    heap over k items evicts the lightest. A selector is single use, getting
    the result drains it.
    """

    __SELECTOR_LOGGER = logging.getLogger("TopKSelector")

    __slots__ = {
        "__k": "The number of items to select.",
        "__heap": "Min-heap of the current top k items.",
        "__seen": "The number of items pushed so far.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(self, k: int, debug: bool = False) -> None:
        """
        Create a new top-k selector.

        Parameters
        ----------
        `k: int` - The number of items of greatest weight to select.

        `debug: bool = False` - Whether to log debug messages.

        Raises
        ------
        `TypeError` - If k is not an integer.

        `InvalidArgumentError` - If k is negative.
        """
        self.__k: int = _check_k(k)
        self.__heap: HeapPQueue[WT] = HeapPQueue(debug=debug)
        self.__seen: int = 0
        self.__debug: bool = debug

    def __str__(self) -> str:
        """Return a string representation of the selector."""
        return (f"Top-{self.__k} Selector holding {len(self)} of "
                f"{self.__seen} items seen")

    def __len__(self) -> int:
        """Return the number of items currently held."""
        return len(self.__heap)

    @property
    def k(self) -> int:
        """Get the number of items to select."""
        return self.__k

    @property
    def seen(self) -> int:
        """Get the number of items pushed so far."""
        return self.__seen

    def push(self, item: WT, /) -> None:
        """
        Push an item to the selector.

        If this takes the selector over k items, the lightest item held is
        evicted.
        """
        self.__seen += 1
        self.__heap.enqueue(item)
        if len(self.__heap) > self.__k:
            self.__heap.dequeue()

    def push_from(self, iterable: Iterable[WT], /) -> None:
        """Push every item of an iterable to the selector, one at a time."""
        for item in iterable:
            self.push(item)

    def result(self) -> list[WT]:
        """
        Drain the selector and return its items in descending weight order.

        Returns
        -------
        `list[WT]` - The min(k, seen) items of greatest weight, heaviest
        first. Equal weight items are in no particular relative order.
        """
        size = len(self.__heap)
        if self.__debug:
            self.__SELECTOR_LOGGER.debug(
                "Selecting top %s: kept=%s, evicted=%s",
                self.__k, size, self.__seen - size
            )
        selected: list[WT | None] = [None] * size
        for index in range(size - 1, -1, -1):
            selected[index] = self.__heap.dequeue()
        return selected  # type: ignore[return-value]


def top_k(iterable: Iterable[WT], k: int) -> list[WT]:
    """
    Select the k items of greatest weight from an iterable.

    The iterable is consumed lazily, one item at a time, so arbitrarily long
    streams can be reduced using storage proportional to k.

    Parameters
    ----------
    `iterable: Iterable[WT]` - The weighted items to select from.

    `k: int` - The number of items to select.

    Returns
    -------
    `list[WT]` - The min(k, n) items of greatest weight, in descending order
    of weight, where n is the number of items in the iterable.

    Raises
    ------
    `TypeError` - If k is not an integer.

    `InvalidArgumentError` - If k is negative. No item is consumed from the
    iterable in this case.
    """
    selector: TopKSelector[WT] = TopKSelector(k)
    selector.push_from(iterable)
    return selector.result()


def top_k_from_stream(stream: TextIO, k: int) -> list[DataPoint]:
    """
    Select the k data points of greatest weight from a text stream.

    The stream is decoded lazily with `read_datapoints()`.

    Raises
    ------
    `InvalidArgumentError` - If k is negative, before reading the stream.

    `StreamFormatError` - If a malformed line is read.
    """
    k = _check_k(k)
    return top_k(read_datapoints(stream), k)
