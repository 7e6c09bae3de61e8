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

"""Module for all heap and selection related errors."""

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "HeapSelectError",
    "EmptyQueueError",
    "InvalidArgumentError",
    "StreamFormatError"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class HeapSelectError(Exception):
    """Base class for all errors raised by heapselect."""
    pass


class EmptyQueueError(HeapSelectError, IndexError):
    """Raised when peeking at or dequeuing from an empty queue."""
    pass


class InvalidArgumentError(HeapSelectError, ValueError):
    """Raised when an argument violates a precondition, e.g. a negative k."""
    pass


class StreamFormatError(HeapSelectError, ValueError):
    """Raised when a record stream contains a malformed line."""

    def __init__(self, message: str, line_number: int) -> None:
        """
        Create a new stream format error.

        Parameters
        ----------
        `message: str` - Description of the problem.

        `line_number: int` - The one-based line number of the offending row.
        """
        super().__init__(f"Line {line_number}: {message}")
        self.line_number: int = line_number
