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
Module containing functions for reading, writing and generating streams of
data points.

Streams are text, one data point per line, as a tab separated name and
weight. Names are always quoted, so they may hold tabs, quotes or line
breaks of any kind.
"""

import csv
import io
import math
from numbers import Real
from typing import Iterable, Iterator, TextIO

import numpy as np

from heapselect.auxiliary.errors import StreamFormatError
from heapselect.datastructures.records import DataPoint

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "0.1.0"

__all__ = (
    "write_datapoints",
    "read_datapoints",
    "as_stream",
    "random_datapoints"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


_DELIMITER: str = "\t"
_CHUNK_SIZE: int = 1024


def write_datapoints(stream: TextIO, datapoints: Iterable[DataPoint]) -> int:
    """
    Write data points to a text stream.

    Parameters
    ----------
    `stream: TextIO` - The stream to write to.

    `datapoints: Iterable[DataPoint]` - The data points to write.

    Returns
    -------
    `int` - The number of data points written.
    """
    writer = csv.writer(
        stream,
        delimiter=_DELIMITER,
        lineterminator="\n",
        quoting=csv.QUOTE_NONNUMERIC
    )
    count: int = 0
    for point in datapoints:
        writer.writerow((point.name, point.weight))
        count += 1
    return count


def _parse_weight(text: str, line_number: int) -> Real:
    """Parse a weight as an integer if possible, otherwise as a float."""
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        weight = float(text)
    except ValueError:
        raise StreamFormatError(
            f"Weight {text!r} is not a number.", line_number
        ) from None
    if math.isnan(weight):
        raise StreamFormatError("Weight must not be NaN.", line_number)
    return weight


def read_datapoints(stream: TextIO) -> Iterator[DataPoint]:
    """
    Lazily read data points from a text stream.

    Blank lines are skipped.

    Parameters
    ----------
    `stream: TextIO` - The stream to read from.

    Yields
    ------
    `DataPoint` - The data points, in stream order.

    Raises
    ------
    `StreamFormatError` - If a line is not valid tab separated text, or does
    not hold exactly a name and a numeric weight.
    """
    reader = csv.reader(stream, delimiter=_DELIMITER)
    try:
        for row in reader:
            if not row:
                continue
            if len(row) != 2:
                raise StreamFormatError(
                    f"Expected a name and a weight, got {len(row)} fields.",
                    reader.line_num
                )
            name, weight = row
            yield DataPoint(name, _parse_weight(weight, reader.line_num))
    except csv.Error as error:
        raise StreamFormatError(str(error), reader.line_num) from error


def as_stream(datapoints: Iterable[DataPoint]) -> io.StringIO:
    """Return an in-memory text stream holding the given data points."""
    stream = io.StringIO()
    write_datapoints(stream, datapoints)
    stream.seek(0)
    return stream


def random_datapoints(
    count: int,
    low: int,
    high: int, *,
    name: str = "",
    seed: int | None = None
) -> Iterator[DataPoint]:
    """
    Lazily generate data points with uniformly random integer weights.

    Parameters
    ----------
    `count: int` - The number of data points to generate.

    `low: int` - The smallest possible weight.

    `high: int` - The largest possible weight (inclusive).

    `name: str = ""` - The name given to every data point.

    `seed: int | None = None` - Seed for the random generator, if None then
    fresh entropy is used.

    Raises
    ------
    `ValueError` - If count is negative or low is greater than high.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative. Got; {count}.")
    if low > high:
        raise ValueError(f"low must not exceed high. Got; {low} > {high}.")
    rng = np.random.default_rng(seed)
    return _generate(rng, count, low, high, name)


def _generate(
    rng: np.random.Generator,
    count: int,
    low: int,
    high: int,
    name: str
) -> Iterator[DataPoint]:
    remaining = count
    while remaining > 0:
        size = min(remaining, _CHUNK_SIZE)
        for weight in rng.integers(low, high, size=size, endpoint=True):
            yield DataPoint(name, int(weight))
        remaining -= size
