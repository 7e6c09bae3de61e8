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

"""Module containing the weighted data point record type."""

from dataclasses import dataclass
from numbers import Real

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "DataPoint",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return tuple(sorted(__all__))


@dataclass(frozen=True)
class DataPoint:
    """
    An immutable named and weighted record.

    Data points are ordered by weight alone, but two data points are only
    equal if both their names and weights are equal. Consequently, two data
    points of equal weight are neither less nor greater than each other, yet
    may still compare unequal.
    """

    name: str
    weight: Real

    def __str__(self) -> str:
        """Return a string representation of the data point."""
        return f"{{ {self.name!r}, {self.weight} }}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return self.weight >= other.weight
