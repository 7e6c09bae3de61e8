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

"""Module defining typing protocols for weighted items."""

# Useful links for typing:
#      - Type hints: https://docs.python.org/3/library/typing.html
#      - Nominal versus structural typing: https://docs.python.org/3/library/typing.html#nominal-vs-structural-subtyping
#          - Protocols: https://peps.python.org/pep-0544/

from numbers import Real
from typing import Protocol, runtime_checkable

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "SupportsWeight",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


@runtime_checkable
class SupportsWeight(Protocol):
    """
    Protocol for type hinting and checking items that carry a real valued
    `weight` attribute, by which heap priority queues order them.
    """

    @property
    def weight(self) -> Real:
        ...
