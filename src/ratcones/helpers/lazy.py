# =============================================================================
# This file is part of ratcones.
#
# ratcones is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# ratcones is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with
# ratcones. If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
#
# -----------------------------------------------------------------------------
# Description:  This module contains a once-computed cell, used to cache the
#               representations of cones.
# -----------------------------------------------------------------------------

# typing
from typing import Callable


class LazySlot:
    """
    A cell whose value is only lazily calculated. It starts either absent, in
    which case it is computed on first access, or present.

    The only state transition is absent -> present. Once present, the slot stays
    present for the lifetime of its owner.

    **Arguments:**
    - `compute`: A function (of no arguments) calculating the value.
    """

    def __init__(self, compute: Callable[[], object]) -> None:
        self._compute = compute
        self._value = None
        self._present = False

    def __repr__(self) -> str:
        if self._present:
            return f"LazySlot({self._value!r})"
        return "LazySlot(<absent>)"

    @property
    def is_present(self) -> bool:
        return self._present

    def get(self) -> object:
        """
        **Description:**
        Returns the value, computing and caching it if it is absent.

        **Arguments:**
        None.

        **Returns:**
        The value.
        """
        if not self._present:
            self.fill(self._compute())
        return self._value

    def peek(self) -> object:
        # the value if present, otherwise None (never computes)
        return self._value if self._present else None

    def fill(self, value: object) -> None:
        """
        **Description:**
        Stores a value in the slot, marking it present. Filling a present slot
        replaces its value. This is only done with an equivalent value (e.g.,
        when canonicalizing).

        **Arguments:**
        - `value`: The value to store.

        **Returns:**
        Nothing.
        """
        self._value = value
        self._present = True
