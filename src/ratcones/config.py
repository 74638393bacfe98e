# This file is part of ratcones.
#
# ratcones is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# ratcones is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with ratcones.  If not, see <https://www.gnu.org/licenses/>.

"""
This module contains various configuration variables.
"""

import numpy as np

# The machine integer type used when narrowing output (e.g.,
# `cone.rays(dtype=config.narrow_dtype)`). Entries that don't fit are replaced
# by 0 and a RangeOverflowWarning is issued.
narrow_dtype = np.int32

# Converting between rays and inequalities may take a while for large ambient
# dimensions. A warning is issued at or above this dimension.
large_hull_dimension = 12

# The default verbosity of hull computations.
verbosity = 0


def set_narrow_dtype(dtype):
    """
    **Description:**
    Sets the machine integer type used when narrowing output.

    **Arguments:**
    - `dtype`: A numpy integer type, such as `numpy.int32` or `numpy.int64`.

    **Returns:**
    Nothing.

    **Example:**
    ```python {3}
    import numpy as np
    import ratcones
    ratcones.config.set_narrow_dtype(np.int64)
    ```
    """
    global narrow_dtype
    if not np.issubdtype(np.dtype(dtype), np.integer):
        raise ValueError(f"{dtype} is not an integer type.")
    narrow_dtype = dtype
