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

# Make the main class and functions accessible from the root of ratcones.
from ratcones import config
from ratcones.cone import Cone, intersection
from ratcones.errors import (
    DimensionMismatchError,
    GeometricPreconditionWarning,
    InvalidArgumentError,
    InvalidStateError,
    RangeOverflowWarning,
)

# Latest version
version = "0.1.0"
