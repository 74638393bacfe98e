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
# Description:  The errors and warnings raised by ratcones.
# -----------------------------------------------------------------------------


# fatal
# -----
class DimensionMismatchError(ValueError):
    """
    Raised when the dimensions of the operands (widths of matrices, ambient
    dimensions of cones, lengths of vectors) disagree.
    """


class InvalidArgumentError(ValueError):
    """
    Raised when a scalar parameter is outside of its valid domain.
    """


class InvalidStateError(RuntimeError):
    """
    Raised when a derived quantity is requested from a cone that doesn't
    satisfy its precondition.
    """


# non-fatal
# ---------
class RangeOverflowWarning(UserWarning):
    """
    Issued when an exact integer doesn't fit in the requested machine width.
    The offending entries are replaced by 0.
    """


class GeometricPreconditionWarning(UserWarning):
    """
    Issued when a geometric precondition is violated but the computation
    proceeds anyway (e.g., taking the link at a point outside of the cone).
    """
