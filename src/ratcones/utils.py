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
# Description:  This module contains the exact integer/rational linear algebra
#               used throughout ratcones.
# -----------------------------------------------------------------------------

# 'standard' imports
import functools
import math

# 3rd party imports
import flint
import numpy as np
from numpy.typing import ArrayLike

# ratcones imports
from ratcones.errors import DimensionMismatchError


# input parsing
# -------------
def _to_int(x, name: str) -> int:
    """
    Converts a single matrix entry to a Python int, rejecting anything that is
    not an exact integer.
    """
    if isinstance(x, (bool, np.bool_)):
        raise ValueError(f"Input {name} must have integer entries, not {x!r}.")
    if isinstance(x, (int, np.integer, flint.fmpz)):
        return int(x)
    raise ValueError(f"Input {name} must have integer entries, not {x!r}.")


def width_of(data, name: str = "matrix") -> "int | None":
    """
    **Description:**
    Infers the number of columns of a matrix-like input.

    **Arguments:**
    - `data`: The input. Can be None, a list of rows, a numpy array or a
        `flint.fmpz_mat`.
    - `name`: The name of the input, used in error messages.

    **Returns:**
    The width, or None if it can't be inferred (e.g., for `[]`).
    """
    if data is None:
        return None
    if isinstance(data, flint.fmpz_mat):
        return data.ncols()

    arr = np.array(data, dtype=object)
    if arr.ndim == 2:
        return arr.shape[1]
    if arr.ndim == 1 and arr.size == 0:
        return None
    raise ValueError(f"Input {name} must be a 2D matrix.")


def as_matrix(data, width: int = None, name: str = "matrix") -> np.ndarray:
    """
    **Description:**
    Converts the input to an exact integer matrix. That is, a 2D numpy array
    with dtype=object whose entries are Python ints.

    **Arguments:**
    - `data`: The input matrix. Can be None, a list of rows, a numpy array or
        a `flint.fmpz_mat`.
    - `width`: The expected width. Required if it can't be inferred from
        `data`.
    - `name`: The name of the input, used in error messages.

    **Returns:**
    *(numpy.ndarray)* The matrix.

    **Example:**
    ```python {2}
    from ratcones.utils import as_matrix
    as_matrix([[1, 2], [3, 4]]).dtype
    # dtype('O')
    ```
    """
    if isinstance(data, flint.fmpz_mat):
        if width is None:
            width = data.ncols()
        data = data.tolist()

    arr = None if data is None else np.array(data, dtype=object)
    if arr is None or (arr.ndim == 1 and arr.size == 0):
        if width is None:
            raise ValueError(
                f"Can't infer the width of the empty {name}. "
                "Specify the ambient dimension."
            )
        return np.empty((0, width), dtype=object)

    if arr.ndim != 2:
        raise ValueError(f"Input {name} must be a 2D matrix.")
    if (width is not None) and (arr.shape[1] != width):
        raise DimensionMismatchError(
            f"expected {name} with {width} columns but got {arr.shape[1]}"
        )

    out = np.empty(arr.shape, dtype=object)
    for idx, x in np.ndenumerate(arr):
        out[idx] = _to_int(x, name)
    return out


def as_vector(data, name: str = "vector") -> np.ndarray:
    """
    Converts the input to an exact integer vector (1D, dtype=object).
    """
    arr = np.array(data, dtype=object)
    if arr.ndim != 1:
        raise ValueError(f"Input {name} must be a 1D vector.")

    out = np.empty(arr.shape, dtype=object)
    for i, x in enumerate(arr):
        out[i] = _to_int(x, name)
    return out


def stack(*mats: np.ndarray, width: int) -> np.ndarray:
    """
    Stacks matrices vertically, always returning a (possibly empty) 2D matrix
    of the given width.
    """
    rows = [list(r) for M in mats for r in M]
    return as_matrix(rows, width=width)


# basic integer math
# ------------------
def gcd_list(arr) -> int:
    """
    The (nonnegative) gcd of a list of integers. The gcd of an empty list, or of
    a list of zeros, is 0.
    """
    return functools.reduce(math.gcd, (int(x) for x in arr), 0)


def primitive(v) -> list[int]:
    """
    **Description:**
    Divides an integer vector by the gcd of its entries. This keeps the
    direction of the vector. Zero vectors are returned unchanged.

    **Arguments:**
    - `v`: The vector.

    **Returns:**
    The primitive vector, as a list of ints.

    **Example:**
    ```python {2}
    from ratcones.utils import primitive
    primitive([4, -6, 0])
    # [2, -3, 0]
    ```
    """
    v = [int(x) for x in v]
    g = gcd_list(v)
    if g <= 1:
        return v
    return [x // g for x in v]




def dot_rows(A, B) -> np.ndarray:
    """
    **Description:**
    Exact matrix of dot products A[i].B[j], i.e. A@B.T on object arrays.

    **Arguments:**
    - `A`: A list of vectors.
    - `B`: A list of vectors of the same length.

    **Returns:**
    *(numpy.ndarray)* The len(A) x len(B) matrix of dot products.
    """
    A = np.asarray(A, dtype=object)
    B = np.asarray(B, dtype=object)
    # numpy can't form empty products of object arrays
    if len(A) == 0 or len(B) == 0 or A.ndim != 2 or A.shape[1] == 0:
        return np.full((len(A), len(B)), 0, dtype=object)
    return A @ B.T


# linear algebra
# --------------
def _fmpz_mat(M) -> flint.fmpz_mat:
    return flint.fmpz_mat([[int(x) for x in r] for r in M])


def rank(M) -> int:
    """
    The rank of an integer matrix, computed with flint.
    """
    M = np.asarray(M, dtype=object)
    if M.ndim != 2 or 0 in M.shape:
        return 0
    return int(_fmpz_mat(M).rank())


def rational_nullspace(M, width: int) -> np.ndarray:
    """
    Returns a basis (as primitive integer rows) of the rational nullspace
    {x : M@x == 0}.
    """
    M = np.asarray(M, dtype=object)
    if width == 0:
        return np.empty((0, 0), dtype=object)
    if len(M) == 0:
        return as_matrix(np.eye(width, dtype=int), width=width)

    null, nullity = _fmpz_mat(M).nullspace()

    # trim extra columns and move the basis vectors to rows
    cols = np.array(null.tolist(), dtype=object)[:, :int(nullity)]
    return as_matrix([primitive(c) for c in cols.T], width=width)


def echelon_basis(M, width: int) -> tuple[np.ndarray, list[int]]:
    """
    **Description:**
    Computes the canonical integer basis of the row span of M. This is the RREF
    (computed by flint over the rationals), with each row scaled to a primitive
    integer vector. The pivot entries are positive and all other rows vanish in
    the pivot columns. The result only depends on the span of M.

    **Arguments:**
    - `M`: The matrix.
    - `width`: Its number of columns.

    **Returns:**
    The basis (as a matrix) and the pivot columns.

    **Example:**
    ```python {2}
    from ratcones.utils import echelon_basis
    echelon_basis([[2, 4, 2], [1, 2, 3]], 3)[0].tolist()
    # [[1, 2, 0], [0, 0, 1]]
    ```
    """
    M = np.asarray(M, dtype=object)
    if M.ndim != 2 or 0 in M.shape:
        return np.empty((0, width), dtype=object), []

    R, r = flint.fmpq_mat(_fmpz_mat(M)).rref()
    basis, pivots = [], []
    for i in range(int(r)):
        row = [R[i, j] for j in range(width)]
        pivots.append(next(j for j, x in enumerate(row) if x != 0))
        lcm = functools.reduce(math.lcm, (int(x.q) for x in row), 1)
        basis.append(primitive([int(x.p) * (lcm // int(x.q)) for x in row]))
    return as_matrix(basis, width=width), pivots


def reduce_modulo(v, basis: np.ndarray, pivots: list[int]) -> list[int]:
    """
    Reduces an integer vector modulo the span of an echelon basis (see
    `echelon_basis`) by eliminating the pivot coordinates. Only positive
    multiples of v are used, so its class modulo the span keeps its direction.
    The output is primitive.
    """
    v = [int(x) for x in v]
    for b, p in zip(basis, pivots):
        if v[p] != 0:
            bp = int(b[p])
            vp = v[p]
            v = [bp * x - vp * int(y) for x, y in zip(v, b)]
    return primitive(v)


def canonical_form(rows, subspace, width: int) -> tuple[np.ndarray, np.ndarray]:
    """
    **Description:**
    Canonicalizes a set of vectors modulo a linear subspace. Each row is reduced
    modulo the subspace and made primitive. Then duplicates and zero rows are
    dropped and the rows are sorted lexicographically. The subspace is replaced
    by its echelon basis.

    This gives the canonical facets (with the equations as the subspace) and
    the canonical extreme rays (with the lineality space as the subspace).

    **Arguments:**
    - `rows`: The vectors to canonicalize.
    - `subspace`: Vectors spanning the subspace.
    - `width`: The ambient dimension.

    **Returns:**
    The canonical rows and the echelon basis of the subspace.
    """
    basis, pivots = echelon_basis(subspace, width)

    reduced = {tuple(reduce_modulo(r, basis, pivots)) for r in rows}
    reduced.discard(tuple(0 for _ in range(width)))

    return as_matrix(sorted(reduced), width=width), basis


def in_span(v, M, width: int) -> bool:
    """
    Whether the vector v is in the rational row span of M.
    """
    return rank(stack(M, as_matrix([list(v)], width=width), width=width)) == rank(M)


def solve_rational(B, v, width: int) -> list:
    """
    **Description:**
    Solves c@B == v for c, where the rows of B are linearly independent. The
    square system on the pivot columns of B is solved with flint.

    **Arguments:**
    - `B`: The basis, as rows.
    - `v`: A vector in the span of B.
    - `width`: The number of columns of B.

    **Returns:**
    The coefficients, as a list of `flint.fmpq`.
    """
    k = len(B)
    _, pivots = echelon_basis(B, width)
    if len(pivots) != k:
        raise ValueError("The rows of the basis are not linearly independent.")

    if k == 0:
        c = []
    else:
        A = flint.fmpq_mat(_fmpz_mat([[B[j][p] for j in range(k)] for p in pivots]))
        b = flint.fmpq_mat(_fmpz_mat([[v[p]] for p in pivots]))
        x = A.solve(b)
        c = [x[i, 0] for i in range(k)]

    # the pivot coordinates only determine c if v is in the span
    for i in range(width):
        if sum(c[j] * int(B[j][i]) for j in range(k)) != int(v[i]):
            raise ValueError("Vector is not in the span of the basis.")
    return c


# lattices
# --------
def hnf_with_transform(A, width: int) -> tuple[np.ndarray, np.ndarray, int]:
    """
    **Description:**
    Computes the (row-style) Hermite normal form of the integer matrix A along
    with a unimodular transform. That is, U@A == H. The first `r` rows of H are
    nonzero and the rest vanish, where `r` is the rank of A.

    This is the HNF of [A | I], computed by flint. The right block records the
    row operations.

    **Arguments:**
    - `A`: The integer matrix.
    - `width`: The number of columns of A.

    **Returns:**
    The tuple (H, U, r).
    """
    n = len(A)
    if n == 0:
        return (np.empty((0, width), dtype=object),
                np.empty((0, 0), dtype=object), 0)

    aug = [[int(x) for x in row] + [int(i == j) for j in range(n)]
           for i, row in enumerate(A)]
    HU = np.array(flint.fmpz_mat(aug).hnf().tolist(), dtype=object)

    H = as_matrix(HU[:, :width], width=width)
    U = as_matrix(HU[:, width:], width=n)
    r = sum(1 for row in H if any(row))
    return H, U, r


def kernel_lattice_basis(A, width: int) -> np.ndarray:
    """
    **Description:**
    Returns a lattice basis of ker(A) ∩ Z^width, as rows.

    **Arguments:**
    - `A`: The integer matrix.
    - `width`: The number of columns of A.

    **Returns:**
    *(numpy.ndarray)* The basis.

    **Example:**
    ```python {2}
    from ratcones.utils import kernel_lattice_basis
    kernel_lattice_basis([[2, 2]], 2).tolist()
    # [[1, -1]]
    ```
    """
    A = np.asarray(A, dtype=object)
    if A.ndim != 2 or len(A) == 0:
        return as_matrix(np.eye(width, dtype=int), width=width)

    # U@A.T == H, so the rows of U past the rank annihilate A
    _, U, r = hnf_with_transform(A.T, len(A))
    return as_matrix(U[r:], width=width)


def quotient_lattice_basis(span_eqs, lineality_eqs, width: int) -> np.ndarray:
    """
    **Description:**
    Returns integer vectors whose classes form a basis of the lattice
    (Z^n ∩ S)/(Z^n ∩ L), where S={x : span_eqs@x==0} and
    L={x : lineality_eqs@x==0} is a subspace of S.

    **Arguments:**
    - `span_eqs`: Equations cutting out S.
    - `lineality_eqs`: Equations cutting out L.
    - `width`: The ambient dimension, n.

    **Returns:**
    *(numpy.ndarray)* The basis, as rows. There are dim(S)-dim(L) of them.
    """
    B_S = kernel_lattice_basis(span_eqs, width)
    B_L = kernel_lattice_basis(lineality_eqs, width)
    k = len(B_S)

    # coordinates of Z^n ∩ L inside Z^k ~ Z^n ∩ S
    coords = []
    for v in B_L:
        c = solve_rational(B_S, v, width)
        if any(x.q != 1 for x in c):
            raise ArithmeticError("Lineality lattice is not inside the span lattice.")
        coords.append([int(x.p) for x in c])

    # G maps Z^k onto Z^q with kernel the lineality coordinates. G is
    # primitive, so the HNF of G.T starts with the identity and the first q
    # rows of the transform lift the standard basis of Z^q
    G = kernel_lattice_basis(as_matrix(coords, width=k), k)
    q = len(G)
    if q == 0:
        return np.empty((0, width), dtype=object)
    _, U, _ = hnf_with_transform(G.T, q)

    return as_matrix(dot_rows(U[:q], B_S.T), width=width)



# narrowing
# ---------
def narrow(values: ArrayLike, dtype=np.int32) -> tuple[np.ndarray, bool]:
    """
    **Description:**
    Converts exact integers to a fixed-width numpy integer type. Entries that
    don't fit are replaced by 0.

    **Arguments:**
    - `values`: The integers. Can be a scalar, a vector or a matrix.
    - `dtype`: The numpy integer type to convert to.

    **Returns:**
    The converted array (a numpy scalar if `values` was a scalar) and whether
    every entry fit.

    **Example:**
    ```python {2}
    from ratcones.utils import narrow
    narrow([[1, 2**40]], np.int32)
    # (array([[1, 0]], dtype=int32), False)
    ```
    """
    info = np.iinfo(dtype)
    arr = np.array(values, dtype=object)

    out = np.zeros(arr.shape, dtype=dtype)
    ok = True
    for idx, x in np.ndenumerate(arr):
        x = int(x)
        if info.min <= x <= info.max:
            out[idx] = x
        else:
            ok = False

    if arr.ndim == 0:
        return out[()], ok
    return out, ok
