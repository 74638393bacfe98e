import flint
import numpy as np
import pytest

from ratcones import utils
from ratcones.errors import DimensionMismatchError


def test_as_matrix():
    M = utils.as_matrix([[1, 2], [3, 4]])
    assert M.dtype == object
    assert all(type(x) is int for x in M.flat)

    M = utils.as_matrix(np.array([[1, 2]], dtype=np.int64))
    assert type(M[0, 0]) is int

    M = utils.as_matrix(flint.fmpz_mat([[1, 2]]))
    assert M.tolist() == [[1, 2]]


def test_as_matrix_empty():
    assert utils.as_matrix([], width=3).shape == (0, 3)
    assert utils.as_matrix(None, width=3).shape == (0, 3)
    assert utils.as_matrix(np.zeros((0, 4))).shape == (0, 4)
    with pytest.raises(ValueError):
        utils.as_matrix([])


def test_as_matrix_errors():
    with pytest.raises(ValueError):
        utils.as_matrix([[1.5, 2]])
    with pytest.raises(ValueError):
        utils.as_matrix([1, 2])
    with pytest.raises(ValueError):
        utils.as_matrix([[True, False]])
    with pytest.raises(DimensionMismatchError):
        utils.as_matrix([[1, 2]], width=3)


def test_width_of():
    assert utils.width_of(None) is None
    assert utils.width_of([]) is None
    assert utils.width_of([[1, 2, 3]]) == 3
    assert utils.width_of(np.zeros((0, 5))) == 5


def test_primitive():
    assert utils.primitive([4, -6, 0]) == [2, -3, 0]
    assert utils.primitive([0, 0]) == [0, 0]
    assert utils.primitive([-3]) == [-1]


def test_dot_rows():
    D = utils.dot_rows([[1, 2], [3, 4]], [[1, 0], [0, 1], [1, 1]])
    assert D.tolist() == [[1, 2, 3], [3, 4, 7]]
    assert utils.dot_rows([], [[1, 0]]).shape == (0, 1)
    assert utils.dot_rows([[1, 0]], []).shape == (1, 0)
    # no overflow
    assert utils.dot_rows([[2**62, 2**62]], [[4, 4]])[0, 0] == 2**65


def test_rank():
    assert utils.rank([[1, 2], [2, 4]]) == 1
    assert utils.rank([[1, 0], [0, 1]]) == 2
    assert utils.rank(np.empty((0, 3), dtype=object)) == 0


def test_rational_nullspace():
    N = utils.rational_nullspace([[1, 1, 0]], 3)
    assert N.shape == (2, 3)
    assert utils.rank(N) == 2
    assert all(r[0] + r[1] == 0 for r in N)

    assert utils.rational_nullspace([], 2).tolist() == [[1, 0], [0, 1]]
    assert utils.rational_nullspace([[1, 0], [0, 1]], 2).shape == (0, 2)


def test_echelon_basis():
    B, pivots = utils.echelon_basis([[2, 4, 2], [1, 2, 3]], 3)
    assert B.tolist() == [[1, 2, 0], [0, 0, 1]]
    assert pivots == [0, 2]

    # only depends on the span
    B2, _ = utils.echelon_basis([[1, 2, 3], [3, 6, 5], [0, 0, 7]], 3)
    assert B2.tolist() == B.tolist()


def test_reduce_modulo():
    B, pivots = utils.echelon_basis([[0, 1]], 2)
    assert utils.reduce_modulo([1, 1], B, pivots) == [1, 0]
    assert utils.reduce_modulo([-2, 5], B, pivots) == [-1, 0]


def test_canonical_form():
    rows, basis = utils.canonical_form([[2, 2], [1, 1], [0, 0]], [], 2)
    assert rows.tolist() == [[1, 1]]
    assert basis.shape == (0, 2)

    rows, basis = utils.canonical_form([[1, 3], [2, -1], [0, 1]], [[0, 2]], 2)
    assert rows.tolist() == [[1, 0]]
    assert basis.tolist() == [[0, 1]]


def test_in_span():
    assert utils.in_span([2, 4], [[1, 2]], 2)
    assert not utils.in_span([2, 3], [[1, 2]], 2)
    assert not utils.in_span([1, 0], np.empty((0, 2), dtype=object), 2)


def test_hnf_with_transform():
    A = [[2, 4, 6], [1, 1, 1], [3, 5, 7]]
    H, U, r = utils.hnf_with_transform(A, 3)
    assert r == 2
    assert abs(flint.fmpz_mat(U.tolist()).det()) == 1
    assert utils.dot_rows(U, np.array(A, dtype=object).T).tolist() == H.tolist()
    assert not any(H[2])


def test_kernel_lattice_basis():
    K = utils.kernel_lattice_basis([[2, 2]], 2)
    assert K.shape == (1, 2)
    assert K[0, 0] == -K[0, 1]
    assert abs(K[0, 0]) == 1

    # the lattice {x : x1 + 2*x2 + 3*x3 == 0} has index 1 in its span
    K = utils.kernel_lattice_basis([[1, 2, 3]], 3)
    assert K.shape == (2, 3)
    assert all(r[0] + 2 * r[1] + 3 * r[2] == 0 for r in K)
    minors = [K[0, i] * K[1, j] - K[0, j] * K[1, i] for i in range(3) for j in range(i + 1, 3)]
    assert utils.gcd_list(minors) == 1


def test_solve_rational():
    assert utils.solve_rational([[1, 0], [0, 2]], [3, 4], 2) == [3, 2]
    assert utils.solve_rational([[2, 2]], [1, 1], 2) == [flint.fmpq(1, 2)]
    with pytest.raises(ValueError):
        utils.solve_rational([[1, 0]], [0, 1], 2)


def test_quotient_lattice_basis():
    Q = utils.quotient_lattice_basis([[0, 0, 1]], [[0, 0, 1], [1, 0, 0]], 3)
    assert Q.shape == (1, 3)
    assert abs(Q[0, 0]) == 1
    assert Q[0, 2] == 0

    # the lineality lattice is everything
    Q = utils.quotient_lattice_basis([], [], 2)
    assert Q.shape == (0, 2)


def test_narrow():
    out, ok = utils.narrow([[1, 2**40]], np.int32)
    assert not ok
    assert out.dtype == np.int32
    assert out.tolist() == [[1, 0]]

    out, ok = utils.narrow([[1, -5]], np.int64)
    assert ok
    assert out.tolist() == [[1, -5]]

    out, ok = utils.narrow(5, np.int8)
    assert ok and out == 5
    out, ok = utils.narrow(500, np.int8)
    assert not ok and out == 0


def test_dot_rows_zero_width():
    D = utils.dot_rows(np.empty((2, 0), dtype=object), np.empty((3, 0), dtype=object))
    assert D.shape == (2, 3)
    assert not D.any()
