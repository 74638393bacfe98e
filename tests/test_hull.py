import numpy as np
import pytest

from ratcones import config, hull


def rows(M):
    return sorted(tuple(int(x) for x in r) for r in M)


def empty(d):
    return np.empty((0, d), dtype=object)


def test_rays_of_quadrant():
    cone = hull.from_constraints([[1, 0], [0, 1]], empty(2), 2)
    rays, lines = hull.minimized_generators(cone, 2)
    assert rows(rays) == [(0, 1), (1, 0)]
    assert lines.shape == (0, 2)


def test_facets_of_half_plane():
    cone = hull.from_generators([[1, 0]], [[0, 1]], 2)
    ineqs, eqs = hull.minimized_constraints(cone, 2)
    assert rows(ineqs) == [(1, 0)]
    assert eqs.shape == (0, 2)


def test_redundant_constraints():
    cone = hull.from_constraints([[1, 0], [2, 0], [1, 1], [0, 1]], empty(2), 2)
    ineqs, eqs = hull.minimized_constraints(cone, 2)
    assert rows(ineqs) == [(0, 1), (1, 0)]
    assert len(eqs) == 0


def test_implied_equation():
    cone = hull.from_constraints([[1, 0, 0], [-1, 0, 0], [0, 1, 0]], empty(3), 3)
    ineqs, eqs = hull.minimized_constraints(cone, 3)
    assert len(ineqs) == 1
    assert len(eqs) == 1
    assert abs(eqs[0, 0]) > 0 and eqs[0, 1] == 0 and eqs[0, 2] == 0


def test_zero_rows_are_ignored():
    cone = hull.from_generators([[0, 0]], empty(2), 2)
    ineqs, eqs = hull.minimized_constraints(cone, 2)
    assert len(ineqs) == 0
    assert len(eqs) == 2

    cone = hull.from_constraints([[0, 0]], [[0, 0]], 2)
    rays, lines = hull.minimized_generators(cone, 2)
    assert len(rays) == 0
    assert len(lines) == 2


def test_coefficients_are_padded():
    cone = hull.from_generators([[1, 0, 0]], empty(3), 3)
    rays, lines = hull.minimized_generators(cone, 3)
    assert rays.shape == (1, 3)
    assert rows(rays) == [(1, 0, 0)]


def test_verbosity(capsys):
    cone = hull.from_constraints([[1, 0]], empty(2), 2, verbosity=1)
    hull.minimized_generators(cone, 2, verbosity=1)
    out = capsys.readouterr().out
    assert "Defining the cone in PPL" in out
    assert "Found 1 rays and 1 lines." in out


def test_large_dimension_warning(monkeypatch):
    monkeypatch.setattr(config, "large_hull_dimension", 2)
    cone = hull.from_constraints([[1, 0]], empty(2), 2)
    with pytest.warns(UserWarning, match="might take a while"):
        hull.minimized_constraints(cone, 2)
