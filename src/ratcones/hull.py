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
# Description:  This module converts between the generator (rays) and the
#               constraint (inequalities) descriptions of cones, using PPL.
# -----------------------------------------------------------------------------

# 'standard' imports
import warnings

# 3rd party imports
import numpy as np
import ppl

# ratcones imports
from ratcones import config
from ratcones import utils


def _linear_expression(row) -> ppl.Linear_Expression:
    return ppl.Linear_Expression([int(c) for c in row], 0)


def _coefficients(obj, ambient_dim: int) -> list[int]:
    # PPL trims trailing zero coefficients, so pad back to the ambient dim
    coeffs = [int(c) for c in obj.coefficients()]
    return coeffs + [0] * (ambient_dim - len(coeffs))


def _warn_if_large(ambient_dim: int) -> None:
    if ambient_dim >= config.large_hull_dimension:
        warnings.warn(
            "This operation might take a while for d > ~12 "
            "and is likely impossible for d > ~18."
        )


def from_constraints(
    inequalities: np.ndarray,
    equations: np.ndarray,
    ambient_dim: int,
    verbosity: int = None,
) -> ppl.C_Polyhedron:
    """
    **Description:**
    Defines the cone {x : inequalities@x >= 0, equations@x == 0} in PPL.

    **Arguments:**
    - `inequalities`: The inequalities, as rows.
    - `equations`: The equations, as rows.
    - `ambient_dim`: The ambient dimension.
    - `verbosity`: The verbosity level. Defaults to `config.verbosity`.

    **Returns:**
    *(ppl.C_Polyhedron)* The cone.
    """
    if verbosity is None:
        verbosity = config.verbosity
    if verbosity >= 1:
        print("Defining the cone in PPL via constraints...", flush=True)

    cone = ppl.C_Polyhedron(ambient_dim)
    for row in inequalities:
        # zero rows are tautologies
        if any(row):
            cone.add_constraint(_linear_expression(row) >= 0)
    for row in equations:
        if any(row):
            cone.add_constraint(_linear_expression(row) == 0)
    return cone


def from_generators(
    rays: np.ndarray,
    lineality: np.ndarray,
    ambient_dim: int,
    verbosity: int = None,
) -> ppl.C_Polyhedron:
    """
    **Description:**
    Defines the cone generated by the rays (with nonnegative coefficients) and
    by the lineality generators (with arbitrary coefficients) in PPL.

    **Arguments:**
    - `rays`: The rays, as rows.
    - `lineality`: The lineality generators, as rows.
    - `ambient_dim`: The ambient dimension.
    - `verbosity`: The verbosity level. Defaults to `config.verbosity`.

    **Returns:**
    *(ppl.C_Polyhedron)* The cone.
    """
    if verbosity is None:
        verbosity = config.verbosity
    if verbosity >= 1:
        print("Defining the cone in PPL via generators...", flush=True)

    # every cone contains the origin
    cone = ppl.C_Polyhedron(ambient_dim, "empty")
    cone.add_generator(ppl.point())

    for row in rays:
        # zero rows generate nothing
        if any(row):
            cone.add_generator(ppl.ray(_linear_expression(row)))
    for row in lineality:
        if any(row):
            cone.add_generator(ppl.line(_linear_expression(row)))
    return cone


def minimized_constraints(
    cone: ppl.C_Polyhedron, ambient_dim: int, verbosity: int = None
) -> tuple[np.ndarray, np.ndarray]:
    """
    **Description:**
    Computes an irredundant constraint description of a cone. The inequalities
    define distinct facets and the equations form a basis of all implied
    equations.

    **Arguments:**
    - `cone`: The cone.
    - `ambient_dim`: The ambient dimension.
    - `verbosity`: The verbosity level. Defaults to `config.verbosity`.

    **Returns:**
    The inequalities and the equations.
    """
    if verbosity is None:
        verbosity = config.verbosity
    _warn_if_large(ambient_dim)

    if verbosity >= 1:
        print("Computing the facets...", flush=True)
    inequalities, equations = [], []
    for c in cone.minimized_constraints():
        coeffs = _coefficients(c, ambient_dim)
        if not any(coeffs):
            continue
        if c.is_equality():
            equations.append(coeffs)
        else:
            inequalities.append(coeffs)

    if verbosity >= 1:
        print(
            f"Found {len(inequalities)} facets and {len(equations)} "
            "equations.",
            flush=True,
        )
    return (
        utils.as_matrix(inequalities, width=ambient_dim),
        utils.as_matrix(equations, width=ambient_dim),
    )


def minimized_generators(
    cone: ppl.C_Polyhedron, ambient_dim: int, verbosity: int = None
) -> tuple[np.ndarray, np.ndarray]:
    """
    **Description:**
    Computes a minimal generating set of a cone. The rays are extremal (modulo
    the lineality space) and the lines form a basis of the lineality space.

    **Arguments:**
    - `cone`: The cone.
    - `ambient_dim`: The ambient dimension.
    - `verbosity`: The verbosity level. Defaults to `config.verbosity`.

    **Returns:**
    The rays and the lineality generators.
    """
    if verbosity is None:
        verbosity = config.verbosity
    _warn_if_large(ambient_dim)

    if verbosity >= 1:
        print("Computing the rays...", flush=True)
    rays, lines = [], []
    for gen_i, gen in enumerate(cone.minimized_generators()):
        if verbosity >= 2:
            print(f"generator #{gen_i}...", end="\r")

        # the only point of a cone is its apex
        if gen.is_point():
            continue
        coeffs = _coefficients(gen, ambient_dim)
        if gen.is_line():
            lines.append(coeffs)
        elif gen.is_ray():
            rays.append(coeffs)

    if verbosity >= 1:
        print(f"Found {len(rays)} rays and {len(lines)} lines.", flush=True)
    return (
        utils.as_matrix(rays, width=ambient_dim),
        utils.as_matrix(lines, width=ambient_dim),
    )
