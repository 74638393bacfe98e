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
# Description:  This module contains the Cone class, which handles exact
#               computations with rational polyhedral cones.
# -----------------------------------------------------------------------------

# 'standard' imports
from collections import namedtuple
from collections.abc import Iterable
import warnings

# 3rd party imports
import numpy as np

# ratcones imports
from ratcones import config
from ratcones import hull
from ratcones import utils
from ratcones.errors import (
    DimensionMismatchError,
    GeometricPreconditionWarning,
    InvalidArgumentError,
    InvalidStateError,
    RangeOverflowWarning,
)
from ratcones.helpers.lazy import LazySlot

# typing
from numpy.typing import ArrayLike

# the two representations of a cone
VRep = namedtuple("VRep", ["rays", "lineality"])
HRep = namedtuple("HRep", ["inequalities", "equations"])

# bits of the known_flags hint
# (V mode: lineality space known / extremal rays known)
# (H mode: implied equations known / facets known)
KNOWN_SUBSPACE = 1
KNOWN_EXTREMAL = 2
KNOWN_ALL = KNOWN_SUBSPACE | KNOWN_EXTREMAL


class Cone:
    """
    This class handles all computations relating to rational polyhedral cones,
    such as cone duality, extremal rays, faces and links. All computations are
    exact.

    A cone has two equivalent representations:
    - the V-representation, a list of rays and a list of lineality generators.
        The cone is the set of nonnegative combinations of the rays plus
        arbitrary combinations of the lineality generators.
    - the H-representation, a list of inequalities and a list of equations.
        The cone is the set of x with inequalities@x >= 0 and
        equations@x == 0.

    The representation used to construct the cone is kept as given. The other
    one is computed on first use and then cached.

    ## Constructor

    ### `ratcones.cone.Cone`

    **Description:**
    Constructs a `Cone` object. This is handled by the hidden
    [`__init__`](#__init__) function. The classmethods
    [`from_rays`](#from_rays), [`from_inequalities`](#from_inequalities) and
    [`full_space`](#full_space) are the preferred entry points.

    **Arguments:**
    - `rays` *(array_like, optional)*: A list of rays that, together with the
        lineality generators, generate the cone.
    - `lineality` *(array_like, optional)*: A list of generators of linear
        directions contained in the cone.
    - `inequalities` *(array_like, optional)*: A list of inward-pointing
        hyperplane normals.
    - `equations` *(array_like, optional)*: A list of linear forms that vanish
        on the cone.
    - `ambient_dim` *(int, optional)*: The ambient dimension. Required if it
        can't be inferred from the other inputs. If it is the only input, the
        cone is all of RR^ambient_dim.
    - `known_flags` *(int, optional, default=0)*: A hint, in [0..3], about the
        input. For rays: bit 0 says that the lineality generators span the
        lineality space, bit 1 says that each ray spans a distinct extremal
        ray. For inequalities: bit 0 says that the equations span all implied
        equations, bit 1 says that each inequality defines a distinct facet.
        The hint never changes the cone, it only lets some computations be
        skipped.

    :::note
    Rays/lineality and inequalities/equations can't both be specified.
    Otherwise, an exception is raised.
    :::

    **Example:**
    We construct a cone in two different ways. First from a list of rays then
    from a list of inequalities. We verify that the two inputs result in the
    same cone.
    ```python {2,3}
    from ratcones import Cone
    c1 = Cone([[0,1],[1,1]])
    c2 = Cone(inequalities=[[1,0],[-1,1]])
    c1 == c2
    # True
    ```
    """

    def __init__(
        self,
        rays: ArrayLike = None,
        lineality: ArrayLike = None,
        inequalities: ArrayLike = None,
        equations: ArrayLike = None,
        ambient_dim: int = None,
        known_flags: int = 0,
    ):
        """
        **Description:**
        Initializes a `Cone` object.

        **Arguments:**
        - `rays`: A list of rays generating the cone.
        - `lineality`: A list of lineality generators.
        - `inequalities`: A list of inward-pointing hyperplane normals.
        - `equations`: A list of linear forms vanishing on the cone.
        - `ambient_dim`: The ambient dimension, if not inferrable.
        - `known_flags`: A hint about the input, in [0..3].

        **Returns:**
        Nothing.
        """
        v_mode = (rays is not None) or (lineality is not None)
        h_mode = (inequalities is not None) or (equations is not None)
        if v_mode and h_mode:
            raise ValueError(
                'At most one of "rays/lineality" and '
                '"inequalities/equations" can be specified.'
            )

        if not isinstance(known_flags, (int, np.integer)) or not (
            0 <= known_flags <= KNOWN_ALL
        ):
            raise InvalidArgumentError("expected int argument in [0..3]")
        known_flags = int(known_flags)

        # the ambient-dimension-only mode (all of RR^d)
        if not (v_mode or h_mode):
            if ambient_dim is None:
                raise ValueError(
                    "One of rays, inequalities or ambient_dim must be specified."
                )
            if (not isinstance(ambient_dim, (int, np.integer))) or ambient_dim < 0:
                raise InvalidArgumentError(
                    f"expected an int >= 0, but got {ambient_dim}"
                )
            ambient_dim = int(ambient_dim)
            empty = np.empty((0, ambient_dim), dtype=object)
            self._setup(ambient_dim, hrep=HRep(empty, empty.copy()), h_flags=KNOWN_ALL)
            return

        # the rays and the inequalities modes
        if v_mode:
            first, second = self._parse_pair(
                rays, lineality, ("rays", "lineality"), ambient_dim
            )
            self._setup(first.shape[1], vrep=VRep(first, second), v_flags=known_flags)
        else:
            first, second = self._parse_pair(
                inequalities, equations, ("inequalities", "equations"), ambient_dim
            )
            self._setup(first.shape[1], hrep=HRep(first, second), h_flags=known_flags)

    @staticmethod
    def _parse_pair(first, second, names: tuple, ambient_dim: int = None):
        # infer the shared width
        w1 = utils.width_of(first, names[0])
        w2 = utils.width_of(second, names[1])
        if (w1 is not None) and (w2 is not None) and (w1 != w2):
            raise DimensionMismatchError(
                f"expected same number of columns but got {w1} vs. {w2}"
            )
        width = w1 if w1 is not None else w2

        if ambient_dim is not None:
            if (width is not None) and (width != ambient_dim):
                raise DimensionMismatchError(
                    f"Specified ambient dim = {ambient_dim} doesn't match the "
                    f"inferrable width of the {names[0]} = {width}..."
                )
            width = ambient_dim
        if width is None:
            raise ValueError(
                f"Must specify ambient dimension if no {names[0]} and no "
                f"{names[1]} rows are given."
            )

        return (
            utils.as_matrix(first, width=width, name=names[0]),
            utils.as_matrix(second, width=width, name=names[1]),
        )

    def _setup(
        self,
        ambient_dim: int,
        vrep: VRep = None,
        hrep: HRep = None,
        v_flags: int = 0,
        h_flags: int = 0,
    ) -> None:
        # basic data
        self._ambient_dim = ambient_dim
        self._v_flags = v_flags
        self._h_flags = h_flags
        # the equations given along with the H-representation, if any
        if hrep is not None:
            self._declared_equations = hrep.equations.copy()
        else:
            self._declared_equations = np.empty((0, ambient_dim), dtype=object)

        # annotations
        self._multiplicity = 1
        self._linear_forms = np.empty((0, ambient_dim), dtype=object)

        # the representation slots
        self._vrep = LazySlot(self._compute_vrep)
        self._hrep = LazySlot(self._compute_hrep)
        if vrep is not None:
            self._vrep.fill(vrep)
        if hrep is not None:
            self._hrep.fill(hrep)

        # derived data
        self._polyhedron = LazySlot(self._compute_polyhedron)
        self._canonical_h = LazySlot(self._compute_canonical_h)
        self._canonical_v = LazySlot(self._compute_canonical_v)
        self._dim = LazySlot(self._compute_dim)
        self._lineality_dim = LazySlot(self._compute_lineality_dim)

    # alternative constructors
    # ------------------------
    @classmethod
    def from_rays(
        cls, rays: ArrayLike, lineality: ArrayLike = None, known_flags: int = 0,
        ambient_dim: int = None,
    ) -> "Cone":
        """
        **Description:**
        Constructs the cone generated by the rays and the lineality generators.

        **Arguments:**
        - `rays`: A list of rays.
        - `lineality`: A list of lineality generators.
        - `known_flags`: Bit 0 if the lineality generators span the lineality
            space, bit 1 if each ray spans a distinct extremal ray.
        - `ambient_dim`: The ambient dimension, if not inferrable.

        **Returns:**
        *(Cone)* The cone.

        **Example:**
        ```python {2}
        from ratcones import Cone
        c = Cone.from_rays([[1,0]], [[0,1]])
        c.lineality_dimension()
        # 1
        ```
        """
        if rays is None:
            rays = []
        return cls(
            rays=rays, lineality=lineality, ambient_dim=ambient_dim,
            known_flags=known_flags,
        )

    @classmethod
    def from_inequalities(
        cls, inequalities: ArrayLike, equations: ArrayLike = None,
        known_flags: int = 0, ambient_dim: int = None,
    ) -> "Cone":
        """
        **Description:**
        Constructs the cone {x : inequalities@x >= 0, equations@x == 0}.

        **Arguments:**
        - `inequalities`: A list of inward-pointing hyperplane normals.
        - `equations`: A list of linear forms vanishing on the cone.
        - `known_flags`: Bit 0 if the equations span all implied equations, bit
            1 if each inequality defines a distinct facet.
        - `ambient_dim`: The ambient dimension, if not inferrable.

        **Returns:**
        *(Cone)* The cone.

        **Example:**
        ```python {2}
        from ratcones import Cone
        c = Cone.from_inequalities([[1,0]], [[0,1]])
        c.rays()
        # array([[1, 0]], dtype=object)
        ```
        """
        if inequalities is None:
            inequalities = []
        return cls(
            inequalities=inequalities, equations=equations,
            ambient_dim=ambient_dim, known_flags=known_flags,
        )

    @classmethod
    def full_space(cls, ambient_dim: int) -> "Cone":
        """
        **Description:**
        Constructs the cone consisting of all of RR^ambient_dim.

        **Arguments:**
        - `ambient_dim`: The ambient dimension. Must be nonnegative.

        **Returns:**
        *(Cone)* The cone.
        """
        return cls(ambient_dim=ambient_dim)

    # aliases
    default = full_space

    @classmethod
    def positive_orthant(cls, ambient_dim: int) -> "Cone":
        """
        **Description:**
        Constructs the nonnegative orthant of RR^ambient_dim.

        **Arguments:**
        - `ambient_dim`: The ambient dimension. Must be nonnegative.

        **Returns:**
        *(Cone)* The cone.
        """
        if (not isinstance(ambient_dim, (int, np.integer))) or ambient_dim < 0:
            raise InvalidArgumentError(f"expected an int >= 0, but got {ambient_dim}")
        return cls(
            inequalities=np.eye(ambient_dim, dtype=int),
            ambient_dim=int(ambient_dim),
            known_flags=KNOWN_ALL,
        )

    @classmethod
    def _from_slots(
        cls,
        ambient_dim: int,
        vrep: VRep = None,
        hrep: HRep = None,
        v_flags: int = 0,
        h_flags: int = 0,
    ) -> "Cone":
        # builds a cone directly from (already parsed) representations
        cone = cls.__new__(cls)
        cone._setup(ambient_dim, vrep=vrep, hrep=hrep, v_flags=v_flags, h_flags=h_flags)
        return cone

    def copy(self) -> "Cone":
        """
        **Description:**
        Returns an independent deep copy of the cone. Present representations
        and annotations are copied, nothing is shared.

        **Arguments:**
        None.

        **Returns:**
        *(Cone)* The copy.
        """
        vrep = self._vrep.peek()
        hrep = self._hrep.peek()
        out = Cone._from_slots(
            self._ambient_dim,
            vrep=None if vrep is None else VRep(vrep[0].copy(), vrep[1].copy()),
            hrep=None if hrep is None else HRep(hrep[0].copy(), hrep[1].copy()),
            v_flags=self._v_flags,
            h_flags=self._h_flags,
        )
        out._declared_equations = self._declared_equations.copy()
        out._multiplicity = self._multiplicity
        out._linear_forms = self._linear_forms.copy()
        return out

    def __copy__(self) -> "Cone":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Cone":
        return self.copy()

    # lazy computations
    # -----------------
    def _compute_polyhedron(self):
        hrep = self._hrep.peek()
        if hrep is not None:
            return hull.from_constraints(
                hrep.inequalities, hrep.equations, self._ambient_dim
            )
        vrep = self._vrep.peek()
        return hull.from_generators(vrep.rays, vrep.lineality, self._ambient_dim)

    def _compute_canonical_h(self) -> HRep:
        hrep = self._hrep.peek()
        if (hrep is not None) and (self._h_flags == KNOWN_ALL):
            ineqs, eqs = hrep
        else:
            ineqs, eqs = hull.minimized_constraints(
                self._polyhedron.get(), self._ambient_dim
            )
        facets, equations = utils.canonical_form(ineqs, eqs, self._ambient_dim)
        return HRep(facets, equations)

    def _compute_canonical_v(self) -> VRep:
        vrep = self._vrep.peek()
        if (vrep is not None) and (self._v_flags == KNOWN_ALL):
            rays, lines = vrep
        else:
            rays, lines = hull.minimized_generators(
                self._polyhedron.get(), self._ambient_dim
            )
        rays, lineality = utils.canonical_form(rays, lines, self._ambient_dim)
        return VRep(rays, lineality)

    def _compute_hrep(self) -> HRep:
        # only called if the cone was given by rays
        facets, equations = self._canonical_h.get()
        self._h_flags = KNOWN_ALL
        return HRep(facets.copy(), equations.copy())

    def _compute_vrep(self) -> VRep:
        # only called if the cone was given by inequalities
        rays, lineality = self._canonical_v.get()
        self._v_flags = KNOWN_ALL
        return VRep(rays.copy(), lineality.copy())

    def _compute_dim(self) -> int:
        vrep = self._vrep.peek()
        if vrep is not None:
            return utils.rank(utils.stack(*vrep, width=self._ambient_dim))

        hrep = self._hrep.peek()
        if self._h_flags & KNOWN_SUBSPACE:
            return self._ambient_dim - utils.rank(hrep.equations)
        return self._ambient_dim - len(self._canonical_h.get().equations)

    def _compute_lineality_dim(self) -> int:
        hrep = self._hrep.peek()
        if hrep is not None:
            return self._ambient_dim - utils.rank(
                utils.stack(*hrep, width=self._ambient_dim)
            )
        return len(self._canonical_v.get().lineality)

    def _output(self, values, dtype, name: str):
        # return a copy, narrowed to dtype if requested
        if dtype is None:
            return values.copy() if isinstance(values, np.ndarray) else values
        if dtype is True:
            dtype = config.narrow_dtype

        out, ok = utils.narrow(values, dtype)
        if not ok:
            warnings.warn(
                f"overflow while converting the {name} to {np.dtype(dtype)}; "
                "entries that don't fit were replaced by 0",
                RangeOverflowWarning,
            )
        return out

    def canonicalize(self) -> None:
        """
        **Description:**
        Replaces the H-representation with the canonical one. The facets are
        irredundant, reduced modulo the equations, primitive and sorted. The
        equations are a basis in reduced row echelon form. The cone itself
        doesn't change.

        This is not done on construction, so that construction only costs time
        proportional to the size of the input.

        **Arguments:**
        None.

        **Returns:**
        Nothing.

        **Example:**
        ```python {2}
        c = Cone(inequalities=[[1,0],[2,0],[0,1],[1,1]])
        c.canonicalize()
        c.inequalities()
        # array([[0, 1],
        #        [1, 0]], dtype=object)
        ```
        """
        facets, equations = self._canonical_h.get()
        self._hrep.fill(HRep(facets.copy(), equations.copy()))
        self._h_flags = KNOWN_ALL

    # printing and comparison
    # -----------------------
    def __repr__(self) -> str:
        """
        **Description:**
        Returns a string describing the cone. This never triggers a convex
        hull computation.

        **Arguments:**
        None.

        **Returns:**
        *(str)* A string describing the cone.

        **Example:**
        ```python {2}
        c = Cone([[1,0],[1,1],[0,1]])
        print(repr(c))
        # A 2-dimensional rational polyhedral cone in RR^2 generated by 3 rays and 0 lineality generators
        ```
        """
        vrep = self._vrep.peek()
        if vrep is not None:
            return (
                f"A {self.dim()}-dimensional rational polyhedral cone in "
                f"RR^{self._ambient_dim} generated by {len(vrep.rays)} rays "
                f"and {len(vrep.lineality)} lineality generators"
            )
        hrep = self._hrep.peek()
        return (
            f"A rational polyhedral cone in RR^{self._ambient_dim} defined by "
            f"{len(hrep.inequalities)} inequalities and {len(hrep.equations)} "
            "equations"
        )

    def __str__(self) -> str:
        """
        **Description:**
        Returns a dump of the ambient dimension and of the H-representation.
        This is meant for diagnostics only.

        **Arguments:**
        None.

        **Returns:**
        *(str)* The dump.

        **Example:**
        ```python {2}
        c = Cone(inequalities=[[1,0],[0,1]])
        print(c)
        # AMBIENT_DIM
        # 2
        # INEQUALITIES
        # 1,0,
        # 0,1
        # EQUATIONS
        ```
        """

        def dump(M):
            s = ""
            for i, row in enumerate(M):
                for j, x in enumerate(row):
                    s += str(x)
                    if (i + 1 != len(M)) or (j + 1 != len(row)):
                        s += ","
                s += "\n"
            return s

        ineqs, eqs = self._hrep.get()
        return (
            f"AMBIENT_DIM\n{self._ambient_dim}\n"
            f"INEQUALITIES\n{dump(ineqs)}"
            f"EQUATIONS\n{dump(eqs)}"
        )

    def __eq__(self, other) -> bool:
        """
        **Description:**
        Implements comparison of cones with ==. Two cones are equal if they are
        the same set of points.

        **Arguments:**
        - `other` *(Cone)*: The other cone that is being compared.

        **Returns:**
        *(bool)* The truth value of the cones being equal.

        **Example:**
        ```python {3}
        c1 = Cone([[0,1],[1,1]])
        c2 = Cone(inequalities=[[1,0],[-1,1]])
        c1 == c2
        # True
        ```
        """
        if not isinstance(other, Cone):
            return NotImplemented
        if self._ambient_dim != other._ambient_dim:
            return False

        mine, theirs = self._canonical_h.get(), other._canonical_h.get()
        return (mine.inequalities.tolist() == theirs.inequalities.tolist()) and (
            mine.equations.tolist() == theirs.equations.tolist()
        )

    def __ne__(self, other) -> bool:
        if not isinstance(other, Cone):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        facets, equations = self._canonical_h.get()
        return hash(
            (
                self._ambient_dim,
                tuple(tuple(r) for r in facets.tolist()),
                tuple(tuple(r) for r in equations.tolist()),
            )
        )

    # representation accessors
    # ------------------------
    def ambient_dimension(self) -> int:
        """
        **Description:**
        Returns the dimension of the ambient space.

        **Arguments:**
        None.

        **Returns:**
        *(int)* The dimension of the ambient space.

        **Aliases:**
        `ambient_dim`.

        **Example:**
        ```python {2}
        c = Cone([[0,1,0],[1,1,0]])
        c.ambient_dimension()
        # 3
        ```
        """
        return self._ambient_dim

    # aliases
    ambient_dim = ambient_dimension

    def dimension(self) -> int:
        """
        **Description:**
        Returns the dimension of the cone, i.e., of its linear span.

        **Arguments:**
        None.

        **Returns:**
        *(int)* The dimension of the cone.

        **Aliases:**
        `dim`.

        **Example:**
        ```python {2}
        c = Cone([[0,1,0],[1,1,0]])
        c.dimension()
        # 2
        ```
        """
        return self._dim.get()

    # aliases
    dim = dimension

    def codimension(self) -> int:
        """
        Returns the codimension of the cone in the ambient space.
        """
        return self._ambient_dim - self.dimension()

    def lineality_dimension(self) -> int:
        """
        **Description:**
        Returns the dimension of the lineality space. That is, the largest
        linear subspace contained in the cone.

        **Arguments:**
        None.

        **Returns:**
        *(int)* The dimension of the lineality space.

        **Example:**
        ```python {2}
        c = Cone([[1,0],[0,1],[-1,0]])
        c.lineality_dimension()
        # 1
        ```
        """
        return self._lineality_dim.get()

    def inequalities(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns the inequalities (inward-pointing hyperplane normals) of the
        H-representation. If the cone was given by inequalities, these are the
        input ones (until [`canonicalize`](#canonicalize) is called).

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.
            Entries that don't fit are replaced by 0 and a
            `RangeOverflowWarning` is issued. If True, `config.narrow_dtype`
            is used.

        **Returns:**
        *(numpy.ndarray)* The inequalities.

        **Aliases:**
        `hyperplanes`.

        **Example:**
        ```python {2}
        c = Cone([[0,1],[1,1]])
        c.inequalities()
        # array([[-1, 1],
        #        [1, 0]], dtype=object)
        ```
        """
        return self._output(self._hrep.get().inequalities, dtype, "inequalities")

    # aliases
    hyperplanes = inequalities

    def equations(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns the equations of the H-representation.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The equations.
        """
        return self._output(self._hrep.get().equations, dtype, "equations")

    def generators(self) -> VRep:
        """
        **Description:**
        Returns the V-representation, i.e., the (not necessarily extremal) rays
        and the lineality generators. If the cone was given by rays, these are
        the input ones.

        **Arguments:**
        None.

        **Returns:**
        *(VRep)* The pair (rays, lineality).
        """
        rays, lineality = self._vrep.get()
        return VRep(rays.copy(), lineality.copy())

    def rays(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns the extremal rays of the cone, modulo the lineality space. That
        is, a minimal list of rays that, together with the lineality space,
        generates the cone.

        The rays are reduced modulo the lineality space, primitive and sorted,
        so they only depend on the cone.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The extremal rays.

        **Aliases:**
        `extremal_rays`.

        **Example:**
        ```python {2}
        c = Cone([[0,1],[1,1],[1,0]])
        c.rays()
        # array([[0, 1],
        #        [1, 0]], dtype=object)
        ```
        """
        return self._output(self._canonical_v.get().rays, dtype, "rays")

    # aliases
    extremal_rays = rays

    def facets(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns the facet normals of the cone. That is, the irredundant
        inequalities, each defining a distinct facet. They are reduced modulo
        the equations, primitive and sorted.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The facet normals.

        **Example:**
        ```python {2}
        c = Cone(inequalities=[[1,0],[2,0],[0,1],[1,1]])
        c.facets()
        # array([[0, 1],
        #        [1, 0]], dtype=object)
        ```
        """
        return self._output(self._canonical_h.get().inequalities, dtype, "facets")

    def implied_equations(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns the equations implied by the cone that are not already in the
        span of the equations it was constructed with. E.g., if
        {x>=0, -x>=0} is input, then x==0 is an implied equation. For cones
        constructed from rays no equations were declared, so all of them are
        returned.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The implied equations, as rows of the canonical
        equation basis.

        **Example:**
        ```python {2}
        c = Cone(inequalities=[[1,0],[-1,0],[0,1]])
        c.implied_equations()
        # array([[1, 0]], dtype=object)
        ```
        """
        d = self._ambient_dim
        known = self._declared_equations
        implied = []
        for eq in self._canonical_h.get().equations:
            if not utils.in_span(eq, known, d):
                implied.append(list(eq))
                known = utils.stack(known, utils.as_matrix([list(eq)], width=d), width=d)
        return self._output(utils.as_matrix(implied, width=d), dtype, "implied equations")

    def generators_of_span(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns a basis of the linear span of the cone. It is a lattice basis
        of the integer points in the span.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The basis, as rows.
        """
        basis = utils.kernel_lattice_basis(
            self._canonical_h.get().equations, self._ambient_dim
        )
        return self._output(basis, dtype, "generators of the span")

    def generators_of_lineality_space(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns a basis of the lineality space, in echelon form.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The basis, as rows.

        **Example:**
        ```python {2}
        c = Cone([[1,0,0],[0,1,0],[0,-1,0]])
        c.generators_of_lineality_space()
        # array([[0, 1, 0]], dtype=object)
        ```
        """
        if self._canonical_v.is_present or (not self._hrep.is_present):
            basis = self._canonical_v.get().lineality
        else:
            # the lineality space is {x : H@x == 0} for any H-representation
            d = self._ambient_dim
            null = utils.rational_nullspace(utils.stack(*self._hrep.get(), width=d), d)
            basis, _ = utils.echelon_basis(null, d)
        return self._output(basis, dtype, "generators of the lineality space")

    def quotient_lattice_basis(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns integer vectors whose classes form a basis of the lattice
        (Z^n ∩ span)/(Z^n ∩ lineality space). There are
        dimension()-lineality_dimension() of them. E.g., for a cone whose
        dimension is one more than the dimension of its lineality space, the
        single vector generates the ray modulo the lineality space.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The basis, as rows.
        """
        d = self._ambient_dim
        facets, equations = self._canonical_h.get()
        basis = utils.quotient_lattice_basis(
            equations, utils.stack(facets, equations, width=d), d
        )
        return self._output(basis, dtype, "quotient lattice basis")

    # annotations
    # -----------
    def multiplicity(self, dtype=None) -> int:
        """
        **Description:**
        Returns the multiplicity of the cone. This is an opaque weight (default
        1) that is stored verbatim and not related to the geometry.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(int)* The multiplicity.
        """
        return self._output(self._multiplicity, dtype, "multiplicity")

    def set_multiplicity(self, multiplicity: int) -> None:
        """
        **Description:**
        Sets the multiplicity of the cone.

        **Arguments:**
        - `multiplicity`: A nonnegative integer.

        **Returns:**
        Nothing.
        """
        if isinstance(multiplicity, bool) or not isinstance(
            multiplicity, (int, np.integer)
        ):
            raise InvalidArgumentError(
                f"expected a nonnegative integer, but got {multiplicity!r}"
            )
        if multiplicity < 0:
            raise InvalidArgumentError(
                f"expected a nonnegative integer, but got {multiplicity}"
            )
        self._multiplicity = int(multiplicity)

    def linear_forms(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns the linear forms attached to the cone. These are stored
        verbatim and not related to the geometry.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The linear forms, as rows.
        """
        return self._output(self._linear_forms, dtype, "linear forms")

    def set_linear_forms(self, linear_forms: ArrayLike) -> None:
        """
        **Description:**
        Sets the linear forms attached to the cone.

        **Arguments:**
        - `linear_forms`: An integer matrix.

        **Returns:**
        Nothing.
        """
        w = utils.width_of(linear_forms, "linear forms")
        self._linear_forms = utils.as_matrix(
            linear_forms,
            width=w if w is not None else self._ambient_dim,
            name="linear forms",
        )

    # predicates
    # ----------
    def is_origin(self) -> bool:
        """
        **Description:**
        Returns True if the cone is just the origin.

        **Arguments:**
        None.

        **Returns:**
        *(bool)* The truth value of the cone being the origin.
        """
        return self.dimension() == 0

    def is_full_space(self) -> bool:
        """
        **Description:**
        Returns True if the cone is the whole ambient space.

        **Arguments:**
        None.

        **Returns:**
        *(bool)* The truth value of the cone being the whole space.
        """
        return self.lineality_dimension() == self._ambient_dim

    def is_solid(self) -> bool:
        """
        **Description:**
        Returns True if the cone is solid, i.e. if it is full-dimensional.

        **Arguments:**
        None.

        **Returns:**
        *(bool)* The truth value of the cone being solid.

        **Aliases:**
        `is_full_dimensional`.

        **Example:**
        ```python {3,5}
        c1 = Cone([[1,0],[0,1]])
        c2 = Cone([[1,0,0],[0,1,0]])
        c1.is_solid()
        # True
        c2.is_solid()
        # False
        ```
        """
        return self.dimension() == self._ambient_dim

    # aliases
    is_full_dimensional = is_solid

    def is_pointed(self) -> bool:
        """
        **Description:**
        Returns True if the cone is pointed (i.e. strongly convex). A cone is
        pointed if no x!=0 exists such that both x and -x are in the cone.

        **Arguments:**
        None.

        **Returns:**
        *(bool)* The truth value of the cone being pointed.

        **Aliases:**
        `is_strongly_convex`.

        **Example:**
        ```python {3,5}
        c1 = Cone([[1,0],[0,1]])
        c2 = Cone([[1,0],[0,1],[-1,0]])
        c1.is_pointed()
        # True
        c2.is_pointed()
        # False
        ```
        """
        return self.lineality_dimension() == 0

    # aliases
    is_strongly_convex = is_pointed

    def is_simplicial(self) -> bool:
        """
        **Description:**
        Returns True if the cone is simplicial. That is, if the number of
        extremal rays (modulo the lineality space) equals
        dimension()-lineality_dimension().

        **Arguments:**
        None.

        **Returns:**
        *(bool)* The truth value of the cone being simplicial.

        **Example:**
        ```python {3,5}
        c1 = Cone([[1,0,0],[0,1,0],[0,0,1]])
        c2 = Cone([[1,0,0],[0,1,0],[0,0,1],[1,1,-1]])
        c1.is_simplicial()
        # True
        c2.is_simplicial()
        # False
        ```
        """
        return len(self.rays()) == self.dimension() - self.lineality_dimension()

    def contains_positive_vector(self) -> bool:
        """
        **Description:**
        Returns True if the cone contains a vector whose coordinates are all
        strictly positive (equivalently, if its relative interior does).

        **Arguments:**
        None.

        **Returns:**
        *(bool)* The truth value of the cone containing a positive vector.

        **Example:**
        ```python {2}
        Cone([[1,0],[0,1]]).contains_positive_vector()
        # True
        ```
        """
        inter = self.intersection(Cone.positive_orthant(self._ambient_dim))
        return all(x > 0 for x in inter.relative_interior_point())

    def _check_point(self, point, name: str = "point") -> np.ndarray:
        pt = utils.as_vector(point, name=name)
        if len(pt) != self._ambient_dim:
            raise DimensionMismatchError(
                "expected ambient dim of cone and size of vector to be equal "
                f"but got {self._ambient_dim} and {len(pt)}"
            )
        return pt

    def _check_cone(self, other: "Cone") -> None:
        if not isinstance(other, Cone):
            raise ValueError(f"Expected a Cone, but got {type(other)}.")
        if other._ambient_dim != self._ambient_dim:
            raise DimensionMismatchError(
                "expected cones with same ambient dimensions but got "
                f"dimensions {self._ambient_dim} and {other._ambient_dim}"
            )

    def contains(self, other) -> "bool | tuple[bool]":
        """
        **Description:**
        Checks if a point, a list of points or a cone is contained in the cone.

        **Arguments:**
        - `other`: The object to check containment of. Can be a 1D array,
            which is treated as a point. Can be a 2D array, which is treated as
            a list of points. Can be a Cone.

        **Returns:**
        Whether `other` is contained in the cone. A tuple of answers if a list
        of points was input.

        **Example:**
        ```python {2,4}
        c = Cone([[1,0],[0,1]])
        c.contains([1,2])
        # True
        c.contains(Cone([[1,1]]))
        # True
        ```
        """
        ineqs, eqs = self._hrep.get()

        if isinstance(other, Cone):
            self._check_cone(other)
            rays, lineality = other._vrep.get()
            return bool(
                np.all(utils.dot_rows(ineqs, rays) >= 0)
                and np.all(utils.dot_rows(eqs, rays) == 0)
                and np.all(utils.dot_rows(ineqs, lineality) == 0)
                and np.all(utils.dot_rows(eqs, lineality) == 0)
            )

        arr = np.array(other, dtype=object)
        if arr.ndim == 2:
            return tuple(self.contains(pt) for pt in arr)

        pt = self._check_point(other)
        return bool(
            np.all(utils.dot_rows(ineqs, [pt]) >= 0)
            and np.all(utils.dot_rows(eqs, [pt]) == 0)
        )

    def __contains__(self, other) -> bool:
        return self.contains(other)

    def contains_relatively(self, point: ArrayLike) -> bool:
        """
        **Description:**
        Checks if a point is in the relative interior of the cone. That is,
        all equations vanish on it and all facet normals are strictly positive
        on it.

        **Arguments:**
        - `point`: The point.

        **Returns:**
        *(bool)* Whether the point is in the relative interior.

        **Example:**
        ```python {2,4}
        c = Cone([[1,0],[0,1]])
        c.contains_relatively([1,1])
        # True
        c.contains_relatively([1,0])
        # False
        ```
        """
        pt = self._check_point(point)
        facets, equations = self._canonical_h.get()
        return bool(
            np.all(utils.dot_rows(facets, [pt]) > 0)
            and np.all(utils.dot_rows(equations, [pt]) == 0)
        )

    def face_containing(self, point: ArrayLike) -> "Cone":
        """
        **Description:**
        Returns the smallest face of the cone containing the point. This is the
        cone obtained by turning the facet inequalities vanishing at the point
        into equations.

        **Arguments:**
        - `point`: A point in the cone.

        **Returns:**
        *(Cone)* The face.
        """
        pt = self._check_point(point)
        if not self.contains(pt):
            raise InvalidArgumentError("the provided point does not lie in the cone")

        d = self._ambient_dim
        facets, equations = self._canonical_h.get()
        vals = utils.dot_rows(facets, [pt])[:, 0]
        saturated = facets[vals == 0]
        strict = facets[vals != 0]

        # the equations of the face are the old ones plus the saturated facets
        return Cone._from_slots(
            d,
            hrep=HRep(strict.copy(), utils.stack(equations, saturated, width=d)),
            h_flags=KNOWN_SUBSPACE,
        )

    def has_face(self, candidate: "Cone") -> bool:
        """
        **Description:**
        Checks if a cone is a face of this cone. That is, whether the smallest
        face containing a relative interior point of the candidate is the
        candidate itself.

        **Arguments:**
        - `candidate` *(Cone)*: The possible face.

        **Returns:**
        *(bool)* Whether the candidate is a face.

        **Example:**
        ```python {2}
        c = Cone([[1,0],[0,1]])
        c.has_face(Cone([[1,0]]))
        # True
        c.has_face(Cone([[1,1]]))
        # False
        ```
        """
        self._check_cone(candidate)

        pt = candidate.relative_interior_point()
        if not self.contains(pt):
            return False
        return self.face_containing(pt) == candidate

    # operations
    # ----------
    def dual_cone(self) -> "Cone":
        """
        **Description:**
        Returns the dual cone {y : y.x >= 0 for all x in the cone}.

        **Arguments:**
        None.

        **Returns:**
        *(Cone)* The dual cone.

        **Aliases:**
        `dual`.

        **Example:**
        ```python {2,4}
        c = Cone([[0,1],[1,1]])
        c.dual_cone()
        # A rational polyhedral cone in RR^2 defined by 2 inequalities and 0 equations
        c.dual_cone().rays()
        # array([[-1, 1],
        #        [1, 0]], dtype=object)
        ```
        """
        d = self._ambient_dim
        vrep = self._vrep.peek()
        if vrep is not None:
            rays, lineality = vrep
            return Cone._from_slots(
                d, hrep=HRep(rays.copy(), lineality.copy()), h_flags=self._v_flags
            )

        ineqs, eqs = self._hrep.get()
        return Cone._from_slots(
            d, vrep=VRep(ineqs.copy(), eqs.copy()), v_flags=self._h_flags
        )

    # aliases
    dual = dual_cone

    def negated(self) -> "Cone":
        """
        **Description:**
        Returns the negated cone {-x : x in the cone}.

        **Arguments:**
        None.

        **Returns:**
        *(Cone)* The negated cone.
        """
        vrep = self._vrep.peek()
        hrep = self._hrep.peek()
        out = Cone._from_slots(
            self._ambient_dim,
            vrep=None if vrep is None else VRep(-vrep.rays, -vrep.lineality),
            hrep=None if hrep is None else HRep(-hrep.inequalities, hrep.equations.copy()),
            v_flags=self._v_flags,
            h_flags=self._h_flags,
        )
        out._declared_equations = self._declared_equations.copy()
        return out

    def __neg__(self) -> "Cone":
        return self.negated()

    def lineality_space(self) -> "Cone":
        """
        **Description:**
        Returns the lineality space as a formal cone object, i.e., the largest
        linear subspace contained in the cone. It is defined by equations only.

        **Arguments:**
        None.

        **Returns:**
        *(Cone)* A cone defining the lineality space.

        **Example:**
        ```python {2}
        c = Cone([[1,0],[0,1],[0,-1]])
        c.lineality_space().rays()
        # array([], shape=(0, 2), dtype=object)
        ```
        """
        d = self._ambient_dim
        ineqs, eqs = self._hrep.get()
        equations = utils.stack(ineqs, eqs, width=d)
        return Cone._from_slots(
            d,
            hrep=HRep(np.empty((0, d), dtype=object), equations),
            h_flags=KNOWN_ALL,
        )

    def intersection(self, other: "Cone | Iterable[Cone]") -> "Cone":
        """
        **Description:**
        Computes the intersection with another cone, or with a list of cones.
        The result is always canonicalized, so repeated intersections don't
        accumulate redundant inequalities.

        **Arguments:**
        - `other` *(Cone or array_like)*: The other cone that is being
            intersected, or a list of cones to intersect with.

        **Returns:**
        *(Cone)* The cone that results from the intersection.

        **Example:**
        ```python {3}
        c1 = Cone([[1,0],[1,2]])
        c2 = Cone([[0,1],[2,1]])
        c3 = c1.intersection(c2)
        c3.rays()
        # array([[1, 2],
        #        [2, 1]], dtype=object)
        ```
        """
        others = [other] if isinstance(other, Cone) else list(other)
        for c in others:
            if not isinstance(c, Cone):
                raise ValueError("Elements of the list must be Cone objects.")
            self._check_cone(c)

        d = self._ambient_dim
        ineqs, eqs = self._hrep.get()
        for c in others:
            c_ineqs, c_eqs = c._hrep.get()
            ineqs = utils.stack(ineqs, c_ineqs, width=d)
            eqs = utils.stack(eqs, c_eqs, width=d)

        out = Cone._from_slots(d, hrep=HRep(ineqs, eqs))
        out.canonicalize()
        return out

    def link(self, apex: ArrayLike) -> "Cone":
        """
        **Description:**
        Returns the link of the cone at a point. This is the cone of feasible
        directions from the point, {v : apex+t*v is in the cone for small t>0},
        i.e., the local structure of the cone at the point.

        If the point is not in the cone, a `GeometricPreconditionWarning` is
        issued and the computation proceeds anyway.

        **Arguments:**
        - `apex`: The point.

        **Returns:**
        *(Cone)* The link.

        **Example:**
        ```python {2}
        c = Cone([[1,0],[0,1]])
        c.link([1,0]).facets()
        # array([[0, 1]], dtype=object)
        ```
        """
        pt = self._check_point(apex, name="apex")
        inside = self.contains(pt)
        if not inside:
            warnings.warn(
                "the provided point does not lie in the cone",
                GeometricPreconditionWarning,
            )

        # only the inequalities vanishing at the apex constrain the directions
        d = self._ambient_dim
        ineqs, eqs = self._hrep.get()
        vals = utils.dot_rows(ineqs, [pt])[:, 0]
        out = Cone._from_slots(
            d,
            hrep=HRep(ineqs[vals == 0].copy(), eqs.copy()),
            h_flags=self._h_flags if inside else 0,
        )
        return out

    def relative_interior_point(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns an integer point in the relative interior of the cone. It is
        the (primitive) sum of the generating rays, so it isn't unique. See
        [`unique_point`](#unique_point) for a deterministic choice.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The point.

        **Example:**
        ```python {2}
        c = Cone([[3,2],[5,3]])
        c.relative_interior_point()
        # array([8, 5], dtype=object)
        ```
        """
        # each facet is positive on at least one generating ray, so the sum of
        # the rays is positive on all of them
        rays = self._vrep.get().rays
        point = [sum(int(r[i]) for r in rays) for i in range(self._ambient_dim)]
        point = utils.as_vector(utils.primitive(point))
        return self._output(point, dtype, "relative interior point")

    def unique_point(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        Returns a point in the relative interior of the cone that only depends
        on the cone, not on how it was constructed: the sum of the canonical
        extremal rays. This makes it usable as a fingerprint.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The point.
        """
        rays = self._canonical_v.get().rays
        point = utils.as_vector(
            [sum(int(r[i]) for r in rays) for i in range(self._ambient_dim)]
        )
        return self._output(point, dtype, "unique point")

    def semigroup_generator_of_ray(self, dtype=None) -> np.ndarray:
        """
        **Description:**
        For a cone whose dimension is one more than the dimension of its
        lineality space, returns the primitive lattice vector generating the
        cone modulo the lineality space.

        **Arguments:**
        - `dtype`: If specified, a numpy integer type to narrow the output to.

        **Returns:**
        *(numpy.ndarray)* The generator.

        **Example:**
        ```python {2}
        c = Cone([[2,4]])
        c.semigroup_generator_of_ray()
        # array([1, 2], dtype=object)
        ```
        """
        dim, lin_dim = self.dimension(), self.lineality_dimension()
        if dim != lin_dim + 1:
            raise InvalidStateError(
                "expected dim of cone one larger than dim of lin space "
                f"but got dimensions {dim} and {lin_dim}"
            )

        v = self.quotient_lattice_basis()[0]
        facets = self._canonical_h.get().inequalities
        if np.any(utils.dot_rows(facets, [v]) < 0):
            v = -v
        return self._output(utils.as_vector(v), dtype, "semigroup generator")


def intersection(a: Cone, b: Cone) -> Cone:
    """
    **Description:**
    Computes the intersection of two cones. See
    [`Cone.intersection`](#intersection).

    **Arguments:**
    - `a`: The first cone.
    - `b`: The second cone.

    **Returns:**
    *(Cone)* The intersection, canonicalized.
    """
    return a.intersection(b)
