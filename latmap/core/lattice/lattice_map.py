"""
LatticeMap: addressing arithmetic for sites on a periodic 3D lattice.

The lattice is a grid of Ra x Rb x Rc unit cells with n_basis sites per
cell. Every site has a flat index given by the mapping law

    cell_linear = (i * Rb + j) * Rc + k
    index       = cell_linear * n_basis + l

which is a bijection between [0, total_sites) and the valid (i, j, k, l)
tuples. The map owns no per-site data, only this arithmetic, and is used
by the simulation layer to find candidate interaction sites.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from .base import (
    AXIS_NAMES,
    CellIndex,
    require_integer,
    validate_n_basis,
    validate_periodic,
    validate_repetitions,
)
from ..errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidConfigurationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatticeMap:
    """
    Immutable map between flat site indices and lattice cell coordinates.

    Each of the three lattice axes is either periodic (coordinates wrap
    modulo the number of repetitions) or open (coordinates outside the grid
    do not exist). The boundary policy is set independently per axis.

    Parameters
    ----------
    n_basis : int
        Number of basis sites per unit cell, must be positive
    repetitions : Tuple[int, int, int]
        Number of cells (Ra, Rb, Rc) along the a, b and c axes
    periodic : Tuple[bool, bool, bool]
        Periodicity flag for the a, b and c axes

    Attributes
    ----------
    total_cells : int
        Ra * Rb * Rc
    total_sites : int
        total_cells * n_basis

    Raises
    ------
    InvalidConfigurationError
        If any geometry parameter is invalid. The error's ``field``
        attribute names the offending parameter.

    Examples
    --------
    >>> lattice_map = LatticeMap(n_basis=2,
    ...                          repetitions=(4, 4, 4),
    ...                          periodic=(True, True, False))
    >>> lattice_map.total_sites
    128
    >>> lattice_map.index_to_cell(37)
    CellIndex(i=1, j=0, k=2)
    >>> lattice_map.indices_from_cell(1, 0, 2)
    array([36, 37])

    Notes
    -----
    Every query returns a newly allocated result, and the map itself is
    frozen after construction, so a single instance can be shared between
    threads without locking.
    """
    n_basis: int
    repetitions: Tuple[int, int, int]
    periodic: Tuple[bool, bool, bool]

    def __post_init__(self):
        # Normalise inputs (lists, numpy arrays) into plain immutable values
        object.__setattr__(self, 'n_basis', validate_n_basis(self.n_basis))
        object.__setattr__(self, 'repetitions', validate_repetitions(self.repetitions))
        object.__setattr__(self, 'periodic', validate_periodic(self.periodic))

        logger.debug(f"Initialized {self.__class__.__name__} with "
                     f"n_basis={self.n_basis}, repetitions={self.repetitions}, "
                     f"periodic={self.periodic}")

    # ------------------------------------------------------------------
    # Geometry accessors
    # ------------------------------------------------------------------

    @property
    def total_cells(self) -> int:
        """Number of unit cells in the lattice."""
        ra, rb, rc = self.repetitions
        return ra * rb * rc

    @property
    def total_sites(self) -> int:
        """Number of sites in the lattice."""
        return self.total_cells * self.n_basis

    @property
    def repetitions_a(self) -> int:
        return self.repetitions[0]

    @property
    def repetitions_b(self) -> int:
        return self.repetitions[1]

    @property
    def repetitions_c(self) -> int:
        return self.repetitions[2]

    @property
    def periodic_a(self) -> bool:
        return self.periodic[0]

    @property
    def periodic_b(self) -> bool:
        return self.periodic[1]

    @property
    def periodic_c(self) -> bool:
        return self.periodic[2]

    # ------------------------------------------------------------------
    # Encoding / decoding
    # ------------------------------------------------------------------

    def indices_from_cell(self, i: int, j: int, k: int) -> np.ndarray:
        """
        Get the site indices belonging to a unit cell.

        Parameters
        ----------
        i, j, k : int
            Cell coordinate, 0 <= i < Ra, 0 <= j < Rb, 0 <= k < Rc

        Returns
        -------
        indices : np.ndarray, shape (n_basis,)
            Site indices of the cell in increasing order, one per basis site

        Raises
        ------
        IndexOutOfRangeError
            If the cell lies outside the lattice
        InvalidArgumentError
            If a coordinate is not an integer
        """
        first = self._cell_linear(i, j, k) * self.n_basis
        return np.arange(first, first + self.n_basis, dtype=np.int64)

    def index_from_site(self, i: int, j: int, k: int, l: int) -> int:
        """
        Get the flat index of basis site l in cell (i, j, k).

        Raises
        ------
        IndexOutOfRangeError
            If the cell lies outside the lattice or l is not a basis index
        """
        cell_linear = self._cell_linear(i, j, k)
        l = require_integer(l, 'l')
        if not 0 <= l < self.n_basis:
            raise IndexOutOfRangeError(
                f"Basis index {l} out of range [0, {self.n_basis})"
            )
        return cell_linear * self.n_basis + l

    def index_to_cell(self, index: int) -> CellIndex:
        """
        Get the cell coordinate containing a site.

        Parameters
        ----------
        index : int
            Site index, 0 <= index < total_sites

        Returns
        -------
        cell : CellIndex
            The unique (i, j, k) such that indices_from_cell(i, j, k)
            contains index

        Raises
        ------
        IndexOutOfRangeError
            If index lies outside the lattice
        InvalidArgumentError
            If index is not an integer

        Notes
        -----
        Inverts the mapping law directly with integer division, so the
        cost does not depend on the lattice size.
        """
        index = self._check_index(index)
        _, rb, rc = self.repetitions

        cell_linear = index // self.n_basis
        rest, k = divmod(cell_linear, rc)
        i, j = divmod(rest, rb)
        return CellIndex(i, j, k)

    def basis_site_from_index(self, index: int) -> int:
        """Get the basis index l of a site."""
        return self._check_index(index) % self.n_basis

    def wrap_cell(self, i: int, j: int, k: int) -> Optional[CellIndex]:
        """
        Apply the boundary conditions to an arbitrary cell coordinate.

        Periodic axes are wrapped fully into [0, R), for any distance
        outside the grid. On an open axis a coordinate outside [0, R)
        has no image.

        Parameters
        ----------
        i, j, k : int
            Cell coordinate, possibly outside the grid

        Returns
        -------
        cell : CellIndex or None
            The wrapped coordinate, or None if the cell lies beyond an
            open boundary
        """
        wrapped = []
        for axis, value in enumerate((i, j, k)):
            value = require_integer(value, CellIndex._fields[axis])
            repetitions = self.repetitions[axis]
            if self.periodic[axis]:
                value %= repetitions
            elif not 0 <= value < repetitions:
                return None
            wrapped.append(value)
        return CellIndex(*wrapped)

    # ------------------------------------------------------------------
    # Neighbour queries
    # ------------------------------------------------------------------

    def neighbour_indices(self, index: int, shells: int = 1) -> np.ndarray:
        """
        Get the sites in all cells within a number of shells of a site.

        The cells considered form a cube of (2*shells + 1)**3 cells centred
        on the cell of ``index``. Offsets are enumerated in ascending order
        with the a axis outermost and the c axis innermost. Each surviving
        cell contributes all of its basis sites in ascending order.

        Parameters
        ----------
        index : int
            Site index of the central site
        shells : int, optional
            Chebyshev radius of the neighbourhood in cells (default: 1)

        Returns
        -------
        neighbours : np.ndarray
            Site indices in enumeration order, including the central cell

        Raises
        ------
        InvalidArgumentError
            If shells is negative or not an integer
        IndexOutOfRangeError
            If index lies outside the lattice

        Notes
        -----
        Cells beyond an open boundary are skipped, so the result may be
        shorter than (2*shells + 1)**3 * n_basis. When 2*shells + 1 exceeds
        the repetitions of a periodic axis, the same cell is reached from
        several offsets and its sites appear more than once. Use
        superset_neighbour_indices() for a sorted, unique list.
        """
        shells = self._check_shells(shells)
        cell = self.index_to_cell(index)

        candidates = [self._axis_candidates(axis, center, shells)
                      for axis, center in enumerate(cell)]
        cells_i, cells_j, cells_k = np.meshgrid(*candidates, indexing='ij')

        _, rb, rc = self.repetitions
        cells = ((cells_i * rb + cells_j) * rc + cells_k).ravel()

        basis = np.arange(self.n_basis, dtype=np.int64)
        return (cells[:, np.newaxis] * self.n_basis + basis).ravel()

    def superset_neighbour_indices(self,
                                   indices: Iterable[int],
                                   shells: int = 1) -> np.ndarray:
        """
        Get the union of the neighbourhoods of several sites.

        Parameters
        ----------
        indices : Iterable[int]
            Site indices, in any order and possibly repeated
        shells : int, optional
            Shell radius passed to neighbour_indices() (default: 1)

        Returns
        -------
        superset : np.ndarray
            Sorted site indices without repetitions

        Raises
        ------
        InvalidArgumentError
            If shells is invalid or an index is not an integer
        IndexOutOfRangeError
            If an index lies outside the lattice
        """
        shells = self._check_shells(shells)
        neighbour_lists = [self.neighbour_indices(index, shells) for index in indices]

        if not neighbour_lists:
            return np.empty(0, dtype=np.int64)

        return np.unique(np.concatenate(neighbour_lists))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict:
        """
        Serialize to dictionary.

        Returns
        -------
        data : Dict
            Dictionary with keys:
            - 'type': 'lattice_map'
            - 'n_basis': int
            - 'repetitions': [Ra, Rb, Rc]
            - 'periodic': [bool, bool, bool]
        """
        return {
            'type': 'lattice_map',
            'n_basis': self.n_basis,
            'repetitions': list(self.repetitions),
            'periodic': list(self.periodic),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LatticeMap':
        """
        Reconstruct from dictionary.

        Parameters
        ----------
        data : Dict
            Dictionary from to_dict(). The 'type' key is optional.

        Returns
        -------
        lattice_map : LatticeMap
            Reconstructed object

        Raises
        ------
        InvalidConfigurationError
            If the type does not match or a required key is missing
        """
        data_type = data.get('type', 'lattice_map')
        if data_type != 'lattice_map':
            raise InvalidConfigurationError(
                'type', f"Expected type 'lattice_map', got '{data_type}'"
            )

        for key in ('n_basis', 'repetitions', 'periodic'):
            if key not in data:
                raise InvalidConfigurationError(key, f"Missing required key '{key}'")

        return cls(
            n_basis=data['n_basis'],
            repetitions=data['repetitions'],
            periodic=data['periodic'],
        )

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    def _check_index(self, index: Any) -> int:
        index = require_integer(index, 'index')
        if not 0 <= index < self.total_sites:
            raise IndexOutOfRangeError(
                f"Site index {index} out of range [0, {self.total_sites})"
            )
        return index

    @staticmethod
    def _check_shells(shells: Any) -> int:
        shells = require_integer(shells, 'shells')
        if shells < 0:
            raise InvalidArgumentError(f"shells must be non-negative, got {shells}")
        return shells

    def _cell_linear(self, i: Any, j: Any, k: Any) -> int:
        """Validate a cell coordinate and return its linear cell number."""
        coords = []
        for axis, value in enumerate((i, j, k)):
            value = require_integer(value, CellIndex._fields[axis])
            if not 0 <= value < self.repetitions[axis]:
                raise IndexOutOfRangeError(
                    f"Cell coordinate {value} along axis {AXIS_NAMES[axis]} "
                    f"out of range [0, {self.repetitions[axis]})"
                )
            coords.append(value)

        i, j, k = coords
        _, rb, rc = self.repetitions
        return (i * rb + j) * rc + k

    def _axis_candidates(self, axis: int, center: int, shells: int) -> np.ndarray:
        """Cell coordinates along one axis within shells of center, after wrapping."""
        repetitions = self.repetitions[axis]
        candidates = np.arange(center - shells, center + shells + 1, dtype=np.int64)

        if self.periodic[axis]:
            return np.mod(candidates, repetitions)
        return candidates[(candidates >= 0) & (candidates < repetitions)]

    def __str__(self) -> str:
        """Detailed string representation."""
        boundary = ", ".join(
            f"{name}={'periodic' if flag else 'open'}"
            for name, flag in zip(AXIS_NAMES, self.periodic)
        )
        return (f"LatticeMap: {self.n_basis} basis site(s) x "
                f"{self.repetitions[0]}x{self.repetitions[1]}x{self.repetitions[2]} "
                f"cells = {self.total_sites} sites ({boundary})")
