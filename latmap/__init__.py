"""
latmap: Lattice site addressing for kinetic Monte Carlo

A Python package mapping between flat site indices and coordinates on a
three-dimensional lattice of unit cells, with per-axis periodic or open
boundaries and neighbour-shell queries.

Main Components
---------------
core : LatticeMap, CellIndex, boundary presets and the error hierarchy

Quick Start
-----------
>>> from latmap import LatticeMap
>>>
>>> # 4x4x4 cells, 2 basis sites each, open along c
>>> lattice_map = LatticeMap(n_basis=2,
...                          repetitions=(4, 4, 4),
...                          periodic=(True, True, False))
>>>
>>> # Sites in the first neighbour shell of site 0
>>> neighbours = lattice_map.neighbour_indices(0, shells=1)
>>>
>>> # Sorted union of the neighbourhoods of several sites
>>> superset = lattice_map.superset_neighbour_indices([0, 1, 37])

Current Version: 0.1.0
"""

__version__ = "0.1.0"

# High-level API exports
from .core import (
    # Lattice
    CellIndex,
    LatticeMap,
    BOUNDARY_PRESETS,
    create_lattice_map,

    # Errors
    LatticeMapError,
    InvalidConfigurationError,
    IndexOutOfRangeError,
    InvalidArgumentError,
)

__all__ = [
    # Version info
    '__version__',

    # Core
    'CellIndex',
    'LatticeMap',
    'BOUNDARY_PRESETS',
    'create_lattice_map',
    'LatticeMapError',
    'InvalidConfigurationError',
    'IndexOutOfRangeError',
    'InvalidArgumentError',
]
