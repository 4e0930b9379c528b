"""
Lattice addressing module.

This module maps between flat site indices and (cell, basis site)
coordinates on a three-dimensional lattice, and enumerates the sites
in neighbouring cells under per-axis periodic or open boundaries.

Available components:
- LatticeMap: index arithmetic and neighbour queries
- CellIndex: integer cell coordinate (i, j, k)
- BOUNDARY_PRESETS / create_lattice_map: named boundary geometries
"""

from .base import CellIndex
from .lattice_map import LatticeMap
from .presets import BOUNDARY_PRESETS, create_lattice_map

__all__ = [
    'CellIndex',
    'LatticeMap',
    'BOUNDARY_PRESETS',
    'create_lattice_map',
]
