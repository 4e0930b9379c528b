"""
Core domain models for the latmap package.

This module contains:
- Lattice: site addressing and neighbour queries on a 3D cell grid
- Errors: the exceptions raised by construction and queries
"""

from .lattice import (
    CellIndex,
    LatticeMap,
    BOUNDARY_PRESETS,
    create_lattice_map
)

from .errors import (
    LatticeMapError,
    InvalidConfigurationError,
    IndexOutOfRangeError,
    InvalidArgumentError
)

__all__ = [
    # Lattice
    'CellIndex',
    'LatticeMap',
    'BOUNDARY_PRESETS',
    'create_lattice_map',

    # Errors
    'LatticeMapError',
    'InvalidConfigurationError',
    'IndexOutOfRangeError',
    'InvalidArgumentError',
]
