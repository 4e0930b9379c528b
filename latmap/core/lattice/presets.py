"""
Preset boundary conditions for common simulation geometries.

This module provides named periodicity patterns for the usual kinetic
Monte Carlo set-ups:
- bulk: periodic along all axes
- slab: periodic in-plane (a, b), open along the surface normal c
- wire: open in the cross-section (a, b), periodic along c
- cluster: open along all axes
"""

import logging
from typing import Dict, Sequence, Tuple

from .lattice_map import LatticeMap
from ..errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


# Boundary registry for config-based construction
BOUNDARY_PRESETS: Dict[str, Tuple[bool, bool, bool]] = {
    'bulk': (True, True, True),
    'slab': (True, True, False),
    'wire': (False, False, True),
    'cluster': (False, False, False),
}


def create_lattice_map(geometry: str,
                       n_basis: int = 1,
                       repetitions: Sequence[int] = (1, 1, 1)) -> LatticeMap:
    """
    Factory function to create lattice maps from geometry names.

    Parameters
    ----------
    geometry : str
        Name of the boundary preset ('bulk', 'slab', 'wire', 'cluster')
    n_basis : int, optional
        Number of basis sites per cell (default: 1)
    repetitions : Sequence[int], optional
        Number of cells along each axis (default: (1, 1, 1))

    Returns
    -------
    lattice_map : LatticeMap
        Map with the preset's periodicity

    Examples
    --------
    >>> lattice_map = create_lattice_map('slab', n_basis=2, repetitions=(8, 8, 4))
    >>> lattice_map.periodic
    (True, True, False)

    Raises
    ------
    InvalidConfigurationError
        If geometry is not recognized, or the remaining parameters are invalid
    """
    if geometry not in BOUNDARY_PRESETS:
        available = ', '.join(BOUNDARY_PRESETS.keys())
        raise InvalidConfigurationError(
            'geometry',
            f"Unknown geometry '{geometry}'. Available geometries: {available}"
        )

    logger.debug(f"Creating '{geometry}' lattice map")
    return LatticeMap(n_basis=n_basis,
                      repetitions=repetitions,
                      periodic=BOUNDARY_PRESETS[geometry])
