"""
Shared value types and validation helpers for lattice maps.

A lattice map addresses sites on a three-dimensional grid of unit cells.
Each cell is identified by an integer coordinate (i, j, k) along the
lattice axes a, b and c, and each site by a cell plus a basis index l.
"""

import numpy as np
from typing import Any, NamedTuple, Sequence, Tuple

from ..errors import InvalidArgumentError, InvalidConfigurationError


AXIS_NAMES = ('a', 'b', 'c')


class CellIndex(NamedTuple):
    """
    Integer coordinate of a unit cell.

    Attributes
    ----------
    i : int
        Cell index along the a axis
    j : int
        Cell index along the b axis
    k : int
        Cell index along the c axis
    """
    i: int
    j: int
    k: int


def is_integer(value: Any) -> bool:
    """Check for a Python or numpy integer, excluding booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def require_integer(value: Any, name: str) -> int:
    """
    Convert a query argument to a plain int.

    Raises
    ------
    InvalidArgumentError
        If value is not an integer
    """
    if not is_integer(value):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def as_axis_triple(values: Sequence[Any], field: str) -> Tuple[Any, ...]:
    """
    Unpack a per-axis geometry parameter into a tuple of exactly 3 entries.

    Parameters
    ----------
    values : Sequence
        One entry per lattice axis (a, b, c)
    field : str
        Name of the geometry field, used in error messages

    Returns
    -------
    items : tuple
        The three entries

    Raises
    ------
    InvalidConfigurationError
        If values is not a sequence of length 3
    """
    if isinstance(values, (str, bytes)):
        raise InvalidConfigurationError(
            field, f"'{field}' must be a sequence of 3 values, got {values!r}"
        )
    try:
        items = tuple(values)
    except TypeError:
        raise InvalidConfigurationError(
            field, f"'{field}' must be a sequence of 3 values, got {values!r}"
        ) from None

    if len(items) != 3:
        raise InvalidConfigurationError(
            field, f"'{field}' must have exactly 3 entries, got {len(items)}"
        )
    return items


def validate_n_basis(n_basis: Any) -> int:
    """Check the number of basis sites per cell."""
    if not is_integer(n_basis) or n_basis < 1:
        raise InvalidConfigurationError(
            'n_basis', f"'n_basis' must be a positive integer, got {n_basis!r}"
        )
    return int(n_basis)


def validate_repetitions(repetitions: Sequence[Any]) -> Tuple[int, int, int]:
    """Check the number of cell repetitions along each axis."""
    items = as_axis_triple(repetitions, 'repetitions')
    for axis, value in zip(AXIS_NAMES, items):
        if not is_integer(value) or value < 1:
            raise InvalidConfigurationError(
                'repetitions',
                f"'repetitions' along axis {axis} must be a positive integer, "
                f"got {value!r}"
            )
    return tuple(int(value) for value in items)


def validate_periodic(periodic: Sequence[Any]) -> Tuple[bool, bool, bool]:
    """Check the periodicity flag of each axis."""
    items = as_axis_triple(periodic, 'periodic')
    for axis, value in zip(AXIS_NAMES, items):
        # 0/1 integers are accepted as flags, anything else is ambiguous
        if not isinstance(value, (bool, np.bool_)) and not (
                is_integer(value) and value in (0, 1)):
            raise InvalidConfigurationError(
                'periodic',
                f"'periodic' along axis {axis} must be a boolean, got {value!r}"
            )
    return tuple(bool(value) for value in items)
