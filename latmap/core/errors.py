"""
Error hierarchy for lattice map construction and queries.

All errors derive from LatticeMapError and from the matching built-in
exception, so callers catching ValueError or IndexError keep working.
"""

from typing import Optional


class LatticeMapError(Exception):
    """Base class for all lattice map errors."""


class InvalidConfigurationError(LatticeMapError, ValueError):
    """
    Raised when a lattice map is built from invalid geometry parameters.

    Parameters
    ----------
    field : str
        Name of the offending geometry field (e.g. 'n_basis', 'repetitions')
    message : str, optional
        Human readable description. Defaults to a generic message
        naming the field.

    Attributes
    ----------
    field : str
        Name of the offending geometry field
    """

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        if message is None:
            message = f"Invalid value for '{field}'"
        super().__init__(message)


class IndexOutOfRangeError(LatticeMapError, IndexError):
    """Raised when a site index or cell coordinate is outside the lattice."""


class InvalidArgumentError(LatticeMapError, ValueError):
    """Raised when a query receives an argument of the wrong kind or sign."""
