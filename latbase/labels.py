"""
Default labels for sites and bonds.

Label types are free, so code that needs "a" label (e.g. the preset
unitcells) asks for a default of the label type in use. Strings and numbers
are supported:

    function           str          number
    default_label      "1"          1
    default_label_a    "A"          1
    default_label_b    "B"          2
    default_label_x    "x"          1
    default_label_y    "y"          2
    default_label_z    "z"          3
    default_label_n    str(n)       n
"""

import numbers
from typing import Any, Type

from .errors import NotImplementedInterfaceError


def _lookup(function: str, label_type: Type, text: str, number: int) -> Any:
    if isinstance(label_type, type):
        if issubclass(label_type, str):
            return label_type(text)
        if issubclass(label_type, numbers.Number):
            return label_type(number)
    raise NotImplementedInterfaceError(function, label_type)


def default_label(label_type: Type) -> Any:
    """Generic default label, e.g. for all bonds of a single-species model."""
    return _lookup('default_label', label_type, "1", 1)


def default_label_a(label_type: Type) -> Any:
    """Label of the A sublattice."""
    return _lookup('default_label_a', label_type, "A", 1)


def default_label_b(label_type: Type) -> Any:
    """Label of the B sublattice."""
    return _lookup('default_label_b', label_type, "B", 2)


def default_label_x(label_type: Type) -> Any:
    return _lookup('default_label_x', label_type, "x", 1)


def default_label_y(label_type: Type) -> Any:
    return _lookup('default_label_y', label_type, "y", 2)


def default_label_z(label_type: Type) -> Any:
    return _lookup('default_label_z', label_type, "z", 3)


def default_label_n(label_type: Type, n: int) -> Any:
    """
    Label for the n-th species, e.g. the n-th neighbour shell.

    Parameters
    ----------
    label_type : type
        str or a numeric type.
    n : int
        Species number.

    Examples
    --------
    >>> default_label_n(str, 2)
    '2'
    >>> default_label_n(float, 2)
    2.0
    """
    return _lookup('default_label_n', label_type, str(int(n)), int(n))
