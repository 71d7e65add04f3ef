"""
Conformance checks for alternative implementations.

Any site, bond, unitcell or lattice type can replace the defaults as long as
it implements the accessor contract. `check_interface(cls)` builds a few
instances of `cls` with the same constructor arguments as the default
implementation and calls every getter and setter on them, so a missing or
unimplemented accessor shows up before the type is used.
"""

import logging
import numpy as np
from typing import Any, Callable

from .bond import AbstractBond, Bond
from .lattice import AbstractLattice
from .site import AbstractSite, Site
from .unitcell import AbstractUnitcell, Unitcell
from ..errors import NotImplementedInterfaceError

logger = logging.getLogger(__name__)

# the same sample values for every type
SAMPLE_LABELS = ("t", 1, 1.0)
SAMPLE_POINTS = ([1.0], [1.0, 1.0], [0.0, 0.0, 0.0, 0.0])
SAMPLE_WRAPS = ((1,), (0, 0), (0, 0, 0), (1, 2, 0, 0))


def _accessor(obj: Any, method: str) -> Callable:
    accessor = getattr(obj, method, None)
    if accessor is None or not callable(accessor):
        raise NotImplementedInterfaceError(method, type(obj))
    return accessor


def _exercise(obj: Any, getters, setters) -> None:
    for method in getters:
        _accessor(obj, method)()
    for method, value in setters:
        _accessor(obj, method)(value)


def check_site_interface(cls: type) -> bool:
    """
    Construct `cls(point, label)` for a range of points and labels and call
    every site accessor.

    Returns
    -------
    bool
        True if every call succeeded.

    Raises
    ------
    NotImplementedInterfaceError
        If an accessor is missing or not implemented.
    """
    for point in SAMPLE_POINTS:
        for label in SAMPLE_LABELS:
            site = cls(point, label)
            _exercise(site,
                      ('get_point', 'get_label', 'ndims'),
                      (('set_label', label), ('set_point', point)))
    return True


def check_bond_interface(cls: type) -> bool:
    """Same as `check_site_interface` for `cls(from_, to, label, wrap)`."""
    for wrap in SAMPLE_WRAPS:
        for label in SAMPLE_LABELS:
            bond = cls(1, 1, label, wrap)
            _exercise(bond,
                      ('get_from', 'get_to', 'get_label', 'get_wrap', 'nwrap'),
                      (('set_from', 1), ('set_to', 1),
                       ('set_label', label), ('set_wrap', wrap)))
    return True


def _sample_parts(label: Any):
    vectors = [np.array([1.0, 0.0]), np.array([0.0, 1.0])]
    sites = [Site([0.0, 0.0], label)]
    bonds = [Bond(1, 1, label, (1, 0)), Bond(1, 1, label, (-1, 0))]
    return vectors, sites, bonds


_CONTAINER_GETTERS = ('get_lattice_vectors', 'get_sites', 'get_bonds')


def _container_setters(vectors, sites, bonds):
    return (('set_lattice_vectors', vectors), ('set_sites', sites),
            ('set_bonds', bonds))


def check_unitcell_interface(cls: type) -> bool:
    """
    Construct `cls(lattice_vectors, sites, bonds)` and call every unitcell
    accessor, then validate the result.
    """
    for label in SAMPLE_LABELS:
        vectors, sites, bonds = _sample_parts(label)
        unitcell = cls(vectors, sites, bonds)
        _exercise(unitcell, _CONTAINER_GETTERS,
                  _container_setters(vectors, sites, bonds))
        unitcell.validate(check_reciprocal=True)
    return True


def check_lattice_interface(cls: type) -> bool:
    """
    Construct `cls(lattice_vectors, sites, bonds, unitcell)` and call every
    lattice accessor, then validate the result.
    """
    for label in SAMPLE_LABELS:
        vectors, sites, bonds = _sample_parts(label)
        unitcell = Unitcell(vectors, sites, bonds)
        lattice = cls(vectors, sites, bonds, unitcell)
        _exercise(lattice, _CONTAINER_GETTERS + ('get_unitcell',),
                  _container_setters(vectors, sites, bonds)
                  + (('set_unitcell', unitcell),))
        lattice.validate(check_reciprocal=True)
    return True


_CHECKS = (
    (AbstractSite, check_site_interface),
    (AbstractBond, check_bond_interface),
    (AbstractLattice, check_lattice_interface),
    (AbstractUnitcell, check_unitcell_interface),
)


def check_interface(cls: type) -> bool:
    """
    Check that `cls` implements the interface of its entity kind.

    Parameters
    ----------
    cls : type
        Subclass of AbstractSite, AbstractBond, AbstractUnitcell or
        AbstractLattice with the constructor signature of the default
        implementation.

    Returns
    -------
    bool
        True if all accessors could be called.

    Raises
    ------
    TypeError
        If `cls` is not one of the four entity kinds, or cannot be
        instantiated (e.g. abstract methods left unimplemented).
    NotImplementedInterfaceError
        If an accessor is missing or reaches the abstract default.

    Examples
    --------
    >>> class TaggedSite(Site):
    ...     pass
    >>> check_interface(TaggedSite)
    True
    """
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, got {cls!r}")

    for base, check in _CHECKS:
        if issubclass(cls, base):
            check(cls)
            logger.debug("%s implements the %s interface", cls.__name__, base.__name__)
            return True
    raise TypeError(f"{cls.__name__} is not a site, bond, unitcell or lattice type")
