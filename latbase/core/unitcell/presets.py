"""
Preset unitcells for common lattices.

These are fixed tables of Bravais vectors, basis sites and nearest-neighbour
bonds (both directions of every bond are listed). They are used as ready
made inputs for tests, examples and configuration files:

- chain: 1D chain, one site
- square: 2D square lattice, one site
- triangular: 2D triangular lattice, one site
- honeycomb: 2D honeycomb lattice, two sites (A, B)
- honeycomb_kitaev: honeycomb with x/y/z bond labels
"""

import numpy as np
from typing import Type

from .base import AbstractUnitcell
from .concrete import Unitcell
from ..bond import Bond
from ..site import Site
from ...labels import (
    default_label,
    default_label_a,
    default_label_b,
    default_label_x,
    default_label_y,
    default_label_z,
)


def _check_lattice_constant(lattice_constant: float) -> None:
    if lattice_constant <= 0:
        raise ValueError("Lattice constant must be positive")


def _bond_pair(i: int, j: int, label, wrap) -> list:
    """Bond i->j and its reverse j->i with negated wrap."""
    return [
        Bond(i, j, label, wrap),
        Bond(j, i, label, tuple(-w for w in wrap)),
    ]


def chain_unitcell(lattice_constant: float = 1.0,
                   label_type: Type = str) -> Unitcell:
    """
    One-dimensional chain (N=1, D=1).

    Parameters
    ----------
    lattice_constant : float, optional
        Distance between neighbouring sites (default: 1.0)
    label_type : type, optional
        Label type of sites and bonds, str or a numeric type (default: str)
    """
    _check_lattice_constant(lattice_constant)
    label = default_label(label_type)
    return Unitcell(
        [[lattice_constant]],
        [Site([0.0], label)],
        _bond_pair(1, 1, label, (1,)),
    )


def square_unitcell(lattice_constant: float = 1.0,
                    label_type: Type = str) -> Unitcell:
    """
    Square lattice.

    Geometry
    --------
        a1 = a * [1, 0]
        a2 = a * [0, 1]

    One site at the origin with 4 nearest neighbours at distance a.
    """
    _check_lattice_constant(lattice_constant)
    a = lattice_constant
    label = default_label(label_type)
    bonds = (_bond_pair(1, 1, label, (1, 0))
             + _bond_pair(1, 1, label, (0, 1)))
    return Unitcell(
        [[a, 0.0], [0.0, a]],
        [Site([0.0, 0.0], label)],
        bonds,
    )


def triangular_unitcell(lattice_constant: float = 1.0,
                        label_type: Type = str) -> Unitcell:
    """
    Triangular (hexagonal) Bravais lattice.

    Geometry
    --------
        a1 = a * [1, 0]
        a2 = a * [1/2, √3/2]

    One site at the origin with 6 nearest neighbours at distance a, reached
    through the wraps ±(1, 0), ±(0, 1) and ±(-1, 1).
    """
    _check_lattice_constant(lattice_constant)
    a = lattice_constant
    label = default_label(label_type)
    bonds = (_bond_pair(1, 1, label, (1, 0))
             + _bond_pair(1, 1, label, (0, 1))
             + _bond_pair(1, 1, label, (-1, 1)))
    return Unitcell(
        [[a, 0.0], [a / 2.0, a * np.sqrt(3) / 2.0]],
        [Site([0.0, 0.0], label)],
        bonds,
    )


def _honeycomb(lattice_constant: float, label_type: Type, bond_labels) -> Unitcell:
    _check_lattice_constant(lattice_constant)
    a = lattice_constant
    a1 = np.array([a, 0.0])
    a2 = np.array([a / 2.0, a * np.sqrt(3) / 2.0])

    sites = [
        Site([0.0, 0.0], default_label_a(label_type)),
        Site((a1 + a2) / 3.0, default_label_b(label_type)),
    ]
    # the three A->B bonds, each listed with its reverse
    wraps = [(0, 0), (-1, 0), (0, -1)]
    bonds = []
    for wrap, label in zip(wraps, bond_labels):
        bonds += _bond_pair(1, 2, label, wrap)
    return Unitcell([a1, a2], sites, bonds)


def honeycomb_unitcell(lattice_constant: float = 1.0,
                       label_type: Type = str) -> Unitcell:
    """
    Honeycomb lattice with two sites (A, B) per unitcell.

    Geometry
    --------
        a1 = a * [1, 0]
        a2 = a * [1/2, √3/2]
        A  = [0, 0]
        B  = (a1 + a2) / 3

    Each site has 3 nearest neighbours at distance a/√3. All bonds carry the
    same default label.
    """
    label = default_label(label_type)
    return _honeycomb(lattice_constant, label_type, [label] * 3)


def honeycomb_kitaev_unitcell(lattice_constant: float = 1.0,
                              label_type: Type = str) -> Unitcell:
    """
    Honeycomb lattice with Kitaev bond labels.

    Same geometry as `honeycomb_unitcell`; the three bond directions are
    labelled z (same cell), x (wrap along -a1) and y (wrap along -a2).
    """
    labels = [
        default_label_z(label_type),
        default_label_x(label_type),
        default_label_y(label_type),
    ]
    return _honeycomb(lattice_constant, label_type, labels)


# Unitcell registry for config-based construction
UNITCELL_REGISTRY = {
    'chain': chain_unitcell,
    'square': square_unitcell,
    'triangular': triangular_unitcell,
    'honeycomb': honeycomb_unitcell,
    'honeycomb_kitaev': honeycomb_kitaev_unitcell,
}


def create_unitcell(unitcell_type: str, **kwargs) -> AbstractUnitcell:
    """
    Factory function to create preset unitcells from string names.

    Parameters
    ----------
    unitcell_type : str
        Name in UNITCELL_REGISTRY ('chain', 'square', 'triangular',
        'honeycomb', 'honeycomb_kitaev')
    **kwargs
        Passed to the builder (lattice_constant, label_type)

    Returns
    -------
    unitcell : AbstractUnitcell

    Examples
    --------
    >>> uc = create_unitcell('honeycomb', lattice_constant=2.0)
    >>> uc.num_sites(), uc.num_bonds()
    (2, 6)

    Raises
    ------
    ValueError
        If unitcell_type is not recognized
    """
    if unitcell_type not in UNITCELL_REGISTRY:
        available = ', '.join(UNITCELL_REGISTRY.keys())
        raise ValueError(f"Unknown unitcell type '{unitcell_type}'. "
                        f"Available types: {available}")

    builder = UNITCELL_REGISTRY[unitcell_type]
    return builder(**kwargs)
