"""
Lattice module.

Lattices are expanded realisations (finite clusters, supercells) of a
unitcell that keep a reference to the unitcell they were built from.
"""

from .base import AbstractLattice
from .concrete import Lattice

__all__ = [
    'AbstractLattice',
    'Lattice',
]
