"""
Core data model for latbase.

This module contains the fundamental abstractions:
- Site: labelled point in D-dimensional space
- Bond: directed, labelled edge between 1-based site indices with a wrap
- Unitcell: Bravais vectors + basis sites + bonds
- Lattice: expanded unitcell keeping a reference to its unitcell

and the topology functions that work on any unitcell- or lattice-like
object (bond organisation, bond vectors, validation).
"""

from .clone import similar
from .site import AbstractSite, Site
from .bond import AbstractBond, Bond
from .topology import (
    BondTable,
    organized_bonds_from,
    organized_bonds_to,
    bond_vector,
    unpaired_bonds,
    validate,
)
from .unitcell import (
    AbstractUnitcell,
    Unitcell,
    UNITCELL_REGISTRY,
    create_unitcell,
)
from .lattice import AbstractLattice, Lattice
from .interface import check_interface

__all__ = [
    # Sites and bonds
    'AbstractSite',
    'Site',
    'AbstractBond',
    'Bond',

    # Containers
    'AbstractUnitcell',
    'Unitcell',
    'UNITCELL_REGISTRY',
    'create_unitcell',
    'AbstractLattice',
    'Lattice',

    # Algorithms
    'BondTable',
    'organized_bonds_from',
    'organized_bonds_to',
    'bond_vector',
    'unpaired_bonds',
    'validate',
    'similar',
    'check_interface',
]
