"""
latbase: data model for crystal lattices

A Python package describing the lattices used by condensed-matter lattice
models: sites, bonds with periodic wraps, unitcells and lattices, together
with the topology queries every Hamiltonian builder and plotting tool needs.

Main Components
---------------
core : Sites, bonds, unitcells, lattices and topology functions
labels : Default site and bond labels
hamiltonian : Bond Hamiltonians (Heisenberg, Kitaev) and their combination
io : JSON persistence and configuration loading
visualization : Plotting of 2D unitcells and lattices

Quick Start
-----------
>>> from latbase import Site, Bond, Unitcell, bond_vector
>>>
>>> uc = Unitcell(
...     lattice_vectors=[[1.0, 0.0], [0.0, 1.0]],
...     sites=[Site([0.0, 0.0], "A"), Site([0.5, 0.5], "B")],
...     bonds=[Bond(1, 2, "J", (0, 0)), Bond(2, 1, "J", (1, 0))],
... )
>>> uc.organized_bonds_from()[2]
[Bond(2 --> 1 @ (1, 0), 'J')]
>>> bond_vector(uc.bond(2), uc)
array([ 0.5, -0.5])
"""

__version__ = "0.1.0"

from .errors import (
    LatticeError,
    NotImplementedInterfaceError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    IncompatibleTypesError,
    UnpairedBondError,
)
from .core import (
    AbstractSite,
    Site,
    AbstractBond,
    Bond,
    AbstractUnitcell,
    Unitcell,
    AbstractLattice,
    Lattice,
    UNITCELL_REGISTRY,
    create_unitcell,
    BondTable,
    organized_bonds_from,
    organized_bonds_to,
    bond_vector,
    unpaired_bonds,
    validate,
    similar,
    check_interface,
)

__all__ = [
    '__version__',

    # Errors
    'LatticeError',
    'NotImplementedInterfaceError',
    'DimensionMismatchError',
    'IndexOutOfRangeError',
    'IncompatibleTypesError',
    'UnpairedBondError',

    # Data model
    'AbstractSite',
    'Site',
    'AbstractBond',
    'Bond',
    'AbstractUnitcell',
    'Unitcell',
    'AbstractLattice',
    'Lattice',
    'UNITCELL_REGISTRY',
    'create_unitcell',

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
