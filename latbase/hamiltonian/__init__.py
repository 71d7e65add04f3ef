"""
Bond Hamiltonians.

Coupling matrices per bond, selected by bond label:
- HeisenbergBondHamiltonian: J_n * identity per neighbour shell
- KitaevBondHamiltonian: bond-directional x/y/z couplings
- combine: sum of two Hamiltonians
"""

from .base import AbstractBondHamiltonian
from .heisenberg import HeisenbergBondHamiltonian, heisenberg_from_unitcell
from .kitaev import KitaevBondHamiltonian, kitaev_from_unitcell
from .combined import BondHamiltonianSum, combine

__all__ = [
    'AbstractBondHamiltonian',
    'HeisenbergBondHamiltonian',
    'heisenberg_from_unitcell',
    'KitaevBondHamiltonian',
    'kitaev_from_unitcell',
    'BondHamiltonianSum',
    'combine',
]
