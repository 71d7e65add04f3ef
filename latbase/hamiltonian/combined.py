"""
Sums of bond Hamiltonians.
"""

import numbers
import numpy as np

from .base import AbstractBondHamiltonian
from ..errors import IncompatibleTypesError


def _same_label_type(a: type, b: type) -> bool:
    if a is b:
        return True
    return issubclass(a, numbers.Number) and issubclass(b, numbers.Number)


class BondHamiltonianSum(AbstractBondHamiltonian):
    """Sum of two bond Hamiltonians acting on the same spins and labels."""

    def __init__(self, h1: AbstractBondHamiltonian, h2: AbstractBondHamiltonian):
        super().__init__(h1.label_type, h1.spin_dim)
        self.h1 = h1
        self.h2 = h2

    def _coupling(self, bond) -> np.ndarray:
        return self.h1.bond_term(bond) + self.h2.bond_term(bond)

    def __repr__(self) -> str:
        return f"BondHamiltonianSum({self.h1!r}, {self.h2!r})"


def combine(h1: AbstractBondHamiltonian, h2: AbstractBondHamiltonian) -> BondHamiltonianSum:
    """
    Combine two bond Hamiltonians into their sum.

    Parameters
    ----------
    h1, h2 : AbstractBondHamiltonian
        Hamiltonians with the same spin dimension and label type.

    Returns
    -------
    BondHamiltonianSum
        `combine(h1, h2)(bond) == h1(bond) + h2(bond)`

    Raises
    ------
    IncompatibleTypesError
        If the spin dimensions or label types differ.

    Examples
    --------
    >>> uc = create_unitcell('honeycomb_kitaev')
    >>> h = combine(heisenberg_from_unitcell(uc), kitaev_from_unitcell(uc))
    """
    if h1.spin_dim != h2.spin_dim:
        raise IncompatibleTypesError(
            f"Hamiltonians 1 and 2 don't agree in (spin) dimension: "
            f"N1={h1.spin_dim}, N2={h2.spin_dim}"
        )
    if not _same_label_type(h1.label_type, h2.label_type):
        raise IncompatibleTypesError(
            f"Hamiltonians 1 and 2 don't work on the same label type: "
            f"L1={h1.label_type.__name__}, L2={h2.label_type.__name__}"
        )
    return BondHamiltonianSum(h1, h2)
