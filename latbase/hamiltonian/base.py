"""
Abstract base class for bond Hamiltonians.

A bond Hamiltonian maps a bond to its coupling matrix between the spins (or
other local degrees of freedom) on its two endpoints. Concrete Hamiltonians
select the coupling by looking up the bond label in per-coupling label
lists, so the same Hamiltonian works for every lattice that uses the same
label convention.
"""

import numbers
import numpy as np
from abc import ABC, abstractmethod
from typing import Any, Type

from ..errors import IncompatibleTypesError, NotImplementedInterfaceError


def label_type_matches(label: Any, label_type: Type) -> bool:
    """True if `label` is usable where labels of `label_type` are expected."""
    if isinstance(label, label_type):
        return True
    return (isinstance(label, numbers.Number)
            and isinstance(label_type, type)
            and issubclass(label_type, numbers.Number))


class AbstractBondHamiltonian(ABC):
    """
    Abstract base class for bond Hamiltonians.

    Parameters
    ----------
    label_type : type
        Type of the bond labels this Hamiltonian understands.
    spin_dim : int
        Size of the returned coupling matrices.

    Calling the Hamiltonian on a bond is the same as `bond_term(bond)`.
    """

    def __init__(self, label_type: Type, spin_dim: int):
        if spin_dim < 1:
            raise ValueError("spin_dim must be at least 1")
        self.label_type = label_type
        self.spin_dim = spin_dim

    @abstractmethod
    def _coupling(self, bond) -> np.ndarray:
        """Coupling matrix for a bond whose label type was already checked."""
        raise NotImplementedInterfaceError('bond_term', type(self))

    def bond_term(self, bond) -> np.ndarray:
        """
        Coupling matrix of a bond.

        Returns
        -------
        matrix : np.ndarray, shape (spin_dim, spin_dim), complex
            Zero matrix if the bond label matches no coupling.

        Raises
        ------
        IncompatibleTypesError
            If the bond label is not of this Hamiltonian's label type.
        """
        label = bond.get_label()
        if not label_type_matches(label, self.label_type):
            raise IncompatibleTypesError(
                f"Passed a bond with label type {type(label).__name__} to a bond "
                f"Hamiltonian with label type {self.label_type.__name__}"
            )
        return self._coupling(bond)

    def __call__(self, bond) -> np.ndarray:
        return self.bond_term(bond)

    def _zeros(self) -> np.ndarray:
        return np.zeros((self.spin_dim, self.spin_dim), dtype=complex)
