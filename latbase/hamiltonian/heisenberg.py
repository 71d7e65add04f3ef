"""
Heisenberg bond Hamiltonian.

    H_bond = J_n * (S_i . S_j)

for bonds in the n-th neighbour shell, i.e. the coupling matrix is J_n times
the identity.
"""

import logging
import numpy as np
from typing import Any, List, Sequence, Type

from .base import AbstractBondHamiltonian

logger = logging.getLogger(__name__)


class HeisenbergBondHamiltonian(AbstractBondHamiltonian):
    """
    Heisenberg couplings up to the n-th neighbour shell.

    Parameters
    ----------
    J : Sequence[float]
        Coupling strength per shell, J[0] for nearest neighbours.
    J_bonds : Sequence[Sequence]
        Bond labels belonging to each shell.
    label_type : type
        Bond label type.
    spin_dim : int, optional
        Spin dimension, 3 for O(3) spins (default: 3).

    Notes
    -----
    A bond label listed in several shells gets the coupling of the first.
    """

    def __init__(self,
                 J: Sequence[float],
                 J_bonds: Sequence[Sequence[Any]],
                 label_type: Type,
                 spin_dim: int = 3):
        super().__init__(label_type, spin_dim)
        if len(J) != len(J_bonds):
            raise ValueError(
                f"J has {len(J)} entries but J_bonds has {len(J_bonds)} shells"
            )
        self.J = [float(j) for j in J]
        self.J_bonds = [list(labels) for labels in J_bonds]

    def _coupling(self, bond) -> np.ndarray:
        label = bond.get_label()
        for J, labels in zip(self.J, self.J_bonds):
            if label in labels:
                return J * np.eye(self.spin_dim, dtype=complex)
        return self._zeros()

    def __repr__(self) -> str:
        shells = ', '.join(f"J{n}={J} {labels}"
                           for n, (J, labels) in enumerate(zip(self.J, self.J_bonds), start=1))
        return f"HeisenbergBondHamiltonian(O({self.spin_dim}), {shells})"


def shell_labels(shell: int, labels: Sequence[Any]) -> List[Any]:
    """
    Bond labels belonging to neighbour shell `shell`.

    String labels name their shell by digit: shell n collects the labels that
    contain the digit string of n, and shell 1 additionally collects labels
    without any digit ("J", "x", ...). Non-string labels carry no shell
    information, so all of them go to shell 1.
    """
    if all(isinstance(label, str) for label in labels):
        if shell == 1:
            return [label for label in labels
                    if '1' in label or not any(c.isdigit() for c in label)]
        return [label for label in labels if str(shell) in label]
    return list(labels) if shell == 1 else []


def heisenberg_from_unitcell(unitcell,
                             n_neighbors: int = 1,
                             spin_dim: int = 3) -> HeisenbergBondHamiltonian:
    """
    Heisenberg Hamiltonian for the bond labels used in a unitcell.

    All couplings are set to 1; adjust `J` afterwards.

    Parameters
    ----------
    unitcell : unitcell-like
        Source of the bond labels.
    n_neighbors : int, optional
        Number of neighbour shells (default: 1).
    spin_dim : int, optional
        Spin dimension (default: 3).

    Examples
    --------
    >>> h = heisenberg_from_unitcell(create_unitcell('square'))
    >>> h.J_bonds
    [['1']]
    """
    if n_neighbors < 1:
        raise ValueError("n_neighbors must be at least 1")

    couplings = list(dict.fromkeys(bond.get_label() for bond in unitcell.get_bonds()))
    label_type = type(couplings[0]) if couplings else str
    J_bonds = [shell_labels(n, couplings) for n in range(1, n_neighbors + 1)]
    logger.debug("Heisenberg shells from %d labels: %s", len(couplings), J_bonds)

    return HeisenbergBondHamiltonian([1.0] * n_neighbors, J_bonds, label_type, spin_dim)
