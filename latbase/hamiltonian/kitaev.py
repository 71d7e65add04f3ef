"""
Kitaev bond Hamiltonian.

    H_bond = J_a * S_i^a S_j^a    for a bond of type a in {x, y, z}

Bond types are read from the labels: a label belongs to type a if its text
contains the letter a (case-insensitive).
"""

import logging
import numpy as np
from typing import Any, List, Sequence, Type

from .base import AbstractBondHamiltonian

logger = logging.getLogger(__name__)


class KitaevBondHamiltonian(AbstractBondHamiltonian):
    """
    Kitaev couplings on nearest-neighbour bonds.

    Parameters
    ----------
    Jx, Jy, Jz : float
        Coupling strengths.
    x_bonds, y_bonds, z_bonds : Sequence
        Bond labels of each bond type.
    label_type : type
        Bond label type.

    The coupling matrix is 3x3 with J_a at (a, a). Labels listed under
    several types count for the first of x, y, z.
    """

    def __init__(self,
                 Jx: float, Jy: float, Jz: float,
                 x_bonds: Sequence[Any],
                 y_bonds: Sequence[Any],
                 z_bonds: Sequence[Any],
                 label_type: Type):
        super().__init__(label_type, spin_dim=3)
        self.J = np.array([Jx, Jy, Jz], dtype=float)
        self.bonds_by_type = [list(x_bonds), list(y_bonds), list(z_bonds)]

    @property
    def x_bonds(self) -> List[Any]:
        return self.bonds_by_type[0]

    @property
    def y_bonds(self) -> List[Any]:
        return self.bonds_by_type[1]

    @property
    def z_bonds(self) -> List[Any]:
        return self.bonds_by_type[2]

    def _coupling(self, bond) -> np.ndarray:
        label = bond.get_label()
        matrix = self._zeros()
        for a, labels in enumerate(self.bonds_by_type):
            if label in labels:
                matrix[a, a] = self.J[a]
                break
        return matrix

    def __repr__(self) -> str:
        Jx, Jy, Jz = self.J
        return (f"KitaevBondHamiltonian(Jx={Jx} {self.x_bonds}, "
                f"Jy={Jy} {self.y_bonds}, Jz={Jz} {self.z_bonds})")


def _labels_containing(letter: str, labels: Sequence[Any]) -> List[Any]:
    return [label for label in labels if letter in str(label).lower()]


def kitaev_from_unitcell(unitcell) -> KitaevBondHamiltonian:
    """
    Kitaev Hamiltonian for the bond labels used in a unitcell.

    All couplings are set to 1.

    Examples
    --------
    >>> h = kitaev_from_unitcell(create_unitcell('honeycomb_kitaev'))
    >>> h.x_bonds, h.y_bonds, h.z_bonds
    (['x'], ['y'], ['z'])
    """
    couplings = list(dict.fromkeys(bond.get_label() for bond in unitcell.get_bonds()))
    label_type = type(couplings[0]) if couplings else str
    x_bonds = _labels_containing('x', couplings)
    y_bonds = _labels_containing('y', couplings)
    z_bonds = _labels_containing('z', couplings)
    logger.debug("Kitaev bond types: x=%s y=%s z=%s", x_bonds, y_bonds, z_bonds)

    return KitaevBondHamiltonian(1.0, 1.0, 1.0, x_bonds, y_bonds, z_bonds, label_type)
