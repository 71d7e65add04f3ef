"""
Default lattice implementation.
"""

import logging
import numpy as np
from typing import List, Sequence

from .base import AbstractLattice
from ..container import as_lattice_vectors
from ..unitcell import AbstractUnitcell

logger = logging.getLogger(__name__)


class Lattice(AbstractLattice):
    """
    Lattice holding Bravais vectors, sites, bonds and its unitcell.

    Parameters
    ----------
    lattice_vectors : Sequence of array_like
        N Bravais vectors of the lattice (e.g. the supercell vectors of a
        periodic cluster; empty for an open cluster).
    sites : Sequence[AbstractSite]
        All sites of the lattice.
    bonds : Sequence[AbstractBond]
        Bonds whose 1-based endpoints index into `sites`.
    unitcell : AbstractUnitcell
        Generating unitcell.
    validate : bool, optional
        Run `validate()` after construction (default: False).

    Examples
    --------
    Two-site open chain built from a chain unitcell:

    >>> uc = chain_unitcell()
    >>> lt = Lattice([], [Site([0.0], "1"), Site([1.0], "1")],
    ...              [Bond(1, 2, "1", ()), Bond(2, 1, "1", ())], uc)
    >>> lt.bond_vector(lt.bond(1))
    array([1.])
    """

    def __init__(self,
                 lattice_vectors: Sequence[Sequence[float]],
                 sites: Sequence,
                 bonds: Sequence,
                 unitcell: AbstractUnitcell,
                 validate: bool = False):
        self._lattice_vectors = as_lattice_vectors(lattice_vectors)
        self._sites = list(sites)
        self._bonds = list(bonds)
        self._unitcell = unitcell

        logger.debug("created %r", self)
        if validate:
            self.validate()

    def get_lattice_vectors(self) -> List[np.ndarray]:
        return self._lattice_vectors

    def set_lattice_vectors(self, lattice_vectors: Sequence[Sequence[float]]) -> None:
        self._lattice_vectors = as_lattice_vectors(lattice_vectors)

    def get_sites(self) -> list:
        return self._sites

    def set_sites(self, sites: Sequence) -> None:
        self._sites = list(sites)

    def get_bonds(self) -> list:
        return self._bonds

    def set_bonds(self, bonds: Sequence) -> None:
        self._bonds = list(bonds)

    def get_unitcell(self) -> AbstractUnitcell:
        return self._unitcell

    def set_unitcell(self, unitcell: AbstractUnitcell) -> None:
        self._unitcell = unitcell
