"""
Default unitcell implementation.
"""

import logging
import numpy as np
from typing import List, Sequence

from .base import AbstractUnitcell
from ..container import as_lattice_vectors

logger = logging.getLogger(__name__)


class Unitcell(AbstractUnitcell):
    """
    Unitcell holding Bravais vectors, sites and bonds in plain lists.

    Parameters
    ----------
    lattice_vectors : Sequence of array_like
        N Bravais vectors, each of length D.
    sites : Sequence[AbstractSite]
        Basis sites.
    bonds : Sequence[AbstractBond]
        Bonds whose 1-based endpoints index into `sites`.
    validate : bool, optional
        Run `validate()` after construction. Default is False, in which case
        no cross-checking of indices or lengths is done.

    Notes
    -----
    The unitcell owns its lists. Getters return the stored lists themselves,
    so in-place edits are visible; use `similar()` for an independent copy.
    """

    def __init__(self,
                 lattice_vectors: Sequence[Sequence[float]],
                 sites: Sequence,
                 bonds: Sequence,
                 validate: bool = False):
        self._lattice_vectors = as_lattice_vectors(lattice_vectors)
        self._sites = list(sites)
        self._bonds = list(bonds)

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
