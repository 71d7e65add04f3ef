"""
Shared interface of unitcells and lattices.

Unitcells and lattices are structurally identical: a list of Bravais
vectors, an ordered site list and an ordered bond list whose endpoints are
1-based indices into that site list. Everything derived from those three
lists (counts, indexing, bond organisation, bond vectors, validation) is
implemented once here on top of the abstract accessors.
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import List, Sequence

from .clone import SimilarMixin
from .topology import (
    BondTable,
    bond_at,
    bond_vector,
    lattice_vector_at,
    organized_bonds_from,
    organized_bonds_to,
    site_at,
    unpaired_bonds,
    validate,
)
from ..errors import NotImplementedInterfaceError


def as_lattice_vectors(lattice_vectors: Sequence[Sequence[float]]) -> List[np.ndarray]:
    """Convert Bravais vectors to a list of float arrays."""
    return [np.array(a, dtype=float) for a in lattice_vectors]


class AbstractContainer(SimilarMixin, ABC):
    """
    Abstract base for objects holding Bravais vectors, sites and bonds.

    Subclasses provide whole-list getters and setters. There is no
    incremental add/remove API; callers replace lists as a whole.
    """

    _similar_fields = ('lattice_vectors', 'sites', 'bonds')

    @abstractmethod
    def get_lattice_vectors(self) -> List[np.ndarray]:
        """
        Get the Bravais vectors.

        Returns
        -------
        vectors : List[np.ndarray]
            N vectors, each of length D. N need not equal D, e.g. a
            one-dimensional chain embedded in the plane has N=1, D=2.
        """
        raise NotImplementedInterfaceError('get_lattice_vectors', type(self))

    @abstractmethod
    def set_lattice_vectors(self, lattice_vectors) -> None:
        raise NotImplementedInterfaceError('set_lattice_vectors', type(self))

    @abstractmethod
    def get_sites(self) -> list:
        raise NotImplementedInterfaceError('get_sites', type(self))

    @abstractmethod
    def set_sites(self, sites) -> None:
        raise NotImplementedInterfaceError('set_sites', type(self))

    @abstractmethod
    def get_bonds(self) -> list:
        raise NotImplementedInterfaceError('get_bonds', type(self))

    @abstractmethod
    def set_bonds(self, bonds) -> None:
        raise NotImplementedInterfaceError('set_bonds', type(self))

    def num_sites(self) -> int:
        return len(self.get_sites())

    def num_bonds(self) -> int:
        return len(self.get_bonds())

    def site(self, index: int):
        """Site with 1-based `index`; IndexOutOfRangeError otherwise."""
        return site_at(self, index)

    def bond(self, index: int):
        """Bond with 1-based `index`; IndexOutOfRangeError otherwise."""
        return bond_at(self, index)

    def a1(self) -> np.ndarray:
        """
        First Bravais vector.

        Unlike the whole-list getters, `a1`/`a2`/`a3` return copies; edit
        `get_lattice_vectors()` to change the container.
        """
        return lattice_vector_at(self, 1)

    def a2(self) -> np.ndarray:
        return lattice_vector_at(self, 2)

    def a3(self) -> np.ndarray:
        return lattice_vector_at(self, 3)

    def ndims(self) -> int:
        """
        Embedding dimension D.

        Taken from the sites if there are any, otherwise from the Bravais
        vectors; 0 for an empty container.
        """
        sites = self.get_sites()
        if sites:
            return len(sites[0].get_point())
        vectors = self.get_lattice_vectors()
        if vectors:
            return len(vectors[0])
        return 0

    def organized_bonds_from(self) -> BondTable:
        """Bonds grouped by origin site, see `topology.organized_bonds_from`."""
        return organized_bonds_from(self)

    def organized_bonds_to(self) -> BondTable:
        """Bonds grouped by destination site, see `topology.organized_bonds_to`."""
        return organized_bonds_to(self)

    def bond_vector(self, bond) -> np.ndarray:
        """Real-space vector of `bond` in this container, see `topology.bond_vector`."""
        return bond_vector(bond, self)

    def unpaired_bonds(self) -> list:
        return unpaired_bonds(self)

    def validate(self, check_reciprocal: bool = False):
        """
        Check indexing and dimension invariants.

        Parameters
        ----------
        check_reciprocal : bool, optional
            Also require every bond i->j (wrap w) to have a partner j->i
            (wrap -w) with the same label. Default is False.

        Returns
        -------
        self
            For chaining, e.g. `Unitcell(...).validate()`.

        Raises
        ------
        DimensionMismatchError
            Sites, lattice vectors or wraps disagree in length.
        IndexOutOfRangeError
            A bond endpoint is not in [1, num_sites].
        UnpairedBondError
            `check_reciprocal` is set and a bond has no reverse partner.
        """
        validate(self, check_reciprocal=check_reciprocal)
        return self

    def _fields_equal(self, other) -> bool:
        mine = self.get_lattice_vectors()
        theirs = other.get_lattice_vectors()
        return (len(mine) == len(theirs)
                and all(np.array_equal(a, b) for a, b in zip(mine, theirs))
                and list(self.get_sites()) == list(other.get_sites())
                and list(self.get_bonds()) == list(other.get_bonds()))

    def __repr__(self) -> str:
        """String representation of the container."""
        name = self.__class__.__name__
        return (f"{name}(D={self.ndims()}, N={len(self.get_lattice_vectors())}, "
                f"sites={self.num_sites()}, bonds={self.num_bonds()})")

    def _str_lines(self) -> List[str]:
        lines = [
            "=" * 50,
            f"{self.__class__.__name__} object",
            "=" * 50,
            "Lattice vectors:",
        ]
        for i, a in enumerate(self.get_lattice_vectors(), start=1):
            lines.append(f"  a{i} = {a}")

        lines.append(f"Sites ({self.num_sites()}):")
        for i, site in enumerate(self.get_sites(), start=1):
            lines.append(f"  {i}: {site!r}")

        lines.append(f"Bonds ({self.num_bonds()}):")
        for i, bond in enumerate(self.get_bonds(), start=1):
            lines.append(f"  {i}: {bond!r}")
        return lines

    def __str__(self) -> str:
        """Detailed string representation."""
        lines = self._str_lines()
        lines.append("=" * 50)
        return "\n".join(lines)
