"""
Abstract base class for lattices.

A lattice is an expanded realisation of a unitcell, e.g. a finite cluster
or a supercell. It has its own Bravais vectors, sites and bonds (bond
endpoints index into the lattice's own site list) and keeps a reference to
the unitcell it was built from.
"""

from abc import abstractmethod

from ..container import AbstractContainer
from ..unitcell import AbstractUnitcell
from ...errors import NotImplementedInterfaceError


class AbstractLattice(AbstractContainer):
    """
    Abstract base class for lattices.

    In addition to the unitcell interface, subclasses implement
    `get_unitcell` / `set_unitcell` for the generating unitcell.

    Notes
    -----
    No invariant ties the lattice's site or bond counts to those of its
    unitcell. The expansion from unitcell to lattice is done elsewhere; a
    lattice only stores the result.

    For a finite cluster without periodic boundaries the lattice has no
    Bravais vectors (N=0) and all bonds have empty wraps, so
    `bond_vector` reduces to the difference of the endpoint positions.
    """

    _similar_fields = ('lattice_vectors', 'sites', 'bonds', 'unitcell')

    @abstractmethod
    def get_unitcell(self) -> AbstractUnitcell:
        """Get the unitcell this lattice was built from."""
        raise NotImplementedInterfaceError('get_unitcell', type(self))

    @abstractmethod
    def set_unitcell(self, unitcell: AbstractUnitcell) -> None:
        raise NotImplementedInterfaceError('set_unitcell', type(self))

    def __eq__(self, other) -> bool:
        if not isinstance(other, AbstractLattice):
            return NotImplemented
        return self._fields_equal(other) and self.get_unitcell() == other.get_unitcell()

    __hash__ = None

    def __repr__(self) -> str:
        """String representation of the lattice."""
        name = self.__class__.__name__
        return (f"{name}(D={self.ndims()}, N={len(self.get_lattice_vectors())}, "
                f"sites={self.num_sites()}, bonds={self.num_bonds()}, "
                f"unitcell={self.get_unitcell()!r})")

    def _str_lines(self):
        lines = super()._str_lines()
        lines.append(f"Unitcell: {self.get_unitcell()!r}")
        return lines
