"""
Abstract base class for bonds.

A bond is a directed, labelled edge between two sites of the same container.
Endpoints are 1-based positional indices into the container's site list, not
object references, so a bond only has meaning relative to a specific
unitcell or lattice.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple

from ..clone import SimilarMixin
from ...errors import NotImplementedInterfaceError


class AbstractBond(SimilarMixin, ABC):
    """
    Abstract base class for bonds.

    A bond carries
    - `from` and `to`: 1-based indices of the origin and destination sites
    - `label`: free-typed tag (coupling type, bond direction, ...)
    - `wrap`: integer tuple of fixed length N giving how many unit-cell
      translations, per Bravais direction, the destination is shifted from
      its nominal same-cell position

    Bonds are directed. A symmetric coupling is two bonds i->j and j->i with
    negated wraps; keeping these consistent is up to the caller (see
    `AbstractUnitcell.validate`).
    """

    _similar_fields = ('from_', 'to', 'label', 'wrap')

    @abstractmethod
    def get_from(self) -> int:
        """1-based index of the origin site."""
        raise NotImplementedInterfaceError('get_from', type(self))

    @abstractmethod
    def set_from(self, index: int) -> None:
        raise NotImplementedInterfaceError('set_from', type(self))

    @abstractmethod
    def get_to(self) -> int:
        """1-based index of the destination site."""
        raise NotImplementedInterfaceError('get_to', type(self))

    @abstractmethod
    def set_to(self, index: int) -> None:
        raise NotImplementedInterfaceError('set_to', type(self))

    @abstractmethod
    def get_label(self) -> Any:
        raise NotImplementedInterfaceError('get_label', type(self))

    @abstractmethod
    def set_label(self, label: Any) -> None:
        raise NotImplementedInterfaceError('set_label', type(self))

    @abstractmethod
    def get_wrap(self) -> Tuple[int, ...]:
        """
        Get the wrap of the bond.

        Returns
        -------
        wrap : Tuple[int, ...], length N
            Unit-cell offset of the destination in units of the Bravais
            vectors. All zeros for a bond inside the cell.
        """
        raise NotImplementedInterfaceError('get_wrap', type(self))

    @abstractmethod
    def set_wrap(self, wrap) -> None:
        """
        Replace the wrap.

        Raises
        ------
        DimensionMismatchError
            If `len(wrap)` differs from `nwrap()`.
        """
        raise NotImplementedInterfaceError('set_wrap', type(self))

    @abstractmethod
    def nwrap(self) -> int:
        """Number of periodic directions N, fixed for the lifetime of the bond."""
        raise NotImplementedInterfaceError('nwrap', type(self))

    def is_periodic(self) -> bool:
        """True if the bond wraps around in any direction."""
        return any(w != 0 for w in self.get_wrap())

    def __eq__(self, other) -> bool:
        if not isinstance(other, AbstractBond):
            return NotImplemented
        return (self.get_from() == other.get_from()
                and self.get_to() == other.get_to()
                and self.get_label() == other.get_label()
                and tuple(self.get_wrap()) == tuple(other.get_wrap()))

    __hash__ = None

    def __repr__(self) -> str:
        """String representation of the bond."""
        name = self.__class__.__name__
        return (f"{name}({self.get_from()} --> {self.get_to()} "
                f"@ {tuple(self.get_wrap())}, {self.get_label()!r})")
