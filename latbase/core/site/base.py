"""
Abstract base class for lattice sites.

A site is a labelled point in D-dimensional embedding space. This module
defines the interface every site implementation must provide so that
unitcells, lattices and the topology functions can work with any of them.
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import Any

from ..clone import SimilarMixin
from ...errors import NotImplementedInterfaceError


class AbstractSite(SimilarMixin, ABC):
    """
    Abstract base class for sites.

    A site carries
    - a position `point` of fixed length D (the embedding dimension)
    - a `label` of free type (str, int, enum, ...)

    The label type is chosen once per lattice; it is not used for indexing.
    Sites are owned by exactly one container (a unitcell's or lattice's site
    list) and are copied, never shared, when a container is duplicated.

    Subclasses implement the accessors below. Equality and representation
    are defined here in terms of the accessors only.
    """

    _similar_fields = ('point', 'label')

    @abstractmethod
    def get_point(self) -> np.ndarray:
        """
        Get the position of the site.

        Returns
        -------
        point : np.ndarray, shape (D,)
            Position in real (embedding) space.
        """
        raise NotImplementedInterfaceError('get_point', type(self))

    @abstractmethod
    def set_point(self, point) -> None:
        """
        Replace the position of the site.

        Raises
        ------
        DimensionMismatchError
            If `len(point)` differs from `ndims()`.
        """
        raise NotImplementedInterfaceError('set_point', type(self))

    @abstractmethod
    def get_label(self) -> Any:
        """Get the site label."""
        raise NotImplementedInterfaceError('get_label', type(self))

    @abstractmethod
    def set_label(self, label: Any) -> None:
        """Replace the site label (no validation)."""
        raise NotImplementedInterfaceError('set_label', type(self))

    @abstractmethod
    def ndims(self) -> int:
        """Embedding dimension D, fixed for the lifetime of the site."""
        raise NotImplementedInterfaceError('ndims', type(self))

    def __eq__(self, other) -> bool:
        if not isinstance(other, AbstractSite):
            return NotImplemented
        return (self.ndims() == other.ndims()
                and np.array_equal(self.get_point(), other.get_point())
                and self.get_label() == other.get_label())

    __hash__ = None

    def __repr__(self) -> str:
        """String representation of the site."""
        name = self.__class__.__name__
        return f"{name}({self.get_point()}, {self.get_label()!r})"
