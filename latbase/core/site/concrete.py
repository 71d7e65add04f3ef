"""
Default site implementation.
"""

import numpy as np
from typing import Any, Optional, Sequence

from .base import AbstractSite
from ...errors import DimensionMismatchError


def _as_point(point: Sequence[float], ndims: Optional[int]) -> np.ndarray:
    arr = np.array(point, dtype=float)
    if arr.ndim != 1:
        raise DimensionMismatchError(
            f"site point must be one-dimensional, got shape {arr.shape}"
        )
    if ndims is not None and arr.shape[0] != ndims:
        raise DimensionMismatchError(
            f"site point has length {arr.shape[0]}, expected D={ndims}"
        )
    return arr


class Site(AbstractSite):
    """
    Labelled point in D-dimensional space.

    Parameters
    ----------
    point : array_like, shape (D,)
        Position in real space.
    label : Any
        Site label, e.g. a sublattice name.
    ndims : int, optional
        Embedding dimension D. Defaults to `len(point)`.

    Raises
    ------
    DimensionMismatchError
        If `point` is not a vector of length `ndims`.

    Examples
    --------
    >>> s = Site([0.0, 0.5], "A")
    >>> s.ndims()
    2
    >>> s.set_point([1.0, 1.0, 1.0])
    Traceback (most recent call last):
    ...
    latbase.errors.DimensionMismatchError: site point has length 3, expected D=2
    """

    def __init__(self, point: Sequence[float], label: Any, ndims: Optional[int] = None):
        self._point = _as_point(point, ndims)
        self._ndims = self._point.shape[0]
        self._label = label

    def get_point(self) -> np.ndarray:
        return self._point

    def set_point(self, point: Sequence[float]) -> None:
        self._point = _as_point(point, self._ndims)

    def get_label(self) -> Any:
        return self._label

    def set_label(self, label: Any) -> None:
        self._label = label

    def ndims(self) -> int:
        return self._ndims
