"""
Default bond implementation.
"""

import numbers
from typing import Any, Optional, Sequence, Tuple

from .base import AbstractBond
from ...errors import DimensionMismatchError


def _as_integer(value: Any, what: str) -> int:
    # whole-valued floats (e.g. from numpy arrays) are accepted
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise TypeError(f"bond {what} must be an integer, got {value!r}")


def _as_wrap(wrap: Sequence[int], nwrap: Optional[int]) -> Tuple[int, ...]:
    wrap = tuple(_as_integer(w, "wrap component") for w in wrap)
    if nwrap is not None and len(wrap) != nwrap:
        raise DimensionMismatchError(
            f"bond wrap has length {len(wrap)}, expected N={nwrap}"
        )
    return wrap


class Bond(AbstractBond):
    """
    Directed, labelled bond between two sites.

    Parameters
    ----------
    from_ : int
        1-based index of the origin site.
    to : int
        1-based index of the destination site.
    label : Any
        Bond label.
    wrap : Sequence[int]
        Unit-cell offset of the destination per Bravais direction.
    nwrap : int, optional
        Number of periodic directions N. Defaults to `len(wrap)`.

    Raises
    ------
    TypeError
        If an endpoint or wrap component is not a whole number.
    DimensionMismatchError
        If `len(wrap)` differs from `nwrap`.

    Notes
    -----
    Endpoints are not range checked here; they only become meaningful once
    the bond is placed in a unitcell or lattice.

    Examples
    --------
    >>> b = Bond(2, 1, "J", (1, 0))
    >>> b.is_periodic()
    True
    >>> b.similar(wrap=(0, 0)).is_periodic()
    False
    """

    def __init__(self,
                 from_: int,
                 to: int,
                 label: Any,
                 wrap: Sequence[int],
                 nwrap: Optional[int] = None):
        self._from = _as_integer(from_, "origin index")
        self._to = _as_integer(to, "destination index")
        self._label = label
        self._wrap = _as_wrap(wrap, nwrap)
        self._nwrap = len(self._wrap)

    def get_from(self) -> int:
        return self._from

    def set_from(self, index: int) -> None:
        self._from = _as_integer(index, "origin index")

    def get_to(self) -> int:
        return self._to

    def set_to(self, index: int) -> None:
        self._to = _as_integer(index, "destination index")

    def get_label(self) -> Any:
        return self._label

    def set_label(self, label: Any) -> None:
        self._label = label

    def get_wrap(self) -> Tuple[int, ...]:
        return self._wrap

    def set_wrap(self, wrap: Sequence[int]) -> None:
        self._wrap = _as_wrap(wrap, self._nwrap)

    def nwrap(self) -> int:
        return self._nwrap
