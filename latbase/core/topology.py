"""
Topology and geometry algorithms on unitcells and lattices.

The functions here only use the accessor contract

    container.get_lattice_vectors(), container.get_sites(), container.get_bonds()
    site.get_point(), site.get_label()
    bond.get_from(), bond.get_to(), bond.get_label(), bond.get_wrap()

so they work for any unitcell- or lattice-like object, including
implementations that do not derive from the abstract base classes.

Index convention
----------------
Site and bond indices are 1-based throughout: a bond `Bond(1, 2, ...)`
connects the first and second site of its container.
"""

import logging
import numbers
import numpy as np
from typing import Any, Iterator, List

from ..errors import (
    DimensionMismatchError,
    IncompatibleTypesError,
    IndexOutOfRangeError,
    NotImplementedInterfaceError,
    UnpairedBondError,
)

logger = logging.getLogger(__name__)


def _call(obj: Any, method: str):
    accessor = getattr(obj, method, None)
    if accessor is None or not callable(accessor):
        raise NotImplementedInterfaceError(method, type(obj))
    return accessor()


def _check_index(index: int, count: int, what: str) -> None:
    if not 1 <= index <= count:
        raise IndexOutOfRangeError(
            f"{what} index {index} out of range [1, {count}]"
        )


def site_at(container: Any, index: int):
    """Return the site with 1-based `index` of `container`."""
    sites = _call(container, 'get_sites')
    _check_index(index, len(sites), 'site')
    return sites[index - 1]


def bond_at(container: Any, index: int):
    """Return the bond with 1-based `index` of `container`."""
    bonds = _call(container, 'get_bonds')
    _check_index(index, len(bonds), 'bond')
    return bonds[index - 1]


def lattice_vector_at(container: Any, position: int) -> np.ndarray:
    """Copy of Bravais vector number `position` (1-based), e.g. 1 for a1."""
    vectors = _call(container, 'get_lattice_vectors')
    _check_index(position, len(vectors), 'lattice vector')
    return np.array(vectors[position - 1], dtype=float)


class BondTable:
    """
    Bonds grouped per site, indexed 1-based by site.

    `table[i]` is the list of bonds keyed to site `i` in their original
    relative order. Iteration yields the per-site lists in site order and
    `len(table)` is the number of sites.
    """

    def __init__(self, groups: List[list]):
        self._groups = groups

    def __getitem__(self, index: int) -> list:
        _check_index(index, len(self._groups), 'site')
        return self._groups[index - 1]

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[list]:
        return iter(self._groups)

    def __eq__(self, other) -> bool:
        if isinstance(other, BondTable):
            return self._groups == other._groups
        if isinstance(other, (list, tuple)):
            return self._groups == [list(group) for group in other]
        return NotImplemented

    __hash__ = None

    def as_list(self) -> List[list]:
        """Per-site bond lists as a plain (0-based) list."""
        return [list(group) for group in self._groups]

    def __repr__(self) -> str:
        return f"BondTable({self._groups!r})"


def _organize(container: Any, key: str) -> BondTable:
    bonds = _call(container, 'get_bonds')
    num_sites = len(_call(container, 'get_sites'))

    # first pass: per-site counts and each bond's slot within its group
    slots = [0] * len(bonds)
    counts = [0] * num_sites
    for b, bond in enumerate(bonds):
        index = getattr(bond, key)()
        _check_index(index, num_sites, 'site')
        slots[b] = counts[index - 1]
        counts[index - 1] += 1

    # second pass: scatter into pre-sized groups
    groups = [[None] * n for n in counts]
    for b, bond in enumerate(bonds):
        groups[getattr(bond, key)() - 1][slots[b]] = bond

    return BondTable(groups)


def organized_bonds_from(container: Any) -> BondTable:
    """
    Group the bonds of a container by origin site.

    Parameters
    ----------
    container : unitcell- or lattice-like
        Object providing `get_sites()` and `get_bonds()`.

    Returns
    -------
    table : BondTable
        `table[i]` holds all bonds with `get_from() == i`, in the order they
        appear in `container.get_bonds()`. Every bond appears exactly once.

    Raises
    ------
    IndexOutOfRangeError
        If a bond's origin is not a valid site index.

    Notes
    -----
    Two linear passes, O(bonds + sites). The first pass counts bonds per
    site and records each bond's slot; the second pass fills pre-sized
    lists, which keeps the relative order stable.
    """
    return _organize(container, 'get_from')


def organized_bonds_to(container: Any) -> BondTable:
    """Group the bonds of a container by destination site.

    Same as `organized_bonds_from` but keyed by `get_to()`.
    """
    return _organize(container, 'get_to')


def _label_types_compatible(a: Any, b: Any) -> bool:
    if isinstance(a, numbers.Number) and isinstance(b, numbers.Number):
        return True
    return isinstance(a, type(b)) or isinstance(b, type(a))


def check_bond_compatible(bond: Any, container: Any) -> None:
    """
    Check that `bond` belongs to the same lattice family as `container`.

    Raises
    ------
    IncompatibleTypesError
        If the wrap length differs from the number of Bravais vectors of the
        container, or the label type differs from that of the container's
        bonds.
    """
    wrap = _call(bond, 'get_wrap')
    vectors = _call(container, 'get_lattice_vectors')
    if len(wrap) != len(vectors):
        raise IncompatibleTypesError(
            f"bond with wrap length N={len(wrap)} does not fit "
            f"{type(container).__name__} with {len(vectors)} lattice vectors"
        )

    bonds = _call(container, 'get_bonds')
    if bonds:
        label = _call(bond, 'get_label')
        reference = bonds[0].get_label()
        if not _label_types_compatible(label, reference):
            raise IncompatibleTypesError(
                f"bond label type {type(label).__name__} does not match "
                f"container bond label type {type(reference).__name__}"
            )


def bond_vector(bond: Any, container: Any) -> np.ndarray:
    """
    Real-space vector of a bond, including its periodic wrap.

    Parameters
    ----------
    bond : bond-like
        Bond whose endpoints index into `container`'s site list.
    container : unitcell- or lattice-like
        Provides sites and the N Bravais vectors.

    Returns
    -------
    vector : np.ndarray, shape (D,)
        point(to) - point(from) + sum_k wrap[k] * a_k

    Raises
    ------
    IncompatibleTypesError
        If the bond does not fit the container (see `check_bond_compatible`).
    IndexOutOfRangeError
        If an endpoint is not a valid site index.
    DimensionMismatchError
        If the endpoint positions and Bravais vectors differ in length.

    Examples
    --------
    >>> uc = Unitcell([[1.0, 0.0], [0.0, 1.0]],
    ...               [Site([0.0, 0.0], "A"), Site([0.5, 0.5], "B")],
    ...               [Bond(1, 2, "J", (0, 0)), Bond(2, 1, "J", (1, 0))])
    >>> bond_vector(uc.bond(2), uc)
    array([ 0.5, -0.5])
    """
    check_bond_compatible(bond, container)

    origin = np.asarray(site_at(container, bond.get_from()).get_point(), dtype=float)
    target = np.asarray(site_at(container, bond.get_to()).get_point(), dtype=float)
    if origin.shape != target.shape:
        raise DimensionMismatchError(
            f"bond endpoints have dimensions {origin.shape[0]} and {target.shape[0]}"
        )

    vector = target - origin
    for w, a in zip(bond.get_wrap(), _call(container, 'get_lattice_vectors')):
        a = np.asarray(a, dtype=float)
        if a.shape != vector.shape:
            raise DimensionMismatchError(
                f"lattice vector of length {a.shape[0]} in "
                f"{vector.shape[0]}-dimensional embedding space"
            )
        vector = vector + w * a
    return vector


def _bond_key(bond: Any) -> tuple:
    return (bond.get_from(), bond.get_to(), tuple(bond.get_wrap()), bond.get_label())


def unpaired_bonds(container: Any) -> list:
    """
    Bonds without a reciprocal partner.

    A bond i->j with wrap w and label l is paired if the container also
    holds a bond j->i with wrap -w and label l. Bonds from a site to itself
    with zero wrap pair with themselves.

    Returns
    -------
    bonds : list
        Unpaired bonds in container order (empty if all are paired).

    Notes
    -----
    Hashable labels are matched through a set in O(bonds). Unhashable
    labels (lists, dicts, ...) fall back to a linear scan per bond.
    """
    bonds = _call(container, 'get_bonds')
    keys = [_bond_key(bond) for bond in bonds]
    try:
        available = set(keys)
    except TypeError:
        # unhashable labels
        available = keys

    unpaired = []
    for bond in bonds:
        reverse = (bond.get_to(), bond.get_from(),
                   tuple(-w for w in bond.get_wrap()), bond.get_label())
        if reverse not in available:
            unpaired.append(bond)

    if unpaired:
        logger.warning("%d of %d bonds in %s have no reciprocal partner",
                       len(unpaired), len(bonds), type(container).__name__)
    return unpaired


def validate(container: Any, check_reciprocal: bool = False) -> None:
    """
    Check the indexing and dimension invariants of a container.

    Checks
    ------
    - every site has the same dimension D
    - every lattice vector has length D
    - every bond has wrap length N = number of lattice vectors
    - every bond endpoint lies in [1, num_sites]
    - with `check_reciprocal`, every bond has a reverse partner

    Raises
    ------
    DimensionMismatchError, IndexOutOfRangeError
        On the first violated invariant.
    UnpairedBondError
        If `check_reciprocal` is set and a bond has no reverse partner.
    """
    vectors = _call(container, 'get_lattice_vectors')
    sites = _call(container, 'get_sites')
    bonds = _call(container, 'get_bonds')

    dims = {len(site.get_point()) for site in sites}
    dims.update(len(a) for a in vectors)
    if len(dims) > 1:
        raise DimensionMismatchError(
            f"sites and lattice vectors disagree in dimension: {sorted(dims)}"
        )

    n = len(vectors)
    for position, bond in enumerate(bonds, start=1):
        if len(bond.get_wrap()) != n:
            raise DimensionMismatchError(
                f"bond {position} has wrap length {len(bond.get_wrap())}, "
                f"expected N={n}"
            )
        _check_index(bond.get_from(), len(sites), f"bond {position} origin site")
        _check_index(bond.get_to(), len(sites), f"bond {position} destination site")

    if check_reciprocal:
        unpaired = unpaired_bonds(container)
        if unpaired:
            raise UnpairedBondError(
                f"{len(unpaired)} bond(s) have no reciprocal partner, "
                f"first: {unpaired[0]!r}"
            )

    logger.debug("validated %s: %d sites, %d bonds, N=%d",
                 type(container).__name__, len(sites), len(bonds), n)
