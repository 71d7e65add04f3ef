"""
Abstract base class for unitcells.

A unitcell is the minimal repeating unit of a crystal: N Bravais vectors, a
finite list of basis sites and the bonds between them. Bonds leaving the
cell are represented by their wrap, i.e. the number of Bravais translations
to the destination's copy of the cell.
"""

from ..container import AbstractContainer


class AbstractUnitcell(AbstractContainer):
    """
    Abstract base class for unitcells.

    Interface
    ---------
    Subclasses implement the whole-list accessors

        get_lattice_vectors / set_lattice_vectors
        get_sites / set_sites
        get_bonds / set_bonds

    and inherit everything derived from them: `num_sites`, `num_bonds`,
    1-based `site(i)` / `bond(i)`, `a1`/`a2`/`a3`, `organized_bonds_from`,
    `organized_bonds_to`, `bond_vector`, `validate` and `similar`.

    Examples
    --------
    Square lattice unitcell with one site and nearest-neighbour bonds in
    both directions:

    >>> uc = Unitcell(
    ...     [[1.0, 0.0], [0.0, 1.0]],
    ...     [Site([0.0, 0.0], "A")],
    ...     [Bond(1, 1, "x", (1, 0)), Bond(1, 1, "x", (-1, 0)),
    ...      Bond(1, 1, "y", (0, 1)), Bond(1, 1, "y", (0, -1))],
    ... )
    >>> uc.num_bonds()
    4
    >>> uc.bond_vector(uc.bond(3))
    array([0., 1.])
    """

    def __eq__(self, other) -> bool:
        if not isinstance(other, AbstractUnitcell):
            return NotImplemented
        return self._fields_equal(other)

    __hash__ = None
