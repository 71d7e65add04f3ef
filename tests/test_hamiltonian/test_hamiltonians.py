"""
Unit tests for bond Hamiltonians.

Tests:
- Heisenberg couplings per neighbour shell
- Kitaev bond-directional couplings
- Construction from unitcell labels
- Combination and its compatibility checks
"""

import numpy as np
import pytest
from latbase.core import Bond, create_unitcell
from latbase.errors import IncompatibleTypesError
from latbase.hamiltonian import (
    BondHamiltonianSum,
    HeisenbergBondHamiltonian,
    KitaevBondHamiltonian,
    combine,
    heisenberg_from_unitcell,
    kitaev_from_unitcell,
)
from latbase.hamiltonian.heisenberg import shell_labels


class TestHeisenberg:
    """Test Heisenberg couplings."""

    def test_shell_couplings(self):
        h = HeisenbergBondHamiltonian([1.0, 0.2], [["J1"], ["J2"]], str)

        assert np.allclose(h(Bond(1, 1, "J1", (1,))), np.eye(3))
        assert np.allclose(h(Bond(1, 1, "J2", (1,))), 0.2 * np.eye(3))

    def test_unknown_label_gives_zero(self):
        h = HeisenbergBondHamiltonian([1.0], [["J1"]], str)
        matrix = h.bond_term(Bond(1, 1, "J3", (1,)))

        assert matrix.shape == (3, 3)
        assert matrix.dtype == complex
        assert np.allclose(matrix, 0.0)

    def test_spin_dim(self):
        h = HeisenbergBondHamiltonian([2.0], [[1]], int, spin_dim=2)

        assert np.allclose(h(Bond(1, 1, 1, ())), 2.0 * np.eye(2))

    def test_first_shell_wins(self):
        h = HeisenbergBondHamiltonian([1.0, 5.0], [["J"], ["J"]], str)

        assert np.allclose(h(Bond(1, 1, "J", ())), np.eye(3))

    def test_label_type_mismatch(self):
        h = HeisenbergBondHamiltonian([1.0], [["J1"]], str)

        with pytest.raises(IncompatibleTypesError, match="label type int"):
            h(Bond(1, 1, 1, ()))

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            HeisenbergBondHamiltonian([1.0, 2.0], [["J1"]], str)

    def test_invalid_spin_dim(self):
        with pytest.raises(ValueError):
            HeisenbergBondHamiltonian([1.0], [["J1"]], str, spin_dim=0)

    def test_shell_labels(self):
        labels = ["J", "J1", "J2", "x"]

        assert shell_labels(1, labels) == ["J", "J1", "x"]
        assert shell_labels(2, labels) == ["J2"]
        assert shell_labels(3, labels) == []
        assert shell_labels(1, [1, 2]) == [1, 2]
        assert shell_labels(2, [1, 2]) == []

    def test_from_unitcell(self):
        uc = create_unitcell('honeycomb')
        h = heisenberg_from_unitcell(uc)

        assert h.J_bonds == [["1"]]
        assert h.label_type is str
        for bond in uc.get_bonds():
            assert np.allclose(h(bond), np.eye(3))

    def test_from_unitcell_two_shells(self):
        uc = create_unitcell('square').similar(
            bonds=[Bond(1, 1, "J1", (1, 0)), Bond(1, 1, "J2", (1, 1))]
        )
        h = heisenberg_from_unitcell(uc, n_neighbors=2)

        assert h.J_bonds == [["J1"], ["J2"]]
        assert h.J == [1.0, 1.0]

    def test_repr(self):
        h = HeisenbergBondHamiltonian([1.0], [["J1"]], str)

        assert "O(3)" in repr(h)
        assert "J1=1.0" in repr(h)


class TestKitaev:
    """Test Kitaev couplings."""

    def test_bond_directional(self):
        h = KitaevBondHamiltonian(1.0, 2.0, 3.0, ["x"], ["y"], ["z"], str)

        assert np.allclose(h(Bond(1, 2, "x", ())), np.diag([1.0, 0.0, 0.0]))
        assert np.allclose(h(Bond(1, 2, "y", ())), np.diag([0.0, 2.0, 0.0]))
        assert np.allclose(h(Bond(1, 2, "z", ())), np.diag([0.0, 0.0, 3.0]))
        assert np.allclose(h(Bond(1, 2, "w", ())), 0.0)

    def test_from_unitcell(self):
        uc = create_unitcell('honeycomb_kitaev')
        h = kitaev_from_unitcell(uc)

        assert (h.x_bonds, h.y_bonds, h.z_bonds) == (["x"], ["y"], ["z"])
        total = sum(h(bond) for bond in uc.get_bonds())
        assert np.allclose(total, 2.0 * np.eye(3))

    def test_from_unitcell_case_insensitive(self):
        uc = create_unitcell('square').similar(
            bonds=[Bond(1, 1, "Kx", (1, 0)), Bond(1, 1, "Ky", (0, 1))]
        )
        h = kitaev_from_unitcell(uc)

        assert h.x_bonds == ["Kx"]
        assert h.y_bonds == ["Ky"]
        assert h.z_bonds == []


class TestCombine:
    """Test sums of Hamiltonians."""

    def test_sum(self):
        uc = create_unitcell('honeycomb_kitaev')
        h1 = HeisenbergBondHamiltonian([0.5], [["x", "y", "z"]], str)
        h2 = kitaev_from_unitcell(uc)
        h = combine(h1, h2)

        assert isinstance(h, BondHamiltonianSum)
        for bond in uc.get_bonds():
            assert np.allclose(h(bond), h1(bond) + h2(bond))

    def test_spin_dim_mismatch(self):
        h1 = HeisenbergBondHamiltonian([1.0], [["x"]], str, spin_dim=2)
        h2 = KitaevBondHamiltonian(1.0, 1.0, 1.0, ["x"], ["y"], ["z"], str)

        with pytest.raises(IncompatibleTypesError, match="spin"):
            combine(h1, h2)

    def test_label_type_mismatch(self):
        h1 = HeisenbergBondHamiltonian([1.0], [[1]], int)
        h2 = KitaevBondHamiltonian(1.0, 1.0, 1.0, ["x"], ["y"], ["z"], str)

        with pytest.raises(IncompatibleTypesError, match="label type"):
            combine(h1, h2)

    def test_numeric_label_types_combine(self):
        h1 = HeisenbergBondHamiltonian([1.0], [[1]], int)
        h2 = HeisenbergBondHamiltonian([2.0], [[1]], float)

        assert np.allclose(combine(h1, h2)(Bond(1, 1, 1, ())), 3.0 * np.eye(3))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
