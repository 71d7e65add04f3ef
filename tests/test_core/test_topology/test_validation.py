"""
Unit tests for validate / unpaired_bonds.
"""

import logging

import pytest
from latbase.core import Bond, Site, Unitcell, create_unitcell, unpaired_bonds, validate
from latbase.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    UnpairedBondError,
)


def _chain(bonds):
    return Unitcell([[1.0]], [Site([0.0], "a"), Site([0.5], "b")], bonds)


class TestUnpairedBonds:
    """Test detection of missing reverse bonds."""

    def test_all_paired(self):
        uc = _chain([Bond(1, 2, "J", (0,)), Bond(2, 1, "J", (0,)),
                     Bond(2, 1, "J", (1,)), Bond(1, 2, "J", (-1,))])

        assert unpaired_bonds(uc) == []

    def test_missing_reverse(self, caplog):
        uc = _chain([Bond(1, 2, "J", (0,)), Bond(2, 1, "J", (1,))])

        with caplog.at_level(logging.WARNING, logger="latbase"):
            unpaired = unpaired_bonds(uc)

        assert unpaired == uc.get_bonds()
        assert "no reciprocal partner" in caplog.text

    def test_label_must_match(self):
        uc = _chain([Bond(1, 2, "J", (0,)), Bond(2, 1, "K", (0,))])

        assert len(uc.unpaired_bonds()) == 2

    def test_unhashable_labels(self):
        """Test that list labels are matched without hashing."""
        uc = _chain([Bond(1, 2, ["J", 1], (0,)), Bond(2, 1, ["J", 1], (0,)),
                     Bond(1, 2, ["J", 2], (1,))])

        assert uc.unpaired_bonds() == [uc.bond(3)]
        with pytest.raises(UnpairedBondError):
            uc.validate(check_reciprocal=True)

    def test_unhashable_labels_all_paired(self):
        uc = _chain([Bond(1, 2, ["J", 1], (1,)), Bond(2, 1, ["J", 1], (-1,))])

        assert validate(uc, check_reciprocal=True) is None

    def test_self_bond_with_zero_wrap(self):
        uc = _chain([Bond(1, 1, "J", (0,))])

        assert uc.unpaired_bonds() == []


class TestValidate:
    """Test the invariant checks."""

    def test_valid_cell(self):
        uc = create_unitcell('honeycomb')

        assert validate(uc) is None
        assert validate(uc, check_reciprocal=True) is None

    def test_reciprocal_not_checked_by_default(self):
        uc = _chain([Bond(1, 2, "J", (0,))])

        uc.validate()
        with pytest.raises(UnpairedBondError):
            uc.validate(check_reciprocal=True)

    def test_unpaired_is_value_error(self):
        uc = _chain([Bond(1, 2, "J", (0,))])

        with pytest.raises(ValueError):
            uc.validate(check_reciprocal=True)

    def test_origin_out_of_range(self):
        uc = _chain([Bond(0, 1, "J", (0,))])

        with pytest.raises(IndexOutOfRangeError, match="origin"):
            uc.validate()

    def test_wrap_length(self):
        uc = _chain([Bond(1, 2, "J", ())])

        with pytest.raises(DimensionMismatchError, match="expected N=1"):
            uc.validate()

    def test_mixed_site_dimensions(self):
        uc = Unitcell([], [Site([0.0], "a"), Site([0.0, 0.0], "b")], [])

        with pytest.raises(DimensionMismatchError):
            uc.validate()

    def test_validate_logs(self, caplog):
        uc = create_unitcell('square')

        with caplog.at_level(logging.DEBUG, logger="latbase"):
            uc.validate()

        assert "validated Unitcell" in caplog.text


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
