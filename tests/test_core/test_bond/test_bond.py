"""
Unit tests for Bond.

Tests:
- Construction and wrap length
- Periodicity
- Copy with overrides
- Equality and representation
"""

import numpy as np
import pytest
from latbase.core.bond import AbstractBond, Bond
from latbase.errors import DimensionMismatchError


class TestBondCreation:
    """Test creation and accessors."""

    def test_fields(self):
        """Test that all fields are stored."""
        bond = Bond(1, 2, "J", (0, 1))

        assert bond.get_from() == 1
        assert bond.get_to() == 2
        assert bond.get_label() == "J"
        assert bond.get_wrap() == (0, 1)
        assert bond.nwrap() == 2

    def test_wrap_is_integer_tuple(self):
        """Test that wraps given as lists become integer tuples."""
        bond = Bond(1, 1, 0, [1, -1, 0])

        assert bond.get_wrap() == (1, -1, 0)
        assert all(isinstance(w, int) for w in bond.get_wrap())

    def test_no_range_check_at_construction(self):
        """Test that endpoints are not validated on their own."""
        bond = Bond(10, -3, "J", ())

        assert bond.get_from() == 10
        assert bond.get_to() == -3

    def test_fractional_wrap_raises(self):
        """Test that a fractional wrap is not truncated to an in-cell bond."""
        with pytest.raises(TypeError, match="wrap component"):
            Bond(1, 1, "J", (0.5, 0))

    @pytest.mark.parametrize("from_, to", [(1.9, 2), (1, 2.7)])
    def test_fractional_index_raises(self, from_, to):
        with pytest.raises(TypeError, match="must be an integer"):
            Bond(from_, to, "J", (0, 0))

    def test_non_numeric_index_raises(self):
        with pytest.raises(TypeError):
            Bond("1", 2, "J", ())

    def test_whole_floats_and_numpy_integers_accepted(self):
        """Test that integer-valued numbers of any numeric type are kept."""
        bond = Bond(np.int64(2), 1.0, "J", np.array([1, -1]))

        assert bond.get_from() == 2
        assert bond.get_to() == 1
        assert bond.get_wrap() == (1, -1)
        assert all(type(w) is int for w in bond.get_wrap())

    def test_explicit_wrap_length_mismatch_raises(self):
        with pytest.raises(DimensionMismatchError, match="expected N=3"):
            Bond(1, 2, "J", (0, 0), nwrap=3)

    def test_abstract_bond_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            AbstractBond()


class TestBondMutation:
    """Test setters."""

    def test_setters(self):
        bond = Bond(1, 2, "J", (0, 0))
        bond.set_from(3)
        bond.set_to(4)
        bond.set_label("K")
        bond.set_wrap((1, -1))

        assert bond == Bond(3, 4, "K", (1, -1))

    def test_set_wrap_wrong_length_raises(self):
        """Test that N is fixed for the lifetime of the bond."""
        bond = Bond(1, 2, "J", (0, 0))

        with pytest.raises(DimensionMismatchError):
            bond.set_wrap((0, 0, 0))
        assert bond.get_wrap() == (0, 0)

    def test_setters_reject_fractions(self):
        bond = Bond(1, 2, "J", (0, 0))

        with pytest.raises(TypeError):
            bond.set_from(1.5)
        with pytest.raises(TypeError):
            bond.set_to(0.1)
        with pytest.raises(TypeError):
            bond.set_wrap((0, 0.25))
        assert bond == Bond(1, 2, "J", (0, 0))

    def test_similar_rejects_fractional_wrap(self):
        with pytest.raises(TypeError):
            Bond(1, 2, "J", (0, 0)).similar(wrap=(0.5, 0))


class TestBondPeriodicity:
    """Test is_periodic."""

    @pytest.mark.parametrize("wrap, expected", [
        ((), False),
        ((0,), False),
        ((0, 0, 0), False),
        ((1,), True),
        ((0, -2), True),
        ((0, 0, 1, 0), True),
    ])
    def test_is_periodic(self, wrap, expected):
        """Test that a bond is periodic iff a wrap component is non-zero."""
        bond = Bond(1, 1, "J", wrap)

        assert bond.is_periodic() == expected
        assert bond.is_periodic() == any(w != 0 for w in bond.get_wrap())


class TestBondSimilar:
    """Test copy with overrides."""

    def test_exact_copy(self):
        bond = Bond(1, 2, "J", (1, 0))
        copy = bond.similar()

        assert copy == bond
        assert copy is not bond

        copy.set_to(1)
        assert bond.get_to() == 2

    def test_override_from_and_wrap(self):
        """Test the `from_` override keyword."""
        bond = Bond(1, 2, "J", (1, 0))
        copy = bond.similar(from_=2, wrap=(0, 0))

        assert copy == Bond(2, 2, "J", (0, 0))
        assert bond == Bond(1, 2, "J", (1, 0))

    def test_override_wrap_is_validated(self):
        with pytest.raises(DimensionMismatchError):
            Bond(1, 2, "J", (1, 0)).similar(wrap=(1,))


class TestBondEqualityAndRepr:

    def test_equality(self):
        assert Bond(1, 2, "J", (0, 0)) == Bond(1, 2, "J", [0, 0])
        assert Bond(1, 2, "J", (0, 0)) != Bond(2, 1, "J", (0, 0))
        assert Bond(1, 2, "J", (0, 0)) != Bond(1, 2, "K", (0, 0))
        assert Bond(1, 2, "J", (0, 0)) != Bond(1, 2, "J", (0, 1))

    def test_unhashable(self):
        """Test that mutable bonds cannot be used as dict keys."""
        with pytest.raises(TypeError):
            hash(Bond(1, 2, "J", ()))

    def test_repr(self):
        assert repr(Bond(1, 2, "J", (0, 1))) == "Bond(1 --> 2 @ (0, 1), 'J')"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
