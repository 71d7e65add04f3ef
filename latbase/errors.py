"""
Exception hierarchy for latbase.

All errors derive from LatticeError and additionally from the builtin
exception they specialise, so callers may catch either.
"""


class LatticeError(Exception):
    """Base class for all latbase errors."""


class NotImplementedInterfaceError(LatticeError, NotImplementedError):
    """An interface method was reached on a type that never implemented it."""

    def __init__(self, method: str, obj_type: type):
        self.method = method
        self.obj_type = obj_type
        super().__init__(
            f"not implemented interface function '{method}' "
            f"for type {getattr(obj_type, '__name__', obj_type)}"
        )


class DimensionMismatchError(LatticeError, ValueError):
    """A point or wrap vector does not have the declared length."""


class IndexOutOfRangeError(LatticeError, IndexError):
    """A 1-based site or bond index lies outside [1, count]."""


class IncompatibleTypesError(LatticeError, TypeError):
    """Operands do not agree in label type, wrap length or dimension."""


class UnpairedBondError(LatticeError, ValueError):
    """A bond has no reverse partner where reciprocal bonds were required."""
