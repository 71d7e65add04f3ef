"""
Unitcell module.

This module provides the abstract unitcell interface, the default
implementation and preset unitcells for common lattices.
"""

from .base import AbstractUnitcell
from .concrete import Unitcell
from .presets import (
    chain_unitcell,
    square_unitcell,
    triangular_unitcell,
    honeycomb_unitcell,
    honeycomb_kitaev_unitcell,
    UNITCELL_REGISTRY,
    create_unitcell,
)

__all__ = [
    'AbstractUnitcell',
    'Unitcell',
    'chain_unitcell',
    'square_unitcell',
    'triangular_unitcell',
    'honeycomb_unitcell',
    'honeycomb_kitaev_unitcell',
    'UNITCELL_REGISTRY',
    'create_unitcell',
]
