"""
Plotting of unitcells and lattices (requires matplotlib).
"""

from .plotting import plot_unitcell

__all__ = ['plot_unitcell']
