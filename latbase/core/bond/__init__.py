"""
Bond module.

Bonds are directed, labelled edges between 1-based site indices with
periodic wrap information.
"""

from .base import AbstractBond
from .concrete import Bond

__all__ = [
    'AbstractBond',
    'Bond',
]
