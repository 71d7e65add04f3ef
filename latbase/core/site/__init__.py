"""
Site module.

Sites are labelled points in D-dimensional embedding space.
"""

from .base import AbstractSite
from .concrete import Site

__all__ = [
    'AbstractSite',
    'Site',
]
