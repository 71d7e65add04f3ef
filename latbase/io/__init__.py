"""
Persistence of lattice objects.

Objects are stored as self-describing JSON: every block names its concrete
type and its label type, so loading rebuilds the same implementation with
the same label type.
"""

from .serialization import (
    ENTITY_REGISTRY,
    LABEL_TYPES,
    register_type,
    to_dict,
    from_dict,
    sites_to_dict,
    sites_from_dict,
    bonds_to_dict,
    bonds_from_dict,
    unitcell_to_dict,
    unitcell_from_dict,
    lattice_to_dict,
    lattice_from_dict,
)
from .json_io import (
    save_sites,
    load_sites,
    save_bonds,
    load_bonds,
    save_unitcell,
    load_unitcell,
    save_lattice,
    load_lattice,
    load_config,
)

__all__ = [
    'ENTITY_REGISTRY',
    'LABEL_TYPES',
    'register_type',
    'to_dict',
    'from_dict',
    'sites_to_dict',
    'sites_from_dict',
    'bonds_to_dict',
    'bonds_from_dict',
    'unitcell_to_dict',
    'unitcell_from_dict',
    'lattice_to_dict',
    'lattice_from_dict',
    'save_sites',
    'load_sites',
    'save_bonds',
    'load_bonds',
    'save_unitcell',
    'load_unitcell',
    'save_lattice',
    'load_lattice',
    'load_config',
]
