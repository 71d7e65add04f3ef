"""
Saving and loading of lattice objects as JSON files.

A file holds one or more named groups, each the dict form of an object (see
`serialization`). `append=True` adds or replaces a group in an existing file
instead of overwriting it, so a unitcell and several lattices can share one
file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Union

from .serialization import (
    LABEL_TYPES,
    bonds_from_dict,
    bonds_to_dict,
    from_dict,
    lattice_from_dict,
    lattice_to_dict,
    sites_from_dict,
    sites_to_dict,
    unitcell_from_dict,
    unitcell_to_dict,
)
from ..core.lattice import AbstractLattice
from ..core.unitcell import AbstractUnitcell, create_unitcell

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_file(path: PathLike) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return json.load(f)


def _write_group(path: PathLike, group: str, data: Dict[str, Any], append: bool) -> None:
    path = Path(path)
    content = _read_file(path) if append and path.exists() else {}
    content[group] = data
    with open(path, 'w') as f:
        json.dump(content, f, indent=4)
    logger.info("saved %s group '%s' to %s", data.get('type'), group, path)


def _read_group(path: PathLike, group: str) -> Dict[str, Any]:
    content = _read_file(path)
    if group not in content:
        raise KeyError(f"group '{group}' not found in {path}; "
                       f"available groups: {', '.join(content.keys())}")
    logger.info("loading group '%s' from %s", group, path)
    return content[group]


def save_sites(sites: Sequence, path: PathLike, group: str = 'sites',
               append: bool = False) -> None:
    _write_group(path, group, sites_to_dict(sites), append)


def load_sites(path: PathLike, group: str = 'sites') -> list:
    return sites_from_dict(_read_group(path, group))


def save_bonds(bonds: Sequence, path: PathLike, group: str = 'bonds',
               append: bool = False) -> None:
    _write_group(path, group, bonds_to_dict(bonds), append)


def load_bonds(path: PathLike, group: str = 'bonds') -> list:
    return bonds_from_dict(_read_group(path, group))


def save_unitcell(unitcell: AbstractUnitcell, path: PathLike, group: str = 'unitcell',
                  append: bool = False) -> None:
    """
    Save a unitcell to a JSON file.

    Parameters
    ----------
    unitcell : AbstractUnitcell
        Unitcell to save. Labels must be str, int, float, bool or complex.
    path : str or Path
        Output file.
    group : str, optional
        Name of the group inside the file (default: 'unitcell').
    append : bool, optional
        Keep the other groups of an existing file (default: False).
    """
    _write_group(path, group, unitcell_to_dict(unitcell), append)


def load_unitcell(path: PathLike, group: str = 'unitcell') -> AbstractUnitcell:
    """
    Load a unitcell saved with `save_unitcell`.

    Raises
    ------
    KeyError
        If the group does not exist in the file.
    """
    return unitcell_from_dict(_read_group(path, group))


def save_lattice(lattice: AbstractLattice, path: PathLike, group: str = 'lattice',
                 append: bool = False) -> None:
    """Save a lattice, including its unitcell, to a JSON file."""
    _write_group(path, group, lattice_to_dict(lattice), append)


def load_lattice(path: PathLike, group: str = 'lattice') -> AbstractLattice:
    """Load a lattice (and its unitcell) saved with `save_lattice`."""
    return lattice_from_dict(_read_group(path, group))


def load_config(config_path: PathLike):
    """
    Build a unitcell or lattice from a JSON configuration file.

    Parameters
    ----------
    config_path : str or Path
        JSON file holding either

        - a preset reference:
              {"preset": "honeycomb", "lattice_constant": 1.0,
               "label_type": "str"}
        - or a full object in the dict layout of `serialization`, e.g.
              {"type": "Unitcell", "lattice_vectors": [...],
               "sites": {...}, "bonds": {...}}

    Returns
    -------
    AbstractUnitcell or AbstractLattice

    Raises
    ------
    ValueError
        If the preset or a type name is unknown.
    """
    config = _read_file(config_path)
    logger.info("loading configuration from %s", config_path)

    if 'preset' in config:
        kwargs = {key: value for key, value in config.items() if key != 'preset'}
        if 'label_type' in kwargs:
            tag = kwargs['label_type']
            if tag not in LABEL_TYPES:
                raise ValueError(f"Unknown label type '{tag}'. "
                                 f"Available types: {', '.join(LABEL_TYPES)}")
            kwargs['label_type'] = LABEL_TYPES[tag]
        return create_unitcell(config['preset'], **kwargs)

    return from_dict(config)
