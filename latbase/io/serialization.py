"""
Conversion of sites, bonds, unitcells and lattices to and from plain dicts.

The dict layout is self-describing: every block carries a "type" entry naming
the concrete class (looked up in ENTITY_REGISTRY on load) and label lists
carry a "label_type" tag so that labels stored as text can be rebuilt with
their original type.

Layout
------
sites:    {"type", "D", "points", "labels", "label_type"}
bonds:    {"type", "N", "from", "to", "wraps", "labels", "label_type"}
unitcell: {"type", "N", "lattice_vectors", "sites", "bonds"}
lattice:  {"type", "N", "lattice_vectors", "sites", "bonds", "unitcell"}
"""

import numbers
import numpy as np
from typing import Any, Dict, List, Optional, Sequence

from ..core.bond import AbstractBond, Bond
from ..core.interface import check_interface
from ..core.lattice import AbstractLattice, Lattice
from ..core.site import AbstractSite, Site
from ..core.unitcell import AbstractUnitcell, Unitcell
from ..errors import IncompatibleTypesError

# Concrete types that may be named in a persisted "type" entry
ENTITY_REGISTRY = {
    'Site': Site,
    'Bond': Bond,
    'Unitcell': Unitcell,
    'Lattice': Lattice,
}

LABEL_TYPES = {
    'str': str,
    'int': int,
    'float': float,
    'bool': bool,
    'complex': complex,
}


def register_type(cls: type, name: Optional[str] = None) -> type:
    """
    Make an alternative implementation loadable by name.

    Parameters
    ----------
    cls : type
        Subclass of AbstractSite, AbstractBond, AbstractUnitcell or
        AbstractLattice whose constructor accepts the same arguments as
        the default implementation.
    name : str, optional
        Registry key, defaults to `cls.__name__`.

    Returns
    -------
    cls
        Unchanged, so this can be used as a class decorator.

    Raises
    ------
    TypeError
        If `cls` is not an entity type.
    NotImplementedInterfaceError
        If `cls` fails `check_interface`.
    """
    if not issubclass(cls, (AbstractSite, AbstractBond, AbstractUnitcell, AbstractLattice)):
        raise TypeError(f"{cls.__name__} is not a site, bond, unitcell or lattice type")
    check_interface(cls)
    ENTITY_REGISTRY[name or cls.__name__] = cls
    return cls


def _lookup_type(name: str, base: type) -> type:
    if name not in ENTITY_REGISTRY:
        available = ', '.join(ENTITY_REGISTRY.keys())
        raise ValueError(f"Unknown type '{name}'. Available types: {available}")
    cls = ENTITY_REGISTRY[name]
    if not issubclass(cls, base):
        expected = ' or '.join(b.__name__ for b in (base if isinstance(base, tuple) else (base,)))
        raise IncompatibleTypesError(f"type '{name}' is not a {expected}")
    return cls


def _common_type_name(items: Sequence, default: str) -> str:
    names = {type(item).__name__ for item in items}
    if len(names) > 1:
        raise IncompatibleTypesError(f"mixed types in one list: {sorted(names)}")
    return names.pop() if names else default


def label_type_tag(label: Any) -> str:
    """Type tag for a label; bool is checked before int."""
    if isinstance(label, str):
        return 'str'
    if isinstance(label, (bool, np.bool_)):
        return 'bool'
    if isinstance(label, numbers.Integral):
        return 'int'
    if isinstance(label, numbers.Real):
        return 'float'
    if isinstance(label, numbers.Complex):
        return 'complex'
    raise IncompatibleTypesError(
        f"labels of type {type(label).__name__} cannot be stored; "
        f"supported: {', '.join(LABEL_TYPES)}"
    )


def encode_labels(labels: Sequence) -> Dict[str, Any]:
    """Encode a list of labels sharing one type."""
    tags = {label_type_tag(label) for label in labels}
    if len(tags) > 1:
        raise IncompatibleTypesError(f"mixed label types in one list: {sorted(tags)}")
    tag = tags.pop() if tags else None

    if tag == 'complex':
        encoded = [str(complex(label)) for label in labels]
    elif tag is None or tag == 'str':
        encoded = [str(label) for label in labels]
    else:
        # JSON-native numbers, also unwraps numpy scalars
        encoded = [LABEL_TYPES[tag](label) for label in labels]
    return {'labels': encoded, 'label_type': tag}


def decode_labels(data: Dict[str, Any]) -> List[Any]:
    tag = data.get('label_type')
    if tag is None:
        return list(data['labels'])
    if tag not in LABEL_TYPES:
        raise ValueError(f"Unknown label type tag '{tag}'")
    return [LABEL_TYPES[tag](label) for label in data['labels']]


def sites_to_dict(sites: Sequence[AbstractSite]) -> Dict[str, Any]:
    dims = {site.ndims() for site in sites}
    if len(dims) > 1:
        raise IncompatibleTypesError(f"sites of different dimensions: {sorted(dims)}")
    data = {
        'type': _common_type_name(sites, 'Site'),
        'D': dims.pop() if dims else 0,
        'points': [np.asarray(site.get_point(), dtype=float).tolist() for site in sites],
    }
    data.update(encode_labels([site.get_label() for site in sites]))
    return data


def sites_from_dict(data: Dict[str, Any]) -> list:
    cls = _lookup_type(data['type'], AbstractSite)
    labels = decode_labels(data)
    return [cls(point, label, ndims=data['D'])
            for point, label in zip(data['points'], labels)]


def bonds_to_dict(bonds: Sequence[AbstractBond]) -> Dict[str, Any]:
    lengths = {len(bond.get_wrap()) for bond in bonds}
    if len(lengths) > 1:
        raise IncompatibleTypesError(f"bonds of different wrap lengths: {sorted(lengths)}")
    data = {
        'type': _common_type_name(bonds, 'Bond'),
        'N': lengths.pop() if lengths else 0,
        'from': [int(bond.get_from()) for bond in bonds],
        'to': [int(bond.get_to()) for bond in bonds],
        'wraps': [[int(w) for w in bond.get_wrap()] for bond in bonds],
    }
    data.update(encode_labels([bond.get_label() for bond in bonds]))
    return data


def bonds_from_dict(data: Dict[str, Any]) -> list:
    cls = _lookup_type(data['type'], AbstractBond)
    labels = decode_labels(data)
    return [cls(i, j, label, wrap, nwrap=data['N'])
            for i, j, wrap, label in zip(data['from'], data['to'], data['wraps'], labels)]


def _container_to_dict(container) -> Dict[str, Any]:
    vectors = container.get_lattice_vectors()
    return {
        'type': type(container).__name__,
        'N': len(vectors),
        'lattice_vectors': [np.asarray(a, dtype=float).tolist() for a in vectors],
        'sites': sites_to_dict(container.get_sites()),
        'bonds': bonds_to_dict(container.get_bonds()),
    }


def unitcell_to_dict(unitcell: AbstractUnitcell) -> Dict[str, Any]:
    return _container_to_dict(unitcell)


def unitcell_from_dict(data: Dict[str, Any]) -> AbstractUnitcell:
    """Rebuild a unitcell and check its invariants."""
    cls = _lookup_type(data['type'], AbstractUnitcell)
    unitcell = cls(
        data['lattice_vectors'],
        sites_from_dict(data['sites']),
        bonds_from_dict(data['bonds']),
    )
    return unitcell.validate()


def lattice_to_dict(lattice: AbstractLattice) -> Dict[str, Any]:
    data = _container_to_dict(lattice)
    data['unitcell'] = unitcell_to_dict(lattice.get_unitcell())
    return data


def lattice_from_dict(data: Dict[str, Any]) -> AbstractLattice:
    """Rebuild a lattice (and its unitcell) and check its invariants."""
    cls = _lookup_type(data['type'], AbstractLattice)
    lattice = cls(
        data['lattice_vectors'],
        sites_from_dict(data['sites']),
        bonds_from_dict(data['bonds']),
        unitcell_from_dict(data['unitcell']),
    )
    return lattice.validate()


def to_dict(obj) -> Dict[str, Any]:
    """Dict form of a unitcell or lattice."""
    if isinstance(obj, AbstractLattice):
        return lattice_to_dict(obj)
    if isinstance(obj, AbstractUnitcell):
        return unitcell_to_dict(obj)
    raise TypeError(f"cannot convert {type(obj).__name__} to dict")


def from_dict(data: Dict[str, Any]):
    """Unitcell or lattice from its dict form, dispatching on "type"."""
    cls = _lookup_type(data['type'], (AbstractUnitcell, AbstractLattice))
    if issubclass(cls, AbstractLattice):
        return lattice_from_dict(data)
    return unitcell_from_dict(data)
