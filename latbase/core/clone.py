"""
Copy-with-override support shared by all entities.

Every entity (site, bond, unitcell, lattice) exposes `set_<field>` setters.
`similar` makes an unconditional deep copy and then routes each override
through the copy's own setter, so the same validation that guards mutation
also guards overrides.
"""

import copy
from typing import Any


def _setter_name(field: str) -> str:
    # `from_` -> `set_from`
    return f"set_{field.rstrip('_')}"


class SimilarMixin:
    """
    Mixin providing `similar(**overrides)`.

    Subclasses list the fields that may be overridden in `_similar_fields`.
    """

    _similar_fields: tuple = ()

    def similar(self, **overrides: Any):
        """
        Return an independent deep copy, optionally with fields replaced.

        Parameters
        ----------
        **overrides
            Field values to set on the copy. Keys must be listed in
            `_similar_fields`. Values are deep-copied before being set.

        Returns
        -------
        obj
            New instance of the same concrete type.

        Raises
        ------
        TypeError
            If an override key is not a field of this type.
        """
        unknown = [key for key in overrides if key not in self._similar_fields]
        if unknown:
            raise TypeError(
                f"{self.__class__.__name__}.similar() got unexpected field(s) "
                f"{', '.join(sorted(unknown))}; "
                f"allowed: {', '.join(self._similar_fields)}"
            )

        new = copy.deepcopy(self)
        for key, value in overrides.items():
            getattr(new, _setter_name(key))(copy.deepcopy(value))
        return new


def similar(obj: SimilarMixin, **overrides: Any):
    """Functional form of `obj.similar(**overrides)`."""
    return obj.similar(**overrides)
