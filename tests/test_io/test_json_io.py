"""
Unit tests for JSON persistence and configuration loading.

Tests:
- Saving and loading sites, bonds, unitcells and lattices
- Label types survive a save/load cycle
- Groups and append mode
- Configuration files (preset and full layout)
"""

import json

import numpy as np
import pytest
from latbase.core import Bond, Lattice, Site, Unitcell, create_unitcell
from latbase.errors import IncompatibleTypesError, IndexOutOfRangeError
from latbase.io import (
    ENTITY_REGISTRY,
    from_dict,
    load_bonds,
    load_config,
    load_lattice,
    load_sites,
    load_unitcell,
    register_type,
    save_bonds,
    save_lattice,
    save_sites,
    save_unitcell,
    to_dict,
    unitcell_to_dict,
)


@pytest.fixture
def honeycomb():
    return create_unitcell('honeycomb_kitaev', lattice_constant=1.2)


class TestSaveLoad:
    """Test file round trips."""

    def test_unitcell(self, tmp_path, honeycomb):
        path = tmp_path / "uc.json"
        save_unitcell(honeycomb, path)
        loaded = load_unitcell(path)

        assert isinstance(loaded, Unitcell)
        assert loaded == honeycomb

    def test_lattice(self, tmp_path):
        uc = create_unitcell('chain')
        lt = Lattice([[2.0]],
                     [Site([0.0], "1"), Site([1.0], "1")],
                     [Bond(1, 2, "1", (0,)), Bond(2, 1, "1", (0,)),
                      Bond(2, 1, "1", (1,)), Bond(1, 2, "1", (-1,))],
                     uc)
        path = tmp_path / "lattice.json"
        save_lattice(lt, path)
        loaded = load_lattice(path)

        assert isinstance(loaded, Lattice)
        assert loaded == lt
        assert loaded.get_unitcell() == uc

    def test_sites_and_bonds(self, tmp_path, honeycomb):
        path = tmp_path / "parts.json"
        save_sites(honeycomb.get_sites(), path)
        save_bonds(honeycomb.get_bonds(), path, append=True)

        assert load_sites(path) == honeycomb.get_sites()
        assert load_bonds(path) == honeycomb.get_bonds()

    @pytest.mark.parametrize("label_type", [str, int, float])
    def test_label_type_preserved(self, tmp_path, label_type):
        uc = create_unitcell('honeycomb', label_type=label_type)
        path = tmp_path / "uc.json"
        save_unitcell(uc, path)
        loaded = load_unitcell(path)

        assert all(type(s.get_label()) is label_type for s in loaded.get_sites())
        assert all(type(b.get_label()) is label_type for b in loaded.get_bonds())

    def test_complex_and_bool_labels(self, tmp_path):
        uc = Unitcell([[1.0]], [Site([0.0], True)], [Bond(1, 1, 1 + 2j, (0,))])
        path = tmp_path / "uc.json"
        save_unitcell(uc, path)
        loaded = load_unitcell(path)

        assert loaded.site(1).get_label() is True
        assert loaded.bond(1).get_label() == 1 + 2j

    def test_empty_unitcell(self, tmp_path):
        path = tmp_path / "empty.json"
        save_unitcell(Unitcell([], [], []), path)

        assert load_unitcell(path) == Unitcell([], [], [])

    def test_file_is_plain_json(self, tmp_path, honeycomb):
        path = tmp_path / "uc.json"
        save_unitcell(honeycomb, path)

        with open(path) as f:
            content = json.load(f)
        data = content['unitcell']
        assert data['type'] == 'Unitcell'
        assert data['N'] == 2
        assert data['bonds']['label_type'] == 'str'
        assert data['bonds']['from'][:2] == [1, 2]


class TestGroups:
    """Test named groups inside one file."""

    def test_append_keeps_other_groups(self, tmp_path):
        path = tmp_path / "many.json"
        square = create_unitcell('square')
        triangular = create_unitcell('triangular')
        save_unitcell(square, path, group='square')
        save_unitcell(triangular, path, group='triangular', append=True)

        assert load_unitcell(path, group='square') == square
        assert load_unitcell(path, group='triangular') == triangular

    def test_overwrite_without_append(self, tmp_path):
        path = tmp_path / "one.json"
        save_unitcell(create_unitcell('square'), path, group='a')
        save_unitcell(create_unitcell('square'), path, group='b')

        with pytest.raises(KeyError, match="available groups: b"):
            load_unitcell(path, group='a')


class TestLoadValidation:
    """Test that loaded objects are checked."""

    def test_bad_index_rejected(self, tmp_path, honeycomb):
        data = unitcell_to_dict(honeycomb)
        data['bonds']['to'][0] = 7
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({'unitcell': data}))

        with pytest.raises(IndexOutOfRangeError):
            load_unitcell(path)

    def test_unknown_type(self, honeycomb):
        data = unitcell_to_dict(honeycomb)
        data['type'] = 'Supercell'

        with pytest.raises(ValueError, match="Unknown type 'Supercell'"):
            from_dict(data)

    def test_wrong_kind_of_type(self, honeycomb):
        data = unitcell_to_dict(honeycomb)
        data['sites']['type'] = 'Bond'

        with pytest.raises(IncompatibleTypesError):
            from_dict(data)

    def test_mixed_labels_cannot_be_saved(self):
        uc = Unitcell([[1.0]], [Site([0.0], "A"), Site([0.5], 2)], [])

        with pytest.raises(IncompatibleTypesError, match="mixed label types"):
            to_dict(uc)

    def test_unsupported_label_type(self):
        uc = Unitcell([[1.0]], [Site([0.0], ("A", 1))], [])

        with pytest.raises(IncompatibleTypesError):
            to_dict(uc)

    def test_to_dict_rejects_sites(self):
        with pytest.raises(TypeError):
            to_dict(Site([0.0], "A"))


class TestRegisterType:
    """Test loading alternative implementations."""

    def test_registered_site_type(self, tmp_path):
        @register_type
        class TaggedSite(Site):
            pass

        try:
            uc = Unitcell([[1.0]], [TaggedSite([0.0], "A")], [])
            path = tmp_path / "uc.json"
            save_unitcell(uc, path)
            loaded = load_unitcell(path)

            assert type(loaded.site(1)) is TaggedSite
        finally:
            ENTITY_REGISTRY.pop('TaggedSite', None)

    def test_register_rejects_other_classes(self):
        with pytest.raises(TypeError):
            register_type(dict)


class TestLoadConfig:
    """Test configuration files."""

    def test_preset(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "preset": "triangular",
            "lattice_constant": 2.0,
            "label_type": "int",
        }))
        uc = load_config(path)

        assert np.allclose(uc.a1(), [2.0, 0.0])
        assert uc.bond(1).get_label() == 1

    def test_preset_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"preset": "square"}))

        assert load_config(path) == create_unitcell('square')

    def test_unknown_preset(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"preset": "kagome"}))

        with pytest.raises(ValueError, match="Unknown unitcell type"):
            load_config(path)

    def test_unknown_label_type(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"preset": "square", "label_type": "enum"}))

        with pytest.raises(ValueError, match="Unknown label type"):
            load_config(path)

    def test_full_layout(self, tmp_path, honeycomb):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(to_dict(honeycomb)))

        assert load_config(path) == honeycomb


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
