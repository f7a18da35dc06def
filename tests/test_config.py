import os
import sys

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from room_core.config import RoomConfig, load_room_config
from room_core.materials import DEFAULT_MATERIAL, SURFACE_MATERIALS, SurfaceMaterial, get_material


class TestRoomConfig:
    def test_defaults(self):
        cfg = RoomConfig()
        assert (cfg.width, cfg.depth, cfg.height) == (4.0, 6.0, 3.0)
        assert cfg.wall_thickness == 0.15
        assert cfg.floor_thickness == 0.12
        assert cfg.window_east.model_dump() == {
            'width': 2.4, 'height': 1.2, 'sill_height': 0.9, 'along_offset': 0.0}
        assert cfg.window_south.model_dump() == {
            'width': 3.0, 'height': 1.4, 'sill_height': 0.7, 'along_offset': 0.0}
        assert cfg.glass_material is SURFACE_MATERIALS['glass']

    def test_partial_nested_override(self):
        cfg = RoomConfig.from_dict({'width': 5, 'window_east': {'width': 1.0}})
        assert cfg.width == 5.0
        assert cfg.depth == 6.0
        assert cfg.window_east.width == 1.0
        # Untouched fields keep their defaults
        assert cfg.window_east.height == 1.2
        assert cfg.window_east.sill_height == 0.9
        assert cfg.window_south.width == 3.0

    def test_merged_keeps_existing_values(self):
        cfg = RoomConfig.from_dict({'height': 2.7}).merged({'window_south': {'along_offset': 0.4}})
        assert cfg.height == 2.7
        assert cfg.window_south.along_offset == 0.4
        assert cfg.window_south.height == 1.4

    def test_non_positive_dimension_rejected(self):
        with pytest.raises(ValidationError):
            RoomConfig(width=0)
        with pytest.raises(ValidationError):
            RoomConfig.from_dict({'wall_thickness': -0.1})

    @pytest.mark.parametrize("override", [
        {'width': 0.2},
        {'width': 0.3},
        {'depth': 0.25},
        {'wall_thickness': 2.0},
    ])
    def test_room_must_leave_room_for_floor(self, override):
        # Default wall thickness 0.15: width/depth must exceed 0.3
        with pytest.raises(ValidationError):
            RoomConfig.from_dict(override)

    def test_narrow_room_still_valid(self):
        cfg = RoomConfig.from_dict({'width': 0.31})
        assert cfg.width == pytest.approx(0.31)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            RoomConfig.from_dict({'doors': []})

    def test_oversized_window_is_not_a_config_error(self):
        cfg = RoomConfig.from_dict({'window_south': {'width': 50.0, 'sill_height': -3.0}})
        assert cfg.window_south.width == 50.0

    def test_material_by_name(self):
        cfg = RoomConfig.from_dict({'wall_material': 'glass'})
        assert cfg.wall_material is SURFACE_MATERIALS['glass']

    def test_material_passed_through(self):
        marker = object()
        cfg = RoomConfig.from_dict({'floor_material': marker})
        assert cfg.floor_material is marker
        assert cfg.merged({'width': 3.0}).floor_material is marker


class TestLoadRoomConfig:
    def test_room_section(self, tmp_path):
        path = tmp_path / "room.yaml"
        path.write_text(
            "room:\n"
            "  depth: 5.5\n"
            "  window_east:\n"
            "    sill_height: 1.0\n",
            encoding='utf-8',
        )
        cfg = load_room_config(str(path))
        assert cfg.depth == 5.5
        assert cfg.window_east.sill_height == 1.0
        assert cfg.window_east.width == 2.4

    def test_plain_document(self, tmp_path):
        path = tmp_path / "room.yaml"
        path.write_text("width: 3.2\nglass_material: wall\n", encoding='utf-8')
        cfg = load_room_config(str(path))
        assert cfg.width == 3.2
        assert cfg.glass_material is SURFACE_MATERIALS['wall']

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "room.yaml"
        path.write_text("", encoding='utf-8')
        assert load_room_config(str(path)) == RoomConfig()


class TestMaterials:
    def test_lookup(self):
        glass = get_material('glass')
        assert glass.transparent
        assert glass.opacity == pytest.approx(0.28)

    def test_unknown_name(self):
        assert get_material('marble') is DEFAULT_MATERIAL

    def test_instance_returned_as_is(self):
        mat = SurfaceMaterial(name='brick', color=(0.6, 0.3, 0.2))
        assert get_material(mat) is mat

    def test_rgba(self):
        assert SURFACE_MATERIALS['ceiling'].rgba() == (242, 242, 242, 255)
        assert SURFACE_MATERIALS['glass'].rgba() == (153, 187, 204, 71)
