import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from room_core.assembler import build_room
from room_core.exporter import SceneExporter
from room_core.materials import SURFACE_MATERIALS
from room_core.schema import Segment, SegmentRole


class TestSceneExporter:
    def test_one_geometry_per_primitive(self):
        scene = SceneExporter.to_scene(build_room())
        assert len(scene.geometry) == 14
        assert 'east_pane' in scene.geometry
        assert 'west_solid' in scene.geometry

    def test_scene_bounds_match_room(self):
        scene = SceneExporter.to_scene(build_room())
        expected = np.array([[-2.0, -0.12, -3.0], [2.0, 3.08, 3.0]])
        assert np.allclose(scene.bounds, expected, atol=1e-6)

    def test_wall_transform_applied(self):
        scene = SceneExporter.to_scene(build_room())
        transform, _ = scene.graph['east_pane']
        assert transform[:3, 3] == pytest.approx([1.99, 1.5, 0.0])

    def test_glass_color(self):
        prim = Segment(role=SegmentRole.PANE, dims=[1.0, 1.0, 0.02], pos=[0.0, 0.0, 0.0],
                       material=SURFACE_MATERIALS['glass'])
        mesh = SceneExporter.make_box(prim)
        assert list(mesh.visual.face_colors[0]) == [153, 187, 204, 71]

    def test_opaque_material_left_alone(self):
        prim = Segment(role=SegmentRole.SOLID, dims=[1.0, 1.0, 1.0], pos=[0.0, 0.0, 0.0],
                       material=object())
        mesh = SceneExporter.make_box(prim)
        assert mesh.extents == pytest.approx([1.0, 1.0, 1.0])

    def test_export_glb(self, tmp_path):
        path = tmp_path / "room.glb"
        assert SceneExporter.export(build_room(), str(path))
        assert path.exists()
        assert path.stat().st_size > 0
