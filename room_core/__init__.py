"""
Procedural room shell: floor, ceiling and four walls, two of them with a window.

Windows are not cut out of a mesh; each windowed wall is rebuilt from up to
four solid boxes around the opening plus a thin glass pane.
"""

from .schema import (
    WallAxis,
    SegmentRole,
    WindowSpec,
    WallSpec,
    Segment,
    WallGeometry,
    WallNode,
    Room,
)
from .materials import SurfaceMaterial, SURFACE_MATERIALS, get_material
from .config import RoomConfig, load_room_config
from .wall_solver import (
    WindowedWallBuilder,
    build_windowed_wall,
    clamp_window,
    OMISSION_EPSILON,
    PANE_THICKNESS,
)
from .assembler import RoomAssembler, build_room, build_room_with_walls
from .validator import ValidationIssue, validate_wall, validate_room
from .exporter import SceneExporter

__all__ = [
    'WallAxis',
    'SegmentRole',
    'WindowSpec',
    'WallSpec',
    'Segment',
    'WallGeometry',
    'WallNode',
    'Room',
    'SurfaceMaterial',
    'SURFACE_MATERIALS',
    'get_material',
    'RoomConfig',
    'load_room_config',
    'WindowedWallBuilder',
    'build_windowed_wall',
    'clamp_window',
    'OMISSION_EPSILON',
    'PANE_THICKNESS',
    'RoomAssembler',
    'build_room',
    'build_room_with_walls',
    'ValidationIssue',
    'validate_wall',
    'validate_room',
    'SceneExporter',
]
