import logging
from typing import Any, Dict, List, Optional, Tuple

from .config import RoomConfig
from .schema import Room, Segment, SegmentRole, WallAxis, WallGeometry, WallNode, WallSpec
from .wall_solver import WindowedWallBuilder

console_logger = logging.getLogger(__name__)


class RoomAssembler:
    """
    Builds the room shell. Axes: +X east, +Z south, +Y up, floor top at y=0.
    West and north walls are single boxes, east and south carry a window each.
    """

    def __init__(self, config: Optional[RoomConfig] = None):
        self.config = config or RoomConfig()
        self.wall_builder = WindowedWallBuilder(self.config.wall_material, self.config.glass_material)
        self.wall_geometries: Dict[str, WallGeometry] = {}

    def build(self) -> Room:
        cfg = self.config
        W, D, H, T = cfg.width, cfg.depth, cfg.height, cfg.wall_thickness

        floor = Segment(
            role=SegmentRole.FLOOR,
            dims=[W - 2 * T, cfg.floor_thickness, D - 2 * T],  # inset, not under the walls
            pos=[0.0, -cfg.floor_thickness / 2, 0.0],
            material=cfg.floor_material,
        )
        ceiling = Segment(
            role=SegmentRole.CEILING,
            dims=[W, cfg.ceiling_thickness, D],
            pos=[0.0, H + cfg.ceiling_thickness / 2, 0.0],
            material=cfg.ceiling_material,
        )

        wall_y = H / 2
        walls: List[WallNode] = [
            self._plain_wall('west', WallAxis.ALONG_Z, [T, H, D], [-W / 2 + T / 2, wall_y, 0.0]),
            self._plain_wall('north', WallAxis.ALONG_X, [W, H, T], [0.0, wall_y, -D / 2 + T / 2]),
            self._windowed_wall('east', WallSpec(
                axis=WallAxis.ALONG_Z, length=D, height=H, thickness=T,
                center=[W / 2 - T / 2, wall_y, 0.0],
                outward_normal=[1.0, 0.0, 0.0],
                window=cfg.window_east,
            )),
            self._windowed_wall('south', WallSpec(
                axis=WallAxis.ALONG_X, length=W, height=H, thickness=T,
                center=[0.0, wall_y, D / 2 - T / 2],
                outward_normal=[0.0, 0.0, 1.0],
                window=cfg.window_south,
            )),
        ]

        room = Room(floor=floor, ceiling=ceiling, walls=walls)
        console_logger.info(
            f"Built room {W}x{D}x{H}: "
            + ", ".join(f"{w.name}={len(w.primitives)}" for w in walls)
        )
        return room

    def _plain_wall(self, name: str, axis: WallAxis, dims: List[float], center: List[float]) -> WallNode:
        solid = Segment(role=SegmentRole.SOLID, dims=dims, pos=[0.0, 0.0, 0.0],
                        material=self.config.wall_material)
        return WallNode(name=name, position=center, axis=axis, primitives=[solid])

    def _windowed_wall(self, name: str, spec: WallSpec) -> WallNode:
        geometry = self.wall_builder.build(spec)
        self.wall_geometries[name] = geometry
        return WallNode(name=name, position=list(spec.center), axis=spec.axis,
                        primitives=geometry.segments + [geometry.pane])


def build_room(config: Optional[RoomConfig] = None, **overrides: Any) -> Room:
    """
    Entry point. Keyword overrides are merged over config (or the defaults), e.g.
    build_room(width=5, window_east={'width': 1.0}).
    """
    config = config or RoomConfig()
    if overrides:
        config = config.merged(overrides)
    return RoomAssembler(config).build()


def build_room_with_walls(config: Optional[RoomConfig] = None) -> Tuple[Room, Dict[str, WallGeometry]]:
    """Like build_room but also returns the windowed wall geometries, keyed by wall name."""
    assembler = RoomAssembler(config)
    room = assembler.build()
    return room, assembler.wall_geometries
