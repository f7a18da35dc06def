from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, Field


class WallAxis(str, Enum):
    """Long-dimension axis of a wall."""
    ALONG_X = "x"  # east-west walls (north, south)
    ALONG_Z = "z"  # north-south walls (east, west)


class SegmentRole(str, Enum):
    FLOOR = "floor"
    CEILING = "ceiling"
    SOLID = "solid"  # wall without an opening
    LOWER = "lower"
    UPPER = "upper"
    LEFT = "left"
    RIGHT = "right"
    PANE = "pane"


STRUCTURAL_ROLES = (SegmentRole.LOWER, SegmentRole.UPPER, SegmentRole.LEFT, SegmentRole.RIGHT)


class WindowSpec(BaseModel):
    """
    A single rectangular opening.
    along_offset is the signed distance of the window center from the wall center,
    measured along the wall's long axis.
    """
    width: float
    height: float
    sill_height: float
    along_offset: float = 0.0


class WallSpec(BaseModel):
    axis: WallAxis
    length: float
    height: float
    thickness: float
    center: List[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0])  # [x, y, z]
    outward_normal: List[float]  # axis aligned unit vector
    window: Optional[WindowSpec] = None


class Segment(BaseModel):
    """
    One box primitive of the room tree.
    """
    role: SegmentRole
    dims: List[float]  # [sx, sy, sz]
    pos: List[float]   # [x, y, z] relative to parent node origin
    material: Any = None  # reference, passed through untouched
    cast_shadow: bool = True
    receive_shadow: bool = True


class WallGeometry(BaseModel):
    """Output of the windowed wall builder: structural pieces plus the glass."""
    spec: WallSpec
    window: WindowSpec  # clamped window actually cut
    segments: List[Segment]
    pane: Segment

    @property
    def aperture(self) -> Tuple[float, float, float, float]:
        """Window rectangle on the wall face as (along_min, y_min, along_max, y_max)."""
        y_min = -self.spec.height / 2 + self.window.sill_height
        left = self.window.along_offset - self.window.width / 2
        return (left, y_min, left + self.window.width, y_min + self.window.height)

    def roles(self) -> List[SegmentRole]:
        return [s.role for s in self.segments]

    def get(self, role: SegmentRole) -> Optional[Segment]:
        for s in self.segments:
            if s.role == role:
                return s
        return None


class WallNode(BaseModel):
    """A wall in the room tree. position is the wall center, children are local to it."""
    name: str
    position: List[float]
    axis: WallAxis
    primitives: List[Segment]


class Room(BaseModel):
    """
    Root of the ownership tree handed to the renderer.
    """
    floor: Segment
    ceiling: Segment
    walls: List[WallNode]

    def wall(self, name: str) -> Optional[WallNode]:
        for w in self.walls:
            if w.name == name:
                return w
        return None

    def world_primitives(self) -> Iterator[Tuple[np.ndarray, Segment]]:
        """Yields (world position, primitive) in construction order."""
        yield np.asarray(self.floor.pos, dtype=float), self.floor
        yield np.asarray(self.ceiling.pos, dtype=float), self.ceiling
        for node in self.walls:
            origin = np.asarray(node.position, dtype=float)
            for prim in node.primitives:
                yield origin + np.asarray(prim.pos, dtype=float), prim
