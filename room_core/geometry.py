from typing import List, Tuple

from shapely.geometry import box
from shapely.ops import unary_union

from .schema import Segment, WallAxis

Rect = Tuple[float, float, float, float]  # (along_min, y_min, along_max, y_max)


def along_extent(dims: List[float], axis: WallAxis) -> float:
    return dims[0] if axis == WallAxis.ALONG_X else dims[2]


def along_position(pos: List[float], axis: WallAxis) -> float:
    return pos[0] if axis == WallAxis.ALONG_X else pos[2]


def box_dims(along: float, height: float, thickness: float, axis: WallAxis) -> List[float]:
    """Maps (along, height, thickness) onto box [sx, sy, sz] for a wall axis."""
    if axis == WallAxis.ALONG_X:
        return [along, height, thickness]
    return [thickness, height, along]


def box_pos(along: float, y: float, across: float, axis: WallAxis) -> List[float]:
    if axis == WallAxis.ALONG_X:
        return [along, y, across]
    return [across, y, along]


class GeometryEngine:
    """Projected wall-face rectangles, backed by shapely."""

    @staticmethod
    def face_rect(segment: Segment, axis: WallAxis) -> Rect:
        a = along_position(segment.pos, axis)
        w = along_extent(segment.dims, axis)
        y = segment.pos[1]
        h = segment.dims[1]
        return (a - w / 2, y - h / 2, a + w / 2, y + h / 2)

    @staticmethod
    def overlap_area(r1: Rect, r2: Rect) -> float:
        return box(*r1).intersection(box(*r2)).area

    @staticmethod
    def union_area(rects: List[Rect]) -> float:
        if not rects:
            return 0.0
        return unary_union([box(*r) for r in rects]).area

    @staticmethod
    def contains(outer: Rect, inner: Rect, tol: float = 1e-9) -> bool:
        return (inner[0] >= outer[0] - tol and inner[1] >= outer[1] - tol and
                inner[2] <= outer[2] + tol and inner[3] <= outer[3] + tol)
