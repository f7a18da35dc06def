"""Splits a wall around a single rectangular window.

The wall is never cut. It is rebuilt as up to four solid boxes (below, above,
left of and right of the opening) and a thin glass pane, so the aperture is
simply the area no box covers.
"""

import logging
from typing import Any, List

from .geometry import box_dims, box_pos
from .schema import SegmentRole, Segment, WallAxis, WallGeometry, WallSpec, WindowSpec

console_logger = logging.getLogger(__name__)

OMISSION_EPSILON = 0.001
EDGE_MARGIN = 0.2      # solid wall kept beside/over an oversized window
CEILING_GAP = 0.05     # window top never reaches the wall top
PANE_THICKNESS = 0.02


def clamp_window(window: WindowSpec, length: float, height: float) -> WindowSpec:
    """
    Fits a window into a length x height wall face.
    Oversized or misplaced windows are shrunk/moved, never rejected.
    Idempotent: clamping a clamped window returns an equal window.
    """
    width = max(0.0, min(window.width, length - EDGE_MARGIN))
    win_h = max(0.0, min(window.height, height - EDGE_MARGIN))
    sill = max(0.0, min(window.sill_height, height - win_h - CEILING_GAP))

    # Keep the aperture on the wall
    limit = max(0.0, (length - width) / 2)
    offset = max(-limit, min(window.along_offset, limit))

    clamped = WindowSpec(width=width, height=win_h, sill_height=sill, along_offset=offset)
    if clamped != window:
        console_logger.info(
            f"Clamped window on {length:.3f}x{height:.3f} wall: "
            f"{window.model_dump()} -> {clamped.model_dump()}"
        )
    return clamped


class WindowedWallBuilder:
    def __init__(self, wall_material: Any = None, glass_material: Any = None):
        self.wall_material = wall_material
        self.glass_material = glass_material

    def build(self, spec: WallSpec) -> WallGeometry:
        """
        Returns the segments and pane of one wall, positioned relative to the wall center.

        Args:
            spec: Wall dimensions, axis and window. A wall without a window is
                  treated as a zero-size opening, so it yields a single upper box
                  filling the face and a degenerate pane.
        """
        axis = spec.axis
        L, H, T = spec.length, spec.height, spec.thickness
        window = spec.window or WindowSpec(width=0.0, height=0.0, sill_height=0.0)
        win = clamp_window(window, L, H)

        y_bottom = -H / 2
        y_top = H / 2
        y_win_bottom = y_bottom + win.sill_height
        y_win_top = y_win_bottom + win.height

        half_l = L / 2
        win_left = win.along_offset - win.width / 2
        win_right = win.along_offset + win.width / 2

        lower_h = y_win_bottom - y_bottom
        upper_h = y_top - y_win_top
        left_w = win_left + half_l
        right_w = half_l - win_right

        segments: List[Segment] = []

        # Below the window, full wall length
        self._emit(segments, SegmentRole.LOWER, lower_h,
                   box_dims(L, lower_h, T, axis),
                   box_pos(0.0, y_bottom + lower_h / 2, 0.0, axis))

        # Above the window, full wall length
        self._emit(segments, SegmentRole.UPPER, upper_h,
                   box_dims(L, upper_h, T, axis),
                   box_pos(0.0, y_win_top + upper_h / 2, 0.0, axis))

        # Beside the window, window height only
        y_mid = y_win_bottom + win.height / 2
        if win.height > OMISSION_EPSILON:
            self._emit(segments, SegmentRole.LEFT, left_w,
                       box_dims(left_w, win.height, T, axis),
                       box_pos(-half_l + left_w / 2, y_mid, 0.0, axis))
            self._emit(segments, SegmentRole.RIGHT, right_w,
                       box_dims(right_w, win.height, T, axis),
                       box_pos(half_l - right_w / 2, y_mid, 0.0, axis))

        # Glass sits against the outward face
        normal_along_thickness = spec.outward_normal[2] if axis == WallAxis.ALONG_X else spec.outward_normal[0]
        across = normal_along_thickness * (T / 2 - PANE_THICKNESS / 2)
        pane = Segment(
            role=SegmentRole.PANE,
            dims=box_dims(win.width, win.height, PANE_THICKNESS, axis),
            pos=box_pos(win.along_offset, y_mid, across, axis),
            material=self.glass_material,
            cast_shadow=False,
        )

        return WallGeometry(spec=spec, window=win, segments=segments, pane=pane)

    def _emit(self, segments: List[Segment], role: SegmentRole, extent: float,
              dims: List[float], pos: List[float]):
        if extent <= OMISSION_EPSILON:
            console_logger.debug(f"Omitting {role.value} segment, extent {extent:.6f}")
            return
        segments.append(Segment(role=role, dims=dims, pos=pos, material=self.wall_material))


def build_windowed_wall(spec: WallSpec, wall_material: Any = None,
                        glass_material: Any = None) -> WallGeometry:
    return WindowedWallBuilder(wall_material, glass_material).build(spec)
