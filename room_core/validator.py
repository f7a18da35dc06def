from typing import Dict, List, Literal

from pydantic import BaseModel

from .geometry import GeometryEngine
from .schema import WallGeometry

TILING_TOLERANCE = 1e-6


class ValidationIssue(BaseModel):
    rule_name: str
    severity: Literal["critical", "warning", "info"]
    message: str
    affected_items: List[str]


def validate_wall(geometry: WallGeometry, name: str = "wall") -> List[ValidationIssue]:
    """
    Checks a built wall: segments plus aperture cover the face exactly once,
    and the pane stays inside the aperture.
    """
    report = []
    spec = geometry.spec
    axis = spec.axis
    rects = [(s.role.value, GeometryEngine.face_rect(s, axis)) for s in geometry.segments]
    aperture = geometry.aperture

    # Clamping is silent in the builder, surface it here
    if spec.window is not None and geometry.window != spec.window:
        report.append(ValidationIssue(
            rule_name="window_clamped",
            severity="info",
            message=f"Window adjusted to fit {name}: {spec.window.model_dump()} -> {geometry.window.model_dump()}",
            affected_items=[name],
        ))

    # Pairwise overlap, aperture included
    keyed = rects + [("aperture", aperture)]
    for i in range(len(keyed)):
        for j in range(i + 1, len(keyed)):
            area = GeometryEngine.overlap_area(keyed[i][1], keyed[j][1])
            if area > TILING_TOLERANCE:
                report.append(ValidationIssue(
                    rule_name="segment_overlap",
                    severity="critical",
                    message=f"{keyed[i][0]} and {keyed[j][0]} overlap by {area:.6f}",
                    affected_items=[name, keyed[i][0], keyed[j][0]],
                ))

    face_area = spec.length * spec.height
    covered = GeometryEngine.union_area([r for _, r in keyed])
    if abs(covered - face_area) > TILING_TOLERANCE:
        # Gaps below the omission threshold are expected, anything else is not
        report.append(ValidationIssue(
            rule_name="tiling_incomplete",
            severity="warning" if abs(covered - face_area) < 0.001 * max(spec.length, spec.height) else "critical",
            message=f"Segments + aperture cover {covered:.6f}, face is {face_area:.6f}",
            affected_items=[name],
        ))

    pane_rect = GeometryEngine.face_rect(geometry.pane, axis)
    if not GeometryEngine.contains(aperture, pane_rect):
        report.append(ValidationIssue(
            rule_name="pane_outside_aperture",
            severity="critical",
            message=f"Pane {pane_rect} leaves aperture {aperture}",
            affected_items=[name, "pane"],
        ))

    return report


def validate_room(wall_geometries: Dict[str, WallGeometry]) -> List[ValidationIssue]:
    report = []
    for name, geometry in wall_geometries.items():
        report.extend(validate_wall(geometry, name))
    return report
