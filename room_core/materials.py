from typing import Dict, Tuple, Union
from pydantic import BaseModel


class SurfaceMaterial(BaseModel):
    """
    Renderer-agnostic surface description.
    The builders only attach references to these, they never copy or mutate them.
    """
    name: str
    color: Tuple[float, float, float]  # RGB, 0-1 float
    roughness: float = 1.0
    opacity: float = 1.0
    transparent: bool = False

    def rgba(self) -> Tuple[int, int, int, int]:
        """Color as 0-255 RGBA, alpha taken from opacity."""
        r, g, b = (int(round(c * 255)) for c in self.color)
        return (r, g, b, int(round(self.opacity * 255)))


def _hex_to_rgb(value: int) -> Tuple[float, float, float]:
    return (((value >> 16) & 0xFF) / 255.0, ((value >> 8) & 0xFF) / 255.0, (value & 0xFF) / 255.0)


# Maps surface name to its default material
SURFACE_MATERIALS: Dict[str, SurfaceMaterial] = {
    # Plaster
    'wall': SurfaceMaterial(name='wall', color=_hex_to_rgb(0xE6DFD3), roughness=0.95),
    # Oak boards
    'floor': SurfaceMaterial(name='floor', color=_hex_to_rgb(0xC8B08A), roughness=0.9),
    'ceiling': SurfaceMaterial(name='ceiling', color=_hex_to_rgb(0xF2F2F2), roughness=1.0),
    # Tinted glass
    'glass': SurfaceMaterial(name='glass', color=_hex_to_rgb(0x99BBCC), roughness=0.15,
                             opacity=0.28, transparent=True),
}

DEFAULT_MATERIAL = SurfaceMaterial(name='default', color=(0.8, 0.8, 0.8))


def get_material(material: Union[str, SurfaceMaterial]) -> SurfaceMaterial:
    if isinstance(material, SurfaceMaterial):
        return material
    return SURFACE_MATERIALS.get(material, DEFAULT_MATERIAL)
