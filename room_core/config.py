import copy
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .materials import SURFACE_MATERIALS, get_material
from .schema import WindowSpec

MATERIAL_FIELDS = ('wall_material', 'floor_material', 'ceiling_material', 'glass_material')


class RoomConfig(BaseModel):
    """
    Room dimensions, the two windows and surface materials.
    Every field has a default; use from_dict() to override only part of it.
    """
    model_config = ConfigDict(extra="forbid")

    width: float = Field(4.0, gt=0)    # east-west
    depth: float = Field(6.0, gt=0)    # north-south
    height: float = Field(3.0, gt=0)
    wall_thickness: float = Field(0.15, gt=0)
    floor_thickness: float = Field(0.12, gt=0)
    ceiling_thickness: float = Field(0.08, gt=0)

    window_east: WindowSpec = Field(
        default_factory=lambda: WindowSpec(width=2.4, height=1.2, sill_height=0.9, along_offset=0.0))
    window_south: WindowSpec = Field(
        default_factory=lambda: WindowSpec(width=3.0, height=1.4, sill_height=0.7, along_offset=0.0))

    # Opaque to the builders, only attached to primitives
    wall_material: Any = Field(default_factory=lambda: SURFACE_MATERIALS['wall'])
    floor_material: Any = Field(default_factory=lambda: SURFACE_MATERIALS['floor'])
    ceiling_material: Any = Field(default_factory=lambda: SURFACE_MATERIALS['ceiling'])
    glass_material: Any = Field(default_factory=lambda: SURFACE_MATERIALS['glass'])

    @field_validator(*MATERIAL_FIELDS, mode='before')
    @classmethod
    def _resolve_material_name(cls, value: Any) -> Any:
        # Names resolve to the built-in materials, anything else passes through
        if isinstance(value, str):
            return get_material(value)
        return value

    @model_validator(mode='after')
    def _floor_fits_between_walls(self) -> 'RoomConfig':
        # Floor is inset by one wall thickness on each side
        for name in ('width', 'depth'):
            if getattr(self, name) <= 2 * self.wall_thickness:
                raise ValueError(
                    f"{name} {getattr(self, name)} must exceed twice the wall thickness {self.wall_thickness}")
        return self

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]] = None) -> 'RoomConfig':
        """Merges a partial (possibly nested) mapping over the defaults."""
        return cls().merged(data)

    def merged(self, overrides: Optional[Dict[str, Any]] = None) -> 'RoomConfig':
        """
        Returns a new config with overrides merged over this one.
        Nested windows merge per field: {'window_east': {'width': 1.0}} keeps its height/sill.
        """
        base = self.model_dump(exclude=set(MATERIAL_FIELDS))
        # Keep the material objects themselves, not their dumps
        for key in MATERIAL_FIELDS:
            base[key] = getattr(self, key)
        return type(self)(**_deep_merge(base, overrides or {}))


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = copy.copy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_room_config(file_path: str) -> RoomConfig:
    """Reads a YAML file; the room may sit under a top-level 'room' key."""
    with open(file_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data and 'room' in data:
        data = data['room']
    return RoomConfig.from_dict(data or {})
