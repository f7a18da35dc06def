import logging

import trimesh

from .materials import SurfaceMaterial, get_material
from .schema import Room, Segment

console_logger = logging.getLogger(__name__)


class SceneExporter:
    """
    Renders a Room tree with trimesh (Y-Up system).
    Each wall becomes its own node so segment transforms stay relative to the wall center.
    """

    @staticmethod
    def make_box(primitive: Segment) -> trimesh.Trimesh:
        mesh = trimesh.creation.box(extents=primitive.dims)
        material = primitive.material
        if isinstance(material, (SurfaceMaterial, str)):
            mesh.visual.face_colors = list(get_material(material).rgba())
        return mesh

    @staticmethod
    def to_scene(room: Room) -> trimesh.Scene:
        scene = trimesh.Scene()

        for name, prim in (('floor', room.floor), ('ceiling', room.ceiling)):
            scene.add_geometry(SceneExporter.make_box(prim), node_name=name, geom_name=name,
                               transform=trimesh.transformations.translation_matrix(prim.pos))

        for wall in room.walls:
            T_wall = trimesh.transformations.translation_matrix(wall.position)
            scene.graph.update(frame_to=wall.name, frame_from=scene.graph.base_frame, matrix=T_wall)

            for prim in wall.primitives:
                node = f"{wall.name}_{prim.role.value}"
                T_local = trimesh.transformations.translation_matrix(prim.pos)
                scene.add_geometry(SceneExporter.make_box(prim), node_name=node, geom_name=node,
                                   parent_node_name=wall.name, transform=T_local)

        return scene

    @staticmethod
    def export(room: Room, output_path: str) -> bool:
        """Writes the room to disk; format follows the file extension (glb, obj, ...)."""
        scene = SceneExporter.to_scene(room)
        scene.export(output_path)
        console_logger.info(f"Exported room with {len(scene.geometry)} primitives to {output_path}")
        return True
