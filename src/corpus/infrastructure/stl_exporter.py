"""STL export functionality using numpy-stl."""

from pathlib import Path

import numpy as np
from stl import mesh

from corpus.application.dtos import CorpusLayout
from corpus.domain import Placement
from corpus.domain.units import MM_PER_SCENE_UNIT

# Corner order: 0-3 on the bottom face, 4-7 above them.
# Front is +Z (towards the viewer).
_BOX_TRIANGLES: list[tuple[int, int, int]] = [
    # Bottom face
    (0, 2, 1),
    (0, 3, 2),
    # Top face
    (4, 5, 6),
    (4, 6, 7),
    # Front face
    (0, 1, 5),
    (0, 5, 4),
    # Back face
    (2, 3, 7),
    (2, 7, 6),
    # Left face
    (0, 4, 7),
    (0, 7, 3),
    # Right face
    (1, 2, 6),
    (1, 6, 5),
]


class StlMeshBuilder:
    """Builds STL meshes from panel placements.

    Placements are already Y-up (X width, Y height, Z depth), which is what
    most STL viewers expect, so no axis swap is applied. Coordinates are
    scaled from scene units to millimetres by default.
    """

    def __init__(self, scale: float = MM_PER_SCENE_UNIT) -> None:
        self.scale = scale

    def box_vertices(self, placement: Placement) -> np.ndarray:
        """Return the 8 corner vertices of a placement box."""
        low, high = placement.min_corner, placement.max_corner
        x0, y0, z0 = low.x, low.y, low.z
        x1, y1, z1 = high.x, high.y, high.z
        corners = [
            (x0, y0, z1),  # 0: front-bottom-left
            (x1, y0, z1),  # 1: front-bottom-right
            (x1, y0, z0),  # 2: back-bottom-right
            (x0, y0, z0),  # 3: back-bottom-left
            (x0, y1, z1),  # 4: front-top-left
            (x1, y1, z1),  # 5: front-top-right
            (x1, y1, z0),  # 6: back-top-right
            (x0, y1, z0),  # 7: back-top-left
        ]
        return np.array(corners) * self.scale

    def build_box_mesh(self, placement: Placement) -> mesh.Mesh:
        """Create a 12-triangle mesh for a single placement."""
        vertices = self.box_vertices(placement)
        box_mesh = mesh.Mesh(np.zeros(len(_BOX_TRIANGLES), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(_BOX_TRIANGLES):
            box_mesh.vectors[i] = [vertices[v0], vertices[v1], vertices[v2]]
        return box_mesh

    def combine_meshes(self, meshes: list[mesh.Mesh]) -> mesh.Mesh:
        """Combine multiple meshes into a single mesh."""
        if not meshes:
            return mesh.Mesh(np.zeros(0, dtype=mesh.Mesh.dtype))

        total_faces = sum(m.vectors.shape[0] for m in meshes)
        combined = mesh.Mesh(np.zeros(total_faces, dtype=mesh.Mesh.dtype))

        offset = 0
        for m in meshes:
            num_faces = m.vectors.shape[0]
            combined.vectors[offset : offset + num_faces] = m.vectors
            offset += num_faces

        return combined


class StlExporter:
    """Exports corpus layouts to STL files, one box per panel."""

    def __init__(self, mesh_builder: StlMeshBuilder | None = None) -> None:
        self.mesh_builder = mesh_builder or StlMeshBuilder()

    def export(self, layout: CorpusLayout) -> mesh.Mesh:
        """Build the combined mesh for a layout."""
        meshes = [
            self.mesh_builder.build_box_mesh(placement)
            for placement in layout.placements
        ]
        return self.mesh_builder.combine_meshes(meshes)

    def export_to_file(self, layout: CorpusLayout, filepath: Path | str) -> None:
        """Export a layout to an STL file."""
        combined_mesh = self.export(layout)
        combined_mesh.save(str(filepath))
