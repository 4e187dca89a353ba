"""
h3vertex - Vertex numbering and rotation resolution for H3 grid cells.
"""

from h3vertex.constants import Direction, INVALID_VERTEX_NUM
from h3vertex.grid import CellGrid, CoordIJK, FaceIJK, TableGrid
from h3vertex.vertex import (
    num_cell_vertexes,
    vertex_num_for_direction,
    vertex_nums_for_cell,
    vertex_rotations,
)

__version__ = "0.1.0"
__all__ = [
    "Direction",
    "INVALID_VERTEX_NUM",
    "CellGrid",
    "CoordIJK",
    "FaceIJK",
    "TableGrid",
    "num_cell_vertexes",
    "vertex_num_for_direction",
    "vertex_nums_for_cell",
    "vertex_rotations",
]
