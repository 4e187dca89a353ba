"""
Static lookup tables for vertex numbering.
"""

from typing import NamedTuple, Tuple

from h3vertex.constants import Direction, INVALID_VERTEX_NUM, NUM_PENTAGONS

# Offset from a direction digit to its index in PentagonDirectionFaces.faces
DIRECTION_INDEX_OFFSET = 2


class PentagonDirectionFaces(NamedTuple):
    """Faces touched by a pentagon base cell, in directional order from J."""
    base_cell: int
    faces: Tuple[int, int, int, int, int]

    def face_for(self, direction: Direction) -> int:
        return self.faces[direction - DIRECTION_INDEX_OFFSET]


# Faces are ordered J, JK, I, IK, IJ.
# Verify with `h3vertex check-table` against a complete grid table.
PENTAGON_DIRECTION_FACES: Tuple[PentagonDirectionFaces, ...] = (
    PentagonDirectionFaces(4, (4, 0, 2, 1, 3)),
    PentagonDirectionFaces(14, (6, 11, 2, 7, 1)),
    PentagonDirectionFaces(24, (5, 10, 1, 6, 0)),
    PentagonDirectionFaces(38, (7, 12, 3, 8, 2)),
    PentagonDirectionFaces(49, (9, 14, 0, 5, 4)),
    PentagonDirectionFaces(58, (8, 13, 4, 9, 3)),
    PentagonDirectionFaces(63, (11, 6, 15, 10, 16)),
    PentagonDirectionFaces(72, (12, 7, 16, 11, 17)),
    PentagonDirectionFaces(83, (10, 5, 19, 14, 15)),
    PentagonDirectionFaces(97, (13, 8, 17, 12, 18)),
    PentagonDirectionFaces(107, (14, 9, 18, 13, 19)),
    PentagonDirectionFaces(117, (15, 19, 17, 18, 16)),
)
assert len(PENTAGON_DIRECTION_FACES) == NUM_PENTAGONS

# Hexagon direction to vertex number (same face). CENTER has no vertex.
DIRECTION_TO_VERTEX_NUM_HEX: Tuple[int, ...] = (
    INVALID_VERTEX_NUM, 3, 1, 2, 5, 4, 0,
)

# Pentagon direction to vertex number (same face). CENTER and the deleted
# K axis have no vertex.
DIRECTION_TO_VERTEX_NUM_PENT: Tuple[int, ...] = (
    INVALID_VERTEX_NUM, INVALID_VERTEX_NUM, 1, 2, 4, 3, 0,
)


def pentagon_direction_faces(base_cell: int) -> PentagonDirectionFaces:
    """
    Look up the direction-to-face entry for a pentagon base cell.

    Raises:
        ValueError: If the base cell is not a pentagon
    """
    for entry in PENTAGON_DIRECTION_FACES:
        if entry.base_cell == base_cell:
            return entry
    raise ValueError(f"Base cell {base_cell} is not a pentagon")
