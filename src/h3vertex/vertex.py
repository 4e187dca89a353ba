"""
Vertex numbering for H3 cells.

Vertex numbers are the topological corners of a cell in a fixed order:
0-5 for hexagons, 0-4 for pentagons. The neighbor in a direction sits on
the edge running from the vertex returned by vertex_num_for_direction to
the next vertex number.
"""

from typing import Dict

from h3vertex.constants import (
    Direction,
    HEX_DIRECTION_CYCLE,
    INVALID_VERTEX_NUM,
    NUM_HEX_VERTS,
    NUM_PENT_VERTS,
    PENT_DIRECTION_CYCLE,
)
from h3vertex.grid import CellGrid
from h3vertex.tables import (
    DIRECTION_TO_VERTEX_NUM_HEX,
    DIRECTION_TO_VERTEX_NUM_PENT,
    PENTAGON_DIRECTION_FACES,
)


def vertex_rotations(cell: int, grid: CellGrid) -> int:
    """
    Get the number of CCW rotations of the cell's vertex numbers
    compared to the directional layout of its neighbors.

    Args:
        cell: H3 cell index
        grid: Face projection and base cell metadata

    Returns:
        Number of CCW 60 degree rotations (0-5)
    """
    face = grid.face_and_ijk(cell).face
    base_cell = grid.base_cell(cell)
    leading_digit = grid.leading_non_zero_digit(cell)

    ccw_rot60 = grid.face_rotation_between(base_cell, face)

    if not grid.is_base_cell_pentagon(base_cell):
        return ccw_rot60

    for entry in PENTAGON_DIRECTION_FACES:
        if entry.base_cell == base_cell:
            dir_faces = entry
            break
    ik_face = dir_faces.face_for(Direction.IK)
    jk_face = dir_faces.face_for(Direction.JK)

    # Extra CCW rotation for polar neighbors or IK neighbors
    if face != grid.base_cell_home_face(base_cell) and (
            grid.is_polar_pentagon(base_cell) or face == ik_face):
        ccw_rot60 = (ccw_rot60 + 1) % 6

    # Crossing the deleted K subsequence
    if leading_digit == Direction.JK and face == ik_face:
        # JK to IK: rotate CW
        ccw_rot60 = (ccw_rot60 + 5) % 6
    elif leading_digit == Direction.IK and face == jk_face:
        # IK to JK: rotate CCW
        ccw_rot60 = (ccw_rot60 + 1) % 6

    return ccw_rot60


def vertex_num_for_direction(cell: int, direction: int, grid: CellGrid) -> int:
    """
    Get the first vertex number for a given direction. The neighbor in
    this direction is located between this vertex number and the next
    number in sequence.

    Args:
        cell: H3 cell index
        direction: Direction of the neighbor
        grid: Face projection and base cell metadata

    Returns:
        The vertex number, or INVALID_VERTEX_NUM if the direction is not
        valid for this cell
    """
    if not isinstance(direction, int) or not Direction.K <= direction <= Direction.IJ:
        return INVALID_VERTEX_NUM

    is_pentagon = grid.is_pentagon(cell)
    if is_pentagon and direction == Direction.K:
        return INVALID_VERTEX_NUM

    rotations = vertex_rotations(cell, grid)
    return _rotate_vertex_num(direction, rotations, is_pentagon)


def vertex_nums_for_cell(cell: int, grid: CellGrid) -> Dict[Direction, int]:
    """
    Get the vertex number of every valid neighbor direction of a cell.

    Returns:
        Mapping of direction to vertex number, in vertex order
    """
    is_pentagon = grid.is_pentagon(cell)
    rotations = vertex_rotations(cell, grid)
    cycle = PENT_DIRECTION_CYCLE if is_pentagon else HEX_DIRECTION_CYCLE
    nums = {d: _rotate_vertex_num(d, rotations, is_pentagon) for d in cycle}
    return dict(sorted(nums.items(), key=lambda item: item[1]))


def num_cell_vertexes(cell: int, grid: CellGrid) -> int:
    return NUM_PENT_VERTS if grid.is_pentagon(cell) else NUM_HEX_VERTS


def _rotate_vertex_num(direction: int, rotations: int, is_pentagon: bool) -> int:
    if is_pentagon:
        return (DIRECTION_TO_VERTEX_NUM_PENT[direction] + NUM_PENT_VERTS - rotations) % NUM_PENT_VERTS
    return (DIRECTION_TO_VERTEX_NUM_HEX[direction] + NUM_HEX_VERTS - rotations) % NUM_HEX_VERTS
