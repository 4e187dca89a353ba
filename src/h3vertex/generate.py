"""
Derivation of the pentagon direction-to-face table from a grid.
"""

import logging
from typing import List, Tuple

from h3vertex.constants import Direction, NUM_BASE_CELLS
from h3vertex.grid import CellGrid
from h3vertex.tables import PENTAGON_DIRECTION_FACES, PentagonDirectionFaces
from h3vertex.utils import h3_calc

logger = logging.getLogger(__name__)

# Directions of a pentagon in table order
TABLE_DIRECTIONS = (Direction.J, Direction.JK, Direction.I, Direction.IK, Direction.IJ)


def derive_pentagon_direction_faces(
    grid: CellGrid, resolution: int = 1
) -> Tuple[PentagonDirectionFaces, ...]:
    """
    Rebuild the pentagon direction-to-face table.

    For each pentagon base cell, the descendant at `resolution` lying in
    each direction from the pentagon center is projected, and the face it
    lands on is recorded for that direction.

    Args:
        grid: Face projection collaborator
        resolution: Resolution of the probe cells (1-15)

    Returns:
        One entry per pentagon base cell, ordered by base cell
    """
    if resolution < 1:
        raise ValueError(f"Probe resolution must be at least 1, got {resolution}")

    entries = []
    for base_cell in range(NUM_BASE_CELLS):
        if not grid.is_base_cell_pentagon(base_cell):
            continue

        faces = []
        for direction in TABLE_DIRECTIONS:
            # First digit picks the direction, deeper digits stay centered
            probe = h3_calc.build_cell(resolution, base_cell, [direction])
            faces.append(grid.face_and_ijk(probe).face)

        entry = PentagonDirectionFaces(base_cell, tuple(faces))
        logger.debug(f"  Base cell {base_cell}: faces {entry.faces}")
        entries.append(entry)

    return tuple(entries)


def check_pentagon_direction_faces(grid: CellGrid, resolution: int = 1) -> List[int]:
    """
    Compare the static pentagon table with one derived from a grid.

    Returns:
        Base cells whose faces differ (empty when the table matches)
    """
    logger.info(f"Deriving pentagon direction faces at resolution {resolution}...")
    derived = {e.base_cell: e.faces for e in derive_pentagon_direction_faces(grid, resolution)}

    mismatches = []
    for entry in PENTAGON_DIRECTION_FACES:
        if derived.get(entry.base_cell) != entry.faces:
            logger.warning(f"  Base cell {entry.base_cell}: table {entry.faces}, "
                           f"derived {derived.get(entry.base_cell)}")
            mismatches.append(entry.base_cell)

    logger.info(f"  {len(PENTAGON_DIRECTION_FACES) - len(mismatches)} of "
                f"{len(PENTAGON_DIRECTION_FACES)} pentagons match")
    return mismatches
