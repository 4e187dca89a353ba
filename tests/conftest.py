"""Test configuration and fixtures."""
import pytest
import yaml

from h3vertex.constants import Direction
from h3vertex.grid import FaceIJK, TableGrid
from h3vertex.tables import PENTAGON_DIRECTION_FACES
from h3vertex.utils.h3_calc import build_cell

# Hexagon base cell 0 on face 1; pentagons 4 (polar) on face 0 and 14 on face 2.
# Base cell 4 faces: J=4 JK=0 I=2 IK=1 IJ=3
# Base cell 14 faces: J=6 JK=11 I=2 IK=7 IJ=1
HOME_FACES = {0: 1, 4: 0, 14: 2}

ROTATIONS = {
    (0, 0): 3,
    (0, 2): 1,
    (4, 1): 2,
    (4, 2): 3,
    (4, 4): 5,
    (14, 6): 4,
    (14, 7): 5,
    (14, 11): 1,
}


@pytest.fixture
def make_grid():
    """Build a TableGrid from a cell -> face mapping on top of the default base cell tables."""
    def _make(cells, home_faces=None, rotations=None):
        return TableGrid(
            {cell: fijk if isinstance(fijk, FaceIJK) else FaceIJK(fijk) for cell, fijk in cells.items()},
            HOME_FACES if home_faces is None else home_faces,
            ROTATIONS if rotations is None else rotations,
        )
    return _make


@pytest.fixture
def hex_cell():
    """Resolution 2 hexagon under base cell 0, leading digit J."""
    return build_cell(2, 0, [Direction.J])


@pytest.fixture
def pentagon_cell():
    """Resolution 0 polar pentagon (base cell 4)."""
    return build_cell(0, 4)


@pytest.fixture
def probe_faces():
    """Faces of every resolution 1 pentagon probe cell, consistent with the static table."""
    cells = {}
    for entry in PENTAGON_DIRECTION_FACES:
        for direction in (Direction.J, Direction.JK, Direction.I, Direction.IK, Direction.IJ):
            cells[build_cell(1, entry.base_cell, [direction])] = entry.face_for(direction)
    return cells


@pytest.fixture
def table_file(tmp_path, hex_cell, pentagon_cell):
    """Grid table YAML file covering the hexagon and pentagon fixtures."""
    data = {
        'base_cells': {
            0: {'home_face': 1, 'rotations': {0: 3, 2: 1}},
            4: {'home_face': 0, 'rotations': {1: 2, 2: 3}},
        },
        'cells': {
            format(hex_cell, 'x'): {'face': 0, 'ijk': [1, 0, 2]},
            format(pentagon_cell, 'x'): 0,
        },
    }
    path = tmp_path / "grid.yaml"
    path.write_text(yaml.safe_dump(data))
    return path
