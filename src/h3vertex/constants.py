"""
Shared constants for H3 cell indexes, directions and vertexes.
"""

from enum import IntEnum


class Direction(IntEnum):
    """
    H3 digit values, used both as a neighbor direction and as the
    direction of a cell from its parent.
    """
    CENTER = 0
    K = 1
    J = 2
    JK = 3
    I = 4
    IK = 5
    IJ = 6
    INVALID = 7


NUM_DIGITS = 7
NUM_HEX_VERTS = 6
NUM_PENT_VERTS = 5
INVALID_VERTEX_NUM = -1

NUM_ICOSA_FACES = 20
NUM_BASE_CELLS = 122
NUM_PENTAGONS = 12
MAX_RES = 15

# Directions of a hexagon / pentagon ordered by increasing unrotated vertex number
HEX_DIRECTION_CYCLE = (
    Direction.IJ, Direction.J, Direction.JK, Direction.K, Direction.IK, Direction.I,
)
PENT_DIRECTION_CYCLE = (
    Direction.IJ, Direction.J, Direction.JK, Direction.IK, Direction.I,
)

PENTAGON_BASE_CELLS = frozenset({4, 14, 24, 38, 49, 58, 63, 72, 83, 97, 107, 117})
POLAR_PENTAGON_BASE_CELLS = frozenset({4, 117})

# 64-bit index layout
CELL_MODE = 1
MODE_OFFSET = 59
MODE_MASK = 0xF
RES_OFFSET = 52
RES_MASK = 0xF
BASE_CELL_OFFSET = 45
BASE_CELL_MASK = 0x7F
PER_DIGIT_OFFSET = 3
DIGIT_MASK = 0x7
INDEX_MASK = 0xFFFFFFFFFFFFFFFF
