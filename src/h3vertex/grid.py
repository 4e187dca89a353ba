"""
Grid collaborators: face projection and base cell metadata.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import h3
import yaml

from h3vertex.constants import Direction, NUM_BASE_CELLS, NUM_ICOSA_FACES
from h3vertex.utils import h3_calc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoordIJK:
    """IJK hexagon coordinates on an icosahedron face."""
    i: int = 0
    j: int = 0
    k: int = 0


@dataclass(frozen=True)
class FaceIJK:
    """A face number and the coordinates of a cell on it."""
    face: int
    coord: Optional[CoordIJK] = None


class CellGrid(ABC):
    """
    Base class for the grid collaborators used by the vertex functions.

    Index fields (base cell, digits, shape) are read straight from the
    cell bits. Face projection and base cell orientation are supplied by
    subclasses.
    """

    @abstractmethod
    def face_and_ijk(self, cell: int) -> FaceIJK:
        """Project a cell onto the face holding its center."""

    @abstractmethod
    def base_cell_home_face(self, base_cell: int) -> int:
        """Home face of a base cell."""

    @abstractmethod
    def face_rotation_between(self, base_cell: int, face: int) -> int:
        """CCW 60 degree rotations from a base cell's home face to another face it touches."""

    def base_cell(self, cell: int) -> int:
        return h3_calc.get_base_cell(cell)

    def is_pentagon(self, cell: int) -> bool:
        return h3_calc.is_pentagon(cell)

    def leading_non_zero_digit(self, cell: int) -> Direction:
        return h3_calc.leading_non_zero_digit(cell)

    def is_base_cell_pentagon(self, base_cell: int) -> bool:
        return h3_calc.is_base_cell_pentagon(base_cell)

    def is_polar_pentagon(self, base_cell: int) -> bool:
        return h3_calc.is_polar_pentagon(base_cell)


class TableGrid(CellGrid):
    """
    Grid collaborator backed by explicit tables.

    Tables:
        cells: cell index -> FaceIJK
        home_faces: base cell -> home face
        rotations: (base cell, face) -> CCW 60 degree rotations

    Cells missing from the cell table are resolved with the h3 library
    when they lie on a single icosahedron face.
    """

    def __init__(
        self,
        cells: Mapping[int, FaceIJK],
        home_faces: Mapping[int, int],
        rotations: Mapping[Tuple[int, int], int],
    ):
        """
        Initialize table grid.

        Args:
            cells: Face projection per cell index
            home_faces: Home face per base cell
            rotations: Rotation per (base cell, face) pair
        """
        for base_cell, face in home_faces.items():
            _check_base_cell(base_cell)
            _check_face(face)
        for (base_cell, face), rot in rotations.items():
            _check_base_cell(base_cell)
            _check_face(face)
            if not 0 <= rot <= 5:
                raise ValueError(
                    f"Rotation for base cell {base_cell} on face {face} must be 0-5, got {rot}"
                )
        for fijk in cells.values():
            _check_face(fijk.face)

        self.cells = MappingProxyType(dict(cells))
        self.home_faces = MappingProxyType(dict(home_faces))
        self.rotations = MappingProxyType(dict(rotations))

    def face_and_ijk(self, cell: int) -> FaceIJK:
        fijk = self.cells.get(cell)
        if fijk is not None:
            return fijk

        faces = h3.get_icosahedron_faces(h3.int_to_str(cell))
        if len(faces) != 1:
            raise KeyError(f"No face recorded for cell {cell:x} spanning faces {sorted(faces)}")
        return FaceIJK(next(iter(faces)))

    def base_cell_home_face(self, base_cell: int) -> int:
        return self.home_faces[base_cell]

    def face_rotation_between(self, base_cell: int, face: int) -> int:
        rot = self.rotations.get((base_cell, face))
        if rot is not None:
            return rot
        if self.home_faces.get(base_cell) == face:
            return 0
        raise KeyError(f"No rotation recorded for base cell {base_cell} on face {face}")

    @classmethod
    def from_dict(cls, data: dict) -> "TableGrid":
        """
        Build a grid from a parsed table document.

        Expected layout:
            base_cells:
              4: {home_face: 0, rotations: {1: 5, 2: 1}}
            cells:
              "8009fffffffffff": {face: 0, ijk: [2, 0, 0]}
              "81083ffffffffff": 1
        """
        home_faces: Dict[int, int] = {}
        rotations: Dict[Tuple[int, int], int] = {}
        for base_cell, entry in (data.get('base_cells') or {}).items():
            base_cell = int(base_cell)
            home_faces[base_cell] = int(entry['home_face'])
            for face, rot in (entry.get('rotations') or {}).items():
                rotations[(base_cell, int(face))] = int(rot)

        cells: Dict[int, FaceIJK] = {}
        for cell, entry in (data.get('cells') or {}).items():
            cells[h3_calc.to_int(cell)] = _parse_face_ijk(entry)

        return cls(cells, home_faces, rotations)

    @classmethod
    def from_yaml(cls, path: str) -> "TableGrid":
        """Load a grid table from a YAML file."""
        table_file = Path(path)
        if not table_file.exists():
            raise FileNotFoundError(f"Grid table not found: {path}")

        with open(table_file, 'r') as f:
            data = yaml.safe_load(f) or {}

        grid = cls.from_dict(data)
        logger.info(f"Loaded grid table {table_file.name}: {len(grid.home_faces)} base cells, "
                    f"{len(grid.rotations)} rotations, {len(grid.cells)} cells")
        return grid


def _parse_face_ijk(entry) -> FaceIJK:
    if isinstance(entry, int):
        return FaceIJK(entry)
    ijk = entry.get('ijk')
    coord = CoordIJK(*(int(v) for v in ijk)) if ijk is not None else None
    return FaceIJK(int(entry['face']), coord)


def _check_face(face: int) -> None:
    if not 0 <= face < NUM_ICOSA_FACES:
        raise ValueError(f"Face must be 0-{NUM_ICOSA_FACES - 1}, got {face}")


def _check_base_cell(base_cell: int) -> None:
    if not 0 <= base_cell < NUM_BASE_CELLS:
        raise ValueError(f"Base cell must be 0-{NUM_BASE_CELLS - 1}, got {base_cell}")
