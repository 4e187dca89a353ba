import h3
import pytest

from h3vertex.constants import Direction
from h3vertex.grid import CoordIJK, FaceIJK, TableGrid
from h3vertex.utils.h3_calc import build_cell


class TestTableGrid:

    def test_face_lookup(self, make_grid, hex_cell):
        grid = make_grid({hex_cell: FaceIJK(3, CoordIJK(1, 0, 0))})
        assert grid.face_and_ijk(hex_cell) == FaceIJK(3, CoordIJK(1, 0, 0))

    def test_rotation_lookup(self, make_grid):
        grid = make_grid({})
        assert grid.face_rotation_between(0, 0) == 3
        assert grid.face_rotation_between(14, 7) == 5

    def test_home_face_rotation_defaults_to_zero(self, make_grid):
        grid = make_grid({})
        assert grid.face_rotation_between(4, 0) == 0

    def test_missing_rotation(self, make_grid):
        grid = make_grid({})
        with pytest.raises(KeyError):
            grid.face_rotation_between(0, 19)

    def test_missing_home_face(self, make_grid):
        with pytest.raises(KeyError):
            make_grid({}).base_cell_home_face(50)

    def test_index_fields(self, make_grid, hex_cell, pentagon_cell):
        grid = make_grid({})
        assert grid.base_cell(hex_cell) == 0
        assert grid.leading_non_zero_digit(hex_cell) == Direction.J
        assert not grid.is_pentagon(hex_cell)
        assert grid.is_pentagon(pentagon_cell)
        assert grid.is_base_cell_pentagon(14)
        assert grid.is_polar_pentagon(117)
        assert not grid.is_polar_pentagon(14)

    def test_single_face_fallback(self, make_grid, hex_cell, monkeypatch):
        monkeypatch.setattr(h3, "get_icosahedron_faces", lambda cell: [7])
        assert make_grid({}).face_and_ijk(hex_cell) == FaceIJK(7)

    def test_multi_face_fallback_raises(self, make_grid, hex_cell, monkeypatch):
        monkeypatch.setattr(h3, "get_icosahedron_faces", lambda cell: [3, 4])
        with pytest.raises(KeyError):
            make_grid({}).face_and_ijk(hex_cell)

    @pytest.mark.parametrize("home_faces,rotations", [
        ({0: 20}, {}),
        ({122: 0}, {}),
        ({}, {(0, 1): 6}),
        ({}, {(0, -1): 0}),
    ])
    def test_rejects_out_of_range(self, home_faces, rotations):
        with pytest.raises(ValueError):
            TableGrid({}, home_faces, rotations)

    def test_rejects_bad_cell_face(self, hex_cell):
        with pytest.raises(ValueError):
            TableGrid({hex_cell: FaceIJK(25)}, {}, {})

    def test_tables_are_read_only(self, make_grid):
        grid = make_grid({})
        with pytest.raises(TypeError):
            grid.rotations[(0, 5)] = 1


class TestTableLoading:

    def test_from_dict(self):
        cell = build_cell(1, 4, [Direction.J])
        grid = TableGrid.from_dict({
            'base_cells': {'4': {'home_face': 0, 'rotations': {'1': 2, 3: 4}}},
            'cells': {format(cell, 'x'): {'face': 4, 'ijk': [0, 1, 0]}, 12345: 2},
        })
        assert grid.base_cell_home_face(4) == 0
        assert grid.face_rotation_between(4, 1) == 2
        assert grid.face_rotation_between(4, 3) == 4
        assert grid.face_and_ijk(cell) == FaceIJK(4, CoordIJK(0, 1, 0))
        assert grid.face_and_ijk(12345) == FaceIJK(2)

    def test_from_dict_empty(self):
        grid = TableGrid.from_dict({})
        assert len(grid.home_faces) == 0
        assert len(grid.cells) == 0

    def test_from_yaml(self, table_file, hex_cell, pentagon_cell):
        grid = TableGrid.from_yaml(str(table_file))
        assert grid.face_and_ijk(hex_cell) == FaceIJK(0, CoordIJK(1, 0, 2))
        assert grid.face_and_ijk(pentagon_cell) == FaceIJK(0)
        assert grid.face_rotation_between(0, 0) == 3

    def test_from_yaml_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TableGrid.from_yaml(str(tmp_path / "missing.yaml"))
