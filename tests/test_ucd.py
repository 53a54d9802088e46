import pytest

from polymesh.ucd import (
    CellType,
    UCDCell,
    UCDProperty,
    create_line_cells,
    create_point_cells,
    create_polygon_cells,
    create_polyhedra_cells,
    export_points,
    export_polygons,
    export_polyhedra,
    export_segments,
    render_ucd_ascii,
    write_ucd_ascii,
)

POINTS = [(0.0, 0.0, 0.0), (1.0, 0.5, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]


@pytest.mark.parametrize(
    "cell_type, label",
    [
        (CellType.LINE, "line"),
        (CellType.TRIANGLE, "tri"),
        (CellType.QUADRILATERAL, "quad"),
        (CellType.HEXAHEDRON, "hex"),
        (CellType.PRISM, "prism"),
        (CellType.TETRAHEDRON, "tet"),
        (CellType.PYRAMID, "pyr"),
        (CellType.POINT, "pt"),
    ],
)
def test_cell_labels(cell_type, label):
    assert UCDCell(cell_type, (0,), 0).label() == label


def test_unknown_label_raises():
    with pytest.raises(ValueError):
        UCDCell(CellType.UNKNOWN, (0,), 0).label()


def test_point_cells_use_materials_when_lengths_match():
    cells = create_point_cells(POINTS, [5, 6, 7, 8])
    assert [c.point_ids for c in cells] == [(0,), (1,), (2,), (3,)]
    assert [c.material_id for c in cells] == [5, 6, 7, 8]
    assert all(c.type is CellType.POINT for c in cells)


def test_point_cells_ignore_mismatched_materials():
    cells = create_point_cells(POINTS, [5, 6])
    assert [c.material_id for c in cells] == [0, 0, 0, 0]


def test_line_cells():
    cells = create_line_cells([(0, 1), (2, 3)])
    assert [c.point_ids for c in cells] == [(0, 1), (2, 3)]
    assert all(c.type is CellType.LINE for c in cells)
    assert all(c.material_id == 0 for c in cells)


def test_polygon_cells_types():
    cells = create_polygon_cells([(0, 1, 2), (0, 1, 2, 3)], [1, 2])
    assert [c.type for c in cells] == [CellType.TRIANGLE, CellType.QUADRILATERAL]
    assert [c.material_id for c in cells] == [1, 2]
    assert cells[1].point_ids == (0, 1, 2, 3)


@pytest.mark.parametrize("vertices", [(0, 1), (0, 1, 2, 3, 4)])
def test_polygon_cells_reject_other_sizes(vertices):
    with pytest.raises(ValueError):
        create_polygon_cells([vertices])


def test_polyhedra_cells():
    cells = create_polyhedra_cells([(0, 1, 2, 3)])
    assert cells[0].type is CellType.TETRAHEDRON
    with pytest.raises(ValueError):
        create_polyhedra_cells([(0, 1, 2)])


def test_render_pinned_example():
    text = render_ucd_ascii(POINTS[:2], [], create_line_cells([(0, 1)]), [])
    assert text == (
        "2 1 0 0 0\n"
        "1 0.0000000000000000e+00 0.0000000000000000e+00 0.0000000000000000e+00\n"
        "2 1.0000000000000000e+00 5.0000000000000000e-01 0.0000000000000000e+00\n"
        "1 0 line 1 2\n"
    )


def test_render_header_counts_and_coordinates_round_trip():
    cells = create_polygon_cells([(0, 1, 2, 3)])
    prop = UCDProperty("Marker", "-", 1, [1.0, 2.0, 3.0, 4.0])
    lines = render_ucd_ascii(POINTS, [prop], cells, []).splitlines()
    header = [int(v) for v in lines[0].split()]
    assert header == [len(POINTS), len(cells), 1, 0, 0]
    for index, point in enumerate(POINTS):
        fields = lines[1 + index].split()
        assert int(fields[0]) == index + 1
        assert tuple(float(v) for v in fields[1:]) == point


def test_render_cell_properties_section():
    cells = create_line_cells([(0, 1), (1, 2)])
    prop = UCDProperty("Marker", "-", 2, [1.5, 2.5, 3.5, 4.5])
    lines = render_ucd_ascii(POINTS, [], cells, [prop]).splitlines()
    tail = lines[1 + len(POINTS) + len(cells):]
    assert tail[0].split() == ["1", "2"]
    assert tail[1] == "Marker, -"
    assert [float(v) for v in tail[2].split()[1:]] == [1.5, 2.5]
    assert [float(v) for v in tail[3].split()[1:]] == [3.5, 4.5]
    assert [int(line.split()[0]) for line in tail[2:]] == [1, 2]


def test_render_rejects_short_property_data():
    prop = UCDProperty("Marker", "-", 1, [1.0])
    with pytest.raises(ValueError):
        render_ucd_ascii(POINTS, [prop], [], [])


def test_write_matches_render(tmp_path):
    cells = create_line_cells([(0, 1)])
    target = tmp_path / "out.inp"
    write_ucd_ascii(target, POINTS, [], cells, [])
    assert target.read_text() == render_ucd_ascii(POINTS, [], cells, [])


def test_export_points_properties_go_to_cells(tmp_path):
    target = tmp_path / "points.inp"
    prop = UCDProperty("Marker", "-", 1, [0.0, 1.0, 2.0, 3.0])
    export_points(target, POINTS, [prop])
    lines = target.read_text().splitlines()
    assert [int(v) for v in lines[0].split()] == [len(POINTS), len(POINTS), 0, 1, 0]
    cell_lines = lines[1 + len(POINTS):1 + 2 * len(POINTS)]
    assert [line.split()[2] for line in cell_lines] == ["pt"] * len(POINTS)


def test_export_segments_ids_are_one_based(tmp_path):
    target = tmp_path / "segments.inp"
    export_segments(target, POINTS, [(0, 3), (2, 1)], materials=[4, 9])
    lines = target.read_text().splitlines()
    cell_lines = lines[1 + len(POINTS):]
    assert [line.split() for line in cell_lines] == [
        ["1", "4", "line", "1", "4"],
        ["2", "9", "line", "3", "2"],
    ]


def test_export_polygons_and_polyhedra(tmp_path):
    polygons = tmp_path / "polygons.inp"
    export_polygons(polygons, POINTS, [(0, 1, 2), (0, 1, 2, 3)])
    labels = [line.split()[2] for line in polygons.read_text().splitlines()[5:]]
    assert labels == ["tri", "quad"]

    polyhedra = tmp_path / "polyhedra.inp"
    export_polyhedra(polyhedra, POINTS, [(0, 1, 2, 3)])
    assert polyhedra.read_text().splitlines()[5].split()[2:] == ["tet", "1", "2", "3", "4"]


def test_export_polygons_rejects_pentagon_without_writing(tmp_path):
    target = tmp_path / "bad.inp"
    with pytest.raises(ValueError):
        export_polygons(target, POINTS, [(0, 1, 2, 3, 0)])
    assert not target.exists()