"""Export of points, segments, polygons and polyhedra in the ASCII UCD format."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

__all__ = [
    "UCDProperty",
    "CellType",
    "UCDCell",
    "create_point_cells",
    "create_line_cells",
    "create_polygon_cells",
    "create_polyhedra_cells",
    "render_ucd_ascii",
    "write_ucd_ascii",
    "export_points",
    "export_segments",
    "export_polygons",
    "export_polyhedra",
]

Point = Sequence[float]
PathType = Union[str, "PathLike[str]"]

_SEP = " "
_UINT_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class UCDProperty:
    """A named field attached to points or cells.

    ``data`` is flat: the value of component ``k`` of item ``i`` is
    ``data[num_components * i + k]``.
    """

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float] = field(default_factory=tuple)


class CellType(enum.Enum):
    """Kinds of cell the UCD format knows."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDCell:
    """One cell: its type, the zero-based ids of its points and its material."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def label(self) -> str:
        """Return the UCD keyword for this cell's type."""
        try:
            return _LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material(materials: Sequence[int] | None, count: int, index: int) -> int:
    if materials is not None and len(materials) == count:
        return materials[index] & _UINT_MASK
    return 0


def create_point_cells(
    points: Sequence[Point], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make one point cell per point."""
    count = len(points)
    return [
        UCDCell(CellType.POINT, (p,), _material(materials, count, p))
        for p in range(count)
    ]


def create_line_cells(
    lines: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make one line cell per (origin, end) pair."""
    count = len(lines)
    return [
        UCDCell(
            CellType.LINE,
            (line[0] & _UINT_MASK, line[1] & _UINT_MASK),
            _material(materials, count, index),
        )
        for index, line in enumerate(lines)
    ]


def create_polygon_cells(
    polygons_vertices: Sequence[Sequence[int]],
    materials: Sequence[int] | None = None,
) -> list[UCDCell]:
    """Make triangle or quadrilateral cells; other polygons are rejected."""
    count = len(polygons_vertices)
    cells = []
    for index, vertices in enumerate(polygons_vertices):
        if len(vertices) == 3:
            cell_type = CellType.TRIANGLE
        elif len(vertices) == 4:
            cell_type = CellType.QUADRILATERAL
        else:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(cell_type, tuple(vertices), _material(materials, count, index))
        )
    return cells


def create_polyhedra_cells(
    polyhedra_vertices: Sequence[Sequence[int]],
    materials: Sequence[int] | None = None,
) -> list[UCDCell]:
    """Make tetrahedron cells; other polyhedra are rejected."""
    count = len(polyhedra_vertices)
    cells = []
    for index, vertices in enumerate(polyhedra_vertices):
        if len(vertices) != 4:
            raise ValueError("Polyhedron type not supported")
        cells.append(
            UCDCell(
                CellType.TETRAHEDRON,
                tuple(vertices),
                _material(materials, count, index),
            )
        )
    return cells


def _number(value: float) -> str:
    return f"{value:.16e}"


def _property_lines(
    properties: Sequence[UCDProperty], item_count: int
) -> list[str]:
    if not properties:
        return []
    lines = [
        _SEP.join(
            [str(len(properties))] + [str(p.num_components) for p in properties]
        )
    ]
    lines.extend(f"{p.label},{_SEP}{p.unit_label}" for p in properties)
    for prop in properties:
        needed = prop.num_components * item_count
        if len(prop.data) < needed:
            raise ValueError(
                f"Property '{prop.label}' holds {len(prop.data)} values, "
                f"{needed} needed"
            )
    for item in range(item_count):
        values = [
            _number(prop.data[prop.num_components * item + component])
            for prop in properties
            for component in range(prop.num_components)
        ]
        lines.append(_SEP.join([str(item + 1)] + values))
    return lines


def render_ucd_ascii(
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
) -> str:
    """Return the UCD ASCII text for the given points, cells and properties."""
    lines = [
        _SEP.join(
            str(n)
            for n in (len(points), len(cells), len(point_properties),
                      len(cell_properties), 0)
        )
    ]
    for index, point in enumerate(points, start=1):
        lines.append(
            _SEP.join(
                [str(index), _number(point[0]), _number(point[1]), _number(point[2])]
            )
        )
    for index, cell in enumerate(cells, start=1):
        lines.append(
            _SEP.join(
                [str(index), str(cell.material_id), cell.label()]
                + [str(pid + 1) for pid in cell.point_ids]
            )
        )
    lines.extend(_property_lines(point_properties, len(points)))
    lines.extend(_property_lines(cell_properties, len(cells)))
    return "".join(line + "\n" for line in lines)


def write_ucd_ascii(
    file_path: PathType,
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
) -> None:
    """Write the UCD ASCII text to ``file_path``."""
    text = render_ucd_ascii(points, point_properties, cells, cell_properties)
    with open(file_path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)


def export_points(
    file_path: PathType,
    points: Sequence[Point],
    points_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export every point as a point cell; the properties belong to those cells."""
    write_ucd_ascii(
        file_path,
        points,
        (),
        create_point_cells(points, materials),
        points_properties,
    )


def export_segments(
    file_path: PathType,
    points: Sequence[Point],
    segments: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    segments_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export segments given as (origin, end) point id pairs."""
    write_ucd_ascii(
        file_path,
        points,
        points_properties,
        create_line_cells(segments, materials),
        segments_properties,
    )


def export_polygons(
    file_path: PathType,
    points: Sequence[Point],
    polygons_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polygons_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export triangles and quadrilaterals."""
    write_ucd_ascii(
        file_path,
        points,
        points_properties,
        create_polygon_cells(polygons_vertices, materials),
        polygons_properties,
    )


def export_polyhedra(
    file_path: PathType,
    points: Sequence[Point],
    polyhedra_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polyhedra_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export tetrahedra."""
    write_ucd_ascii(
        file_path,
        points,
        points_properties,
        create_polyhedra_cells(polyhedra_vertices, materials),
        polyhedra_properties,
    )