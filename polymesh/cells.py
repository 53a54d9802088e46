"""Plain cell records read from the semicolon-separated mesh files, with checks."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

__all__ = [
    "Cell0D",
    "Cell1D",
    "Cell2D",
    "distance",
    "polygon_area",
    "check_edges",
    "check_polygon_areas",
    "read_cell0ds",
    "read_cell1ds",
    "read_cell2ds",
]

PathType = Union[str, "PathLike[str]"]

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass
class Cell0D:
    """A mesh vertex."""

    id: int
    marker: int
    x: float
    y: float


@dataclass
class Cell1D:
    """A mesh edge joining two vertices."""

    id: int
    marker: int
    origin: int
    end: int


@dataclass
class Cell2D:
    """A mesh polygon, given by its vertex and edge ids."""

    id: int
    marker: int
    vertices: list[int] = field(default_factory=list)
    edges: list[int] = field(default_factory=list)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        return len(self.edges)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the Euclidean distance between two points of the plane."""
    return ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5


def polygon_area(vertices: Sequence[Cell0D], polygon: Cell2D) -> float:
    """Return the area of ``polygon`` by the shoelace formula.

    A polygon with fewer than three vertices is reported on stderr and
    given an area of zero.
    """
    count = polygon.num_vertices
    if count < 3:
        print("Error: a polygon must have at least 3 vertices", file=sys.stderr)
        return 0.0
    points = [vertices[v] for v in polygon.vertices]
    twice_area = sum(
        p1.x * p2.y - p2.x * p1.y
        for p1, p2 in zip(points, points[1:] + points[:1])
    )
    return abs(twice_area) / 2.0


def check_edges(cell1ds: Sequence[Cell1D], cell0ds: Sequence[Cell0D]) -> list[str]:
    """Return one report line per edge, flagging edges of non-positive length."""
    report = []
    for edge in cell1ds:
        origin = cell0ds[edge.origin]
        end = cell0ds[edge.end]
        length = distance(origin.x, origin.y, end.x, end.y)
        if length <= 0:
            report.append(
                f"Error: edge with ID {edge.id + 1} has zero or negative length"
            )
        else:
            report.append(f"Edge with ID {edge.id + 1} has length {length:g}")
    return report


def check_polygon_areas(
    cell2ds: Sequence[Cell2D], cell0ds: Sequence[Cell0D]
) -> list[str]:
    """Return one report line per polygon, flagging non-positive areas."""
    report = []
    for polygon in cell2ds:
        area = polygon_area(cell0ds, polygon)
        if area <= 0:
            report.append(
                f"Error: polygon with ID {polygon.id + 1} has zero or negative area"
            )
        else:
            report.append(f"Polygon with ID {polygon.id + 1} has area {area:g}")
    return report


def _to_int(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _to_float(text: str) -> float:
    match = _FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def _coordinate(text: str) -> float:
    # Dots are dropped before conversion, as the mesh files' reader does.
    return _to_float(text.replace(".", ""))


class _Fields:
    """Successive semicolon-separated fields of one line."""

    def __init__(self, line: str) -> None:
        self._line = line
        self._parts: Iterator[str] = iter(line.split(";"))

    def next(self) -> str:
        try:
            return next(self._parts)
        except StopIteration:
            raise ValueError(f"missing field in line {self._line!r}") from None

    def next_int(self) -> int:
        return _to_int(self.next())


def _data_lines(path: PathType) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    return [line for line in lines[1:] if line.strip()]


def read_cell0ds(path: PathType) -> list[Cell0D]:
    """Read vertices from a file of ``Id;Marker;X;Y`` lines after a header."""
    cells = []
    for line in _data_lines(path):
        fields = _Fields(line)
        cell_id = fields.next_int()
        marker = fields.next_int()
        x = _coordinate(fields.next())
        y = _coordinate(fields.next())
        cells.append(Cell0D(cell_id, marker, x, y))
    return cells


def read_cell1ds(path: PathType) -> list[Cell1D]:
    """Read edges from a file of ``Id;Marker;Origin;End`` lines after a header."""
    cells = []
    for line in _data_lines(path):
        fields = _Fields(line)
        cells.append(
            Cell1D(
                fields.next_int(),
                fields.next_int(),
                fields.next_int(),
                fields.next_int(),
            )
        )
    return cells


def read_cell2ds(path: PathType) -> list[Cell2D]:
    """Read polygons from a file of
    ``Id;Marker;NumVertices;Vertices...;NumEdges;Edges...`` lines after a header."""
    cells = []
    for line in _data_lines(path):
        fields = _Fields(line)
        cell_id = fields.next_int()
        marker = fields.next_int()
        num_vertices = fields.next_int()
        vertices = [fields.next_int() for _ in range(num_vertices)]
        num_edges = fields.next_int()
        edges = [fields.next_int() for _ in range(num_edges)]
        cells.append(Cell2D(cell_id, marker, vertices, edges))
    return cells