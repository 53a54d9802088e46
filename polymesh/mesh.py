"""The polygonal mesh structure and its import from the three cell files."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

__all__ = [
    "MeshImportError",
    "PolygonalMesh",
    "import_cell0ds",
    "import_cell1ds",
    "import_cell2ds",
    "import_mesh",
    "marker_array",
]

PathType = Union[str, "PathLike[str]"]

_CELL0DS_FILE = "Cell0Ds.csv"
_CELL1DS_FILE = "Cell1Ds.csv"
_CELL2DS_FILE = "Cell2Ds.csv"
_MAX_POLYGON_SIZE = 8
_SEPARATORS = re.compile(r"[;\s]+")


class MeshImportError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


@dataclass
class PolygonalMesh:
    """Vertices, edges and polygons of a planar mesh, indexed by id."""

    num_cell0ds: int = 0
    cell0ds_id: list[int] = field(default_factory=list)
    cell0ds_coordinates: list[tuple[float, float, float]] = field(default_factory=list)
    marker_cell0ds: dict[int, list[int]] = field(default_factory=dict)

    num_cell1ds: int = 0
    cell1ds_id: list[int] = field(default_factory=list)
    cell1ds_extrema: list[tuple[int, int]] = field(default_factory=list)
    marker_cell1ds: dict[int, list[int]] = field(default_factory=dict)

    num_cell2ds: int = 0
    cell2ds_id: list[int] = field(default_factory=list)
    cell2ds_vertices: list[list[int]] = field(default_factory=list)
    cell2ds_edges: list[list[int]] = field(default_factory=list)
    marker_cell2ds: dict[int, list[int]] = field(default_factory=dict)


class _Row:
    """Tokens of one data line, separated by semicolons or whitespace."""

    def __init__(self, line: str, path: PathType) -> None:
        self._tokens = iter(t for t in _SEPARATORS.split(line.strip()) if t)
        self._line = line
        self._path = path

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise MeshImportError(
                f"{self._path}: missing field in line {self._line!r}"
            ) from None

    def int(self) -> int:
        token = self._next()
        try:
            return int(token)
        except ValueError:
            raise MeshImportError(
                f"{self._path}: invalid integer {token!r}"
            ) from None

    def float(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise MeshImportError(
                f"{self._path}: invalid number {token!r}"
            ) from None


def _rows(path: PathType, what: str) -> list[_Row]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MeshImportError(f"file not found: {path}") from exc
    rows = [_Row(line, path) for line in text.splitlines()[1:] if line.strip()]
    if not rows:
        raise MeshImportError(f"There is no cell {what}")
    return rows


def _check_id(cell_id: int, count: int, path: PathType) -> None:
    if not 0 <= cell_id < count:
        raise MeshImportError(f"{path}: id {cell_id} out of range 0..{count - 1}")


def _add_marker(markers: dict[int, list[int]], marker: int, cell_id: int) -> None:
    if marker != 0:
        markers.setdefault(marker, []).append(cell_id)


def import_cell0ds(mesh: PolygonalMesh, path: PathType) -> None:
    """Fill the vertex part of ``mesh`` from ``path``."""
    rows = _rows(path, "0D")
    count = len(rows)
    coordinates = [(0.0, 0.0, 0.0)] * count
    ids: list[int] = []
    markers: dict[int, list[int]] = {}
    for row in rows:
        cell_id, marker = row.int(), row.int()
        x, y = row.float(), row.float()
        _check_id(cell_id, count, path)
        coordinates[cell_id] = (x, y, 0.0)
        ids.append(cell_id)
        _add_marker(markers, marker, cell_id)
    mesh.num_cell0ds = count
    mesh.cell0ds_id = ids
    mesh.cell0ds_coordinates = coordinates
    mesh.marker_cell0ds = markers


def import_cell1ds(mesh: PolygonalMesh, path: PathType) -> None:
    """Fill the edge part of ``mesh`` from ``path``."""
    rows = _rows(path, "1D")
    count = len(rows)
    extrema = [(0, 0)] * count
    ids: list[int] = []
    markers: dict[int, list[int]] = {}
    for row in rows:
        cell_id, marker = row.int(), row.int()
        origin, end = row.int(), row.int()
        _check_id(cell_id, count, path)
        extrema[cell_id] = (origin, end)
        ids.append(cell_id)
        _add_marker(markers, marker, cell_id)
    mesh.num_cell1ds = count
    mesh.cell1ds_id = ids
    mesh.cell1ds_extrema = extrema
    mesh.marker_cell1ds = markers


def _id_list(row: _Row, kind: str, path: PathType) -> list[int]:
    size = row.int()
    if size > _MAX_POLYGON_SIZE:
        raise MeshImportError(
            f"{path}: a polygon may have at most {_MAX_POLYGON_SIZE} {kind}, got {size}"
        )
    return [row.int() for _ in range(size)]


def import_cell2ds(mesh: PolygonalMesh, path: PathType) -> None:
    """Fill the polygon part of ``mesh`` from ``path``; markers are not kept."""
    rows = _rows(path, "2D")
    ids: list[int] = []
    vertices: list[list[int]] = []
    edges: list[list[int]] = []
    for row in rows:
        cell_id = row.int()
        row.int()  # marker
        vertices.append(_id_list(row, "vertices", path))
        edges.append(_id_list(row, "edges", path))
        ids.append(cell_id)
    mesh.num_cell2ds = len(rows)
    mesh.cell2ds_id = ids
    mesh.cell2ds_vertices = vertices
    mesh.cell2ds_edges = edges


def import_mesh(directory: PathType = ".") -> PolygonalMesh:
    """Read Cell0Ds.csv, Cell1Ds.csv and Cell2Ds.csv from ``directory``."""
    base = Path(directory)
    mesh = PolygonalMesh()
    import_cell0ds(mesh, base / _CELL0DS_FILE)
    import_cell1ds(mesh, base / _CELL1DS_FILE)
    import_cell2ds(mesh, base / _CELL2DS_FILE)
    return mesh


def marker_array(markers: Mapping[int, Sequence[int]], count: int) -> list[float]:
    """Spread ``markers`` over ``count`` cells; unmarked cells get 0.0."""
    values = [0.0] * count
    for marker, ids in sorted(markers.items()):
        for cell_id in ids:
            if not 0 <= cell_id < count:
                raise IndexError(f"cell id {cell_id} out of range for {count} cells")
            values[cell_id] = float(marker)
    return values