"""Command that checks a mesh and exports it for visualisation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from polymesh.cells import (
    check_edges,
    check_polygon_areas,
    read_cell0ds,
    read_cell1ds,
    read_cell2ds,
)
from polymesh.mesh import MeshImportError, import_mesh, marker_array
from polymesh.ucd import UCDProperty, export_points, export_polygons, export_segments

__all__ = ["main"]


def _marker_property(values: list[float]) -> UCDProperty:
    return UCDProperty(label="Marker", unit_label="-", num_components=1, data=values)


def main(argv: Sequence[str] | None = None) -> int:
    """Check edge lengths and polygon areas, then write the three UCD files."""
    parser = argparse.ArgumentParser(
        prog="polymesh",
        description="Check a polygonal mesh and export it in UCD format.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding Cell0Ds.csv, Cell1Ds.csv and Cell2Ds.csv",
    )
    args = parser.parse_args(argv)
    directory = Path(args.directory)

    try:
        cell0ds = read_cell0ds(directory / "Cell0Ds.csv")
        cell1ds = read_cell1ds(directory / "Cell1Ds.csv")
        cell2ds = read_cell2ds(directory / "Cell2Ds.csv")
    except OSError:
        print("file not found", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        for line in check_edges(cell1ds, cell0ds):
            print(line)
        for line in check_polygon_areas(cell2ds, cell0ds):
            print(line)
    except IndexError as exc:
        print(f"invalid vertex reference: {exc}", file=sys.stderr)
        return 1

    try:
        mesh = import_mesh(directory)
    except MeshImportError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        export_points(
            directory / "Cell0Ds.inp",
            mesh.cell0ds_coordinates,
            [_marker_property(marker_array(mesh.marker_cell0ds, mesh.num_cell0ds))],
        )
        export_segments(
            directory / "Cell1Ds.inp",
            mesh.cell0ds_coordinates,
            mesh.cell1ds_extrema,
            (),
            [_marker_property(marker_array(mesh.marker_cell1ds, mesh.num_cell1ds))],
        )
        export_polygons(
            directory / "Cell2Ds.inp",
            mesh.cell0ds_coordinates,
            mesh.cell2ds_vertices,
            (),
            [_marker_property(marker_array(mesh.marker_cell2ds, mesh.num_cell2ds))],
        )
    except (ValueError, IndexError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())