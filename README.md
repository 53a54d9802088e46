# polymesh

Tools for small two-dimensional polygonal meshes described by three CSV
files:

- `Cell0Ds.csv`: the vertices (`Id;Marker;X;Y`)
- `Cell1Ds.csv`: the edges (`Id;Marker;Origin;End`)
- `Cell2Ds.csv`: the polygons
  (`Id;Marker;NumVertices;Vertices...;NumEdges;Edges...`)

Each file starts with one header line, which is skipped, followed by one cell
per line. Blank lines are ignored.

The package checks the mesh geometry (every edge should have a positive
length, every polygon a positive area) and writes vertices, edges and polygons
as ASCII UCD (`.inp`) files, which ParaView can open.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
polymesh [directory]
```

`directory` defaults to the current directory and must hold `Cell0Ds.csv`,
`Cell1Ds.csv` and `Cell2Ds.csv`. The command:

1. prints one line per edge, `Edge with ID <n> has length <l>`, or an
   `Error: ...` line when the length is zero or negative;
2. prints one line per polygon, `Polygon with ID <n> has area <a>`, or an
   `Error: ...` line when the area is zero or negative (IDs in these lines
   are the file ids plus one);
3. writes `Cell0Ds.inp`, `Cell1Ds.inp` and `Cell2Ds.inp` into the same
   directory, each carrying a `Marker` cell property.

It exits with status 0 on success. It prints a message to stderr and exits
with status 1 when a file is missing (`file not found`), a line is malformed,
an edge or polygon refers to a vertex that does not exist, a cell id is out of
range, or a polygon has other than three or four vertices (the UCD writer
only supports triangles and quadrilaterals).

Polygon markers are not read into the mesh, so every polygon in
`Cell2Ds.inp` has a `Marker` of 0.

## Library

### `polymesh.cells`: records and checks

- `Cell0D(id, marker, x, y)`, `Cell1D(id, marker, origin, end)` and
  `Cell2D(id, marker, vertices, edges)`, the last with `num_vertices` and
  `num_edges` properties.
- `read_cell0ds(path)`, `read_cell1ds(path)`, `read_cell2ds(path)` read a
  file's semicolon-separated lines into lists of records and raise
  `ValueError` on a missing or unparsable field. `read_cell0ds` removes every
  `.` from the X and Y fields before converting them, so `1.5` is read as
  `15.0`; the checks therefore work on coordinates scaled that way.
- `distance(x1, y1, x2, y2)` returns the Euclidean distance.
- `polygon_area(vertices, polygon)` returns the area by the shoelace formula;
  a polygon with fewer than three vertices gets an area of 0.0 and a message
  on stderr.
- `check_edges(cell1ds, cell0ds)` and `check_polygon_areas(cell2ds, cell0ds)`
  return the report lines that the command prints.

### `polymesh.mesh`: whole-mesh import

- `PolygonalMesh` holds the counts, ids, vertex coordinates (as `(x, y, 0.0)`
  triples indexed by id), edge extrema, polygon vertex and edge lists, and
  marker-to-ids mappings (cells with marker 0 are not listed).
- `import_mesh(directory=".")` reads the three files into a new
  `PolygonalMesh`. Fields may be separated by semicolons or whitespace, and
  coordinates are read as written.
- `import_cell0ds(mesh, path)`, `import_cell1ds(mesh, path)` and
  `import_cell2ds(mesh, path)` fill one part of an existing mesh.
- All of these raise `MeshImportError` when a file cannot be read, holds no
  cells, has a malformed field, has a vertex or edge id outside
  `0..count-1`, or has a polygon with more than eight vertices or edges.
- `marker_array(markers, count)` spreads a marker-to-ids mapping over `count`
  cells as floats, with 0.0 for unmarked cells, and raises `IndexError` for an
  id out of range.

### `polymesh.ucd`: ASCII UCD output

- `CellType` lists the UCD cell kinds; `UCDCell(type, point_ids, material_id)`
  is one cell with zero-based point ids, and `UCDCell.label()` gives its UCD
  keyword (`pt`, `line`, `tri`, `quad`, `hex`, `prism`, `tet`, `pyr`),
  raising `ValueError` for `CellType.UNKNOWN`.
- `UCDProperty(label, unit_label, num_components, data)` attaches named data
  to points or cells; `data` is flat, component `k` of item `i` being
  `data[num_components * i + k]`. Too little data raises `ValueError`.
- `create_point_cells`, `create_line_cells`, `create_polygon_cells` and
  `create_polyhedra_cells` build cells. A `materials` sequence is used only
  when it has one entry per cell; otherwise every material id is 0. Polygons
  must have three or four vertices and polyhedra four, or `ValueError` is
  raised.
- `render_ucd_ascii(points, point_properties, cells, cell_properties)`
  returns the file text: points are `(x, y, z)` triples written with 16
  digits in scientific notation, ids are written one-based.
  `write_ucd_ascii(file_path, ...)` writes that text to a file.
- `export_points`, `export_segments`, `export_polygons` and
  `export_polyhedra` build the cells and write the file in one call. In
  `export_points` the given properties are attached to the point cells.

## Limitations

- Only the ASCII UCD format is written; there is no binary output and no
  reading of `.inp` files.
- Meshes are planar: the z coordinate of every vertex is 0.0.
- Nothing is drawn or displayed; the `.inp` files are meant for an external
  viewer.