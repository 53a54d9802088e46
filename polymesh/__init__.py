"""Read, check and export two-dimensional polygonal meshes as ASCII UCD files."""

__version__ = "1.0.0"

__all__ = ["cells", "mesh", "ucd", "cli"]