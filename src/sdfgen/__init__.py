"""`sdfgen` - exact signed distance fields from occupancy masks.

Subpackages:
- raster: Image I/O, reference-color mask extraction
- field: Distance field engine, binary field codec
- visualization: Blue/green field previews
- pipeline: Stage runner with contract checks
- cli: Command-line entry point
"""

__version__ = "0.1.0"
