"""Raster modules.

- image_io: Decode/encode images with OpenCV
- mask_extractor: Reference-color mask extraction, mask bitmaps
- grid: Mask and field containers
"""

from sdfgen.raster.image_io import read_image, write_image
from sdfgen.raster.mask_extractor import MaskExtractor, ReferenceColor, parse_color
from sdfgen.raster.grid import make_mask, make_field

__all__ = [
    "read_image",
    "write_image",
    "MaskExtractor",
    "ReferenceColor",
    "parse_color",
    "make_mask",
    "make_field",
]
