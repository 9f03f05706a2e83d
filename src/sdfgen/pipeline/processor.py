"""SDF pipeline stage runner.

Runs the three file-to-file operations of the pipeline:

1. **prepare_bitmap**: reference color image -> 16-bit mask bitmap
2. **generate_sdf**: mask bitmap -> serialized distance field
3. **sdf_to_png**: serialized distance field -> RGBA preview image

Every stage output is checked by its contract before it is written.
"""

import logging
import time
from pathlib import Path
from typing import Sequence, Union, TYPE_CHECKING

import numpy as np
import xarray as xr

from sdfgen.raster.image_io import read_image, write_image
from sdfgen.raster.mask_extractor import MaskExtractor, mask_from_bitmap, mask_to_bitmap
from sdfgen.field.engine import DistanceFieldEngine
from sdfgen.field.codec import FieldCodec
from sdfgen.visualization.visualizer import FieldVisualizer
from sdfgen.contracts import assert_mask, assert_field, assert_rendered

if TYPE_CHECKING:
    from sdfgen.schemas import InternalConfig

__all__ = ['SdfProcessor']

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SdfProcessor:
    """Owns one instance of each stage and chains them file-to-file.

    Example usage::

        config = resolve_config(ParamConfig())
        processor = SdfProcessor(config)
        processor.prepare_bitmap("land.png", "land_mask.png", ["#2e8b57"])
        processor.generate_sdf("land_mask.png", "land.sdf")
        processor.sdf_to_png("land.sdf", "land_preview.png")

    Stage failures raise ``SdfError`` subclasses and are not caught here;
    a violated contract raises ``ContractViolation``.
    """

    def __init__(self, config: "InternalConfig"):
        self.config = config
        self.max_pixels = config.image.max_pixels

        self.extractor = MaskExtractor(config)
        self.engine = DistanceFieldEngine(config)
        self.codec = FieldCodec(config)
        self.visualizer = FieldVisualizer(config)

    def prepare_bitmap(self, input_image: PathLike, output_image: PathLike,
                       colors: Sequence[str]) -> xr.DataArray:
        """Extract the reference-color mask and write it as a 16-bit bitmap."""
        references = self.extractor.parse_colors(colors)
        logger.info("Preparing bitmap: %s, colors=%s", Path(input_image).name, list(colors))

        image = read_image(input_image, max_pixels=self.max_pixels)
        mask = self.extractor.extract(image, references)
        assert_mask(mask)

        write_image(output_image, mask_to_bitmap(mask))
        logger.info("Wrote mask bitmap: %s", output_image)
        return mask

    def generate_sdf(self, input_image: PathLike, output_field: PathLike) -> xr.DataArray:
        """Decode a mask bitmap, compute its distance field and serialize it."""
        logger.info("Generating SDF: %s", Path(input_image).name)

        mask = mask_from_bitmap(read_image(input_image, max_pixels=self.max_pixels))
        assert_mask(mask)

        start = time.perf_counter()
        field = self.engine.compute_sdf(mask)
        logger.info("Distance field computed in %.2f s", time.perf_counter() - start)
        assert_field(field, mask)

        self.codec.write(field, output_field)
        return field

    def sdf_to_png(self, input_field: PathLike, output_image: PathLike) -> np.ndarray:
        """Read a serialized field and write its RGBA preview."""
        logger.info("Rendering preview: %s", Path(input_field).name)

        field = self.codec.read(input_field)

        # render() rejects non-finite or constant fields read from disk
        image = self.visualizer.render(field)
        assert_field(field)
        assert_rendered(image, field)

        write_image(output_image, image)
        logger.info("Wrote preview: %s", output_image)
        return image
