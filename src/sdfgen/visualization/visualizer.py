"""Render a signed distance field as an inspectable RGBA image.

Interior distances go to the blue channel, normalized by the deepest
interior value; exterior distances go to green, normalized by the farthest
exterior value. Red is always empty and alpha always opaque, so the
boundary shows up as the dark seam between the two ramps.
"""

import logging
from typing import TYPE_CHECKING

import numpy as np
import xarray as xr

from sdfgen.contracts import DegenerateField

if TYPE_CHECKING:
    from sdfgen.schemas import InternalConfig

__all__ = ['FieldVisualizer']

logger = logging.getLogger(__name__)

_CHANNEL_DTYPES = {8: np.uint8, 16: np.uint16}


class FieldVisualizer:
    """Map a distance field to a blue/green RGBA preview."""

    def __init__(self, config: "InternalConfig"):
        self.config = config
        self.dtype = _CHANNEL_DTYPES[config.visualizer.bit_depth]
        self.max_value = np.iinfo(self.dtype).max

    def render(self, field: xr.DataArray) -> np.ndarray:
        """Render ``field`` to an (H, W, 4) RGBA array.

        Raises
        ------
        DegenerateField
            If the field is empty, holds non-finite values or is constant
            (min == max).
        """
        values = np.asarray(field.values, dtype=np.float64)
        if values.size == 0:
            raise DegenerateField("Cannot render an empty field")
        bad = int(np.count_nonzero(~np.isfinite(values)))
        if bad:
            raise DegenerateField(f"Cannot normalize a field with {bad} non-finite values")

        vmin = float(values.min())
        vmax = float(values.max())
        if vmin == vmax:
            raise DegenerateField(f"Cannot normalize a constant field (min == max == {vmin})")
        logger.debug("Rendering field: min=%.4f, max=%.4f", vmin, vmax)

        magnitude = np.abs(values)
        interior = values < 0

        blue = np.zeros_like(magnitude)
        green = np.zeros_like(magnitude)
        if interior.any():
            blue[interior] = magnitude[interior] / abs(vmin) * self.max_value
        if (~interior).any() and vmax != 0:
            green[~interior] = magnitude[~interior] / abs(vmax) * self.max_value

        image = np.zeros(values.shape + (4,), dtype=self.dtype)
        image[..., 1] = green.astype(self.dtype)
        image[..., 2] = blue.astype(self.dtype)
        image[..., 3] = self.max_value
        return image
