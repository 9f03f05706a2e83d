"""Turn a reference color image into a binary occupancy mask.

A terrain map is painted with a few flat colors; the cells painted with any
of up to three reference colors form the interior (filled) region. Matching
is done per channel against a tolerance, never as a combined color distance,
so anti-aliased edges that drift on one channel fall outside the mask.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, TYPE_CHECKING

import numpy as np
import xarray as xr
from matplotlib.colors import to_rgba

from sdfgen.contracts import InvalidInput
from sdfgen.raster.grid import make_mask
from sdfgen.raster.image_io import to_rgba as image_to_rgba

if TYPE_CHECKING:
    from sdfgen.schemas import InternalConfig

__all__ = ['ReferenceColor', 'MaskExtractor', 'parse_color', 'mask_from_bitmap', 'mask_to_bitmap']

logger = logging.getLogger(__name__)

MAX_REFERENCE_COLORS = 3
BITMAP_FILLED = np.iinfo(np.uint16).max


@dataclass(frozen=True)
class ReferenceColor:
    """RGBA color with channels in [0, 1] and its per-channel match tolerance."""
    rgba: Tuple[float, float, float, float]
    tolerance: float

    def matches(self, pixels: np.ndarray) -> np.ndarray:
        """Boolean (H, W) array: True where every channel is within tolerance."""
        diff = np.abs(pixels - np.asarray(self.rgba, dtype=np.float64))
        return np.all(diff < self.tolerance, axis=-1)


def parse_color(text: str, tolerance: float) -> ReferenceColor:
    """Parse a color name or hex string (``#rgb``, ``#rrggbb``, ``#rrggbbaa``).

    Raises
    ------
    InvalidInput
        If matplotlib cannot interpret the string as a color.
    """
    try:
        rgba = to_rgba(text.strip())
    except (ValueError, AttributeError) as e:
        raise InvalidInput(f"Cannot parse color {text!r}") from e
    return ReferenceColor(rgba=tuple(float(c) for c in rgba), tolerance=tolerance)


def _normalized_rgba(image: np.ndarray) -> np.ndarray:
    """RGBA float64 pixels scaled to [0, 1] by the dtype's full range."""
    rgba = image_to_rgba(image)
    if rgba.dtype.kind in "ui":
        return rgba.astype(np.float64) / np.iinfo(rgba.dtype).max
    return rgba.astype(np.float64)


class MaskExtractor:
    """Config-driven reference color matcher."""

    def __init__(self, config: "InternalConfig"):
        self.config = config
        self.tolerance = config.extractor.tolerance
        self.max_logged_colors = config.extractor.max_logged_colors

        logger.debug("MaskExtractor initialized: tolerance=%s", self.tolerance)

    def parse_colors(self, texts: Sequence[str]) -> list:
        """Parse 1-3 color strings with the configured tolerance."""
        if not 1 <= len(texts) <= MAX_REFERENCE_COLORS:
            raise InvalidInput(
                f"Expected 1 to {MAX_REFERENCE_COLORS} reference colors, got {len(texts)}"
            )
        return [parse_color(text, self.tolerance) for text in texts]

    def extract(self, image: np.ndarray, colors: Sequence[ReferenceColor]) -> xr.DataArray:
        """Build the mask: a cell is filled iff it matches any reference color."""
        if not 1 <= len(colors) <= MAX_REFERENCE_COLORS:
            raise InvalidInput(
                f"Expected 1 to {MAX_REFERENCE_COLORS} reference colors, got {len(colors)}"
            )
        if image.ndim not in (2, 3) or image.shape[0] == 0 or image.shape[1] == 0:
            raise InvalidInput(f"Cannot extract a mask from image of shape {image.shape}")

        pixels = _normalized_rgba(image)

        filled = np.zeros(pixels.shape[:2], dtype=bool)
        for color in colors:
            filled |= color.matches(pixels)

        logger.info("Mask extracted: %d of %d cells filled (%d reference colors)",
                    int(filled.sum()), filled.size, len(colors))
        self._log_unmatched(image, filled)

        return make_mask(filled)

    def _log_unmatched(self, image: np.ndarray, filled: np.ndarray):
        """List distinct colors that matched no reference, for diagnosis."""
        if not logger.isEnabledFor(logging.DEBUG) or self.max_logged_colors == 0:
            return
        unmatched = image_to_rgba(image)[~filled]
        if unmatched.size == 0:
            return
        distinct = np.unique(unmatched.reshape(-1, 4), axis=0)
        shown = [tuple(int(c) for c in row) for row in distinct[:self.max_logged_colors]]
        logger.debug("Unmatched colors (%d distinct, RGBA, showing %d): %s",
                     len(distinct), len(shown), shown)


def mask_from_bitmap(image: np.ndarray) -> xr.DataArray:
    """Decode a mask bitmap: any non-zero color channel means filled."""
    if image.ndim == 3:
        channels = image[..., :3] if image.shape[2] >= 3 else image[..., :1]
        filled = np.any(channels != 0, axis=-1)
    else:
        filled = image != 0
    return make_mask(filled)


def mask_to_bitmap(mask: xr.DataArray) -> np.ndarray:
    """Encode a mask as a single-channel 16-bit bitmap (filled = 65535)."""
    return np.where(mask.values, BITMAP_FILLED, 0).astype(np.uint16)
