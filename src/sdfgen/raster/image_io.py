"""Raster image decoding and encoding.

Thin wrapper around OpenCV so the rest of the pipeline only ever sees
RGB(A) channel order and the project's own error types. OpenCV keeps
8- and 16-bit channel depths intact with ``IMREAD_UNCHANGED``, which the
16-bit mask bitmaps and previews depend on.
"""

import logging
import struct
from pathlib import Path
from typing import Optional, Tuple, Union

import cv2
import numpy as np

from sdfgen.contracts import InvalidInput, IOFailure

__all__ = ['read_image', 'write_image', 'to_rgba']

logger = logging.getLogger(__name__)

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _png_size(data: bytes) -> Optional[Tuple[int, int]]:
    """(width, height) from a PNG IHDR chunk, or None for other formats."""
    if len(data) < 24 or not data.startswith(_PNG_SIGNATURE) or data[12:16] != b"IHDR":
        return None
    return struct.unpack(">II", data[16:24])


def _check_pixel_limit(name: str, width: int, height: int, max_pixels: Optional[int]):
    if max_pixels is not None and width * height > max_pixels:
        raise InvalidInput(f"Image {name} has {width * height} pixels, limit is {max_pixels}")


def read_image(path: Union[str, Path], max_pixels: Optional[int] = None) -> np.ndarray:
    """Decode an image file into a numpy array.

    Parameters
    ----------
    path : str or Path
        Image file (PNG for the pipeline, any OpenCV format works).
    max_pixels : int, optional
        Images with more pixels than this are rejected. PNG dimensions are
        taken from the IHDR header, so oversized PNGs are rejected before
        any pixel buffer is allocated; other formats are checked after
        decoding. None means no limit beyond OpenCV's own.

    Returns
    -------
    np.ndarray
        (H, W) grayscale or (H, W, 3|4) RGB/RGBA array, uint8 or uint16.

    Raises
    ------
    IOFailure
        If the file does not exist or cannot be read.
    InvalidInput
        If the content cannot be decoded or exceeds ``max_pixels``.
    """
    path = Path(path)
    if not path.is_file():
        raise IOFailure(f"Image not found: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise IOFailure(f"Failed to read image {path}: {e}") from e

    header_size = _png_size(data)
    if header_size is not None:
        _check_pixel_limit(path.name, *header_size, max_pixels)

    try:
        image = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise InvalidInput(f"Failed to decode image {path}: {e}") from e

    if image is None:
        raise InvalidInput(f"Failed to decode image: {path}")

    height, width = image.shape[:2]
    _check_pixel_limit(path.name, width, height, max_pixels)

    if image.ndim == 3:
        if image.shape[2] == 3:
            image = image[..., ::-1]
        elif image.shape[2] == 4:
            image = image[..., [2, 1, 0, 3]]
        image = np.ascontiguousarray(image)

    logger.debug("Decoded %s: shape=%s, dtype=%s", path.name, image.shape, image.dtype)
    return image


def write_image(path: Union[str, Path], image: np.ndarray) -> Path:
    """Encode an RGB(A) or grayscale array to an image file.

    Raises
    ------
    IOFailure
        If OpenCV cannot encode or write the file.
    """
    path = Path(path)

    if image.ndim == 3 and image.shape[2] == 3:
        image = image[..., ::-1]
    elif image.ndim == 3 and image.shape[2] == 4:
        image = image[..., [2, 1, 0, 3]]

    try:
        ok = cv2.imwrite(str(path), np.ascontiguousarray(image))
    except cv2.error as e:
        raise IOFailure(f"Failed to write image {path}: {e}") from e

    if not ok:
        raise IOFailure(f"Failed to write image: {path}")

    logger.debug("Wrote %s: shape=%s, dtype=%s", path.name, image.shape, image.dtype)
    return path


def to_rgba(image: np.ndarray) -> np.ndarray:
    """Normalize a decoded image to (H, W, 4) RGBA in its own dtype.

    Grayscale is replicated into RGB; a missing alpha channel is filled
    with the dtype's maximum (fully opaque).
    """
    if image.ndim == 2:
        image = image[..., np.newaxis]

    channels = image.shape[2]
    if channels not in (1, 2, 3, 4):
        raise InvalidInput(f"Unsupported channel count: {channels}")

    if image.dtype.kind in "ui":
        opaque = np.iinfo(image.dtype).max
    else:
        opaque = 1.0

    if channels in (1, 2):
        rgb = np.repeat(image[..., :1], 3, axis=2)
        alpha = image[..., 1:2] if channels == 2 else None
    else:
        rgb = image[..., :3]
        alpha = image[..., 3:4] if channels == 4 else None

    if alpha is None:
        alpha = np.full(image.shape[:2] + (1,), opaque, dtype=image.dtype)

    return np.concatenate([rgb, alpha], axis=2)
