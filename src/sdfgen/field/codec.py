"""Binary persistence for distance fields.

Layout (no padding, byte order from ``codec.byte_order``)::

    uint32 width | uint32 height | width*height float32, row-major (y outer, x inner)

Floats are copied bit-for-bit in both directions; no value is re-encoded.
"""

import logging
from pathlib import Path
from typing import Union, TYPE_CHECKING

import numpy as np
import xarray as xr

from sdfgen.contracts import CorruptData, InvalidInput, IOFailure
from sdfgen.raster.grid import make_field

if TYPE_CHECKING:
    from sdfgen.schemas import InternalConfig

__all__ = ['FieldCodec', 'HEADER_SIZE']

logger = logging.getLogger(__name__)

HEADER_SIZE = 8
_BYTE_ORDER_PREFIX = {"big": ">", "little": "<"}


class FieldCodec:
    """Encode/decode distance fields to the flat binary format."""

    def __init__(self, config: "InternalConfig"):
        self.config = config
        prefix = _BYTE_ORDER_PREFIX[config.codec.byte_order]
        self.header_dtype = np.dtype(f"{prefix}u4")
        self.value_dtype = np.dtype(f"{prefix}f4")

    def encode(self, field: xr.DataArray) -> bytes:
        """Serialize a (y, x) field to bytes."""
        values = np.asarray(field.values)
        if values.ndim != 2:
            raise InvalidInput(f"Field must be 2D, got {values.ndim} dims")
        height, width = values.shape

        header = np.array([width, height], dtype=self.header_dtype)
        # float32 -> float32 with a byte swap at most, so bits are preserved
        body = values.astype(np.float32, copy=False).astype(self.value_dtype)
        return header.tobytes() + body.tobytes(order="C")

    def decode(self, data: bytes) -> xr.DataArray:
        """Deserialize bytes produced by encode().

        Raises
        ------
        CorruptData
            If the data is shorter than the header or its length does not
            match the header's dimensions.
        InvalidInput
            If the header declares a zero-sized grid.
        """
        if len(data) < HEADER_SIZE:
            raise CorruptData(f"Field data too short: {len(data)} bytes, header needs {HEADER_SIZE}")

        width, height = (int(v) for v in np.frombuffer(data, dtype=self.header_dtype, count=2))
        expected = HEADER_SIZE + 4 * width * height
        if len(data) != expected:
            raise CorruptData(
                f"Field data is {len(data)} bytes, expected {expected} for {width}x{height}"
            )
        if width == 0 or height == 0:
            raise InvalidInput(f"Zero-sized grid: {width}x{height}")

        values = np.frombuffer(data, dtype=self.value_dtype, offset=HEADER_SIZE)
        values = values.astype(np.float32).reshape(height, width)
        return make_field(values)

    def write(self, field: xr.DataArray, path: Union[str, Path]) -> Path:
        """Encode and write a field to ``path``."""
        path = Path(path)
        data = self.encode(field)
        try:
            path.write_bytes(data)
        except OSError as e:
            raise IOFailure(f"Failed to write field {path}: {e}") from e
        logger.info("Wrote field %s (%d bytes)", path.name, len(data))
        return path

    def read(self, path: Union[str, Path]) -> xr.DataArray:
        """Read and decode a field from ``path``."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise IOFailure(f"Failed to read field {path}: {e}") from e
        field = self.decode(data)
        logger.info("Read field %s: %dx%d", path.name, field.sizes["x"], field.sizes["y"])
        return field
