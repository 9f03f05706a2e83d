"""Mask stage contract.

Enforces the guarantee that after extraction (or bitmap decoding) the mask
is a non-empty 2D boolean grid ready for the distance field engine.
"""

import xarray as xr
from sdfgen.contracts.base import require


def assert_mask(mask: xr.DataArray) -> None:
    """Enforce mask stage contract.

    Parameters
    ----------
    mask : xr.DataArray
        Mask from MaskExtractor.extract() or mask_from_bitmap()

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        isinstance(mask, xr.DataArray),
        f"Mask contract violated: expected xr.DataArray, got {type(mask).__name__}"
    )
    require(
        mask.dims == ("y", "x"),
        f"Mask contract violated: dims are {mask.dims}, expected ('y', 'x')"
    )
    require(
        mask.dtype == bool,
        f"Mask contract violated: dtype is {mask.dtype}, expected bool"
    )
    require(
        mask.size > 0,
        "Mask contract violated: zero-sized grid"
    )
