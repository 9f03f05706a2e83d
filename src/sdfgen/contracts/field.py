"""Distance field stage contract.

Enforces the guarantee that the engine produced a finite float field with
the same shape as its mask, negative exactly on filled cells.
"""

import numpy as np
import xarray as xr
from sdfgen.contracts.base import require


def assert_field(field: xr.DataArray, mask: xr.DataArray = None) -> None:
    """Enforce distance field stage contract.

    Parameters
    ----------
    field : xr.DataArray
        Field from DistanceFieldEngine.compute_sdf() or FieldCodec.decode()

    mask : xr.DataArray, optional
        Mask the field was computed from. When given, shape and sign
        agreement are verified as well.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        field.dims == ("y", "x"),
        f"Field contract violated: dims are {field.dims}, expected ('y', 'x')"
    )
    require(
        field.dtype.kind == "f",
        f"Field contract violated: dtype is {field.dtype}, expected float"
    )
    require(
        field.size > 0,
        "Field contract violated: zero-sized grid"
    )

    values = field.values
    require(
        bool(np.all(np.isfinite(values))),
        "Field contract violated: non-finite distances"
    )

    if mask is None:
        return

    require(
        field.shape == mask.shape,
        f"Field contract violated: shape {field.shape} does not match mask {mask.shape}"
    )
    mismatched = int(np.count_nonzero((values < 0) != mask.values))
    require(
        mismatched == 0,
        f"Field contract violated: sign disagrees with mask on {mismatched} cells"
    )
