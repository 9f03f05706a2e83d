"""Grid containers shared by every pipeline stage.

Masks and distance fields are 2D ``xr.DataArray`` objects with dims
``("y", "x")`` and integer cell coordinates, so rows are y (outer) and
columns are x (inner), matching the serialized row-major layout.
"""

import numpy as np
import xarray as xr


def _cell_coords(height: int, width: int) -> dict:
    return {"y": np.arange(height), "x": np.arange(width)}


def make_mask(values) -> xr.DataArray:
    """Wrap a 2D array of truthy values as a boolean mask (True = filled)."""
    data = np.asarray(values, dtype=bool)
    height, width = data.shape
    return xr.DataArray(
        data,
        dims=("y", "x"),
        coords=_cell_coords(height, width),
        name="mask",
        attrs={"long_name": "Occupancy mask", "units": "1"},
    )


def make_field(values) -> xr.DataArray:
    """Wrap a 2D array of signed distances as a float32 distance field."""
    data = np.asarray(values, dtype=np.float32)
    height, width = data.shape
    return xr.DataArray(
        data,
        dims=("y", "x"),
        coords=_cell_coords(height, width),
        name="sdf",
        attrs={"long_name": "Signed distance to nearest opposite-class cell", "units": "cells"},
    )
