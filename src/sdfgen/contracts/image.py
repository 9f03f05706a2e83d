"""Visualization stage contract.

Enforces the guarantee that a rendered preview matches its field's grid and
is fully opaque with an empty red channel.
"""

import numpy as np
import xarray as xr
from sdfgen.contracts.base import require


def assert_rendered(image: np.ndarray, field: xr.DataArray) -> None:
    """Enforce visualization stage contract.

    Parameters
    ----------
    image : np.ndarray
        RGBA image from FieldVisualizer.render()

    field : xr.DataArray
        Field the image was rendered from

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        image.shape == field.shape + (4,),
        f"Render contract violated: image shape {image.shape}, expected {field.shape + (4,)}"
    )
    require(
        image.dtype in (np.uint8, np.uint16),
        f"Render contract violated: dtype is {image.dtype}, expected uint8 or uint16"
    )
    max_value = np.iinfo(image.dtype).max
    require(
        bool(np.all(image[..., 3] == max_value)),
        "Render contract violated: alpha channel is not fully opaque"
    )
    require(
        not image[..., 0].any(),
        "Render contract violated: red channel is not empty"
    )
