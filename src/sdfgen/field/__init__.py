"""Distance field modules.

- engine: Best-first exact vector propagation
- codec: Flat binary field format
"""

from sdfgen.field.engine import DistanceFieldEngine
from sdfgen.field.codec import FieldCodec

__all__ = [
    "DistanceFieldEngine",
    "FieldCodec",
]
