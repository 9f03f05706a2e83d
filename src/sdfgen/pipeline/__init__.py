"""Pipeline modules.

- processor: Stage runner for the three file-to-file commands
"""

from sdfgen.pipeline.processor import SdfProcessor

__all__ = [
    "SdfProcessor",
]
