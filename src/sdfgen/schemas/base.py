"""Shared pydantic base for every sdfgen config schema."""

from pydantic import BaseModel, ConfigDict


class SdfBaseModel(BaseModel):
    """Strict base: unknown keys are errors, assignments are re-validated
    and string values are stripped before validation.
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
    )
