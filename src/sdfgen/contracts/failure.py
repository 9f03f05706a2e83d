"""Centralized failure taxonomy for the SDF pipeline.

Two families of errors exist:

- ``SdfError`` subclasses describe bad input or an unusable environment
  (unparsable color, unreadable file, corrupt field, degenerate field).
  Each stage raises them at its own boundary and aborts; nothing recovers.
- ``ContractViolation`` means a stage did not produce the invariants it
  promised. That is a bug in pipeline logic, not a user error.
"""


class SdfError(Exception):
    """Base class for all user-facing pipeline failures."""
    pass


class InvalidInput(SdfError, ValueError):
    """Bad arguments, unparsable color, zero-sized grid or undecodable image."""
    pass


class IOFailure(SdfError):
    """A file could not be opened, read or written."""
    pass


class CorruptData(SdfError, ValueError):
    """Serialized field bytes do not match the declared dimensions."""
    pass


class DegenerateField(SdfError, ValueError):
    """Field cannot be normalized for display (empty, or min == max)."""
    pass


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    Key distinction:
    - SdfError: user/input error, reported and exit status 1
    - ContractViolation: pipeline bug (programmer error)
    """
    pass
