"""The single enforcement primitive used by every stage contract."""

from sdfgen.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Raise ContractViolation with ``message`` unless ``condition`` holds.

    Examples
    --------
    >>> require(mask.dtype == bool, "Mask contract violated: dtype must be bool")
    """
    if not condition:
        raise ContractViolation(message)
