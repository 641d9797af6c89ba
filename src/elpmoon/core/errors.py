class ElpError(Exception):
    """Base error."""

class ContractViolation(ElpError, ValueError):
    """Raised when a caller breaks a precondition (degree, table shape, frame name)."""

class TableFormatError(ElpError):
    """Raised when an ELP term file cannot be parsed."""
