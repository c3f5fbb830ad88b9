"""Domain exceptions."""


class RoleGateError(Exception):
    """Base exception for RoleGate."""

    pass


class PermissionDenied(RoleGateError):
    """Actor does not have permission for the requested action."""

    pass


class NotFound(RoleGateError):
    """Requested record was not found."""

    pass


class ValidationError(RoleGateError):
    """Validation failed for input data."""

    pass


class Conflict(RoleGateError):
    """Record changed between the authorization check and the write."""

    pass
