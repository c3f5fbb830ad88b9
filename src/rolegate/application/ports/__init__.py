"""Application ports - interfaces for external adapters."""

from rolegate.application.ports.permission_store import PermissionStore

__all__ = [
    "PermissionStore",
]
