"""RoleGate - role-based access control resolution engine."""

__version__ = "0.1.0"
