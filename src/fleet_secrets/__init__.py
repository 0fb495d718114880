"""Secret-handling primitives for the fleet orchestration service."""

__version__ = "0.1.0"

__all__ = ["config", "security", "utils"]
