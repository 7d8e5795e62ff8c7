"""CLI commands."""

from . import ct, main, node

__all__ = ["ct", "main", "node"]
