"""
Utilities package for the stress tool.

Exports shared logging helpers. Keep this package free of domain logic.
"""

from newts_stress.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
