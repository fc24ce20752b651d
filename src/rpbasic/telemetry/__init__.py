#
# src/rpbasic/telemetry/__init__.py
#
"""
Logging setup for rpbasic.
"""

from .logger import StructLogger, setup_logging

__all__ = [
    "StructLogger",
    "setup_logging",
]

# 🔼⚙️
