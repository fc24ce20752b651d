#
# config/__init__.py
#
"""
Configuration handling sub-package for rpbasic.

Exports the loading function and the configuration model.
"""

from .loader import load_config
from .models import ReportPortalConfig

__all__ = [
    "ReportPortalConfig",
    "load_config",
]

# 🔼⚙️
