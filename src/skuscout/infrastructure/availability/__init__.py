# 🔎 skuscout/infrastructure/availability/__init__.py
"""
🔎 Проба наявності товару на одній вітрині.
"""

from __future__ import annotations

from .availability_probe import AvailabilityProbe, ProbeResult

__all__ = ["AvailabilityProbe", "ProbeResult"]
