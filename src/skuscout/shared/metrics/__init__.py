# 📊 skuscout/shared/metrics/__init__.py
"""
📊 Метрики Prometheus для конвеєра пошуку товару.
"""

from __future__ import annotations

from .exporters import maybe_start_prometheus
from .resolution import PROBE_TOTAL, RESOLUTION_LATENCY, RESOLUTION_TOTAL

__all__ = [
    "PROBE_TOTAL",
    "RESOLUTION_LATENCY",
    "RESOLUTION_TOTAL",
    "maybe_start_prometheus",
]
