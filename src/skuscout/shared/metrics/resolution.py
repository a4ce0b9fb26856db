# 📈 skuscout/shared/metrics/resolution.py
"""
📈 Prometheus-метрики конвеєра пошуку товару.

🔹 `PROBE_TOTAL` рахує вердикти проби по кожному ринку.
🔹 `RESOLUTION_TOTAL` / `RESOLUTION_LATENCY` описують запити цілком.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram                # 📊 Prometheus-метрики

# ================================
# 📊 ЛІЧИЛЬНИКИ
# ================================
PROBE_TOTAL = Counter(
    "skuscout_probe_total",                                     # 🏷️ Імʼя метрики
    "Market probes by verdict",                                 # 📝 Опис у Prometheus
    ["market", "verdict"],
)

RESOLUTION_TOTAL = Counter(
    "skuscout_resolution_total",
    "Resolved queries by final status",
    ["status"],
)

# ================================
# ⏱️ ГІСТОГРАМА ЛАТЕНТНОСТІ
# ================================
RESOLUTION_LATENCY = Histogram(
    "skuscout_resolution_seconds",
    "Time to resolve one identifier across markets",
    buckets=(1, 2.5, 5, 10, 20, 40, 80, 160, 320),
)


__all__ = ["PROBE_TOTAL", "RESOLUTION_TOTAL", "RESOLUTION_LATENCY"]
