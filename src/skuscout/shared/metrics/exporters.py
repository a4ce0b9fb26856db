# 🚀 skuscout/shared/metrics/exporters.py
"""
🚀 Легкий bootstrap HTTP-експортера `/metrics`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import start_http_server                 # 🌐 Вбудований HTTP-сервер

# 🔠 Системні імпорти
import logging
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from skuscout.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.metrics")

_started_port: Optional[int] = None                             # 🔒 Експортер стартує лише раз


def maybe_start_prometheus(port: Optional[int], *, enabled: bool = True) -> bool:
    """
    Запускає експортер на `port`, якщо метрики увімкнені.

    Returns:
        bool: True, якщо експортер працює після виклику.
    """
    global _started_port
    if not enabled or not port:
        logger.debug("📈 Prometheus exporter вимкнено")
        return False
    if _started_port is not None:
        return True
    try:
        start_http_server(int(port))
    except OSError as exc:
        logger.warning("⚠️ Не вдалося підняти /metrics на порту %s: %s", port, exc)
        return False
    _started_port = int(port)
    logger.info("📈 Prometheus exporter слухає порт %s", port)
    return True


__all__ = ["maybe_start_prometheus"]
