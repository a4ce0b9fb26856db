# 🧰 skuscout/shared/utils/__init__.py
"""
🧰 Спільні утиліти: логування, заморожені структури, нормалізація тексту.
"""

from .immutables import EMPTY_MAPPING, freeze, is_frozen_mapping, thaw
from .logger import LOG_NAME, get_logger, init_logging, init_logging_from_config
from .text import clean_key, clean_value, norm_ws

__all__ = [
    "EMPTY_MAPPING",
    "LOG_NAME",
    "clean_key",
    "clean_value",
    "freeze",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
    "is_frozen_mapping",
    "norm_ws",
    "thaw",
]
