# 🚨 skuscout/errors/__init__.py
"""
🚨 Подання помилок оператору.
"""

from .error_presenter import FALLBACK_MESSAGE, present_error

__all__ = ["FALLBACK_MESSAGE", "present_error"]
