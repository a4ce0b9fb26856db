# 🖥️ skuscout/cli/__init__.py
"""
🖥️ Консольний інтерфейс: цикл вводу, рендер звітів, точка входу.
"""

from .input_loop import InputLoop
from .report_renderer import NOT_FOUND_TEXT, ReportRenderer

__all__ = ["InputLoop", "NOT_FOUND_TEXT", "ReportRenderer"]
