# 📦 skuscout/config/setup/__init__.py
"""
📦 Складання залежностей застосунку.
"""

from .container import Container

__all__ = ["Container"]
