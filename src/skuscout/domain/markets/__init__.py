# 🌍 skuscout/domain/markets/__init__.py
"""
🌍 Пакет `domain.markets`: ринки та їхній упорядкований каталог.
"""

from .catalog import PLACEHOLDER, Market, MarketCatalog

__all__ = ["Market", "MarketCatalog", "PLACEHOLDER"]
