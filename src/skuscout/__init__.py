# 🔎 skuscout/__init__.py
"""
🔎 skuscout: пошук товару за ідентифікатором у регіональних вітринах Amazon.

🔹 Перевіряє ринки по черзі та зупиняється на першому, де товар існує.
🔹 Витягує структурований запис товару з напівструктурованої розмітки.
"""

__version__ = "0.3.0"
