# 🧩 skuscout/domain/__init__.py
"""
🧩 Доменний шар: ринки, вердикти, записи товару та контракти колабораторів. Без I/O.
"""
