# 🧩 skuscout/shared/__init__.py
"""
🧩 Спільний шар: помилки, метрики та утиліти, що не залежать від домену.
"""
