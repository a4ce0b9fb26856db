# 🏗️ skuscout/infrastructure/__init__.py
"""
🏗️ Інфраструктурний шар: браузер, проба наявності, екстракція та контролер запиту.
"""
