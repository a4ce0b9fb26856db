# ⚙️ skuscout/config/__init__.py
"""
⚙️ Пакет Config: централізована конфігурація та складання залежностей.

Цей пакет відповідає за:
- Завантаження налаштувань (.env, пакетний config.yaml, користувацький YAML, ENV).
- Створення та зв'язування сервісів через контейнер (`setup.container`).
"""

from .config_service import ConfigService

__all__ = ["ConfigService"]
