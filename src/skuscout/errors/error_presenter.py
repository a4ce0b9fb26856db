# 🧱 skuscout/errors/error_presenter.py
"""
🧱 Перетворює винятки на однорядкові повідомлення для оператора.

🔹 `UserVisibleError` показується як є (повідомлення + подробиці).
🔹 Технічні винятки отримують нейтральний текст; трасування лише у DEBUG-лозі.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from skuscout.shared.errors import AppError, ConfigError, SessionStartError, UserVisibleError
from skuscout.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.errors.presenter")

FALLBACK_MESSAGE: str = "Внутрішня помилка; подробиці у файлі логів"


def present_error(exc: BaseException, *, identifier: Optional[str] = None) -> str:
    """
    Формує один рядок для оператора.

    Args:
        exc: Виняток, що завершив запит.
        identifier: Ідентифікатор товару, якщо помилка стосується запиту.
    """
    prefix = f"[{identifier}] " if identifier else ""

    if isinstance(exc, SessionStartError):
        text = f"🧭 {exc}. Запит пропущено, можна ввести наступний"
    elif isinstance(exc, ConfigError):
        text = f"⚙️ {exc}"
    elif isinstance(exc, UserVisibleError):
        text = f"⚠️ {exc}"
    elif isinstance(exc, AppError):
        text = f"⚠️ {exc.message}"
    elif isinstance(exc, asyncio.TimeoutError):
        text = "⏳ Перевищено час очікування"
    elif isinstance(exc, KeyboardInterrupt):
        text = "⏹️ Перервано оператором"
    else:
        text = f"🔥 {FALLBACK_MESSAGE} ({type(exc).__name__})"

    logger.debug("🧱 present_error: %s", type(exc).__name__, exc_info=exc)
    return prefix + text


__all__ = ["FALLBACK_MESSAGE", "present_error"]
