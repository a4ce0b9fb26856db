# 🚨 skuscout/shared/errors.py
"""
🚨 Ієрархія доменних винятків skuscout.

🔹 `AppError`: базовий виняток застосунку з кодом помилки.
🔹 `UserVisibleError`: помилки, текст яких можна показати оператору як є.
🔹 Мережеві та сесійні помилки несуть контекст (url, timeout) для `logger.extra`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                  # 🧾 Логування створення винятків
from typing import Dict, Optional                               # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from skuscout.shared.utils.logger import LOG_NAME               # 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.errors")


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Стабільні коди помилок для логів і JSON-виводу."""

    NETWORK = "network_error"                                   # 🌐 Мережеві збої
    TIMEOUT = "timeout"                                         # ⏳ Перевищено таймаут
    INVALID_URL = "invalid_url"                                 # 🔗 Некоректна адреса
    SESSION = "session_error"                                   # 🧭 Не вдалося запустити браузер
    CONFIG = "config_error"                                     # ⚙️ Некоректна конфігурація
    UNKNOWN = "unknown_error"                                   # ❓ Резервний код


# ================================
# 🧠 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧠 Базовий виняток застосунку."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message                                  # 💬 Короткий опис
        self.details = details                                  # 🧾 Технічні подробиці

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra


class UserVisibleError(AppError):
    """👀 Помилка, повідомлення якої безпечно показати оператору."""


# ================================
# 🌐 МЕРЕЖА ТА БРАУЗЕР
# ================================
class NetworkError(UserVisibleError):
    """🌐 Збій зʼєднання, DNS або будь-яка помилка навігації, крім таймауту."""

    code = ErrorCode.NETWORK

    def __init__(self, *, url: Optional[str] = None, detail: Optional[str] = None) -> None:
        super().__init__("Мережева помилка", details=detail)
        self.url = url
        logger.debug("🌐 NetworkError created", extra={"url": url, "details": detail})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        return extra


class RequestTimeout(NetworkError):
    """⏳ Сторінка не завантажилась за відведений час."""

    code = ErrorCode.TIMEOUT

    def __init__(
        self,
        *,
        url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(url=url, detail=detail)
        self.message = "Перевищено час очікування"
        self.timeout_ms = timeout_ms

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.timeout_ms is not None:
            extra["timeout_ms"] = self.timeout_ms
        return extra


class InvalidUrlError(UserVisibleError):
    """🔗 Адреса не має схеми http(s)://."""

    code = ErrorCode.INVALID_URL

    def __init__(self, *, url: Optional[str] = None, detail: Optional[str] = None) -> None:
        super().__init__("Некоректна адреса", details=detail)
        self.url = url


class SessionStartError(UserVisibleError):
    """🧭 Не вдалося запустити браузерну сесію; фатально лише для поточного запиту."""

    code = ErrorCode.SESSION

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__("Не вдалося запустити браузер", details=detail)


class ConfigError(AppError, ValueError):
    """⚙️ Конфігурація ринків чи стратегій некоректна."""

    code = ErrorCode.CONFIG


__all__ = [
    "AppError",
    "ConfigError",
    "ErrorCode",
    "InvalidUrlError",
    "NetworkError",
    "RequestTimeout",
    "SessionStartError",
    "UserVisibleError",
]
