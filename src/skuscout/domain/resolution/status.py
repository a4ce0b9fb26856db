# 🧩 skuscout/domain/resolution/status.py
"""
🧩 Перерахування станів конвеєра: результат завантаження, вердикт проби, підсумок запиту.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class FetchStatus(str, Enum):
    """Результат спроби завантажити документ."""
    LOADED = "loaded"                                           # 📄 Документ готовий
    TIMED_OUT = "timed_out"                                     # ⏳ Вичерпано T_load
    NETWORK_ERROR = "network_error"                             # 🌐 Збій мережі / навігації

    def __str__(self) -> str:
        return self.value


@unique
class VerdictKind(str, Enum):
    """Трьохстановий вердикт наявності товару на одному ринку."""
    EXISTS = "exists"                                           # ✅ Справжня сторінка товару
    NOT_FOUND = "not_found"                                     # 🚫 Товару немає
    INCONCLUSIVE = "inconclusive"                               # ❔ Помилка, нічого не відомо

    def __str__(self) -> str:
        return self.value

    def emoji(self) -> str:
        if self is VerdictKind.EXISTS:
            return "✅"
        if self is VerdictKind.NOT_FOUND:
            return "🚫"
        return "❔"


@unique
class ResolutionStatus(str, Enum):
    """Термінальний стан запиту."""
    FOUND = "found"
    NOT_FOUND = "not_found"

    def __str__(self) -> str:
        return self.value


__all__ = ["FetchStatus", "VerdictKind", "ResolutionStatus"]
