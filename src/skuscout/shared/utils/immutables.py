# 🧊 skuscout/shared/utils/immutables.py
"""
🧊 Утиліти для «заморожених» структур даних.

🔹 Конвертує словники, списки та набори у їхні незмінні аналоги (порядок ключів зберігається).
🔹 Використовується для каталогу ринків, плану екстракції та готових `ProductRecord`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from collections.abc import Iterable, Mapping                   # 🧰 Перевірки типів колекцій
from enum import Enum                                           # 🏷️ Перерахування
from types import MappingProxyType                              # 🔒 Незмінна обгортка над dict
from typing import Any

FrozenMapping = MappingProxyType                                # 🔄 Псевдонім для читаємості

EMPTY_MAPPING: Mapping[str, str] = MappingProxyType({})         # 🪣 Спільна порожня мапа


def freeze(obj: Any) -> Any:
    """Рекурсивно перетворює колекції на незмінні аналоги."""
    if obj is None or isinstance(obj, (str, bytes, int, float, bool, Enum)):
        return obj
    if isinstance(obj, Mapping):                                # 🧭 Словники → MappingProxyType
        return MappingProxyType({key: freeze(value) for key, value in obj.items()})
    if isinstance(obj, (set, frozenset)):
        return frozenset(freeze(value) for value in obj)
    if isinstance(obj, (list, tuple)) or _is_iterable_but_not_str(obj):
        try:
            return tuple(freeze(value) for value in obj)
        except TypeError:
            return obj
    return obj


def thaw(obj: Any) -> Any:
    """Зворотна операція до `freeze`: мапи → dict, кортежі → list (для JSON)."""
    if isinstance(obj, Mapping):
        return {key: thaw(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [thaw(value) for value in obj]
    if isinstance(obj, frozenset):
        return sorted(thaw(value) for value in obj)
    return obj


def is_frozen_mapping(obj: Any) -> bool:
    """Перевіряє, чи є обʼєкт замороженою мапою (`freeze(dict)`)."""
    return isinstance(obj, MappingProxyType)


def _is_iterable_but_not_str(obj: Any) -> bool:
    return isinstance(obj, Iterable) and not isinstance(obj, (str, bytes))


__all__ = ["EMPTY_MAPPING", "FrozenMapping", "freeze", "thaw", "is_frozen_mapping"]
