# 🔤 skuscout/shared/utils/text.py
"""
🔤 Нормалізація тексту, витягнутого зі сторінок вітрин.
"""

from __future__ import annotations

import re
from typing import Optional

_WS_RE = re.compile(r"\s+")
_BIDI_RE = re.compile("[\u200b\u200e\u200f\u202a-\u202e\ufeff]")   # 🧭 Невидимі маркери напрямку тексту
_KEY_TAIL_RE = re.compile(r"[\s:：]+$")


def norm_ws(text: Optional[str]) -> str:
    """Стискає пробіли та обрізає краї; None → ""."""
    if not text:
        return ""
    return _WS_RE.sub(" ", text).strip()


def clean_key(text: Optional[str]) -> str:
    """Ключ характеристики без bidi-маркерів і хвостової двокрапки ("Weight : " → "Weight")."""
    cleaned = _BIDI_RE.sub("", text or "")
    return _KEY_TAIL_RE.sub("", norm_ws(cleaned))


def clean_value(text: Optional[str]) -> str:
    """Значення характеристики без bidi-маркерів."""
    return norm_ws(_BIDI_RE.sub("", text or ""))


__all__ = ["norm_ws", "clean_key", "clean_value"]
