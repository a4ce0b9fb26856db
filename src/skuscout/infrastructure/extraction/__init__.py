# 🧾 skuscout/infrastructure/extraction/__init__.py
"""
🧾 Каскадна екстракція полів товару: стратегії, план і екстрактор.
"""

from __future__ import annotations

from .attribute_extractor import (
    AttributeExtractor,
    ExtractedFields,
    ExtractionPlan,
    NOTE_DESCRIPTION_MISSING,
    merge_attributes,
)
from .strategies import AttemptResult, KeyValueStrategy, ListStrategy, TextStrategy

__all__ = [
    "AttemptResult",
    "AttributeExtractor",
    "ExtractedFields",
    "ExtractionPlan",
    "KeyValueStrategy",
    "ListStrategy",
    "NOTE_DESCRIPTION_MISSING",
    "TextStrategy",
    "merge_attributes",
]
