# 🧩 skuscout/domain/resolution/__init__.py
"""
🧩 Пакет `domain.resolution`: статуси, DTO та контракти конвеєра пошуку.

🔹 `status.py`: FetchStatus / VerdictKind / ResolutionStatus.
🔹 `models.py`: FetchOutcome, AvailabilityVerdict, ProductRecord, ResolutionResult.
🔹 `interfaces.py`: IDocument / IElement / IPageFetcher.
"""

from .interfaces import IDocument, IElement, IPageFetcher, WaitCondition
from .models import (
    REASON_CRITICAL_ABSENT,
    REASON_ERROR_PHRASE,
    AvailabilityVerdict,
    DiagnosticEntry,
    FetchOutcome,
    ProductQuery,
    ProductRecord,
    ResolutionResult,
)
from .status import FetchStatus, ResolutionStatus, VerdictKind

__all__ = [
    "AvailabilityVerdict",
    "DiagnosticEntry",
    "FetchOutcome",
    "FetchStatus",
    "IDocument",
    "IElement",
    "IPageFetcher",
    "ProductQuery",
    "ProductRecord",
    "REASON_CRITICAL_ABSENT",
    "REASON_ERROR_PHRASE",
    "ResolutionResult",
    "ResolutionStatus",
    "VerdictKind",
    "WaitCondition",
]
