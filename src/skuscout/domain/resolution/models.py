# 📦 skuscout/domain/resolution/models.py
"""
📦 DTO конвеєра пошуку товару.

🔹 `FetchOutcome` / `AvailabilityVerdict`: теговані варіанти (enum-тег + payload).
🔹 `ProductRecord`: незмінний запис товару, створюється рівно один раз на запит.
🔹 `ResolutionResult`: Found(record) або NotFound + діагностичний журнал.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from skuscout.shared.utils.immutables import EMPTY_MAPPING, freeze, thaw
from .interfaces import IDocument
from .status import FetchStatus, ResolutionStatus, VerdictKind

# ================================
# 🔎 ЗАПИТ
# ================================
@dataclass(frozen=True, slots=True)
class ProductQuery:
    """Запит оператора: непрозорий ідентифікатор товару."""

    identifier: str

    def __post_init__(self) -> None:
        cleaned = (self.identifier or "").strip()
        if not cleaned:
            raise ValueError("identifier must be non-empty")
        object.__setattr__(self, "identifier", cleaned)


# ================================
# 🌐 РЕЗУЛЬТАТ ЗАВАНТАЖЕННЯ
# ================================
@dataclass(frozen=True, slots=True)
class FetchOutcome:
    """Loaded(document) | TimedOut(detail) | NetworkError(detail)."""

    status: FetchStatus
    document: Optional[IDocument] = None
    detail: str = ""

    @classmethod
    def loaded(cls, document: IDocument) -> "FetchOutcome":
        return cls(FetchStatus.LOADED, document=document)

    @classmethod
    def timed_out(cls, detail: str = "page load timed out") -> "FetchOutcome":
        return cls(FetchStatus.TIMED_OUT, detail=detail)

    @classmethod
    def network_error(cls, detail: str) -> "FetchOutcome":
        return cls(FetchStatus.NETWORK_ERROR, detail=detail)

    @property
    def is_loaded(self) -> bool:
        return self.status is FetchStatus.LOADED and self.document is not None


# ================================
# ⚖️ ВЕРДИКТ
# ================================
REASON_CRITICAL_ABSENT: str = "critical element absent"
REASON_ERROR_PHRASE: str = "error phrase matched"


@dataclass(frozen=True, slots=True)
class AvailabilityVerdict:
    """Exists | NotFound(reason) | Inconclusive(error)."""

    kind: VerdictKind
    detail: str = ""

    @classmethod
    def exists(cls) -> "AvailabilityVerdict":
        return cls(VerdictKind.EXISTS)

    @classmethod
    def not_found(cls, reason: str) -> "AvailabilityVerdict":
        return cls(VerdictKind.NOT_FOUND, reason)

    @classmethod
    def inconclusive(cls, error: str) -> "AvailabilityVerdict":
        return cls(VerdictKind.INCONCLUSIVE, error)

    @property
    def is_exists(self) -> bool:
        return self.kind is VerdictKind.EXISTS

    def describe(self) -> str:
        """Рядок для діагностичного журналу: `exists`, `not_found: <reason>`, ..."""
        if not self.detail:
            return self.kind.value
        return f"{self.kind.value}: {self.detail}"


# ================================
# 🧾 ЗАПИС ТОВАРУ
# ================================
@dataclass(frozen=True)
class ProductRecord:
    """Структурований запис товару з першого ринку, де він існує."""

    title: str
    description: str
    features: Tuple[str, ...]
    attributes: Mapping[str, str]
    source_market: str
    source_url: str
    description_list: Tuple[str, ...] = ()
    attribute_sources: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: EMPTY_MAPPING)
    notes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))
        object.__setattr__(self, "description_list", tuple(self.description_list))
        object.__setattr__(self, "notes", tuple(self.notes))
        object.__setattr__(self, "attributes", freeze(dict(self.attributes)))
        object.__setattr__(self, "attribute_sources", freeze(dict(self.attribute_sources)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "features": list(self.features),
            "attributes": thaw(self.attributes),
            "description_list": list(self.description_list),
            "attribute_sources": thaw(self.attribute_sources),
            "notes": list(self.notes),
            "source_market": self.source_market,
            "source_url": self.source_url,
        }


# ================================
# 🧭 ДІАГНОСТИКА ТА РЕЗУЛЬТАТ
# ================================
@dataclass(frozen=True, slots=True)
class DiagnosticEntry:
    """Один рядок журналу: ринок і його вердикт (або помилка)."""

    market: str
    outcome: str
    url: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"market": self.market, "outcome": self.outcome, "url": self.url}


@dataclass(frozen=True)
class ResolutionResult:
    """Found(record) або NotFound, завжди з журналом спроб."""

    query: ProductQuery
    record: Optional[ProductRecord] = None
    diagnostics: Tuple[DiagnosticEntry, ...] = ()
    elapsed_sec: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "diagnostics", tuple(self.diagnostics))

    @property
    def found(self) -> bool:
        return self.record is not None

    @property
    def status(self) -> ResolutionStatus:
        return ResolutionStatus.FOUND if self.found else ResolutionStatus.NOT_FOUND

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier": self.query.identifier,
            "status": self.status.value,
            "record": self.record.to_dict() if self.record else None,
            "diagnostics": [entry.to_dict() for entry in self.diagnostics],
            "elapsed_sec": round(self.elapsed_sec, 3),
        }


__all__ = [
    "AvailabilityVerdict",
    "DiagnosticEntry",
    "FetchOutcome",
    "ProductQuery",
    "ProductRecord",
    "REASON_CRITICAL_ABSENT",
    "REASON_ERROR_PHRASE",
    "ResolutionResult",
]
