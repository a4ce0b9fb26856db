# 🧾 skuscout/infrastructure/extraction/attribute_extractor.py
"""
🧾 AttributeExtractor: best-effort запис товару зі сторінки, де товар існує.

🔹 Для кожного поля є впорядкований список стратегій; перша непорожня перемагає.
🔹 Характеристики з кількох несумісних схем зливаються: перший записаний ключ лишається.
🔹 Відсутність будь-якого поля дає нульове значення; екстракція ніколи не падає.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

# 🧩 Внутрішні модулі проєкту
from skuscout.config.config_service import ConfigService
from skuscout.domain.resolution import IDocument, ProductRecord
from skuscout.shared.errors import ConfigError
from skuscout.shared.utils.immutables import EMPTY_MAPPING, freeze
from skuscout.shared.utils.logger import LOG_NAME
from .strategies import AttemptResult, KeyValueStrategy, ListStrategy, TextStrategy

logger = logging.getLogger(f"{LOG_NAME}.extraction")

NOTE_DESCRIPTION_MISSING: str = "description not found"

DEFAULT_EXTRACTION: Dict[str, Any] = {
    "title": ["#productTitle"],
    "description": [
        "#productDescription p",
        ".a-section.a-spacing-medium #productOverview_feature_div",
    ],
    "features": ["#featurebullets_feature_div .a-unordered-list .a-list-item"],
    "description_list": [".a-unordered-list.a-vertical.a-spacing-small .a-list-item"],
    "attributes": [
        {"name": "product_table", "rows": ".a-keyvalue.prodDetTable tbody tr", "key": "th", "value": "td"},
        {
            "name": "detail_bullets",
            "rows": "#detailBulletsWrapper_feature_div .detail-bullet-list .a-list-item",
            "key": ".a-text-bold",
            "value": "span:not(.a-text-bold)",
        },
    ],
}


# ================================
# 🧮 ЗЛИТТЯ ХАРАКТЕРИСТИК
# ================================
def merge_attributes(tables: Iterable[Mapping[str, str]]) -> Dict[str, str]:
    """
    Зливає таблиці характеристик у порядку оголошення стратегій.

    Ключ, який уже записала раніша таблиця, не перезаписується
    (порядок вставки результату = порядок пріоритету).
    """
    merged: Dict[str, str] = {}
    for table in tables:
        for key, value in table.items():
            if key not in merged:
                merged[key] = value
    return merged


# ================================
# 📐 ПЛАН ЕКСТРАКЦІЇ
# ================================
def _as_selectors(raw: Union[str, Sequence[str], None], field_name: str) -> Tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        raise ConfigError("Селектори поля мають бути списком", details=field_name)
    return tuple(str(s).strip() for s in raw if s and str(s).strip())


@dataclass(frozen=True)
class ExtractionPlan:
    """Незмінний набір стратегій по кожному полю."""

    title: Tuple[TextStrategy, ...]
    description: Tuple[TextStrategy, ...]
    features: Tuple[ListStrategy, ...]
    description_list: Tuple[ListStrategy, ...]
    attributes: Tuple[KeyValueStrategy, ...]

    @classmethod
    def from_config(cls, section: Optional[Mapping[str, Any]]) -> "ExtractionPlan":
        """Будує план з розділу `extraction`; відсутні поля беруться з дефолтів."""
        data: Dict[str, Any] = dict(DEFAULT_EXTRACTION)
        data.update({k: v for k, v in (section or {}).items() if v is not None})

        attributes: List[KeyValueStrategy] = []
        for index, entry in enumerate(data.get("attributes") or []):
            if not isinstance(entry, Mapping):
                raise ConfigError("Стратегія характеристик має бути словником", details=f"attributes[{index}]")
            missing = [k for k in ("rows", "key", "value") if not entry.get(k)]
            if missing:
                raise ConfigError("Неповна стратегія характеристик", details=f"attributes[{index}]: {missing}")
            attributes.append(
                KeyValueStrategy(
                    name=str(entry.get("name") or f"table_{index}"),
                    rows=str(entry["rows"]),
                    key=str(entry["key"]),
                    value=str(entry["value"]),
                )
            )

        return cls(
            title=tuple(TextStrategy(s) for s in _as_selectors(data.get("title"), "title")),
            description=tuple(TextStrategy(s) for s in _as_selectors(data.get("description"), "description")),
            features=tuple(ListStrategy(s) for s in _as_selectors(data.get("features"), "features")),
            description_list=tuple(
                ListStrategy(s) for s in _as_selectors(data.get("description_list"), "description_list")
            ),
            attributes=tuple(attributes),
        )

    @classmethod
    def default(cls) -> "ExtractionPlan":
        return cls.from_config(None)


# ================================
# 📦 РЕЗУЛЬТАТ ЕКСТРАКЦІЇ
# ================================
@dataclass(frozen=True)
class ExtractedFields:
    """Поля запису товару без прив'язки до ринку."""

    title: str = ""
    description: str = ""
    features: Tuple[str, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=lambda: EMPTY_MAPPING)
    description_list: Tuple[str, ...] = ()
    attribute_sources: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: EMPTY_MAPPING)
    notes: Tuple[str, ...] = ()

    def to_record(self, *, source_market: str, source_url: str) -> ProductRecord:
        return ProductRecord(
            title=self.title,
            description=self.description,
            features=self.features,
            attributes=self.attributes,
            source_market=source_market,
            source_url=source_url,
            description_list=self.description_list,
            attribute_sources=self.attribute_sources,
            notes=self.notes,
        )


# ================================
# 🏛️ ЕКСТРАКТОР
# ================================
class AttributeExtractor:
    """🧾 Проганяє план екстракції по документу."""

    def __init__(self, plan: Optional[ExtractionPlan] = None) -> None:
        self.plan = plan or ExtractionPlan.default()

    @classmethod
    def from_config(cls, config: ConfigService) -> "AttributeExtractor":
        return cls(ExtractionPlan.from_config(config.section("extraction")))

    async def extract(self, document: IDocument) -> ExtractedFields:
        """
        🧾 Витягує всі поля; жодне відсутнє поле не є помилкою.

        Args:
            document (IDocument): Сторінка ринку, де товар існує.

        Returns:
            ExtractedFields: Заповнені поля або їхні нульові значення.
        """
        notes: List[str] = []

        title = await self._first_text(self.plan.title, document)
        description = await self._first_text(self.plan.description, document)
        if not description:
            notes.append(NOTE_DESCRIPTION_MISSING)
            logger.info("ℹ️ Опис не знайдено (%s)", getattr(document, "url", ""))

        features = await self._first_list(self.plan.features, document)
        description_list = await self._first_list(self.plan.description_list, document)

        sources: Dict[str, Dict[str, str]] = {}
        for strategy in self.plan.attributes:
            attempt = await strategy.attempt(document)
            sources[strategy.name] = dict(attempt.value or {})
        attributes = merge_attributes(sources.values())

        logger.debug(
            "🧾 Екстракція: title=%s, features=%d, attributes=%d",
            bool(title),
            len(features),
            len(attributes),
        )
        return ExtractedFields(
            title=title,
            description=description,
            features=features,
            attributes=freeze(attributes),
            description_list=description_list,
            attribute_sources=freeze(sources),
            notes=tuple(notes),
        )

    # ================================
    # 🧰 КАСКАДИ
    # ================================
    @staticmethod
    async def _first_text(strategies: Sequence[TextStrategy], document: IDocument) -> str:
        for strategy in strategies:
            attempt: AttemptResult[str] = await strategy.attempt(document)
            if not attempt.is_empty:
                return attempt.value or ""
        return ""

    @staticmethod
    async def _first_list(strategies: Sequence[ListStrategy], document: IDocument) -> Tuple[str, ...]:
        for strategy in strategies:
            attempt: AttemptResult[Tuple[str, ...]] = await strategy.attempt(document)
            if not attempt.is_empty:
                return attempt.value or ()
        return ()


__all__ = [
    "AttributeExtractor",
    "DEFAULT_EXTRACTION",
    "ExtractedFields",
    "ExtractionPlan",
    "NOTE_DESCRIPTION_MISSING",
    "merge_attributes",
]
