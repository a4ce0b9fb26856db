# 🖨️ skuscout/cli/report_renderer.py
"""
🖨️ Людиночитний звіт за результатом запиту (rich).

🔹 Found: ринок + URL, назва, опис, особливості, характеристики по схемах, список опису.
🔹 NotFound: "Product does not exist" і діагностика по кожному ринку.
🔹 Збій рендерингу логується і ніколи не впливає на конвеєр.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from rich.console import Console                                # 🖥️ Вивід у термінал
from rich.markup import escape                                  # 🧼 Екранування тексту сторінок
from rich.table import Table                                    # 📋 Таблиця характеристик

# 🔠 Системні імпорти
import json
import logging
from typing import Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from skuscout.domain.resolution import ProductRecord, ResolutionResult
from skuscout.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.cli.report")

NOT_FOUND_TEXT: str = "Product does not exist"


class ReportRenderer:
    """🖨️ Друкує `ResolutionResult` у консоль або як JSON."""

    def __init__(self, console: Optional[Console] = None, *, as_json: bool = False) -> None:
        self.console = console or Console()
        self.as_json = as_json

    def render(self, result: ResolutionResult) -> None:
        """Друкує звіт; будь-яка помилка рендерингу лише логується."""
        try:
            if self.as_json:
                self.console.print_json(json.dumps(result.to_dict(), ensure_ascii=False, default=str))
            elif result.record is not None:
                self._render_record(result.record, result.elapsed_sec)
            else:
                self._render_not_found(result)
        except Exception:                                       # noqa: BLE001
            logger.exception("⚠️ Не вдалося відрендерити звіт для %s", getattr(result, "query", None))

    def clear(self) -> None:
        try:
            self.console.clear()
        except Exception:                                       # noqa: BLE001
            logger.debug("⚠️ console.clear() не вдався", exc_info=True)

    # ================================
    # ✅ FOUND
    # ================================
    def _render_record(self, record: ProductRecord, elapsed: float) -> None:
        c = self.console
        c.rule(f"[bold green]{escape(str(record.source_market))}[/] {escape(str(record.source_url))}")
        c.print(f"[bold]Title:[/] {escape(str(record.title or '-'))}")
        if record.description:
            c.print(f"[bold]Description:[/] {escape(str(record.description))}")

        if record.features:
            c.print("[bold]Features:[/]")
            for item in record.features:
                c.print(f"  • {escape(str(item))}")

        sources = record.attribute_sources or {}
        if any(sources.values()):
            for name, table in sources.items():
                if table:
                    c.print(self._attribute_table(str(name), table))
        elif record.attributes:
            c.print(self._attribute_table("attributes", record.attributes))

        if record.description_list:
            c.print("[bold]Description list:[/]")
            for item in record.description_list:
                c.print(f"  - {escape(str(item))}")

        for note in record.notes:
            c.print(f"[dim]ℹ️ {escape(str(note))}[/]")
        c.print(f"[dim]⏱️ {elapsed:.1f}s[/]")

    @staticmethod
    def _attribute_table(title: str, rows: Mapping[str, str]) -> Table:
        table = Table(title=title, show_header=False, title_justify="left")
        table.add_column("key", style="bold")
        table.add_column("value")
        for key, value in rows.items():
            table.add_row(escape(str(key)), escape(str(value)))
        return table

    # ================================
    # 🚫 NOT FOUND
    # ================================
    def _render_not_found(self, result: ResolutionResult) -> None:
        c = self.console
        c.print(f"[bold red]{NOT_FOUND_TEXT}[/] [dim]({escape(result.query.identifier)})[/]")
        for entry in result.diagnostics:
            c.print(f"  {escape(str(entry.market))}: {escape(str(entry.outcome))}")
        c.print(f"[dim]⏱️ {result.elapsed_sec:.1f}s[/]")


__all__ = ["NOT_FOUND_TEXT", "ReportRenderer"]
