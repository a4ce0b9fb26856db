# 🚀 skuscout/cli/main.py
"""
🚀 Entry-point консольного застосунку skuscout.

🔹 Готує конфігурацію (YAML + ENV + CLI-прапорці) і логування.
🔹 Режими: інтерактивний ввід, `--sku` (один або кілька запитів), `--html` (збережена сторінка).
🔹 Помилки доходять до оператора одним рядком; трасування лише у файловому лозі.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from rich.console import Console                                # 🖥️ Вивід звітів
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn   # ⏳ Індикація запиту

# 🔠 Системні імпорти
import argparse                                                 # 🧾 Розбір CLI-аргументів
import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from skuscout import __version__
from skuscout.config.config_service import ConfigService
from skuscout.config.setup.container import Container
from skuscout.domain.markets import MarketCatalog
from skuscout.domain.resolution import (
    DiagnosticEntry,
    FetchOutcome,
    ProductQuery,
    ResolutionResult,
)
from skuscout.errors import present_error
from skuscout.infrastructure.availability import AvailabilityProbe
from skuscout.infrastructure.extraction import AttributeExtractor
from skuscout.infrastructure.web import HtmlDocument
from skuscout.shared.errors import AppError, ConfigError
from skuscout.shared.utils.logger import LOG_NAME, init_logging_from_config
from .input_loop import InputLoop
from .report_renderer import ReportRenderer

logger = logging.getLogger(f"{LOG_NAME}.cli")


# ================================
# 🧾 АРГУМЕНТИ
# ================================
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skuscout",
        description="Check which regional storefront lists a product and extract its details.",
    )
    parser.add_argument("--sku", action="append", default=[], metavar="ID",
                        help="identifier to resolve (repeatable); skips the interactive prompt")
    parser.add_argument("--markets", metavar="CODES",
                        help="comma-separated subset of market codes, e.g. DE,US")
    parser.add_argument("--html", metavar="FILE", type=Path,
                        help="extract from a saved product page instead of a live browser")
    parser.add_argument("--market", metavar="CODE",
                        help="market the --html page belongs to")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    parser.add_argument("--config", metavar="FILE", help="extra YAML config layered over the defaults")
    parser.add_argument("--log-level", metavar="LEVEL", help="console/file log level (DEBUG, INFO, ...)")
    parser.add_argument("--headful", action="store_true", help="show the browser window")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _split_codes(raw: Optional[str]) -> List[str]:
    return [code.strip() for code in (raw or "").split(",") if code.strip()]


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """CLI-прапорці → крапкові ключі конфігурації (найвищий пріоритет)."""
    overrides: Dict[str, Any] = {}
    if args.headful:
        overrides["webdriver.headless"] = False
    if args.log_level:
        level = args.log_level.upper()
        overrides["logging.level"] = level
        overrides["logging.console_level"] = level
    return overrides


# ================================
# 🔎 РЕЖИМИ
# ================================
class App:
    """🔎 Зв'язує контейнер, рендерер і ввід оператора."""

    def __init__(self, container: Container, renderer: ReportRenderer, *, show_progress: bool = True) -> None:
        self.container = container
        self.renderer = renderer
        self.show_progress = show_progress
        self.failures = 0

    async def handle(self, identifier: str) -> Optional[ResolutionResult]:
        """Один запит від вводу до звіту; помилки сесії не зупиняють цикл."""
        try:
            query = ProductQuery(identifier)
        except ValueError:
            return None

        try:
            if self.show_progress:
                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    TimeElapsedColumn(),
                    console=self.renderer.console,
                    transient=True,
                ) as progress:
                    progress.add_task(description=f"🔎 {query.identifier}", total=None)
                    result = await self.container.controller.resolve(query)
            else:
                result = await self.container.controller.resolve(query)
        except AppError as exc:
            self.failures += 1
            logger.error(present_error(exc, identifier=query.identifier), extra=exc.to_log_extra())
            return None
        except Exception as exc:                                # noqa: BLE001
            self.failures += 1
            logger.error(present_error(exc, identifier=query.identifier))
            return None

        self.renderer.render(result)
        return result


async def extract_saved_page(
    config: ConfigService,
    catalog: MarketCatalog,
    path: Path,
    market_code: str,
    renderer: ReportRenderer,
    identifier: Optional[str] = None,
) -> ResolutionResult:
    """
    Класифікує та розбирає збережену сторінку так само, як живу.

    Raises:
        ConfigError: Невідомий код ринку.
    """
    market = catalog.get(market_code)
    if market is None:
        raise ConfigError("Невідомий код ринку", details=market_code)

    query = ProductQuery(identifier or path.stem)
    document = HtmlDocument.from_file(path, url=market.url_for(query.identifier))
    probe = AvailabilityProbe.from_config(config)
    verdict = await probe.classify(FetchOutcome.loaded(document))

    record = None
    if verdict.is_exists:
        fields = await AttributeExtractor.from_config(config).extract(document)
        record = fields.to_record(source_market=market.code, source_url=document.url)
    result = ResolutionResult(query, record, (DiagnosticEntry(market.code, verdict.describe(), document.url),))
    renderer.render(result)
    return result


async def run(args: argparse.Namespace, config: ConfigService) -> int:
    console = Console()
    renderer = ReportRenderer(console, as_json=args.json)
    markets = _split_codes(args.markets)

    if args.html is not None:
        if not args.market:
            logger.error("⚙️ --html потребує --market CODE")
            return 2
        catalog = MarketCatalog.from_config(config.get("markets", []))
        result = await extract_saved_page(
            config, catalog, args.html, args.market, renderer, identifier=(args.sku or [None])[0]
        )
        return 0 if result.found else 1

    container = Container(config, markets=markets or None)
    app = App(container, renderer, show_progress=not args.json and console.is_terminal)

    if args.sku:
        results = [await app.handle(identifier) for identifier in args.sku]
        return 0 if results and all(r is not None and r.found for r in results) else 1

    loop = InputLoop(app.handle, clear_screen=renderer.clear)
    await loop.run()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Точка входу console script `skuscout`."""
    args = build_parser().parse_args(argv)
    try:
        config = ConfigService(args.config, overrides=_overrides_from_args(args))
        init_logging_from_config(config.section("logging"))
        logger.debug("🧭 skuscout %s, args=%s", __version__, vars(args))
        return asyncio.run(run(args, config))
    except KeyboardInterrupt:
        return 130
    except (AppError, OSError) as exc:
        logger.error(present_error(exc))
        return 2


__all__ = ["App", "build_parser", "extract_saved_page", "main", "run"]
