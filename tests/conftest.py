# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Додаємо src у sys.path, щоб працював імпорт "skuscout.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def product_html() -> str:
    return (FIXTURES / "product_page.html").read_text(encoding="utf-8")


@pytest.fixture
def detail_bullets_html() -> str:
    return (FIXTURES / "detail_bullets_page.html").read_text(encoding="utf-8")


@pytest.fixture
def not_found_html() -> str:
    return (FIXTURES / "not_found_page.html").read_text(encoding="utf-8")
