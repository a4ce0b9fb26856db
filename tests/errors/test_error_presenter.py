# tests/errors/test_error_presenter.py
"""
🧪 test_error_presenter.py: однорядкові повідомлення для оператора.
"""

from skuscout.errors import FALLBACK_MESSAGE, present_error
from skuscout.shared.errors import ConfigError, RequestTimeout, SessionStartError


def test_session_error_is_prefixed_with_identifier():
    text = present_error(SessionStartError("chromium missing"), identifier="B000TEST1")
    assert text.startswith("[B000TEST1] ")
    assert "chromium missing" in text
    assert "\n" not in text


def test_user_visible_error_shows_details():
    text = present_error(RequestTimeout(url="https://x", timeout_ms=30000, detail="Timeout 30000ms"))
    assert "Timeout 30000ms" in text


def test_config_error():
    assert "⚙️" in present_error(ConfigError("Невідомі коди ринків", details="XX"))


def test_unknown_exception_uses_fallback():
    text = present_error(RuntimeError("secret internals"))
    assert FALLBACK_MESSAGE in text
    assert "secret internals" not in text


def test_request_timeout_log_extra():
    extra = RequestTimeout(url="https://x", timeout_ms=5000, detail="d").to_log_extra()
    assert extra == {"error_code": "timeout", "details": "d", "url": "https://x", "timeout_ms": 5000}
