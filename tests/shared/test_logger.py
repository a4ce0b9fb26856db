# tests/shared/test_logger.py
import json
import logging

from skuscout.shared.utils.logger import LOG_NAME, JsonFormatter, get_logger, init_logging


def test_init_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "skuscout.log"
    root = init_logging(level="DEBUG", console=False, file=str(log_file))
    assert root.name == LOG_NAME
    assert root.propagate is False
    assert len(root.handlers) == 1

    root = init_logging(level="INFO", console=True, file_enabled=False)
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_get_logger_is_namespaced():
    assert get_logger("probe").name == f"{LOG_NAME}.probe"
    assert get_logger().name == LOG_NAME


def test_json_formatter_includes_extra():
    record = logging.LogRecord(LOG_NAME, logging.INFO, __file__, 1, "hello %s", ("DE",), None)
    record.market = "DE"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "hello DE"
    assert payload["market"] == "DE"
