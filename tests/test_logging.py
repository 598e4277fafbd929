"""Tests for logging configuration and conversion log helpers."""

import json
import logging

from dmn_converter.services.converter_service import convert_to_dmn
from dmn_converter.utils.logging import configure_logging, get_logger, log_conversion_result, log_conversion_step


def test_configure_logging_writes_file(tmp_path):
    configure_logging(level="DEBUG", log_dir=tmp_path, log_to_console=False)
    try:
        get_logger("dmn_converter.test").info("hello")
        for h in logging.getLogger().handlers:
            h.flush()
        assert "hello" in (tmp_path / "dmn_converter.log").read_text(encoding="utf-8")
    finally:
        root = logging.getLogger()
        for h in list(root.handlers):
            if isinstance(h, logging.FileHandler):
                root.removeHandler(h)
                h.close()
        root.setLevel(logging.WARNING)


def test_failed_step_logged_as_warning(caplog):
    logger = get_logger("dmn_converter.test")
    with caplog.at_level(logging.DEBUG, logger="dmn_converter.test"):
        log_conversion_step(logger, "check_structure", "abc", success=False, error="boom")
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    payload = json.loads(record.getMessage().split("Conversion: ", 1)[1])
    assert payload["step"] == "check_structure"
    assert payload["error"] == "boom"


def test_result_level_depends_on_issues(caplog):
    logger = get_logger("dmn_converter.test")
    with caplog.at_level(logging.INFO, logger="dmn_converter.test"):
        log_conversion_result(logger, "definition_abc", 1, 1, 0, issues=0)
        log_conversion_result(logger, "definition_abc", 1, 1, 0, issues=2)
    assert [r.levelno for r in caplog.records[-2:]] == [logging.INFO, logging.WARNING]


def test_conversion_logs_result(basic_model, caplog):
    with caplog.at_level(logging.INFO, logger="dmn_converter"):
        convert_to_dmn(basic_model, "abc")
    messages = [r.getMessage() for r in caplog.records if r.name == "dmn_converter.services.converter_service"]
    assert any('"definition_id": "definition_abc"' in m for m in messages)
