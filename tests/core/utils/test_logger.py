"""
Tests for logging utilities.
"""

import logging

from sepgen.core.utils.logger import (
    get_logger,
    log_configuration_change,
    log_error,
    log_file_operation,
    log_info,
    log_warning,
    reset_logging,
    setup_logging,
)


class TestSetupLogging:
    def test_sets_up_logger_with_defaults(self) -> None:
        logger = setup_logging()
        assert logger.name == "sepgen"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_sets_custom_log_level(self) -> None:
        assert setup_logging(level="debug").level == logging.DEBUG

    def test_sets_up_file_logging(self, tmp_path) -> None:
        log_file = tmp_path / "sepgen.log"
        logger = setup_logging(level="INFO", log_file=str(log_file))
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

        log_info("TEST", "written to file")
        for handler in logger.handlers:
            handler.flush()
        assert "[TEST] written to file" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_get_logger_is_singleton(self) -> None:
        reset_logging()
        assert get_logger() is get_logger()


class TestLogHelpers:
    def test_standard_format(self, caplog) -> None:
        setup_logging(level="DEBUG")
        with caplog.at_level(logging.DEBUG, logger="sepgen"):
            log_warning("serializer", "odd value", context="mtu")
        assert "[SERIALIZER] odd value | Context: mtu" in caplog.text

    def test_error_includes_exception(self, caplog) -> None:
        setup_logging()
        with caplog.at_level(logging.ERROR, logger="sepgen"):
            try:
                raise OSError("disk full")
            except OSError as e:
                log_error("SERIALIZER", "write failed", exception=e)
        record = caplog.records[-1]
        assert record.exc_info is not None
        assert "[SERIALIZER] write failed" in record.getMessage()

    def test_configuration_change_and_file_operation(self, caplog) -> None:
        setup_logging(level="INFO")
        with caplog.at_level(logging.INFO, logger="sepgen"):
            log_configuration_change("mtu", "", "1400")
            log_file_operation("write", "/tmp/SEP.cnf.xml", False, "denied")
        assert "Configuration changed: mtu = '' -> '1400'" in caplog.text
        assert "File write failed: /tmp/SEP.cnf.xml - denied" in caplog.text
