"""
Unit tests for the exception hierarchy, the error handling helpers and logging setup.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dog_license.infra.exceptions import (
    CorruptedStorageError,
    DogLicenseException,
    ErrorHandler,
    StorageQuotaExceededError,
    StoreError,
    ValidationError,
    handle_errors,
)
from dog_license.infra.logging import LoggerManager, get_logger, set_log_level


class TestExceptions:

    def test_to_dict(self):
        err = StoreError("boom", operation="set_item", key="k")
        assert err.to_dict() == {
            "error_code": "STORE_ERROR",
            "message": "boom",
            "details": {"operation": "set_item", "key": "k"},
        }

    def test_default_error_code(self):
        assert DogLicenseException("x").error_code == "UNKNOWN_ERROR"

    def test_storage_error_codes(self):
        assert StorageQuotaExceededError(quota=10, requested=20).error_code == "STORAGE_QUOTA_EXCEEDED"
        assert CorruptedStorageError("bad").error_code == "STORAGE_CORRUPTED"
        assert isinstance(CorruptedStorageError("bad"), StoreError)

    def test_validation_error_keeps_field_messages(self):
        err = ValidationError("1 invalid field(s)", errors={"dog_name": "Dog name is required"})
        assert err.errors == {"dog_name": "Dog name is required"}
        assert err.details["errors"] == err.errors


class TestHandleErrors:

    def setup_method(self):
        self.logger = MagicMock()

    def test_passes_through_return_value(self):
        @handle_errors(logger=self.logger)
        def ok():
            return 42

        assert ok() == 42
        self.logger.error.assert_not_called()

    def test_domain_errors_are_reraised(self):
        @handle_errors(logger=self.logger, operation="read")
        def broken():
            raise CorruptedStorageError("bad json")

        with pytest.raises(CorruptedStorageError):
            broken()
        self.logger.error.assert_called_once()

    def test_unknown_errors_are_wrapped(self):
        @handle_errors(logger=self.logger, operation="write")
        def broken():
            raise OSError("disk full")

        with pytest.raises(StoreError) as exc_info:
            broken()
        assert exc_info.value.details["operation"] == "write"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_error_handler_logs_context(self):
        ErrorHandler(self.logger).handle_and_log(StoreError("boom"), {"tracking_number": "DOG-1-1"})
        message = self.logger.error.call_args[0][0]
        assert message.startswith("[STORE_ERROR] boom")
        assert "DOG-1-1" in message


class TestLoggerManager:

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.root = logging.getLogger()
        self.handlers = list(self.root.handlers)
        self.level = self.root.level
        LoggerManager.reset()

    def teardown_method(self):
        for handler in list(self.root.handlers):
            if handler not in self.handlers:
                self.root.removeHandler(handler)
                handler.close()
        self.root.setLevel(self.level)
        LoggerManager.reset()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_get_logger_is_cached(self):
        assert get_logger("dog_license.test") is get_logger("dog_license.test")

    def test_set_log_level(self):
        set_log_level("debug")
        assert self.root.level == logging.DEBUG
        set_log_level("nonsense")
        assert self.root.level == logging.DEBUG

    def test_log_file(self):
        log_file = self.temp_dir / "logs" / "portal.log"
        LoggerManager.set_log_file(log_file)
        LoggerManager.set_log_file(log_file)

        file_handlers = [h for h in self.root.handlers
                         if isinstance(h, logging.FileHandler) and h not in self.handlers]
        assert len(file_handlers) == 1

        get_logger("dog_license.test").warning("written to file")
        file_handlers[0].flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_apply_without_file(self):
        LoggerManager.apply("WARNING")
        assert self.root.level == logging.WARNING
        assert not [h for h in self.root.handlers
                    if isinstance(h, logging.FileHandler) and h not in self.handlers]
