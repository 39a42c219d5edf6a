"""
Infrastructure layer.

Shared building blocks:
- clock / id factory
- logging
- exceptions
- serialization
"""
from .common import (
    Clock,
    IdFactory,
    MockClock,
    SystemClock,
    format_iso,
    get_clock,
    parse_date,
    parse_iso,
    set_clock,
)
from .exceptions import (
    BusinessRuleError,
    ConfigError,
    CorruptedStorageError,
    DogLicenseException,
    ErrorHandler,
    StorageQuotaExceededError,
    StoreError,
    VaccinationExpiredError,
    ValidationError,
    handle_errors,
)
from .logging import LoggerManager, get_logger, set_log_level
from .serialization import Serializer

__all__ = [
    "Clock",
    "SystemClock",
    "MockClock",
    "get_clock",
    "set_clock",
    "format_iso",
    "parse_iso",
    "parse_date",
    "IdFactory",
    "DogLicenseException",
    "ConfigError",
    "ValidationError",
    "BusinessRuleError",
    "VaccinationExpiredError",
    "StoreError",
    "StorageQuotaExceededError",
    "CorruptedStorageError",
    "handle_errors",
    "ErrorHandler",
    "LoggerManager",
    "get_logger",
    "set_log_level",
    "Serializer",
]
