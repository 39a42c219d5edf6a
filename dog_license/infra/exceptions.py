"""
Infrastructure layer - exceptions.

Standard exception classes and the error handling helpers used by the
storage layer and the pages.
"""

from typing import Any, Dict, Optional
from functools import wraps


class DogLicenseException(Exception):
    """Base exception for the dog license portal"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigError(DogLicenseException):
    """Configuration errors"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CONFIG_ERROR", {"config_key": config_key, **kwargs})


class ValidationError(DogLicenseException):
    """Field-level validation failure.

    ``errors`` maps field names to the user-facing message for that field.
    """
    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None, **kwargs) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"errors": dict(errors or {}), **kwargs})
        self.errors = dict(errors or {})


class BusinessRuleError(DogLicenseException):
    """Cross-field business rule violation"""
    def __init__(self, message: str, rule: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "BUSINESS_RULE_ERROR", {"rule": rule, **kwargs})


class VaccinationExpiredError(BusinessRuleError):
    """Rabies vaccination expired before the submission date"""
    def __init__(
        self,
        message: str = "Rabies vaccination has expired. Please update vaccination before applying.",
        expiry: Optional[str] = None,
        **kwargs
    ) -> None:
        super().__init__(message, rule="rabies_vaccination_current", expiry=expiry, **kwargs)


class StoreError(DogLicenseException):
    """Storage read/write failure"""
    def __init__(self, message: str, operation: Optional[str] = None, key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "STORE_ERROR", {"operation": operation, "key": key, **kwargs})


class StorageQuotaExceededError(StoreError):
    """Write would exceed the storage quota"""
    def __init__(self, message: str = "Storage quota exceeded", quota: Optional[int] = None,
                 requested: Optional[int] = None, **kwargs) -> None:
        super().__init__(message, quota=quota, requested=requested, **kwargs)
        self.error_code = "STORAGE_QUOTA_EXCEEDED"


class CorruptedStorageError(StoreError):
    """Stored content is not valid JSON or has an unexpected shape"""
    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.error_code = "STORAGE_CORRUPTED"


# =============================================================================
# Error handling decorator
# =============================================================================

def handle_errors(logger=None, operation: Optional[str] = None):
    """
    Unified error handling decorator for storage operations.

    Domain exceptions are logged and re-raised; anything else is logged with
    its traceback and wrapped in ``StoreError``.

    Args:
        logger: logger to use, defaults to this module's logger
        operation: operation name recorded on wrapped errors
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger
            if _logger is None:
                from .logging import get_logger
                _logger = get_logger(__name__)
            try:
                return func(*args, **kwargs)
            except DogLicenseException as e:
                _logger.error(f"[{e.error_code}] {e.message}")
                raise
            except Exception as e:
                _logger.error(f"Unhandled error in {func.__name__}: {e}", exc_info=True)
                raise StoreError(f"Storage operation failed: {e}",
                                 operation=operation or func.__name__) from e
        return wrapper
    return decorator


class ErrorHandler:
    """Error handling helper for the page layer"""

    def __init__(self, logger=None):
        if logger is None:
            from .logging import get_logger
            logger = get_logger(__name__)
        self.logger = logger

    def handle_and_log(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an error with optional context.

        Args:
            error: the exception
            context: extra context rendered into the message
        """
        context = context or {}
        suffix = f" {context}" if context else ""

        if isinstance(error, DogLicenseException):
            self.logger.error(f"[{error.error_code}] {error.message}{suffix}")
            self.logger.debug(f"error details: {error.to_dict()}")
        else:
            self.logger.error(f"System error: {error}{suffix}", exc_info=True)
