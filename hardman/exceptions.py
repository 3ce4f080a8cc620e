"""
Standardized exception hierarchy for hardman
Provides rich context, consistent logging, and user-friendly error messages
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any
from uuid import uuid4
import logging

logger = logging.getLogger(__name__)


class HardmanError(Exception):
    """
    Base exception for all hardman errors

    Provides:
    - Automatic timestamping
    - Request ID for tracing
    - User-friendly messages
    - Structured context
    - Automatic logging

    Example:
        raise HardmanError(
            message="Failed to save missions",
            operation="save_missions",
            context={"key": "missions"}
        )
    """

    def __init__(
        self,
        message: str,
        request_id: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.request_id = request_id or str(uuid4())
        self.operation = operation
        self.context = context or {}
        self.cause = cause
        self.user_message = user_message or "An error occurred. Please try again."
        self.timestamp = datetime.now(timezone.utc)

        # Auto-log on creation
        self._log_error()

    def _log_error(self) -> None:
        """Log error with full context"""
        log_data = {
            "error_type": self.__class__.__name__,
            "error_message": self.message,  # Avoid conflict with logging's 'message' field
            "request_id": self.request_id,
            "operation": self.operation,
            "error_context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

        if self.cause:
            log_data["cause"] = str(self.cause)
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data, exc_info=self.cause)
        else:
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for display layers"""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "user_message": self.user_message,
            "request_id": self.request_id,
            "timestamp": self.timestamp.isoformat()
        }


# ==========================================
# Validation Errors (User Input)
# ==========================================

class ValidationError(HardmanError):
    """
    Raised when user input fails validation

    Examples:
    - Volume outside 0..1
    - Mission title containing serialization delimiters

    Example:
        raise ValidationError(
            message="Volume must be between 0 and 1",
            field="sfx_volume",
            value=1.5
        )
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        self.field = field
        self.value = value
        super().__init__(
            message=message,
            user_message=f"Invalid {field}: {message}" if field else message,
            context={"field": field, "value": value},
            **kwargs
        )


# ==========================================
# Storage Errors
# ==========================================

class StorageError(HardmanError):
    """Persisted key-value storage could not be read or written"""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        **kwargs
    ):
        self.key = key
        super().__init__(
            message=message,
            user_message="We couldn't save your progress. Please try again.",
            context={"key": key},
            **kwargs
        )


# ==========================================
# Configuration Errors
# ==========================================

class ConfigurationError(HardmanError):
    """System configuration is invalid or missing"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        self.config_key = config_key
        super().__init__(
            message=message,
            user_message="The app is not properly configured. Check your .env file.",
            context={"config_key": config_key},
            **kwargs
        )


# ==========================================
# Helper Functions
# ==========================================

def wrap_storage_exception(
    error: Exception,
    operation: str,
    key: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> HardmanError:
    """
    Wrap back-end exceptions (OSError, JSON errors, etc.) into our hierarchy

    Example:
        try:
            path.write_text(payload)
        except OSError as e:
            raise wrap_storage_exception(e, operation="flush", key="missions")
    """
    if isinstance(error, (OSError, ValueError, TypeError)):
        return StorageError(
            message=f"{operation} failed: {str(error)}",
            key=key,
            operation=operation,
            cause=error
        )

    # Generic fallback
    return HardmanError(
        message=f"{operation} failed: {str(error)}",
        operation=operation,
        context=context,
        cause=error
    )
