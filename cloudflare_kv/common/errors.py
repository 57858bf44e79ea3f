"""
Error Definitions

Defines the exception classes raised by the client library.
"""

from typing import Any, Optional


class KVClientError(Exception):
    """
    Client Base Exception

    Base class for all library exceptions, containing error message, code and details.
    Transport failures are not wrapped; they surface as httpx exceptions.
    """

    def __init__(
        self,
        message: str,
        code: str = "kv_client_error",
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            code: Error code
            details: Extra error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary format

        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "code": self.code,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result


class InvalidDurationError(KVClientError, ValueError):
    """
    Invalid Duration Error

    Raised when a duration string such as "10m" cannot be parsed.
    """

    def __init__(
        self,
        value: Any,
        message: Optional[str] = None,
    ):
        super().__init__(
            message=message or f"Invalid duration: {value!r}",
            code="invalid_duration",
            details={"value": value},
        )
        self.value = value
