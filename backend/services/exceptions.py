"""Exception types raised by the screening core."""

from typing import Any


class ResumeScreenerError(Exception):
    """Base exception for the resume screener."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dict for logging/response bodies."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
        if self.__cause__ is not None:
            result["cause"] = str(self.__cause__)
        return result


class UnsupportedFileTypeError(ResumeScreenerError, ValueError):
    """Raised when an upload declares a file type we cannot decode."""

    def __init__(self, file_type: str):
        super().__init__(
            f"Unsupported file type: {file_type}",
            error_code="UNSUPPORTED_FILE_TYPE",
            details={"file_type": file_type},
        )


class ResumeParsingError(ResumeScreenerError):
    """Raised when a supported file cannot be decoded into text."""

    def __init__(self, message: str, file_name: str | None = None):
        details = {"file_name": file_name} if file_name else {}
        super().__init__(message, error_code="RESUME_PARSING_ERROR", details=details)


class LLMServiceError(ResumeScreenerError):
    """Raised when the external model call fails (network, provider, config)."""

    def __init__(self, message: str, provider: str | None = None):
        details = {"provider": provider} if provider else {}
        super().__init__(message, error_code="LLM_SERVICE_ERROR", details=details)
