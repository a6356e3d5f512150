"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes."""

    # Authentication errors (401)
    SIGN_IN_REQUIRED = "SIGN_IN_REQUIRED"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    UPLOAD_NOT_FOUND = "UPLOAD_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"
    UPLOAD_TOO_LARGE = "UPLOAD_TOO_LARGE"

    # Conflict errors (409)
    INVALID_SESSION_STATE = "INVALID_SESSION_STATE"

    # Upstream errors (502/503)
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    UPLOAD_FAILED = "UPLOAD_FAILED"
    CLIPBOARD_UNAVAILABLE = "CLIPBOARD_UNAVAILABLE"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class SignInRequiredError(AppException):
    """No signed-in identity; the caller must redirect to sign-in."""

    def __init__(self, redirect_url: str) -> None:
        super().__init__(
            error_code=ErrorCode.SIGN_IN_REQUIRED,
            message="Please sign in to continue",
            status_code=401,
            details={"redirect_url": redirect_url},
        )
        self.redirect_url = redirect_url


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class UploadNotFoundError(AppException):
    """Uploaded file not found."""

    def __init__(self, key: str) -> None:
        super().__init__(
            error_code=ErrorCode.UPLOAD_NOT_FOUND,
            message=f"Upload not found: {key}",
            status_code=404,
            details={"key": key},
        )


class UnsupportedMediaTypeError(AppException):
    """Upload is not an image."""

    def __init__(self, content_type: str) -> None:
        super().__init__(
            error_code=ErrorCode.UNSUPPORTED_MEDIA_TYPE,
            message=f"Only image uploads are accepted, got: {content_type}",
            status_code=415,
            details={"content_type": content_type},
        )


class UploadTooLargeError(AppException):
    """Upload exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            error_code=ErrorCode.UPLOAD_TOO_LARGE,
            message=f"Upload of {size} bytes exceeds the {limit} byte limit",
            status_code=413,
            details={"size": size, "limit": limit},
        )


class InvalidSessionStateError(AppException):
    """Edit session operation attempted from the wrong state."""

    def __init__(self, operation: str, state: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_SESSION_STATE,
            message=f"Cannot {operation} while {state}",
            status_code=409,
            details={"operation": operation, "state": state},
        )


class StoreUnavailableError(AppException):
    """Document store call failed (network error or non-OK response)."""

    def __init__(
        self,
        operation: str,
        status_code: int | None = None,
        reason: str = "",
    ) -> None:
        message = f"Document store {operation} failed"
        if status_code is not None:
            message = f"{message} with status {status_code}"
        super().__init__(
            error_code=ErrorCode.STORE_UNAVAILABLE,
            message=message,
            status_code=503,
            details={
                "operation": operation,
                "upstream_status": status_code,
                "reason": reason,
            },
        )
        self.operation = operation
        self.upstream_status = status_code


class UploadFailedError(AppException):
    """Image upload failed."""

    def __init__(self, status_code: int | None = None, reason: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.UPLOAD_FAILED,
            message="Failed to upload image",
            status_code=502,
            details={"upstream_status": status_code, "reason": reason},
        )
        self.upstream_status = status_code


class ClipboardUnavailableError(AppException):
    """The host refused or failed a clipboard write."""

    def __init__(self, reason: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.CLIPBOARD_UNAVAILABLE,
            message="Failed to copy link",
            status_code=503,
            details={"reason": reason},
        )
