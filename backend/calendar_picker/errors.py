from enum import Enum

from fastapi import status


class BaseAppException(Exception):
    def __init__(self, code: str, message: str, http_status: int):
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)

class NotFoundError(BaseAppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status.HTTP_404_NOT_FOUND)

class ValidationAppError(BaseAppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status.HTTP_400_BAD_REQUEST)

class UnauthorizedError(BaseAppException):
    def __init__(self, message: str = "login required"):
        super().__init__("UNAUTHORIZED", message, status.HTTP_401_UNAUTHORIZED)


class PreconditionReason(str, Enum):
    NO_TOKEN_STORAGE = "NO_TOKEN_STORAGE"
    NO_TOKEN = "NO_TOKEN"
    NO_BACKEND_USER = "NO_BACKEND_USER"


_PRECONDITION_MESSAGES = {
    PreconditionReason.NO_TOKEN_STORAGE: "No token storage provided",
    PreconditionReason.NO_TOKEN: "No token provided",
    PreconditionReason.NO_BACKEND_USER: "The token does not contain a back end user object",
}


class PreconditionError(BaseAppException):
    """Raised when a provider is asked about the security context without one."""

    def __init__(self, reason: PreconditionReason):
        self.reason = reason
        super().__init__(reason.value, _PRECONDITION_MESSAGES[reason], status.HTTP_403_FORBIDDEN)


class InvalidPickerConfig(ValidationAppError):
    def __init__(self, message: str = "picker config could not be decoded"):
        super().__init__("INVALID_PICKER_CONFIG", message)


class ProviderNotFound(NotFoundError):
    def __init__(self, name: str):
        super().__init__("PICKER_PROVIDER_NOT_FOUND", f"Picker provider {name!r} not found")
