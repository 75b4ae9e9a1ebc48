from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    OPEN_ERROR = "OPEN_ERROR"
    READ_ERROR = "READ_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"


class WordCountError(RuntimeError):
    """
    Base exception for everything the counter reports to the user.
    str() gives the plain message; the code is kept on the instance.
    """

    code = ErrorCode.READ_ERROR

    def __init__(
        self, message: str, *, context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.context = context or {}


class OpenError(WordCountError):
    """The file could not be opened for reading."""

    code = ErrorCode.OPEN_ERROR

    def __init__(self, path: str, cause: OSError) -> None:
        # strerror is None for some synthetic OSErrors
        super().__init__(cause.strerror or str(cause), context={"path": path})
        self.path = path
        self.cause = cause


class ReadError(WordCountError):
    code = ErrorCode.READ_ERROR

    def __init__(self, path: str, line_number: int, cause: OSError) -> None:
        super().__init__(
            f"read failed at line {line_number}: {cause.strerror or cause}",
            context={"path": path, "line": line_number},
        )
        self.path = path
        self.line_number = line_number
        self.cause = cause


class DecodeError(WordCountError):
    """A line's bytes are not valid text in the expected encoding."""

    code = ErrorCode.DECODE_ERROR

    def __init__(
        self, path: str, line_number: int, encoding: str, cause: UnicodeDecodeError
    ) -> None:
        super().__init__(
            f"line {line_number} is not valid {encoding}: {cause.reason}",
            context={"path": path, "line": line_number, "encoding": encoding},
        )
        self.path = path
        self.line_number = line_number
        self.encoding = encoding
        self.cause = cause


class ConfigError(WordCountError):
    code = ErrorCode.CONFIG_ERROR


__all__ = [
    "ErrorCode",
    "WordCountError",
    "OpenError",
    "ReadError",
    "DecodeError",
    "ConfigError",
]
