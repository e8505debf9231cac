"""Formatted output helpers and error-message formatting for system errors."""

from __future__ import annotations

import enum
import os
import sys
from typing import Any, Optional, TextIO

INLINE_BUFFER_SIZE = 500

_SEP = ": "
_ERROR_STR = "error "
RESET_COLOR = "\x1b[0m"


class FormatError(Exception):
    """Raised when a format string or its arguments are invalid."""


class Color(enum.IntEnum):
    """Terminal foreground colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


def _format(format_str: str, *args: Any, **kwargs: Any) -> str:
    try:
        return format_str.format(*args, **kwargs)
    except IndexError as exc:
        raise FormatError("argument index out of range") from exc
    except KeyError as exc:
        raise FormatError(f"argument not found: {exc.args[0]!r}") from exc
    except ValueError as exc:
        raise FormatError(str(exc)) from exc


def format_error_code(error_code: int, message: str) -> str:
    """Describe an error by its code, keeping ``message`` only if it fits."""
    error_code_size = len(_SEP) + len(_ERROR_STR)
    if error_code < 0:
        error_code_size += 1
    error_code_size += len(str(abs(error_code)))
    out = ""
    if len(message) <= INLINE_BUFFER_SIZE - error_code_size:
        out = message + _SEP
    return f"{out}{_ERROR_STR}{error_code}"


def format_system_error(error_code: int, message: str) -> str:
    """Join ``message`` with the system's description of ``error_code``."""
    try:
        system_message = os.strerror(error_code)
    except (ValueError, OverflowError):
        return format_error_code(error_code, message)
    return f"{message}{_SEP}{system_message}"


class SystemError_(RuntimeError):
    """An error carrying a system error code and a formatted description."""

    def __init__(self, error_code: int, format_str: str, *args: Any, **kwargs: Any) -> None:
        self.error_code = error_code
        super().__init__(format_system_error(error_code, _format(format_str, *args, **kwargs)))


def report_system_error(error_code: int, message: str, stream: Optional[TextIO] = None) -> None:
    """Write the description of a system error and a newline to ``stream``."""
    out = sys.stderr if stream is None else stream
    out.write(format_system_error(error_code, message))
    out.write("\n")


def report_unknown_type(code: str | int, type_name: str) -> None:
    """Raise :class:`FormatError` for a format code not valid for ``type_name``."""
    ordinal = code if isinstance(code, int) else ord(code)
    if 0x20 <= ordinal <= 0x7E:
        raise FormatError(f"unknown format code '{chr(ordinal)}' for {type_name}")
    raise FormatError(f"unknown format code '\\x{ordinal & 0xFF:02x}' for {type_name}")


def print_to(stream: TextIO, format_str: str, *args: Any, **kwargs: Any) -> None:
    """Format the arguments and write the result to ``stream``."""
    stream.write(_format(format_str, *args, **kwargs))


def print_colored(
    color: Color, format_str: str, *args: Any, stream: Optional[TextIO] = None, **kwargs: Any
) -> None:
    """Write formatted text wrapped in a colour escape and a reset."""
    text = _format(format_str, *args, **kwargs)
    out = sys.stdout if stream is None else stream
    out.write(f"\x1b[3{int(Color(color))}m")
    out.write(text)
    out.write(RESET_COLOR)