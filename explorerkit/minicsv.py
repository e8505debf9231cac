"""Minimal delimited-text reading and writing with escaped delimiters."""

from __future__ import annotations

import io
import os
from typing import Any, Callable, Iterable, Iterator, TextIO, TypeVar

T = TypeVar("T")

NEWLINE = "\n"


def replace(src: str, to_find: str, to_replace: str) -> str:
    """Replace every occurrence of ``to_find`` in ``src``, scanning left to right."""
    if not to_find:
        raise ValueError("the text to find must not be empty")
    return src.replace(to_find, to_replace)


def trim_right(text: str, trim_chars: str) -> str:
    """Strip trailing ``trim_chars``; text made only of them is returned unchanged."""
    stripped = text.rstrip(trim_chars)
    return stripped if stripped else text


def trim_left(text: str, trim_chars: str) -> str:
    """Strip leading ``trim_chars``; text made only of them is returned unchanged."""
    stripped = text.lstrip(trim_chars)
    return stripped if stripped else text


def trim(text: str, trim_chars: str) -> str:
    """Strip ``trim_chars`` from both ends."""
    return trim_left(trim_right(text, trim_chars), trim_chars)


def _check_char(value: str, what: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


class CsvReader:
    """Reads delimited lines field by field from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._eof = False
        self._line = ""
        self._pos = 0
        self.delimiter = ","
        self.unescape_str = "##"
        self.trim_quote = False
        self.quote = '"'
        self.terminate_on_blank_line = True

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> "CsvReader":
        """Open a file for reading."""
        return cls(open(path, "r", encoding="utf-8", newline=""))

    @classmethod
    def from_text(cls, text: str) -> "CsvReader":
        """Read from an in-memory string."""
        return cls(io.StringIO(text, newline=""))

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "CsvReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def line(self) -> str:
        """The current line."""
        return self._line

    def set_delimiter(self, delimiter: str, unescape_str: str) -> None:
        self.delimiter = _check_char(delimiter, "delimiter")
        self.unescape_str = unescape_str

    def enable_trim_quote(self, enable: bool, quote: str) -> None:
        self.trim_quote = enable
        self.quote = _check_char(quote, "quote")

    def _getline(self) -> str:
        data = self._stream.readline()
        if data.endswith(NEWLINE):
            return data[:-1]
        self._eof = True
        return data

    def skip_line(self) -> None:
        """Discard the next line."""
        if not self._eof:
            self._line = self._getline()
            self._pos = 0

    def read_line(self) -> bool:
        """Advance to the next non-empty line; return False when none is left."""
        self._line = ""
        while not self._eof:
            self._line = self._getline()
            self._pos = 0
            if not self._line:
                if self.terminate_on_blank_line:
                    break
                continue
            return True
        return False

    def next_field(self) -> str:
        """Return the next field of the current line, unescaped."""
        field: list[str] = []
        within_quote = False
        delim = self.delimiter
        while True:
            if self._pos >= len(self._line):
                self._line = ""
                return self.unescape("".join(field))
            ch = self._line[self._pos]
            if self.trim_quote:
                if (
                    not within_quote
                    and ch == self.quote
                    and (self._pos == 0 or self._line[self._pos - 1] == delim)
                ):
                    within_quote = True
                elif within_quote and ch == self.quote:
                    within_quote = False
            self._pos += 1
            if ch == delim and not within_quote:
                break
            if ch in "\r\n":
                break
            field.append(ch)
        return self.unescape("".join(field))

    def read_field(self, convert: Callable[[str], T]) -> T:
        """Return the next field passed through ``convert``."""
        return convert(self.next_field())

    def unescape(self, text: str) -> str:
        if self.unescape_str:
            text = replace(text, self.unescape_str, self.delimiter)
        return trim(text, self.quote) if self.trim_quote else text

    def num_of_delimiter(self) -> int:
        """Count the delimiters in the current line."""
        return self._line.count(self.delimiter) if self.delimiter else 0

    def rest_of_line(self) -> str:
        """The unread part of the current line."""
        if self._pos > len(self._line):
            raise IndexError("position is past the end of the current line")
        return self._line[self._pos:]

    def __iter__(self) -> Iterator[list[str]]:
        """Yield each remaining line as a list of fields."""
        while self.read_line():
            fields = [self.next_field()]
            while self._line:
                fields.append(self.next_field())
            yield fields


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class CsvWriter:
    """Writes delimited fields to a text stream, escaping the delimiter."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.after_newline = True
        self.delimiter = ","
        self.escape_str = "##"
        self.surround_quote = False
        self.quote = '"'

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> "CsvWriter":
        """Open a file for writing."""
        return cls(open(path, "w", encoding="utf-8", newline=""))

    @classmethod
    def to_text(cls) -> "CsvWriter":
        """Write into an in-memory string, read back with :meth:`text`."""
        return cls(io.StringIO(newline=""))

    def close(self) -> None:
        self._stream.close()

    def flush(self) -> None:
        self._stream.flush()

    def __enter__(self) -> "CsvWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def set_delimiter(self, delimiter: str, escape_str: str) -> None:
        self.delimiter = _check_char(delimiter, "delimiter")
        self.escape_str = escape_str

    def enable_surround_quote(self, enable: bool, quote: str) -> None:
        self.surround_quote = enable
        self.quote = _check_char(quote, "quote")

    def _escape(self, text: str) -> str:
        return replace(text, self.delimiter, self.escape_str) if self.escape_str else text

    def write(self, value: Any) -> "CsvWriter":
        """Write one field, preceded by a delimiter unless at line start."""
        if not self.after_newline:
            self._stream.write(self.delimiter)
        if isinstance(value, str):
            escaped = self._escape(value)
            if self.surround_quote:
                escaped = f"{self.quote}{escaped}{self.quote}"
            self._stream.write(escaped)
        else:
            self._stream.write(self._escape(_to_text(value)))
        self.after_newline = False
        return self

    def newline(self) -> "CsvWriter":
        """End the current line."""
        self._stream.write(NEWLINE)
        self.after_newline = True
        return self

    def write_row(self, values: Iterable[Any]) -> "CsvWriter":
        """Write every value as a field, then end the line."""
        for value in values:
            self.write(value)
        return self.newline()

    def text(self) -> str:
        """Everything written so far to an in-memory writer."""
        getvalue = getattr(self._stream, "getvalue", None)
        if getvalue is None:
            raise TypeError("writer is not backed by an in-memory stream")
        return getvalue()