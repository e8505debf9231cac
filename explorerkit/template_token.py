"""Mustache template tokens and HTML escaping."""

from __future__ import annotations

import enum
from typing import Callable, Optional


class TokenType(enum.Enum):
    """Kind of a template token."""

    TEXT = "text"
    VARIABLE = "variable"
    SECTION_OPEN = "section_open"
    SECTION_CLOSE = "section_close"
    INVERTED_SECTION_OPEN = "inverted_section_open"
    UNESCAPED_VARIABLE = "unescaped_variable"
    COMMENT = "comment"
    PARTIAL = "partial"
    DELIMITER_CHANGE = "delimiter_change"


_SIGILS = {
    ">": TokenType.PARTIAL,
    "^": TokenType.INVERTED_SECTION_OPEN,
    "/": TokenType.SECTION_CLOSE,
    "&": TokenType.UNESCAPED_VARIABLE,
    "#": TokenType.SECTION_OPEN,
    "!": TokenType.COMMENT,
}


def token_type_for(char: str) -> TokenType:
    """Map the first character inside a tag to the tag's type."""
    return _SIGILS.get(char, TokenType.VARIABLE)


def _first_not_ws(text: str, begin: int, end: int) -> int:
    """Index of the first non-space in ``text[begin:end]``, or ``end``."""
    return next((i for i in range(begin, end) if text[i] != " "), end)


def _last_not_ws(text: str, high: int, low: int) -> int:
    """Index of the last non-space scanning ``high`` down to ``low``, or ``low - 1``."""
    return next((i for i in range(high, low - 1, -1) if text[i] != " "), low - 1)


class Token:
    """One piece of a template: literal text or a tag.

    ``left`` and ``right`` are the lengths of the opening and closing
    delimiters around a tag; both zero means the token is literal text.
    """

    def __init__(self, raw: str, left: int = 0, right: int = 0) -> None:
        self.raw = raw
        self.name = ""
        self.partial_prefix = ""
        self.delims: tuple[str, str] = ("", "")
        self.eol = False
        self.ws_only = False

        if left != 0 and right != 0:
            size = len(raw)
            close_start = size - right
            if raw[left] == "=" and raw[close_start - 1] == "=":
                self.type = TokenType.DELIMITER_CHANGE
            elif raw[left] == "{" and raw[close_start - 1] == "}":
                self.type = TokenType.UNESCAPED_VARIABLE
                start = _first_not_ws(raw, left + 1, close_start)
                last = _last_not_ws(raw, close_start - 2, left)
                self.name = raw[start:last + 1]
            else:
                start = _first_not_ws(raw, left, close_start)
                self.type = token_type_for(raw[start])
                if self.type is not TokenType.VARIABLE:
                    start = _first_not_ws(raw, start + 1, close_start)
                last = _last_not_ws(raw, close_start - 1, left)
                self.name = raw[start:last + 1]
                self.delims = (raw[:left], raw[close_start:])
        else:
            self.type = TokenType.TEXT
            self.eol = raw.endswith("\n")
            self.ws_only = all(ch in " \r\n\t" for ch in raw)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, raw={self.raw!r}, name={self.name!r})"


_escape_config: dict[str, Optional[Callable[[str], str]]] = {"escape": None}

_HTML_ENTITIES = {
    "&": "&amp;",
    "'": "&#39;",
    '"': "&quot;",
    "<": "&lt;",
    ">": "&gt;",
    "/": "&#x2F;",
}


def set_escape(func: Optional[Callable[[str], str]]) -> None:
    """Install a replacement escaping function; ``None`` restores the default."""
    if func is not None and not callable(func):
        raise TypeError("escape function must be callable or None")
    _escape_config["escape"] = func


def html_escape(text: str) -> str:
    """Escape text for HTML, using the installed override if there is one."""
    override = _escape_config["escape"]
    if override is not None:
        return override(text)
    return "".join(_HTML_ENTITIES.get(ch, ch) for ch in text)