import pytest

from explorerkit.template_token import (
    Token,
    TokenType,
    html_escape,
    set_escape,
    token_type_for,
)


@pytest.mark.parametrize(
    "char, expected",
    [
        (">", TokenType.PARTIAL),
        ("^", TokenType.INVERTED_SECTION_OPEN),
        ("/", TokenType.SECTION_CLOSE),
        ("&", TokenType.UNESCAPED_VARIABLE),
        ("#", TokenType.SECTION_OPEN),
        ("!", TokenType.COMMENT),
        ("x", TokenType.VARIABLE),
    ],
)
def test_token_type_for(char, expected):
    assert token_type_for(char) is expected


def test_variable_tag():
    tok = Token("{{name}}", 2, 2)
    assert tok.type is TokenType.VARIABLE
    assert tok.name == "name"
    assert tok.delims == ("{{", "}}")
    assert tok.raw == "{{name}}"
    assert tok.eol is False


def test_section_tag_with_spaces():
    tok = Token("{{ # items }}", 2, 2)
    assert tok.type is TokenType.SECTION_OPEN
    assert tok.name == "items"


def test_section_close_and_partial():
    assert Token("{{/items}}", 2, 2).type is TokenType.SECTION_CLOSE
    partial = Token("{{> header}}", 2, 2)
    assert partial.type is TokenType.PARTIAL
    assert partial.name == "header"


def test_triple_mustache():
    tok = Token("{{{ body }}}", 2, 2)
    assert tok.type is TokenType.UNESCAPED_VARIABLE
    assert tok.name == "body"
    assert tok.delims == ("", "")


def test_delimiter_change():
    tok = Token("{{=<% %>=}}", 2, 2)
    assert tok.type is TokenType.DELIMITER_CHANGE


def test_custom_delimiters_recorded():
    tok = Token("<%value%>", 2, 2)
    assert tok.name == "value"
    assert tok.delims == ("<%", "%>")


def test_text_tokens():
    line = Token("hello\n")
    assert line.type is TokenType.TEXT
    assert line.eol is True
    assert line.ws_only is False
    blank = Token("  \t\r\n")
    assert blank.ws_only is True
    assert Token("abc").eol is False


def test_partial_prefix_and_eol_are_settable():
    tok = Token("{{>p}}", 2, 2)
    tok.partial_prefix = "  "
    tok.eol = True
    assert tok.partial_prefix == "  "
    assert tok.eol is True


def test_html_escape_entities():
    assert html_escape("<") == "&lt;"
    assert html_escape("a&b") == "a&amp;b"
    assert html_escape("'\"/>") == "&#39;&quot;&#x2F;&gt;"
    assert html_escape("plain") == "plain"


def test_set_escape_override_and_reset():
    set_escape(str.upper)
    try:
        assert html_escape("<abc>") == "<ABC>"
    finally:
        set_escape(None)
    assert html_escape("<") == "&lt;"