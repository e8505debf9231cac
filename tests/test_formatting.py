import errno
import io
import os

import pytest

from explorerkit.formatting import (
    Color,
    FormatError,
    SystemError_,
    format_error_code,
    format_system_error,
    print_colored,
    print_to,
    report_system_error,
    report_unknown_type,
)


def test_format_error_code_with_message():
    assert format_error_code(42, "test") == "test: error 42"


def test_format_error_code_negative():
    assert format_error_code(-3, "bad") == "bad: error -3"


def test_format_error_code_drops_long_message():
    assert format_error_code(42, "x" * 600) == "error 42"


@pytest.mark.parametrize(
    "code, fits, too_long",
    [(42, 490, 491), (-1, 490, 491), (7, 491, 492)],
)
def test_format_error_code_boundary(code, fits, too_long):
    kept = format_error_code(code, "m" * fits)
    assert kept.startswith("m" * fits + ": ")
    assert len(kept) <= 500
    assert format_error_code(code, "m" * too_long) == f"error {code}"


def test_format_system_error_uses_system_text():
    result = format_system_error(errno.ENOENT, "open")
    assert result == "open: " + os.strerror(errno.ENOENT)


def test_system_error_message_and_code():
    err = SystemError_(errno.ENOENT, "cannot open {}", "file")
    assert err.error_code == errno.ENOENT
    assert str(err) == format_system_error(errno.ENOENT, "cannot open file")


def test_system_error_keyword_format_is_runtime_error():
    err = SystemError_(errno.EACCES, "denied {name}", name="x")
    assert isinstance(err, RuntimeError)
    assert err.error_code == errno.EACCES
    assert str(err) == format_system_error(errno.EACCES, "denied x")


def test_report_system_error_writes_line():
    buf = io.StringIO()
    report_system_error(errno.ENOENT, "read", buf)
    assert buf.getvalue() == format_system_error(errno.ENOENT, "read") + "\n"


def test_report_unknown_type_printable():
    with pytest.raises(FormatError) as info:
        report_unknown_type("z", "string")
    assert str(info.value) == "unknown format code 'z' for string"


def test_report_unknown_type_unprintable():
    with pytest.raises(FormatError) as info:
        report_unknown_type("\x01", "string")
    assert str(info.value) == "unknown format code '\\x01' for string"


def test_print_to_formats():
    buf = io.StringIO()
    print_to(buf, "Don't {}!", "panic")
    assert buf.getvalue() == "Don't panic!"


def test_print_to_keyword_args():
    buf = io.StringIO()
    print_to(buf, "{a}-{b}", a="left", b="right")
    assert buf.getvalue() == "left-right"


def test_print_to_missing_argument():
    with pytest.raises(FormatError, match="argument index out of range"):
        print_to(io.StringIO(), "{} {}", "only")


def test_print_colored_wraps_text():
    buf = io.StringIO()
    print_colored(Color.RED, "hi {}", "there", stream=buf)
    assert buf.getvalue() == "\x1b[31mhi there\x1b[0m"


@pytest.mark.parametrize("color", list(Color))
def test_print_colored_every_color(color):
    buf = io.StringIO()
    print_colored(color, "x", stream=buf)
    text = buf.getvalue()
    assert text.startswith("\x1b[3" + str(int(color)) + "m")
    assert text.endswith("x\x1b[0m")


def test_print_colored_bad_format_writes_nothing():
    buf = io.StringIO()
    with pytest.raises(FormatError):
        print_colored(Color.BLUE, "{missing}", stream=buf)
    assert buf.getvalue() == ""