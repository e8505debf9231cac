# explorerkit

Small, dependency-free text utilities in four modules:

- `explorerkit.minicsv`: delimited-text streams. A reader pulls fields one at
  a time. A writer escapes the delimiter inside fields.
- `explorerkit.template_token`: mustache-style tag tokens and HTML escaping.
- `explorerkit.template_nodes`: context values for templates. It covers name
  lookup with dotted names, section emptiness and how a value is displayed.
- `explorerkit.formatting`: formatted printing, coloured output and
  descriptions of system error codes.

The package needs Python 3.10 or later. The `test` extra installs pytest.

## Delimited text (`explorerkit.minicsv`)

`CsvWriter` writes fields separated by a delimiter, `,` by default. Inside a
field, each delimiter is replaced by an escape string, `##` by default.
`CsvReader` reverses that escaping when it reads.

```python
from explorerkit.minicsv import CsvReader, CsvWriter

writer = CsvWriter.to_text()
writer.write_row(["alice", 30, "a,b"])
writer.text()                      # 'alice,30,a##b\n'

with CsvReader.from_text("alice,30,a##b\n") as reader:
    while reader.read_line():
        name = reader.next_field()     # 'alice'
        age = reader.read_field(int)   # 30
        tags = reader.next_field()     # 'a,b'
```

### CsvWriter

- `CsvWriter.open(path)` writes to a file. `CsvWriter.to_text()` writes to
  memory, and `text()` returns what has been written so far. `text()` raises
  `TypeError` for a writer that is not in memory.
- `write(value)` writes one field. A delimiter goes before it unless it starts
  a line. `newline()` ends the line. `write_row(values)` writes every value
  and then ends the line. Each of these returns the writer, so calls can be
  chained.
- Values that are not strings are written with `str()`. Floats use the `g`
  format, and booleans are written as `1` and `0`.
- `set_delimiter(delimiter, escape_str)` changes the delimiter and the escape
  string. An empty escape string turns escaping off.
- `enable_surround_quote(enable, quote)` puts the quote character around
  string fields.
- The writer supports `flush()`, `close()` and use as a context manager.

### CsvReader

- `CsvReader.open(path)` reads from a file. `CsvReader.from_text(text)` reads
  from a string. The reader supports `close()` and use as a context manager.
- `read_line()` moves to the next line and returns `False` when none is left.
  While `terminate_on_blank_line` is true (the default), a blank line stops
  reading. Set it to false to skip blank lines instead. `skip_line()` discards
  one line.
- `next_field()` returns the next field of the current line, with escaping
  undone. `read_field(convert)` passes that field through `convert`.
- `line` is the current line. `rest_of_line()` is its unread part.
  `num_of_delimiter()` counts the delimiters in it.
- `set_delimiter(delimiter, unescape_str)` and
  `enable_trim_quote(enable, quote)` mirror the writer's settings. With quote
  trimming on, delimiters inside quoted fields are kept, and the quotes are
  stripped from the field.
- Iterating over a reader yields each remaining line as a list of fields.

Delimiters and quotes must be single characters; anything else raises
`ValueError`.

The module-level helpers are `replace(src, to_find, to_replace)`,
`trim_left`, `trim_right` and `trim(text, trim_chars)`. `trim` leaves text
unchanged when it is made only of the characters being trimmed.

## Template building blocks

### Tokens (`explorerkit.template_token`)

`Token(raw, left, right)` classifies one piece of a template. `left` and
`right` are the lengths of the opening and closing delimiters. When both are
zero, the token is literal text.

```python
from explorerkit.template_token import Token, TokenType, html_escape

tok = Token("{{#items}}", 2, 2)
tok.type      # TokenType.SECTION_OPEN
tok.name      # 'items'
tok.delims    # ('{{', '}}')

text = Token("hello\n")
text.type, text.eol   # (TokenType.TEXT, True)
```

- `token_type_for(char)` maps a sigil to a `TokenType`:
  - `#` is a section.
  - `^` is an inverted section.
  - `/` closes a section.
  - `&` is an unescaped variable.
  - `!` is a comment.
  - `>` is a partial.
  - Anything else is a variable.
- `html_escape(text)` escapes `& ' " < > /`. `set_escape(func)` installs a
  replacement escaping function, and `set_escape(None)` restores the default.

### Context values (`explorerkit.template_nodes`)

```python
from explorerkit.template_nodes import find_node, render_value, is_node_empty

context = [{"user": {"name": "<b>Bob</b>"}}]
node = find_node("user.name", context)
render_value(node, escape=True)   # '&lt;b&gt;Bob&lt;&#x2F;b&gt;'
is_node_empty([])                 # True
```

- `find_node(token, nodes)` resolves a name, possibly dotted, against a list
  of contexts, innermost first. It returns `None` when no context has the
  name.
- `has_token(node, token)` and `get_token(node, token)` look a name up in a
  mapping or a `TemplateObject`. For any other value, only `.` is found, and
  it returns the value itself.
- `is_node_empty(node)` is true for `None`, `False`, zero, `""` and `[]`.
- `render_value(node, escape=False)` gives the displayed text:
  - Booleans become `true` or `false`.
  - Numbers are converted to text.
  - Strings are returned as they are, or HTML-escaped when `escape` is true.
  - Everything else becomes empty text.
- `TemplateObject` holds fields computed by methods. Add them with
  `register_methods({name: callable})`. `has(name)` tests for a field, and
  `at(name)` calls the field's method.

## Formatting and error reporting (`explorerkit.formatting`)

```python
import sys
from explorerkit.formatting import (
    Color, format_error_code, print_colored, print_to, report_system_error,
)

print_to(sys.stdout, "Hello, {}!\n", "world")
print_colored(Color.GREEN, "ok\n", stream=sys.stdout)
report_system_error(2, "cannot open file", sys.stderr)
format_error_code(5, "oops")   # 'oops: error 5'
```

- Format strings use `str.format` syntax. Bad indices, missing names and
  invalid specifications raise `FormatError`.
- `format_system_error(code, message)` joins the message with the system's
  description of the code. `report_system_error` writes that description and
  a newline to a stream, which is stderr by default.
- `SystemError_(code, format_str, *args, **kwargs)` is a `RuntimeError`. It
  carries `error_code` and the formatted description.
- `report_unknown_type(code, type_name)` raises `FormatError` for a format
  code that is not valid for a type.
- `print_colored` wraps the text in an ANSI colour escape for the `Color`
  given, followed by a reset. It writes to stdout by default.

## What the package does not do

- There is no function that renders a whole template. `explorerkit` provides
  tokens, HTML escaping, context lookup and value display, but it does not
  split template text into tokens or handle sections and partials. You have
  to put those together yourself.
- There is no command-line program; everything is used from Python.