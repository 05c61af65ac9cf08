"""
Argloom usage writer: render options and separators as aligned help text.

Layout
- Three columns per row: abbreviation ("-v, "), long form ("--[no-]name=<VALUE>"
  plus " (mandatory)") and help text.
- The first two columns have fixed widths computed from the visible options
  (the long-form column also fits per-value titles and gets 4 columns of gap).
- The help column takes whatever is left; with a line length it is word-wrapped
  starting at the offset of the first two columns.
- Separators (plain strings) become their own paragraph.

Writer state
- a rich Text buffer (plain text plus optional styles),
- a count of line breaks still owed before the next write (deferred so that a
  separator can replace them),
- the column cursor, cycling 0 -> 1 -> 2 -> 0.

Supplementary help, at most one per option, in priority order
1. allowed_help: a block with one "      [value]" row per allowed value (sorted),
   each followed by its help, framed by blank lines;
2. allowed: "[a, b (default), c]";
3. flags defaulting to true: "(defaults to on)";
4. multiple options with a non-empty default: '(defaults to "a", "b")';
5. any other configured default: '(defaults to "value")'.

Styling
- Usage(..., colorful=True) styles the buffer; define __styles__ in __main__ to
  override any palette entry (keys: separator, abbreviation, option-name,
  allowed-title, help, defaults).

Quick example:
    >>> from argloom import option, OptionKind, generate_usage
    >>> print(generate_usage([
    ...     option("verbose", "v", help="Chatty output.", kind=OptionKind.FLAG, default=True),
    ...     "Other options:",
    ...     option("output", value_help="FILE"),
    ... ]))
    -v, --verbose          Chatty output.
                           (defaults to on)
    <BLANKLINE>
    Other options:
        --output=<FILE>
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .options import Option
from .utils import *
from .values import Value
from .wrapping import pad_right, wrap_text_as_lines


class Usage:
    """
    Stateful writer turning a sequence of options and separators into usage text.

    Parameters
    - entries: iterable of Option | str. Strings are separators. The sequence is
      snapshotted on construction; the options themselves are immutable.
    - line_length: int. 0 (or negative) disables wrapping of the help column.
    - colorful: bool. Style the rich rendering (generate() is always plain).

    generate() may be called any number of times; each call starts from a
    fresh buffer.
    """

    COLUMN_COUNT = 3

    def __init__(self, entries, line_length=0, *, colorful=False):
        self._entries = tuple(entries)
        for entry in self._entries:
            if not isinstance(entry, Option | str):
                raise TypeError("usage entries must be options or separator strings")
        if not isinstance(line_length, int):
            raise TypeError("usage 'line_length' must be an integer")

        self._line_length = max(line_length, 0)
        self._colorful = bool(colorful)
        self._styles = defaultdict(str, {
            "separator": "bold #FFFFFF",
            "abbreviation": "bold #22C55E",
            "option-name": "bold #00E6FF",
            "allowed-title": "#FF4D94",
            "help": "#9CA3AF",
            "defaults": "italic #737373",
        } | getattr(__import__("__main__"), "__styles__", {}))
        self._column_widths = self._calculate_column_widths()

        self._buffer = Text()
        self._current_column = 0
        self._newlines_needed = 0

    @property
    def line_length(self):
        return self._line_length

    @property
    def column_widths(self):
        return self._column_widths

    def generate(self):
        """
        Render the entries and return the usage text as a plain string.
        """
        return self._render().plain

    def __rich__(self):
        return self._render()

    def _render(self):
        self._buffer = Text()
        self._current_column = 0
        self._newlines_needed = 0

        for entry in self._entries:
            if isinstance(entry, str):
                self._write_separator(entry)
            elif not entry.hidden:
                self._write_option(entry)

        self._strip_trailing()
        return self._buffer

    def _style(self, name):
        return self._styles[name] if self._colorful else ""

    def _write_separator(self, separator):
        # Always leave a blank line before a separator; owed breaks are replaced.
        if self._buffer.plain:
            self._strip_trailing()
            self._buffer.append("\n\n")
        self._buffer.append(separator, self._style("separator"))
        self._newlines_needed = 1
        self._current_column = 0

    def _write_option(self, option):
        self._write(0, self._abbreviation(option), "abbreviation")
        self._write(1, self._long_option(option) + self._mandatory_option(option), "option-name")

        if option.help:
            self._write(2, option.help, "help")

        default = option.default
        if (allowed_help := option.allowed_help) is not None:
            self._newline()
            for value in sorted(allowed_help):
                self._write(1, self._allowed_title(option, value), "allowed-title")
                self._write(2, allowed_help[value], "help")
            self._newline()
        elif option.allowed is not None:
            self._write(2, self._build_allowed_list(option), "defaults")
        elif option.is_flag():
            if default is not None and default.is_bool() and default.as_bool():
                self._write(2, "(defaults to on)", "defaults")
        elif option.is_multiple():
            if default is not None and default.as_list():
                self._write(2, "(defaults to " + ", ".join(f'"{value}"' for value in default.as_list()) + ")", "defaults")
        elif default is not None:
            self._write(2, f'(defaults to "{default}")', "defaults")

    def _abbreviation(self, option):
        return f"-{option.abbr}, " if option.abbr else ""

    def _long_option(self, option):
        result = ("--[no-]" if option.negatable else "--") + option.name
        if option.value_help:
            result += f"=<{option.value_help}>"
        return result

    def _mandatory_option(self, option):
        return " (mandatory)" if option.mandatory else ""

    def _is_default(self, option, value):
        if (default := option.default) is None:
            return False
        if default.is_list():
            return Value(value) in default.as_list()
        return value == default.to_string()

    def _allowed_title(self, option, value):
        return "      [" + value + "]" + (" (default)" if self._is_default(option, value) else "")

    def _build_allowed_list(self, option):
        return "[" + ", ".join(
            value + (" (default)" if self._is_default(option, value) else "") for value in option.allowed
        ) + "]"

    def _calculate_column_widths(self):
        abbr = 0
        title = 0
        for option in self._entries:
            if isinstance(option, str) or option.hidden:
                continue
            abbr = max(abbr, len(self._abbreviation(option)))
            title = max(title, len(self._long_option(option) + self._mandatory_option(option)))
            for value in option.allowed_help or ():
                title = max(title, len(self._allowed_title(option, value)))
        return abbr, title + 4

    def _newline(self):
        self._newlines_needed += 1
        self._current_column = 0

    def _break_line(self):
        self._strip_trailing()
        self._buffer.append("\n")

    def _strip_trailing(self):
        # Column padding is only meaningful when something follows it on the line.
        plain = self._buffer.plain
        if excess := len(plain) - len(plain.rstrip(" ")):
            self._buffer.right_crop(excess)

    def _write(self, column, text, style):
        lines = text.split("\n")
        if column == len(self._column_widths) and self._line_length > 0:
            start = sum(self._column_widths[:column])
            lines = wrap_text_as_lines(text, start, self._line_length)

        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()

        for line in lines:
            self._write_line(column, line, style)

    def _write_line(self, column, text, style):
        while self._newlines_needed > 0:
            self._break_line()
            self._newlines_needed -= 1

        # Advance to the target column, wrapping to the next row if needed.
        while self._current_column != column:
            if self._current_column < self.COLUMN_COUNT - 1:
                self._buffer.append(" " * self._column_widths[self._current_column])
            else:
                self._break_line()
            self._current_column = (self._current_column + 1) % self.COLUMN_COUNT

        self._buffer.append(text, self._style(style))
        if column < len(self._column_widths):
            self._buffer.append(pad_right(text, self._column_widths[column])[len(text):])

        self._current_column = (self._current_column + 1) % self.COLUMN_COUNT
        if column == self.COLUMN_COUNT - 1:
            self._newlines_needed += 1


def generate_usage(entries, line_length=0):
    """
    Render `entries` (options and separator strings) as plain usage text.
    """
    return Usage(entries, line_length).generate()


def print_usage(entries, line_length=Unset, *, console=Unset, colorful=True):
    """
    Print the usage of `entries` through a rich console.

    The help column wraps at `line_length`, which defaults to the console width.
    The console never re-wraps the rendered rows.
    """
    console = coalesce(console, Console())
    console.print(Usage(entries, coalesce(line_length, console.width), colorful=colorful), soft_wrap=True)


__all__ = (
    "Usage",
    "generate_usage",
    "print_usage",
)
