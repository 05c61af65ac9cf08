"""
Argloom line wrapping (pure text helpers used by the usage writer).

Overview
- pad_right(source, length): pad with spaces, never truncate.
- is_breaking_whitespace(text, index): whether text[index] may serve as a wrap point.
- wrap_text_as_lines(text, start, length): greedy word wrap into a list of lines.
- wrap_text(text, length, hanging_indent): wrap a whole block, keeping each
  line's leading indentation, and return it as newline-terminated text.

Wrap points
- Only the fixed set below counts, not str.isspace(): the C0 controls
  U+0009..U+000D, the space, NEL, and the Unicode space separators
  (U+1680, U+180E, U+2000..U+200A, U+2028, U+2029, U+202F, U+205F, U+3000)
  plus the byte order mark U+FEFF. Notably U+00A0 (no-break space) is not a
  wrap point.
"""

_BREAKING_WHITESPACE = frozenset((
    *range(0x0009, 0x000D + 1),
    0x0020,
    0x0085,
    0x1680,
    0x180E,
    *range(0x2000, 0x200A + 1),
    0x2028,
    0x2029,
    0x202F,
    0x205F,
    0x3000,
    0xFEFF,
))

# Lines narrower than this are never produced, whatever the requested width.
MINIMUM_WIDTH = 10


def pad_right(source, length):
    """
    Pad `source` with trailing spaces up to `length` characters.

    Strings already at least `length` long are returned unchanged.

    Examples
    - pad_right("Hello", 10)             -> "Hello     "
    - pad_right("ThisIsALongString", 10) -> "ThisIsALongString"
    """
    return source + " " * max(length - len(source), 0)


def is_breaking_whitespace(text, index):
    return ord(text[index]) in _BREAKING_WHITESPACE


def wrap_text_as_lines(text, start=0, length=0):
    """
    Wrap `text` into lines of at most max(length - start, 10) characters.

    `start` is the column already consumed on the output line, so the usage
    writer can wrap its help column against the full line length.

    Algorithm (per hard line, i.e. "\\n" always breaks)
    - scan left to right, remembering the last breaking whitespace seen since
      the current line start;
    - once the span reaches the effective width, cut at that whitespace, or
      exactly at the width when the span is a single long word;
    - skip the whitespace run following the cut;
    - trailing spaces are trimmed from every line, and the remainder of each
      hard line is always emitted (possibly as an empty string).

    Callers wanting "no wrapping" for length <= 0 must special-case it; this
    function always wraps to at least 10 columns.
    """
    width = max(length - start, MINIMUM_WIDTH)
    lines = []

    for line in text.split("\n"):
        head = 0
        pivot = None
        index = 0
        while index < len(line):
            if is_breaking_whitespace(line, index):
                pivot = index

            if index - head >= width:
                # Back up to the last whitespace, unless the span has none.
                if pivot is not None:
                    index = pivot
                lines.append(line[head:index].rstrip(" "))

                while index < len(line) and is_breaking_whitespace(line, index):
                    index += 1

                head = index
                pivot = None
            index += 1

        lines.append(line[head:].rstrip(" "))

    return lines


wrap_as_lines = wrap_text_as_lines


def wrap_text(text, length=0, hanging_indent=0):
    """
    Wrap a block of text so that no line exceeds `length` characters.

    Behavior
    - length <= 0: `text` is returned unchanged.
    - every hard line is wrapped on its own; its leading run of spaces is
      repeated on each of its sub-lines;
    - with a hanging indent, the first sub-line uses the full width and the
      following ones are narrowed by `hanging_indent` and prefixed with that
      many spaces;
    - sub-lines made only of spaces are dropped (so blank input lines vanish);
    - every emitted line ends with "\\n".

    Example
        >>> print(wrap_text("This is a long paragraph that needs to be wrapped.", 10), end="")
        This is a
        long
        paragraph
        that needs
        to be
        wrapped.
    """
    if length <= 0:
        return text

    result = []
    for line in text.split("\n"):
        trimmed = line.lstrip(" ")
        leading = line[:len(line) - len(trimmed)]

        if hanging_indent:
            wrapped = wrap_text_as_lines(trimmed, 0, length - len(leading))
            sublines = wrapped[:1]
            if len(wrapped) > 1:
                rest = trimmed[len(sublines[0]):].lstrip()
                sublines.extend(wrap_text_as_lines(rest, 0, length - len(leading) - hanging_indent))
        else:
            sublines = wrap_text_as_lines(trimmed, 0, length - len(leading))

        indent = ""
        for subline in sublines:
            if subline.strip(" "):
                result.append(indent + leading + subline + "\n")
            indent = " " * hanging_indent

    return "".join(result)


__all__ = (
    "MINIMUM_WIDTH",
    "pad_right",
    "is_breaking_whitespace",
    "wrap_text_as_lines",
    "wrap_as_lines",
    "wrap_text",
)
