"""
Wrapping module behavioral tests.

Scope
- Validate pad_right() and the fixed set of wrap points.
- Validate wrap_text_as_lines(): width bound, minimum width, long-word chunking, hard breaks.
- Validate wrap_text(): identity without a width, indentation handling, hanging indent.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argloom import pad_right, is_breaking_whitespace, wrap_text_as_lines, wrap_as_lines, wrap_text


LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua."
)


class TestPadRight(TestCase):
    """Right padding."""

    def testPads(self):
        self.assertEqual(pad_right("Hello", 10), "Hello     ")

    def testNeverTruncates(self):
        self.assertEqual(pad_right("ThisIsALongString", 10), "ThisIsALongString")

    def testExactLength(self):
        self.assertEqual(pad_right("abc", 3), "abc")
        self.assertEqual(pad_right("", 0), "")


class TestBreakingWhitespace(TestCase):
    """The fixed set of wrap points."""

    def testWrapPoints(self):
        for codepoint in (0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0x85, 0x1680, 0x180E, 0x2000, 0x2005,
                          0x200A, 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF):
            with self.subTest(codepoint=hex(codepoint)):
                self.assertTrue(is_breaking_whitespace(chr(codepoint), 0))

    def testNonWrapPoints(self):
        for codepoint in (0xA0, 0x200B, 0x08, 0x0E, ord("a"), ord("-")):
            with self.subTest(codepoint=hex(codepoint)):
                self.assertFalse(is_breaking_whitespace(chr(codepoint), 0))

    def testIndex(self):
        self.assertTrue(is_breaking_whitespace("a b", 1))
        self.assertFalse(is_breaking_whitespace("a b", 2))


class TestWrapTextAsLines(TestCase):
    """Greedy wrapping into a list of lines."""

    def testParagraph(self):
        self.assertEqual(
            wrap_text_as_lines("This is a long paragraph that needs to be wrapped.", 0, 10),
            ["This is a", "long", "paragraph", "that needs", "to be", "wrapped."],
        )

    def testWidthBound(self):
        for width in (10, 15, 20, 37, 80):
            with self.subTest(width=width):
                for line in wrap_text_as_lines(LOREM, 0, width):
                    self.assertLessEqual(len(line), width)

    def testStartNarrowsWidth(self):
        lines = wrap_text_as_lines(LOREM, 20, 45)
        self.assertTrue(all(len(line) <= 25 for line in lines))
        self.assertGreater(len(lines), 1)

    def testMinimumWidth(self):
        for start, length in ((0, 3), (50, 40), (0, 0)):
            with self.subTest(start=start, length=length):
                lines = wrap_text_as_lines(LOREM, start, length)
                self.assertTrue(all(len(line) <= 10 for line in lines))

    def testShortLinesUnchanged(self):
        for line in ("short", "exactly 12!!", "a b c"):
            with self.subTest(line=line):
                self.assertEqual(wrap_text_as_lines(line, 0, 12), [line])

    def testTextWithinWidthUnchanged(self):
        lines = ["alpha beta", "gamma", "", "delta epsilon"]
        self.assertEqual(wrap_text_as_lines("\n".join(lines), 0, 13), lines)

    def testNoBreakSpaceIsNeverCut(self):
        self.assertEqual(wrap_text_as_lines("aaaa\u00a0bbbb cc", 0, 10), ["aaaa\u00a0bbbb", "cc"])
        self.assertEqual(wrap_text_as_lines("aaaaaa\u00a0bbbbbb", 0, 10), ["aaaaaa\u00a0bbb", "bbb"])

    def testLongWordIsChunked(self):
        self.assertEqual(
            wrap_text_as_lines("withaverylongwordthatneedstobewrapped.", 0, 10),
            ["withaveryl", "ongwordtha", "tneedstobe", "wrapped."],
        )

    def testHardBreaks(self):
        self.assertEqual(wrap_text_as_lines("alpha beta\ngamma", 0, 10), ["alpha beta", "gamma"])

    def testNoWordsLost(self):
        self.assertEqual(" ".join(wrap_text_as_lines(LOREM, 0, 17)).split(), LOREM.split())

    def testTrailingRemainderAlwaysEmitted(self):
        self.assertEqual(wrap_text_as_lines("", 0, 10), [""])
        self.assertEqual(wrap_text_as_lines("aaaaaaaaaa   ", 0, 10), ["aaaaaaaaaa", ""])

    def testTrailingSpacesTrimmed(self):
        self.assertEqual(wrap_text_as_lines("abc   ", 0, 10), ["abc"])

    def testAlias(self):
        self.assertIs(wrap_as_lines, wrap_text_as_lines)


class TestWrapText(TestCase):
    """Block wrapping with indentation."""

    def testIdentityWithoutWidth(self):
        text = "  some text\n\nthat stays   "
        self.assertEqual(wrap_text(text), text)
        self.assertEqual(wrap_text(text, -4), text)

    def testParagraph(self):
        self.assertEqual(
            wrap_text("This is a long paragraph that needs to be wrapped.", 10),
            "This is a\nlong\nparagraph\nthat needs\nto be\nwrapped.\n",
        )

    def testLongWord(self):
        self.assertEqual(
            wrap_text("withaverylongwordthatneedstobewrapped.", 10),
            "withaveryl\nongwordtha\ntneedstobe\nwrapped.\n",
        )

    def testHardLines(self):
        self.assertEqual(wrap_text("one two three four\nfive", 10), "one two\nthree four\nfive\n")

    def testLeadingIndentationRepeated(self):
        self.assertEqual(
            wrap_text("  This is a long paragraph", 12),
            "  This is a\n  long\n  paragraph\n",
        )

    def testHangingIndent(self):
        self.assertEqual(
            wrap_text("This is a long paragraph that needs to be wrapped.", 14, 4),
            "This is a long\n    paragraph\n    that needs\n    to be\n    wrapped.\n",
        )

    def testHangingIndentSingleLine(self):
        self.assertEqual(wrap_text("short", 20, 4), "short\n")

    def testBlankLinesSuppressed(self):
        self.assertEqual(wrap_text("first\n\n   \nsecond", 20), "first\nsecond\n")


if __name__ == "__main__":
    unittest.main()
