"""
Argloom faults (errors) and their rendering.

Scope
- FaultCode: stable numeric identifiers for every error the package raises,
  grouped by domain so logs and searches stay predictable.
- ArgloomError: base type carrying a message plus a read-only options mapping
  (code, title, hint and fault specific context) that renders itself with rich.
- SchemaError: an option definition is malformed (raised while constructing it).
- TypeMismatchError: a Value accessor was used against the wrong variant.
- ArgloomWarning / DeprecatedCallWarning: non-fatal notices issued through the
  warnings module (DeprecatedCallWarning is also a DeprecationWarning).

Policy
- Both error kinds are caller bugs. They propagate synchronously; nothing in the
  package catches, retries or logs them.
- SchemaError is also a ValueError and TypeMismatchError is also a TypeError,
  so code written against the builtin hierarchy keeps working.

Customization
- Define __styles__ in __main__ to override palette entries.
- Define __codes__ in __main__ to map FaultCode members to custom labels.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - schema (211xx): option names and abbreviations
      • EMPTY_NAME, DASHED_NAME, INVALID_NAME
      • ABBREVIATION_LENGTH, DASHED_ABBREVIATION, INVALID_ABBREVIATION
    - values (221xx): tagged value accessors
      • TYPE_MISMATCH
    - warnings (231xx): non-fatal notices
      • DEPRECATED_CALL
    """
    # --- schema errors (21xxx) ---
    EMPTY_NAME                  = 21101
    DASHED_NAME                 = 21102
    INVALID_NAME                = 21103
    ABBREVIATION_LENGTH         = 21111
    DASHED_ABBREVIATION         = 21112
    INVALID_ABBREVIATION        = 21113

    # --- value errors (22xxx) ---
    TYPE_MISMATCH               = 22101

    # --- warnings (23xxx) ---
    DEPRECATED_CALL             = 23101

    def normalize(self):
        """
        return a host-normalized label for this code.

        the host application may provide a __codes__ mapping in __main__;
        without one the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ArgloomError(Exception):
    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not self.options.get("colorful", True):
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "argloom"), "prog-name"),
            " - ",
            text(self.code.normalize() if self.code is not None else "?", "code"),
            " | ",
            text(self.options.get("title", "error").title(), "error-title"),
            " ]",
        )
        renders = [header, text(self.message, "error-message")]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" -> ", "hint-arrow"), text(hint, "hint")))
        return Group(*renders)


class SchemaError(ArgloomError, ValueError):
    """
    An option definition violates a naming rule.

    options
    - field: "name", "abbr" or "alias"
    - value: the offending string
    - code:  the FaultCode of the violated rule
    """

    @property
    def field(self):
        return self.options["field"]

    @property
    def value(self):
        return self.options["value"]


class TypeMismatchError(ArgloomError, TypeError):
    """
    A Value accessor was used against the wrong variant.

    options
    - expected: the ValueKind the accessor extracts
    - actual:   the ValueKind the value holds
    """

    @property
    def expected(self):
        return self.options["expected"]

    @property
    def actual(self):
        return self.options["actual"]


class ArgloomWarning(Warning):
    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",
            "warning-title": "bold #FFC2E0",

            # body
            "warning-message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not self.options.get("colorful", True):
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "argloom"), "prog-name"),
            " - ",
            text(self.code.normalize() if self.code is not None else "?", "code"),
            " | ",
            text(self.options.get("title", "warning").title(), "warning-title"),
            " ]",
        )
        renders = [header, text(self.message, "warning-message")]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" -> ", "hint-arrow"), text(hint, "hint")))
        return Group(*renders)


class DeprecatedCallWarning(ArgloomWarning, DeprecationWarning): ...


__all__ = (
    "FaultCode",
    "ArgloomError",
    "SchemaError",
    "TypeMismatchError",
    "ArgloomWarning",
    "DeprecatedCallWarning",
)
