"""
Argloom values: the dynamically-typed payload an option holds.

Overview
- Value is a closed tagged union with five variants (see ValueKind):
  absent, integer, boolean, string and an ordered list of Values.
- The variant is inferred from the Python payload given to the constructor;
  lists are converted element by element, so nested lists are fine.
- Values are immutable and hashable; copies are free and share nothing mutable.
- Accessors are type-checked: as_int() on a string value raises
  TypeMismatchError instead of returning something surprising.

Canonical text (to_string / str)
- integers in decimal, booleans as "true"/"false", strings verbatim,
  lists as "[e1, e2, ...]" with every element rendered recursively,
  absent as the empty string.

Quick example:
    >>> Value(["a", 1, True]).to_string()
    '[a, 1, true]'
    >>> Value().is_absent()
    True
"""
import functools
from enum import Enum
from typing import final

from rich.text import Text

from .faults import FaultCode, TypeMismatchError


class absenttype:
    """
    Singleton type of `absent`, the payload of a Value that holds nothing.

    Falsy, repr is "absent", one instance per process, not subclassable.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __rich__(self):
        return Text(repr(self), style="dim")

    def __repr__(self):
        return "absent"

    def __reduce__(self):
        return "absent"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'absenttype' is not an acceptable base type")


absent = absenttype()


class ValueKind(Enum):
    ABSENT = "absent"
    INT = "int"
    BOOL = "bool"
    STRING = "string"
    LIST = "list"


# Signed 64-bit range.
_INT_MIN = -(1 << 63)
_INT_MAX = (1 << 63) - 1


@final
class Value:
    """
    Tagged union over absent | int | bool | str | list[Value].

    Construction
    - Value()              -> absent
    - Value(absent)        -> absent
    - Value(True)          -> bool (checked before int)
    - Value(42)            -> int, must fit in 64 signed bits
    - Value("text")        -> string
    - Value([1, "a"])      -> list, items converted recursively (tuples accepted too)
    - Value(other_value)   -> other_value itself

    Anything else raises TypeError.
    """

    __slots__ = ("_kind", "_payload")

    def __new__(cls, payload=absent, /):
        if isinstance(payload, Value):
            return payload

        match payload:
            case absenttype():
                kind = ValueKind.ABSENT
            case bool():
                kind = ValueKind.BOOL
            case int():
                if not _INT_MIN <= payload <= _INT_MAX:
                    raise ValueError(f"integer value {payload} does not fit in 64 bits")
                kind, payload = ValueKind.INT, int(payload)
            case str():
                kind, payload = ValueKind.STRING, str(payload)
            case list() | tuple():
                kind, payload = ValueKind.LIST, tuple(map(Value, payload))
            case _:
                raise TypeError(f"cannot build a value from {type(payload).__name__!r}")

        self = super().__new__(cls)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_payload", payload)
        return self

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __init_subclass__(cls, **options):
        raise TypeError("type 'Value' is not an acceptable base type")

    @property
    def kind(self):
        return self._kind

    def is_absent(self):
        return self._kind is ValueKind.ABSENT

    def is_int(self):
        return self._kind is ValueKind.INT

    def is_bool(self):
        return self._kind is ValueKind.BOOL

    def is_string(self):
        return self._kind is ValueKind.STRING

    def is_list(self):
        return self._kind is ValueKind.LIST

    def _extract(self, kind):
        if self._kind is not kind:
            raise TypeMismatchError(
                f"cannot read {kind.value} payload from {self._kind.value} value",
                code=FaultCode.TYPE_MISMATCH,
                title="type mismatch",
                hint=f"check is_{kind.name.lower()}() before reading the payload",
                expected=kind,
                actual=self._kind,
            )
        return self._payload

    def as_int(self):
        return self._extract(ValueKind.INT)

    def as_bool(self):
        return self._extract(ValueKind.BOOL)

    def as_string(self):
        return self._extract(ValueKind.STRING)

    def as_list(self):
        """
        Return the items of a list value as a tuple of Values.
        """
        return self._extract(ValueKind.LIST)

    def to_string(self):
        match self._kind:
            case ValueKind.ABSENT:
                return ""
            case ValueKind.BOOL:
                return "true" if self._payload else "false"
            case ValueKind.INT:
                return str(self._payload)
            case ValueKind.STRING:
                return self._payload
            case ValueKind.LIST:
                return "[" + ", ".join(item.to_string() for item in self._payload) + "]"

    __str__ = to_string

    def __eq__(self, other, /):
        if not isinstance(other, Value):
            return NotImplemented
        return self._kind is other._kind and self._payload == other._payload

    def __hash__(self):
        return hash((self._kind, self._payload))

    def __repr__(self):
        match self._kind:
            case ValueKind.ABSENT:
                return "Value()"
            case ValueKind.LIST:
                return f"Value([{', '.join(map(repr, self._payload))}])"
            case _:
                return f"Value({self._payload!r})"

    def __rich__(self):
        match self._kind:
            case ValueKind.ABSENT:
                return absent.__rich__()
            case ValueKind.BOOL:
                return Text(self.to_string(), style="bold #22C55E" if self._payload else "bold #EF4444")
            case ValueKind.INT:
                return Text(self.to_string(), style="bold #00E6FF")
            case ValueKind.STRING:
                return Text(repr(self._payload), style="#FFD600")
            case ValueKind.LIST:
                return Text("[").append_text(Text(", ").join(map(Value.__rich__, self._payload))).append("]")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __reduce__(self):
        if self._kind is ValueKind.ABSENT:
            return type(self), ()
        return type(self), (self._payload,)


__all__ = (
    "ValueKind",
    "Value",
    "absenttype",
    "absent",
)
