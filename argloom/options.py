r"""
Argloom option specifications.

Overview
- OptionKind: how raw tokens become a Value and how usage renders defaults.
  • FLAG: presence-only switch (boolean payload), e.g. --verbose / --no-verbose.
  • SINGLE: one value, e.g. --output=<FILE>.
  • MULTIPLE: a list of values, e.g. --define=<KEY> given several times.
- Option: immutable, validated schema entry for one named option/flag.
- option(...): factory mirroring Option(...) for call sites that prefer a function.

Metadata (sanitized on construction)
- Identity
  • name: non-empty str, must not start with "-" and must not contain any of
    space, tab, CR, LF, '"', '\', '/', "'".
  • abbr: None | single character, same forbidden set, must not be "-".
  • aliases: None | iterable of str, each following the name rules; duplicates rejected.
- Presentation
  • help: None | str (help column text).
  • value_help: None | str (placeholder label, rendered as =<LABEL>).
  • mandatory, hidden: bool.
- Values
  • kind: OptionKind (or its string value).
  • allowed: None | iterable of str; duplicates rejected, order kept.
  • allowed_help: None | mapping str -> str (help per allowed value).
  • default: None | Value | anything Value() accepts. An absent default counts as
    "not configured"; a scalar default of a MULTIPLE option becomes a one-item list.
  • negatable: bool, False when not given.
  • split_commas: bool, True for MULTIPLE options when not given, False otherwise.
  • callback: None | callable, forwarded to by Option.__call__ (never by the usage writer).

Validation failures
- Naming rules raise SchemaError (a ValueError) carrying field, value and code.
- Wrong Python types raise TypeError; duplicated allowed values or aliases raise ValueError.

Quick example:
    >>> from argloom import option, OptionKind
    >>> verbose = option("verbose", "v", help="Chatty output.", kind=OptionKind.FLAG, default=True)
    >>> level = option("level", help="Log level.", allowed=["DEBUG", "INFO"], default="INFO")
    >>> level.value_or_default("")
    Value('INFO')
"""
import functools
import operator
import re
import warnings
from collections.abc import Iterable, Mapping
from enum import Enum

from .faults import DeprecatedCallWarning, FaultCode, SchemaError
from .utils import *
from .values import Value


_INVALID_CHARACTERS = re.compile(r"[ \t\r\n\"\\/']")


class OptionKind(Enum):
    FLAG = "flag"
    SINGLE = "single"
    MULTIPLE = "multiple"


class SpecType(type):
    """
    Metaclass giving specs read-only, introspectable fields.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens).
    - Publish every name in __introspectable__ as a read-only property (mirror()).
    - Provide stable __repr__/__rich_repr__ over __displayable__ (or
      __introspectable__ when __displayable__ is Unset).
    - Seal the class against subclassing when created with sealed=True.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        if options.get("sealed", False):
            @rename("__init_subclass__")
            def __init_subclass__(cls, **options):  # NOQA: F-841
                raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
            self.__init_subclass__ = classmethod(__init_subclass__)

        return self


def _reject(field, value, code, message, hint):
    raise SchemaError(message, field=field, value=value, code=code, title=code.name.replace("_", " ").lower(), hint=hint)


def _validate_name(field, name, /):
    """
    Internal: apply the option naming rules to `name` (used for names and aliases).
    """
    if not name:
        _reject(field, name, FaultCode.EMPTY_NAME, f"{field} cannot be empty", "give the option a name")
    elif name.startswith("-"):
        _reject(field, name, FaultCode.DASHED_NAME, f'{field} "{name}" cannot start with "-"',
                "leading dashes are added by the usage text; drop them from the name")
    elif _INVALID_CHARACTERS.search(name):
        _reject(field, name, FaultCode.INVALID_NAME, f'{field} "{name}" contains invalid characters',
                "names cannot contain whitespace, quotes, slashes or backslashes")


def _sanitize_identity(cls, metadata, /):
    """
    Internal: validate name, abbreviation and aliases (mutates metadata in place).

    Raises
    - TypeError: a field has the wrong Python type.
    - SchemaError: a naming rule is violated.
    - ValueError: aliases contain duplicates.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    _validate_name("name", name)

    if (abbr := metadata["abbr"]) is not None:
        if not isinstance(abbr, str):
            raise TypeError(f"{cls.__typename__} 'abbr' must be a string")
        elif len(abbr) != 1:
            _reject("abbr", abbr, FaultCode.ABBREVIATION_LENGTH, "abbreviation must be None or have length 1",
                    "use a single character such as 'v'")
        elif abbr == "-":
            _reject("abbr", abbr, FaultCode.DASHED_ABBREVIATION, 'abbreviation cannot be "-"',
                    "pick a letter or digit for the short form")
        elif _INVALID_CHARACTERS.search(abbr):
            _reject("abbr", abbr, FaultCode.INVALID_ABBREVIATION, "abbreviation is an invalid character",
                    "abbreviations cannot be whitespace, quotes, slashes or backslashes")

    if (aliases := metadata["aliases"]) is not None:
        if isinstance(aliases, str) or not isinstance(aliases, Iterable):
            raise TypeError(f"{cls.__typename__} 'aliases' must be an iterable of strings")
        sanitized = []
        for alias in aliases:
            if not isinstance(alias, str):
                raise TypeError(f"{cls.__typename__} 'aliases' must be an iterable of strings")
            _validate_name("alias", alias)
            if alias in sanitized:
                raise ValueError(f"{cls.__typename__} 'aliases' cannot contain duplicates")
            sanitized.append(alias)
        metadata["aliases"] = tuple(sanitized)


def _sanitize_presentation(cls, metadata, /):
    """
    Internal: type-check the help texts and normalize the visibility switches.
    """
    for field in ("help", "value_help"):
        if not isinstance(metadata[field], str | None):
            raise TypeError(f"{cls.__typename__} {field!r} must be a string")

    metadata["mandatory"] = bool(metadata["mandatory"])
    metadata["hidden"] = bool(metadata["hidden"])


def _sanitize_values(cls, metadata, /):
    """
    Internal: normalize kind, allowed values, default and callback.

    Side effects
    - kind strings become OptionKind members.
    - allowed becomes a tuple, allowed_help a dict copy.
    - default becomes a Value (or None when absent / not given).
    - negatable and split_commas are resolved to plain booleans.
    """
    if not isinstance(kind := metadata["kind"], OptionKind):
        if not isinstance(kind, str):
            raise TypeError(f"{cls.__typename__} 'kind' must be an OptionKind")
        metadata["kind"] = kind = OptionKind(kind.lower())

    if (allowed := metadata["allowed"]) is not None:
        if isinstance(allowed, str) or not isinstance(allowed, Iterable):
            raise TypeError(f"{cls.__typename__} 'allowed' must be an iterable of strings")
        sanitized = []
        for value in allowed:
            if not isinstance(value, str):
                raise TypeError(f"{cls.__typename__} 'allowed' must be an iterable of strings")
            if value in sanitized:
                raise ValueError(f"{cls.__typename__} 'allowed' cannot contain duplicates")
            sanitized.append(value)
        metadata["allowed"] = tuple(sanitized)

    if (allowed_help := metadata["allowed_help"]) is not None:
        if not isinstance(allowed_help, Mapping):
            raise TypeError(f"{cls.__typename__} 'allowed_help' must be a mapping")
        if not all(isinstance(key, str) and isinstance(value, str) for key, value in allowed_help.items()):
            raise TypeError(f"{cls.__typename__} 'allowed_help' must map strings to strings")
        metadata["allowed_help"] = dict(allowed_help)

    if (default := metadata["default"]) is not None:
        default = Value(default)
        if default.is_absent():
            default = None
        elif kind is OptionKind.MULTIPLE and not default.is_list():
            default = Value([default])
    metadata["default"] = default

    if metadata["callback"] is not None and not callable(metadata["callback"]):
        raise TypeError(f"{cls.__typename__} 'callback' must be callable")

    metadata["negatable"] = bool(metadata["negatable"])
    if metadata["split_commas"] is None:
        metadata["split_commas"] = kind is OptionKind.MULTIPLE
    metadata["split_commas"] = bool(metadata["split_commas"])


class Option(metaclass=SpecType, sealed=True):
    """
    Immutable schema entry describing one named command-line option.

    Option is created once, when the owning registry defines its schema, and
    is only read afterwards: every field below is a read-only property and
    containers come back frozen. Construction either yields a valid option or
    raises; a half-valid option never exists.

    Properties
    - The names listed in __introspectable__ are exposed as read-only attributes
      mirroring the sanitized metadata values.
    """

    __introspectable__ = (
        "name",
        "abbr",
        "help",
        "value_help",
        "allowed",
        "allowed_help",
        "default",
        "callback",
        "kind",
        "negatable",
        "split_commas",
        "mandatory",
        "hidden",
        "aliases",
    )
    __displayable__ = tuple(name for name in __introspectable__ if name != "callback")

    def __new__(
            cls,
            name,
            /,
            abbr=None,
            help=None,
            value_help=None,
            allowed=None,
            allowed_help=None,
            default=None,
            callback=None,
            kind=OptionKind.SINGLE,
            negatable=None,
            split_commas=None,
            mandatory=False,
            hidden=False,
            aliases=None,
    ):
        """
        Construct an Option with the provided metadata.

        Metadata is sanitized in three passes:
        - _sanitize_identity: name, abbr, aliases (naming rules).
        - _sanitize_presentation: help, value_help, mandatory, hidden.
        - _sanitize_values: kind, allowed, allowed_help, default, callback,
          negatable, split_commas.
        """
        metadata = {
            "name": name,
            "abbr": abbr,
            "help": help,
            "value_help": value_help,
            "allowed": allowed,
            "allowed_help": allowed_help,
            "default": default,
            "callback": callback,
            "kind": kind,
            "negatable": negatable,
            "split_commas": split_commas,
            "mandatory": mandatory,
            "hidden": hidden,
            "aliases": aliases,
        }
        _sanitize_identity(cls, metadata)
        _sanitize_presentation(cls, metadata)
        _sanitize_values(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    def is_flag(self):
        return self._kind is OptionKind.FLAG

    def is_single(self):
        return self._kind is OptionKind.SINGLE

    def is_multiple(self):
        return self._kind is OptionKind.MULTIPLE

    def value_or_default(self, value=Unset, /):
        """
        Return `value` when it counts as present, otherwise the effective default.

        Presence
        - booleans, integers and lists are always present;
        - strings are present only when non-empty;
        - absent values (and a missing argument) are never present.

        Effective default
        - the configured default when there is one;
        - otherwise an empty list for MULTIPLE options and an absent value for the rest.
        """
        value = Value(coalesce(value, Value()))
        if value.is_bool() or value.is_int() or value.is_list() or (value.is_string() and value.as_string()):
            return value
        if self._default is not None:
            return self._default
        return Value([]) if self.is_multiple() else Value()

    def get_or_default(self, value=Unset, /):
        """
        Deprecated spelling of value_or_default().
        """
        warnings.warn(DeprecatedCallWarning(
            "get_or_default() is deprecated, use value_or_default() instead",
            code=FaultCode.DEPRECATED_CALL,
            title="deprecated call",
            hint="rename the call to value_or_default()",
        ), stacklevel=2)
        return self.value_or_default(value)

    def __call__(self, value, /):
        """
        Forward a parsed value to the bound callback (no-op returning None without one).
        """
        if self._callback is None:
            return None
        return self._callback(value)


def option(
        name,
        /,
        abbr=None,
        help=None,
        value_help=None,
        allowed=None,
        allowed_help=None,
        default=None,
        callback=None,
        kind=OptionKind.SINGLE,
        negatable=None,
        split_commas=None,
        mandatory=False,
        hidden=False,
        aliases=None,
):
    """
    Factory for Option; the arguments are forwarded unchanged.

    Kept as a function so that registries can pass it around (e.g. as a
    functools.partial with a preset kind) without exposing the class.
    """
    return Option(
        name,
        abbr=abbr,
        help=help,
        value_help=value_help,
        allowed=allowed,
        allowed_help=allowed_help,
        default=default,
        callback=callback,
        kind=kind,
        negatable=negatable,
        split_commas=split_commas,
        mandatory=mandatory,
        hidden=hidden,
        aliases=aliases,
    )


__all__ = (
    # Enumerations
    "OptionKind",

    # Classes
    "Option",

    # Factories
    "option",
)

# Keep the metaclass out of star-imports and docs; it is not part of the public API.
del SpecType
