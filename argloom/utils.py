"""
Argloom utilities (small building blocks shared by the package)

Overview
- UnsetType / Unset
  • Sentinel for parameters the caller did not pass, kept apart from None
    because None is a meaningful "no value" for several option fields.

- coalesce(value, default=None)
  • Materialize Unset into a default; every other value (None included) passes through.

- rename(callable, name) / @rename("name")
  • Give helpers built at class-construction time a readable __name__/__qualname__.

- mirror("attr")
  • Read-only property publishing the private backing field self._attr as a
    frozen snapshot (tuple / MappingProxyType / frozenset).

Names not listed in __all__ are internal and may change without notice.
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Sealed sentinel type for "argument not passed".

    - Falsey, repr is "Unset", one instance per process.
    - Participates in PEP 604 unions so that isinstance(x, str | Unset) reads naturally.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return `default` when `object` is Unset, otherwise `object` unchanged.

    Falsey values such as None, 0, "" or () are real values here and are kept.

    Examples
    - coalesce(Unset, 80)   -> 80
    - coalesce(None, 80)    -> None
    - coalesce(0, 80)       -> 0
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set __name__/__qualname__ on a callable (rename(callable, name)), or build a
    decorator doing so later (rename(name)).
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be an updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _freeze(object):
    """
    Shallow-freeze a container for publication.

    - Sequence (not str) -> tuple
    - Mapping            -> MappingProxyType over a private copy
    - Set                -> frozenset
    - anything else      -> as-is
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(object)
    elif isinstance(object, Mapping):
        return MappingProxyType(dict(object))
    elif isinstance(object, Set):
        return frozenset(object)
    return object


def mirror(name, /):
    """
    Read-only property over the private field "_{name}".

    Containers are returned frozen, so callers holding an option cannot change
    what the usage writer will later read from it.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
