"""
cmdline utilities (internal helpers shared by the schema, the matcher and the binder)

Overview
- rename("name")
  • Decorator giving generated functions a stable __name__/__qualname__ for clean
    tracebacks and reprs.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr), frozen
    into tuples/mapping proxies for containers.

- isidentifier(name)
  • Name grammar shared by arguments, long options (after "--") and short options (after "-").

- isinteger(token)
  • Numeric gate applied to values of arguments/options declared as numeric.

Quick examples
    >>> isidentifier("file_2")
    True
    >>> isidentifier("2file")
    False
    >>> isinteger(" -42 ")
    True
"""
import re
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType


def rename(name, /):
    """
    Return a decorator that sets __name__ and __qualname__ of a function to `name`.
    """
    if not isinstance(name, str):
        raise TypeError("@rename() argument must be a string")

    def decorator(function):
        if not callable(function):
            raise TypeError("@rename() must be applied to a callable")
        function.__name__ = function.__qualname__ = name
        return function

    return decorator


def _freeze(object):
    """
    Shallow read-only snapshot of a container value.

    - Sequence (non-string) → tuple
    - Mapping               → MappingProxyType over a copy
    - Set                   → frozenset
    - anything else         → returned as-is
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
    Property reading "_{name}" on the instance, frozen for container types.

    registries exposed this way cannot be mutated through the public API.

    Example
    - Given self._arguments, declare arguments = mirror("arguments").
    """
    if not isinstance(name, str):
        raise TypeError("mirror() takes a field name")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


def isidentifier(name, /):
    """
    Return True when name follows the identifier grammar of this package.

    grammar
    - non-empty, first character is an ASCII letter.
    - every character is an ASCII letter, an ASCII digit, or '_'.

    the same rule applies to argument names, to long option names once the
    leading "--" is removed, and to short option names once the leading "-" is removed.
    """
    if not isinstance(name, str):
        raise TypeError("isidentifier() argument must be a string")
    return re.fullmatch(r"[A-Za-z][A-Za-z0-9_]*", name) is not None


def isinteger(token, /):
    """
    Return True when token reads as a decimal integer.

    accepted: optional surrounding whitespace, an optional sign, then one or more
    ASCII digits ("3", "-12", " +7 "). there is no range limit.

    this is a whole-token check, not a prefix parse: "3abc" and "12.5" are
    refused instead of being read as 3 and 12, and values beyond a 32-bit int
    are accepted.
    """
    if not isinstance(token, str):
        raise TypeError("isinteger() argument must be a string")
    return re.fullmatch(r"\s*[+-]?[0-9]+\s*", token) is not None


__all__ = (
    "rename",
    "mirror",
    "isidentifier",
    "isinteger",
)
