r"""
cmdline schema entries.

Overview
- Entries
  • Argument: required positional input bound to a declared name. One argument of
    a schema may be the "pack", which absorbs a variable-length run of positionals.
  • Option: named input with a mandatory long name ("--name"), an optional short
    alias ("-n") and a fixed number of trailing values (count, possibly 0).

- Introspection & representation
  • EntryType metaclass provides stable __repr__/__rich_repr__ and exposes the fields
    declared in __introspectable__ via read-only properties (see utils.mirror).
  • Entries are immutable once built: fields live in private slots and the public
    surface is made of properties only.

Validation split
- Constructors only check the *types* of what they receive (TypeError); a wrong
  type is a programming error and propagates.
- Name grammar, length limits and uniqueness are a schema concern (see
  cmdline.schema), because they depend on what was registered before and are
  reported as non-fatal registration faults.

Quick example:
    >>> from cmdline.arguments import Argument, Option
    >>> Argument("file", "text file path")
    argument(name='file', note='text file path', numeric=False, pack=False)
    >>> Option("--lines", 1, "-l", "line count to show", True, index=0).count
    1
"""
import functools
import operator
import re

from .utils import *


class EntryType(type):
    """
    Metaclass that turns entries into introspectable, read-only records.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens),
      used in messages and representations.
    - Expose every name listed in __introspectable__ as a read-only property
      mirroring the private "_<name>" field.
    - Provide compact __repr__/__rich_repr__ implementations for diagnostics.
    - Seal concrete entries against subclassing.
    """
    __introspectable__ = ()

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
            """
            Return a concise, stable representation with every introspectable field.

            Example
            - option(name='--lines', short='-l', note='', count=1, numeric=True, index=0)
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        @rename("__init_subclass__")
        def __init_subclass__(cls, **options):  # NOQA: F-841
            raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
        self.__init_subclass__ = classmethod(__init_subclass__)

        return self


def _check(cls, metadata, /):
    """
    Internal: type-check the fields shared by every entry.

    - name: str (grammar is checked by the schema).
    - note: str (may be empty, may span several lines).
    - numeric: coerced to bool.
    """
    if not isinstance(metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    if not isinstance(metadata["note"], str):
        raise TypeError(f"{cls.__typename__} 'note' must be a string")
    metadata["numeric"] = bool(metadata["numeric"])


class Argument(metaclass=EntryType):
    """
    Positional argument entry.

    Fields
    - name: declared name, used as lookup key on the parser.
    - note: free text shown in help (newlines continue on re-indented lines).
    - numeric: every value bound to this argument must read as an integer.
    - pack: this argument absorbs the variable-length run of positionals.
    """
    __slots__ = ("_name", "_note", "_numeric", "_pack")

    __introspectable__ = (
        "name",
        "note",
        "numeric",
        "pack",
    )

    def __new__(cls, name, /, note="", numeric=False, pack=False):
        metadata = {
            "name": name,
            "note": note,
            "numeric": numeric,
            "pack": bool(pack),
        }
        _check(cls, metadata)

        self = super().__new__(cls)
        for field, value in metadata.items():
            object.__setattr__(self, "_" + field, value)
        return self

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__typename__} is read-only")


class Option(metaclass=EntryType):
    """
    Named option entry.

    Fields
    - name: long name, including its "--" prefix.
    - short: short alias including its "-" prefix, or None.
    - note: free text shown in help.
    - count: number of values consumed after the option token (arity).
    - numeric: every captured value must read as an integer.
    - index: registration order, used only to keep help/usage display stable.
    """
    __slots__ = ("_name", "_short", "_note", "_count", "_numeric", "_index")

    __introspectable__ = (
        "name",
        "short",
        "note",
        "count",
        "numeric",
        "index",
    )

    def __new__(cls, name, /, count=0, short="", note="", numeric=False, *, index):
        metadata = {
            "name": name,
            "short": short,
            "note": note,
            "count": count,
            "numeric": numeric,
            "index": index,
        }
        _check(cls, metadata)

        if not isinstance(short := metadata["short"], str | None):
            raise TypeError(f"{cls.__typename__} 'short' must be a string")
        metadata["short"] = short or None

        for field in ("count", "index"):
            if not isinstance(metadata[field], int) or isinstance(metadata[field], bool):
                raise TypeError(f"{cls.__typename__} {field!r} must be an integer")
            if metadata[field] < 0:
                raise ValueError(f"{cls.__typename__} {field!r} cannot be negative")

        self = super().__new__(cls)
        for field, value in metadata.items():
            object.__setattr__(self, "_" + field, value)
        return self

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__typename__} is read-only")


__all__ = (
    "Argument",
    "Option",
)

# Not part of the public API.
del EntryType
