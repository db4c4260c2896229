"""
cmdline matcher: split raw tokens into positional values and option values.

Algorithm (left to right, single pass)
- a token equal to a registered long name, or to a registered short name, starts
  that option; the next `count` tokens are its values, whatever they look like
  (a value token that spells another option is still a value).
- any other token is a positional value, kept in order.
- an option matched again replaces its earlier values (last occurrence wins).
- there is no flag bundling, no "--name=value" form and no reordering.

Faults are returned, not raised: match() gives back either a Matched record or a
ParseFault instance (NotEnoughValuesError, NumberRequiredError) for the caller
to surface.

The built-in "--help"/"--usage" shortcuts are recognized by shortcut(): they
only fire for a single bare token and only when the schema does not own an
option of that exact long name.
"""
from typing import NamedTuple

from .faults import *
from .utils import *

SHORTCUTS = ("--help", "--usage")


class Matched(NamedTuple):
    """
    Interim result of the matcher.

    - positionals: positional tokens, in input order.
    - options: long option name -> captured values (empty tuple for count 0).
    """
    positionals: tuple[str, ...]
    options: dict[str, tuple[str, ...]]


def _values(count):
    return "1 value" if count == 1 else "%d values" % count


def shortcut(schema, arguments, /):
    """
    Return "--help" or "--usage" when the arguments request a built-in text, else None.
    """
    if len(arguments) == 1 and arguments[0] in SHORTCUTS and arguments[0] not in schema.options:
        return arguments[0]
    return None


def match(schema, arguments, /):
    """
    Classify `arguments` (program path excluded) against `schema`.

    returns
    - Matched on success.
    - NotEnoughValuesError when an option token is followed by fewer than `count` tokens.
    - NumberRequiredError when a numeric option captures a non-integer value; values
      are checked in order, so a bad value is reported before a missing one.
    """
    positionals = []
    options = {}
    index = 0

    while index < len(arguments):
        token = arguments[index]
        index += 1

        if (option := schema.resolve(token)) is None:
            positionals.append(token)
            continue

        window = tuple(arguments[index:index + option.count])
        index += len(window)

        if option.numeric:
            for value in window:
                if not isinteger(value):
                    return NumberRequiredError(
                        "option %r requires numeric values, got %r" % (option.name, value),
                        title="number required",
                        code=FaultCode.NUMBER_REQUIRED,
                        option=option,
                        value=value,
                    )

        if len(window) < option.count:
            return NotEnoughValuesError(
                "option %r takes %s, got %d" % (option.name, _values(option.count), len(window)),
                title="not enough values",
                code=FaultCode.NOT_ENOUGH_VALUES,
                option=option,
                expected=option.count,
                current=len(window),
            )

        # last occurrence wins
        options[option.name] = window

    return Matched(tuple(positionals), options)


__all__ = (
    "Matched",
    "shortcut",
    "match",
)
