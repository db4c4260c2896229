"""
cmdline binder: check positional arity and numeric constraints, then bind values.

Positional rules (P = positional tokens supplied, D = declared arguments, the
pack counting as one slot)
- without a pack: P must equal D.
- with a pack: every other argument takes exactly one token and the pack takes
  the remaining P - (D - 1) tokens, which must be at least one. Arguments are
  walked in declared order and the pack's run is assigned contiguously at the
  pack's own declared slot, wherever that slot is.
- numeric arguments (pack included, token by token) only accept integers.

Binding
- plain argument  -> Single(token)
- pack            -> Multi(run of tokens)
- matched option  -> Multi(captured values), bound under the long name and, when
  the option has one, under its short name too (the same Value object).

bind() returns either a read-only name -> Value mapping or a ParseFault
instance; it never prints and never exits.
"""
from types import MappingProxyType

from .faults import *
from .utils import *
from .values import Single, Multi


def _listing(arguments, positionals):
    """
    Side-by-side view of declared names and supplied tokens: "<file:a> < :b>".
    """
    pairs = []
    for index in range(max(len(arguments), len(positionals))):
        name = arguments[index].name if index < len(arguments) else " "
        token = positionals[index] if index < len(positionals) else " "
        pairs.append("<%s:%s>" % (name, token))
    return " ".join(pairs)


def _numeric(argument, token):
    if not argument.numeric or isinteger(token):
        return None
    kind = "argument pack <%s...>" if argument.pack else "argument <%s>"
    return NumberRequiredError(
        "%s requires numeric values, got %r" % (kind % argument.name, token),
        title="number required",
        code=FaultCode.NUMBER_REQUIRED,
        argument=argument,
        value=token,
    )


def bind(schema, matched, /):
    """
    Validate `matched` (see cmdline.matcher) against `schema` and build the value store.

    returns
    - MappingProxyType[str, Value] on success.
    - ArgumentCountError, NotEnoughArgumentsError, EmptyPackError or
      NumberRequiredError otherwise.
    """
    arguments = schema.arguments
    positionals = matched.positionals
    declared, supplied = len(arguments), len(positionals)
    store = {}

    if schema.pack is None:
        if supplied != declared:
            return ArgumentCountError(
                "argument count must be %d, got %d: %s" % (declared, supplied, _listing(arguments, positionals)),
                title="wrong argument count",
                code=FaultCode.ARGUMENT_COUNT,
                expected=declared,
                current=supplied,
            )
        for argument, token in zip(arguments, positionals):
            if fault := _numeric(argument, token):
                return fault
            store[argument.name] = Single(token)
    else:
        if supplied < declared - 1:
            return NotEnoughArgumentsError(
                "argument count must be at least %d, got %d" % (declared - 1, supplied),
                title="not enough arguments",
                code=FaultCode.NOT_ENOUGH_ARGUMENTS,
                expected=declared - 1,
                current=supplied,
            )
        if (size := supplied - (declared - 1)) < 1:
            return EmptyPackError(
                "argument pack <%s...> needs at least 1 value, got %d" % (schema.pack.name, size),
                title="empty argument pack",
                code=FaultCode.EMPTY_PACK,
                argument=schema.pack,
            )
        cursor = 0
        for argument in arguments:
            run = positionals[cursor:cursor + (size if argument.pack else 1)]
            cursor += len(run)
            for token in run:
                if fault := _numeric(argument, token):
                    return fault
            store[argument.name] = Multi(run) if argument.pack else Single(run[0])

    for name, values in matched.options.items():
        store[name] = value = Multi(values)
        if short := schema.options[name].short:
            store[short] = value

    return MappingProxyType(store)


__all__ = (
    "bind",
)
