"""
cmdline schema: the mutable registry of declared arguments and options.

Registration rules
- arguments
  • name: 1..32 characters, identifier grammar (see utils.isidentifier).
  • names are unique across all arguments, the pack included.
  • at most one argument is the pack (add_argument_pack); it may be declared at
    any position, pack semantics follow the flag, not the position.
- options
  • long name: 3..32 characters, starts with "--", identifier after the prefix, unique.
  • short name (optional): 2..16 characters, starts with "-", identifier after the
    prefix, unique across all options.
  • each option records its registration order (index) for display purposes.

Failures are non-fatal: the offending entry is not registered, a
RegistrationWarning is rendered on standard error, and the call returns False.
Passing something other than a string as a name is a programming error and
raises TypeError.
"""
from types import MappingProxyType

from .arguments import Argument, Option
from .faults import *
from .utils import *

ARGUMENT_NAME_LIMIT = 32
OPTION_NAME_LIMIT = 32
SHORT_NAME_LIMIT = 16


class Schema:
    """
    Ordered argument list + option table + short alias table.

    The options passed at construction (for example prog, colorful) are
    forwarded to trigger() when a registration warning is rendered.
    """

    arguments = mirror("arguments")
    options = mirror("options")
    aliases = mirror("aliases")

    def __init__(self, **options):
        self._arguments = []
        self._options = {}
        self._aliases = {}
        self._pack = None
        self._reporting = MappingProxyType(options)

    @property
    def pack(self):
        """
        The pack argument, or None when no pack was declared.
        """
        return self._pack

    def resolve(self, token, /):
        """
        Return the Option a raw token starts, or None for a positional token.

        a token starts an option when it equals a registered long name, or a
        registered short name (mapped back to its long name).
        """
        try:
            return self._options[self._aliases.get(token, token)]
        except KeyError:
            return None

    def _warn(self, fault):
        trigger(fault, **self._reporting)
        return False

    def _check_argument(self, name, typename):
        if not isinstance(name, str):
            raise TypeError(f"{typename} name must be a string")
        if not name or len(name) > ARGUMENT_NAME_LIMIT or not isidentifier(name):
            return InvalidArgumentNameWarning(
                "bad %s name %r" % (typename, name),
                title="invalid %s name" % typename,
                code=FaultCode.INVALID_ARGUMENT_NAME,
                hint="use at most %d characters, start with a letter and continue with "
                     "letters, digits or '_'" % ARGUMENT_NAME_LIMIT,
            )
        if any(argument.name == name for argument in self._arguments):
            return DuplicatedArgumentWarning(
                "%s name %r is already in use" % (typename, name),
                title="duplicated %s" % typename,
                code=FaultCode.DUPLICATED_ARGUMENT,
                hint="pick a name that no other argument uses",
            )
        return None

    def add_argument(self, name, note="", numeric=False):
        """
        Register a positional argument; return True on success.
        """
        if fault := self._check_argument(name, "argument"):
            return self._warn(fault)
        self._arguments.append(Argument(name, note, numeric))
        return True

    def add_argument_pack(self, name, note="", numeric=False):
        """
        Register the argument pack (at least one value at parse time); return True on success.

        the duplicated-pack rule is checked first: a second pack is refused
        whatever its name.
        """
        if self._pack is not None:
            return self._warn(DuplicatedPackWarning(
                "argument pack %r is already declared, %r cannot be added" % (self._pack.name, name),
                title="duplicated argument pack",
                code=FaultCode.DUPLICATED_PACK,
                hint="declare at most one argument pack",
            ))
        if fault := self._check_argument(name, "argument pack"):
            return self._warn(fault)
        self._arguments.append(pack := Argument(name, note, numeric, pack=True))
        self._pack = pack
        return True

    def add_option(self, name, count=0, short="", note="", numeric=False):
        """
        Register a named option taking exactly `count` values; return True on success.
        """
        if not isinstance(name, str):
            raise TypeError("option name must be a string")
        if not isinstance(short, str):
            raise TypeError("option short name must be a string")

        if name in self._options:
            return self._warn(DuplicatedOptionWarning(
                "option %r is already in use" % name,
                title="duplicated option",
                code=FaultCode.DUPLICATED_OPTION,
                hint="pick a long name that no other option uses",
            ))
        if (
            not 3 <= len(name) <= OPTION_NAME_LIMIT or
            not name.startswith("--") or
            not isidentifier(name[2:])
        ):
            return self._warn(InvalidOptionNameWarning(
                "bad option name %r" % name,
                title="invalid option name",
                code=FaultCode.INVALID_OPTION_NAME,
                hint="use at most %d characters, start with '--' and continue with a letter "
                     "followed by letters, digits or '_'" % OPTION_NAME_LIMIT,
            ))
        if short:
            if short in self._aliases:
                return self._warn(DuplicatedShortNameWarning(
                    "short name %r is already used by option %r" % (short, self._aliases[short]),
                    title="duplicated short name",
                    code=FaultCode.DUPLICATED_SHORT_NAME,
                    hint="pick a short name that no other option uses",
                ))
            if (
                not 2 <= len(short) <= SHORT_NAME_LIMIT or
                not short.startswith("-") or
                not isidentifier(short[1:])
            ):
                return self._warn(InvalidShortNameWarning(
                    "bad short name %r for option %r" % (short, name),
                    title="invalid short name",
                    code=FaultCode.INVALID_SHORT_NAME,
                    hint="use at most %d characters, start with '-' and continue with a letter "
                         "followed by letters, digits or '_'" % SHORT_NAME_LIMIT,
                ))

        self._options[name] = Option(name, count, short, note, numeric, index=len(self._options))
        if short:
            self._aliases[short] = name
        return True

    def __repr__(self):
        return "schema(arguments=%r, options=%r)" % (self._arguments, list(self._options.values()))


__all__ = (
    "Schema",
)
