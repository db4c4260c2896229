"""
cmdline faults (parse errors and registration warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for all user-facing issues.
  Codes are grouped by domain to keep copy consistent and make logs/searches predictable.
- ParseFault / RegistrationWarning: base types that carry message + options and
  know how to render themselves in a short, lowercased, actionable way.
- trigger(): central entry point to surface any fault.

Fail-fast contract
- The matcher and the binder never print and never exit. They *return* a
  ParseFault instance instead of their result; the parser facade is the only
  caller of trigger() for those.
- Triggering a ParseFault prints the fault (message, usage line, help hint) to
  standard error and terminates the process with status 1. There is no recovery path.
- Triggering a RegistrationWarning prints it to standard error and returns; the
  registration call reports the failure to its caller as False.

Integration
- The host application may define, in __main__:
  • __codes__: mapping FaultCode -> label, to remap the displayed codes.
  • __styles__: mapping style-key -> rich style, to override the palette.
  • __prog__: the program name shown in fault headers.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.text import Text


console = Console(stderr=True, highlight=False)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - parsing (111xx / 112xx)
      • MISSING_PROGRAM_PATH
      • NOT_ENOUGH_VALUES, NUMBER_REQUIRED (option values)
      • ARGUMENT_COUNT, NOT_ENOUGH_ARGUMENTS, EMPTY_PACK (positionals)
    - registration (121xx)
      • INVALID_ARGUMENT_NAME, DUPLICATED_ARGUMENT, DUPLICATED_PACK
      • INVALID_OPTION_NAME, DUPLICATED_OPTION, INVALID_SHORT_NAME, DUPLICATED_SHORT_NAME
    """
    # --- invocation errors (111xx) ---
    MISSING_PROGRAM_PATH        = 11101

    # --- option errors (111xx) ---
    NOT_ENOUGH_VALUES           = 11111
    NUMBER_REQUIRED             = 11112

    # --- positional errors (112xx) ---
    ARGUMENT_COUNT              = 11121
    NOT_ENOUGH_ARGUMENTS        = 11122
    EMPTY_PACK                  = 11123

    # --- registration faults (121xx) ---
    INVALID_ARGUMENT_NAME       = 12101
    DUPLICATED_ARGUMENT         = 12102
    DUPLICATED_PACK             = 12103
    INVALID_OPTION_NAME         = 12111
    DUPLICATED_OPTION           = 12112
    INVALID_SHORT_NAME          = 12113
    DUPLICATED_SHORT_NAME       = 12114

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class _Renderable:
    """
    shared rendering for faults: a header, the message, then optional trailing lines.

        [ prog — 11111 | Not Enough Values ]
        option '--lines' takes 1 value, got 0
        Usage: cat <file> [-l|--lines N1]
         → try 'cat --help' for more information

    options read
    - prog, code, title, hint, colorful, and (for parse faults) usage.
    """
    __palette__ = {}

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError("fault message must be a string")
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", False)

        styles = defaultdict(str, self.__palette__ | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[style] if colorful else "")

        prog = getattr(main, "__prog__", self.options.get("prog", "command"))

        renders = [Text.assemble(
            "[ ",
            text(prog, "prog-name"),
            " — ",
            text(self.options["code"].normalize(), "code"),
            " | ",
            text(self.options["title"].title(), "title"),
            " ]"
        )]
        renders.append(text(self.message, "message"))
        if usage := self.options.get("usage"):
            renders.append(text(usage, "usage"))
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))
        return Group(*renders)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ParseFault(_Renderable, Exception):
    __palette__ = {
        "prog-name": "bold #E6E6F0",  # near-white program name
        "code": "bold #00E5FF",  # neon cyan fault code
        "title": "bold #FF4DA6",  # friendly pinky title
        "message": "#C8C8D0",  # soft light gray message
        "usage": "bold #36C5F0",  # sky-blue usage line
        "hint-arrow": "#9CE19C dim",  # gentle green arrow
        "hint": "italic #9CE19C",  # gentle green hint text
    }

    def __trigger__(self) -> None:
        console.print(self, soft_wrap=True)
        sys.exit(1)


class MissingProgramPathError(ParseFault): ...
class NotEnoughValuesError(ParseFault): ...
class NumberRequiredError(ParseFault): ...
class ArgumentCountError(ParseFault): ...
class NotEnoughArgumentsError(ParseFault): ...
class EmptyPackError(ParseFault): ...


class RegistrationWarning(_Renderable, Warning):
    __palette__ = {
        "prog-name": "bold #E6E6F0",  # near-white program name
        "code": "bold #FFB400",  # amber fault code for warnings
        "title": "bold #FFC2E0",  # softer pinky title for warnings
        "message": "#D6D6DE",  # slightly lighter gray body
        "hint-arrow": "#B8EFAF dim",  # softer green arrow
        "hint": "italic #B8EFAF",  # softer green hint text
    }

    def __trigger__(self) -> None:
        console.print(self, soft_wrap=True)


class InvalidArgumentNameWarning(RegistrationWarning): ...
class DuplicatedArgumentWarning(RegistrationWarning): ...
class DuplicatedPackWarning(RegistrationWarning): ...
class InvalidOptionNameWarning(RegistrationWarning): ...
class DuplicatedOptionWarning(RegistrationWarning): ...
class InvalidShortNameWarning(RegistrationWarning): ...
class DuplicatedShortNameWarning(RegistrationWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - parse faults terminate the process; registration warnings only print.

    typical options
    - prog, usage, hint, colorful.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "ParseFault",
    "MissingProgramPathError",
    "NotEnoughValuesError",
    "NumberRequiredError",
    "ArgumentCountError",
    "NotEnoughArgumentsError",
    "EmptyPackError",
    "RegistrationWarning",
    "InvalidArgumentNameWarning",
    "DuplicatedArgumentWarning",
    "DuplicatedPackWarning",
    "InvalidOptionNameWarning",
    "DuplicatedOptionWarning",
    "InvalidShortNameWarning",
    "DuplicatedShortNameWarning",
    "trigger",
)
