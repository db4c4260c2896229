"""
cmdline parser: the facade a program talks to.

Lifecycle
- build: CommandLineParser(name, note), then add_argument / add_argument_pack /
  add_option; each returns True on success and False (with a warning on
  standard error) on failure.
- parse: parse(tokens) with tokens[0] being the program path. Matching and
  binding run as pure steps returning either their result or a fault; this
  driver is where a fault turns into output on standard error and exit status 1.
  On success the previous results are replaced and True is returned; False is
  never returned.
- query: parser[name] for argument names, long option names and short option
  names; unknown or unmatched names give an invalid (falsy) Value.

Built-in texts
- a lone "--help" prints help_text() to standard output and exits with status 0,
  a lone "--usage" does the same with usage_text(); either shortcut is disabled
  when the schema registers an option of that exact long name.

Quick example
    >>> parser = CommandLineParser("cat", "show text file context")
    >>> parser.add_argument("file", "text file path")
    True
    >>> parser.add_option("--lines", 1, "-l", "line count to show", True)
    True
    >>> parser.parse(["./cat", "notes.txt", "-l", "3"])
    True
    >>> int(parser["--lines"])
    3
"""
import sys

from rich.console import Console

from .binder import bind
from .faults import *
from . import matcher
from .reporter import usage_text, help_text
from .schema import Schema
from .values import INVALID, Value

console = Console(highlight=False)


class CommandLineParser:
    """
    Declares a command line surface, parses it, and hands out typed values.

    Parameters
    - name: command name shown in usage and help (default "command").
    - note: command description shown in help under the usage line.
    - colorful: style diagnostics (palette overridable via __styles__ in __main__).

    Not safe for concurrent parse() calls on the same instance: each call
    replaces the value store. Use one parser per concurrent parse.
    """

    def __init__(self, name="command", note="", *, colorful=False):
        if not isinstance(name, str):
            raise TypeError("command name must be a string")
        if not isinstance(note, str):
            raise TypeError("command note must be a string")
        self._name = name
        self._note = note
        self._colorful = bool(colorful)
        self._schema = Schema(prog=name, colorful=self._colorful)
        self._path = None
        self._values = {}

    @property
    def name(self):
        return self._name

    @property
    def note(self):
        return self._note

    @property
    def schema(self):
        return self._schema

    @property
    def path(self):
        """
        Program path given to the last parse() call, or None.
        """
        return self._path

    def add_argument(self, name, note="", numeric=False):
        return self._schema.add_argument(name, note, numeric)

    def add_argument_pack(self, name, note="", numeric=False):
        return self._schema.add_argument_pack(name, note, numeric)

    def add_option(self, name, count=0, short="", note="", numeric=False):
        return self._schema.add_option(name, count, short, note, numeric)

    def usage_text(self):
        return usage_text(self._schema, self._name)

    def help_text(self):
        return help_text(self._schema, self._name, self._note)

    def _abort(self, fault):
        """
        Render a parse fault with the usage line and a help hint, then exit(1).
        """
        prog = self._path or self._name
        hint = None
        if "--help" not in self._schema.options:
            hint = "try '%s --help' for more information" % prog
        trigger(
            fault,
            prog=prog,
            usage=usage_text(self._schema, prog),
            hint=hint,
            colorful=self._colorful,
        )

    def parse(self, tokens=None, /):
        """
        Parse `tokens` (default sys.argv) and replace the value store.

        returns True; every validation failure terminates the process instead.
        """
        tokens = list(sys.argv if tokens is None else tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() tokens must be strings")

        self._path = None
        self._values = {}

        if not tokens:
            return self._abort(MissingProgramPathError(
                "the program path is required as first token",
                title="missing program path",
                code=FaultCode.MISSING_PROGRAM_PATH,
            ))
        self._path, *arguments = tokens

        match matcher.shortcut(self._schema, arguments):
            case "--help":
                console.file.write(self.help_text() + "\n")
                sys.exit(0)
            case "--usage":
                console.file.write(self.usage_text() + "\n")
                sys.exit(0)

        matched = matcher.match(self._schema, arguments)
        if isinstance(matched, ParseFault):
            return self._abort(matched)

        store = bind(self._schema, matched)
        if isinstance(store, ParseFault):
            return self._abort(store)

        self._values = store
        return True

    def __getitem__(self, name, /) -> Value:
        return self._values.get(name, INVALID)

    def __contains__(self, name, /):
        return name in self._values

    def __repr__(self):
        return "%s(name=%r, note=%r)" % (type(self).__name__, self._name, self._note)


__all__ = (
    "CommandLineParser",
)
