"""
cmdline reporter: usage line and help text, as pure functions of a schema.

Usage line
    Usage: cat <file> <items...: NUM> [-l|--lines N1] [--pair V1 V2] [--back]

- arguments as <name>, "..." appended for the pack, ": NUM" for numeric ones.
- options in registration order as [short|long ...] (or [long ...]), one slot per
  value, labelled N (numeric) or V (string) plus its 1-based position.

Help text
- the usage line, the command note (when set), then an argument table and an
  option table. Left cells are padded to a shared column (longest cell + 10,
  capped at 50); multi-line notes continue on following lines re-indented to
  that column.
"""
import operator

COLUMN_PADDING = 10
COLUMN_LIMIT = 50


def _ordered(schema):
    return sorted(schema.options.values(), key=operator.attrgetter("index"))


def _slots(option):
    return ["%s%d" % ("N" if option.numeric else "V", index + 1) for index in range(option.count)]


def _names(option):
    return option.name if option.short is None else "%s|%s" % (option.short, option.name)


def _note(note, width):
    lines = []
    segments = note.split("\n")
    for index, segment in enumerate(segments):
        if index:
            lines.append("\n" + " " * width)
        if segment or index < len(segments) - 1:
            lines.append(" " + segment)
    return "".join(lines)


def _table(lefts, notes):
    width = min(COLUMN_LIMIT, max(map(len, lefts)) + COLUMN_PADDING)
    return "".join(left.ljust(width) + _note(note, width) + "\n" for left, note in zip(lefts, notes))


def usage_text(schema, prog, /):
    parts = ["Usage: " + prog]
    for argument in schema.arguments:
        parts.append("<%s%s%s>" % (argument.name, "..." if argument.pack else "", ": NUM" if argument.numeric else ""))
    for option in _ordered(schema):
        parts.append("[%s]" % " ".join([_names(option), *_slots(option)]))
    return " ".join(parts)


def help_text(schema, prog, note="", /):
    sections = [usage_text(schema, prog) + "\n"]
    if note:
        sections.append(note + "\n")

    if arguments := schema.arguments:
        sections.append("\nArgument with '...' is package, 'N' means number, 'V' means string: \n")
        sections.append(_table(
            [" <%s%s: %s" % (argument.name, "...>" if argument.pack else ">", "N" if argument.numeric else "V")
             for argument in arguments],
            [argument.note for argument in arguments],
        ))

    if options := _ordered(schema):
        sections.append("\nOption value with 'N' means number, 'V' means string: \n")
        sections.append(_table(
            [" [%s]" % " ".join([_names(option), *_slots(option)]) for option in options],
            [option.note for option in options],
        ))

    return "".join(sections)


__all__ = (
    "usage_text",
    "help_text",
)
