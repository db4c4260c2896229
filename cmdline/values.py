"""
cmdline values: read-only handles over bound parse results.

Variants
- Single(text): one captured string (a positional argument, or one element of a
  multi value). Truthy when the text is non-empty.
- Multi(values): the ordered values of an argument pack or of a matched option.
  Always truthy, even with zero elements (a matched zero-count option).

INVALID is Single(""): what lookups return for unknown or unmatched names and for
out-of-range indices, so `if parser["--back"]:` is the presence check.

Conversions (toint/tofloat/todecimal, int(), float()) parse the underlying text
and raise ValueError when it does not convert; a Multi converts its first element.
"""
import decimal


class Value:
    """
    Common surface of Single and Multi.

    subclasses provide `text` (the scalar form) plus __bool__/__len__/__getitem__.
    """
    __slots__ = ()

    def tostring(self):
        return self.text

    def toint(self):
        try:
            return int(self.text)
        except ValueError:
            raise ValueError("value %r is not an integer" % self.text) from None

    def tofloat(self):
        try:
            return float(self.text)
        except ValueError:
            raise ValueError("value %r is not a number" % self.text) from None

    def todecimal(self):
        try:
            return decimal.Decimal(self.text.strip())
        except decimal.InvalidOperation:
            raise ValueError("value %r is not a decimal number" % self.text) from None

    def __str__(self):
        return self.text

    def __int__(self):
        return self.toint()

    def __float__(self):
        return self.tofloat()

    def __iter__(self):
        for index in range(len(self)):
            yield self[index]


class Single(Value):
    __slots__ = ("_text",)

    def __init__(self, text="", /):
        if not isinstance(text, str):
            raise TypeError("single value must be a string")
        object.__setattr__(self, "_text", text)

    @property
    def text(self):
        return self._text

    @property
    def size(self):
        return 0

    def __bool__(self):
        return bool(self._text)

    def __len__(self):
        return 0

    def __getitem__(self, index, /):
        return INVALID

    def __eq__(self, other):
        if isinstance(other, Single):
            return self._text == other._text
        return NotImplemented

    def __hash__(self):
        return hash((Single, self._text))

    def __setattr__(self, name, value, /):
        raise AttributeError("value is read-only")

    def __repr__(self):
        return "single(%r)" % self._text


class Multi(Value):
    __slots__ = ("_values",)

    def __init__(self, values=(), /):
        values = tuple(values)
        if not all(isinstance(value, str) for value in values):
            raise TypeError("multi value items must be strings")
        object.__setattr__(self, "_values", values)

    @property
    def values(self):
        return self._values

    @property
    def text(self):
        return self._values[0] if self._values else ""

    @property
    def size(self):
        return len(self._values)

    def __bool__(self):
        return True

    def __len__(self):
        return len(self._values)

    def __getitem__(self, index, /):
        """
        Return the index-th value as a Single, or INVALID when out of range.

        negative indices count as out of range.
        """
        if not isinstance(index, int):
            raise TypeError("multi value indices must be integers")
        if 0 <= index < len(self._values):
            return Single(self._values[index])
        return INVALID

    def __eq__(self, other):
        if isinstance(other, Multi):
            return self._values == other._values
        return NotImplemented

    def __hash__(self):
        return hash((Multi, self._values))

    def __setattr__(self, name, value, /):
        raise AttributeError("value is read-only")

    def __repr__(self):
        return "multi(%r)" % (list(self._values),)


INVALID = Single()


__all__ = (
    "Value",
    "Single",
    "Multi",
    "INVALID",
)
