"""A variant argument value and a list of named arguments."""

from __future__ import annotations

import enum
import logging
import math
import re
from typing import Union

logger = logging.getLogger(__name__)

ArgValue = Union[bool, int, float, str]

_SPACE = r"[ \t\n\v\f\r]*"
_LONG_PREFIX = re.compile(_SPACE + r"([+-]?[0-9]+)")
_SPECIAL_FLOAT = re.compile(_SPACE + r"([+-]?)(infinity|inf|nan)", re.IGNORECASE)
_HEX_FLOAT = re.compile(
    _SPACE
    + r"([+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)"
    + r"(?:[pP][+-]?[0-9]+)?)"
)
_DEC_FLOAT = re.compile(
    _SPACE + r"([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def _parse_long(text: str) -> int | None:
    """Parse the leading base-10 integer of ``text``, or return None if there is none."""
    match = _LONG_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _parse_double(text: str) -> float | None:
    """Parse the leading floating-point number of ``text``, or return None if there is none."""
    match = _SPECIAL_FLOAT.match(text)
    if match:
        sign, word = match.groups()
        return float(sign + ("nan" if word.lower() == "nan" else "inf"))
    match = _HEX_FLOAT.match(text)
    if match:
        return float.fromhex(match.group(1))
    match = _DEC_FLOAT.match(text)
    if match:
        return float(match.group(1))
    return None


class ArgType(enum.Enum):
    """The kind of value an :class:`Arg` holds."""

    INTEGER = enum.auto()
    BOOLEAN = enum.auto()
    DOUBLE = enum.auto()
    STRING = enum.auto()


class Arg:
    """A value that is empty or holds a bool, an int, a float or a string."""

    __slots__ = ("_value",)

    def __init__(self, value: ArgValue | None = None) -> None:
        self._value: ArgValue | None = None
        if value is not None:
            self.set(value)

    def clear(self) -> None:
        """Make the argument empty."""
        self._value = None

    def set(self, value: ArgValue) -> None:
        """Replace the current value; the type follows the value given."""
        if isinstance(value, bool):
            self._value = bool(value)
        elif isinstance(value, int):
            self._value = int(value)
        elif isinstance(value, float):
            self._value = float(value)
        elif isinstance(value, str):
            self._value = str(value)
        else:
            raise TypeError(
                f"unsupported argument type: {type(value).__name__}"
            )

    def copy(self) -> Arg:
        """Return an independent argument holding the same value."""
        return Arg(self._value)

    def _type(self) -> ArgType | None:
        match self._value:
            case None:
                return None
            case bool():
                return ArgType.BOOLEAN
            case int():
                return ArgType.INTEGER
            case float():
                return ArgType.DOUBLE
            case _:
                return ArgType.STRING

    def is_empty(self) -> bool:
        """Return True when no value is held."""
        return self._value is None

    def contains_bool(self) -> bool:
        return self._type() is ArgType.BOOLEAN

    def contains_int(self) -> bool:
        return self._type() is ArgType.INTEGER

    def contains_double(self) -> bool:
        return self._type() is ArgType.DOUBLE

    def contains_string(self) -> bool:
        return self._type() is ArgType.STRING

    def can_convert_to_bool(self) -> bool:
        """Strings convert only when they read true, false, 1 or 0."""
        if isinstance(self._value, str):
            return self._value in ("true", "1", "false", "0")
        return self._value is not None

    def can_convert_to_int(self) -> bool:
        """Strings convert when they begin with a base-10 integer."""
        if isinstance(self._value, str):
            return _parse_long(self._value) is not None
        return self._value is not None

    def can_convert_to_double(self) -> bool:
        """Strings convert when they begin with a floating-point number."""
        if isinstance(self._value, str):
            return _parse_double(self._value) is not None
        return self._value is not None

    def can_convert_to_string(self) -> bool:
        return self._value is not None

    def to_bool(self) -> bool:
        match self._value:
            case None:
                return False
            case bool() as flag:
                return flag
            case int() | float() as number:
                return number != 0
            case str() as text:
                return text in ("true", "1")
        return False

    def to_int(self) -> int:
        match self._value:
            case None:
                return 0
            case bool() as flag:
                # Booleans map inversely: true gives 0, false gives 1.
                return 0 if flag else 1
            case int() as number:
                return number
            case float() as number:
                return 0 if math.isnan(number) else int(number)
            case str() as text:
                parsed = _parse_long(text)
                return 0 if parsed is None else parsed
        return 0

    def to_double(self) -> float:
        match self._value:
            case None:
                return 0.0
            case bool() as flag:
                # Booleans map inversely: true gives 0.0, false gives 1.0.
                return 0.0 if flag else 1.0
            case int() | float() as number:
                return float(number)
            case str() as text:
                parsed = _parse_double(text)
                return 0.0 if parsed is None else parsed
        return 0.0

    def to_string(self) -> str:
        match self._value:
            case None:
                return ""
            case bool() as flag:
                return "true" if flag else "false"
            case int() as number:
                return str(number)
            case float() as number:
                return f"{number:f}"
            case str() as text:
                return text
        return ""

    def __repr__(self) -> str:
        if self._value is None:
            return "Arg()"
        return f"Arg({self._value!r})"


class ArgList:
    """Named arguments; adding returns the list so calls can be chained."""

    def __init__(self) -> None:
        self._args: dict[str, Arg] = {}

    def get(self, name: str) -> Arg:
        """Return a copy of the named argument, or an empty one if it is missing."""
        arg = self._args.get(name)
        return Arg() if arg is None else arg.copy()

    def add(self, name: str, value: ArgValue | Arg) -> ArgList:
        """Store ``value`` under ``name``, replacing any earlier value."""
        if isinstance(value, Arg):
            arg = value.copy()
        else:
            arg = Arg()
            arg.set(value)
        logger.debug("Add %s %r", type(value).__name__, name)
        self._args[name] = arg
        return self

    def __contains__(self, name: object) -> bool:
        return name in self._args

    def __len__(self) -> int:
        return len(self._args)

    def __repr__(self) -> str:
        return f"ArgList({self._args!r})"