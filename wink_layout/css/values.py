"""
CSS value model.
This module defines the values a declaration can carry and their projection to pixels.
"""

import math
import struct
from enum import Enum
from typing import Any


def f32(number: float) -> float:
    """
    Round a number to the nearest 32-bit float.

    Lengths and box geometry are single precision; every stored length and
    every step of the layout arithmetic goes through this rounding.

    Args:
        number: Any real number

    Returns:
        The nearest binary32 value, as a Python float
    """
    try:
        return struct.unpack('f', struct.pack('f', number))[0]
    except OverflowError:
        # Beyond the binary32 range
        return math.copysign(math.inf, number)


class Unit(Enum):
    """CSS length units understood by the engine."""
    PX = "px"


class Value:
    """
    Base class for CSS values.

    Values are immutable once constructed and compare structurally, so
    callers can test for a keyword with ``value == Keyword("auto")``.
    """

    __slots__ = ()

    def _key(self) -> tuple:
        raise NotImplementedError("Subclasses must implement _key")

    def to_px(self) -> float:
        """
        Return the size of a length in px, or zero for non-lengths.

        Returns:
            The pixel value of a px length, otherwise 0.0
        """
        return 0.0

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())


class Keyword(Value):
    """A keyword value such as ``auto`` or ``block``."""

    __slots__ = ('text',)

    def __init__(self, text: str):
        object.__setattr__(self, 'text', text)

    def _key(self) -> tuple:
        return (self.text,)

    def __repr__(self):
        return f"Keyword({self.text!r})"


class Length(Value):
    """A number with a unit, held in single precision."""

    __slots__ = ('number', 'unit')

    def __init__(self, number: float, unit: Unit = Unit.PX):
        object.__setattr__(self, 'number', f32(number))
        object.__setattr__(self, 'unit', unit)

    def _key(self) -> tuple:
        return (self.number, self.unit)

    def to_px(self) -> float:
        if self.unit == Unit.PX:
            return self.number
        return 0.0

    def __repr__(self):
        return f"Length({self.number!r}, {self.unit.value})"


class Color(Value):
    """An RGBA color with 0-255 integer channels."""

    __slots__ = ('r', 'g', 'b', 'a')

    def __init__(self, r: int, g: int, b: int, a: int = 255):
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        object.__setattr__(self, 'r', int(r))
        object.__setattr__(self, 'g', int(g))
        object.__setattr__(self, 'b', int(b))
        object.__setattr__(self, 'a', int(a))

    def _key(self) -> tuple:
        return (self.r, self.g, self.b, self.a)

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"


AUTO = Keyword("auto")
ZERO = Length(0.0, Unit.PX)


def to_px(value: Value) -> float:
    """
    Project a value to pixels.

    Args:
        value: Any CSS value

    Returns:
        The number of a px length, 0.0 for every other value
    """
    return value.to_px()
