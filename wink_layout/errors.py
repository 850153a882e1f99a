"""
Error types for the layout engine.

Every error here is fatal for the run that raised it: the engine never
falls back to partial styling or partial layout.
"""

from typing import Optional


class LayoutEngineError(Exception):
    """Base class for all errors raised by the layout engine."""


class CSSSyntaxError(LayoutEngineError, ValueError):
    """Raised when stylesheet source cannot be turned into rules."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        """
        Initialize a CSS syntax error.

        Args:
            message: Description of the problem
            line: Source line reported by the tokenizer, if known
            column: Source column reported by the tokenizer, if known
        """
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class SelectorSyntaxError(CSSSyntaxError):
    """Raised for a malformed selector list, e.g. an unexpected character."""


class UnitError(LayoutEngineError, ValueError):
    """Raised when a length uses a unit the engine does not know."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unrecognized unit {unit!r}")


class ConfigError(LayoutEngineError):
    """Raised when a configuration file cannot be read."""


class LayoutTreeError(LayoutEngineError):
    """Base class for errors found while building the layout tree."""


class DisplayNoneRootError(LayoutTreeError):
    """Raised when the root node resolves to ``display: none``."""

    def __init__(self):
        super().__init__("Root node has display: none")


class AnonymousBoxStyleError(LayoutTreeError):
    """Raised when an anonymous block box is asked for its style node."""

    def __init__(self):
        super().__init__("Anonymous block box has no style node")
