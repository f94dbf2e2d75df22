from __future__ import annotations

from enum import Enum, auto

CONTROL_GLYPHS = {
    "\r": "\u240d",
    "\n": "\u2424",
    "\0": "\u2400",
}


class ParseErrorKind(Enum):
    UNEXPECTED_SYMBOL = auto()
    UNMATCHED_CLOSE = auto()
    INVALID_WHITESPACE = auto()
    INVALID_FIELD_DEFINITION = auto()
    INCOMPLETE_INPUT = auto()


def display_char(char: str) -> str:
    """Render control characters as their visible Unicode control pictures."""
    if char in CONTROL_GLYPHS:
        return CONTROL_GLYPHS[char]
    code = ord(char)
    if code < 0x20:
        return chr(0x2400 + code)
    if code == 0x7F:
        return "\u2421"
    return char


class FBIParserError(Exception):
    """First rule violation found while parsing.

    ``char``, ``line`` and ``column`` (both 1-based) are ``None`` only for
    ``INCOMPLETE_INPUT``, which is detected once the input is exhausted.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        char: str | None = None,
        line: int | None = None,
        column: int | None = None,
        reason: str | None = None,
    ):
        self.kind = kind
        self.char = char
        self.line = line
        self.column = column
        self.reason = reason
        super().__init__(self._build_message())

    @classmethod
    def incomplete(cls) -> "FBIParserError":
        return cls(ParseErrorKind.INCOMPLETE_INPUT, reason="Incomplete file. Maybe you're missing a ] or }.")

    @property
    def has_position(self) -> bool:
        return self.line is not None and self.column is not None

    def _build_message(self) -> str:
        if self.char is None or not self.has_position:
            return self.reason or "Invalid input"
        message = f'Invalid character "{display_char(self.char)}" at {self.line}:{self.column}'
        if self.reason:
            message += f"\n{self.reason}"
        return message


__all__ = ["FBIParserError", "ParseErrorKind", "display_char"]
