"""Single-pass parser for FBI configuration text.

The parser walks the input one character at a time through a small state
machine. Sections open on ``[name] {`` and close on ``}``; fields are
``name = value;``. Comments (``//`` to end of line, ``/* ... */``) are skipped
before any state sees them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, NotRequired, Optional, TypedDict

from fbi.errors import FBIParserError, ParseErrorKind
from fbi.hooks import FormatHook, apply_hook
from fbi.nodes import FBISection
from fbi.utils import resolve_config


class State(Enum):
    CONTENT = auto()
    HEADER_START = auto()
    HEADER_END = auto()
    FIELD_NAME = auto()
    FIELD_VALUE = auto()


SYMBOLS = {"[", "]", "{", "}", "=", ";"}
LINE_COMMENT = "//"
BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"
NUL = "\0"


class FBIParserOptions(TypedDict):
    strict: NotRequired[bool]
    format_section_header: NotRequired[Optional[FormatHook]]
    format_field_name: NotRequired[Optional[FormatHook]]
    format_field_value: NotRequired[Optional[FormatHook]]


class FBIParserOptionsRequired(TypedDict):
    strict: bool
    format_section_header: Optional[FormatHook]
    format_field_name: Optional[FormatHook]
    format_field_value: Optional[FormatHook]


DEFAULT_OPTIONS: FBIParserOptionsRequired = {
    "strict": True,
    "format_section_header": None,
    "format_field_name": None,
    "format_field_value": None,
}


@dataclass(slots=True)
class FBIParseResult:
    value: FBISection | None = None
    error: FBIParserError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> FBISection:
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def is_symbol(char: str) -> bool:
    return char in SYMBOLS


def is_whitespace(char: str) -> bool:
    return char == NUL or char.isspace()


class _ParseRun:
    """Scan state for one parse call; discarded when the call returns."""

    def __init__(self, text: str, options: FBIParserOptionsRequired):
        self.text = text
        self.options = options
        self.root = FBISection()
        self.stack: list[FBISection] = [self.root]
        self.state = State.CONTENT
        self.name_buffer: list[str] = []
        self.value_buffer: list[str] = []
        self.field_name = ""
        self.in_block_comment = False
        self.position = 0
        self.line = 1
        self.column = 1

    @property
    def current_section(self) -> FBISection:
        return self.stack[-1]

    @property
    def has_more_chars(self) -> bool:
        return self.position < len(self.text)

    @property
    def char(self) -> str:
        return self.text[self.position] if self.has_more_chars else NUL

    def _peek(self, steps: int = 1) -> str:
        if self.position + steps < len(self.text):
            return self.text[self.position + steps]
        return NUL

    def _advance(self, steps: int = 1) -> None:
        for _ in range(steps):
            if not self.has_more_chars:
                return
            if self.char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.position += 1

    def _consume_while(self, condition: Callable[[str], bool]) -> None:
        while self.has_more_chars and condition(self.char):
            self._advance()

    def _matches(self, marker: str) -> bool:
        return self.text.startswith(marker, self.position)

    def _error(self, kind: ParseErrorKind, reason: str | None = None) -> FBIParserError:
        return FBIParserError(kind, self.char, self.line, self.column, reason)

    def run(self) -> FBIParseResult:
        try:
            while self.has_more_chars:
                if self._skip_comment():
                    continue
                self._dispatch(self.char)
                self._advance()
        except FBIParserError as e:
            return FBIParseResult(error=e)

        if self.in_block_comment or self.state is not State.CONTENT or len(self.stack) > 1:
            return FBIParseResult(error=FBIParserError.incomplete())
        return FBIParseResult(value=self.root)

    def _skip_comment(self) -> bool:
        if self.in_block_comment:
            if self._matches(BLOCK_COMMENT_END):
                self.in_block_comment = False
                self._advance(len(BLOCK_COMMENT_END))
            else:
                self._advance()
            return True
        if self._matches(BLOCK_COMMENT_START):
            self.in_block_comment = True
            self._advance(len(BLOCK_COMMENT_START))
            return True
        if self._matches(LINE_COMMENT):
            # the newline itself is left for normal dispatch
            self._consume_while(lambda c: c != "\n")
            return True
        return False

    def _dispatch(self, char: str) -> None:
        match self.state:
            case State.CONTENT:
                self._handle_content(char)
            case State.HEADER_START:
                self._handle_header_start(char)
            case State.HEADER_END:
                self._handle_header_end(char)
            case State.FIELD_NAME:
                self._handle_field_name(char)
            case State.FIELD_VALUE:
                self._handle_field_value(char)

    def _handle_content(self, char: str) -> None:
        if is_whitespace(char):
            return
        if char == "[":
            self.state = State.HEADER_START
            self.name_buffer = []
        elif char == "{":
            raise self._error(ParseErrorKind.UNEXPECTED_SYMBOL, 'A "{" must follow a section header.')
        elif char == "}":
            if len(self.stack) == 1:
                raise self._error(ParseErrorKind.UNMATCHED_CLOSE, 'There was no "{" to close.')
            self.stack.pop()
        elif is_symbol(char):
            if char == ";" and not self.options["strict"]:
                return
            raise self._error(ParseErrorKind.UNEXPECTED_SYMBOL)
        else:
            self.state = State.FIELD_NAME
            self.name_buffer = [char]

    def _handle_header_start(self, char: str) -> None:
        if is_whitespace(char):
            next_char = self._peek()
            if self.name_buffer and not is_whitespace(next_char) and next_char != "]":
                raise self._error(
                    ParseErrorKind.INVALID_WHITESPACE, "There can't be whitespace inside a header's name."
                )
            return
        if char == "]":
            header = apply_hook(self.options["format_section_header"], "".join(self.name_buffer).strip())
            section = self.current_section.add_section(FBISection(header=header))
            self.stack.append(section)
            self.state = State.HEADER_END
        elif is_symbol(char):
            raise self._error(ParseErrorKind.UNEXPECTED_SYMBOL, "Can't have symbols inside a header's name.")
        else:
            self.name_buffer.append(char)

    def _handle_header_end(self, char: str) -> None:
        if is_whitespace(char):
            return
        if char != "{":
            raise self._error(ParseErrorKind.UNEXPECTED_SYMBOL, 'Expected "{" after a section header.')
        self.state = State.CONTENT

    def _handle_field_name(self, char: str) -> None:
        if is_whitespace(char):
            next_char = self._peek()
            if not is_whitespace(next_char) and next_char != "=":
                raise self._error(
                    ParseErrorKind.INVALID_WHITESPACE, "There can't be whitespace inside a field's name."
                )
            return
        if char == "=":
            self.state = State.FIELD_VALUE
            self.field_name = "".join(self.name_buffer)
            self.value_buffer = []
        elif is_symbol(char):
            raise self._error(ParseErrorKind.INVALID_FIELD_DEFINITION, "Invalid field definition.")
        else:
            self.name_buffer.append(char)

    def _handle_field_value(self, char: str) -> None:
        if char != ";":
            self.value_buffer.append(char)
            return
        name = apply_hook(self.options["format_field_name"], self.field_name.strip())
        value = apply_hook(self.options["format_field_value"], "".join(self.value_buffer).strip())
        self.current_section.add_field(name, value)
        self.state = State.CONTENT


class FBIParser:
    """Parses FBI text into an :class:`FBISection` tree.

    A parser only holds its resolved options, so one instance can be reused for
    any number of documents.
    """

    def __init__(self, options: FBIParserOptions | None = None):
        self.options = resolve_config(options or {}, DEFAULT_OPTIONS)

    def parse_result(self, data: str | bytes) -> FBIParseResult:
        """Parse ``data`` and return either the root section or the first error."""
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8-sig", errors="replace")
        return _ParseRun(data, self.options).run()

    def parse(self, data: str | bytes) -> FBISection:
        """Like :meth:`parse_result`, but raises :class:`FBIParserError` on failure."""
        return self.parse_result(data).unwrap()


DEFAULT_PARSER = FBIParser()


def parse_result(data: str | bytes, options: FBIParserOptions | None = None) -> FBIParseResult:
    parser = FBIParser(options) if options else DEFAULT_PARSER
    return parser.parse_result(data)


def parse(data: str | bytes, options: FBIParserOptions | None = None) -> FBISection:
    return parse_result(data, options).unwrap()


__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_PARSER",
    "FBIParseResult",
    "FBIParser",
    "FBIParserOptions",
    "State",
    "is_symbol",
    "is_whitespace",
    "parse",
    "parse_result",
]
