"""Parser and document model for FBI configuration files."""

from .nodes import FBIField, FBISection
from .errors import FBIParserError, ParseErrorKind
from .hooks import FormatHook
from .parser import (
    DEFAULT_OPTIONS,
    FBIParser,
    FBIParserOptions,
    FBIParseResult,
    parse,
    parse_result,
)
from .loader import FBILoader, FBILoaderConfig

__version__ = "0.1.0"
__all__ = [
    "FBIField",
    "FBISection",
    "FBIParserError",
    "ParseErrorKind",
    "FormatHook",
    "DEFAULT_OPTIONS",
    "FBIParser",
    "FBIParserOptions",
    "FBIParseResult",
    "parse",
    "parse_result",
    "FBILoader",
    "FBILoaderConfig",
    "__version__",
]
