from __future__ import annotations

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from fbi.logger import Logger
from fbi.nodes import FBISection
from fbi.parser import FBIParser, FBIParseResult, FBIParserOptions
from fbi.utils import resolve_config


class FBILoaderConfig(TypedDict):
    parser_options: NotRequired[FBIParserOptions]
    encoding: NotRequired[str]
    enable_logger: NotRequired[bool]


class FBILoaderConfigRequired(TypedDict):
    parser_options: FBIParserOptions
    encoding: str
    enable_logger: bool


DEFAULT_CONFIG: FBILoaderConfigRequired = {
    "parser_options": {},
    "encoding": "utf-8-sig",
    "enable_logger": True,
}


class FBILoader:
    """Reads FBI documents from text, bytes or files and runs them through one parser."""

    def __init__(self, config: Optional[FBILoaderConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "fbi.loader", "is_enabled": self.config["enable_logger"]}).logger
        self.parser = FBIParser(self.config["parser_options"])

    def loads(self, data: str | bytes, source: str = "<string>") -> FBIParseResult:
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode(self.config["encoding"], errors="replace")
        self.logger.debug(f"Parsing {len(data)} characters from {source}")
        result = self.parser.parse_result(data)
        if result.error is not None:
            self.logger.error(f"Failed to parse {source}: {result.error}")
        else:
            self.logger.info(f"Parsed {source}")
        return result

    def load_path(self, path: str | Path) -> FBIParseResult:
        path = Path(path)
        self.logger.info(f"Loading {path}")
        return self.loads(path.read_bytes(), source=str(path))

    def load(self, path: str | Path) -> FBISection:
        return self.load_path(path).unwrap()


__all__ = ["FBILoader", "FBILoaderConfig"]
