"""CLI for parsing FBI files and dumping them as JSON or as a section tree."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Sequence

from fbi import FBILoader, FBIParserOptions, FBISection
from fbi.hooks import lowercase

DEFAULT_PATTERN = "*.fbi"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse FBI configuration files and print their contents as JSON or as a section tree."
    )
    parser.add_argument("input", help="Path to an FBI file or a directory of FBI files.")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Write one output file per input into this directory instead of printing.",
    )
    parser.add_argument(
        "--format",
        choices=("json", "tree"),
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--pattern",
        default=DEFAULT_PATTERN,
        help=f"Glob used when the input is a directory (default: {DEFAULT_PATTERN}).",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Ignore stray ';' between fields and sections.",
    )
    parser.add_argument(
        "--lowercase",
        action="store_true",
        help="Lowercase section headers and field names.",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Disable log output.")
    return parser.parse_args(argv)


def collect_inputs(path: Path, pattern: str = DEFAULT_PATTERN) -> list[Path]:
    if path.is_dir():
        files = sorted(p for p in path.glob(pattern) if p.is_file())
        if not files:
            raise FileNotFoundError(f"No {pattern} files found in directory: {path}")
        return files
    if path.is_file():
        return [path]
    raise FileNotFoundError(f"Input path does not exist: {path}")


def build_options(lenient: bool, lower: bool) -> FBIParserOptions:
    options: FBIParserOptions = {"strict": not lenient}
    if lower:
        options["format_section_header"] = lowercase
        options["format_field_name"] = lowercase
    return options


def render(section: FBISection, output_format: str) -> str:
    if output_format == "tree":
        return "\n".join(section.debug_lines()) + "\n"
    return json.dumps(section.to_raw_dict(), indent=2, ensure_ascii=False) + "\n"


def dump(files: Iterable[Path], loader: FBILoader, output_format: str, output_dir: Path | None) -> int:
    failures = 0
    suffix = ".json" if output_format == "json" else ".txt"
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
    for source in files:
        result = loader.load_path(source)
        if result.error is not None:
            failures += 1
            print(f"{source}: {result.error}", file=sys.stderr)
            continue
        output = render(result.unwrap(), output_format)
        if output_dir is None:
            sys.stdout.write(output)
            continue
        destination = output_dir / (source.stem + suffix)
        destination.write_text(output, encoding="utf-8")
        print(f"Wrote {destination}")
    return 1 if failures else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    files = collect_inputs(Path(args.input), args.pattern)
    loader = FBILoader(
        config={
            "parser_options": build_options(args.lenient, args.lowercase),
            "enable_logger": not args.quiet,
        }
    )
    output_dir = Path(args.output_dir) if args.output_dir else None
    return dump(files, loader, args.format, output_dir)


if __name__ == "__main__":
    sys.exit(main())
