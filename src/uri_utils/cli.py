"""
Command-line interface.

    uri-utils parse "http://user@Example.com:8080/a/b?x=1#top" --normalize --parse-query
    uri-utils extract "see http://example.com/ and ftp://[::1]/pub"
    uri-utils domain www.example.co.uk
    uri-utils usage parse_uri --full
    uri-utils batch urls.csv --column url --mode parse --output parsed.parquet
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import polars as pl

from uri_utils.api.models import DomainResponse, ExtractionResponse, ParsedURIResponse
from uri_utils.batch import URIBatchProcessor
from uri_utils.config import get_config
from uri_utils.core import extract_uri, parse_uri
from uri_utils.domain import get_domain_splitter
from uri_utils.exceptions import InvalidURI
from uri_utils.usage import FUNCTIONS, USAGE_OPTION, usage

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="uri-utils",
        description="Parse URIs, extract URIs from text and split domain names.",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (defaults to config).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a single URI.")
    parse_cmd.add_argument("uri", help="URI to parse.")
    parse_cmd.add_argument(
        "--normalize", action="store_true", help="Return normalized components."
    )
    parse_cmd.add_argument(
        "--parse-query",
        action="store_true",
        help="Decompose the query into key/value pairs.",
    )

    extract_cmd = subparsers.add_parser("extract", help="Extract URIs from text.")
    extract_cmd.add_argument(
        "text",
        nargs="?",
        default="-",
        help="Text to scan, or '-' to read standard input (default).",
    )
    extract_cmd.add_argument(
        "--normalize", action="store_true", help="Normalize extracted components."
    )

    domain_cmd = subparsers.add_parser("domain", help="Split a domain into labels.")
    domain_cmd.add_argument("domain", help="Domain name to split.")

    usage_cmd = subparsers.add_parser("usage", help="Show help text for an entry point.")
    usage_cmd.add_argument("function", choices=FUNCTIONS, help="Entry point name.")
    usage_cmd.add_argument(
        "--full", action="store_true", help="Show the full usage text."
    )

    batch_cmd = subparsers.add_parser(
        "batch", help="Apply an entry point to a column of a CSV or Parquet file."
    )
    batch_cmd.add_argument("input", type=Path, help="Input .csv or .parquet file.")
    batch_cmd.add_argument("--column", required=True, help="Column to process.")
    batch_cmd.add_argument(
        "--mode",
        choices=("parse", "extract", "domain"),
        default="parse",
        help="Entry point to apply (default: parse).",
    )
    batch_cmd.add_argument(
        "--output",
        required=True,
        type=Path,
        help="Output .parquet file (other suffixes are written as JSON lines).",
    )
    batch_cmd.add_argument(
        "--normalize", action="store_true", help="Normalize components."
    )
    batch_cmd.add_argument(
        "--parse-query",
        action="store_true",
        help="Decompose queries (parse mode only).",
    )

    return parser


def read_frame(path: Path) -> pl.DataFrame:
    """Read a CSV or Parquet file into a DataFrame."""
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    if path.suffix == ".parquet":
        return pl.read_parquet(path)
    return pl.read_csv(path)


def write_frame(df: pl.DataFrame, path: Path) -> None:
    """Write a DataFrame as Parquet, or as JSON lines for any other suffix."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".parquet":
        df.write_parquet(path)
    else:
        # CSV cannot hold list columns; binary addresses go out as hex like the API.
        df.with_columns(pl.col(pl.Binary).bin.encode("hex")).write_ndjson(path)


def run_batch(args: argparse.Namespace) -> int:
    processor = URIBatchProcessor()
    df = read_frame(args.input)

    if args.mode == "parse":
        result = processor.parse_batch(
            df, column=args.column, normalize=args.normalize, parse_query=args.parse_query
        )
    elif args.mode == "extract":
        result = processor.extract_batch(df, column=args.column, normalize=args.normalize)
    else:
        result = processor.domain_batch(df, column=args.column)

    write_frame(result, args.output)
    logger.info("Wrote %d rows to %s", result.height, args.output)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    if args.command == "parse":
        try:
            parsed = parse_uri(
                args.uri, normalize=args.normalize, parse_query=args.parse_query
            )
        except InvalidURI as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(ParsedURIResponse.from_parsed(parsed).model_dump_json(indent=2))

    elif args.command == "extract":
        text = sys.stdin.read() if args.text == "-" else args.text
        result = extract_uri(text, normalize=args.normalize)
        print(ExtractionResponse.from_result(result).model_dump_json(indent=2))

    elif args.command == "domain":
        splitter = get_domain_splitter()
        response = DomainResponse(
            domain=args.domain,
            labels=splitter.labels(args.domain),
            registered_domain=splitter.registered_domain(args.domain),
            public_suffix=splitter.public_suffix(args.domain),
        )
        print(response.model_dump_json(indent=2))

    elif args.command == "usage":
        print(usage(args.function, USAGE_OPTION if args.full else None))

    elif args.command == "batch":
        try:
            return run_batch(args)
        except (FileNotFoundError, pl.exceptions.ColumnNotFoundError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
