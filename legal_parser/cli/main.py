#!/usr/bin/env python3
"""
Main CLI entry point for the legal parser.

Parses the extracted text of a statute and prints the document JSON.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from ..services.parser.errors import HeadExtractionError
from ..services.parser.orchestrator import LegalDocumentParser
from ..services.llm.factory import LLMFactory
from ..utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def setup_cli_logging(verbose: bool = False) -> None:
    """Set up logging for CLI operations."""
    log_level = "DEBUG" if verbose else "INFO"
    setup_logging(level=log_level, structured=False)  # Human-readable for CLI


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse one extracted-text file."""
    input_path = Path(args.input_path)
    if not input_path.is_file():
        logger.error(f"Input file does not exist: {input_path}")
        return 1

    try:
        content = input_path.read_text(encoding=args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {input_path}: {e}")
        return 1

    # Source name defaults to the PDF the text was extracted from
    source_name = args.name or f"{input_path.stem}.pdf"

    parser = LegalDocumentParser(
        generate_facts=False if args.no_facts else None,
        decompose_clauses=True if args.decompose else None,
        fact_concurrency=args.concurrency,
    )

    try:
        result = asyncio.run(parser.parse(content, source_name))
    except HeadExtractionError as e:
        logger.error(f"Parsing aborted: {e}")
        return 1

    output = result.document.to_dict()
    if args.with_diagnostics:
        output = {
            "document": output,
            "diagnostics": [d.model_dump(mode="json", exclude_none=True) for d in result.diagnostics],
        }

    print(json.dumps(output, ensure_ascii=False, indent=args.indent))

    if result.degraded:
        logger.warning(f"Parse completed with {len(result.diagnostics)} diagnostic(s)")
    return 0


def cmd_providers(args: argparse.Namespace) -> int:
    """Show which LLM providers have API keys configured."""
    for name, info in LLMFactory.get_available_providers().items():
        status = "available" if info["available"] else "missing API key"
        print(f"{name:<10} {status}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="legal-parser",
        description="Parse Indonesian statutory documents into a structured tree",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")

    parse_parser = subparsers.add_parser("parse", help="Parse an extracted-text file")
    parse_parser.add_argument("input_path", help="Text extracted from the statute PDF")
    parse_parser.add_argument(
        "--name",
        help="Source document name used for the title (default: <file stem>.pdf)"
    )
    parse_parser.add_argument(
        "--no-facts",
        action="store_true",
        help="Skip per-article legal fact generation"
    )
    parse_parser.add_argument(
        "--decompose",
        action="store_true",
        help="Split articles into ayat/huruf/angka children"
    )
    parse_parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="Fact requests in flight at once"
    )
    parse_parser.add_argument(
        "--with-diagnostics",
        action="store_true",
        help="Wrap output as {document, diagnostics}"
    )
    parse_parser.add_argument("--indent", type=int, default=2, help="JSON indent")
    parse_parser.add_argument("--encoding", default="utf-8", help="Input file encoding")

    subparsers.add_parser("providers", help="List configured LLM providers")

    args = parser.parse_args(argv)

    setup_cli_logging(args.verbose)

    if args.command == "parse":
        return cmd_parse(args)
    elif args.command == "providers":
        return cmd_providers(args)
    else:
        parser.print_help()
        return 1


def run() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)


if __name__ == "__main__":
    run()
