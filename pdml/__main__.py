"""
PDML command line

Usage:
    python -m pdml tokens shop.pdml
    python -m pdml parse shop.pdml --format yaml --output shop.yaml
    python -m pdml classify "div.card" "a[href=foo]"
    python -m pdml examples
"""

import argparse
import logging
import sys
from pathlib import Path

from pdml.config import OUTPUT_FORMATS, config
from pdml.errors import PDMLError, describe_error
from pdml.examples import EXAMPLE_DOCUMENTS
from pdml.lexer.lexer import Lexer
from pdml.parser.pdml_parser import parse_file, parse_string
from pdml.reader.char_reader import CharReader
from pdml.selector.classifier import classify_selector
from pdml.serialize import dump_pages

logger = logging.getLogger("pdml")

SOURCE_ARG_HELP = "Path to a .pdml source file"


def cmd_tokens(args: argparse.Namespace) -> int:
    """Print every token of a source, one per line"""
    with CharReader.from_file(args.source) as reader:
        for token in Lexer(reader):
            print(repr(token))
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse a source and dump the page tree"""
    pages = parse_file(args.source)
    output = dump_pages(pages, args.format)
    if args.output:
        try:
            Path(args.output).write_text(output, encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not write {args.output}: {e}")
            return 1
        logger.info(f"Wrote {len(pages)} page(s) to {args.output}")
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    """Print the semantic form of each selector"""
    status = 0
    for selector in args.selectors:
        try:
            semantic = classify_selector(selector)
        except PDMLError as e:
            logger.error(describe_error(e))
            status = 1
            continue
        print(f"{selector}\t{semantic!r}\t{semantic.to_css()}")
    return status


def cmd_examples(args: argparse.Namespace) -> int:
    """Parse the bundled example documents"""
    for name, source in EXAMPLE_DOCUMENTS.items():
        print(f"\n=== {name} ===")
        print(dump_pages(parse_string(source), args.format), end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdml",
        description="PDML - Page Description Markup front end",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    tokens_parser = subparsers.add_parser('tokens', help='Print the token stream of a source')
    tokens_parser.add_argument('source', help=SOURCE_ARG_HELP)
    tokens_parser.set_defaults(func=cmd_tokens)

    parse_parser = subparsers.add_parser('parse', help='Parse a source and dump its pages')
    parse_parser.add_argument('source', help=SOURCE_ARG_HELP)
    parse_parser.add_argument('--format', '-f', choices=OUTPUT_FORMATS, default=config.output_format,
                              help='Output format (default: PDML_OUTPUT_FORMAT or json)')
    parse_parser.add_argument('--output', '-o', help='Write to this file instead of stdout')
    parse_parser.set_defaults(func=cmd_parse)

    classify_parser = subparsers.add_parser('classify', help='Classify selector text')
    classify_parser.add_argument('selectors', nargs='+', help='Selector text, e.g. div.card')
    classify_parser.set_defaults(func=cmd_classify)

    examples_parser = subparsers.add_parser('examples', help='Parse the bundled examples')
    examples_parser.add_argument('--format', '-f', choices=OUTPUT_FORMATS, default=config.output_format)
    examples_parser.set_defaults(func=cmd_examples)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level="DEBUG" if args.verbose else config.effective_log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except PDMLError as e:
        logger.error(describe_error(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
