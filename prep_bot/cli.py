"""Command line entry point.

Usage:
    tg-prep --text '| A | B |...'     # preprocess an argument
    cat reply.md | tg-prep --html      # stdin -> conservative HTML
    tg-prep --json < reply.md          # {"chunks": [...], "parse_mode": ...}
"""

import argparse
import dataclasses
import json
import logging
import sys

from prep_bot.config import CONFIG
from tg_prep import HTML_STYLE, PLAIN_STYLE, preprocess

LOGGER = logging.getLogger(__name__)

CHUNK_DIVIDER = '\n\n---\n\n'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tg-prep',
        description='Preprocess agent text for Telegram.',
        exit_on_error=False,
    )
    parser.add_argument(
        '--text',
        help='Text to preprocess (default: read piped stdin). Use --text=-x for leading dashes.',
    )
    parser.add_argument('--html', action='store_true', help='Render conservative HTML.')
    parser.add_argument('--json', action='store_true', help='Print chunks and parse mode as JSON.')
    return parser


def read_input(args: argparse.Namespace) -> str:
    """Take --text if given, else piped stdin, else nothing."""
    if args.text is not None:
        return args.text
    if sys.stdin is not None and not sys.stdin.isatty():
        return sys.stdin.read()
    return ''


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        # Bad arguments print nothing on stdout
        parser.print_usage(sys.stderr)
        LOGGER.error('%s', e)
        return 0
    if unknown:
        LOGGER.warning('Ignoring unknown arguments: %s', ' '.join(unknown))

    text = read_input(args)
    LOGGER.debug('Read %d chars of input', len(text))

    result = preprocess(
        text,
        style=HTML_STYLE if args.html else PLAIN_STYLE,
        max_chunk_length=CONFIG.max_chunk_length,
        split=True,
    )

    if args.json:
        print(json.dumps(dataclasses.asdict(result), indent=2, ensure_ascii=False))
    else:
        out = CHUNK_DIVIDER.join(result.chunks)
        if out:
            print(out)
    return 0


def run() -> None:
    """Console script entry: configure logging, exit with main()'s status."""
    # stdout carries the result, logs go to stderr
    logging.basicConfig(level=getattr(logging, CONFIG.logging_level), stream=sys.stderr)
    sys.exit(main())


if __name__ == '__main__':
    run()
