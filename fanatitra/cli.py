"""Command line entry point: ``fanatitra --zone North --input deliveries.tsv``."""

import argparse
import logging
import pathlib
import sys

from fanatitra.config import DEFAULT_CONFIG
from fanatitra.entries import parse_content
from fanatitra.errors import ReceiptError, ValidationError
from fanatitra.receipt import generate_pdf

EMPTY_INPUT_MESSAGE = 'mba fenoy tsara pr aloha (par respect)'


def validate_request(zone, content):
    """Refuse to start without a zone and something to print"""
    if not zone.strip() or not content.strip():
        raise ValidationError(EMPTY_INPUT_MESSAGE)


def parse_args(args=None):
    parser = argparse.ArgumentParser(description="Print delivery receipts for a zone")
    parser.add_argument('--zone', required=True, help="Delivery zone shown as the heading.")
    parser.add_argument(
        '--input',
        default='-',
        help="Tab separated deliveries, one per line ('-' reads stdin).",
    )
    parser.add_argument(
        '--home',
        type=pathlib.Path,
        default=None,
        help="Folder holding Downloads/ (defaults to the user's home).",
    )
    parser.add_argument('-v', '--verbose', action='store_true', help="Log dropped lines too.")
    return parser.parse_args(args=args)


def read_content(source):
    if source == '-':
        return sys.stdin.read()
    return pathlib.Path(source).read_text(encoding='utf-8')


def main(argv=None):
    opts = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if opts.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        content = read_content(opts.input)
    except OSError as exc:
        print(f"could not read {opts.input}: {exc}", file=sys.stderr)
        return 1

    try:
        validate_request(opts.zone, content)
        entries = parse_content(content)
        path = generate_pdf(opts.zone, entries, DEFAULT_CONFIG, home=opts.home)
    except ValidationError as exc:
        print(exc, file=sys.stderr)
        return 2
    except ReceiptError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(path)
    return 0


if __name__ == '__main__':  # pragma: no cover - CLI shim
    sys.exit(main())
