"""Command line entry point used by the launcher workflow."""

import argparse
import logging
import sys

from config import Config
from linkcleaner.services.launcher import build_item, output

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='linkcleaner',
        description='Reduce an Amazon product link to its canonical /dp/ form.',
    )
    parser.add_argument(
        'query',
        nargs='?',
        default=None,
        help='Product URL, with or without scheme',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # stdout belongs to the launcher, so log to stderr
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    item = build_item(args.query)
    try:
        output([item])
    except OSError as e:
        logger.error(f"Failed to write launcher output: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
