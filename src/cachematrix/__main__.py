"""Command-line entry point: python -m cachematrix runs the self-test."""

import argparse
import logging
import sys

from cachematrix.config import LOG_LEVELS, load_settings
from cachematrix.errors import SelfTestError
from cachematrix.selftest import run_self_test


def main(argv=None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description='Run the CachedMatrix self-test')
    parser.add_argument('--quiet', action='store_true',
                        help='Only report failures')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=settings.log_level,
                        help='Logging level (default: %(default)s)')
    parser.add_argument('--tolerance', type=float, default=settings.selftest_tolerance,
                        help='Absolute tolerance for inverse checks (default: %(default)s)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    try:
        run_self_test(verbose=not args.quiet, tolerance=args.tolerance)
    except SelfTestError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
