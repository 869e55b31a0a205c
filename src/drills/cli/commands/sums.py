"""Sum commands."""

import sys

from drills.cli.session import report_error
from drills.core.sums import sum_all, sum_all_tails, sum_ints


def add_subparser(subparsers):
    parser = subparsers.add_parser("sum", help="Sum integers")
    parser.add_argument("numbers", nargs="*", help="Integers, or quoted groups with --all/--tails")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--all", action="store_true", help="Sum each quoted group separately")
    mode.add_argument("--tails", action="store_true", help="Sum each group without its first element")
    parser.set_defaults(func=run_sum)


def parse_group(text: str) -> list[int]:
    return [int(part) for part in text.replace(",", " ").split()]


def run_sum(args):
    try:
        if args.all or args.tails:
            groups = [parse_group(g) for g in args.numbers]
        else:
            numbers = [int(n) for n in args.numbers]
    except ValueError as e:
        report_error(f"Error: {e}")
        sys.exit(1)

    if args.all:
        result = sum_all(*groups)
    elif args.tails:
        result = sum_all_tails(*groups)
    else:
        result = sum_ints(numbers)

    print(result)
