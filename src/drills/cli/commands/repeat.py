"""Repeat command."""

from drills.core.repeat import DEFAULT_COUNT, repeat


def add_subparser(subparsers):
    parser = subparsers.add_parser("repeat", help="Repeat a string")
    parser.add_argument("text", help="Text to repeat")
    parser.add_argument("-n", "--count", type=int, default=DEFAULT_COUNT, help="Repetitions")
    parser.set_defaults(func=run_repeat)


def run_repeat(args):
    print(repeat(args.text, args.count))
