"""
drills CLI.
"""

import argparse
from drills.cli.commands import dictionary, repeat, sums, wallet


def main(argv=None):
    parser = argparse.ArgumentParser(prog="drills", description="Small Python drills")
    subparsers = parser.add_subparsers(dest="command")

    dictionary.add_subparser(subparsers)
    wallet.add_subparser(subparsers)
    sums.add_subparser(subparsers)
    repeat.add_subparser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
