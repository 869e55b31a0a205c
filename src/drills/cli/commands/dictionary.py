"""
Dictionary session commands.
"""

import sys

from drills.cli.session import console, expect_args, report_error, report_ok, run_session
from drills.core.dictionary import Dictionary, DictionaryError


def add_subparser(subparsers):
    parser = subparsers.add_parser("dict", help="Interactive word dictionary")
    parser.add_argument(
        "-e", "--entry",
        action="append",
        default=[],
        metavar="WORD=DEFINITION",
        help="Pre-populate an entry (repeatable)",
    )
    parser.set_defaults(func=dict_session)


def parse_entries(raw: list[str]) -> dict[str, str]:
    entries = {}
    for item in raw:
        word, sep, definition = item.partition("=")
        if not sep or not word:
            raise ValueError(f"expected WORD=DEFINITION, got: {item}")
        entries[word] = definition
    return entries


def make_actions(d: Dictionary) -> dict:
    def search(args):
        expect_args(args, 1, "search WORD")
        print(d.search(args[0]))

    def add(args):
        expect_args(args, 2, "add WORD DEFINITION")
        d.add(args[0], " ".join(args[1:]))
        report_ok(f"Added: {args[0]}")

    def update(args):
        expect_args(args, 2, "update WORD DEFINITION")
        d.update(args[0], " ".join(args[1:]))
        report_ok(f"Updated: {args[0]}")

    def delete(args):
        expect_args(args, 1, "delete WORD")
        d.delete(args[0])
        report_ok(f"Deleted: {args[0]}")

    def list_entries(args):
        entries = d.entries()
        if not entries:
            console.print("No words.")
            return
        for entry in entries:
            print(f"{entry.word:20} {entry.definition}")

    return {
        "search": search,
        "add": add,
        "update": update,
        "delete": delete,
        "list": list_entries,
    }


def dict_session(args, stream=None):
    try:
        entries = parse_entries(args.entry)
    except ValueError as e:
        report_error(e)
        sys.exit(1)

    d = Dictionary(entries)
    if entries:
        console.print(f"[dim]Loaded {len(d)} words[/dim]")

    run_session(make_actions(d), errors=(DictionaryError,), stream=stream)
