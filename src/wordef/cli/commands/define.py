"""
Single-word lookup.
"""

import argparse
import sys
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wordef.cli import deps
from wordef.core.entry import WordEntry
from wordef.core.errors import WordefError

console = Console()


class _LookupWord(argparse.Action):
    """Store the word and route to run_define when one is given."""
    
    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        if values:
            namespace.func = run_define


def add_arguments(parser):
    parser.add_argument(
        "word",
        nargs="?",
        action=_LookupWord,
        help="Word to look up (omit to list saved words)",
    )


def definitions_table(entry: WordEntry) -> Table:
    table = Table("POS", "Definition")
    for meaning in entry.meanings:
        definition = meaning.definitions[0].definition if meaning.definitions else ""
        table.add_row(escape(meaning.part_of_speech), escape(definition))
    return table


def run_define(args):
    try:
        resolver = deps.get_resolver(deps.get_settings())
        with resolver.client:
            entry = resolver.resolve(args.word)
    except ValueError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)
    except WordefError as e:
        console.print(f"[red]✗ Failed to look up '{escape(args.word)}': {escape(str(e))}[/red]")
        sys.exit(1)
    
    if not entry.has_definitions:
        console.print(f"[yellow]No definitions found for '{escape(args.word)}'[/yellow]")
        sys.exit(1)
    
    console.print(f"Word: {entry.word}", markup=False)
    console.print(f"Phonetic Spelling: {entry.phonetic}", markup=False)
    console.print()
    console.print(definitions_table(entry))
