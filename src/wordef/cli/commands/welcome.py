"""
Welcome message and saved-word listing.
"""

import sys
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wordef.cli import deps
from wordef.core.errors import WordefError

console = Console()

WELCOME = """\
wordef looks up the phonetic spelling and the definitions of a word for \
each part of speech (noun, verb, adjective).

Commands:
  wordef          show this message and the words saved locally
  wordef <word>   show a word's phonetic spelling and definitions, from the local cache or the online dictionary
"""


def add_arguments(parser):
    parser.set_defaults(func=run_welcome)


def run_welcome(args):
    console.print(WELCOME, markup=False, highlight=False)
    
    try:
        settings = deps.get_settings()
        console.print(f"Cache Directory: {settings.cache_dir}", markup=False, highlight=False)
        words = deps.get_index(settings).all_words()
    except WordefError as e:
        console.print(f"[red]✗ Failed to list saved words: {escape(str(e))}[/red]")
        sys.exit(1)
    
    table = Table("Saved Words")
    for word in sorted(words):
        table.add_row(escape(word))
    console.print(table)
