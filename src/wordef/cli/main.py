"""
wordef CLI.
"""

import argparse
import logging

from wordef.cli.commands import define, welcome


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="wordef",
        description="Look up the phonetic spelling and definitions of a word",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    
    welcome.add_arguments(parser)
    define.add_arguments(parser)
    
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    args.func(args)


if __name__ == "__main__":
    main()
