#!/usr/bin/env python3
"""
metaprops - File Metadata Property Lister
-----------------------------------------
Lists every metadata property of the given files, sorted by name and aligned
for reading on a console.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

import colorama
from colorama import Fore, Style

from .config.constants import DESCRIPTION, EPILOG, FLAG_TOKENS, LICENSE_TEXT
from .config.settings import RenderConfig, load_settings
from .core.processor import write_properties
from .core.utils import prompt_and_wait_if_sole_console
from .stores import Providers


class ColoredFormatter(logging.Formatter):
    """Console log formatter with a color per level."""
    FORMATS = {
        logging.DEBUG: Fore.CYAN + "%(message)s" + Style.RESET_ALL,
        logging.INFO: "%(message)s",
        logging.WARNING: Fore.YELLOW + "%(message)s" + Style.RESET_ALL,
        logging.ERROR: Fore.RED + "%(message)s" + Style.RESET_ALL,
        logging.CRITICAL: Fore.RED + Style.BRIGHT + "%(message)s" + Style.RESET_ALL
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def configure_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Configure logging system with appropriate levels and handlers."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates on reconfiguration
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    # Listing goes to stdout; diagnostics only to stderr
    if verbose:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(ColoredFormatter())
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='metaprops',
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
        add_help=False,
    )
    parser.add_argument('-h', '-?', dest='help', action='store_true', help='Show this help text.')
    parser.add_argument('-c', dest='canonical', action='store_true',
                        help='Use canonical names. By default uses display names.')
    parser.add_argument('-b', dest='both', action='store_true', help='Show both canonical and display names.')
    parser.add_argument('-f', dest='flags', action='store_true', help='Show flags.')
    parser.add_argument('-k', dest='keys', action='store_true', help='Include property keys as well as names.')
    parser.add_argument('-l', dest='license', action='store_true', help='Show source code license.')
    parser.add_argument('paths', nargs='*', metavar='filename', help='Files to list. Wildcards may be included.')
    return parser


def parse_arguments(parser: argparse.ArgumentParser, argv: List[str]) -> argparse.Namespace:
    """
    Parse the command line.

    Flags are matched case-insensitively. Every other token, including
    unrecognised ones starting with '-', is a path.
    """
    flags, paths = [], []
    for arg in argv:
        if arg.lower() in FLAG_TOKENS:
            flags.append(arg.lower())
        else:
            paths.append(arg)

    args = parser.parse_args(flags)
    args.paths = paths
    if not argv:
        args.help = True
    return args


def main(argv: Optional[List[str]] = None, providers: Optional[Providers] = None,
         stream: Optional[TextIO] = None) -> int:
    """Run the metaprops CLI. Always returns 0; per-file errors are reported inline."""
    if argv is None:
        argv = sys.argv[1:]
    if stream is None:
        stream = sys.stdout

    colorama.just_fix_windows_console()

    settings = load_settings()
    configure_logging(settings.log_file, settings.debug)

    parser = build_parser()
    args = parse_arguments(parser, argv)

    if args.help:
        parser.print_help(stream)
    elif args.license:
        print(LICENSE_TEXT, file=stream)
    else:
        config = RenderConfig.from_args(args)
        logging.debug(f"Listing {len(args.paths)} path(s) with {config}")
        write_properties(args.paths, config, providers, stream, verbose=settings.debug)

    prompt_and_wait_if_sole_console()
    return 0


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)


# --- Main entry point ---
if __name__ == "__main__":
    run()
