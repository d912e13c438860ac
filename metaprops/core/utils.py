"""
File system and console helpers
"""

import fnmatch
import logging
import os
import sys
from typing import List

from .exceptions import PathResolutionError

logger = logging.getLogger(__name__)


def expand_pattern(pattern: str) -> List[str]:
    """
    Expand a path that may contain wildcards in its last component.

    Only the named directory is searched (no recursion). Files are returned
    in directory enumeration order.

    Args:
        pattern: File path or wildcard pattern

    Returns:
        Paths of the matching files

    Raises:
        PathResolutionError: the directory cannot be listed or nothing matches
    """
    folder, name = os.path.split(pattern)
    if not folder:
        folder = os.getcwd()

    matches = []
    try:
        with os.scandir(folder) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                if fnmatch.fnmatch(entry.name, name) or os.path.normcase(entry.name) == os.path.normcase(name):
                    matches.append(os.path.join(folder, entry.name))
    except OSError as e:
        raise PathResolutionError(pattern, "directory could not be listed", e) from e

    if not matches:
        raise PathResolutionError(pattern, "no matching files")

    logger.debug(f"'{pattern}' matched {len(matches)} file(s)")
    return matches


def prompt_and_wait_if_sole_console() -> None:
    """Pause before exit when the process owns its console window (started from Explorer)."""
    if sys.platform != 'win32':
        return

    import msvcrt
    import pywintypes
    import win32console

    try:
        attached = win32console.GetConsoleProcessList()
    except pywintypes.error as e:
        logger.debug(f"No console attached: {e}")
        return

    if len(attached) == 1:
        print("Press any key to continue...", end='', flush=True)
        msvcrt.getch()
        print()
