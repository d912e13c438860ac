"""
Core file processing logic
"""

import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Union

from ..config.settings import RenderConfig
from ..reporters.text import TextReporter
from ..stores import Providers, get_default_providers
from .collector import collect_properties
from .exceptions import MetaPropsError, PathResolutionError, handle_exception_gracefully
from .models import FileResult, PathFailure, PropertyRow
from .sorting import sort_rows
from .utils import expand_pattern

logger = logging.getLogger(__name__)

Outcome = Union[FileResult, PathFailure]


@handle_exception_gracefully
def list_properties(file_path: str, providers: Providers) -> List[PropertyRow]:
    """Collect and sort the properties of one file."""
    rows = collect_properties(file_path, providers.open_store, providers.property_system,
                              providers.open_container)
    return sort_rows(rows)


def process_file(file_path: str, providers: Providers) -> FileResult:
    """
    Process a single file. Errors are captured in the result, never raised.

    Args:
        file_path: Path of a matched file
        providers: Metadata sources

    Returns:
        FileResult holding the sorted rows or the error
    """
    try:
        rows = list_properties(file_path, providers)
    except MetaPropsError as e:
        logger.error(f"Failed to list properties of {file_path}: {e.message}", exc_info=e)
        return FileResult(file_path, error=e)
    return FileResult(file_path, rows)


def process_paths(patterns: Iterable[str], providers: Providers) -> Iterator[Outcome]:
    """
    Process path patterns one file at a time, in the order given.

    Args:
        patterns: File paths, possibly with wildcards
        providers: Metadata sources

    Yields:
        A FileResult per matched file, or a PathFailure per unresolvable pattern
    """
    for pattern in patterns:
        try:
            files = expand_pattern(pattern)
        except PathResolutionError as e:
            logger.warning(e.message)
            yield PathFailure(pattern, e)
            continue

        for file_path in files:
            yield process_file(file_path, providers)


def write_properties(patterns: Iterable[str], config: RenderConfig, providers: Optional[Providers] = None,
                     stream: Optional[TextIO] = None, verbose: bool = False) -> List[Outcome]:
    """
    List the properties of every file matching the patterns.

    The property system is held open for the whole run and released once at
    the end, whether or not processing succeeded.

    Returns:
        The outcomes, in output order
    """
    if providers is None:
        providers = get_default_providers()
    if stream is None:
        stream = sys.stdout

    reporter = TextReporter(config, stream, verbose)
    outcomes = []
    with providers.property_system:
        for outcome in process_paths(patterns, providers):
            reporter.write(outcome)
            outcomes.append(outcome)
    return outcomes
