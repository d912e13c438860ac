"""
Plain text rendering of property listings
"""

from typing import Iterable, List, TextIO, Union

from colorama import Fore, Style

from ..config.constants import FIELD_WIDTH, INDENT
from ..config.settings import RenderConfig
from ..core.exceptions import format_error_for_cli
from ..core.models import FileResult, PathFailure, PropertyRow


def name_segment(row: PropertyRow, config: RenderConfig) -> str:
    if config.use_both_names:
        return f"{row.canonical_name}({row.display_name}):"
    if config.use_canonical_names:
        return f"{row.canonical_name}:"
    return f"{row.display_name}:"


def render_row(row: PropertyRow, config: RenderConfig) -> str:
    """Render one row. Padded fields are never truncated."""
    parts = [INDENT]
    if config.include_flags:
        parts.append(f"{row.flags} ")
    if config.include_keys:
        parts.append(f"{row.key_text:<{FIELD_WIDTH}}")
    parts.append(f"{name_segment(row, config):<{FIELD_WIDTH}} ")
    parts.append(row.value_text)
    return "".join(parts)


def render_rows(rows: Iterable[PropertyRow], config: RenderConfig) -> List[str]:
    return [render_row(row, config) for row in rows]


class TextReporter:
    """Writes processing outcomes to a text stream as they arrive."""

    def __init__(self, config: RenderConfig, stream: TextIO, verbose: bool = False):
        self.config = config
        self.stream = stream
        self.verbose = verbose
        self.use_colors = hasattr(stream, 'isatty') and stream.isatty()

    def _write_error(self, error: Exception) -> None:
        message = format_error_for_cli(error, self.verbose)
        if self.use_colors:
            message = f"{Fore.RED}{message}{Style.RESET_ALL}"
        print(message, file=self.stream)

    def write(self, outcome: Union[FileResult, PathFailure]) -> None:
        """Write a file block (path, rows, blank line) or a path error line."""
        if isinstance(outcome, PathFailure):
            self._write_error(outcome.error)
            return

        print(outcome.file_path, file=self.stream)
        if outcome.ok:
            for line in render_rows(outcome.rows, self.config):
                print(line, file=self.stream)
        else:
            self._write_error(outcome.error)
        print(file=self.stream)
