"""
Custom exceptions for metaprops with user-friendly error messages
"""

import functools
import traceback
from typing import Optional, List


class MetaPropsError(Exception):
    """Base exception class for metaprops with user-friendly messaging."""

    def __init__(self, message: str, details: Optional[str] = None, suggestions: Optional[List[str]] = None):
        """
        Initialize metaprops exception.

        Args:
            message: Main error message (user-friendly)
            details: Technical details for debugging
            suggestions: List of suggested solutions
        """
        self.message = message
        self.details = details
        self.suggestions = suggestions or []
        super().__init__(self.get_full_message())

    def get_full_message(self) -> str:
        """Get the complete error message with suggestions."""
        msg = self.message
        if self.details:
            msg += f"\n\nTechnical details: {self.details}"
        if self.suggestions:
            msg += "\n\nSuggestions:\n" + "\n".join(f"  * {s}" for s in self.suggestions)
        return msg


class PathResolutionError(MetaPropsError):
    """Raised when a path pattern matches nothing or its directory cannot be listed."""

    def __init__(self, pattern: str, reason: str, original_error: Optional[Exception] = None):
        message = f"Could not resolve '{pattern}': {reason}"
        details = str(original_error) if original_error else None
        suggestions = [
            "Check that the directory exists and is readable",
            "Wildcards only match files in a single directory (no recursion)"
        ]
        super().__init__(message, details, suggestions)
        self.pattern = pattern


class OpenError(MetaPropsError):
    """Raised when a matched file cannot be opened by a metadata source."""

    def __init__(self, file_path: str, source: str, original_error: Optional[Exception] = None):
        reason = f": {original_error}" if original_error else ""
        message = f"Could not open {source} for {file_path}{reason}"
        details = repr(original_error) if original_error else None
        suggestions = [
            "Verify that the file exists and is readable",
            "Ensure the file is not locked by another application",
            "Check that the file is not corrupted or truncated"
        ]
        super().__init__(message, details, suggestions)
        self.file_path = file_path
        self.source = source


class PropertyStoreOpenError(OpenError):
    """Raised when the property store cannot be opened for a file."""

    def __init__(self, file_path: str, original_error: Optional[Exception] = None):
        super().__init__(file_path, "property store", original_error)


class ContainerOpenError(OpenError):
    """Raised when a media container is recognised but cannot be parsed."""

    def __init__(self, file_path: str, original_error: Optional[Exception] = None):
        super().__init__(file_path, "media container", original_error)


class ProviderError(MetaPropsError):
    """Raised when a metadata provider fails unexpectedly while reading a file."""

    def __init__(self, file_path: str, original_error: Exception):
        message = f"Unexpected error while reading {file_path}: {original_error}"
        suggestions = [
            "Try processing the file again",
            "Set METAPROPS_DEBUG=1 for more technical details",
            "Report this issue if it persists"
        ]
        super().__init__(message, type(original_error).__name__, suggestions)
        self.file_path = file_path


def handle_exception_gracefully(func):
    """
    Decorator converting unexpected exceptions into a ProviderError for the file
    passed as the first argument. metaprops exceptions pass through as-is.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except MetaPropsError:
            raise
        except Exception as e:
            file_path = args[0] if args else "unknown"
            raise ProviderError(file_path, e) from e
    return wrapper


def format_error_for_cli(error: Exception, verbose: bool = False) -> str:
    """
    Format an error for command-line display.

    Args:
        error: The exception to format
        verbose: Whether to include technical details

    Returns:
        Formatted error message
    """
    if isinstance(error, MetaPropsError):
        msg = error.message
        if not verbose:
            return msg

        if error.details:
            msg += f"\n  Technical details: {error.details}"
        for suggestion in error.suggestions:
            msg += f"\n  * {suggestion}"
    else:
        msg = str(error) or type(error).__name__
        if not verbose:
            return msg

    cause = error.__cause__ or error
    if cause.__traceback__ is not None:
        msg += "\n" + "".join(traceback.format_exception(type(cause), cause, cause.__traceback__)).rstrip()
    return msg
