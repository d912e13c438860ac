"""
Data models for property rows and processing results
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .exceptions import MetaPropsError
from .formatting import format_value
from .keys import EMPTY_KEY, FLAG_MARKERS, PropertyDescriptor, PropertyKey

UNKNOWN_FLAGS = "????"
SYNTHESIZED_FLAGS = "----"


def flags_to_text(descriptor: PropertyDescriptor) -> str:
    """Encode the system/innate/purgeable/viewable bits as ``SIPV`` markers."""
    return "".join(marker if descriptor.type_flags & flag else '-'
                   for flag, marker in FLAG_MARKERS)


@dataclass(frozen=True)
class PropertyRow:
    """One displayable property of a file."""
    key: PropertyKey
    display_name: str
    canonical_name: str
    value_text: str
    flags: str

    @classmethod
    def from_store(cls, key: PropertyKey, descriptor: Optional[PropertyDescriptor], value: Any) -> "PropertyRow":
        """Build a row from a property store entry and its descriptor (None when not found)."""
        if descriptor is None:
            key_text = str(key)
            return cls(key, key_text, key_text, format_value(value, key), UNKNOWN_FLAGS)

        display_name = descriptor.display_name or descriptor.canonical_name or str(key)
        canonical_name = descriptor.canonical_name or display_name
        return cls(key, display_name, canonical_name, format_value(value, key), flags_to_text(descriptor))

    @classmethod
    def synthesized(cls, name: str, value_text: Optional[str]) -> "PropertyRow":
        """Build a row for metadata that has no property key."""
        return cls(EMPTY_KEY, name, name, value_text if value_text is not None else format_value(None),
                   SYNTHESIZED_FLAGS)

    @property
    def key_text(self) -> str:
        return str(self.key)


@dataclass
class FileResult:
    """Outcome of listing one file: its sorted rows, or the error that stopped it."""
    file_path: str
    rows: List[PropertyRow] = field(default_factory=list)
    error: Optional[MetaPropsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PathFailure:
    """Outcome of a path pattern that could not be resolved to files."""
    pattern: str
    error: MetaPropsError
