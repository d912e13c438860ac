"""
Interfaces of the metadata providers consumed by the collector
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from ..core.keys import PropertyDescriptor, PropertyKey


class PropertyStore(ABC):
    """An open, ordered collection of (key, value) pairs for one file.

    Use as a context manager; the store is closed on exit.
    """

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()
        return False

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def key_at(self, index: int) -> PropertyKey:
        pass

    @abstractmethod
    def value_for(self, key: PropertyKey) -> Any:
        """Return the raw value stored under key, or None."""

    @abstractmethod
    def close(self) -> None:
        pass


class PropertySystem(ABC):
    """Resolves property keys to descriptors.

    Acquired once for a run with ``with``; ``open`` and ``close`` bracket
    every call to ``describe``.
    """

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()
        return False

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    @abstractmethod
    def describe(self, key: PropertyKey) -> Optional[PropertyDescriptor]:
        """Return the descriptor for key, or None when the key is not known."""


class ContainerMetadata(ABC):
    """Container-level fields read directly from a media file."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()
        return False

    @property
    @abstractmethod
    def major_brand(self) -> str:
        pass

    @property
    @abstractmethod
    def creation_time(self) -> Optional[datetime]:
        pass

    @property
    @abstractmethod
    def modification_time(self) -> Optional[datetime]:
        pass

    def close(self) -> None:
        pass


StoreOpener = Callable[[str], PropertyStore]
ContainerOpener = Callable[[str], Optional[ContainerMetadata]]


@dataclass
class Providers:
    """The three metadata sources used to list a file."""
    open_store: StoreOpener
    property_system: PropertySystem
    open_container: ContainerOpener
