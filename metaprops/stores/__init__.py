"""
Metadata providers: property stores, property systems and container readers
"""

import sys

from .base import ContainerMetadata, PropertyStore, PropertySystem, Providers
from .portable import FilePropertyStore
from .schema import SchemaPropertySystem
from ..containers.isom import IsomCoreMetadata

__all__ = ['ContainerMetadata', 'PropertyStore', 'PropertySystem', 'Providers',
           'FilePropertyStore', 'SchemaPropertySystem', 'get_default_providers']


def get_default_providers() -> Providers:
    """
    Choose the providers for this platform.

    Windows uses the shell property system through pywin32; everywhere else
    the portable store and its schema.
    """
    if sys.platform == 'win32':
        from .windows import WindowsPropertyStore, WindowsPropertySystem
        return Providers(WindowsPropertyStore.open, WindowsPropertySystem(), IsomCoreMetadata.try_open)

    return Providers(FilePropertyStore.open, SchemaPropertySystem(), IsomCoreMetadata.try_open)
