"""
metaprops - File Metadata Property Lister
"""

import logging

from .config.constants import VERSION as __version__

from .main import main
from .core.models import PropertyRow, FileResult, PathFailure
from .core.processor import process_file, process_paths, write_properties

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['main', 'process_file', 'process_paths', 'write_properties', 'PropertyRow', 'FileResult',
           'PathFailure']
