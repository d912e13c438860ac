"""
Core metadata of ISO base media files (MP4, MOV, 3GP, HEIF)
"""

import logging
import struct
from datetime import datetime, timedelta, timezone
from typing import Optional

from mutagen.mp4 import Atoms, AtomError

from ..core.exceptions import ContainerOpenError
from ..stores.base import ContainerMetadata

logger = logging.getLogger(__name__)

# Box times count seconds from 1904-01-01 UTC
ISOM_EPOCH = datetime(1904, 1, 1, tzinfo=timezone.utc)


def isom_time(seconds: int) -> Optional[datetime]:
    """Convert a box timestamp; zero means the field was never set."""
    if not seconds:
        return None
    try:
        return ISOM_EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        logger.warning(f"Ignoring out of range container timestamp {seconds}")
        return None


class IsomCoreMetadata(ContainerMetadata):
    """Brand and movie header times of an ISO base media file."""

    def __init__(self, major_brand: str, creation_time: Optional[datetime] = None,
                 modification_time: Optional[datetime] = None):
        self._major_brand = major_brand
        self._creation_time = creation_time
        self._modification_time = modification_time

    @property
    def major_brand(self) -> str:
        return self._major_brand

    @property
    def creation_time(self) -> Optional[datetime]:
        return self._creation_time

    @property
    def modification_time(self) -> Optional[datetime]:
        return self._modification_time

    @classmethod
    def try_open(cls, file_path: str) -> Optional["IsomCoreMetadata"]:
        """
        Read the core metadata of a file.

        Args:
            file_path: File to read

        Returns:
            The metadata, or None when the file does not start with an ftyp box
        """
        try:
            with open(file_path, 'rb') as fileobj:
                header = fileobj.read(8)
                if len(header) < 8 or header[4:8] != b'ftyp':
                    return None
                return cls._read(fileobj)
        except (OSError, AtomError, struct.error, KeyError) as e:
            raise ContainerOpenError(file_path, e) from e

    @classmethod
    def _read(cls, fileobj) -> "IsomCoreMetadata":
        atoms = Atoms(fileobj)

        ok, data = atoms[b"ftyp"].read(fileobj)
        if not ok or len(data) < 4:
            raise AtomError("truncated ftyp box")
        major_brand = data[:4].decode('latin-1')

        if b"moov.mvhd" not in atoms:
            return cls(major_brand)

        ok, data = atoms[b"moov.mvhd"].read(fileobj)
        if not ok or len(data) < 4:
            raise AtomError("truncated mvhd box")

        version = data[0]
        if version == 0:
            creation, modification = struct.unpack(">II", data[4:12])
        elif version == 1:
            creation, modification = struct.unpack(">QQ", data[4:20])
        else:
            raise AtomError(f"unknown mvhd version {version}")

        return cls(major_brand, isom_time(creation), isom_time(modification))
