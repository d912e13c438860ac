"""
Tests for the ISO base media container reader
"""

import os
import struct
import sys
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

# Add the project root to Python path for development testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from metaprops.containers.isom import IsomCoreMetadata, isom_time
from metaprops.core.exceptions import ContainerOpenError

EPOCH = datetime(1904, 1, 1, tzinfo=timezone.utc)
CREATED = datetime(2018, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
MODIFIED = datetime(2019, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def box(name: bytes, payload: bytes) -> bytes:
    return struct.pack(">I4s", 8 + len(payload), name) + payload


def ftyp(brand: bytes = b"mp42") -> bytes:
    return box(b"ftyp", brand + struct.pack(">I", 0) + b"isom" + brand)


def mvhd_v0(created: int, modified: int) -> bytes:
    payload = struct.pack(">B3xIIII", 0, created, modified, 1000, 5000)
    return box(b"mvhd", payload + bytes(80))


def mvhd_v1(created: int, modified: int) -> bytes:
    payload = struct.pack(">B3xQQIQ", 1, created, modified, 1000, 5000)
    return box(b"mvhd", payload + bytes(80))


def seconds(value: datetime) -> int:
    return int((value - EPOCH).total_seconds())


class TestIsomCoreMetadata(unittest.TestCase):
    """Test reading brand and movie header times."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def write(self, name: str, data: bytes) -> str:
        path = os.path.join(self.temp_dir.name, name)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def test_not_a_container(self):
        path = self.write("notes.txt", b"This is not an MP4 file at all.\n")
        self.assertIsNone(IsomCoreMetadata.try_open(path))

    def test_empty_file(self):
        self.assertIsNone(IsomCoreMetadata.try_open(self.write("empty.mp4", b"")))

    def test_missing_file(self):
        with self.assertRaises(ContainerOpenError):
            IsomCoreMetadata.try_open(os.path.join(self.temp_dir.name, "missing.mp4"))

    def test_brand_only(self):
        path = self.write("still.heic", ftyp(b"heic") + box(b"free", bytes(8)))
        metadata = IsomCoreMetadata.try_open(path)
        with metadata:
            self.assertEqual(metadata.major_brand, "heic")
            self.assertIsNone(metadata.creation_time)
            self.assertIsNone(metadata.modification_time)

    def test_version_0_times(self):
        data = ftyp() + box(b"moov", mvhd_v0(seconds(CREATED), seconds(MODIFIED)))
        metadata = IsomCoreMetadata.try_open(self.write("clip.mp4", data))
        self.assertEqual(metadata.major_brand, "mp42")
        self.assertEqual(metadata.creation_time, CREATED)
        self.assertEqual(metadata.modification_time, MODIFIED)

    def test_version_1_times(self):
        data = ftyp(b"qt  ") + box(b"moov", mvhd_v1(seconds(CREATED), seconds(MODIFIED)))
        metadata = IsomCoreMetadata.try_open(self.write("clip.mov", data))
        self.assertEqual(metadata.major_brand, "qt  ")
        self.assertEqual(metadata.creation_time, CREATED)
        self.assertEqual(metadata.modification_time, MODIFIED)

    def test_zero_times_absent(self):
        data = ftyp() + box(b"moov", mvhd_v0(0, seconds(MODIFIED)))
        metadata = IsomCoreMetadata.try_open(self.write("clip.mp4", data))
        self.assertIsNone(metadata.creation_time)
        self.assertEqual(metadata.modification_time, MODIFIED)

    def test_malformed_box(self):
        path = self.write("bad.mp4", struct.pack(">I4s", 4, b"ftyp") + bytes(16))
        with self.assertRaises(ContainerOpenError):
            IsomCoreMetadata.try_open(path)

    def test_isom_time(self):
        self.assertIsNone(isom_time(0))
        self.assertEqual(isom_time(1), datetime(1904, 1, 1, 0, 0, 1, tzinfo=timezone.utc))
        self.assertIsNone(isom_time(1 << 63))


if __name__ == '__main__':
    unittest.main()
