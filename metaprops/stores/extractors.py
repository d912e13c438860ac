"""
Property extraction from file system information and embedded tags
"""

import logging
import mimetypes
import os
import stat
from datetime import datetime, timezone
from typing import Any, List, Tuple

import mutagen
from PIL import Image
from PIL.TiffImagePlugin import IFDRational
from PyPDF2 import PdfReader

from ..config.constants import SUPPORTED_EXTENSIONS
from ..core.formatting import TICKS_PER_SECOND
from ..core.keys import PropertyKey
from ..core.timestamps import LOCAL
from .schema import (
    EXIF_DATE_TAGS, PKEY_ALBUM_ARTIST, PKEY_ALBUM_TITLE, PKEY_APPLICATION_NAME, PKEY_ARTIST,
    PKEY_AUTHOR, PKEY_BIT_DEPTH, PKEY_CHANNEL_COUNT, PKEY_COMPOSER, PKEY_DATE_ACCESSED,
    PKEY_DATE_CREATED, PKEY_DATE_MODIFIED, PKEY_DURATION, PKEY_ENCODING_BITRATE,
    PKEY_FILE_ATTRIBUTES, PKEY_FILE_EXTENSION, PKEY_GENRE, PKEY_HORIZONTAL_SIZE,
    PKEY_ITEM_NAME_DISPLAY, PKEY_KEYWORDS, PKEY_MIME_TYPE, PKEY_PAGE_COUNT, PKEY_SAMPLE_RATE,
    PKEY_SIZE, PKEY_SUBJECT, PKEY_TITLE, PKEY_TRACK_NUMBER, PKEY_VERTICAL_SIZE, PKEY_YEAR,
    photo_key,
)

logger = logging.getLogger(__name__)

Properties = List[Tuple[PropertyKey, Any]]

FILE_ATTRIBUTE_READONLY = 0x1
FILE_ATTRIBUTE_HIDDEN = 0x2
FILE_ATTRIBUTE_NORMAL = 0x80

EXIF_IFD_POINTER = 0x8769
# Offsets into other IFDs and opaque vendor blobs
EXIF_SKIPPED_TAGS = {0x8769, 0x8825, 0xA005, 0x927C}
EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"

IMAGE_BIT_DEPTHS = {
    '1': 1, 'L': 8, 'P': 8, 'LA': 16, 'PA': 16, 'RGB': 24, 'YCbCr': 24, 'LAB': 24, 'HSV': 24,
    'RGBA': 32, 'CMYK': 32, 'I;16': 16, 'I': 32, 'F': 32,
}


def utc_time(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def file_attributes(name: str, stat_info: os.stat_result) -> int:
    """Windows file attribute bits, approximated from the mode where the OS has none."""
    attributes = getattr(stat_info, 'st_file_attributes', None)
    if attributes is not None:
        return attributes

    attributes = 0
    if not stat_info.st_mode & stat.S_IWUSR:
        attributes |= FILE_ATTRIBUTE_READONLY
    if name.startswith('.'):
        attributes |= FILE_ATTRIBUTE_HIDDEN
    return attributes or FILE_ATTRIBUTE_NORMAL


def extract_storage_properties(file_path: str, stat_info: os.stat_result) -> Properties:
    """Extract name, type, size, attribute and time properties."""
    name = os.path.basename(file_path)
    ext = os.path.splitext(name)[1]
    mime_type, _ = mimetypes.guess_type(name)

    properties = [(PKEY_ITEM_NAME_DISPLAY, name)]
    if ext:
        properties.append((PKEY_FILE_EXTENSION, ext.lower()))
    if mime_type:
        properties.append((PKEY_MIME_TYPE, mime_type))

    # st_birthtime is missing on most Linux builds; st_ctime is creation time on Windows
    created = getattr(stat_info, 'st_birthtime', stat_info.st_ctime)
    properties.extend([
        (PKEY_SIZE, stat_info.st_size),
        (PKEY_FILE_ATTRIBUTES, file_attributes(name, stat_info)),
        (PKEY_DATE_MODIFIED, utc_time(stat_info.st_mtime)),
        (PKEY_DATE_CREATED, utc_time(created)),
        (PKEY_DATE_ACCESSED, utc_time(stat_info.st_atime)),
    ])
    return properties


def _tag_values(tags, name: str) -> List[str]:
    value = tags.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    return [str(v) for v in value if str(v)]


def _leading_number(text: str):
    digits = text.strip().split('/')[0].split('-')[0]
    return int(digits) if digits.isdigit() else None


def extract_audio_properties(file_path: str) -> Properties:
    """Extract stream and tag properties from audio and video files using mutagen."""
    properties = []

    try:
        audio = mutagen.File(file_path, easy=True)
    except Exception as e:
        logger.warning(f"Failed to read tags from {file_path}: {e}")
        return properties

    if audio is None:
        return properties

    info = audio.info
    length = getattr(info, 'length', None)
    if length:
        properties.append((PKEY_DURATION, int(round(length * TICKS_PER_SECOND))))
    for key, attribute in ((PKEY_ENCODING_BITRATE, 'bitrate'),
                           (PKEY_SAMPLE_RATE, 'sample_rate'),
                           (PKEY_CHANNEL_COUNT, 'channels')):
        value = getattr(info, attribute, None)
        if value:
            properties.append((key, int(value)))

    tags = audio.tags
    if tags is None:
        return properties

    titles = _tag_values(tags, 'title')
    if titles:
        properties.append((PKEY_TITLE, titles[0]))
    albums = _tag_values(tags, 'album')
    if albums:
        properties.append((PKEY_ALBUM_TITLE, albums[0]))
    album_artists = _tag_values(tags, 'albumartist')
    if album_artists:
        properties.append((PKEY_ALBUM_ARTIST, album_artists[0]))

    for key, name in ((PKEY_ARTIST, 'artist'), (PKEY_GENRE, 'genre'), (PKEY_COMPOSER, 'composer')):
        values = _tag_values(tags, name)
        if values:
            properties.append((key, values))

    for key, name in ((PKEY_YEAR, 'date'), (PKEY_TRACK_NUMBER, 'tracknumber')):
        values = _tag_values(tags, name)
        number = _leading_number(values[0]) if values else None
        if number is not None:
            properties.append((key, number))

    return properties


def _exif_value(tag: int, value: Any) -> Any:
    if isinstance(value, IFDRational):
        return float(value)
    if isinstance(value, tuple):
        return tuple(float(v) if isinstance(v, IFDRational) else v for v in value)
    if isinstance(value, str):
        value = value.rstrip('\x00').strip()
        if tag in EXIF_DATE_TAGS:
            # Unset dates are written as blanks between the separators
            if not value.replace(':', '').strip():
                return None
            try:
                return datetime.strptime(value, EXIF_DATE_FORMAT).replace(tzinfo=LOCAL)
            except ValueError:
                return value
    return value


def extract_image_properties(file_path: str) -> Properties:
    """Extract dimensions and EXIF properties from image files using Pillow."""
    properties = []

    try:
        with Image.open(file_path) as img:
            properties.append((PKEY_HORIZONTAL_SIZE, img.width))
            properties.append((PKEY_VERTICAL_SIZE, img.height))
            depth = IMAGE_BIT_DEPTHS.get(img.mode)
            if depth:
                properties.append((PKEY_BIT_DEPTH, depth))

            exif = img.getexif()
            entries = list(exif.items()) + list(exif.get_ifd(EXIF_IFD_POINTER).items())
            for tag, value in entries:
                if tag in EXIF_SKIPPED_TAGS:
                    continue
                value = _exif_value(tag, value)
                if value is not None:
                    properties.append((photo_key(tag), value))
    except Exception as e:
        logger.warning(f"Failed to read image metadata from {file_path}: {e}")

    return properties


def _split_list(text: str, separators: str) -> List[str]:
    for separator in separators[1:]:
        text = text.replace(separator, separators[0])
    return [item.strip() for item in text.split(separators[0]) if item.strip()]


def extract_pdf_properties(file_path: str) -> Properties:
    """Extract document information properties from PDF files using PyPDF2."""
    properties = []

    try:
        reader = PdfReader(file_path)
        properties.append((PKEY_PAGE_COUNT, len(reader.pages)))
        info = reader.metadata
        if info is None:
            return properties

        if info.title:
            properties.append((PKEY_TITLE, str(info.title)))
        if info.subject:
            properties.append((PKEY_SUBJECT, str(info.subject)))
        if info.author:
            properties.append((PKEY_AUTHOR, _split_list(str(info.author), ';')))
        keywords = info.get('/Keywords')
        if keywords:
            properties.append((PKEY_KEYWORDS, _split_list(str(keywords), ';,')))
        if info.creator:
            properties.append((PKEY_APPLICATION_NAME, str(info.creator)))
    except Exception as e:
        logger.warning(f"Failed to read PDF metadata from {file_path}: {e}")

    return properties


def extract_properties(file_path: str, stat_info: os.stat_result) -> Properties:
    """
    Extract every property available for a file.

    Args:
        file_path: Path to the file
        stat_info: Result of os.stat for the file

    Returns:
        List of (key, value) pairs in extraction order
    """
    properties = extract_storage_properties(file_path, stat_info)

    ext = os.path.splitext(file_path)[1].lower()
    if ext in SUPPORTED_EXTENSIONS['images']:
        properties.extend(extract_image_properties(file_path))
    elif ext in SUPPORTED_EXTENSIONS['documents']:
        properties.extend(extract_pdf_properties(file_path))
    elif ext in SUPPORTED_EXTENSIONS['audio'] or ext in SUPPORTED_EXTENSIONS['video']:
        properties.extend(extract_audio_properties(file_path))

    return properties
