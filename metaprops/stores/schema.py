"""
Descriptions of the well-known properties reported by the portable store
"""

from typing import Dict, Optional

from ..core.keys import (
    FMTID_AUDIO, FMTID_FILE_EXTENSION, FMTID_IMAGE, FMTID_MEDIA_FILE, FMTID_MUSIC,
    FMTID_PHOTO, FMTID_QUERY, FMTID_STORAGE, FMTID_SUMMARY,
    PropertyDescriptor, PropertyKey, TypeFlags,
)
from .base import PropertySystem

SYSTEM = TypeFlags.IS_SYSTEM_PROPERTY
INNATE = TypeFlags.IS_INNATE
VIEWABLE = TypeFlags.IS_VIEWABLE
PURGEABLE = TypeFlags.CAN_BE_PURGED
QUERYABLE = TypeFlags.IS_QUERYABLE
MULTI = TypeFlags.MULTIPLE_VALUES
GROUPABLE = TypeFlags.CAN_GROUP_BY | TypeFlags.CAN_STACK_BY

PKEY_TITLE = PropertyKey(FMTID_SUMMARY, 2)
PKEY_SUBJECT = PropertyKey(FMTID_SUMMARY, 3)
PKEY_AUTHOR = PropertyKey(FMTID_SUMMARY, 4)
PKEY_KEYWORDS = PropertyKey(FMTID_SUMMARY, 5)
PKEY_PAGE_COUNT = PropertyKey(FMTID_SUMMARY, 14)
PKEY_APPLICATION_NAME = PropertyKey(FMTID_SUMMARY, 18)

PKEY_ITEM_NAME_DISPLAY = PropertyKey(FMTID_STORAGE, 10)
PKEY_SIZE = PropertyKey(FMTID_STORAGE, 12)
PKEY_FILE_ATTRIBUTES = PropertyKey(FMTID_STORAGE, 13)
PKEY_DATE_MODIFIED = PropertyKey(FMTID_STORAGE, 14)
PKEY_DATE_CREATED = PropertyKey(FMTID_STORAGE, 15)
PKEY_DATE_ACCESSED = PropertyKey(FMTID_STORAGE, 16)
PKEY_FILE_EXTENSION = PropertyKey(FMTID_FILE_EXTENSION, 100)
PKEY_MIME_TYPE = PropertyKey(FMTID_QUERY, 5)

PKEY_DURATION = PropertyKey(FMTID_AUDIO, 3)
PKEY_ENCODING_BITRATE = PropertyKey(FMTID_AUDIO, 4)
PKEY_SAMPLE_RATE = PropertyKey(FMTID_AUDIO, 5)
PKEY_CHANNEL_COUNT = PropertyKey(FMTID_AUDIO, 7)

PKEY_ARTIST = PropertyKey(FMTID_MUSIC, 2)
PKEY_ALBUM_TITLE = PropertyKey(FMTID_MUSIC, 4)
PKEY_YEAR = PropertyKey(FMTID_MUSIC, 5)
PKEY_TRACK_NUMBER = PropertyKey(FMTID_MUSIC, 7)
PKEY_GENRE = PropertyKey(FMTID_MUSIC, 11)
PKEY_ALBUM_ARTIST = PropertyKey(FMTID_MUSIC, 13)
PKEY_COMPOSER = PropertyKey(FMTID_MEDIA_FILE, 19)

PKEY_HORIZONTAL_SIZE = PropertyKey(FMTID_IMAGE, 3)
PKEY_VERTICAL_SIZE = PropertyKey(FMTID_IMAGE, 4)
PKEY_BIT_DEPTH = PropertyKey(FMTID_IMAGE, 7)

# System.Photo property ids are EXIF tag numbers
EXIF_DATE_TAGS = (306, 36867, 36868)


def photo_key(exif_tag: int) -> PropertyKey:
    return PropertyKey(FMTID_PHOTO, exif_tag)


WELL_KNOWN_PROPERTIES: Dict[PropertyKey, PropertyDescriptor] = {
    PKEY_TITLE: PropertyDescriptor("System.Title", "Title", SYSTEM | VIEWABLE | QUERYABLE),
    PKEY_SUBJECT: PropertyDescriptor("System.Subject", "Subject", SYSTEM | VIEWABLE | QUERYABLE),
    PKEY_AUTHOR: PropertyDescriptor("System.Author", "Authors", SYSTEM | MULTI | VIEWABLE | QUERYABLE | GROUPABLE),
    PKEY_KEYWORDS: PropertyDescriptor("System.Keywords", "Tags", SYSTEM | MULTI | VIEWABLE | QUERYABLE | GROUPABLE),
    PKEY_PAGE_COUNT: PropertyDescriptor("System.Document.PageCount", "Pages", SYSTEM | VIEWABLE | QUERYABLE),
    PKEY_APPLICATION_NAME: PropertyDescriptor("System.ApplicationName", "Program name",
                                              SYSTEM | VIEWABLE | PURGEABLE),

    PKEY_ITEM_NAME_DISPLAY: PropertyDescriptor("System.ItemNameDisplay", "Name",
                                               SYSTEM | INNATE | VIEWABLE | QUERYABLE),
    PKEY_SIZE: PropertyDescriptor("System.Size", "Size", SYSTEM | INNATE | VIEWABLE | QUERYABLE | GROUPABLE),
    PKEY_FILE_ATTRIBUTES: PropertyDescriptor("System.FileAttributes", "Attributes", SYSTEM | INNATE | QUERYABLE),
    PKEY_DATE_MODIFIED: PropertyDescriptor("System.DateModified", "Date modified",
                                           SYSTEM | INNATE | VIEWABLE | QUERYABLE | GROUPABLE),
    PKEY_DATE_CREATED: PropertyDescriptor("System.DateCreated", "Date created",
                                          SYSTEM | INNATE | VIEWABLE | QUERYABLE | GROUPABLE),
    PKEY_DATE_ACCESSED: PropertyDescriptor("System.DateAccessed", "Date accessed",
                                           SYSTEM | INNATE | VIEWABLE | QUERYABLE),
    PKEY_FILE_EXTENSION: PropertyDescriptor("System.FileExtension", "", SYSTEM | INNATE | QUERYABLE),
    PKEY_MIME_TYPE: PropertyDescriptor("System.MIMEType", "", SYSTEM | INNATE),

    PKEY_DURATION: PropertyDescriptor("System.Media.Duration", "Length", SYSTEM | INNATE | VIEWABLE | QUERYABLE),
    PKEY_ENCODING_BITRATE: PropertyDescriptor("System.Audio.EncodingBitrate", "Bit rate",
                                              SYSTEM | INNATE | VIEWABLE | QUERYABLE),
    PKEY_SAMPLE_RATE: PropertyDescriptor("System.Audio.SampleRate", "Audio sample rate",
                                         SYSTEM | INNATE | VIEWABLE | QUERYABLE),
    PKEY_CHANNEL_COUNT: PropertyDescriptor("System.Audio.ChannelCount", "Channels",
                                           SYSTEM | INNATE | VIEWABLE | QUERYABLE),

    PKEY_ARTIST: PropertyDescriptor("System.Music.Artist", "Contributing artists",
                                    SYSTEM | MULTI | VIEWABLE | QUERYABLE | PURGEABLE | GROUPABLE),
    PKEY_ALBUM_TITLE: PropertyDescriptor("System.Music.AlbumTitle", "Album",
                                         SYSTEM | VIEWABLE | QUERYABLE | PURGEABLE | GROUPABLE),
    PKEY_YEAR: PropertyDescriptor("System.Media.Year", "Year", SYSTEM | VIEWABLE | QUERYABLE | PURGEABLE),
    PKEY_TRACK_NUMBER: PropertyDescriptor("System.Music.TrackNumber", "#", SYSTEM | VIEWABLE | PURGEABLE),
    PKEY_GENRE: PropertyDescriptor("System.Music.Genre", "Genre",
                                   SYSTEM | MULTI | VIEWABLE | QUERYABLE | PURGEABLE | GROUPABLE),
    PKEY_ALBUM_ARTIST: PropertyDescriptor("System.Music.AlbumArtist", "Album artist",
                                          SYSTEM | VIEWABLE | QUERYABLE | PURGEABLE | GROUPABLE),
    PKEY_COMPOSER: PropertyDescriptor("System.Music.Composer", "Composers",
                                      SYSTEM | MULTI | VIEWABLE | QUERYABLE | PURGEABLE),

    PKEY_HORIZONTAL_SIZE: PropertyDescriptor("System.Image.HorizontalSize", "Width",
                                             SYSTEM | INNATE | VIEWABLE | QUERYABLE),
    PKEY_VERTICAL_SIZE: PropertyDescriptor("System.Image.VerticalSize", "Height",
                                           SYSTEM | INNATE | VIEWABLE | QUERYABLE),
    PKEY_BIT_DEPTH: PropertyDescriptor("System.Image.BitDepth", "Bit depth", SYSTEM | INNATE | VIEWABLE),

    photo_key(271): PropertyDescriptor("System.Photo.CameraManufacturer", "Camera maker",
                                       SYSTEM | VIEWABLE | QUERYABLE | PURGEABLE),
    photo_key(272): PropertyDescriptor("System.Photo.CameraModel", "Camera model",
                                       SYSTEM | VIEWABLE | QUERYABLE | PURGEABLE),
    photo_key(274): PropertyDescriptor("System.Photo.Orientation", "Orientation", SYSTEM | VIEWABLE | PURGEABLE),
    photo_key(33434): PropertyDescriptor("System.Photo.ExposureTime", "Exposure time",
                                         SYSTEM | VIEWABLE | PURGEABLE),
    photo_key(33437): PropertyDescriptor("System.Photo.FNumber", "F-stop", SYSTEM | VIEWABLE | PURGEABLE),
    photo_key(34855): PropertyDescriptor("System.Photo.ISOSpeed", "ISO speed", SYSTEM | VIEWABLE | PURGEABLE),
    photo_key(36867): PropertyDescriptor("System.Photo.DateTaken", "Date taken",
                                         SYSTEM | VIEWABLE | QUERYABLE | PURGEABLE | GROUPABLE),
    photo_key(37385): PropertyDescriptor("System.Photo.Flash", "Flash mode", SYSTEM | VIEWABLE | PURGEABLE),
    photo_key(37386): PropertyDescriptor("System.Photo.FocalLength", "Focal length",
                                         SYSTEM | VIEWABLE | PURGEABLE),
}


class SchemaPropertySystem(PropertySystem):
    """Resolves keys from a fixed table of property descriptions."""

    def __init__(self, descriptions: Optional[Dict[PropertyKey, PropertyDescriptor]] = None):
        self._source = WELL_KNOWN_PROPERTIES if descriptions is None else descriptions
        self._descriptions: Optional[Dict[PropertyKey, PropertyDescriptor]] = None

    def open(self) -> None:
        self._descriptions = dict(self._source)

    def close(self) -> None:
        self._descriptions = None

    def describe(self, key: PropertyKey) -> Optional[PropertyDescriptor]:
        if self._descriptions is None:
            raise RuntimeError("property system is not open")
        return self._descriptions.get(key)
