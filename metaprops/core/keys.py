"""
Property keys, type flags and property descriptors
"""

import enum
import uuid
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, order=True)
class PropertyKey:
    """A property identifier: a format id (namespace GUID) plus a property id."""
    fmtid: uuid.UUID
    pid: int

    @classmethod
    def parse(cls, fmtid: Union[str, uuid.UUID], pid: int) -> "PropertyKey":
        if not isinstance(fmtid, uuid.UUID):
            fmtid = uuid.UUID(fmtid)
        return cls(fmtid, int(pid))

    def __str__(self) -> str:
        return f"{{{str(self.fmtid).upper()}}} {self.pid}"


EMPTY_KEY = PropertyKey(uuid.UUID(int=0), 0)


class TypeFlags(enum.IntFlag):
    """Bit values of PROPDESC_TYPE_FLAGS."""
    NONE = 0x0
    MULTIPLE_VALUES = 0x1
    IS_INNATE = 0x2
    IS_GROUP = 0x4
    CAN_GROUP_BY = 0x8
    CAN_STACK_BY = 0x10
    IS_TREE_PROPERTY = 0x20
    INCLUDE_IN_FULL_TEXT_QUERY = 0x40
    IS_VIEWABLE = 0x80
    IS_QUERYABLE = 0x100
    CAN_BE_PURGED = 0x200
    SEARCH_RAW_VALUE = 0x400
    IS_SYSTEM_PROPERTY = 0x80000000


# Order matters: one output character per entry.
FLAG_MARKERS = (
    (TypeFlags.IS_SYSTEM_PROPERTY, 'S'),
    (TypeFlags.IS_INNATE, 'I'),
    (TypeFlags.CAN_BE_PURGED, 'P'),
    (TypeFlags.IS_VIEWABLE, 'V'),
)


@dataclass(frozen=True)
class PropertyDescriptor:
    """Descriptive metadata for a property key."""
    canonical_name: str = ""
    display_name: str = ""
    type_flags: TypeFlags = TypeFlags.NONE


# Format ids of the property sets used by the providers
FMTID_SUMMARY = uuid.UUID("F29F85E0-4FF9-1068-AB91-08002B27B3D9")
FMTID_STORAGE = uuid.UUID("B725F130-47EF-101A-A5F1-02608C9EEBAC")
FMTID_AUDIO = uuid.UUID("64440490-4C8B-11D1-8B70-080036B11A03")
FMTID_IMAGE = uuid.UUID("6444048F-4C8B-11D1-8B70-080036B11A03")
FMTID_MEDIA_FILE = uuid.UUID("64440492-4C8B-11D1-8B70-080036B11A03")
FMTID_MUSIC = uuid.UUID("56A3372E-CE9C-11D2-9F0E-006097C686F6")
FMTID_PHOTO = uuid.UUID("14B81DA1-0135-4D31-96D9-6CBFC9671A99")
FMTID_QUERY = uuid.UUID("0B63E350-9CCC-11D0-BCDB-00805FCCCE04")
FMTID_FILE_EXTENSION = uuid.UUID("E4F10A3C-49E6-405D-8288-A23BD4EEAA6C")

# System.Media.Duration: value is a count of 100ns ticks
PKEY_MEDIA_DURATION = PropertyKey(FMTID_AUDIO, 3)
