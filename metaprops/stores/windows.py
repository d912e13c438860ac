"""
Windows Property System provider (requires pywin32)
"""

import logging
import os
from typing import Any, Optional

import pythoncom
import pywintypes
from win32com.propsys import propsys

from ..core.exceptions import PropertyStoreOpenError
from ..core.keys import PropertyDescriptor, PropertyKey, TypeFlags
from .base import PropertyStore, PropertySystem

logger = logging.getLogger(__name__)

TYPE_E_ELEMENTNOTFOUND = -2147319765
PDTF_MASK_ALL = 0x800007FF


def to_property_key(native) -> PropertyKey:
    fmtid, pid = native
    return PropertyKey.parse(str(fmtid), pid)


def to_native_key(key: PropertyKey):
    return pywintypes.IID(f"{{{key.fmtid}}}"), key.pid


class WindowsPropertyStore(PropertyStore):
    """The shell property store of a file."""

    def __init__(self, file_path: str, store):
        self.file_path = file_path
        self._store = store

    @classmethod
    def open(cls, file_path: str) -> "WindowsPropertyStore":
        try:
            store = propsys.SHGetPropertyStoreFromParsingName(os.path.abspath(file_path))
        except pywintypes.com_error as e:
            raise PropertyStoreOpenError(file_path, e) from e
        return cls(file_path, store)

    def __len__(self) -> int:
        return self._store.GetCount()

    def key_at(self, index: int) -> PropertyKey:
        return to_property_key(self._store.GetAt(index))

    def value_for(self, key: PropertyKey) -> Any:
        return self._store.GetValue(to_native_key(key)).GetValue()

    def close(self) -> None:
        # Dropping the last reference releases the COM object
        self._store = None


def _optional_name(getter) -> str:
    try:
        return getter() or ""
    except pywintypes.com_error:
        return ""


class WindowsPropertySystem(PropertySystem):
    """Property descriptions from the Windows property schema."""

    def open(self) -> None:
        pythoncom.CoInitialize()

    def close(self) -> None:
        pythoncom.CoUninitialize()

    def describe(self, key: PropertyKey) -> Optional[PropertyDescriptor]:
        try:
            description = propsys.PSGetPropertyDescription(to_native_key(key))
        except pywintypes.com_error as e:
            if e.hresult == TYPE_E_ELEMENTNOTFOUND:
                return None
            raise

        return PropertyDescriptor(
            canonical_name=_optional_name(description.GetCanonicalName),
            display_name=_optional_name(description.GetDisplayName),
            type_flags=TypeFlags(description.GetTypeFlags(PDTF_MASK_ALL) & PDTF_MASK_ALL),
        )
