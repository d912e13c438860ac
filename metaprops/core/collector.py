"""
Collection of property rows for a single file
"""

import logging
from typing import List

from ..config.constants import ISOM_BRAND, ISOM_CREATION_TIME, ISOM_MODIFICATION_TIME
from ..stores.base import ContainerOpener, PropertySystem, StoreOpener
from .formatting import format_timestamp
from .models import PropertyRow

logger = logging.getLogger(__name__)


def collect_properties(file_path: str, open_store: StoreOpener, property_system: PropertySystem,
                       open_container: ContainerOpener) -> List[PropertyRow]:
    """
    Read every property of a file plus any container-level fields.

    Args:
        file_path: File to read
        open_store: Opens the property store of a file
        property_system: Resolves keys to descriptors
        open_container: Opens container metadata, or returns None

    Returns:
        Unsorted list of rows
    """
    rows = []

    with open_store(file_path) as store:
        for index in range(len(store)):
            key = store.key_at(index)
            descriptor = property_system.describe(key)
            if descriptor is None:
                logger.debug(f"No property description for {key} in {file_path}")
            rows.append(PropertyRow.from_store(key, descriptor, store.value_for(key)))

    container = open_container(file_path)
    if container is not None:
        with container:
            rows.append(PropertyRow.synthesized(ISOM_BRAND, container.major_brand))
            if container.creation_time is not None:
                rows.append(PropertyRow.synthesized(ISOM_CREATION_TIME, format_timestamp(container.creation_time)))
            if container.modification_time is not None:
                rows.append(PropertyRow.synthesized(ISOM_MODIFICATION_TIME,
                                                    format_timestamp(container.modification_time)))

    logger.debug(f"Collected {len(rows)} properties from {file_path}")
    return rows
