"""Extraction of keychain definitions."""

from __future__ import annotations

import logging
import time
from typing import List

from ..keyvalues import KeyValue, get_sub_key
from ..models import Keychain

log = logging.getLogger(__name__)


def _definition_index(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        return 0


def parse_keychains(items_game: KeyValue) -> List[Keychain]:
    """Every entry of the 'keychain_definitions' section."""
    start = time.perf_counter()
    definitions = items_game.get("keychain_definitions")

    keychains = []
    for entry in definitions.children():
        loot_list_id = ""
        capsule = get_sub_key(entry, "tags.KeychainCapsule")
        if capsule is not None:
            loot_list_id = capsule.get_string("tag_value")
            log.debug("Found KeychainCapsule tag with loot_list_id: %s", loot_list_id)

        keychains.append(
            Keychain(
                definition_index=_definition_index(entry.key),
                name=entry.get_string("name"),
                loc_name=entry.get_string("loc_name"),
                loc_description=entry.get_string("loc_description"),
                rarity=entry.get_string("item_rarity"),
                quality=entry.get_string("item_quality"),
                image_inventory=entry.get_string("image_inventory"),
                model=entry.get_string("pedestal_display_model"),
                loot_list_id=loot_list_id,
            )
        )

    log.info(
        "Parsed '%d' keychains in %.3fs", len(keychains), time.perf_counter() - start
    )
    return keychains