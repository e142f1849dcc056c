"""Extraction of music kit definitions."""

from __future__ import annotations

import logging
import time
from typing import List

from ..keyvalues import KeyValue
from ..models import MusicKit

log = logging.getLogger(__name__)


def _definition_index(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        return 0


def parse_music_kits(items_game: KeyValue) -> List[MusicKit]:
    """Every entry of the 'music_definitions' section."""
    start = time.perf_counter()
    definitions = items_game.get("music_definitions")

    kits = [
        MusicKit(
            definition_index=_definition_index(entry.key),
            name=entry.get_string("name"),
            item_name=entry.get_string("loc_name"),
            image_inventory=entry.get_string("image_inventory"),
            model=entry.get_string("pedestal_display_model"),
        )
        for entry in definitions.children()
    ]

    log.info(
        "Parsed '%d' music-kits in %.3fs", len(kits), time.perf_counter() - start
    )
    return kits