"""Extraction of paint kits with their rarities."""

from __future__ import annotations

import logging
import time
from typing import Dict, List

from ..keyvalues import KeyValue
from ..models import PaintKit

log = logging.getLogger(__name__)

_SKIPPED_NAMES = frozenset({"default", "workshop_default"})


def _definition_index(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        return 0


def get_paint_kit_rarity_map(items_game: KeyValue) -> Dict[str, str]:
    """Paint kit name to rarity, from the 'paint_kits_rarity' section."""
    return items_game.get("paint_kits_rarity").to_string_map()


def parse_paint_kits(items_game: KeyValue) -> List[PaintKit]:
    """Every paint kit except the default placeholders."""
    start = time.perf_counter()
    paint_kits = items_game.get("paint_kits")
    rarities = get_paint_kit_rarity_map(items_game)

    result = []
    for entry in paint_kits.children():
        name = entry.get_string("name")
        if name in _SKIPPED_NAMES:
            continue

        current = PaintKit(
            definition_index=_definition_index(entry.key),
            name=name,
            use_legacy_model=entry.get_bool("use_legacy_model"),
            description_string=entry.get_string("description_string"),
            description_tag=entry.get_string("description_tag"),
            style=entry.get_int("style"),
            wear_remap_min=entry.get_float("wear_remap_min"),
            wear_remap_max=entry.get_float("wear_remap_max"),
        )
        if name not in rarities:
            log.warning(
                "No rarity found for paint kit '%s' (definition index: %d)",
                name,
                current.definition_index,
            )
        current.rarity = rarities.get(name, "")
        result.append(current)

    log.info(
        "Parsed '%d' paintkits in %.3fs", len(result), time.perf_counter() - start
    )
    return result