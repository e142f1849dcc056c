"""Extraction of rarities together with their display colours."""

from __future__ import annotations

import logging
import time
from typing import Dict, List

from ..keyvalues import KeyValue
from ..models import GenericColor, Rarity

log = logging.getLogger(__name__)


def _colors(items_game: KeyValue) -> Dict[str, GenericColor]:
    section = items_game.find("colors")
    if section is None:
        return {}
    return {
        color.key: GenericColor(
            key=color.key,
            color_name=color.get_string("color_name"),
            hex_color=color.get_string("hex_color"),
        )
        for color in section.children()
    }


def parse_rarities(items_game: KeyValue) -> List[Rarity]:
    """Every entry of 'rarities', with colour data looked up in 'colors'."""
    start = time.perf_counter()
    rarities = items_game.get("rarities")
    colors = _colors(items_game)

    result = []
    for entry in rarities.children():
        current = Rarity(
            key=entry.key,
            loc_key=entry.get_string("loc_key"),
            loc_key_weapon=entry.get_string("loc_key_weapon"),
            loc_key_character=entry.get_string("loc_key_character"),
            drop_sound=entry.get_string("drop_sound"),
        )
        color = colors.get(entry.get_string("color"))
        if color is not None:
            current.hex_color = color.hex_color
            current.color_name = color.color_name
        result.append(current)

    log.info(
        "Parsed '%d' rarities in %.3fs", len(result), time.perf_counter() - start
    )
    return result