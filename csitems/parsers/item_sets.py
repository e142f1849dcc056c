"""Extraction of item sets (collections of skins or agents)."""

from __future__ import annotations

import logging
import re
import time
from typing import List, Optional

from ..keyvalues import KeyValue
from ..models import ItemSet, ItemSetItem, ItemSetType

log = logging.getLogger(__name__)

# "[cu_tec9_asiimov]weapon_tec9" -> ("cu_tec9_asiimov", "weapon_tec9")
_SKIN_KEY = re.compile(r"\[(.+?)\](.+)")


def get_item_set_agents(kv: Optional[KeyValue]) -> List[str]:
    """Keys of every entry in an item set's 'items' section."""
    if kv is None:
        return []
    return [item.key for item in kv.children()]


def get_item_set_paint_kits(kv: Optional[KeyValue]) -> List[ItemSetItem]:
    """Paint kit / weapon pairs from '[paintkit]weapon' keys."""
    if kv is None:
        return []
    skins = []
    for skin in kv.children():
        match = _SKIN_KEY.fullmatch(skin.key)
        if match is None:
            continue
        skins.append(ItemSetItem(paint_kit_name=match[1], weapon_class=match[2]))
    return skins


def parse_item_sets(items_game: KeyValue) -> List[ItemSet]:
    """Every item set holding paint kits or, failing that, agents."""
    start = time.perf_counter()
    item_sets = items_game.get("item_sets")

    sets = []
    for entry in item_sets.children():
        current = ItemSet(
            key=entry.key,
            name=entry.get_string("name"),
            set_description=entry.get_string("set_description"),
            is_collection=entry.get_bool("is_collection"),
            type=ItemSetType.PAINT_KITS,
        )

        members = entry.find("items")
        skins = get_item_set_paint_kits(members)
        if skins:
            current.items = skins
        else:
            agents = get_item_set_agents(members)
            if not agents:
                continue
            current.agents = agents
            current.type = ItemSetType.AGENTS

        sets.append(current)

    log.info(
        "Parsed '%d' item sets in %.3fs", len(sets), time.perf_counter() - start
    )
    return sets