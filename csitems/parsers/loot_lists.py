"""Extraction of client loot lists (case contents grouped by rarity)."""

from __future__ import annotations

import logging
import re
import time
from typing import List, Optional

from ..keyvalues import KeyValue
from ..models import ClientLootList, ClientLootListSubList, LootListItem

log = logging.getLogger(__name__)

# "[cu_tec9_asiimov]weapon_tec9" -> ("cu_tec9_asiimov", "weapon_tec9")
_ITEM_KEY = re.compile(r"\[(.+?)\](.+)")

_SKIPPED_FRAGMENTS = (
    "_musickit",
    "_signature",
    "_signatures",
    "_xray_p250",
    "_dhw13_promo",
    "_promo_",
    "crate_ems14_",
    "storageunit1_",
    "crate_pins",
    "storageunit0_",
    "giftpkg_",
)

# Checked in this order; the first matching suffix wins.
_RARITY_ENDINGS = (
    "default",
    "common",
    "uncommon",
    "rare",
    "mythical",
    "legendary",
    "ancient",
    "immortal",
    "unusual",
)


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def is_valid_loot_list_name(name: str) -> bool:
    """False for music kit, autograph, promo and other irrelevant lists."""
    return not any(fragment in name for fragment in _SKIPPED_FRAGMENTS)


def get_loot_list_rarity(name: str) -> str:
    """Rarity named by the end of a loot list's name, or 'default'."""
    return next(
        (ending for ending in _RARITY_ENDINGS if name.endswith(ending)), "default"
    )


def get_loot_list_items(kv: KeyValue, loot_list: str) -> List[LootListItem]:
    """Items of the named list in kv, from '[name]class' keys."""
    section: Optional[KeyValue] = kv.find(loot_list)
    if section is None:
        return []
    items = []
    for entry in section.children():
        match = _ITEM_KEY.fullmatch(entry.key)
        if match is None:
            continue
        items.append(LootListItem(name=match[1], item_class=match[2]))
    return items


def parse_client_loot_lists(items_game: KeyValue) -> List[ClientLootList]:
    """Loot lists named in 'revolving_loot_lists', resolved via 'client_loot_lists'."""
    start = time.perf_counter()
    revolving = items_game.get("revolving_loot_lists")
    client_loot_lists = items_game.get("client_loot_lists")

    try:
        series_map = revolving.to_string_map()
    except ValueError as error:
        log.warning("No revolving loot lists found in items_game.txt: %s", error)
        return []

    result = []
    for series, list_name in series_map.items():
        if not is_valid_loot_list_name(list_name):
            continue

        section = client_loot_lists.find(list_name)
        if section is None:
            log.error(
                "Failed to get client loot list '%s' from client_loot_lists", list_name
            )
            continue

        result.append(
            ClientLootList(
                loot_list_id=list_name,
                series=_to_int(series),
                sub_loot_lists=[
                    ClientLootListSubList(
                        rarity=get_loot_list_rarity(sub.key),
                        loot_list_name=sub.key,
                        items=get_loot_list_items(client_loot_lists, sub.key),
                    )
                    for sub in section.children()
                ],
            )
        )

    log.info(
        "Parsed '%d' loot lists in %.3fs", len(result), time.perf_counter() - start
    )
    return result