"""Extraction of base weapons from the weapon prefabs."""

from __future__ import annotations

import logging
import time
from typing import List

from ..keyvalues import KeyValue
from ..models import BaseWeapon

log = logging.getLogger(__name__)


def _is_weapon_prefab(key: str) -> bool:
    return key.startswith("weapon_") and key.endswith("_prefab")


def _price(prefab: KeyValue) -> int:
    attributes = prefab.find("attributes")
    if attributes is None:
        return 0
    return attributes.get_int("in game price")


def _teams(prefab: KeyValue) -> List[str]:
    used_by_classes = prefab.find("used_by_classes")
    if used_by_classes is None:
        return []
    return [team.key for team in used_by_classes.children()]


def parse_weapons(items_game: KeyValue) -> List[BaseWeapon]:
    """Every prefab named 'weapon_*_prefab' as a base weapon."""
    start = time.perf_counter()
    prefabs = items_game.get("prefabs")

    weapons = [
        BaseWeapon(
            item_name=prefab.get_string("item_name"),
            item_description=prefab.get_string("item_description"),
            item_class=prefab.get_string("item_class"),
            slot=prefab.get_string("prefab"),
            teams=_teams(prefab),
            weapon_price=_price(prefab),
            image_inventory=prefab.get_string("image_inventory"),
        )
        for prefab in prefabs.children()
        if _is_weapon_prefab(prefab.key)
    ]

    log.info(
        "Parsed '%d' weapons in %.3fs", len(weapons), time.perf_counter() - start
    )
    return weapons