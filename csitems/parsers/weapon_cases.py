"""Extraction of weapon cases with their keys and item sets."""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from ..keyvalues import KeyValue
from ..models import WeaponCase, WeaponCaseItemSet, WeaponCaseKey

log = logging.getLogger(__name__)


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _case_key_index(item: KeyValue) -> int:
    associated = item.find("associated_items")
    if associated is None:
        return -1
    first = next(iter(associated.children()), None)
    if first is None or not first.key:
        return -1
    return _to_int(first.key)


def get_weapon_case_key(
    items_game: KeyValue, definition_index: int
) -> Optional[WeaponCaseKey]:
    """The case key item with the given definition index, or None."""
    items = items_game.get("items")
    for item in items.children():
        index = _to_int(item.key)
        if index != definition_index:
            continue
        prefab = item.get_string("prefab")
        if "weapon_case_key" not in prefab:
            continue
        return WeaponCaseKey(
            definition_index=index,
            name=item.get_string("name"),
            item_name=item.get_string("item_name"),
            item_description=item.get_string("item_description"),
            first_sale_date=item.get_string("first_sale_date"),
            prefab=prefab,
            image_inventory=item.get_string("image_inventory"),
        )

    log.error("No weapon case key found for definition index %d", definition_index)
    return None


def get_weapon_case_item_set(item: KeyValue) -> Optional[WeaponCaseItemSet]:
    """The ItemSet tag of a case, or None if it has none."""
    tags = item.find("tags")
    if tags is None:
        log.error("Failed to get tags for weapon case item '%s'", item.key)
        return None
    item_set = tags.find("ItemSet")
    if item_set is None:
        log.error("Failed to get ItemSet for weapon case item '%s'", item.key)
        return None
    return WeaponCaseItemSet(
        tag=item_set.get_string("tag_value"),
        tag_text=item_set.get_string("tag_text"),
        tag_group=item_set.get_string("tag_group"),
        tag_group_text=item_set.get_string("tag_group_text"),
    )


def parse_weapon_cases(items_game: KeyValue) -> List[WeaponCase]:
    """Every item in 'items' whose prefab is 'weapon_case'."""
    start = time.perf_counter()
    items = items_game.get("items")

    cases = []
    for item in items.children():
        prefab = item.get_string("prefab")
        if prefab != "weapon_case":
            continue
        cases.append(
            WeaponCase(
                definition_index=_to_int(item.key),
                name=item.get_string("name"),
                item_name=item.get_string("item_name"),
                item_description=item.get_string("item_description"),
                prefab=prefab,
                image_inventory=item.get_string("image_inventory"),
                model_player=item.get_string("model_player"),
                first_sale_date=item.get_string("first_sale_date"),
                item_set=get_weapon_case_item_set(item),
                key=get_weapon_case_key(items_game, _case_key_index(item)),
            )
        )

    log.info(
        "Parsed '%d' weapon cases in %.3fs", len(cases), time.perf_counter() - start
    )
    return cases