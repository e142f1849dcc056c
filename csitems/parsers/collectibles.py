"""Extraction of collectibles (coins, pins, medals, trophies)."""

from __future__ import annotations

import logging
import re
import time
from typing import List

from ..keyvalues import KeyValue, get_sub_key
from ..models import Collectible, CollectibleType

log = logging.getLogger(__name__)

_YEAR_COIN = re.compile(r"\d+yearcoin")
_SEASON_COIN = re.compile(r"season\d+_coin")


def _definition_index(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        return 0


def get_collectible_type(
    image_inventory: str,
    prefab: str,
    item_name: str,
    tournament_event_id: int,
) -> CollectibleType:
    """Classify a collectible from its image, prefab and localisation name."""
    if not prefab or not image_inventory:
        return CollectibleType.UNKNOWN
    if prefab == "premier_season_coin":
        return CollectibleType.PREMIER_SEASON_COIN
    if "service_medal" in image_inventory:
        return CollectibleType.SERVICE_MEDAL
    if _YEAR_COIN.search(image_inventory):
        return CollectibleType.YEARS_OF_SERVICE
    if "#CSGO_Collectible_Map" in item_name:
        return CollectibleType.MAP_CONTRIBUTOR
    if item_name.startswith(("#CSGO_TournamentJournal", "#CSGO_CollectibleCoin")):
        return CollectibleType.PICK_EM
    if item_name.startswith(("#CSGO_Collectible_Pin", "#CSGO_Collectible_CommunitySeason")):
        return CollectibleType.MAP_PIN
    if _SEASON_COIN.search(prefab):
        return CollectibleType.OPERATION
    if prefab == "majors_trophy":
        return CollectibleType.TOURNAMENT_FINALIST
    return CollectibleType.UNKNOWN


def is_item_collectible(item_name: str) -> bool:
    """Whether a localisation name belongs to a collectible item."""
    return item_name.startswith(("#CSGO_Collectible", "#CSGO_TournamentJournal"))


def parse_collectibles(items_game: KeyValue) -> List[Collectible]:
    """Every item in 'items' whose name marks it as a collectible."""
    start = time.perf_counter()
    items = items_game.get("items")

    collectibles = []
    for item in items.children():
        item_name = item.get_string("item_name")
        if not is_item_collectible(item_name):
            continue

        prefab = item.get_string("prefab")
        image_inventory = item.get_string("image_inventory")

        attributes = get_sub_key(item, "attributes")
        if attributes is None:
            tournament_event_id, display_model = 0, ""
        else:
            tournament_event_id = attributes.get_int("value")
            display_model = attributes.get_string("pedestal display model")

        collectibles.append(
            Collectible(
                definition_index=_definition_index(item.key),
                name=item.get_string("name"),
                prefab=prefab,
                item_name=item_name,
                item_description=item.get_string("item_description"),
                image_inventory=image_inventory,
                model=display_model,
                tournament_event_id=tournament_event_id,
                type=get_collectible_type(
                    image_inventory, prefab, item_name, tournament_event_id
                ),
            )
        )

    log.info(
        "Parsed '%d' collectibles in %.3fs",
        len(collectibles),
        time.perf_counter() - start,
    )
    return collectibles