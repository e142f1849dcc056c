"""Extraction of tradable player agents from the 'items' section."""

from __future__ import annotations

import logging
import time
from typing import List

from ..keyvalues import KeyValue
from ..models import PlayerAgent

log = logging.getLogger(__name__)

_AGENT_PREFAB = "customplayertradable"
_DEFAULT_TEAM = "all"


def _definition_index(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        return 0


def _team(agent: KeyValue) -> str:
    used_by_classes = agent.find("used_by_classes")
    if used_by_classes is None:
        return _DEFAULT_TEAM
    first = next(iter(used_by_classes.children()), None)
    if first is None or not first.key:
        return _DEFAULT_TEAM
    return first.key


def parse_agents(items_game: KeyValue) -> List[PlayerAgent]:
    """Every item whose prefab marks it as a tradable player agent."""
    start = time.perf_counter()
    items = items_game.get("items")

    agents = []
    for agent in items.children():
        prefab = agent.get_string("prefab")
        if prefab != _AGENT_PREFAB:
            continue
        agents.append(
            PlayerAgent(
                definition_index=_definition_index(agent.key),
                name=agent.get_string("name"),
                prefab=prefab,
                model_player=prefab,
                item_name=agent.get_string("loc_name"),
                item_description=agent.get_string("item_description"),
                image_inventory=agent.get_string("image_inventory"),
                item_rarity=agent.get_string("item_rarity"),
                used_by_team=_team(agent),
            )
        )

    log.info(
        "Parsed '%d' agents in %.3fs", len(agents), time.perf_counter() - start
    )
    return agents