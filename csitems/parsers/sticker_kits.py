"""Extraction of sticker kits with their effect and kind."""

from __future__ import annotations

import logging
import time
from typing import List

from ..keyvalues import KeyValue
from ..models import StickerEffect, StickerKit, StickerType

log = logging.getLogger(__name__)

_EFFECT_SUFFIXES = (
    ("_glitter", StickerEffect.GLITTER),
    ("_holo", StickerEffect.HOLO),
    ("_foil", StickerEffect.FOIL),
    ("_gold", StickerEffect.GOLD),
)


def _definition_index(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        return 0


def get_sticker_type(player: int, event: int, team: int) -> StickerType:
    """Autograph if a player is set, then TEAM for team, EVENT for event."""
    if player > 0:
        return StickerType.AUTOGRAPH
    if team > 0:
        return StickerType.TEAM
    if event > 0:
        return StickerType.EVENT
    return StickerType.UNKNOWN


def get_sticker_effect(sticker_material: str) -> StickerEffect:
    """Effect named by the suffix of the sticker material."""
    return next(
        (effect for suffix, effect in _EFFECT_SUFFIXES if sticker_material.endswith(suffix)),
        StickerEffect.UNKNOWN,
    )


def parse_sticker_kits(items_game: KeyValue) -> List[StickerKit]:
    """Every entry of the 'sticker_kits' section."""
    start = time.perf_counter()
    sticker_kits = items_game.get("sticker_kits")

    result = []
    for entry in sticker_kits.children():
        material = entry.get_string("sticker_material")
        event_id = entry.get_int("tournament_event_id")
        team_id = entry.get_int("tournament_team_id")
        player_id = entry.get_int("tournament_player_id")

        result.append(
            StickerKit(
                definition_index=_definition_index(entry.key),
                name=entry.get_string("name"),
                item_name=entry.get_string("item_name"),
                description_string=entry.get_string("description_string"),
                sticker_material=material,
                rarity=entry.get_string("item_rarity"),
                effect=get_sticker_effect(material),
                type=get_sticker_type(player_id, team_id, event_id),
                tournament_event_id=event_id,
                tournament_team_id=team_id,
            )
        )

    log.info(
        "Parsed '%d' sticker kits in %.3fs", len(result), time.perf_counter() - start
    )
    return result