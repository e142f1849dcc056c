"""Item records extracted from items_game and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum, IntEnum
from typing import Any, List, Optional


class CollectibleType(IntEnum):
    UNKNOWN = -1
    SERVICE_MEDAL = 0
    MAP_CONTRIBUTOR = 10
    MAP_PIN = 20
    OPERATION = 30
    PICK_EM = 40
    OLD_PICK_EM = 50
    FANTASY_TROPHY = 60
    TOURNAMENT_FINALIST = 70
    PREMIER_SEASON_COIN = 80
    YEARS_OF_SERVICE = 90


class StickerEffect(IntEnum):
    UNKNOWN = -1
    NORMAL = 0
    HOLO = 1
    FOIL = 2
    GOLD = 3
    GLITTER = 4
    LENTICULAR = 5


class StickerType(IntEnum):
    UNKNOWN = -1
    AUTOGRAPH = 0
    TEAM = 1
    EVENT = 2


class ItemSetType(IntEnum):
    UNKNOWN = -1
    PAINT_KITS = 0
    AGENTS = 1
    STICKERS = 1


def _json_name(name: str) -> Any:
    return field(default="", metadata={"json": name})


@dataclass
class BaseWeapon:
    definition_index: int = 0
    item_name: str = ""
    item_description: str = ""
    item_class: str = ""
    slot: str = ""
    teams: List[str] = field(default_factory=list)
    weapon_price: int = 0
    image_inventory: str = ""


@dataclass
class GenericColor:
    key: str = ""
    color_name: str = ""
    hex_color: str = ""


@dataclass
class StickerKit:
    definition_index: int = 0
    name: str = ""
    item_name: str = ""
    description_string: str = ""
    sticker_material: str = ""
    rarity: str = ""
    effect: StickerEffect = StickerEffect.NORMAL
    type: StickerType = StickerType.AUTOGRAPH
    tournament_event_id: int = 0
    tournament_team_id: int = 0


@dataclass
class PaintKit:
    definition_index: int = 0
    name: str = ""
    use_legacy_model: bool = False
    description_string: str = ""
    description_tag: str = ""
    style: int = 0
    wear_remap_min: float = 0.0
    wear_remap_max: float = 0.0
    rarity: str = ""


@dataclass
class ItemSetItem:
    paint_kit_name: str = _json_name("paintkit")
    weapon_class: str = _json_name("weapon")


@dataclass
class LootListItem:
    name: str = _json_name("item_name")
    item_class: str = ""


@dataclass
class ClientLootListSubList:
    rarity: str = ""
    loot_list_name: str = ""
    items: List[LootListItem] = field(default_factory=list)


@dataclass
class ClientLootList:
    loot_list_id: str = ""
    series: int = 0
    sub_loot_lists: List[ClientLootListSubList] = field(default_factory=list)


@dataclass
class ItemSet:
    key: str = ""
    name: str = ""
    set_description: str = ""
    is_collection: bool = False
    type: ItemSetType = ItemSetType.PAINT_KITS
    items: Optional[List[ItemSetItem]] = None
    agents: Optional[List[str]] = None


@dataclass
class Rarity:
    key: str = ""
    loc_key: str = ""
    loc_key_weapon: str = ""
    loc_key_character: str = ""
    hex_color: str = ""
    color_name: str = ""
    drop_sound: str = ""


@dataclass
class MusicKit:
    definition_index: int = 0
    name: str = ""
    item_name: str = ""
    image_inventory: str = ""
    model: str = _json_name("display_model")


@dataclass
class Keychain:
    definition_index: int = 0
    name: str = ""
    loc_name: str = ""
    loc_description: str = ""
    rarity: str = ""
    quality: str = ""
    image_inventory: str = ""
    model: str = _json_name("display_model")
    loot_list_id: str = ""


@dataclass
class PlayerAgent:
    definition_index: int = 0
    name: str = ""
    prefab: str = ""
    model_player: str = ""
    item_name: str = ""
    item_description: str = ""
    image_inventory: str = ""
    item_rarity: str = ""
    used_by_team: str = ""


@dataclass
class WeaponCaseItemSet:
    tag: str = ""
    tag_text: str = ""
    tag_group: str = ""
    tag_group_text: str = ""


@dataclass
class WeaponCaseKey:
    definition_index: int = 0
    name: str = ""
    item_name: str = ""
    item_description: str = ""
    first_sale_date: str = ""
    prefab: str = ""
    image_inventory: str = ""


@dataclass
class WeaponCase:
    definition_index: int = 0
    name: str = ""
    item_name: str = ""
    item_description: str = ""
    prefab: str = ""
    image_inventory: str = ""
    model_player: str = ""
    first_sale_date: str = ""
    item_set: Optional[WeaponCaseItemSet] = None
    key: Optional[WeaponCaseKey] = None


@dataclass
class Collectible:
    definition_index: int = 0
    name: str = ""
    prefab: str = ""
    item_name: str = ""
    item_description: str = ""
    image_inventory: str = ""
    model: str = _json_name("display_model")
    tournament_event_id: int = 0
    type: CollectibleType = CollectibleType.SERVICE_MEDAL


def _plain(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.metadata.get("json", f.name): _plain(getattr(obj, f.name))
            for f in fields(obj)
        }
    if isinstance(obj, (list, tuple)):
        return [_plain(item) for item in obj]
    if isinstance(obj, dict):
        return {key: _plain(value) for key, value in obj.items()}
    return obj


def to_json(obj: Any) -> str:
    """Serialise records (or lists of them) to indented JSON text."""
    return json.dumps(_plain(obj), indent=2, ensure_ascii=False)