import json

from csitems.models import (
    Collectible,
    CollectibleType,
    ItemSet,
    ItemSetItem,
    ItemSetType,
    LootListItem,
    MusicKit,
    StickerEffect,
    StickerKit,
    StickerType,
    WeaponCase,
    WeaponCaseKey,
    to_json,
)


def test_enum_values_match_source():
    coll = json.loads(to_json(Collectible(type=CollectibleType.UNKNOWN)))
    assert coll["type"] == -1
    coin = json.loads(to_json(Collectible(type=CollectibleType.PREMIER_SEASON_COIN)))
    assert coin["type"] == 80
    kit = json.loads(to_json(StickerKit(effect=StickerEffect.GLITTER, type=StickerType.EVENT)))
    assert kit["effect"] == 4
    assert kit["type"] == 2


def test_item_set_stickers_aliases_agents():
    stickers = json.loads(to_json(ItemSet(key="s", type=ItemSetType.STICKERS)))
    agents = json.loads(to_json(ItemSet(key="s", type=ItemSetType.AGENTS)))
    assert stickers["type"] == agents["type"] == 1


def test_item_set_item_json_names():
    data = json.loads(to_json(ItemSetItem("cu_tec9_asiimov", "weapon_tec9")))
    assert data == {"paintkit": "cu_tec9_asiimov", "weapon": "weapon_tec9"}


def test_loot_list_item_json_names():
    data = json.loads(to_json(LootListItem(name="cu_ak", item_class="weapon_ak47")))
    assert data == {"item_name": "cu_ak", "item_class": "weapon_ak47"}


def test_display_model_name():
    data = json.loads(to_json(MusicKit(definition_index=3, model="m.mdl")))
    assert data["display_model"] == "m.mdl"
    assert "model" not in data


def test_enums_serialise_as_ints():
    kit = StickerKit(effect=StickerEffect.HOLO, type=StickerType.TEAM)
    data = json.loads(to_json(kit))
    assert data["effect"] == StickerEffect.HOLO.value
    assert data["type"] == StickerType.TEAM.value
    coll = json.loads(to_json(Collectible(type=CollectibleType.MAP_PIN)))
    assert coll["type"] == CollectibleType.MAP_PIN.value


def test_missing_lists_become_null():
    data = json.loads(to_json(ItemSet(key="set_a", type=ItemSetType.AGENTS, agents=["x"])))
    assert data["items"] is None
    assert data["agents"] == ["x"]


def test_nested_records_and_field_order():
    case = WeaponCase(definition_index=4001, key=WeaponCaseKey(definition_index=1203))
    data = json.loads(to_json(case))
    assert data["key"]["definition_index"] == 1203
    assert data["item_set"] is None
    assert list(data)[0] == "definition_index"
    assert list(data)[-1] == "key"


def test_list_of_records_and_indent():
    text = to_json([MusicKit(name="a"), MusicKit(name="b")])
    assert [entry["name"] for entry in json.loads(text)] == ["a", "b"]
    assert text.startswith('[\n  {\n    "definition_index"')


def test_none_is_null():
    assert to_json(None) == "null"