import pytest

from csitems.keyvalues import KeyValue, MissingKeyError, parse_vdf
from csitems.models import StickerEffect, StickerType
from csitems.parsers.sticker_kits import (
    get_sticker_effect,
    get_sticker_type,
    parse_sticker_kits,
)

SAMPLE = """
"items_game"
{
    "sticker_kits"
    {
        "101"
        {
            "name"                  "kat2014_player_holo"
            "item_name"             "#StickerKit_player_holo"
            "description_string"    "#StickerKit_desc_player"
            "sticker_material"      "emskatowice2014/player_holo"
            "item_rarity"           "rare"
            "tournament_event_id"   "3"
            "tournament_team_id"    "7"
            "tournament_player_id"  "55"
        }
        "102"
        {
            "name"              "plain"
            "sticker_material"  "standard/plain"
        }
    }
}
"""


def _items_game(text=SAMPLE):
    return parse_vdf(text).get("items_game")


def test_parse_sticker_fields():
    first, second = parse_sticker_kits(_items_game())
    assert first.definition_index == 101
    assert first.name == "kat2014_player_holo"
    assert first.item_name == "#StickerKit_player_holo"
    assert first.rarity == "rare"
    assert first.effect is StickerEffect.HOLO
    assert first.type is StickerType.AUTOGRAPH
    assert first.tournament_event_id == 3
    assert first.tournament_team_id == 7
    assert second.effect is StickerEffect.UNKNOWN
    assert second.type is StickerType.UNKNOWN


def test_missing_section_raises():
    with pytest.raises(MissingKeyError):
        parse_sticker_kits(KeyValue("items_game", []))


@pytest.mark.parametrize(
    "material, expected",
    [
        ("x/foo_glitter", StickerEffect.GLITTER),
        ("x/foo_holo", StickerEffect.HOLO),
        ("x/foo_foil", StickerEffect.FOIL),
        ("x/foo_gold", StickerEffect.GOLD),
        ("x/foo", StickerEffect.UNKNOWN),
        ("x/holo_foo", StickerEffect.UNKNOWN),
    ],
)
def test_sticker_effect(material, expected):
    assert get_sticker_effect(material) is expected


@pytest.mark.parametrize(
    "player, event, team, expected",
    [
        (1, 1, 1, StickerType.AUTOGRAPH),
        (0, 0, 5, StickerType.TEAM),
        (0, 5, 0, StickerType.EVENT),
        (0, 0, 0, StickerType.UNKNOWN),
    ],
)
def test_sticker_type(player, event, team, expected):
    assert get_sticker_type(player, event, team) is expected