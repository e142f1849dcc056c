import pytest

from csitems.keyvalues import MissingKeyError, parse_vdf
from csitems.models import CollectibleType
from csitems.parsers.collectibles import (
    get_collectible_type,
    is_item_collectible,
    parse_collectibles,
)


@pytest.mark.parametrize(
    "image, prefab, item_name, expected",
    [
        ("img", "", "#CSGO_Collectible_Pin_X", CollectibleType.UNKNOWN),
        ("", "prefab", "#CSGO_Collectible_Pin_X", CollectibleType.UNKNOWN),
        ("img", "premier_season_coin", "", CollectibleType.PREMIER_SEASON_COIN),
        ("econ/status_icons/service_medal_2015", "prefab", "", CollectibleType.SERVICE_MEDAL),
        ("econ/status_icons/5yearcoin", "prefab", "", CollectibleType.YEARS_OF_SERVICE),
        ("img", "prefab", "#CSGO_Collectible_Map_Foo", CollectibleType.MAP_CONTRIBUTOR),
        ("img", "prefab", "#CSGO_TournamentJournal_x", CollectibleType.PICK_EM),
        ("img", "prefab", "#CSGO_CollectibleCoin_x", CollectibleType.PICK_EM),
        ("img", "prefab", "#CSGO_Collectible_Pin_Dust", CollectibleType.MAP_PIN),
        ("img", "prefab", "#CSGO_Collectible_CommunitySeason1", CollectibleType.MAP_PIN),
        ("img", "season3_coin", "#CSGO_Collectible_Op", CollectibleType.OPERATION),
        ("img", "majors_trophy", "#CSGO_Collectible_Trophy", CollectibleType.TOURNAMENT_FINALIST),
        ("img", "prefab", "#CSGO_Collectible_Other", CollectibleType.UNKNOWN),
    ],
)
def test_get_collectible_type(image, prefab, item_name, expected):
    assert get_collectible_type(image, prefab, item_name, 0) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", False),
        ("#CSGO_Collectible_Pin_Dust", True),
        ("#CSGO_TournamentJournal_x", True),
        ("#CSGO_Weapon_Deagle", False),
    ],
)
def test_is_item_collectible(name, expected):
    assert is_item_collectible(name) is expected


GAME = """
"items_game"
{
    "items"
    {
        "6001"
        {
            "name" "dust_pin"
            "prefab" "collectible_untradable"
            "item_name" "#CSGO_Collectible_Pin_Dust"
            "item_description" "#Pin_Desc"
            "image_inventory" "econ/status_icons/pin_dust"
        }
        "7"
        {
            "name" "weapon_deagle"
            "item_name" "#SFUI_WPNHUD_DesertEagle"
        }
        "1028"
        {
            "name" "trophy"
            "prefab" "majors_trophy"
            "item_name" "#CSGO_Collectible_Trophy"
            "image_inventory" "econ/status_icons/trophy"
            "attributes" { "value" "19" }
        }
    }
}
"""


def _game(text=GAME):
    return parse_vdf(text).get("items_game")


def test_parse_collectibles_keeps_only_collectibles():
    result = parse_collectibles(_game())
    assert [c.definition_index for c in result] == [6001, 1028]
    assert [c.type for c in result] == [
        CollectibleType.MAP_PIN,
        CollectibleType.TOURNAMENT_FINALIST,
    ]


def test_parse_collectibles_fields_and_attributes():
    pin, trophy = parse_collectibles(_game())
    assert pin.name == "dust_pin"
    assert pin.item_description == "#Pin_Desc"
    assert pin.tournament_event_id == 0
    assert pin.model == ""
    assert trophy.tournament_event_id == 19


def test_parse_collectibles_missing_items_raises():
    with pytest.raises(MissingKeyError):
        parse_collectibles(_game('"items_game" { "rarities" { "a" "b" } }'))