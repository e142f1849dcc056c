import pytest

from csitems.keyvalues import MissingKeyError, parse_vdf
from csitems.models import MusicKit
from csitems.parsers.musickits import parse_music_kits

GAME = """
"items_game"
{
    "music_definitions"
    {
        "3"
        {
            "name" "danielsadowski_01"
            "loc_name" "#musickit_danielsadowski_01"
            "image_inventory" "econ/music_kits/danielsadowski_01"
            "pedestal_display_model" "models/inventory_items/music_kit.mdl"
        }
        "bogus"
        {
            "name" "no_index"
        }
    }
}
"""


def _game(text=GAME):
    return parse_vdf(text).get("items_game")


def test_music_kit_fields():
    kit = parse_music_kits(_game())[0]
    assert kit == MusicKit(
        definition_index=3,
        name="danielsadowski_01",
        item_name="#musickit_danielsadowski_01",
        image_inventory="econ/music_kits/danielsadowski_01",
        model="models/inventory_items/music_kit.mdl",
    )


def test_non_numeric_key_gives_zero_index():
    kits = parse_music_kits(_game())
    assert [k.name for k in kits] == ["danielsadowski_01", "no_index"]
    assert kits[1].definition_index == 0


def test_missing_section_raises():
    with pytest.raises(MissingKeyError):
        parse_music_kits(_game('"items_game" { "items" { "a" "b" } }'))