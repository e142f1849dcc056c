# csitems

`csitems` reads the `items_game.txt` file shipped with Counter-Strike and
turns its sections into JSON files: music kits, collectibles, weapon cases,
player agents, rarities, paint kits, item sets, sticker kits, keychains,
client loot lists and base weapons.

It has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

## Command line

```
csitems [PATH] [--export-dir DIR] [--no-wait]
```

- `PATH` is the file to read; it defaults to `./files/items_game.txt`.
- `--export-dir` is the directory the JSON files are written to; it defaults
  to `exported`. The directory must already exist: when a file cannot be
  written, an error message is printed and the run carries on.
- `--no-wait` exits at once. Without it the command ends with
  "Press Enter to exit..." and waits for a line on standard input.

The command:

1. parses the file and takes its `items_game` section, merging top-level
   sections that appear more than once into one each;
2. writes that merged tree to `<export-dir>/items_game.json`;
3. prints a tree of the sections, largest first, with the number of entries
   in each;
4. writes one indented JSON file per category: `music_kits.json`,
   `collectibles.json`, `weapon_cases.json`, `player_agents.json`,
   `rarities.json`, `paint_kits.json`, `item_sets.json`, `sticker_kits.json`,
   `keychains.json`, `client_loot_lists.json` and `weapons.json`.

If a category cannot be parsed (for example because its section is missing),
the error is logged and that file holds `null`. Log messages go to standard
error.

## Library use

```python
from csitems.loader import load_items_game
from csitems.models import to_json
from csitems.parsers.paint_kits import parse_paint_kits
from csitems.parsers.sticker_kits import parse_sticker_kits

items_game = load_items_game("files/items_game.txt", "exported")

paint_kits = parse_paint_kits(items_game)
print(to_json(paint_kits[:3]))

for sticker in parse_sticker_kits(items_game):
    print(sticker.name, sticker.effect.name, sticker.type.name)
```

`load_items_game(path, export_dir="exported")` returns the merged
`items_game` node as a `KeyValue`. It raises `MissingKeyError` when the file
has no `items_game` section.

The parsers, each taking that node and returning a list of dataclasses from
`csitems.models`:

| Module | Function | Records |
| --- | --- | --- |
| `csitems.parsers.musickits` | `parse_music_kits` | `MusicKit` |
| `csitems.parsers.collectibles` | `parse_collectibles` | `Collectible` |
| `csitems.parsers.weapon_cases` | `parse_weapon_cases` | `WeaponCase` |
| `csitems.parsers.agents` | `parse_agents` | `PlayerAgent` |
| `csitems.parsers.rarities` | `parse_rarities` | `Rarity` |
| `csitems.parsers.paint_kits` | `parse_paint_kits` | `PaintKit` |
| `csitems.parsers.item_sets` | `parse_item_sets` | `ItemSet` |
| `csitems.parsers.sticker_kits` | `parse_sticker_kits` | `StickerKit` |
| `csitems.parsers.keychains` | `parse_keychains` | `Keychain` |
| `csitems.parsers.loot_lists` | `parse_client_loot_lists` | `ClientLootList` |
| `csitems.parsers.weapons` | `parse_weapons` | `BaseWeapon` |

A parser raises `MissingKeyError` when the section it reads is absent.
Smaller helpers are public too, such as `get_collectible_type`,
`get_sticker_effect`, `get_loot_list_rarity` and `get_weapon_case_key`.

`csitems.models.to_json` serialises records, or lists of them, to indented
JSON. Enumerations (`CollectibleType`, `StickerEffect`, `StickerType`,
`ItemSetType`) are written as their integer values, and a few fields use
other JSON names: `model` becomes `display_model`, `ItemSetItem` writes
`paintkit` and `weapon`, and `LootListItem.name` becomes `item_name`.

## KeyValues helpers

`csitems.keyvalues` holds the underlying tools:

- `parse_vdf(text)` parses KeyValues text (str or bytes) into an unnamed root
  `KeyValue`; malformed input raises `VdfSyntaxError`.
- `KeyValue` offers `children()`, `find(key)` (or `None`), `get(key)` (raises
  `MissingKeyError`), `get_string`, `get_int`, `get_float`, `get_bool` with
  defaults, `to_string_map()` and `to_plain()`.
- `get_sub_key(root, path)` follows a dotted path such as
  `"tags.KeychainCapsule"`.
- `get_attribute_value(kv, key)` reads the `value` of a named entry in a
  node's `attributes` section.

`csitems.loader.merge_keys_at_root_level(root)` performs the merge of
repeated top-level sections on its own.

## What it does not do

- Gloves, sprays, sticker capsules, souvenir packages and collections have no
  parsers of their own and are not exported.
- Localisation tokens such as `#CSGO_Collectible_Pin...` are kept as they
  are; nothing is looked up in language files.
- It only reads and exports; it stores nothing besides the JSON files.

## Tests

```
pip install .[test]
pytest
```