"""Command line entry point: load items_game.txt and export its parts as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from .keyvalues import KeyValue, MissingKeyError
from .loader import load_items_game
from .models import to_json
from .parsers.agents import parse_agents
from .parsers.collectibles import parse_collectibles
from .parsers.item_sets import parse_item_sets
from .parsers.keychains import parse_keychains
from .parsers.loot_lists import parse_client_loot_lists
from .parsers.musickits import parse_music_kits
from .parsers.paint_kits import parse_paint_kits
from .parsers.rarities import parse_rarities
from .parsers.sticker_kits import parse_sticker_kits
from .parsers.weapon_cases import parse_weapon_cases
from .parsers.weapons import parse_weapons

log = logging.getLogger(__name__)

_COUNT_WIDTH = 14
_TITLE_WIDTH = 35

_EXPORTS: Tuple[Tuple[str, Callable[[KeyValue], Any]], ...] = (
    ("music_kits", parse_music_kits),
    ("collectibles", parse_collectibles),
    ("weapon_cases", parse_weapon_cases),
    ("player_agents", parse_agents),
    ("rarities", parse_rarities),
    ("paint_kits", parse_paint_kits),
    ("item_sets", parse_item_sets),
    ("sticker_kits", parse_sticker_kits),
    ("keychains", parse_keychains),
    ("client_loot_lists", parse_client_loot_lists),
    ("weapons", parse_weapons),
)


def format_item_name(title: str, count: int, length: int) -> str:
    """'title   <count> entries', with the title padded to length."""
    count_text = f"\033[32m{count}\033[0m".ljust(_COUNT_WIDTH)
    return f"{title.ljust(length)}{count_text} entries"


def export_to_json_file(
    value: Any, name: str = "", directory: Union[str, Path] = "exported"
) -> Optional[Path]:
    """Write value as indented JSON to <directory>/<name>.json; path or None."""
    target = Path(directory) / f"{name or 'music_kits'}.json"
    try:
        target.write_text(to_json(value), encoding="utf-8")
    except OSError as error:
        print("Error writing data to file:", error)
        return None
    return target


def render_section_list(items_game: KeyValue) -> str:
    """Sections with their entry counts, largest first, as a rounded tree list."""
    sections = sorted(
        items_game.children(), key=lambda section: len(section.children()), reverse=True
    )
    lines = [
        format_item_name(section.key, len(section.children()), _TITLE_WIDTH)
        for section in sections
    ]
    if len(lines) == 1:
        return f"── {lines[0]}"
    rendered: List[str] = []
    for position, line in enumerate(lines):
        if position == 0:
            prefix = "╭─"
        elif position == len(lines) - 1:
            prefix = "╰─"
        else:
            prefix = "├─"
        rendered.append(f"{prefix} {line}")
    return "\n".join(rendered)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract item data from items_game.txt into JSON files."
    )
    parser.add_argument(
        "path", nargs="?", default="./files/items_game.txt", help="items_game.txt to read"
    )
    parser.add_argument(
        "--export-dir", default="exported", help="directory the JSON files go to"
    )
    parser.add_argument(
        "--no-wait", action="store_true", help="exit without waiting for Enter"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    items_game = load_items_game(args.path, args.export_dir)
    log.info("Successfully loaded items_game.txt")
    print(render_section_list(items_game))

    for name, parse in _EXPORTS:
        try:
            result = parse(items_game)
        except (MissingKeyError, ValueError) as error:
            log.error("Failed to parse %s: %s", name, error)
            result = None
        export_to_json_file(result, name, args.export_dir)

    if not args.no_wait:
        print("Press Enter to exit...")
        try:
            input()
        except EOFError:
            pass
    return 0