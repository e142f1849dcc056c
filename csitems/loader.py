"""Loading items_game.txt into a merged KeyValues tree."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional, Union

from .keyvalues import KeyValue, MissingKeyError, parse_vdf


def merge_keys_at_root_level(root: Optional[KeyValue]) -> None:
    """Merge repeated top-level sections of root into one section each."""
    if root is None:
        raise ValueError("root KeyValue is missing")
    if not root.children():
        raise ValueError("root KeyValue has no child keys")

    merged: Dict[str, List[KeyValue]] = {}
    for section in root.children():
        merged.setdefault(section.key, []).extend(section.children())

    root.value = [KeyValue(name, items) for name, items in merged.items() if items]


def load_items_game(
    path: Union[str, Path],
    export_dir: Union[str, Path] = "exported",
) -> KeyValue:
    """Read and merge the 'items_game' section; also dump it as JSON."""
    parsed = parse_vdf(Path(path).read_bytes())
    items_game = parsed.find("items_game")
    if items_game is None:
        raise MissingKeyError("items_game")

    merge_keys_at_root_level(items_game)

    target = Path(export_dir) / "items_game.json"
    try:
        target.write_text(
            json.dumps(items_game.to_plain(), ensure_ascii=False), encoding="utf-8"
        )
    except OSError as error:
        print("Error writing data to file:", error)

    return items_game