"""Parsing and querying of KeyValues (VDF) text such as items_game.txt."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

log = logging.getLogger(__name__)


class VdfSyntaxError(ValueError):
    """Raised when KeyValues text cannot be parsed."""


class MissingKeyError(LookupError):
    """Raised when a requested child key does not exist."""

    def __init__(self, key: str) -> None:
        super().__init__(f"key '{key}' not found")
        self.key = key


_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_LEXEME = re.compile(
    r"""
      (?P<space>\s+|//[^\n]*)
    | "(?P<quoted>(?:\\.|[^"\\])*)"
    | (?P<brace>[{}])
    | (?P<cond>\[[^\]\n]*\])
    | (?P<bare>[^\s{}"]+)
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"'}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


@dataclass
class KeyValue:
    """A node of a KeyValues tree: a key holding a string or child nodes."""

    key: str
    value: Union[str, List["KeyValue"]] = field(default_factory=list)

    def children(self) -> List["KeyValue"]:
        """Child nodes, or an empty list when the value is a string."""
        return self.value if isinstance(self.value, list) else []

    def find(self, key: str) -> Optional["KeyValue"]:
        """First child with the given key, or None."""
        return next((child for child in self.children() if child.key == key), None)

    def get(self, key: str) -> "KeyValue":
        """First child with the given key; raises MissingKeyError if absent."""
        child = self.find(key)
        if child is None:
            raise MissingKeyError(key)
        return child

    def _scalar(self, key: str) -> Optional[str]:
        child = self.find(key)
        if child is None or not isinstance(child.value, str):
            return None
        return child.value

    def get_string(self, key: str, default: str = "") -> str:
        value = self._scalar(key)
        return default if value is None else value

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._scalar(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._scalar(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._scalar(key)
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
        return default

    def to_string_map(self) -> dict[str, str]:
        """Map of child keys to their string values."""
        result: dict[str, str] = {}
        for child in self.children():
            if not isinstance(child.value, str):
                raise ValueError(f"key '{child.key}' holds a section, not a string")
            result[child.key] = child.value
        return result

    def to_plain(self) -> Union[str, dict]:
        """Plain dict/str form; repeated keys are gathered into lists."""
        if isinstance(self.value, str):
            return self.value
        out: dict = {}
        for child in self.value:
            plain = child.to_plain()
            if child.key not in out:
                out[child.key] = plain
            elif isinstance(out[child.key], list):
                out[child.key].append(plain)
            else:
                out[child.key] = [out[child.key], plain]
        return out


def _unescape(text: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(0)), text)


def _lexemes(text: str) -> Iterator[Tuple[str, str, int]]:
    pos = 0
    while pos < len(text):
        match = _LEXEME.match(text, pos)
        if match is None:
            raise VdfSyntaxError(f"unterminated or invalid input at offset {pos}")
        start, pos = pos, match.end()
        kind = match.lastgroup
        if kind in ("space", "cond"):
            continue
        if kind == "quoted":
            yield "string", _unescape(match.group("quoted")), start
        elif kind == "bare":
            yield "string", match.group("bare"), start
        else:
            yield match.group("brace"), match.group("brace"), start


def parse_vdf(text: Union[str, bytes]) -> KeyValue:
    """Parse KeyValues text into an unnamed root node."""
    if isinstance(text, bytes):
        text = text.decode("utf-8-sig")
    text = text.lstrip("\ufeff")

    root = KeyValue("", [])
    stack = [root]
    pending_key: Optional[str] = None

    for kind, word, pos in _lexemes(text):
        current = stack[-1].value
        if kind == "{":
            if pending_key is None:
                raise VdfSyntaxError(f"section without a key at offset {pos}")
            section = KeyValue(pending_key, [])
            current.append(section)
            stack.append(section)
            pending_key = None
        elif kind == "}":
            if pending_key is not None:
                raise VdfSyntaxError(f"key '{pending_key}' has no value at offset {pos}")
            if len(stack) == 1:
                raise VdfSyntaxError(f"unbalanced '}}' at offset {pos}")
            stack.pop()
        elif pending_key is None:
            pending_key = word
        else:
            current.append(KeyValue(pending_key, word))
            pending_key = None

    if pending_key is not None:
        raise VdfSyntaxError(f"key '{pending_key}' has no value")
    if len(stack) > 1:
        raise VdfSyntaxError(f"section '{stack[-1].key}' is not closed")
    return root


def get_sub_key(root: Optional[KeyValue], path: str) -> Optional[KeyValue]:
    """Follow a dot-separated path of keys; None if any step is missing."""
    if root is None or not path:
        return None
    current: Optional[KeyValue] = root
    for part in path.split("."):
        current = current.find(part)
        if current is None:
            return None
    return current


def get_attribute_value(kv: KeyValue, key: str) -> str:
    """The 'value' of the named entry in kv's 'attributes' section."""
    attributes = kv.get("attributes")
    for attribute in attributes.children():
        if attribute.key == key:
            value = attribute.get("value")
            if not isinstance(value.value, str):
                raise ValueError(f"value of attribute '{key}' is not a string")
            return value.value
    log.warning("Key '%s' not found in attributes", key)
    return ""