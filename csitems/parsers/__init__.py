"""Parsers that extract item categories from a loaded items_game tree."""