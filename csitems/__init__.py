"""Parse Counter-Strike items_game.txt into item records and JSON exports."""

__version__ = "0.1.0"