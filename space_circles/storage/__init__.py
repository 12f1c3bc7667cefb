from .store import HighscoreStore, MemoryStore, FileStore, parse_decimal

__all__ = ["HighscoreStore", "MemoryStore", "FileStore", "parse_decimal"]
