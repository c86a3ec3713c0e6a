"""
Readers for card and ability data files.
"""

from .file_reader import FileReader, load_abilities, load_cards

__all__ = ["FileReader", "load_cards", "load_abilities"]
