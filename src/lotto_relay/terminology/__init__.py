"""
Learned term dictionaries for lottery names and parenthetical keywords.

Unknown terms are stored with a ``<<<term>>>`` placeholder so an operator can
supply the translation later.
"""

from .dictionary import TermDictionary
from .models import DictionaryFile, is_placeholder, wrap_placeholder

__all__ = ["TermDictionary", "DictionaryFile", "is_placeholder", "wrap_placeholder"]
