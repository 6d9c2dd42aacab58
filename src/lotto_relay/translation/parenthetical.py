"""
Translation of single-word terms written in parentheses.
"""

import re

from ..terminology import TermDictionary

# \w alone misses the vowel signs of Indic scripts (Unicode category M)
TERM_CHARS = r"\w\u0900-\u0DFF"
PARENTHETICAL_PATTERN = re.compile(rf"\(([{TERM_CHARS}]+)\)")


class ParentheticalTranslationPass:
    """Translates every ``(word)`` in the text, keeping the parentheses.

    Uses its own dictionary, separate from the lottery-name one, because the
    bracketed words (weekdays, prize tiers, ...) are a different vocabulary.

    Example:
        >>> terms = TermDictionary({"Wednesday": "බදාදා"})
        >>> ParentheticalTranslationPass(terms).apply("2025-09-10 (Wednesday) (agro)")
        '2025-09-10 (බදාදා) (agro)'
    """

    def __init__(self, dictionary: TermDictionary) -> None:
        self.dictionary = dictionary

    def _replace(self, match: re.Match) -> str:
        return f"({self.dictionary.translate(match.group(1))})"

    def apply(self, text: str) -> str:
        return PARENTHETICAL_PATTERN.sub(self._replace, text)
