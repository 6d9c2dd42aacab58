"""
Lottery-name substitution at the start of result lines.
"""

import re

from ..terminology import TermDictionary

# name, optional draw number, then ":" or "-"
NAME_PREFIX_PATTERN = re.compile(r"^([A-Za-z .]+?)(?:\s+\d+)?\s*([-:])", re.MULTILINE)


class NameTranslationPass:
    """Replaces the leading lottery name of each line with its translation.

    Only the prefix matched by ``NAME_PREFIX_PATTERN`` is rewritten, and only
    the first occurrence of the name inside it, so the draw number, the
    separator and the rest of the line are left exactly as they were.

    Example:
        >>> names = TermDictionary({"Govisetha": "ගොවිසෙත"})
        >>> NameTranslationPass(names).apply("Govisetha 4012: 08 12 Govisetha")
        'ගොවිසෙත 4012: 08 12 Govisetha'
    """

    def __init__(self, dictionary: TermDictionary) -> None:
        self.dictionary = dictionary

    def _replace(self, match: re.Match) -> str:
        name = match.group(1)
        translated = self.dictionary.translate(name)
        return match.group(0).replace(name, translated, 1)

    def apply(self, text: str) -> str:
        return NAME_PREFIX_PATTERN.sub(self._replace, text)
