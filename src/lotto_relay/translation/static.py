"""
Fixed word substitution that needs no dictionary.
"""

import re

LAKHS = "lakhs"
LAKHS_SINHALA = "ලක්ෂ"


class StaticTokenPass:
    """Replaces one whole word with a fixed localized equivalent.

    Matching uses word boundaries, so the token is never replaced inside a
    longer word ("lakhsx" stays as it is).
    """

    def __init__(self, token: str = LAKHS, replacement: str = LAKHS_SINHALA) -> None:
        self.token = token
        self.replacement = replacement
        self._pattern = re.compile(rf"\b{re.escape(token)}\b")

    def apply(self, text: str) -> str:
        return self._pattern.sub(lambda _: self.replacement, text)
