"""
Text substitution passes applied to raw lottery results before formatting.
"""

from .names import NAME_PREFIX_PATTERN, NameTranslationPass
from .parenthetical import PARENTHETICAL_PATTERN, TERM_CHARS, ParentheticalTranslationPass
from .static import LAKHS, LAKHS_SINHALA, StaticTokenPass

__all__ = [
    "NAME_PREFIX_PATTERN",
    "NameTranslationPass",
    "PARENTHETICAL_PATTERN",
    "TERM_CHARS",
    "ParentheticalTranslationPass",
    "LAKHS",
    "LAKHS_SINHALA",
    "StaticTokenPass",
]
