"""
lotto-relay - translate pasted lottery results and post them to Discord.
"""

from .formatter import EntryFormatter, classify_line, format_results
from .pipeline import PipelineResult, TranslationPipeline
from .terminology import TermDictionary

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("lotto-relay")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "EntryFormatter",
    "PipelineResult",
    "TermDictionary",
    "TranslationPipeline",
    "classify_line",
    "format_results",
]
