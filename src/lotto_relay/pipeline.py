"""
End-to-end translation of a pasted results block into a formatted message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .formatter import EntryFormatter
from .terminology import TermDictionary
from .translation import LAKHS, LAKHS_SINHALA, NameTranslationPass, ParentheticalTranslationPass, StaticTokenPass

logger = logging.getLogger("lotto-relay.pipeline")

NAMES_FILE = "dictionary.json"
TERMS_FILE = "paren_dictionary.json"


@dataclass
class PipelineResult:
    """Output of one pipeline run.

    Attributes:
        message: Formatted message ready to post
        unresolved_names: Lottery names still waiting for a translation
        unresolved_terms: Parenthetical terms still waiting for a translation
    """
    message: str
    unresolved_names: list[str] = field(default_factory=list)
    unresolved_terms: list[str] = field(default_factory=list)

    @property
    def has_unresolved(self) -> bool:
        return bool(self.unresolved_names or self.unresolved_terms)


class TranslationPipeline:
    """Runs the substitution passes and the entry formatter in order.

    raw text -> lottery names -> "lakhs" -> parenthetical terms -> formatting

    Both dictionaries learn unknown terms while the passes run. Nothing is
    written until ``save()`` is called, so a failed run leaves the files on
    disk untouched.

    Usage:
        pipeline = TranslationPipeline.from_directory(Path("data"))
        result = pipeline.run(raw_text)
        pipeline.save()
    """

    def __init__(
        self,
        names: TermDictionary | None = None,
        terms: TermDictionary | None = None,
        formatter: EntryFormatter | None = None,
        names_path: Path | None = None,
        terms_path: Path | None = None,
        lakhs_replacement: str = LAKHS_SINHALA,
    ) -> None:
        self.names = names if names is not None else TermDictionary()
        self.terms = terms if terms is not None else TermDictionary()
        self.formatter = formatter or EntryFormatter()
        self.names_path = names_path
        self.terms_path = terms_path

        self.name_pass = NameTranslationPass(self.names)
        self.static_pass = StaticTokenPass(LAKHS, lakhs_replacement)
        self.parenthetical_pass = ParentheticalTranslationPass(self.terms)

    @classmethod
    def from_directory(cls, data_dir: str | Path, formatter: EntryFormatter | None = None) -> "TranslationPipeline":
        """Build a pipeline from the dictionary files in a data directory."""
        data_dir = Path(data_dir)
        names_path = data_dir / NAMES_FILE
        terms_path = data_dir / TERMS_FILE
        logger.debug(f"📂 Loading dictionaries from {data_dir.resolve()}")
        return cls(
            names=TermDictionary.load(names_path),
            terms=TermDictionary.load(terms_path),
            formatter=formatter,
            names_path=names_path,
            terms_path=terms_path,
        )

    def translate(self, raw: str) -> str:
        """Apply the substitution passes without formatting."""
        text = self.name_pass.apply(raw)
        text = self.static_pass.apply(text)
        return self.parenthetical_pass.apply(text)

    def run(self, raw: str) -> PipelineResult:
        """Translate and format a raw results block."""
        translated = self.translate(raw)
        message = self.formatter.format(translated)

        result = PipelineResult(
            message=message,
            unresolved_names=self.names.unresolved(),
            unresolved_terms=self.terms.unresolved(),
        )
        logger.debug(
            f"✅ Formatted {len(message)} chars "
            f"({len(self.names.learned)} new names, {len(self.terms.learned)} new terms)"
        )
        return result

    def save(self) -> bool:
        """Persist both dictionaries. Returns False if either write failed."""
        saved = True
        for dictionary, path in ((self.names, self.names_path), (self.terms, self.terms_path)):
            if path is None:
                continue
            saved = dictionary.save(path) and saved
        return saved
