"""
Persistent term dictionary with learn-on-miss lookup.
"""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DictionaryFile, is_placeholder, wrap_placeholder

logger = logging.getLogger("lotto-relay.terminology")

YAML_SUFFIXES = {".yaml", ".yml"}


class TermDictionary:
    """Maps trimmed source terms to their translations and learns unknown ones.

    Every lookup of a term that has no entry yet stores a placeholder
    (``<<<term>>>``) for it, so an operator can later fill in the real
    translation by editing the saved file. Until then the original term is
    used as-is in the output. Once a translation is supplied, the next run
    picks it up.

    Keys are always stored trimmed. Loading a file where two keys differ only
    by surrounding whitespace keeps the first one.

    Example:
        >>> names = TermDictionary({"Govisetha": "ගොවිසෙත"})
        >>> names.translate(" Govisetha ")
        'ගොවිසෙත'
        >>> names.translate("Mahajana Sampatha")
        'Mahajana Sampatha'
        >>> names.unresolved()
        ['Mahajana Sampatha']
    """

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = {}
        self._learned: list[str] = []
        for key, value in (entries or {}).items():
            self._entries.setdefault(key.strip(), value)

    @classmethod
    def load(cls, source: str | Path) -> "TermDictionary":
        """Load a dictionary file, falling back to an empty dictionary.

        JSON is used unless the file has a ``.yaml``/``.yml`` suffix. A missing,
        unreadable or malformed file never raises: the pipeline must keep
        working, it just starts without any known translations.

        Args:
            source: Path to the dictionary file

        Returns:
            Loaded dictionary, or an empty one on any failure
        """
        path = Path(source)
        if not path.exists():
            logger.debug(f"📂 No dictionary at {path}, starting empty")
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
            record = DictionaryFile.model_validate(data)
        except (
            OSError, UnicodeDecodeError, RecursionError, json.JSONDecodeError, yaml.YAMLError, ValidationError
        ) as e:
            logger.warning(f"⚠️ Could not read dictionary {path}, starting empty: {e}")
            return cls()

        dictionary = cls(record.map)
        logger.debug(f"📂 Loaded {len(dictionary)} terms from {path}")
        return dictionary

    def save(self, destination: str | Path) -> bool:
        """Write the dictionary to disk.

        Persistence is best-effort: a failed write is logged and reported
        through the return value, never raised.

        Args:
            destination: Path to write; the suffix selects JSON or YAML

        Returns:
            True if the file was written
        """
        path = Path(destination)
        record = DictionaryFile(map=self._entries)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if path.suffix.lower() in YAML_SUFFIXES:
                content = yaml.safe_dump(record.model_dump(), allow_unicode=True, sort_keys=False)
            else:
                content = json.dumps(record.model_dump(), indent=2, ensure_ascii=False)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.warning(f"⚠️ Could not save dictionary {path}: {e}")
            return False

        logger.debug(f"💾 Saved {len(self._entries)} terms to {path}")
        return True

    def learn(self, term: str, translation: str) -> bool:
        """Insert a translation only if the term has no entry yet.

        Args:
            term: Source term (trimmed before storing)
            translation: Value to store

        Returns:
            True if a new entry was added, False if the term was already known
        """
        key = term.strip()
        if key in self._entries:
            return False
        self._entries[key] = translation
        self._learned.append(key)
        return True

    def translate(self, term: str) -> str:
        """Translate a term, learning a placeholder for unknown ones.

        Args:
            term: Source term; surrounding whitespace is ignored

        Returns:
            The stored translation, or the trimmed term itself when no real
            translation exists yet
        """
        key = term.strip()
        translation = self._entries.get(key)
        if translation is None:
            self.learn(key, wrap_placeholder(key))
            logger.info(f"🆕 New term needs translation: {key!r}")
            return key
        if is_placeholder(translation):
            return key
        return translation

    def unresolved(self) -> list[str]:
        """Return every term whose stored value is still a placeholder."""
        return sorted(key for key, value in self._entries.items() if is_placeholder(value))

    @property
    def learned(self) -> list[str]:
        """Terms first seen during this dictionary's lifetime, in order."""
        return list(self._learned)

    @property
    def entries(self) -> dict[str, str]:
        """Copy of the term mapping."""
        return dict(self._entries)

    def get(self, term: str, default: str | None = None) -> str | None:
        return self._entries.get(term.strip(), default)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and term.strip() in self._entries

    def __len__(self) -> int:
        return len(self._entries)
