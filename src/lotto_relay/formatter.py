"""
Grouping of translated result lines into Discord-ready entries.

Each input line is first classified into one of three kinds, in priority
order:

1. ``DateHeader``: the line contains a ``YYYY-MM-DD`` date.
2. ``NamedEntry``: the line starts with a name, an optional draw number and
   a ``:`` or ``-`` separator.
3. ``Plain``: anything else.

A two-state machine (idle / accumulating) then turns the classified lines
into output. Plain lines continue the entry being built, or stand alone when
there is none. Running the formatter on its own output is not idempotent.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Union

from .translation.parenthetical import PARENTHETICAL_PATTERN

logger = logging.getLogger("lotto-relay.formatter")

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
NAMED_ENTRY_PATTERN = re.compile(r"^(.+?)(\s*\d*)?[:\-]\s*(.*)$")

CURRENCY_PREFIX = "Rs."
LONE_SEPARATOR = "-"
CALENDAR_MARKER = "📅"


@dataclass(frozen=True)
class DateHeader:
    """A line carrying a draw date, rendered as a section break."""
    text: str


@dataclass(frozen=True)
class NamedEntry:
    """A line that opens a new lottery entry.

    Attributes:
        name: Lottery name (already translated)
        qualifier: Draw number, empty when the line has none
        rest: Everything after the separator
    """
    name: str
    qualifier: str
    rest: str

    @property
    def label(self) -> str:
        if self.qualifier:
            return f"{self.name} {self.qualifier}"
        return self.name


@dataclass(frozen=True)
class Plain:
    """A line that is neither a header nor the start of an entry."""
    text: str


LineKind = Union[DateHeader, NamedEntry, Plain]


class EntryState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


@dataclass
class FormattedEntry:
    """An entry being built: its label and the body accumulated so far."""
    label: str
    body: str

    def extend(self, line: str) -> None:
        self.body = f"{self.body} {line}"


def bold_parentheticals(text: str) -> str:
    """Wrap single-word parenthetical terms in bold, keeping the parentheses.

    >>> bold_parentheticals("500000 (agro) ලක්ෂ")
    '500000 (**agro**) ලක්ෂ'
    """
    return PARENTHETICAL_PATTERN.sub(r"(**\1**)", text)


def filter_lines(text: str) -> Iterator[str]:
    """Yield the trimmed lines worth formatting.

    Drops currency lines (starting with ``Rs.``), lone ``-`` separators and
    empty lines.
    """
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(CURRENCY_PREFIX) or line == LONE_SEPARATOR:
            continue
        yield line


def classify_line(line: str) -> LineKind:
    """Classify one trimmed line. Dates win over names, names over plain text."""
    if DATE_PATTERN.search(line):
        return DateHeader(line)

    match = NAMED_ENTRY_PATTERN.match(line)
    if match:
        return NamedEntry(
            name=match.group(1).strip(),
            qualifier=(match.group(2) or "").strip(),
            rest=match.group(3).strip(),
        )

    return Plain(line)


class EntryFormatter:
    """Formats translated lottery results into grouped, Markdown-styled entries.

    Output shape for a header followed by one entry with a continuation line:

        (blank)
        📅 **Jayamalla 2025-09-10**
        (blank)
        **ගොවිසෙත 4012**: 08 12 (**agro**) ලක්ෂ 44 61
        (blank)

    Args:
        emphasize_headers: Also bold parenthetical terms in date headers
        emphasize_continuations: Also bold parenthetical terms in lines
            appended to an entry or emitted on their own
    """

    def __init__(self, emphasize_headers: bool = False, emphasize_continuations: bool = False) -> None:
        self.emphasize_headers = emphasize_headers
        self.emphasize_continuations = emphasize_continuations
        self._output: list[str] = []
        self._current: FormattedEntry | None = None

    @property
    def state(self) -> EntryState:
        if self._current is None:
            return EntryState.IDLE
        return EntryState.ACCUMULATING

    def _flush(self) -> None:
        if self._current is not None:
            logger.debug(f"Entry complete: {self._current.label!r}")
            self._output.append(f"{self._current.body}\n\n")
            self._current = None

    def _on_header(self, line: DateHeader) -> None:
        self._flush()
        text = bold_parentheticals(line.text) if self.emphasize_headers else line.text
        self._output.append(f"\n{CALENDAR_MARKER} **{text}**\n\n")

    def _on_named(self, line: NamedEntry) -> None:
        self._flush()
        rest = bold_parentheticals(line.rest)
        self._current = FormattedEntry(label=line.label, body=f"**{line.label}**: {rest}")

    def _on_plain(self, line: Plain) -> None:
        text = bold_parentheticals(line.text) if self.emphasize_continuations else line.text
        if self._current is not None:
            self._current.extend(text)
        else:
            logger.debug(f"Line without a preceding entry: {line.text!r}")
            self._output.append(f"{text}\n\n")

    def feed(self, lines: Iterable[LineKind]) -> None:
        """Advance the state machine over already-classified lines."""
        for line in lines:
            if isinstance(line, DateHeader):
                self._on_header(line)
            elif isinstance(line, NamedEntry):
                self._on_named(line)
            else:
                self._on_plain(line)

    def finish(self) -> str:
        """Flush the last entry and return the accumulated output."""
        self._flush()
        output = "".join(self._output)
        self._output = []
        return output

    def format(self, text: str) -> str:
        """Format a block of translated text."""
        self._output = []
        self._current = None
        self.feed(classify_line(line) for line in filter_lines(text))
        return self.finish()


def format_results(text: str) -> str:
    """Format text with the default formatter settings."""
    return EntryFormatter().format(text)
