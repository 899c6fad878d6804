"""Line scanner for the plain-text edition of *The Daily Stoic*.

Each day of the book is laid out as::

    January 1st On Choice

    "The chief task in life is simply this ..." —Epictetus, Discourses, 2.5.4-5

    Commentary, one or more paragraphs.

The scanner looks for the header line, then for the quote block ending with an
em-dash attribution within ``LOOKAHEAD_LINES`` lines, then collects everything
up to the next header as context.  Entries missing any of the three parts are
dropped without complaint.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
import re
from pathlib import Path
from typing import Sequence

from utils_text import join_lines, strip_quotes

LOG = logging.getLogger(__name__)

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

#: ``<Month> <Number><st|nd|rd|th> <Title>``; the suffix is not checked against the number
HEADER_RE = re.compile(r"^(" + "|".join(MONTHS) + r")\s+([0-9]+)(?:st|nd|rd|th)\s+(.+)$")

#: Em-dash between the quoted passage and its attribution
SEPARATOR = "—"

#: Lines after a header searched for the separator, blank lines included
LOOKAHEAD_LINES = 9


@dataclass(slots=True, frozen=True)
class Meditation:
    """One dated entry of the book."""

    month: str
    day: int
    title: str
    quote: str
    reference: str
    context: str
    date_key: str

    def as_row(self) -> dict:
        return asdict(self)


def match_header(line: str) -> tuple[str, str, str] | None:
    """Return ``(month, day_digits, title)`` when ``line`` opens a new entry."""

    m = HEADER_RE.match(line.strip())
    if not m:
        return None
    return m.group(1), m.group(2), m.group(3)


def is_header(line: str) -> bool:
    return match_header(line) is not None


def make_date_key(month: str, day_text: str) -> str:
    return f"{month.lower()}-{day_text.zfill(2)}"


def split_reference(quote_lines: Sequence[str]) -> tuple[str, str]:
    """Split the quote block on its last em-dash.

    Returns ``("", "")`` when the block starts with the separator, so the entry
    is later dropped for lack of a quote.
    """

    full = join_lines(quote_lines)
    idx = full.rfind(SEPARATOR)
    if idx <= 0:
        return "", ""
    quote = strip_quotes(full[:idx].strip()).strip()
    reference = full[idx + len(SEPARATOR):].strip()
    return quote, reference


def parse_lines(lines: Sequence[str]) -> list[Meditation]:
    meditations: list[Meditation] = []
    headers = 0
    n = len(lines)
    i = 0
    while i < n:
        header = match_header(lines[i])
        if header is None:
            i += 1
            continue
        headers += 1
        month, day_text, title = header

        # quote block: bounded window, ends on the separator line
        quote_lines: list[str] = []
        found = False
        j = i + 1
        while j < n and j <= i + LOOKAHEAD_LINES:
            line = lines[j].strip()
            j += 1
            if not line:
                continue
            quote_lines.append(line)
            if SEPARATOR in line:
                found = True
                break

        if not found:
            # resume right after the header; a header inside the window is still seen
            i += 1
            continue

        quote, reference = split_reference(quote_lines)

        context_lines: list[str] = []
        while j < n:
            line = lines[j].strip()
            if not line:
                j += 1
                continue
            if HEADER_RE.match(line):
                break
            context_lines.append(line)
            j += 1
        context = join_lines(context_lines)

        if quote and reference and context:
            meditations.append(
                Meditation(
                    month=month,
                    day=int(day_text),
                    title=title,
                    quote=quote,
                    reference=reference,
                    context=context,
                    date_key=make_date_key(month, day_text),
                )
            )
        i = j

    LOG.debug("%d headers found, %d meditations kept", headers, len(meditations))
    return meditations


def parse_book(text: str) -> list[Meditation]:
    # lines are stripped one by one, so a trailing "\r" goes with the whitespace
    return parse_lines(text.split("\n"))


def read_book(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")
