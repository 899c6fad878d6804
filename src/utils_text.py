import re

_ws = re.compile(r"\s+")

QUOTE_CHARS = "\"“”"


def join_lines(lines) -> str:
    return " ".join(lines).strip()


def strip_quotes(s: str) -> str:
    # one glyph at each end at most
    s = s or ""
    if s and s[0] in QUOTE_CHARS:
        s = s[1:]
    if s and s[-1] in QUOTE_CHARS:
        s = s[:-1]
    return s


def preview(s: str, width: int = 100) -> str:
    s = _ws.sub(" ", s or "")
    return s[:width] + "..."
