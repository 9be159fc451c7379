"""Mini-template formatter for partial or complete parsed dates.

Pattern letters follow the usual date-format conventions:

    d / dd          day, unpadded / padded
    M / MM          month, unpadded / padded
    MMM / MMMM      short / full month name
    y / yy          2-digit year
    yyy / yyyy      4-digit year

A run of one repeated letter is one token. Punctuation and digits are copied
through, whitespace collapses to a single space, and other letters are dropped.
When a part is missing it is left out, unless the token touches punctuation
(e.g. "MM/dd"), in which case a placeholder is written so the shape survives.
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from . import dateutils

if TYPE_CHECKING:
    from .types import ParsedDate

# Placeholders for a missing month, by token length.
_MISSING_MONTH = {1: "6", 2: "06", 3: "Jun"}


def _is_punct_or_number(c: str) -> bool:
    return unicodedata.category(c)[0] in ("P", "N")


class _TemplateScanner:
    def __init__(self, parsed: ParsedDate) -> None:
        self.parsed = parsed
        self.out: list[str] = []
        self.word = ""
        self.start_char = " "
        self.end_char = " "

    def run(self, pattern: str) -> str:
        for c in pattern:
            if _is_punct_or_number(c):
                self.flush(c)
                self.out.append(c)
            elif c.isspace():
                self.flush(c)
                if self.out:
                    self.out.append(" ")
            elif not self.word or c == self.word[0]:
                self.word += c
            else:
                self.flush(c)
                self.word = c
        self.flush(" ")
        return "".join(self.out)

    def flush(self, term_char: str) -> None:
        self.start_char, self.end_char = self.end_char, term_char
        if not self.word:
            return
        strict = not (self.start_char.isspace() and self.end_char.isspace())
        token, self.word = self.word, ""
        kind = token[0]
        text = ""
        if kind == "d":
            text = self._day(token, strict)
        elif kind == "M":
            text = self._month(token, strict)
        elif kind == "y":
            text = (self.parsed.year or "") if len(token) > 2 else self.parsed.yy
        if text:
            self.out.append(text)

    def _day(self, token: str, strict: bool) -> str:
        p = self.parsed
        if not p.day or p.day == "00":
            if not strict:
                return ""
            return "1" if token == "d" else "01"
        return p.d if token == "d" else p.day

    def _month(self, token: str, strict: bool) -> str:
        p = self.parsed
        n = len(token)
        if not p.month or p.month == "00":
            if not strict:
                return ""
            return _MISSING_MONTH.get(n, "June")
        if n == 1:
            return p.m
        if n == 2:
            return p.month
        if n == 3:
            return dateutils.short_month_name(p.month)
        return dateutils.month_name(p.month_number or 0)


def format_date(parsed: ParsedDate, pattern: str) -> str:
    return _TemplateScanner(parsed).run(pattern)
