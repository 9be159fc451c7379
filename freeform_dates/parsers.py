from __future__ import annotations

import logging
from dataclasses import dataclass, field

from . import dateutils
from .types import ParsedDate, ParsePolicy

log = logging.getLogger(__name__)

TIME_CUES = ("at", "from")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


@dataclass
class ParseContext:
    looking_for_time: bool = False
    # Set by " -" after a month and day: what follows is the end of a range.
    start_of_date_range_completed: bool = False


@dataclass
class DateWord:
    """A run of digits or a run of letters."""

    text: str = ""
    numbers: bool = False
    letters: bool = False

    def __len__(self) -> int:
        return len(self.text)


@dataclass
class FreeformDateParser:
    """Turns user-typed date text into a ParsedDate.

    Never raises: tokens that fit nowhere set `funky_date` and parsing goes on.
    Holds no per-parse state; call `today.refresh()` on a long-lived instance
    to move its notion of "today" forward.
    """

    policy: ParsePolicy = field(default_factory=ParsePolicy)
    today: dateutils.Today = field(default_factory=dateutils.Today)

    def parse(self, value: str) -> ParsedDate:
        result = ParsedDate(original_value=value)
        ctx = ParseContext()
        word = DateWord()
        last_char = " "

        for c in value:
            if word.numbers and c == ":":
                ctx.looking_for_time = True
                result.time_values_included = True
                self._process_word(result, ctx, word)
                word = DateWord()
            elif _is_digit(c):
                # "2024" + "03" and, once a year is known, "03" + "03" split apart.
                if word.letters or (
                    word.numbers and (len(word) == 4 or (len(word) == 2 and len(result.year or "") == 4))
                ):
                    self._process_word(result, ctx, word)
                    word = DateWord()
                word.numbers = True
                word.text += c
            elif _is_alpha(c):
                if word.numbers:
                    self._process_word(result, ctx, word)
                    word = DateWord()
                word.letters = True
                word.text += c
            else:
                if word.text:
                    was_number = word.numbers
                    self._process_word(result, ctx, word)
                    word = DateWord()
                    if was_number and c == "," and result.day:
                        ctx.looking_for_time = True
                if (
                    c == "-"
                    and last_char == " "
                    and result.month
                    and result.day
                    and not ctx.looking_for_time
                ):
                    ctx.start_of_date_range_completed = True
            last_char = c

        if word.text:
            self._process_word(result, ctx, word)

        if not result.year and result.month:
            result.year = self._backfill_year(result.month_number)
        return result

    def _process_word(self, result: ParsedDate, ctx: ParseContext, word: DateWord) -> None:
        if word.letters:
            self._process_letters(result, ctx, word.text)
        elif word.numbers:
            self._process_numbers(result, ctx, word.text)

    def _process_letters(self, result: ParsedDate, ctx: ParseContext, text: str) -> None:
        low = text.lower()
        if low == "today":
            result.original_value = self.today.ymd
            self._set_today(result)
        elif low == "now":
            result.original_value = self.today.ymdhms
            self._set_today(result)
        elif low in TIME_CUES:
            ctx.looking_for_time = True
        elif low in ("am", "pm"):
            result.ampm = "am" if low == "am" else "pm"
            if result.time_end:
                result.time_end += " " + text
            elif result.time_start:
                result.time_start += " " + text
        elif result.month and result.day:
            # Don't overlay the first month if a range was supplied.
            log.debug("discarding %r: month and day already set", text)
        else:
            index = dateutils.match_month_name(text)
            if index is None:
                log.debug("funky date token %r in %r", text, result.original_value)
                result.funky_date = True
                return
            # "3 March": the number seen before the month name was the day.
            if result.month:
                result.day = result.month
            result.month = f"{index:02d}"
            result.is_alpha_month = True

    def _process_numbers(self, result: ParsedDate, ctx: ParseContext, text: str) -> None:
        number = int(text)
        if number > 1000:
            result.year = str(number)
        elif ctx.looking_for_time:
            if not result.time_start:
                result.time_start += text
            else:
                result.time_end += text
            if result.hour is None and number <= 24:
                result.hour = f"{number:02d}"
            elif result.minute is None and number <= 60:
                result.minute = f"{number:02d}"
            elif result.second is None and number <= 60:
                result.second = f"{number:02d}"
            else:
                log.debug("funky time value %r in %r", text, result.original_value)
                result.funky_date = True
        elif ctx.start_of_date_range_completed:
            # Only the start of a range is kept.
            log.debug("discarding range end value %r", text)
        elif result.month is None and 1 <= number <= 12:
            result.month = f"{number:02d}"
        elif result.day is None and 1 <= number <= 31:
            result.day = f"{number:02d}"
        elif result.year is None:
            if number > 1900:
                result.year = str(number)
            elif number > 9:
                result.year = "20" + str(number)
            else:
                result.year = "2000" + str(number)
        else:
            log.debug("funky date value %r in %r", text, result.original_value)
            result.funky_date = True

    def _set_today(self, result: ParsedDate) -> None:
        result.year = self.today.yyyy
        result.month = self.today.mm
        result.day = self.today.dd

    def _backfill_year(self, month: int | None) -> str:
        """Pick a year for a date typed without one."""
        start, end = self.policy.year_start, self.policy.year_end
        if end and month is not None and month < 7:
            chosen = end
        else:
            chosen = start or ""
        try:
            return str(int(chosen))
        except ValueError:
            return str(self.policy.default_year)


def parse(value: str, *, policy: ParsePolicy | None = None, today: dateutils.Today | None = None) -> ParsedDate:
    """Parse freeform date text; see FreeformDateParser."""
    parser = FreeformDateParser(
        policy=policy or ParsePolicy(),
        today=today or dateutils.Today(),
    )
    return parser.parse(value)
