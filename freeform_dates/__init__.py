"""Freeform date parsing for note-taking apps.

Users type dates however they like ("March 3, 2024 at 2:30 pm", "3/3/24",
"today"). The parser makes a best-effort reading and never rejects input;
callers check `is_full_date` / `funky_date` when they need to be strict.
"""

from .dateutils import Today
from .parsers import FreeformDateParser, parse
from .simple import SimpleDate
from .types import ParsedDate, ParsePolicy
