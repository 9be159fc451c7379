#!/usr/bin/env python3
"""Parse freeform date text and print its renderings.

Usage:
  python3 scripts/parse_date.py March 3, 2024 at 2:30 pm
  python3 scripts/parse_date.py "3 3 24" --format "d MMMM yyyy"
  cat dates.txt | python3 scripts/parse_date.py --json

With no text arguments, each non-empty stdin line is parsed.

Env:
  FREEFORM_DEFAULT_YEAR, FREEFORM_YEAR_START, FREEFORM_YEAR_END (or put them in .env)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from freeform_dates import FreeformDateParser, ParsedDate, ParsePolicy  # noqa: E402


def describe(p: ParsedDate, fmt: str | None) -> dict:
    out = {
        "input": p.original_value,
        "ymd": p.ymd_date,
        "dmy": p.dmy_date,
        "dmyw": p.dmyw_date,
        "normalized": p.normalized_date,
        "time": p.time,
        "full_date": p.is_full_date,
        "funky": p.funky_date,
    }
    if fmt:
        out["formatted"] = p.format(fmt)
    return out


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("text", nargs="*", help="Date text (joined with spaces). Omit to read stdin lines.")
    ap.add_argument("--format", dest="fmt", default=None, help='Template such as "dd MMM yyyy".')
    ap.add_argument("--json", action="store_true", help="Print one JSON object per input.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log discarded/funky tokens.")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.text:
        inputs = [" ".join(args.text)]
    else:
        inputs = [ln.strip() for ln in sys.stdin if ln.strip()]
    if not inputs:
        raise SystemExit("No input")

    parser = FreeformDateParser(policy=ParsePolicy.from_env())
    for raw in inputs:
        info = describe(parser.parse(raw), args.fmt)
        if args.json:
            print(json.dumps(info, ensure_ascii=False))
            continue
        flag = "" if info["full_date"] and not info["funky"] else "  (check)"
        print(f"{raw!r} -> {info['normalized'] or '-'}{flag}")
        print(f"  dmy:  {info['dmyw']}")
        if args.fmt:
            print(f"  fmt:  {info['formatted']}")


if __name__ == "__main__":
    main()
