"""CLI entry point.

This script fetches the helper list, applies filters and sorting, and prints
one page of helper cards. Optionally the whole filtered list is written to a
JSON file.

Examples:
    python run_search.py
    python run_search.py --search "cooking, english" --skill child_care --sort age-asc
    python run_search.py --nationality Filipino --salary 600-800 --page 2
    python run_search.py --height 150-160 --out helpers.json

The output file is a list of dicts (serialized Pydantic models).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from helper_engine.config import HTTP_TIMEOUT_S, SHEETBEST_URL
from helper_engine.controller import DirectoryController
from helper_engine.models import SearchCriteria, Skill
from helper_engine.render import render_page
from helper_engine.sources.sheetbest import SheetBestSource


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search the helper directory.")
    p.add_argument("--search", type=str, default="", help="Comma/space separated terms; all must match.")
    p.add_argument("--nationality", type=str, default=None, help="Exact nationality (case-insensitive).")
    p.add_argument("--experience", type=str, default=None, help="Exact experience value (case-insensitive).")
    p.add_argument("--religion", type=str, default=None, help="Exact religion (case-insensitive).")
    p.add_argument("--height", type=str, default=None, help="Height range in cm, e.g. 150-160.")
    p.add_argument("--weight", type=str, default=None, help="Weight range in kg, e.g. 45-55.")
    p.add_argument("--salary", type=str, default=None, help="Salary range, e.g. 600-800.")
    p.add_argument(
        "--skill",
        action="append",
        default=[],
        choices=[s.value for s in Skill],
        help="Required skill; repeat for several.",
    )
    p.add_argument("--sort", type=str, default="", help="name|height|weight|age followed by -asc or -desc.")
    p.add_argument("--page", type=int, default=1, help="Page number to print.")
    p.add_argument("--url", type=str, default=SHEETBEST_URL, help="SheetBest endpoint.")
    p.add_argument("--timeout", type=float, default=HTTP_TIMEOUT_S, help="HTTP timeout in seconds.")
    p.add_argument("--out", type=str, default=None, help="Optional JSON file for the full filtered list.")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        criteria = SearchCriteria(
            search=args.search,
            nationality=args.nationality,
            experience=args.experience,
            religion=args.religion,
            height=args.height,
            weight=args.weight,
            salary=args.salary,
            skills=args.skill,
            sort=args.sort,
        )
    except ValueError as exc:
        print(f"Invalid criteria: {exc}", file=sys.stderr)
        return 2

    controller = DirectoryController(SheetBestSource(url=args.url, timeout_s=args.timeout))
    result = controller.load()
    if result.error:
        print(render_page(result))
        return 1

    if criteria.skills:
        print("Required skills: " + ", ".join(s.label for s in criteria.skills))
    controller.apply_filters(criteria)
    result = controller.go_to_page(args.page)
    print(render_page(result))

    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        data = [h.model_dump(mode="json", exclude={"raw"}) for h in controller.filtered]
        out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Wrote {len(data)} helpers to: {out_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
