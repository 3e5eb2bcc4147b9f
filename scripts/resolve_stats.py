#!/usr/bin/env python3
"""Render stat observations against a stat description file.

Usage:
    uv run python scripts/resolve_stats.py stat_descriptions.txt stats.json
    uv run python scripts/resolve_stats.py stat_descriptions.txt stats.json --no-skip

``stats.json`` is a list of ``{"id": ..., "value": ...}`` objects, one per
progression step.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from gemwiki.config import load_settings
from gemwiki.ir.stats import StatObservation
from gemwiki.statdesc import resolve_all


def main() -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Render stats against a stat description file.")
    parser.add_argument("grammar", type=Path, help="Path to the stat description text file")
    parser.add_argument("stats", type=Path, help="Path to a JSON list of {id, value} objects")
    parser.add_argument("--no-skip", action="store_true", default=False, help="Render multi-stat blocks per id")
    parser.add_argument("--separator", type=str, default=settings.separator, help="Joins the rendered lines")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    grammar_text = args.grammar.read_text(encoding="utf-8")
    raw = json.loads(args.stats.read_text(encoding="utf-8"))
    observations = [StatObservation.model_validate(item) for item in raw]

    lines = resolve_all(observations, skip_already_resolved=not args.no_skip, grammar_text=grammar_text)
    print(args.separator.join(lines))


if __name__ == "__main__":
    main()
