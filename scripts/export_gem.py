#!/usr/bin/env python3
"""Export the wiki parameters of one active skill gem.

Usage:
    uv run python scripts/export_gem.py data/tables.json fireball data/stat_descriptions.txt
    uv run python scripts/export_gem.py data/tables.json fireball data/stat_descriptions.txt \\
        --schema data/schema.min.json -o output/fireball.txt

``tables.json`` holds ``{"game_version": ..., "tables": {TableName: [rows]}}``
as written by the dat exporter.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from gemwiki.config import load_settings
from gemwiki.exporters import (
    REQUIRED_TABLES,
    SkillNotFoundError,
    export_skill,
    find_active_skill,
    render_skill_parameters,
)
from gemwiki.ir.dataset import Dataset
from gemwiki.schema import SchemaFile, missing_tables

logger = logging.getLogger("export_gem")


def main() -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Export wiki parameters for a skill gem.")
    parser.add_argument("dataset", type=Path, help="Path to the exported tables JSON")
    parser.add_argument("skill_id", type=str, help="ActiveSkills Id of the skill")
    parser.add_argument("grammar", type=Path, help="Path to the stat description text file")
    parser.add_argument("--schema", type=Path, default=None, help="Dat schema JSON to check tables against")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    dataset = Dataset.model_validate(json.loads(args.dataset.read_text(encoding="utf-8")))

    if args.schema is not None:
        schema = SchemaFile.model_validate(json.loads(args.schema.read_text(encoding="utf-8")))
        for name in missing_tables(schema, REQUIRED_TABLES, dataset.game_version):
            logger.warning("Schema has no table %s for version %s", name, dataset.game_version)

    skill_row = find_active_skill(dataset, args.skill_id)
    if skill_row is None:
        print(f"Unknown skill: {args.skill_id}", file=sys.stderr)
        sys.exit(1)

    grammar_text = args.grammar.read_text(encoding="utf-8")
    try:
        skill = export_skill(dataset, skill_row, grammar_text, settings)
    except SkillNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    parameters = render_skill_parameters(skill, settings)
    if args.output is None:
        print(parameters)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(parameters, encoding="utf-8")
        print(f"Wrote {skill.name} parameters to {args.output}")


if __name__ == "__main__":
    main()
