"""Stat description grammar -> :class:`DescriptionBlock` list.

The grammar is line based::

    description
        2 attack_minimum_added_fire_damage attack_maximum_added_fire_damage
        1
            # # "Adds {0} to {1} [Fire] Damage"

A ``description`` marker opens a block.  The first line after it lists the
stat ids, the first all-digit line after that holds the number of template
lines, and every other line up to the next marker is a template.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from gemwiki.ir.stats import DescriptionBlock

BLOCK_MARKER = "description"

_COUNT_LINE = re.compile(r"^\d+$")


@dataclass
class _OpenBlock:
    """Mutable accumulator for the block currently being read."""

    id_line: str | None = None
    value_count: int | None = None
    templates: list[str] = field(default_factory=list)

    def freeze(self) -> DescriptionBlock:
        return DescriptionBlock(
            id_line=self.id_line or "",
            value_count=self.value_count,
            templates=tuple(self.templates),
        )


def _is_marker(line: str) -> bool:
    return line.split(maxsplit=1)[0] == BLOCK_MARKER


def parse_stat_descriptions(raw_text: str) -> list[DescriptionBlock]:
    """Parse raw stat description text into blocks, in file order.

    Never raises on malformed input: lines before the first marker are
    ignored, and a block missing its ids or templates is still returned (it
    simply never matches or renders).
    """
    lines = [line.strip() for line in raw_text.splitlines()]
    lines = [line for line in lines if line]

    blocks: list[DescriptionBlock] = []
    current: _OpenBlock | None = None

    for line in lines:
        if _is_marker(line):
            if current is not None:
                blocks.append(current.freeze())
            current = _OpenBlock()
            continue

        if current is None:
            continue

        if current.id_line is None:
            current.id_line = line
        elif current.value_count is None and _COUNT_LINE.match(line):
            current.value_count = int(line)
        else:
            current.templates.append(line)

    if current is not None:
        blocks.append(current.freeze())

    return blocks
