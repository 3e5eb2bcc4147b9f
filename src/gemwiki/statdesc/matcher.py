"""Find the description block for a stat and align its values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from gemwiki.ir.stats import DescriptionBlock, GroupedStats

MISSING_STAT_VALUES: tuple[float, ...] = (0,)
"""Value sequence used for block ids that were not observed."""


@dataclass
class BlockMatch:
    """A matched block together with one value sequence per block id.

    ``values[i]`` belongs to ``block.stat_ids[i]`` and fills ``{i}``.
    ``resolved_ids`` are the block ids that had observed values; in skip mode
    the resolver treats them as consumed.
    """

    block: DescriptionBlock
    values: list[list[float]] = field(default_factory=list)
    resolved_ids: frozenset[str] = frozenset()


def match_block(
    blocks: Sequence[DescriptionBlock], stat_id: str
) -> DescriptionBlock | None:
    """Return the first block (in parse order) that references *stat_id*.

    Blocks without templates never match.  ``None`` is an expected outcome:
    not every stat has authored text.
    """
    for block in blocks:
        if block.templates and block.references(stat_id):
            return block
    return None


def resolve_block_values(block: DescriptionBlock, grouped: GroupedStats) -> BlockMatch:
    """Align every id referenced by *block* with its observed values.

    Ids that were not observed get ``[0]`` so each placeholder still renders.
    """
    values: list[list[float]] = []
    resolved: set[str] = set()
    for stat_id in block.stat_ids:
        observed = grouped.get(stat_id)
        if observed:
            values.append(list(observed))
            resolved.add(stat_id)
        else:
            values.append(list(MISSING_STAT_VALUES))
    return BlockMatch(block=block, values=values, resolved_ids=frozenset(resolved))
