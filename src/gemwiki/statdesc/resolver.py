"""Resolve stat observations into rendered description strings.

Usage::

    from gemwiki.statdesc import resolve_all

    lines = resolve_all(observations, skip_already_resolved=True, grammar_text=text)
    stat_text = "<br>".join(lines)

    # Or parse once and resolve several observation lists:
    resolver = StatDescriptionResolver(text)
    per_level = [resolver.resolve(level_stats) for level_stats in levels]
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from gemwiki.ir.stats import DescriptionBlock, StatObservation

from .grouping import group_stats
from .matcher import match_block, resolve_block_values
from .parser import parse_stat_descriptions
from .renderer import render_step

logger = logging.getLogger(__name__)


class StatDescriptionResolver:
    """Matches and renders observations against one parsed grammar.

    The resolver holds only the parsed blocks; every :meth:`resolve` call
    builds its own grouping and consumed-id set, so calls do not influence
    each other.
    """

    def __init__(
        self,
        grammar_text: str = "",
        blocks: Sequence[DescriptionBlock] | None = None,
    ) -> None:
        if blocks is None:
            blocks = parse_stat_descriptions(grammar_text)
        self.blocks: tuple[DescriptionBlock, ...] = tuple(blocks)

    def resolve(
        self,
        observations: Iterable[StatObservation],
        skip_already_resolved: bool = True,
    ) -> list[str]:
        """Render all observations, grouped by id in first-seen order.

        Each id contributes the descriptions of all its progression steps
        contiguously.  With *skip_already_resolved*, an id that was already
        rendered as part of an earlier multi-id block produces nothing.

        Unknown ids are logged and skipped; an empty observation list yields
        an empty result.
        """
        observations = list(observations)
        if not observations:
            logger.warning("No stats to resolve")
            return []

        grouped = group_stats(observations)
        consumed: set[str] = set()
        rendered: list[str] = []

        for stat_id, values in grouped.items():
            if skip_already_resolved and stat_id in consumed:
                logger.debug("Stat %s already rendered by an earlier block", stat_id)
                continue

            block = match_block(self.blocks, stat_id)
            if block is None:
                logger.warning("No matching description block for stat %s", stat_id)
                continue

            match = resolve_block_values(block, grouped)
            consumed |= match.resolved_ids

            for step, driving_value in enumerate(values):
                rendered.extend(render_step(block, match.values, step, driving_value))

        return rendered


def resolve_all(
    observations: Iterable[StatObservation],
    skip_already_resolved: bool = True,
    grammar_text: str = "",
) -> list[str]:
    """Parse *grammar_text* and render *observations* against it.

    Nothing is cached between calls.
    """
    resolver = StatDescriptionResolver(grammar_text)
    return resolver.resolve(observations, skip_already_resolved)
