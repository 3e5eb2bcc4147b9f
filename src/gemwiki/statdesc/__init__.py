"""Stat description resolution: parse the description grammar, match stats, render text."""

from .grouping import group_stats
from .matcher import BlockMatch, match_block, resolve_block_values
from .parser import parse_stat_descriptions
from .renderer import collapse_candidates, render_candidates, render_step, render_template
from .resolver import StatDescriptionResolver, resolve_all

__all__ = [
    "BlockMatch",
    "StatDescriptionResolver",
    "collapse_candidates",
    "group_stats",
    "match_block",
    "parse_stat_descriptions",
    "render_candidates",
    "render_step",
    "render_template",
    "resolve_all",
    "resolve_block_values",
]
