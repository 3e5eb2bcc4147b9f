"""Stat records -- observations fed into the resolver and parsed description blocks."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

_COUNT_TOKEN = re.compile(r"^\d+$")


class StatObservation(BaseModel):
    """One numeric reading of a stat at one progression step.

    Several observations may share an ``id``; their order is the progression
    step (gem level or quality tier) they belong to.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    """Stat identifier (e.g. ``'base_skill_effect_duration'``)."""

    value: float
    """Raw numeric value as stored in the game data tables."""


class DescriptionBlock(BaseModel):
    """A parsed ``description`` block of a stat description file.

    Pairs one or more stat ids with the template lines that render them.
    """

    model_config = ConfigDict(frozen=True)

    id_line: str = ""
    """Raw id line, possibly prefixed with the count of ids (e.g. ``'2 a b'``)."""

    value_count: int | None = None
    """Number from the line following the id line.  Recorded, never used for alignment."""

    templates: tuple[str, ...] = ()
    """Template lines in file order.

    More than one template means singular/plural or conditional variants of
    the same stat set.
    """

    @property
    def stat_ids(self) -> list[str]:
        """Stat ids referenced by this block, in placeholder order.

        ``stat_ids[i]`` fills ``{i}`` in every template.  The leading count
        token of the id line is not an id and is dropped.
        """
        return [token for token in self.id_line.split() if not _COUNT_TOKEN.match(token)]

    def references(self, stat_id: str) -> bool:
        """True if *stat_id* is one of this block's ids (exact token match)."""
        return stat_id in self.stat_ids


GroupedStats = dict[str, list[float]]
"""Stat id -> per-step values, in arrival order."""
