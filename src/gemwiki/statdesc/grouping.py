"""Group flat stat observations by id."""

from __future__ import annotations

import logging
from typing import Iterable

from gemwiki.ir.stats import GroupedStats, StatObservation

logger = logging.getLogger(__name__)


def group_stats(observations: Iterable[StatObservation]) -> GroupedStats:
    """Collect observation values per stat id, preserving arrival order.

    The position of a value in its id's list is the progression step it
    belongs to.  Values are not deduplicated.  Observations without an id are
    skipped.
    """
    grouped: GroupedStats = {}
    for index, observation in enumerate(observations):
        if not observation.id:
            logger.warning("Skipping stat observation %d with empty id", index)
            continue
        grouped.setdefault(observation.id, []).append(observation.value)
    return grouped
