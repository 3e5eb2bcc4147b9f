"""Row lookups shared by the constant and dynamic stat exporters."""

from __future__ import annotations

import logging
from typing import Any

from gemwiki.ir.dataset import Dataset, ref_id
from gemwiki.ir.stats import StatObservation

logger = logging.getLogger(__name__)

Row = dict[str, Any]

# Table names as exported by the dat reader
ACTIVE_SKILLS = "ActiveSkills"
BASE_ITEM_TYPES = "BaseItemTypes"
SKILL_GEMS = "SkillGems"
GRANTED_EFFECTS = "GrantedEffects"
GRANTED_EFFECTS_PER_LEVEL = "GrantedEffectsPerLevel"
GRANTED_EFFECT_STAT_SETS = "GrantedEffectStatSets"
GRANTED_EFFECT_STAT_SETS_PER_LEVEL = "GrantedEffectStatSetsPerLevel"
GRANTED_EFFECT_QUALITY_STATS = "GrantedEffectQualityStats"

REQUIRED_TABLES: tuple[str, ...] = (
    ACTIVE_SKILLS,
    BASE_ITEM_TYPES,
    SKILL_GEMS,
    GRANTED_EFFECTS,
    GRANTED_EFFECTS_PER_LEVEL,
    GRANTED_EFFECT_STAT_SETS,
    GRANTED_EFFECT_STAT_SETS_PER_LEVEL,
    GRANTED_EFFECT_QUALITY_STATS,
)


class SkillNotFoundError(LookupError):
    """Raised when a skill has no granted effect, so nothing can be exported."""


def find_active_skill(dataset: Dataset, skill_id: str) -> Row | None:
    """ActiveSkills row whose ``Id`` is *skill_id*."""
    for row in dataset.rows(ACTIVE_SKILLS):
        if row.get("Id") == skill_id:
            return row
    return None


def find_base_item_type(dataset: Dataset, skill_name: str) -> Row | None:
    """BaseItemTypes row named *skill_name* (case-insensitive)."""
    wanted = skill_name.lower()
    for row in dataset.rows(BASE_ITEM_TYPES):
        name = row.get("Name")
        if isinstance(name, str) and name.lower() == wanted:
            return row
    return None


def find_skill_gem(dataset: Dataset, base_item_id: str | None) -> Row | None:
    """SkillGems row attached to the base item *base_item_id*."""
    if base_item_id is None:
        return None
    for row in dataset.rows(SKILL_GEMS):
        if ref_id(row.get("BaseItemType")) == base_item_id:
            return row
    return None


def find_granted_effect(dataset: Dataset, skill_id: str) -> Row | None:
    """GrantedEffects row that grants the active skill *skill_id*."""
    for row in dataset.rows(GRANTED_EFFECTS):
        if ref_id(row.get("ActiveSkill")) == skill_id:
            return row
    return None


def stat_set_id(granted_effect: Row) -> str | None:
    """Id of the stat set used by *granted_effect*.

    Falls back to the effect's own id, which is how the two tables line up
    when the effect row has no explicit ``StatSet`` reference.
    """
    return ref_id(granted_effect.get("StatSet")) or granted_effect.get("Id")


def rows_referencing(
    dataset: Dataset, table_name: str, column: str, target_id: str | None
) -> list[Row]:
    """All rows of *table_name* whose foreign key *column* points at *target_id*."""
    if target_id is None:
        return []
    return [row for row in dataset.rows(table_name) if ref_id(row.get(column)) == target_id]


def stat_observations(
    stat_refs: list[Any] | None, values: list[Any] | None
) -> list[StatObservation]:
    """Pair stat references with their values.

    Entries without a stat id are skipped with a warning; a missing value
    counts as 0.
    """
    stat_refs = stat_refs or []
    values = values or []
    observations: list[StatObservation] = []
    for index, ref in enumerate(stat_refs):
        stat_id = ref_id(ref)
        if stat_id is None:
            logger.warning("Invalid stat id at index %d: %r", index, ref)
            continue
        value = values[index] if index < len(values) and values[index] is not None else 0
        observations.append(StatObservation(id=stat_id, value=value))
    return observations
