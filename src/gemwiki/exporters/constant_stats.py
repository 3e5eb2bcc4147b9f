"""Level-independent gem data: base item, requirements, cast time, constant and quality stats."""

from __future__ import annotations

import logging
import re
from typing import Any, Sequence

from gemwiki.config import ExportSettings
from gemwiki.ir.dataset import Dataset, ref_id
from gemwiki.ir.skill import QualityStat, SkillData
from gemwiki.ir.stats import StatObservation
from gemwiki.statdesc.directives import format_number
from gemwiki.statdesc.resolver import StatDescriptionResolver

from .tables import (
    GRANTED_EFFECT_QUALITY_STATS,
    GRANTED_EFFECT_STAT_SETS,
    Row,
    SkillNotFoundError,
    find_base_item_type,
    find_granted_effect,
    find_skill_gem,
    rows_referencing,
    stat_observations,
    stat_set_id,
)

logger = logging.getLogger(__name__)

_STAT_NAME = re.compile(r"to (.*)")
_TRAILING_DIGITS = re.compile(r"\d+$")
_PERCENT_VALUE = re.compile(r"([+-]?\d*\.?\d+)%")


def combine_stat_descriptions(descriptions: Sequence[str]) -> str:
    """Merge the min/max quality descriptions of one stat into a range.

    ``["+0.1% to Critical Hit Chance", "+2% to Critical Hit Chance"]``
    -> ``"+(0.1–2)% to Critical Hit Chance"``

    The stat name is taken from the first description.
    """
    if not descriptions:
        return ""

    names = []
    for description in descriptions:
        match = _STAT_NAME.search(description)
        names.append(_TRAILING_DIGITS.sub("", match.group(1)).strip() if match else "")

    values = []
    for description in descriptions:
        match = _PERCENT_VALUE.search(description)
        values.append(float(match.group(1)) if match else 0.0)

    value_range = f"{format_number(min(values))}–{format_number(max(values))}"
    return f"+({value_range})% to {names[0]}"


def quality_observations(row: Row, quality_levels: Sequence[int]) -> list[StatObservation]:
    """Observations of a quality stat row, one per quality level.

    The row stores the per-quality value in per mille.
    """
    stats = row.get("Stats") or []
    per_mille = row.get("StatsValuesPermille") or []
    stat_id = ref_id(stats[0]) if stats else None
    if stat_id is None or not per_mille:
        logger.warning("Invalid quality stat row: %r", row.get("Stats"))
        return []
    return [
        StatObservation(id=stat_id, value=per_mille[0] * quality / 1000)
        for quality in quality_levels
    ]


def collect_quality_stats(
    dataset: Dataset,
    granted_effect_id: str | None,
    resolver: StatDescriptionResolver,
    settings: ExportSettings,
) -> list[QualityStat]:
    """Render every quality stat of a granted effect as a value range."""
    quality_stats: list[QualityStat] = []
    rows = rows_referencing(
        dataset, GRANTED_EFFECT_QUALITY_STATS, "GrantedEffect", granted_effect_id
    )
    for row in rows:
        observations = quality_observations(row, settings.quality_levels)
        if not observations:
            continue
        descriptions = resolver.resolve(observations, skip_already_resolved=True)
        if not descriptions:
            continue
        quality_stats.append(
            QualityStat(
                stat_id=observations[0].id,
                stat_text=combine_stat_descriptions(descriptions),
            )
        )
    return quality_stats


def _find_stat_set(dataset: Dataset, granted_effect: Row) -> Row | None:
    wanted = stat_set_id(granted_effect)
    for row in dataset.rows(GRANTED_EFFECT_STAT_SETS):
        if row.get("Id") == wanted:
            return row
    return None


def get_constant_stats(
    dataset: Dataset,
    skill_row: Row,
    resolver: StatDescriptionResolver,
    settings: ExportSettings,
) -> SkillData:
    """Export the level-independent part of an active skill gem.

    Raises
    ------
    SkillNotFoundError
        If no granted effect grants the skill.
    """
    skill_id = skill_row.get("Id") or ""
    skill_name = skill_row.get("DisplayedName") or ""
    fields: dict[str, Any] = {"skill_id": skill_id, "name": skill_name}

    base_item = find_base_item_type(dataset, skill_name)
    if base_item is None:
        logger.warning("No base item type named %r", skill_name)
    else:
        fields["metadata_id"] = base_item.get("Id")
        fields["class_id"] = ref_id(base_item.get("ItemClass"))
        fields["size_x"] = base_item.get("Width")
        fields["size_y"] = base_item.get("Height")

    gem = find_skill_gem(dataset, fields.get("metadata_id"))
    if gem is not None:
        fields["intelligence_percent"] = gem.get("IntelligenceRequirementPercent") or 0
        fields["strength_percent"] = gem.get("StrengthRequirementPercent") or 0
        fields["dexterity_percent"] = gem.get("DexterityRequirementPercent") or 0
        fields["gem_tier"] = gem.get("CraftingLevel")

    effect = find_granted_effect(dataset, skill_id)
    if effect is None:
        raise SkillNotFoundError(f"No granted effect for skill {skill_id!r}")
    fields["granted_effect_id"] = effect.get("Id")

    cast_time = effect.get("CastTime")
    if cast_time is None:
        logger.error("No cast time found for skill %s", skill_id)
    else:
        fields["cast_time"] = cast_time / 1000
    cost_types = effect.get("CostTypes") or []
    if cost_types:
        fields["static_cost_types"] = ref_id(cost_types[0])

    stat_set = _find_stat_set(dataset, effect)
    if stat_set is not None:
        constant_stats = stat_observations(
            stat_set.get("ConstantStats"), stat_set.get("ConstantStatsValues")
        )
        fields["constant_stats"] = constant_stats
        if constant_stats:
            fields["constant_stat_text"] = settings.separator.join(
                resolver.resolve(constant_stats, skip_already_resolved=True)
            )

    fields["quality_stats"] = collect_quality_stats(
        dataset, fields["granted_effect_id"], resolver, settings
    )
    return SkillData(**fields)
