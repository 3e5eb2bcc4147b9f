"""Per-level gem data: progression table, attribute requirements, stat text."""

from __future__ import annotations

import logging
import math
import re

from gemwiki.config import ExportSettings
from gemwiki.ir.dataset import Dataset, ref_id
from gemwiki.ir.skill import LevelProgression, SkillData
from gemwiki.ir.stats import StatObservation
from gemwiki.statdesc.resolver import StatDescriptionResolver

from .tables import (
    GRANTED_EFFECT_STAT_SETS_PER_LEVEL,
    GRANTED_EFFECTS_PER_LEVEL,
    Row,
    find_granted_effect,
    rows_referencing,
    stat_observations,
    stat_set_id,
)

logger = logging.getLogger(__name__)

_LINK_WITH_ALIAS = re.compile(r"\[([^\[\]|]*)\|([^\[\]]*)\]")
_LINK = re.compile(r"\[([^\[\]|]*)\]")


def clean_gem_description(text: str) -> str:
    """Strip link markup from game text.

    ``"Fires [Projectile|Projectiles]"`` -> ``"Fires Projectiles"``
    ``"Deals [Fire] Damage"`` -> ``"Deals Fire Damage"``
    """
    text = _LINK_WITH_ALIAS.sub(r"\2", text)
    return _LINK.sub(r"\1", text)


def level_attribute_requirement(level: int, multiplier: float) -> int:
    """Attribute points a gem needs at character *level*.

    *multiplier* is the gem's requirement percentage for the attribute.
    Requirements below 8 are not shown and count as 0.
    """
    if not multiplier:
        return 0
    raw = (5 + (level - 3) * 2.25) * (multiplier / 100) ** 0.9
    requirement = math.floor(raw + 0.5) + 4
    return requirement if requirement >= 8 else 0


def _level_stats(row: Row) -> tuple[list[StatObservation], list[StatObservation]]:
    float_values = row.get("BaseResolvedValues") or row.get("FloatStatsValues")
    float_stats = stat_observations(row.get("FloatStats"), float_values)
    additional_stats = stat_observations(
        row.get("AdditionalStats"), row.get("AdditionalStatsValues")
    )
    return float_stats, additional_stats


def _join(
    resolver: StatDescriptionResolver, stats: list[StatObservation], separator: str
) -> str:
    if not stats:
        return ""
    return separator.join(resolver.resolve(stats, skip_already_resolved=True))


def build_progression(
    skill: SkillData,
    level_rows: list[Row],
    cost_rows: list[Row],
    resolver: StatDescriptionResolver,
    settings: ExportSettings,
) -> list[LevelProgression]:
    """One :class:`LevelProgression` per stat-set level row, in table order.

    Cost rows are aligned to level rows by position.
    """
    progression: list[LevelProgression] = []
    for index, row in enumerate(level_rows):
        level = index + 1
        actor_level = math.floor(row.get("ActorLevel") or 0)
        float_stats, additional_stats = _level_stats(row)

        cost_amount = None
        if index < len(cost_rows):
            amounts = cost_rows[index].get("CostAmounts") or []
            cost_amount = amounts[0] if amounts else None

        progression.append(
            LevelProgression(
                level=level,
                enabled=level <= settings.max_gem_level,
                level_requirement=actor_level,
                cost_amount=cost_amount,
                attribute=skill.primary_attribute,
                attribute_requirement=level_attribute_requirement(
                    actor_level, skill.attribute_percent
                ),
                float_stats=float_stats,
                additional_stats=additional_stats,
                stat_text=_join(resolver, float_stats, settings.separator),
                additional_stat_text=_join(resolver, additional_stats, settings.separator),
            )
        )
    return progression


def get_dynamic_stats(
    dataset: Dataset,
    skill_row: Row,
    skill: SkillData,
    resolver: StatDescriptionResolver,
    settings: ExportSettings,
) -> SkillData:
    """Return *skill* extended with description, restrictions and progression."""
    skill_id = skill_row.get("Id") or ""
    restrictions = [
        ref_id(item_class) for item_class in skill_row.get("WeaponRestriction_ItemClasses") or []
    ]
    update: dict[str, object] = {
        "skill_id": skill_id[:1].upper() + skill_id[1:],
        "gem_description": clean_gem_description(skill_row.get("Description") or ""),
        "item_class_id_restriction": ", ".join(ref for ref in restrictions if ref),
    }

    effect = find_granted_effect(dataset, skill_id)
    if effect is None:
        logger.warning("No granted effect for skill %s, skipping progression", skill_id)
        return skill.model_copy(update=update)

    level_rows = rows_referencing(
        dataset, GRANTED_EFFECT_STAT_SETS_PER_LEVEL, "StatSet", stat_set_id(effect)
    )
    cost_rows = rows_referencing(
        dataset, GRANTED_EFFECTS_PER_LEVEL, "GrantedEffect", effect.get("Id")
    )
    if not level_rows:
        logger.warning("No per-level stat sets for skill %s", skill_id)
        return skill.model_copy(update=update)

    first = level_rows[0]
    crit_chance = first.get("AttackCritChance") or first.get("SpellCritChance")
    if crit_chance is not None:
        update["static_critical_strike_chance"] = crit_chance / 100

    float_stats, additional_stats = _level_stats(first)
    update["stat_text"] = _join(
        resolver, list(reversed([*additional_stats, *float_stats])), settings.separator
    )
    update["progression"] = build_progression(skill, level_rows, cost_rows, resolver, settings)
    return skill.model_copy(update=update)
