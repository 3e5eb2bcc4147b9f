"""A small Fireball dataset covering every table the exporters read."""

from __future__ import annotations

import copy

import pytest

from gemwiki.config import ExportSettings
from gemwiki.ir.dataset import Dataset
from gemwiki.statdesc.resolver import StatDescriptionResolver

FIREBALL_METADATA = "Metadata/Items/Gems/SkillGemFireball"

_DAMAGE_STATS = [
    {"Id": "spell_minimum_base_fire_damage"},
    {"Id": "spell_maximum_base_fire_damage"},
]

FIREBALL_TABLES = {
    "ActiveSkills": [
        {
            "Id": "fireball",
            "DisplayedName": "Fireball",
            "Description": "Fires a [Projectile|Projectile] that explodes, dealing [Fire] damage.",
            "WeaponRestriction_ItemClasses": [{"Id": "Wand"}, {"Id": "Staff"}],
        },
    ],
    "BaseItemTypes": [
        {
            "Id": FIREBALL_METADATA,
            "Name": "Fireball",
            "ItemClass": {"Id": "Active Skill Gem"},
            "Width": 1,
            "Height": 1,
        },
    ],
    "SkillGems": [
        {
            "BaseItemType": {"Id": FIREBALL_METADATA},
            "IntelligenceRequirementPercent": 100,
            "StrengthRequirementPercent": 0,
            "DexterityRequirementPercent": 0,
            "CraftingLevel": 1,
        },
    ],
    "GrantedEffects": [
        {
            "Id": "FireballPlayer",
            "ActiveSkill": {"Id": "fireball"},
            "CastTime": 1250,
            "CostTypes": [{"Id": "Mana"}],
        },
    ],
    "GrantedEffectStatSets": [
        {
            "Id": "FireballPlayer",
            "ConstantStats": [
                {"Id": "base_skill_effect_duration"},
                {"Id": "number_of_additional_projectiles"},
            ],
            "ConstantStatsValues": [2000, 1],
        },
    ],
    "GrantedEffectQualityStats": [
        {
            "GrantedEffect": {"Id": "FireballPlayer"},
            "Stats": [{"Id": "critical_strike_chance_+%"}],
            "StatsValuesPermille": [100],
        },
    ],
    "GrantedEffectStatSetsPerLevel": [
        {
            "StatSet": {"Id": "FireballPlayer"},
            "ActorLevel": 1.0,
            "SpellCritChance": 700,
            "FloatStats": _DAMAGE_STATS,
            "BaseResolvedValues": [9, 14],
            "AdditionalStats": [{"Id": "active_skill_base_radius"}],
            "AdditionalStatsValues": [20],
        },
        {
            "StatSet": {"Id": "FireballPlayer"},
            "ActorLevel": 3.65,
            "SpellCritChance": 700,
            "FloatStats": _DAMAGE_STATS,
            "BaseResolvedValues": [12, 18],
            "AdditionalStats": [{"Id": "active_skill_base_radius"}],
            "AdditionalStatsValues": [21],
        },
    ],
    "GrantedEffectsPerLevel": [
        {"GrantedEffect": {"Id": "FireballPlayer"}, "CostAmounts": [10]},
        {"GrantedEffect": {"Id": "FireballPlayer"}, "CostAmounts": [12]},
    ],
}


@pytest.fixture()
def tables() -> dict:
    """A fresh copy of the Fireball tables, safe to mutate."""
    return copy.deepcopy(FIREBALL_TABLES)


@pytest.fixture()
def dataset(tables) -> Dataset:
    return Dataset(game_version="4", tables=tables)


@pytest.fixture()
def skill_row(dataset) -> dict:
    return dataset.rows("ActiveSkills")[0]


@pytest.fixture()
def resolver(grammar) -> StatDescriptionResolver:
    return StatDescriptionResolver(grammar)


@pytest.fixture()
def settings() -> ExportSettings:
    return ExportSettings()
