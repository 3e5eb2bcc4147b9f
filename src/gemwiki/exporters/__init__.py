"""Skill gem exporters: game data tables -> SkillData -> wiki parameters."""

from .constant_stats import combine_stat_descriptions, get_constant_stats
from .dynamic_stats import clean_gem_description, get_dynamic_stats, level_attribute_requirement
from .export import export_skill
from .tables import REQUIRED_TABLES, SkillNotFoundError, find_active_skill
from .wiki import WikiParameterRenderer, render_skill_parameters

__all__ = [
    "REQUIRED_TABLES",
    "SkillNotFoundError",
    "WikiParameterRenderer",
    "clean_gem_description",
    "combine_stat_descriptions",
    "export_skill",
    "find_active_skill",
    "get_constant_stats",
    "get_dynamic_stats",
    "level_attribute_requirement",
    "render_skill_parameters",
]
