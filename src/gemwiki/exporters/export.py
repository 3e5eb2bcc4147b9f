"""Export one active skill gem from game data tables.

Usage::

    from gemwiki.exporters import export_skill, render_skill_parameters

    skill = export_skill(dataset, skill_row, grammar_text)
    print(render_skill_parameters(skill))
"""

from __future__ import annotations

import logging

from gemwiki.config import ExportSettings
from gemwiki.ir.dataset import Dataset
from gemwiki.ir.skill import SkillData
from gemwiki.statdesc.resolver import StatDescriptionResolver

from .constant_stats import get_constant_stats
from .dynamic_stats import get_dynamic_stats
from .tables import Row

logger = logging.getLogger(__name__)


def export_skill(
    dataset: Dataset,
    skill_row: Row,
    grammar_text: str,
    settings: ExportSettings | None = None,
) -> SkillData:
    """Build the full :class:`SkillData` for the ActiveSkills row *skill_row*.

    *grammar_text* is the content of the stat description file the skill
    uses.  It is parsed once and shared by every description rendered for
    this skill.

    Raises
    ------
    SkillNotFoundError
        If no granted effect grants the skill.
    """
    settings = settings or ExportSettings()
    resolver = StatDescriptionResolver(grammar_text)
    logger.info(
        "Exporting skill %s (%d description blocks)",
        skill_row.get("Id"),
        len(resolver.blocks),
    )

    skill = get_constant_stats(dataset, skill_row, resolver, settings)
    return get_dynamic_stats(dataset, skill_row, skill, resolver, settings)
