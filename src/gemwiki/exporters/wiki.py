"""SkillData -> wiki template parameter lines (``|key = value``)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from gemwiki.config import ExportSettings
from gemwiki.ir.skill import SkillData
from gemwiki.statdesc.directives import format_number

from .dynamic_stats import clean_gem_description

_TEMPLATE_DIR = Path(__file__).parent / "templates"


def wiki_value(value: Any) -> str:
    """Format a parameter value: ``None`` is blank, numbers drop a ``.0``."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


class WikiParameterRenderer:
    """Renders the parameter block of a skill gem from a SkillData."""

    def __init__(self, settings: ExportSettings | None = None):
        self.settings = settings or ExportSettings()
        self._jinja = Environment(
            loader=FileSystemLoader(str(_TEMPLATE_DIR)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._jinja.filters["wiki_value"] = wiki_value
        self._jinja.filters["unlink"] = clean_gem_description

    def render(self, skill: SkillData) -> str:
        template = self._jinja.get_template("skill.j2")
        return template.render(skill=skill, separator=self.settings.separator)


def render_skill_parameters(skill: SkillData, settings: ExportSettings | None = None) -> str:
    """Convenience wrapper around :class:`WikiParameterRenderer`."""
    return WikiParameterRenderer(settings).render(skill)
