"""Exported skill gem records -- the values that end up as wiki template parameters."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .stats import StatObservation


class QualityStat(BaseModel):
    """A stat granted by gem quality, with its rendered range text."""

    stat_id: str
    stat_text: str
    """Combined range text, e.g. ``'+(0.1–2)% to Critical Hit Chance'``."""


class LevelProgression(BaseModel):
    """Per-level row of a gem's progression table."""

    level: int
    """1-based position in the progression table."""

    enabled: bool
    """False for levels above the configured maximum gem level."""

    level_requirement: int
    """Character level required (``ActorLevel`` of the stat set row)."""

    cost_amount: int | None = None

    attribute: str = "intelligence"
    """Name of the attribute the requirement applies to."""

    attribute_requirement: int = 0

    float_stats: list[StatObservation] = Field(default_factory=list)
    additional_stats: list[StatObservation] = Field(default_factory=list)

    stat_text: str = ""
    """Rendered descriptions of the float stats at this level."""

    additional_stat_text: str = ""
    """Rendered descriptions of the additional stats at this level."""

    @property
    def stats(self) -> list[StatObservation]:
        """Float stats followed by additional stats, in parameter order."""
        return [*self.float_stats, *self.additional_stats]


class SkillData(BaseModel):
    """Everything exported for one active skill gem."""

    skill_id: str = ""
    name: str = ""

    # Base item / skill gem
    metadata_id: str | None = None
    class_id: str | None = None
    size_x: int | None = None
    size_y: int | None = None
    intelligence_percent: int = 0
    strength_percent: int = 0
    dexterity_percent: int = 0
    gem_tier: int | None = None

    # Granted effect
    granted_effect_id: str | None = None
    cast_time: float | None = None
    """Cast time in seconds."""
    static_cost_types: str | None = None
    static_critical_strike_chance: float | None = None

    gem_description: str = ""
    item_class_id_restriction: str = ""

    constant_stats: list[StatObservation] = Field(default_factory=list)
    constant_stat_text: str = ""
    quality_stats: list[QualityStat] = Field(default_factory=list)
    stat_text: str = ""
    """Rendered first-level stat text shown in the infobox."""

    progression: list[LevelProgression] = Field(default_factory=list)

    @property
    def primary_attribute(self) -> str:
        """Attribute with the largest requirement share (ties favour int > str > dex)."""
        shares = {
            "intelligence": self.intelligence_percent,
            "strength": self.strength_percent,
            "dexterity": self.dexterity_percent,
        }
        return max(shares, key=lambda name: shares[name])

    @property
    def attribute_percent(self) -> int:
        return max(self.intelligence_percent, self.strength_percent, self.dexterity_percent)
