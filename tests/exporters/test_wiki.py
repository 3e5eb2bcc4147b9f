"""Tests for rendering SkillData as wiki template parameters."""

from __future__ import annotations

import pytest

from gemwiki.config import ExportSettings
from gemwiki.exporters.wiki import WikiParameterRenderer, render_skill_parameters, wiki_value
from gemwiki.ir.skill import LevelProgression, QualityStat, SkillData
from gemwiki.ir.stats import StatObservation


def _line(key: str, value: str) -> str:
    return f"{('|' + key).ljust(40)} = {value}"


def _make_skill(**overrides) -> SkillData:
    fields = dict(
        skill_id="Fireball",
        name="Fireball",
        intelligence_percent=100,
        cast_time=1.25,
        static_critical_strike_chance=7.0,
        stat_text="Deals 9 to 14 [Fire] Damage",
        progression=[
            LevelProgression(
                level=1,
                enabled=True,
                level_requirement=1,
                cost_amount=10,
                float_stats=[StatObservation(id="spell_minimum_base_fire_damage", value=9)],
                additional_stats=[StatObservation(id="active_skill_base_radius", value=20)],
                stat_text="Deals 9 to 14 Fire Damage",
                additional_stat_text="Explosion radius is 20",
            ),
        ],
    )
    fields.update(overrides)
    return SkillData(**fields)


class TestWikiValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, ""), (True, "True"), (False, "False"), (7.0, "7"), (1.25, "1.25"), (3, "3"), ("x", "x")],
    )
    def test_format(self, value, expected):
        assert wiki_value(value) == expected


class TestRenderSkillParameters:
    def test_first_line(self):
        lines = render_skill_parameters(_make_skill()).splitlines()
        assert lines[0] == _line("skill_id", "Fireball")
        assert lines[1] == _line("name", "Fireball")

    def test_static_parameters(self):
        lines = render_skill_parameters(_make_skill()).splitlines()
        assert _line("cast_time", "1.25") in lines
        assert _line("static_critical_strike_chance", "7") in lines
        assert _line("intelligence_percent", "100") in lines
        assert _line("metadata_id", "") in lines

    def test_stat_text_unlinked(self):
        lines = render_skill_parameters(_make_skill()).splitlines()
        assert _line("stat_text", "Deals 9 to 14 Fire Damage") in lines

    def test_static_stat_text_only_when_present(self):
        assert "|static_stat_text" not in render_skill_parameters(_make_skill())
        text = render_skill_parameters(_make_skill(constant_stat_text="Fires 1 additional Projectile"))
        assert _line("static_stat_text", "Fires 1 additional Projectile") in text.splitlines()

    def test_quality_parameters(self):
        skill = _make_skill(
            quality_stats=[
                QualityStat(stat_id="critical_strike_chance_+%", stat_text="+(0.1–2)% to Critical Hit Chance")
            ]
        )
        lines = render_skill_parameters(skill).splitlines()
        assert _line("quality_type1_stat_text", "+(0.1–2)% to Critical Hit Chance") in lines
        assert _line("quality_type1_stat1_id", "critical_strike_chance_+%") in lines

    def test_level_parameters(self):
        lines = render_skill_parameters(_make_skill()).splitlines()
        assert _line("level1", "True") in lines
        assert _line("level1_level_requirement", "1") in lines
        assert _line("level1_cost_amounts", "10") in lines
        assert _line("level1_intelligence_requirement", "0") in lines
        assert _line("level1_stat1_id", "spell_minimum_base_fire_damage") in lines
        assert _line("level1_stat1_value", "9") in lines
        assert _line("level1_stat2_id", "active_skill_base_radius") in lines
        assert _line("level1_stat2_value", "20") in lines

    def test_level_stat_text_joined(self):
        lines = render_skill_parameters(_make_skill()).splitlines()
        expected = "Deals 9 to 14 Fire Damage<br>Explosion radius is 20"
        assert _line("level1_stat_text", expected) in lines

    def test_level_stat_text_skips_empty_parts(self):
        row = _make_skill().progression[0].model_copy(update={"additional_stat_text": ""})
        lines = render_skill_parameters(_make_skill(progression=[row])).splitlines()
        assert _line("level1_stat_text", "Deals 9 to 14 Fire Damage") in lines

    def test_custom_separator(self):
        renderer = WikiParameterRenderer(ExportSettings(separator=" / "))
        lines = renderer.render(_make_skill()).splitlines()
        expected = "Deals 9 to 14 Fire Damage / Explosion radius is 20"
        assert _line("level1_stat_text", expected) in lines

    def test_no_blank_lines(self):
        text = render_skill_parameters(_make_skill())
        assert "" not in text.splitlines()
        assert text.endswith("\n")
