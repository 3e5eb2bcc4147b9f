"""Tests for the stat description grammar parser."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gemwiki.ir.stats import DescriptionBlock
from gemwiki.statdesc.parser import parse_stat_descriptions


class TestParseBlocks:
    def test_single_block(self):
        blocks = parse_stat_descriptions("description\nmy_stat_id\n1\n+{0}% to Example\n")
        assert blocks == [
            DescriptionBlock(
                id_line="my_stat_id",
                value_count=1,
                templates=("+{0}% to Example",),
            )
        ]
        assert blocks[0].stat_ids == ["my_stat_id"]

    def test_count_prefix_is_not_an_id(self):
        blocks = parse_stat_descriptions("description\n2 stat_a stat_b\n1\n{0} and {1}")
        assert blocks[0].id_line == "2 stat_a stat_b"
        assert blocks[0].stat_ids == ["stat_a", "stat_b"]

    def test_multiple_blocks_in_order(self, grammar):
        blocks = parse_stat_descriptions(grammar)
        assert len(blocks) == 8
        assert blocks[0].stat_ids == ["base_skill_effect_duration"]
        assert blocks[2].stat_ids == [
            "spell_minimum_base_fire_damage",
            "spell_maximum_base_fire_damage",
        ]
        assert blocks[-1].stat_ids == ["base_added_cast_time"]

    def test_multiple_templates_kept_in_order(self, grammar):
        block = parse_stat_descriptions(grammar)[0]
        assert block.value_count == 2
        assert len(block.templates) == 2
        assert block.templates[0].startswith("1000 ")
        assert block.templates[1].startswith("# ")

    def test_trailing_block_is_flushed(self):
        blocks = parse_stat_descriptions("description\na\n1\nfirst\ndescription\nb\n1\nlast")
        assert [b.templates for b in blocks] == [("first",), ("last",)]

    def test_lines_are_trimmed_and_blank_lines_dropped(self):
        text = "\n\n  description  \n\t\tstat_a\n\n   1\n\t\t  # \"{0} things\"   \n\n"
        blocks = parse_stat_descriptions(text)
        assert blocks[0].id_line == "stat_a"
        assert blocks[0].templates == ('# "{0} things"',)

    def test_digit_template_after_value_count(self):
        blocks = parse_stat_descriptions("description\na\n1\nfoo\n2")
        assert blocks[0].value_count == 1
        assert blocks[0].templates == ("foo", "2")

    def test_block_without_value_count(self):
        blocks = parse_stat_descriptions("description\na\nsome template")
        assert blocks[0].value_count is None
        assert blocks[0].templates == ("some template",)


class TestMalformedGrammar:
    def test_empty_text(self):
        assert parse_stat_descriptions("") == []

    def test_lines_before_first_marker_ignored(self):
        blocks = parse_stat_descriptions("include \"other.txt\"\nstray line\ndescription\na\n1\nt")
        assert len(blocks) == 1
        assert blocks[0].stat_ids == ["a"]

    def test_empty_block(self):
        blocks = parse_stat_descriptions("description\ndescription\na\n1\nt")
        assert blocks[0] == DescriptionBlock()
        assert blocks[0].stat_ids == []
        assert blocks[0].templates == ()

    def test_block_without_templates(self):
        blocks = parse_stat_descriptions("description\nlonely_stat\n1")
        assert blocks[0].stat_ids == ["lonely_stat"]
        assert blocks[0].templates == ()


class TestIdempotentParse:
    def test_parsing_twice_is_identical(self, grammar):
        assert parse_stat_descriptions(grammar) == parse_stat_descriptions(grammar)

    def test_blocks_are_frozen(self, grammar):
        block = parse_stat_descriptions(grammar)[0]
        with pytest.raises(ValidationError):
            block.id_line = "other"
