"""Shared stat description grammar used across the test suite."""

from __future__ import annotations

import pytest

SAMPLE_GRAMMAR = """
no_description fire_resistance_description
description
	1 base_skill_effect_duration
	2
		1000 "Skill Base Duration is {0} second" milliseconds_to_seconds_2dp_if_required
		# "Skill Base Duration is {0} seconds" milliseconds_to_seconds_2dp_if_required
description
	1 number_of_additional_projectiles
	1
		# "Fires {0} additional [Projectile|Projectiles]"
description
	2 spell_minimum_base_fire_damage spell_maximum_base_fire_damage
	1
		# # "Deals {0} to {1} [Fire] Damage"
description
	1 critical_strike_chance_+%
	1
		# "{0:+d}% to [Critical|Critical Hit] Chance"
description
	1 base_critical_strike_multiplier_+
	1
		# "{0}% to [Critical|Critical Hit] Damage Bonus" divide_by_one_hundred
description
	1 active_skill_base_radius
	1
		# "Explosion radius is {0}"
description
	1 life_regeneration_rate_per_minute
	1
		# "Regenerate {0} Life per second" per_minute_to_per_second
description
	1 base_added_cast_time
	1
		# "[AddedAttackCastTime|+1000 seconds] to Cast Time"
"""


@pytest.fixture()
def grammar() -> str:
    return SAMPLE_GRAMMAR
