"""Value directives and literal phrase tables used when rendering templates.

A template may carry a directive keyword (``milliseconds_to_seconds_2dp_if_required``
...) telling the renderer to convert the raw value before substitution.  Only
one directive applies per template; :data:`DIRECTIVES` is ordered by
precedence, the first keyword found in the template wins.

The phrase tables rewrite fixed grammar fragments (bracketed link markup,
condition prefixes) into plain English.  New categories or phrases belong in
these tables, not in the renderer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable


def format_number(value: float) -> str:
    """Render a number the way the game data shows it.

    ``20.0`` -> ``'20'``, ``2.5`` -> ``'2.5'``, ``-3`` -> ``'-3'``
    """
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def format_signed(value: float) -> str:
    """Like :func:`format_number` but with an explicit ``+`` for non-negative values."""
    text = format_number(value)
    return f"+{text}" if value >= 0 else text


def round_half_up(value: float, places: int) -> float:
    """Round *value* to *places* decimals, ties away from zero.

    Works on the exact binary value, so ``0.625`` -> ``0.63`` but ``1.005``
    (stored as ``1.00499...``) -> ``1.0``.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _scaled(divisor: float, places: int) -> Callable[[float], float]:
    def transform(value: float) -> float:
        return round_half_up(value / divisor, places)

    return transform


@dataclass(frozen=True)
class Directive:
    """A template keyword that converts the raw value before substitution."""

    keyword: str
    transform: Callable[[float], float]
    signed: bool = False
    """Render with an explicit sign and fill ``{i:+d}`` with the converted value too."""

    def applies_to(self, template: str) -> bool:
        return self.keyword in template


DIRECTIVES: tuple[Directive, ...] = (
    Directive("divide_by_one_hundred", _scaled(100, 2), signed=True),
    Directive("divide_by_ten_1dp_if_required", _scaled(10, 1)),
    Directive("per_minute_to_per_second", _scaled(60, 1)),
    Directive("milliseconds_to_seconds_2dp_if_required", _scaled(1000, 2)),
)


def find_directive(template: str) -> Directive | None:
    """Highest-precedence directive present in *template*, if any."""
    for directive in DIRECTIVES:
        if directive.applies_to(template):
            return directive
    return None


# ---------------------------------------------------------------------------
# Added cast time: the grammar spells singular and plural out as two phrases
# ---------------------------------------------------------------------------

SINGULAR_MARKER_VALUE = 1000
"""Raw value (one second in milliseconds) that selects singular wording."""

CAST_TIME_SINGULAR = "[AddedAttackCastTime|+1000 second]"
CAST_TIME_PLURAL = "[AddedAttackCastTime|+1000 seconds]"


# ---------------------------------------------------------------------------
# Phrase tables, applied in this order after placeholder substitution
# ---------------------------------------------------------------------------

LITERAL_PHRASES: tuple[tuple[str, str], ...] = (
    ('#|-1 "0% reduced [Projectile] Speed" negate 1', "0% reduced Projectile Speed"),
    ('1|# "0% increased [Projectile] Speed"', "0% increased Projectile Speed"),
    ('2|# 0 # "Fires 6 [Projectile|Projectiles]"', "Fires 6 Projectiles"),
    ('2|# 1 # "Fires 6 Arrows"', "Fires 6 Arrows"),
)
"""Whole condition fragments that are rewritten verbatim."""

PLURAL_ALTERNATIVES: dict[str, tuple[str, str]] = {
    "[Projectile|Projectiles]": ("Projectile", "Projectiles"),
}
"""``[Singular|Plural]`` link -> (singular, plural), chosen by the first value."""

CATEGORY_NAMES: tuple[str, ...] = (
    "Chaos",
    "Lightning",
    "Total",
    "Projectile",
    "Physical",
    "Fire",
)

FIXED_PHRASES: dict[str, str] = {
    "[Critical|Critical Hit]": "Critical Hit",
    "[Chaos|Chaos]": "Chaos",
    **{f"[{name}]": name for name in CATEGORY_NAMES},
}
"""Link markup that always resolves to the same text."""

ESCAPE_ARTIFACTS: tuple[str, ...] = ("#", '"')
"""Characters left over from the grammar's condition and quoting syntax."""
