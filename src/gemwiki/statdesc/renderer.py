"""Render description block templates for one progression step.

Rendering a step happens in two stages:

1. :func:`render_candidates` fills every template of the block with the
   aligned values of that step, applying at most one value directive per
   template, then rewrites the phrase tables and strips grammar artifacts.
2. :func:`collapse_candidates` picks the surviving candidate(s) when the
   block encodes singular and plural wording as separate templates.
"""

from __future__ import annotations

import re
from typing import Sequence

from gemwiki.ir.stats import DescriptionBlock

from .directives import (
    CAST_TIME_PLURAL,
    CAST_TIME_SINGULAR,
    DIRECTIVES,
    ESCAPE_ARTIFACTS,
    FIXED_PHRASES,
    LITERAL_PHRASES,
    PLURAL_ALTERNATIVES,
    SINGULAR_MARKER_VALUE,
    find_directive,
    format_number,
    format_signed,
)

_TRAILING_ONE = re.compile(r"1$")
_WHITESPACE_RUN = re.compile(r"\s+")
_SINGULAR_SECONDS = re.compile(r"is (\d+) second")
_PLURAL_SECONDS = re.compile(r"is (\d+) seconds")


def value_at(sequence: Sequence[float], step: int) -> float:
    """Value of *sequence* at *step*, or 0 if the sequence is too short."""
    if step < len(sequence):
        return sequence[step]
    return 0


def _substitute(template: str, values: Sequence[Sequence[float]], step: int) -> str:
    directive = find_directive(template)
    result = template

    for index, sequence in enumerate(values):
        value = value_at(sequence, step)
        plain = f"{{{index}}}"
        signed = f"{{{index}:+d}}"

        if directive is not None and directive.signed:
            text = format_signed(directive.transform(value))
            result = result.replace(signed, text).replace(plain, text)
        else:
            shown = directive.transform(value) if directive is not None else value
            result = result.replace(signed, format_signed(value))
            result = result.replace(plain, format_number(shown))

        result = _rewrite_cast_time(result, value)

    return result


def _rewrite_cast_time(text: str, value: float) -> str:
    seconds = format_number(value / 1000)
    if value == SINGULAR_MARKER_VALUE:
        text = text.replace(CAST_TIME_SINGULAR, f"+{seconds} second")
        # singular templates carry the marker value and a trailing condition digit
        text = text.replace(str(SINGULAR_MARKER_VALUE), "", 1)
        return _TRAILING_ONE.sub("", text)
    return text.replace(CAST_TIME_PLURAL, f"+{seconds} seconds")


def _rewrite_phrases(text: str, values: Sequence[Sequence[float]], step: int) -> str:
    for phrase, replacement in LITERAL_PHRASES:
        text = text.replace(phrase, replacement)

    primary = value_at(values[0], step) if values else 0
    for phrase, (singular, plural) in PLURAL_ALTERNATIVES.items():
        text = text.replace(phrase, singular if primary == 1 else plural)

    for phrase, replacement in FIXED_PHRASES.items():
        text = text.replace(phrase, replacement)
    return text


def _clean(text: str) -> str:
    for directive in DIRECTIVES:
        text = text.replace(directive.keyword, "")
    for artifact in ESCAPE_ARTIFACTS:
        text = text.replace(artifact, "")
    return _WHITESPACE_RUN.sub(" ", text).strip()


def render_template(template: str, values: Sequence[Sequence[float]], step: int) -> str:
    """Render a single template line for *step*.

    ``values[i]`` is the progression of the i-th block id and fills ``{i}``
    and ``{i:+d}``.
    """
    text = _substitute(template, values, step)
    text = _rewrite_phrases(text, values, step)
    return _clean(text)


def render_candidates(
    block: DescriptionBlock, values: Sequence[Sequence[float]], step: int
) -> list[str]:
    """One rendered candidate per template of *block*, in template order."""
    return [render_template(template, values, step) for template in block.templates]


def collapse_candidates(candidates: Sequence[str], driving_value: float) -> list[str]:
    """Reduce singular/plural template pairs to the one that fits.

    - A driving value of exactly 1000 keeps only the first (singular) candidate.
    - Two candidates reading ``is <N> second`` / ``is <N> seconds`` keep the
      singular one when its count is 1 and the plural count is not, otherwise
      the plural one.
    - Any other shape keeps all candidates.
    """
    survivors = list(candidates)
    if driving_value == SINGULAR_MARKER_VALUE:
        survivors = survivors[:1]

    if len(survivors) == 2:
        singular = _SINGULAR_SECONDS.search(survivors[0])
        plural = _PLURAL_SECONDS.search(survivors[1])
        if singular and plural:
            if int(singular.group(1)) == 1 and int(plural.group(1)) != 1:
                survivors = survivors[:1]
            else:
                survivors = survivors[1:]
    return survivors


def render_step(
    block: DescriptionBlock,
    values: Sequence[Sequence[float]],
    step: int,
    driving_value: float,
) -> list[str]:
    """Rendered and collapsed descriptions of *block* for one progression step."""
    return collapse_candidates(render_candidates(block, values, step), driving_value)
