"""Game data tables handed to the exporters.

Rows are kept as the raw dicts produced by the dat exporter: column name ->
value, where foreign keys are nested ``{"Id": ...}`` objects.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Dataset(BaseModel):
    """All rows needed for one export, keyed by table name."""

    game_version: str = ""
    """Game version the rows were read for (e.g. ``'4'`` or ``'3.25'``)."""

    tables: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)
    """Table name (e.g. ``'GrantedEffects'``) -> rows."""

    def rows(self, table_name: str) -> list[dict[str, Any]]:
        """Rows of *table_name*, or an empty list if the table was not loaded."""
        return self.tables.get(table_name) or []


def ref_id(value: Any) -> str | None:
    """Return the ``Id`` of a foreign-key object, or ``None``.

    ``{"Id": "Fireball"}`` -> ``"Fireball"``
    ``None`` -> ``None``
    """
    if isinstance(value, dict):
        ref = value.get("Id")
        return ref if isinstance(ref, str) and ref else None
    return None
