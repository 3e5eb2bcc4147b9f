"""Dat schema lookups -- which table definitions apply to a game version.

The schema document (``schema.min.json`` from the dat-schema project) lists
every table with the major game version it is valid for.  Tables shared by
both games are marked with ``validFor == 3``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

SHARED_VALID_FOR = 3


class SchemaTable(BaseModel):
    """One table definition of the dat schema."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    valid_for: int = Field(default=SHARED_VALID_FOR, alias="validFor")
    columns: list[dict[str, Any]] = Field(default_factory=list)


class SchemaFile(BaseModel):
    """Top-level dat schema document."""

    version: int = 0
    created_at: int | None = Field(default=None, alias="createdAt")
    tables: list[SchemaTable] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


def find_table(schema: SchemaFile, table_name: str, version: str) -> SchemaTable | None:
    """Find *table_name* (case-insensitive) valid for the major *version*.

    ``version`` is the game version string; only its leading integer is used
    (``"4.1"`` -> 4).  Returns ``None`` for unknown tables or an unparseable
    version.
    """
    match = re.match(r"\s*(\d+)", version or "")
    if match is None:
        logger.error("Invalid version: %r", version)
        return None
    version_number = int(match.group(1))

    wanted = table_name.lower()
    for table in schema.tables:
        if table.name.lower() != wanted:
            continue
        if table.valid_for in (version_number, SHARED_VALID_FOR):
            return table
    return None


def missing_tables(schema: SchemaFile, table_names: Iterable[str], version: str) -> list[str]:
    """Names from *table_names* that have no definition for *version*."""
    return [name for name in table_names if find_table(schema, name, version) is None]
