from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


TABLES_SQL = (
    "SELECT name FROM sqlite_master "
    "WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name;"
)

ALL_SCHEMAS_SQL = (
    "SELECT name, sql FROM sqlite_master "
    "WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name;"
)

# Interpolated as-is. A name containing a quote yields broken SQL.
TABLE_SCHEMA_SQL = "SELECT sql FROM sqlite_master WHERE type='table' AND name='{table}';"


class Action(Enum):
    EXIT = "exit"
    HELP = "help"
    EXECUTE = "execute"


@dataclass(frozen=True)
class Command:
    action: Action
    sql: str | None = None


def schema_sql(table: str | None = None) -> str:
    if table:
        return TABLE_SCHEMA_SQL.format(table=table)
    return ALL_SCHEMAS_SQL


def parse_line(line: str) -> Command | None:
    """
    Map one input line to what the loop should do.
    Blank input gives None. Unknown dot-commands go through as SQL.
    """
    text = line.strip()
    if not text:
        return None

    lowered = text.lower()
    if lowered in (".exit", ".quit"):
        return Command(Action.EXIT)
    if lowered == ".help":
        return Command(Action.HELP)
    if lowered == ".tables":
        return Command(Action.EXECUTE, TABLES_SQL)

    parts = text.split()
    if parts[0].lower() == ".schema":
        table = parts[1] if len(parts) > 1 else None
        return Command(Action.EXECUTE, schema_sql(table))

    return Command(Action.EXECUTE, text)
