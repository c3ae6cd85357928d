from __future__ import annotations

import logging
from pathlib import Path

from .session import Session, Settings

log = logging.getLogger(__name__)

TOOL = "wrangler"

# Checked in this order inside each directory.
LOCKFILES: tuple[tuple[str, str], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lock", "bun"),
    ("package-lock.json", "npm"),
    ("deno.lock", "deno"),
)

FALLBACK = "npx"

LAUNCHERS: dict[str, list[str]] = {
    "pnpm": ["pnpm", TOOL],
    "yarn": ["yarn", TOOL],
    "bun": ["bun", TOOL],
    "npm": ["npx", TOOL],
    "deno": ["deno", "run", "-A", f"npm:{TOOL}"],
    FALLBACK: ["npx", TOOL],
}


def find_package_manager(start: str | Path | None = None) -> str:
    """
    Walk up from `start` (default: cwd) and name the package manager whose
    lockfile shows up first. The filesystem root itself is not probed.
    """
    current = Path(start or Path.cwd()).resolve()
    while current.parent != current:
        for filename, manager in LOCKFILES:
            if (current / filename).exists():
                log.debug("found %s in %s", filename, current)
                return manager
        current = current.parent
    return FALLBACK


def launcher_prefix(settings: Settings, cwd: str | Path | None = None) -> list[str]:
    if settings.in_package_manager:
        return [TOOL]
    return list(LAUNCHERS[find_package_manager(cwd)])


def build_command(
    session: Session,
    sql: str,
    settings: Settings,
    *,
    cwd: str | Path | None = None,
) -> list[str]:
    return [
        *launcher_prefix(settings, cwd),
        "d1",
        "execute",
        session.database,
        *session.flags,
        "--json",
        "--command",
        sql,
    ]
