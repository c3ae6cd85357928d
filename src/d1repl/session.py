from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Session:
    """Target database and locality. Built once at startup, read-only afterwards."""

    database: str
    local: bool = False
    remote: bool = False

    def __post_init__(self) -> None:
        if not self.database:
            raise ValueError("Database name is required")
        if self.local and self.remote:
            raise ValueError("Cannot use both local and remote flags")

    @property
    def flags(self) -> list[str]:
        if self.local:
            return ["--local"]
        if self.remote:
            return ["--remote"]
        return []


@dataclass(frozen=True)
class Settings:
    debug: bool = False
    user_agent: str | None = None
    log_config: str | None = None

    @property
    def in_package_manager(self) -> bool:
        return bool(self.user_agent)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            debug=bool(env.get("DEBUG")),
            user_agent=env.get("npm_config_user_agent") or None,
            log_config=env.get("D1REPL_LOG_CONFIG") or None,
        )
