from __future__ import annotations

import json
import logging
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from .launcher import build_command
from .session import Session, Settings

log = logging.getLogger(__name__)


class ExecutionError(Exception):
    """The external tool could not be run, failed, or answered with garbage."""

    def __init__(self, message: str, *, output: str = ""):
        super().__init__(message)
        self.output = output


@dataclass
class ExecutionResult:
    """One result batch (one executed statement) from `wrangler d1 execute --json`."""

    success: bool
    results: list[dict[str, Any]] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ExecutionResult:
        success = raw.get("success")
        results = raw.get("results")
        meta = raw.get("meta")
        if results is None:
            results = []
        if meta is None:
            meta = {}

        if not isinstance(success, bool):
            raise ValueError(f"'success' must be a boolean, got {success!r}")
        if not isinstance(results, list) or not all(isinstance(row, dict) for row in results):
            raise ValueError("'results' must be an array of row objects")
        if not isinstance(meta, dict):
            raise ValueError(f"'meta' must be an object, got {type(meta).__name__}")

        return cls(success=success, results=list(results), meta=dict(meta))


def _one_line(text: str) -> str:
    return " ".join((text or "").split())


def parse_output(stdout: str) -> list[ExecutionResult]:
    try:
        payload = json.loads(stdout)
    except json.JSONDecodeError as err:
        raise ExecutionError(f"Invalid JSON output: {err}", output=stdout) from err

    if not isinstance(payload, list) or not all(isinstance(b, dict) for b in payload):
        raise ExecutionError("Unexpected output: expected a JSON array of result objects", output=stdout)

    try:
        return [ExecutionResult.from_dict(batch) for batch in payload]
    except ValueError as err:
        raise ExecutionError(f"Unexpected output: {err}", output=stdout) from err


class Executor:
    """
    Runs one SQL string through the external tool and returns its result batches.

    Blocking, one call at a time. stdout is captured, stderr and stdin stay
    attached to the terminal.
    """

    def __init__(
        self,
        session: Session,
        settings: Settings,
        *,
        run: Callable[..., subprocess.CompletedProcess] | None = None,
        on_command: Callable[[str], None] | None = None,
        cwd: str | Path | None = None,
    ):
        self.session = session
        self.settings = settings
        self._run = run or subprocess.run
        self._on_command = on_command
        self._cwd = cwd

    def command_for(self, sql: str) -> list[str]:
        return build_command(self.session, sql, self.settings, cwd=self._cwd)

    def execute(self, sql: str) -> list[ExecutionResult]:
        argv = self.command_for(sql)
        command_line = shlex.join(argv)
        log.debug("running: %s", command_line)

        if self.settings.debug and self._on_command is not None:
            self._on_command(command_line)

        try:
            proc = self._run(
                argv,
                stdin=None,
                stdout=subprocess.PIPE,
                stderr=None,
                text=True,
                encoding="utf-8",
            )
        except OSError as err:
            log.info("could not start %s: %s", argv[0], err)
            raise ExecutionError(f"Could not run {argv[0]}: {err}") from err
        except ValueError as err:
            # Undecodable stdout, or a NUL byte in the arguments.
            log.info("%s failed: %s", argv[0], err)
            raise ExecutionError(f"Could not run {argv[0]}: {err}") from err

        stdout = proc.stdout or ""
        if proc.returncode != 0:
            log.info("%s exited with status %s", argv[0], proc.returncode)
            detail = _one_line(stdout)
            message = f"Command failed with status {proc.returncode}"
            raise ExecutionError(f"{message}: {detail}" if detail else message, output=stdout)

        results = parse_output(stdout)
        log.debug("got %d result batch(es)", len(results))
        return results
