from __future__ import annotations

import logging
from typing import Callable

from .commands import Action, parse_line
from .executor import ExecutionError, Executor
from .session import Session
from .ui import PROMPT, TerminalUI

log = logging.getLogger(__name__)


class SQLiteREPL:
    """
    Prompt, read a line, run it, show the result, prompt again.

    Two states only: waiting on input, or blocked on the external tool.
    Whatever the tool does, control comes back to the prompt.
    """

    def __init__(
        self,
        session: Session,
        executor: Executor,
        ui: TerminalUI,
        *,
        read_line: Callable[[str], str] | None = None,
    ):
        self.session = session
        self.executor = executor
        self.ui = ui
        self.read_line = read_line or ui.read_line

    def execute_sql(self, sql: str) -> None:
        self.ui.executing(sql)
        try:
            batches = self.executor.execute(sql)
        except ExecutionError as err:
            log.debug("execution failed", exc_info=True)
            self.ui.execution_failed(err)
            return
        self.ui.render_results(batches)

    def handle_line(self, line: str) -> bool:
        """Returns False once the session should end."""
        command = parse_line(line)
        if command is None:
            return True

        if command.action is Action.EXIT:
            return False
        if command.action is Action.HELP:
            self.ui.help()
            return True

        self.execute_sql(command.sql)
        return True

    def run(self) -> None:
        self.ui.banner(self.session.database)
        while True:
            try:
                line = self.read_line(PROMPT)
                if not self.handle_line(line):
                    break
            except KeyboardInterrupt:
                self.ui.interrupted()
            except EOFError:
                break
        self.ui.goodbye()
