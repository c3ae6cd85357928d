from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

from .executor import ExecutionResult

PROMPT = "sqlite> "

INTERRUPT_HINT = "Use .exit or .quit to close the REPL"

HELP = """
SQLite REPL Commands:
  .help     - Show this help message
  .exit     - Exit the REPL
  .quit     - Exit the REPL
  .tables   - List all tables
  .schema   - Show all table schemas
  .schema table_name - Show schema for specific table

SQL Commands:
  SELECT * FROM table_name;
  INSERT INTO table_name (col1, col2) VALUES ('val1', 'val2');
  UPDATE table_name SET col1 = 'new_val' WHERE condition;
  DELETE FROM table_name WHERE condition;
  CREATE TABLE table_name (col1 TEXT, col2 INTEGER);
  DROP TABLE table_name;

Examples:
  SELECT * FROM locations LIMIT 5;
  SELECT COUNT(*) FROM locations;
  .tables
  .schema
  .schema locations
"""


def _meta_line(meta: dict[str, Any]) -> str:
    return f"Meta: {escape(json.dumps(meta, ensure_ascii=False, default=str))}"


class TerminalUI:
    def __init__(self, console: Console | None = None, err_console: Console | None = None):
        self.console = console or Console(soft_wrap=True, emoji=False, highlight=False)
        self.err_console = err_console or Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)

    def read_line(self, prompt: str = PROMPT) -> str:
        return self.console.input(prompt)

    def banner(self, database: str) -> None:
        self.console.print(
            f"\n[bold]SQLite REPL for {escape(database)}[/]\n"
            "[dim]Connected to D1 database via Wrangler[/]\n\n"
            "Type .help for available commands\n"
            "Type .exit or .quit to close\n"
        )

    def help(self) -> None:
        self.console.print(escape(HELP))

    def interrupted(self) -> None:
        self.console.print(f"\n{INTERRUPT_HINT}")

    def goodbye(self) -> None:
        self.console.print("\nGoodbye!")

    def executing(self, sql: str) -> None:
        self.console.print(f"\n[dim]Executing:[/] {escape(sql)}")

    def command_line(self, command_line: str) -> None:
        self.console.print(f"[dim]Using command:[/] {escape(command_line)}")

    def execution_failed(self, err: Exception) -> None:
        self.err_console.print(f"[red]Execution failed:[/] {escape(str(err))}")

    def render_results(self, batches: list[ExecutionResult]) -> None:
        for batch in batches:
            if batch.success:
                self.console.print("[green]Success[/]")
                if batch.results:
                    self.console.print_json(data=batch.results)
                else:
                    self.console.print("No results returned")
                if batch.meta:
                    self.console.print(_meta_line(batch.meta))
            else:
                self.err_console.print("[red]Query failed[/]")
                self.err_console.print(_meta_line(batch.meta))
