import logging

import typer
from rich.console import Console

from .executor import Executor
from .mylogger import setup_logging
from .repl import SQLiteREPL
from .session import Session, Settings
from .ui import TerminalUI

log = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _fail(message: str) -> None:
    Console(stderr=True, soft_wrap=True).print(f"[red]{message}[/]")
    raise typer.Exit(code=1)


@app.command(
    help="Interactive SQL shell for a Cloudflare D1 database, via wrangler.",
    epilog="Examples: d1-repl my-database --local | d1-repl my-database --remote",
)
def repl(
    database: str | None = typer.Argument(None, help="D1 database name.", show_default=False),
    local: bool = typer.Option(False, "--local", "-l", help="Use local database."),
    remote: bool = typer.Option(False, "--remote", "-r", help="Use remote database."),
):
    if not database:
        _fail("Database name is required")
    if local and remote:
        _fail("Cannot use both local and remote flags")

    settings = Settings.from_env()
    setup_logging(settings.log_config)

    session = Session(database=database, local=local, remote=remote)
    log.debug("session: %s", session)

    ui = TerminalUI()
    executor = Executor(session, settings, on_command=ui.command_line)
    SQLiteREPL(session, executor, ui).run()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
