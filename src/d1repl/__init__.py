"""Interactive SQL shell for Cloudflare D1, driven through wrangler."""

__version__ = "0.1.0"

from .executor import ExecutionError, ExecutionResult, Executor
from .repl import SQLiteREPL
from .session import Session, Settings

__all__ = ["ExecutionError", "ExecutionResult", "Executor", "SQLiteREPL", "Session", "Settings"]
